# steamwire

Building blocks for clients of the Steam network: the fixed-layout binary
message headers and bodies, the channel encryption, a framed TCP
connection, and helpers for reading Steam Community inventories over HTTP.

## Installation

```
pip install steamwire
```

To run the tests as well:

```
pip install "steamwire[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `steamwire.rwu` | `read_bool`, `read_uint8` … `read_int64`, `read_string`, `read_bytes`, `write_bool`: little-endian reads from and writes to binary streams; short reads raise `EOFError` |
| `steamwire.cryptoutil` | `symmetric_encrypt` / `symmetric_decrypt` (AES/CBC/PKCS7 with the IV prefixed and encrypted with AES/ECB), `pad_pkcs7_with_iv`, `unpad_pkcs7`, `parse_asn1_rsa_public_key`, `rsa_encrypt` (RSA-OAEP with SHA-1) |
| `steamwire.keys` | `Universe` and `get_public_key`, which returns the built-in RSA public key of the public, beta or internal universe, or `None` for any other |
| `steamwire.jsont` | `parse_uint_bool` for booleans sent as unsigned numbers |
| `steamwire.netutil` | `PortAddr` (with `parse`, `to_tcp_addr`, `to_udp_addr`), `parse_port_addr`, `new_post_form` (a prepared, unsent form POST), `to_url_values` |
| `steamwire.community` | `set_cookies`, which stores the community login cookies in a `requests.Session` |
| `steamwire.steamlang` | `BinaryStruct` (with `serialize`, `deserialize`, `to_bytes`, `from_bytes`), `new_emsg`, `is_proto`, `PROTO_MASK`, `EMSG_MASK` |
| `steamwire.headers` | `MsgHdr`, `ExtendedClientMsgHdr`, `MsgHdrProtoBuf`, `MsgGCHdrProtoBuf`, `MsgGCHdr`, `UdpHeader`, `ChallengeData`, `ConnectData`, `Accept`, `Datagram`, `Disconnect` |
| `steamwire.client_messages` | Client message bodies such as `MsgChannelEncryptRequest`, `MsgChannelEncryptResponse`, `MsgChannelEncryptResult`, `MsgClientLogOnResponse`, `MsgClientLoggedOff` |
| `steamwire.server_messages` | Game server and chat message bodies such as `MsgGSKick`, `MsgGSGetReputationResponse`, `MsgClientChatEnter`, `MsgClientCreateChat` |
| `steamwire.protocol` | `JobId` (prints as `(none)` for the no-job value), `valid_avatar`, `DEFAULT_AVATAR` |
| `steamwire.connection` | `TcpConnection`: frames prefixed with a length and the `VT01` magic, optionally encrypted with a 32-byte session key |
| `steamwire.inventory` | `Inventory`, `Item`, `Currency`, `Description`, `DescriptionLine`, `Action`, `AppInfo`, `Tag`, `GenericInventory` |
| `steamwire.inventory_apps` | `InventoryApps`, `InventoryApp`, `Context`, `parse_inventory_apps`, `get_inventory_apps` |
| `steamwire.inventory_fetch` | `PartialInventory`, `do_inventory_request`, `get_partial_own_inventory`, `get_own_inventory`, `get_full_inventory`, `merge`, `InventoryRequestError` |

Every message class is a dataclass whose fields are written in order,
little-endian. Each message body carries its message type name in the
class attribute `emsg_name`.

## Examples

Channel encryption with a 32-byte session key:

```python
import os
from steamwire.cryptoutil import symmetric_encrypt, symmetric_decrypt

key = os.urandom(32)
ciphertext = symmetric_encrypt(key, b"hello")
assert symmetric_decrypt(key, ciphertext) == b"hello"
```

Encrypting a session key for the public universe:

```python
import os
from steamwire.cryptoutil import rsa_encrypt
from steamwire.keys import Universe, get_public_key

encrypted = rsa_encrypt(get_public_key(Universe.PUBLIC), os.urandom(32))
```

Round-tripping a header and a message body:

```python
from steamwire.headers import MsgHdr
from steamwire.client_messages import MsgChannelEncryptResult

header = MsgHdr()
assert MsgHdr.from_bytes(header.to_bytes()) == header

body = MsgChannelEncryptResult(result=1)
assert MsgChannelEncryptResult.from_bytes(body.to_bytes()).result == 1
```

Parsing a server address:

```python
from steamwire.netutil import parse_port_addr

addr = parse_port_addr("192.0.2.10:27017")
print(addr)                # 192.0.2.10:27017
print(addr.to_tcp_addr())  # ('192.0.2.10', 27017)
```

`parse_port_addr` returns `None` for anything that is not `ip:port`.

Sending and receiving frames:

```python
from steamwire.connection import TcpConnection

with TcpConnection.dial("192.0.2.10", 27017) as conn:
    conn.write(b"...")
    payload = conn.read()   # raw message bytes of one frame
```

`read` raises `ValueError` on a wrong magic value and `EOFError` when the
peer closes the stream. After `set_encryption_key(key)` every frame is
encrypted and decrypted with `symmetric_encrypt` / `symmetric_decrypt`.

Reading your own inventory through a logged-in session:

```python
import requests
from steamwire.community import set_cookies
from steamwire.inventory_fetch import get_own_inventory

session = requests.Session()
set_cookies(session, "placeholder", "placeholder", "placeholder")
inventory = get_own_inventory(session, context_id=2, app_id=440)
for asset_id, item in inventory.items.items():
    if item is not None:
        print(asset_id, item.class_id, item.amount)
```

`get_own_inventory` follows `more_start` page by page and merges the pages;
a page reporting failure raises `InventoryRequestError`. Lookups such as
`Inventory.get_item`, `Inventory.get_description`, `GenericInventory.get`,
`InventoryApps.get` and `InventoryApp.get_context` raise `KeyError` when
nothing matches.

## What this package does not do

- It does not log on to Steam or run a client: there is no event loop, no
  heartbeat, no handshake driver and no handling of incoming packets by
  message type. `TcpConnection.read` hands back raw bytes, and deciding
  which header and body to read from them is left to the caller.
- It has no protobuf message definitions. `MsgHdrProtoBuf` and
  `MsgGCHdrProtoBuf` keep the encoded protobuf header as plain `bytes` in
  their `proto` field.
- It has no Game Coordinator, friends, trading or notification handling,
  and no list of connection manager servers.
- It has no command-line program.