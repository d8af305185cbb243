"""Built-in RSA public keys of the Steam universes."""

from __future__ import annotations

from enum import IntEnum

from cryptography.hazmat.primitives.asymmetric import rsa

from .cryptoutil import parse_asn1_rsa_public_key

__all__ = ["Universe", "get_public_key"]


class Universe(IntEnum):
    INVALID = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4


_PUBLIC_KEYS: dict[Universe, bytes] = {
    Universe.PUBLIC: bytes.fromhex(
        "30819D300D06092A864886F70D010101"
        "050003818B0030818702818100DFEC1A"
        "D62C10662C17353A14B07C59117F9DD3"
        "D82B7AE3E015CD191E46E87B8774A218"
        "4631A9031479828EE945A24912A92368"
        "7389CF69A1B16146BDC1BEBFD6011BD8"
        "81D4DC90FBFE4F527366CB9570D7C58E"
        "BA1C7A3375A1623446BB60B78068FA13"
        "A77A8A374B9EC6F45D5F3A99F99EC43A"
        "E963A2BB881928E0E714C04289020111"
    ),
    Universe.BETA: bytes.fromhex(
        "30819D300D06092A864886F70D010101"
        "050003818B0030818702818100AED14B"
        "C0A3368BA0390B43DCED6AC8F2A3E47E"
        "098C552EE7E93CBBE55E0F1874548FF3"
        "BD56695B1309AFC8BEB3A14869E98349"
        "658DD293212FB91EFA743B552279BF85"
        "18CB6D52444E0592896AA899ED44AEE2"
        "6646420CFB6E4C30C66C5C16FFBA9CB9"
        "783F174BCBC9015D3E3770EC675A3348"
    ),
    Universe.INTERNAL: bytes.fromhex(
        "30819D300D06092A864886F70D010101"
        "050003818B0030818702818100A8FE01"
        "3BB6D7214B53236FA1AB4EF10730A7C6"
        "7E6A2CC25D3AB840CA594D162D74EB0E"
        "724629F9DE9BCE4B8CD0CAF4089446A5"
        "11AF3ACBB84EDEC6D8850A7DAA960AEA"
        "7B51D622625C1E58D7461E09AE43A7C4"
        "3469A2A5E8447618E23DB7C5A896FDE5"
        "B44BF84012A6174EC4C1600EB0C2B840"
    ),
}


def get_public_key(universe: int) -> rsa.RSAPublicKey | None:
    """Return the RSA public key of ``universe``, or None if it has none.

    Raises ValueError if the stored key data cannot be parsed.
    """
    der = _PUBLIC_KEYS.get(universe)
    if der is None:
        return None
    return parse_asn1_rsa_public_key(der)