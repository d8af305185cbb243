import io
import struct

import pytest

from steamwire.client_messages import (
    CHANNEL_ENCRYPT_PROTOCOL_VERSION,
    LOGON_CURRENT_PROTOCOL,
    P2P_INTRODUCER_DATA_SIZE,
    MsgChannelEncryptRequest,
    MsgChannelEncryptResponse,
    MsgChannelEncryptResult,
    MsgClientAppUsageEvent,
    MsgClientGenericResponse,
    MsgClientGetFriendsWhoPlayGame,
    MsgClientGetFriendsWhoPlayGameResponse,
    MsgClientGetLegacyGameKey,
    MsgClientGetLegacyGameKeyResponse,
    MsgClientJustStrings,
    MsgClientLoggedOff,
    MsgClientLogon,
    MsgClientLogOnResponse,
    MsgClientMarketingMessageUpdate2,
    MsgClientOGSBeginSession,
    MsgClientOGSBeginSessionResponse,
    MsgClientOGSEndSession,
    MsgClientOGSEndSessionResponse,
    MsgClientOGSWriteRow,
    MsgClientP2PIntroducerMessage,
    MsgClientServerUnavailable,
    MsgClientUpdateGuestPassesList,
    MsgClientVACBanStatus,
)
from steamwire.keys import Universe
from steamwire.steamlang import BinaryStruct

SAMPLES = [
    MsgClientGenericResponse(result=2),
    MsgChannelEncryptRequest(protocol_version=1, universe=Universe.PUBLIC),
    MsgChannelEncryptResponse(protocol_version=1, key_size=128),
    MsgChannelEncryptResult(result=1),
    MsgClientVACBanStatus(num_bans=7),
    MsgClientAppUsageEvent(app_usage_event=3, game_id=2**63 + 5, offline=65535),
    MsgClientUpdateGuestPassesList(
        result=-1, count_guest_passes_to_give=4, count_guest_passes_to_redeem=-9
    ),
    MsgClientP2PIntroducerMessage(
        steam_id=76561197960287930,
        routing_type=2,
        data=bytes(range(256)) * 5 + bytes(P2P_INTRODUCER_DATA_SIZE - 1280),
        data_len=1280,
    ),
    MsgClientOGSBeginSession(
        account_type=1, account_id=76561197960287930, app_id=440, time_started=99
    ),
    MsgClientOGSBeginSessionResponse(
        result=1, collecting_any=True, collecting_details=False, session_id=12345
    ),
    MsgClientOGSEndSession(
        session_id=12345, time_ended=500, reason_code=-2, count_attributes=6
    ),
    MsgClientOGSEndSessionResponse(result=5),
    MsgClientOGSWriteRow(session_id=2**64 - 1, count_attributes=3),
    MsgClientGetFriendsWhoPlayGame(game_id=440),
    MsgClientGetFriendsWhoPlayGameResponse(result=1, game_id=570, count_friends=11),
    MsgClientLoggedOff(result=6, sec_min_reconnect_hint=10, sec_max_reconnect_hint=60),
    MsgClientLogOnResponse(
        result=1,
        out_of_game_heartbeat_rate_sec=9,
        in_game_heartbeat_rate_sec=9,
        client_supplied_steam_id=76561197960287930,
        ip_public=0x7F000001,
        server_real_time=1700000000,
    ),
    MsgClientServerUnavailable(jobid_sent=77, emsg_sent=5452, eserver_type_unavailable=4),
    MsgClientMarketingMessageUpdate2(marketing_message_update_time=123, count=2),
    MsgClientGetLegacyGameKey(app_id=10),
    MsgClientGetLegacyGameKeyResponse(app_id=10, result=1, length=20),
]


@pytest.mark.parametrize("msg", SAMPLES, ids=lambda m: type(m).__name__)
def test_round_trip(msg):
    data = BinaryStruct.to_bytes(msg)
    assert type(msg).from_bytes(data) == msg


@pytest.mark.parametrize("msg", SAMPLES, ids=lambda m: type(m).__name__)
def test_truncated_input_raises(msg):
    data = BinaryStruct.to_bytes(msg)
    with pytest.raises(EOFError):
        type(msg).from_bytes(data[:-1])


@pytest.mark.parametrize("msg", SAMPLES, ids=lambda m: type(m).__name__)
def test_deserialize_leaves_trailing_payload(msg):
    stream = io.BytesIO(BinaryStruct.to_bytes(msg) + b"payload")
    fresh = type(msg)()
    fresh.deserialize(stream)
    assert fresh == msg
    assert stream.read() == b"payload"


def test_empty_bodies_serialize_to_nothing():
    assert MsgClientLogon().to_bytes() == b""
    assert MsgClientJustStrings().to_bytes() == b""
    assert MsgClientLogon.from_bytes(b"") == MsgClientLogon()
    assert LOGON_CURRENT_PROTOCOL == 65580


def test_channel_encrypt_response_default_wire_bytes():
    expected = struct.pack("<II", 1, 128)
    assert MsgChannelEncryptResponse().to_bytes() == expected


def test_channel_encrypt_request_defaults_and_universe():
    msg = MsgChannelEncryptRequest()
    assert msg.protocol_version == CHANNEL_ENCRYPT_PROTOCOL_VERSION
    assert msg.universe == Universe.INVALID
    parsed = MsgChannelEncryptRequest.from_bytes(struct.pack("<Ii", 1, 1))
    assert parsed.universe is Universe.PUBLIC


def test_p2p_default_data_size_and_wire_length():
    msg = MsgClientP2PIntroducerMessage()
    assert len(msg.data) == P2P_INTRODUCER_DATA_SIZE
    assert msg.to_bytes()[12 : 12 + P2P_INTRODUCER_DATA_SIZE] == msg.data


def test_p2p_wrong_data_size_rejected():
    msg = MsgClientP2PIntroducerMessage(data=b"short")
    with pytest.raises(ValueError):
        msg.to_bytes()


def test_bool_fields_read_nonzero_as_true():
    raw = struct.pack("<iBBQ", 1, 5, 0, 9)
    msg = MsgClientOGSBeginSessionResponse.from_bytes(raw)
    assert msg.collecting_any is True
    assert msg.collecting_details is False
    assert msg.session_id == 9


def test_negative_result_round_trips_as_signed():
    data = MsgClientGenericResponse(result=-3).to_bytes()
    assert data == struct.pack("<i", -3)
    assert MsgClientGenericResponse.from_bytes(data).result == -3


def test_out_of_range_value_rejected():
    with pytest.raises(struct.error):
        MsgClientVACBanStatus(num_bans=-1).to_bytes()


def test_emsg_names():
    assert MsgChannelEncryptRequest().emsg_name == "ChannelEncryptRequest"
    assert MsgClientGenericResponse().emsg_name == "Invalid"
    assert MsgClientLogOnResponse().emsg_name == "ClientLogOnResponse"