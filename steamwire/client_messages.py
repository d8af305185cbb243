"""Fixed-layout client message bodies of the Steam wire protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .keys import Universe
from .steamlang import BinaryStruct

__all__ = [
    "CHANNEL_ENCRYPT_PROTOCOL_VERSION",
    "P2P_INTRODUCER_DATA_SIZE",
    "LOGON_OBFUSCATION_MASK",
    "LOGON_CURRENT_PROTOCOL",
    "LOGON_PROTOCOL_VER_MAJOR_MASK",
    "LOGON_PROTOCOL_VER_MINOR_MASK",
    "LOGON_PROTOCOL_MINOR_MINIMUMS",
    "MsgClientJustStrings",
    "MsgClientGenericResponse",
    "MsgChannelEncryptRequest",
    "MsgChannelEncryptResponse",
    "MsgChannelEncryptResult",
    "MsgClientLogon",
    "MsgClientVACBanStatus",
    "MsgClientAppUsageEvent",
    "MsgClientUpdateGuestPassesList",
    "MsgClientP2PIntroducerMessage",
    "MsgClientOGSBeginSession",
    "MsgClientOGSBeginSessionResponse",
    "MsgClientOGSEndSession",
    "MsgClientOGSEndSessionResponse",
    "MsgClientOGSWriteRow",
    "MsgClientGetFriendsWhoPlayGame",
    "MsgClientGetFriendsWhoPlayGameResponse",
    "MsgClientLoggedOff",
    "MsgClientLogOnResponse",
    "MsgClientServerUnavailable",
    "MsgClientMarketingMessageUpdate2",
    "MsgClientGetLegacyGameKey",
    "MsgClientGetLegacyGameKeyResponse",
]

CHANNEL_ENCRYPT_PROTOCOL_VERSION = 1
P2P_INTRODUCER_DATA_SIZE = 1450

LOGON_OBFUSCATION_MASK = 0xBAADF00D
LOGON_CURRENT_PROTOCOL = 65580
LOGON_PROTOCOL_VER_MAJOR_MASK = 0xFFFF0000
LOGON_PROTOCOL_VER_MINOR_MASK = 0xFFFF

# Minimum minor protocol versions for the features of a logon.
LOGON_PROTOCOL_MINOR_MINIMUMS: dict[str, int] = {
    "GameServers": 4,
    "SupportingEMsgMulti": 12,
    "SupportingEMsgClientEncryptPct": 14,
    "ExtendedMsgHdr": 17,
    "CellId": 18,
    "SessionIDLast": 19,
    "ServerAvailablityMsgs": 24,
    "Clients": 25,
    "OSType": 26,
    "CegApplyPESig": 27,
    "MarketingMessages2": 27,
    "AnyProtoBufMessages": 28,
    "ProtoBufLoggedOffMessage": 28,
    "ProtoBufMultiMessages": 28,
    "SendingProtocolToUFS": 30,
    "MachineAuth": 33,
    "SessionIDLastAnon": 36,
    "EnhancedAppList": 40,
    "SteamGuardNotificationUI": 41,
    "ProtoBufServiceModuleCalls": 42,
    "GzipMultiMessages": 43,
    "NewVoiceCallAuthorize": 44,
    "ClientInstanceIDs": 44,
}


@dataclass
class MsgClientJustStrings(BinaryStruct):
    emsg_name: ClassVar[str] = "Invalid"


@dataclass
class MsgClientGenericResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "Invalid"

    result: int = 0

    _layout = (("result", "i"),)


@dataclass
class MsgChannelEncryptRequest(BinaryStruct):
    emsg_name: ClassVar[str] = "ChannelEncryptRequest"

    protocol_version: int = CHANNEL_ENCRYPT_PROTOCOL_VERSION
    universe: int = Universe.INVALID

    _layout = (("protocol_version", "I"), ("universe", "i"))

    def deserialize(self, r) -> None:
        super().deserialize(r)
        try:
            self.universe = Universe(self.universe)
        except ValueError:
            pass


@dataclass
class MsgChannelEncryptResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ChannelEncryptResponse"

    protocol_version: int = CHANNEL_ENCRYPT_PROTOCOL_VERSION
    key_size: int = 128

    _layout = (("protocol_version", "I"), ("key_size", "I"))


@dataclass
class MsgChannelEncryptResult(BinaryStruct):
    emsg_name: ClassVar[str] = "ChannelEncryptResult"

    result: int = 0

    _layout = (("result", "i"),)


@dataclass
class MsgClientLogon(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientLogon"


@dataclass
class MsgClientVACBanStatus(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientVACBanStatus"

    num_bans: int = 0

    _layout = (("num_bans", "I"),)


@dataclass
class MsgClientAppUsageEvent(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientAppUsageEvent"

    app_usage_event: int = 0
    game_id: int = 0
    offline: int = 0

    _layout = (("app_usage_event", "i"), ("game_id", "Q"), ("offline", "H"))


@dataclass
class MsgClientUpdateGuestPassesList(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientUpdateGuestPassesList"

    result: int = 0
    count_guest_passes_to_give: int = 0
    count_guest_passes_to_redeem: int = 0

    _layout = (
        ("result", "i"),
        ("count_guest_passes_to_give", "i"),
        ("count_guest_passes_to_redeem", "i"),
    )


@dataclass
class MsgClientP2PIntroducerMessage(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientP2PIntroducerMessage"

    steam_id: int = 0
    routing_type: int = 0
    data: bytes = field(default_factory=lambda: bytes(P2P_INTRODUCER_DATA_SIZE))
    data_len: int = 0

    _layout = (
        ("steam_id", "Q"),
        ("routing_type", "i"),
        ("data", f"{P2P_INTRODUCER_DATA_SIZE}s"),
        ("data_len", "I"),
    )

    def serialize(self, w) -> None:
        if len(self.data) != P2P_INTRODUCER_DATA_SIZE:
            raise ValueError(
                f"data must be exactly {P2P_INTRODUCER_DATA_SIZE} bytes, "
                f"got {len(self.data)}"
            )
        super().serialize(w)


@dataclass
class MsgClientOGSBeginSession(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientOGSBeginSession"

    account_type: int = 0
    account_id: int = 0
    app_id: int = 0
    time_started: int = 0

    _layout = (
        ("account_type", "B"),
        ("account_id", "Q"),
        ("app_id", "I"),
        ("time_started", "I"),
    )


@dataclass
class MsgClientOGSBeginSessionResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientOGSBeginSessionResponse"

    result: int = 0
    collecting_any: bool = False
    collecting_details: bool = False
    session_id: int = 0

    _layout = (
        ("result", "i"),
        ("collecting_any", "?"),
        ("collecting_details", "?"),
        ("session_id", "Q"),
    )


@dataclass
class MsgClientOGSEndSession(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientOGSEndSession"

    session_id: int = 0
    time_ended: int = 0
    reason_code: int = 0
    count_attributes: int = 0

    _layout = (
        ("session_id", "Q"),
        ("time_ended", "I"),
        ("reason_code", "i"),
        ("count_attributes", "i"),
    )


@dataclass
class MsgClientOGSEndSessionResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientOGSEndSessionResponse"

    result: int = 0

    _layout = (("result", "i"),)


@dataclass
class MsgClientOGSWriteRow(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientOGSWriteRow"

    session_id: int = 0
    count_attributes: int = 0

    _layout = (("session_id", "Q"), ("count_attributes", "i"))


@dataclass
class MsgClientGetFriendsWhoPlayGame(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientGetFriendsWhoPlayGame"

    game_id: int = 0

    _layout = (("game_id", "Q"),)


@dataclass
class MsgClientGetFriendsWhoPlayGameResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientGetFriendsWhoPlayGameResponse"

    result: int = 0
    game_id: int = 0
    count_friends: int = 0

    _layout = (("result", "i"), ("game_id", "Q"), ("count_friends", "I"))


@dataclass
class MsgClientLoggedOff(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientLoggedOff"

    result: int = 0
    sec_min_reconnect_hint: int = 0
    sec_max_reconnect_hint: int = 0

    _layout = (
        ("result", "i"),
        ("sec_min_reconnect_hint", "i"),
        ("sec_max_reconnect_hint", "i"),
    )


@dataclass
class MsgClientLogOnResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientLogOnResponse"

    result: int = 0
    out_of_game_heartbeat_rate_sec: int = 0
    in_game_heartbeat_rate_sec: int = 0
    client_supplied_steam_id: int = 0
    ip_public: int = 0
    server_real_time: int = 0

    _layout = (
        ("result", "i"),
        ("out_of_game_heartbeat_rate_sec", "i"),
        ("in_game_heartbeat_rate_sec", "i"),
        ("client_supplied_steam_id", "Q"),
        ("ip_public", "I"),
        ("server_real_time", "I"),
    )


@dataclass
class MsgClientServerUnavailable(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientServerUnavailable"

    jobid_sent: int = 0
    emsg_sent: int = 0
    eserver_type_unavailable: int = 0

    _layout = (
        ("jobid_sent", "Q"),
        ("emsg_sent", "I"),
        ("eserver_type_unavailable", "i"),
    )


@dataclass
class MsgClientMarketingMessageUpdate2(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientMarketingMessageUpdate2"

    marketing_message_update_time: int = 0
    count: int = 0

    _layout = (("marketing_message_update_time", "I"), ("count", "I"))


@dataclass
class MsgClientGetLegacyGameKey(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientGetLegacyGameKey"

    app_id: int = 0

    _layout = (("app_id", "I"),)


@dataclass
class MsgClientGetLegacyGameKeyResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientGetLegacyGameKeyResponse"

    app_id: int = 0
    result: int = 0
    length: int = 0

    _layout = (("app_id", "I"), ("result", "i"), ("length", "I"))