"""Fixed-layout game server and chat message bodies of the Steam wire protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .steamlang import BinaryStruct

__all__ = [
    "MsgGSPerformHardwareSurvey",
    "MsgGSGetPlayStatsResponse",
    "MsgGSGetReputationResponse",
    "MsgGSDeny",
    "MsgGSApprove",
    "MsgGSKick",
    "MsgGSGetUserGroupStatus",
    "MsgGSGetUserGroupStatusResponse",
    "MsgClientJoinChat",
    "MsgClientChatEnter",
    "MsgClientChatMsg",
    "MsgClientChatMemberInfo",
    "MsgClientChatAction",
    "MsgClientChatActionResult",
    "MsgClientChatRoomInfo",
    "MsgClientSetIgnoreFriend",
    "MsgClientSetIgnoreFriendResponse",
    "MsgClientCreateChat",
    "MsgClientCreateChatResponse",
]


@dataclass
class MsgGSPerformHardwareSurvey(BinaryStruct):
    emsg_name: ClassVar[str] = "GSPerformHardwareSurvey"

    flags: int = 0

    _layout = (("flags", "I"),)


@dataclass
class MsgGSGetPlayStatsResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "GSGetPlayStatsResponse"

    result: int = 0
    rank: int = 0
    lifetime_connects: int = 0
    lifetime_minutes_played: int = 0

    _layout = (
        ("result", "i"),
        ("rank", "i"),
        ("lifetime_connects", "I"),
        ("lifetime_minutes_played", "I"),
    )


@dataclass
class MsgGSGetReputationResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "GSGetReputationResponse"

    result: int = 0
    reputation_score: int = 0
    banned: bool = False
    banned_ip: int = 0
    banned_port: int = 0
    banned_game_id: int = 0
    time_ban_expires: int = 0

    _layout = (
        ("result", "i"),
        ("reputation_score", "I"),
        ("banned", "?"),
        ("banned_ip", "I"),
        ("banned_port", "H"),
        ("banned_game_id", "Q"),
        ("time_ban_expires", "I"),
    )


@dataclass
class MsgGSDeny(BinaryStruct):
    emsg_name: ClassVar[str] = "GSDeny"

    steam_id: int = 0
    deny_reason: int = 0

    _layout = (("steam_id", "Q"), ("deny_reason", "i"))


@dataclass
class MsgGSApprove(BinaryStruct):
    emsg_name: ClassVar[str] = "GSApprove"

    steam_id: int = 0

    _layout = (("steam_id", "Q"),)


@dataclass
class MsgGSKick(BinaryStruct):
    emsg_name: ClassVar[str] = "GSKick"

    steam_id: int = 0
    deny_reason: int = 0
    wait_til_map_change: int = 0

    _layout = (
        ("steam_id", "Q"),
        ("deny_reason", "i"),
        ("wait_til_map_change", "i"),
    )


@dataclass
class MsgGSGetUserGroupStatus(BinaryStruct):
    emsg_name: ClassVar[str] = "GSGetUserGroupStatus"

    steam_id_user: int = 0
    steam_id_group: int = 0

    _layout = (("steam_id_user", "Q"), ("steam_id_group", "Q"))


@dataclass
class MsgGSGetUserGroupStatusResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "GSGetUserGroupStatusResponse"

    steam_id_user: int = 0
    steam_id_group: int = 0
    clan_relationship: int = 0
    clan_rank: int = 0

    _layout = (
        ("steam_id_user", "Q"),
        ("steam_id_group", "Q"),
        ("clan_relationship", "i"),
        ("clan_rank", "i"),
    )


@dataclass
class MsgClientJoinChat(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientJoinChat"

    steam_id_chat: int = 0
    is_voice_speaker: bool = False

    _layout = (("steam_id_chat", "Q"), ("is_voice_speaker", "?"))


@dataclass
class MsgClientChatEnter(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientChatEnter"

    steam_id_chat: int = 0
    steam_id_friend: int = 0
    chat_room_type: int = 0
    steam_id_owner: int = 0
    steam_id_clan: int = 0
    chat_flags: int = 0
    enter_response: int = 0
    num_members: int = 0

    _layout = (
        ("steam_id_chat", "Q"),
        ("steam_id_friend", "Q"),
        ("chat_room_type", "i"),
        ("steam_id_owner", "Q"),
        ("steam_id_clan", "Q"),
        ("chat_flags", "B"),
        ("enter_response", "i"),
        ("num_members", "i"),
    )


@dataclass
class MsgClientChatMsg(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientChatMsg"

    steam_id_chatter: int = 0
    steam_id_chat_room: int = 0
    chat_msg_type: int = 0

    _layout = (
        ("steam_id_chatter", "Q"),
        ("steam_id_chat_room", "Q"),
        ("chat_msg_type", "i"),
    )


@dataclass
class MsgClientChatMemberInfo(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientChatMemberInfo"

    steam_id_chat: int = 0
    info_type: int = 0

    _layout = (("steam_id_chat", "Q"), ("info_type", "i"))


@dataclass
class MsgClientChatAction(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientChatAction"

    steam_id_chat: int = 0
    steam_id_user_to_act_on: int = 0
    chat_action: int = 0

    _layout = (
        ("steam_id_chat", "Q"),
        ("steam_id_user_to_act_on", "Q"),
        ("chat_action", "i"),
    )


@dataclass
class MsgClientChatActionResult(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientChatActionResult"

    steam_id_chat: int = 0
    steam_id_user_acted_on: int = 0
    chat_action: int = 0
    action_result: int = 0

    _layout = (
        ("steam_id_chat", "Q"),
        ("steam_id_user_acted_on", "Q"),
        ("chat_action", "i"),
        ("action_result", "i"),
    )


@dataclass
class MsgClientChatRoomInfo(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientChatRoomInfo"

    steam_id_chat: int = 0
    info_type: int = 0

    _layout = (("steam_id_chat", "Q"), ("info_type", "i"))


@dataclass
class MsgClientSetIgnoreFriend(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientSetIgnoreFriend"

    my_steam_id: int = 0
    steam_id_friend: int = 0
    ignore: int = 0

    _layout = (
        ("my_steam_id", "Q"),
        ("steam_id_friend", "Q"),
        ("ignore", "B"),
    )


@dataclass
class MsgClientSetIgnoreFriendResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientSetIgnoreFriendResponse"

    friend_id: int = 0
    result: int = 0

    _layout = (("friend_id", "Q"), ("result", "i"))


@dataclass
class MsgClientCreateChat(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientCreateChat"

    chat_room_type: int = 0
    game_id: int = 0
    steam_id_clan: int = 0
    permission_officer: int = 0
    permission_member: int = 0
    permission_all: int = 0
    members_max: int = 0
    chat_flags: int = 0
    steam_id_friend_chat: int = 0
    steam_id_invited: int = 0

    _layout = (
        ("chat_room_type", "i"),
        ("game_id", "Q"),
        ("steam_id_clan", "Q"),
        ("permission_officer", "i"),
        ("permission_member", "i"),
        ("permission_all", "i"),
        ("members_max", "I"),
        ("chat_flags", "B"),
        ("steam_id_friend_chat", "Q"),
        ("steam_id_invited", "Q"),
    )


@dataclass
class MsgClientCreateChatResponse(BinaryStruct):
    emsg_name: ClassVar[str] = "ClientCreateChatResponse"

    result: int = 0
    steam_id_chat: int = 0
    chat_room_type: int = 0
    steam_id_friend_chat: int = 0

    _layout = (
        ("result", "i"),
        ("steam_id_chat", "Q"),
        ("chat_room_type", "i"),
        ("steam_id_friend_chat", "Q"),
    )