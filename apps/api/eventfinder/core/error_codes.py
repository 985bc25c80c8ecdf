from enum import Enum


class ErrorCode(str, Enum):
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_FULL = "EVENT_FULL"
    EVENT_IN_PAST = "EVENT_IN_PAST"
    NO_PARTICIPANTS = "NO_PARTICIPANTS"
    INVALID_EVENT = "INVALID_EVENT"
    INVALID_UPDATE = "INVALID_UPDATE"
