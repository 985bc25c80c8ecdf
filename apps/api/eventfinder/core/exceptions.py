from eventfinder.core.error_codes import ErrorCode


class ServiceError(Exception):
    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or code
        super().__init__(self.message)


class NotFoundError(ServiceError):
    pass


class ValidationError(ServiceError):
    pass


class BusinessRuleError(ServiceError):
    """An expected rule violation the client can act on."""


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: str) -> None:
        super().__init__(ErrorCode.EVENT_NOT_FOUND.value, "Event not found")
        self.event_id = event_id


class EventFullError(BusinessRuleError):
    def __init__(self, event_id: str) -> None:
        super().__init__(ErrorCode.EVENT_FULL.value, "Event is already full")
        self.event_id = event_id


class EventInPastError(BusinessRuleError):
    def __init__(self, event_id: str) -> None:
        super().__init__(ErrorCode.EVENT_IN_PAST.value, "Cannot join past events")
        self.event_id = event_id


class NoParticipantsError(BusinessRuleError):
    def __init__(self, event_id: str) -> None:
        super().__init__(ErrorCode.NO_PARTICIPANTS.value, "No participants to remove")
        self.event_id = event_id
