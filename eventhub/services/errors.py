class EventHubError(Exception):
    pass


class ConfigurationError(EventHubError):
    pass


class DatabaseConnectionError(EventHubError):
    pass


class FieldValidationError(EventHubError):
    """A write was rejected because one field failed validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class EventValidationError(FieldValidationError):
    pass


class BookingValidationError(FieldValidationError):
    pass


class DuplicateSlugError(EventHubError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"An event with slug '{slug}' already exists.")
        self.slug = slug


class EventNotFoundError(EventHubError):
    def __init__(self, slug: str) -> None:
        super().__init__("Event not found.")
        self.slug = slug


class ReferencedEventMissingError(EventHubError):
    def __init__(self, event_id: int) -> None:
        super().__init__("Referenced event does not exist.")
        self.event_id = event_id
