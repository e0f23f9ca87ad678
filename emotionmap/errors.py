"""Exception types raised by validation and storage."""


class EmotionMapError(Exception):
    """Base class for all service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(EmotionMapError):
    """Inbound payload rejected; maps to a client error."""


class InvalidInput(ValidationFailed):
    """A required field is missing or malformed."""


class InvalidEmail(ValidationFailed):
    """The contact email does not look like local@domain.tld."""


class MessageTooLong(ValidationFailed):
    """The contact message exceeds the length limit."""


class StorageError(EmotionMapError):
    """Any failure in the persistence layer.

    ``public_message`` is what callers may see; the chained cause carries
    the detail for the logs.
    """

    def __init__(self, message: str, public_message: str = "Server error"):
        super().__init__(message)
        self.public_message = public_message
