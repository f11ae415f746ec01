"""Custom exception classes."""


class RegistrantNotFoundError(Exception):
    """Raised when a registrant ID doesn't exist."""
    pass


class DuplicateEmailError(Exception):
    """Raised when an email address is already registered."""
    pass


class StorageError(Exception):
    """Raised when the registrant store cannot be read or written."""
    pass


class FunctionInvocationError(Exception):
    """Raised when a backend function answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class MailDeliveryError(Exception):
    """Raised when the registration email cannot be delivered."""
    pass
