class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AlreadyRegisteredError(DomainError):
    """Raised when a student id is registered twice."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidCredentialError(AuthenticationError):
    """Raised when an existing instructor supplies the wrong password."""


class NotFoundError(DomainError):
    """Raised when a lookup by key finds nothing."""


class StudentNotRegisteredError(NotFoundError):
    pass


class SessionNotFoundError(NotFoundError):
    pass


class InstructorNotFoundError(NotFoundError):
    pass


class SessionExpiredError(DomainError):
    """Raised when a session is used after its expiry instant."""


class AlreadyMarkedError(DomainError):
    """Raised when a student marks attendance twice for one session."""


class StorageError(Exception):
    """Base exception for the record store."""


class DuplicateKeyError(StorageError):
    """Raised by insert-if-absent when a uniqueness constraint would be violated."""

    def __init__(self, collection: str, key: str):
        super().__init__(f"duplicate {key} in {collection}")
        self.collection = collection
        self.key = key


class StorageUnavailableError(StorageError):
    """Raised when the backing store cannot be reached."""


class RecordRejectedError(StorageError):
    """Raised when the store refuses a value, e.g. one longer than its column."""
