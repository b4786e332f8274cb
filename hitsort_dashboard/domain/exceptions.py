"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordStoreError(DomainException):
    """Record store returned an error or is unavailable"""

    pass


class AuthenticationError(DomainException):
    """Credentials or session token were rejected"""

    pass


class InvalidRecordError(DomainException):
    """Form input is malformed and cannot be submitted"""

    pass
