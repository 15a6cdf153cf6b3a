"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnsupportedLocaleError(DomainException):
    """Requested locale has no registered language profile"""

    pass
