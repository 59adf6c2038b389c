"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ProfileNotFoundError(DomainException):
    """No stored financial profile is available for the operation"""

    pass


class ProfileGenerationError(DomainException):
    """Profile generator is unavailable or returned an unusable payload"""

    pass


class InvalidProfileDataError(DomainException):
    """Stored profile document is malformed and cannot be analyzed"""

    pass
