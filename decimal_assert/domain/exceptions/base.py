class DomainException(Exception):
    """Base exception for every error raised by decimal_assert."""

    pass
