from typing import Any

from .base import DomainException

ACCEPTED_KINDS = "string, number, BN or Decimal"


class InvalidOperandError(DomainException, TypeError):
    """Raised when a value cannot be normalized into a Decimal."""

    def __init__(self, value: Any):
        self.value = value

        super().__init__(f"expected {value!r} to be an instance of {ACCEPTED_KINDS}")
