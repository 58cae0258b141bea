from .base import DomainException
from .operand import ACCEPTED_KINDS, InvalidOperandError

__all__ = [
    "ACCEPTED_KINDS",
    "DomainException",
    "InvalidOperandError",
]
