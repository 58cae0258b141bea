from .family import ComparisonFamily, Predicate
from .operand import (
    DEFAULT_BIG_INTEGER_TYPE_NAMES,
    OperandKind,
    classify,
    is_foreign_decimal,
)
from .outcome import ComparisonOutcome

__all__ = [
    "ComparisonFamily",
    "ComparisonOutcome",
    "DEFAULT_BIG_INTEGER_TYPE_NAMES",
    "OperandKind",
    "Predicate",
    "classify",
    "is_foreign_decimal",
]
