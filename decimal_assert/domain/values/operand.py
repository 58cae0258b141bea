import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Collection

DEFAULT_BIG_INTEGER_TYPE_NAMES = frozenset({"BN"})

# Modules that ship a ``Decimal`` implementation (C accelerated and pure Python).
DECIMAL_MODULES = frozenset({"decimal", "_decimal", "_pydecimal"})


class OperandKind(str, Enum):
    CANONICAL_DECIMAL = "canonical_decimal"
    EXTERNAL_BIG_INTEGER = "external_big_integer"
    NUMERIC_STRING = "numeric_string"
    NATIVE_NUMBER = "native_number"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value


def is_foreign_decimal(value: Any) -> bool:
    """
    Tell whether value is a Decimal produced by another decimal implementation
    (e.g. ``_pydecimal.Decimal`` next to the C accelerated ``decimal.Decimal``).
    """
    cls = type(value)
    return (
        cls is not Decimal
        and cls.__name__ == "Decimal"
        and cls.__module__ in DECIMAL_MODULES
    )


def classify(
    value: Any,
    big_integer_type_names: Collection[str] = DEFAULT_BIG_INTEGER_TYPE_NAMES,
) -> OperandKind:
    """
    Map a raw value to the kind of operand it is. First match wins.

    Big integers are recognized structurally (any ``numbers.Integral`` that is not
    a builtin int) and, as a special case, by type name: libraries such as ``BN``
    register nothing we could check against, only their class name.

    :param value: Any raw value
    :param big_integer_type_names: Type names treated as external big integers

    :return: OperandKind of the value
    """
    if isinstance(value, Decimal) or is_foreign_decimal(value):
        return OperandKind.CANONICAL_DECIMAL

    if isinstance(value, bool):
        return OperandKind.INVALID

    if type(value).__name__ in big_integer_type_names:
        return OperandKind.EXTERNAL_BIG_INTEGER

    if isinstance(value, numbers.Integral) and not isinstance(value, int):
        return OperandKind.EXTERNAL_BIG_INTEGER

    if isinstance(value, str):
        return OperandKind.NUMERIC_STRING

    if isinstance(value, (int, float)):
        return OperandKind.NATIVE_NUMBER

    return OperandKind.INVALID
