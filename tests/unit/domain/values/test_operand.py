import _pydecimal
from decimal import Decimal
from fractions import Fraction

import pytest

from decimal_assert.domain.values import OperandKind, classify, is_foreign_decimal


class BN:
    def __str__(self) -> str:
        return "12"


class BigInteger:
    def __str__(self) -> str:
        return "12"


@pytest.mark.parametrize(
    "value, kind",
    [
        (Decimal("1.5"), OperandKind.CANONICAL_DECIMAL),
        (_pydecimal.Decimal("1.5"), OperandKind.CANONICAL_DECIMAL),
        (BN(), OperandKind.EXTERNAL_BIG_INTEGER),
        ("10.5", OperandKind.NUMERIC_STRING),
        ("not a number", OperandKind.NUMERIC_STRING),
        (10, OperandKind.NATIVE_NUMBER),
        (10.5, OperandKind.NATIVE_NUMBER),
        (float("nan"), OperandKind.NATIVE_NUMBER),
        (True, OperandKind.INVALID),
        (None, OperandKind.INVALID),
        ({}, OperandKind.INVALID),
        ([], OperandKind.INVALID),
        (lambda: 1, OperandKind.INVALID),
        (Fraction(1, 3), OperandKind.INVALID),
        (BigInteger(), OperandKind.INVALID),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_classify_uses_configured_big_integer_names():
    assert classify(BigInteger(), {"BigInteger"}) is OperandKind.EXTERNAL_BIG_INTEGER
    assert classify(BN(), {"BigInteger"}) is OperandKind.INVALID


def test_classify_recognizes_integral_registrations():
    import numbers

    class Limb:
        def __str__(self) -> str:
            return "7"

    numbers.Integral.register(Limb)

    assert classify(Limb()) is OperandKind.EXTERNAL_BIG_INTEGER


def test_decimal_wins_over_big_integer_names():
    assert classify(Decimal("1"), {"Decimal"}) is OperandKind.CANONICAL_DECIMAL


def test_is_foreign_decimal():
    assert is_foreign_decimal(_pydecimal.Decimal("1"))
    assert not is_foreign_decimal(Decimal("1"))
    assert not is_foreign_decimal("1")


def test_operand_kind_str():
    assert str(OperandKind.NUMERIC_STRING) == "numeric_string"
