from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal
from typing import Any, Iterable, Iterator

from decimal_assert.domain.values import ComparisonFamily, ComparisonOutcome

from .normalizer import Normalizer

# Additions and subtractions are exact and nothing traps: NaN or inf - inf
# simply make every ordering false.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[])


def _cmp(a: Decimal, b: Decimal) -> Decimal:
    return EXACT_CONTEXT.compare(a, b)


def equal(actual: Decimal, expected: Decimal) -> bool:
    return _cmp(actual, expected) == 0


def greater_than(actual: Decimal, expected: Decimal) -> bool:
    return _cmp(actual, expected) == 1


def greater_or_equal(actual: Decimal, expected: Decimal) -> bool:
    return _cmp(actual, expected) in (0, 1)


def less_than(actual: Decimal, expected: Decimal) -> bool:
    return _cmp(actual, expected) == -1


def less_or_equal(actual: Decimal, expected: Decimal) -> bool:
    return _cmp(actual, expected) in (0, -1)


def between(actual: Decimal, low: Decimal, high: Decimal) -> bool:
    return greater_or_equal(actual, low) and less_or_equal(actual, high)


def close_to(actual: Decimal, expected: Decimal, delta: Decimal) -> bool:
    # A negative delta yields an empty window.
    low = EXACT_CONTEXT.subtract(expected, delta)
    high = EXACT_CONTEXT.add(expected, delta)

    return between(actual, low, high)


def finite(value: Decimal) -> bool:
    return value.is_finite()


def integer(value: Decimal) -> bool:
    return value.is_finite() and equal(value, EXACT_CONTEXT.to_integral_value(value))


def negative(value: Decimal) -> bool:
    # -0 and -Infinity count as negative, NaN never does.
    return value.is_signed() and not value.is_nan()


def positive(value: Decimal) -> bool:
    return not value.is_signed() and not value.is_nan() and not value.is_zero()


def zero(value: Decimal) -> bool:
    return value.is_zero()


FAMILIES: tuple[ComparisonFamily, ...] = (
    ComparisonFamily(
        name="equal",
        predicate=equal,
        message="expected {act} to equal {exp}",
        negated_message="expected {act} to be different from {exp}",
        names=("is_equal_to", "equals", "eq"),
        negated_names=("is_not_equal_to", "ne"),
    ),
    ComparisonFamily(
        name="greater_than",
        predicate=greater_than,
        message="expected {act} to be greater than {exp}",
        negated_message="expected {act} to be less than or equal to {exp}",
        names=("is_greater_than", "is_above", "gt"),
        negated_names=("is_not_greater_than",),
    ),
    ComparisonFamily(
        name="greater_or_equal",
        predicate=greater_or_equal,
        message="expected {act} to be greater than or equal to {exp}",
        negated_message="expected {act} to be less than {exp}",
        names=("is_greater_than_or_equal_to", "is_at_least", "gte"),
        negated_names=("is_not_greater_than_or_equal_to",),
    ),
    ComparisonFamily(
        name="less_than",
        predicate=less_than,
        message="expected {act} to be less than {exp}",
        negated_message="expected {act} to be greater than or equal to {exp}",
        names=("is_less_than", "is_below", "lt"),
        negated_names=("is_not_less_than",),
    ),
    ComparisonFamily(
        name="less_or_equal",
        predicate=less_or_equal,
        message="expected {act} to be less than or equal to {exp}",
        negated_message="expected {act} to be greater than {exp}",
        names=("is_less_than_or_equal_to", "is_at_most", "lte"),
        negated_names=("is_not_less_than_or_equal_to",),
    ),
    ComparisonFamily(
        name="close_to",
        predicate=close_to,
        message="expected {act} to be within '{delta}' of {exp}",
        negated_message="expected {act} to be further than '{delta}' from {exp}",
        names=("is_close_to",),
        negated_names=("is_not_close_to",),
        operand_names=("exp", "delta"),
    ),
    ComparisonFamily(
        name="between",
        predicate=between,
        message="expected {act} to be between {low} and {high}",
        negated_message="expected {act} to not be between {low} and {high}",
        names=("is_between",),
        negated_names=("is_not_between",),
        operand_names=("low", "high"),
    ),
    ComparisonFamily(
        name="finite",
        predicate=finite,
        message="expected {this} to be finite",
        negated_message="expected {this} to not be finite",
        names=("is_finite",),
        negated_names=("is_not_finite",),
        operand_names=(),
    ),
    ComparisonFamily(
        name="negative",
        predicate=negative,
        message="expected {this} to be negative",
        negated_message="expected {this} to not be negative",
        names=("is_negative",),
        negated_names=("is_not_negative",),
        operand_names=(),
    ),
    ComparisonFamily(
        name="positive",
        predicate=positive,
        message="expected {this} to be positive",
        negated_message="expected {this} to not be positive",
        names=("is_positive",),
        negated_names=("is_not_positive",),
        operand_names=(),
    ),
    ComparisonFamily(
        name="integer",
        predicate=integer,
        message="expected {this} to be an integer",
        negated_message="expected {this} to not be an integer",
        names=("is_integer",),
        negated_names=("is_not_integer",),
        operand_names=(),
    ),
    ComparisonFamily(
        name="zero",
        predicate=zero,
        message="expected {this} to be zero",
        negated_message="expected {this} to not be zero",
        names=("is_zero",),
        negated_names=("is_not_zero",),
        operand_names=(),
    ),
)


class ComparisonService:
    """
    Domain service evaluating comparison families over normalized operands.
    """

    def __init__(
        self,
        normalizer: Normalizer = None,
        families: Iterable[ComparisonFamily] = FAMILIES,
    ):
        self._normalizer = normalizer or Normalizer()
        self._families = {family.name: family for family in families}

    @property
    def normalizer(self) -> Normalizer:
        return self._normalizer

    def __iter__(self) -> Iterator[ComparisonFamily]:
        return iter(self._families.values())

    def family(self, name: str) -> ComparisonFamily:
        try:
            return self._families[name]
        except KeyError:
            raise KeyError(f"Unknown comparison family: {name}") from None

    def evaluate(
        self, family: ComparisonFamily, subject: Any, *operands: Any
    ) -> ComparisonOutcome:
        """
        Normalize subject and operands, then evaluate the family predicate.

        :param family: Comparison family to evaluate
        :param subject: Raw value under test
        :param operands: Raw operands, as many as the family arity

        :return: ComparisonOutcome with both rendered messages

        :raises InvalidOperandError: If any value cannot be normalized
        :raises TypeError: If the number of operands does not match the family
        """
        if len(operands) != family.arity:
            raise TypeError(
                f"{family} comparison takes {family.arity} operand(s), "
                f"{len(operands)} given"
            )

        actual = self._normalizer.normalize(subject)
        normalized = tuple(self._normalizer.normalize(op) for op in operands)

        message, negated_message = family.render(actual, normalized)

        return ComparisonOutcome(
            passed=family.predicate(actual, *normalized),
            message=message,
            negated_message=negated_message,
        )
