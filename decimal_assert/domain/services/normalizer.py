import re
from dataclasses import dataclass
from decimal import Context, Decimal, InvalidOperation
from typing import Any

from decimal_assert.domain.exceptions import InvalidOperandError
from decimal_assert.domain.values import (
    DEFAULT_BIG_INTEGER_TYPE_NAMES,
    OperandKind,
    classify,
)
from decimal_assert.shared.logging import get_logger

logger = get_logger(__name__)

PREFIXED_INTEGER = re.compile(r"^[+-]?0[xXoObB][0-9a-fA-F_]+$")

QUIET_NAN = Decimal("NaN")

# Malformed strings raise regardless of the traps set on the caller's context.
PARSING_CONTEXT = Context(traps=[InvalidOperation])


@dataclass(frozen=True)
class NormalizationPolicy:
    """Policy describing which raw values count as external big integers."""

    big_integer_type_names: frozenset[str] = DEFAULT_BIG_INTEGER_TYPE_NAMES


class Normalizer:
    """
    Domain service turning heterogeneous raw values into Decimals.
    """

    def __init__(self, policy: NormalizationPolicy = None):
        self._policy = policy or NormalizationPolicy()

    @property
    def policy(self) -> NormalizationPolicy:
        return self._policy

    def classify(self, value: Any) -> OperandKind:
        return classify(value, self._policy.big_integer_type_names)

    def normalize(self, value: Any) -> Decimal:
        """
        Convert a raw value into a Decimal.

        Decimals are returned as they are, without re-parsing. Floats go through
        their shortest round-trip repr, so ``10.6`` becomes ``Decimal("10.6")``
        rather than its binary expansion.

        :param value: str, int, float, Decimal or an external big integer

        :return: Decimal representation of the value

        :raises InvalidOperandError: If the value is of any other kind, or is a
            string that does not spell a number
        """
        kind = self.classify(value)

        if kind is OperandKind.CANONICAL_DECIMAL:
            if isinstance(value, Decimal):
                return value
            return self._parse(str(value), original=value)

        if kind is OperandKind.EXTERNAL_BIG_INTEGER:
            return self._parse(str(value), original=value)

        if kind is OperandKind.NUMERIC_STRING:
            return self._parse(value, original=value)

        if kind is OperandKind.NATIVE_NUMBER:
            if isinstance(value, float):
                return Decimal(float.__repr__(value))
            return Decimal(int(value))

        logger.debug("invalid_operand", value=repr(value), type=type(value).__name__)
        raise InvalidOperandError(value)

    def _parse(self, text: str, original: Any) -> Decimal:
        text = text.strip()

        try:
            parsed = Decimal(text, PARSING_CONTEXT)
        except (InvalidOperation, ValueError):
            parsed = self._parse_prefixed_integer(text)

        if parsed is None:
            logger.debug("invalid_operand", value=repr(original), reason="unparseable")
            raise InvalidOperandError(original)

        if parsed.is_snan():
            return QUIET_NAN

        return parsed

    @staticmethod
    def _parse_prefixed_integer(text: str):
        if not PREFIXED_INTEGER.match(text):
            return None

        try:
            return Decimal(int(text, 0))
        except ValueError:
            return None


_default_normalizer = Normalizer()


def normalize(value: Any) -> Decimal:
    """Normalize value with the default policy (``BN`` big integers)."""
    return _default_normalizer.normalize(value)
