from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

Predicate = Callable[..., bool]


@dataclass(frozen=True)
class ComparisonFamily:
    """
    A group of assertion method names sharing one decimal predicate.

    ``message`` and ``negated_message`` are ``str.format`` templates. ``act``
    and ``this`` are bound to the subject; every other field is bound to the
    operands, in order, under the names listed in ``operand_names``.
    """

    name: str
    predicate: Predicate
    message: str
    negated_message: str
    names: tuple[str, ...]
    negated_names: tuple[str, ...] = ()
    operand_names: tuple[str, ...] = field(default=("exp",))

    def __post_init__(self):
        if not self.names:
            raise ValueError(f"Comparison family {self.name} needs at least one name")

        overlap = set(self.names) & set(self.negated_names)
        if overlap:
            raise ValueError(
                f"Comparison family {self.name} uses {sorted(overlap)} as both "
                f"positive and negated names"
            )

    def __str__(self) -> str:
        return self.name

    @property
    def arity(self) -> int:
        return len(self.operand_names)

    @property
    def canonical_name(self) -> str:
        return self.names[0]

    @property
    def all_names(self) -> tuple[str, ...]:
        return self.names + self.negated_names

    def is_negated(self, method_name: str) -> bool:
        return method_name in self.negated_names

    def render(self, actual: Decimal, operands: tuple[Decimal, ...]) -> tuple[str, str]:
        bindings = {"act": actual, "this": actual}
        bindings.update(zip(self.operand_names, operands))

        return self.message.format(**bindings), self.negated_message.format(**bindings)
