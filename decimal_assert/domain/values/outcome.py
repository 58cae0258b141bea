from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ComparisonOutcome:
    passed: bool
    message: str
    negated_message: str

    def __bool__(self) -> bool:
        return self.passed

    def failure_message(self, negated: bool = False) -> Optional[str]:
        """
        Failure text for the assertion, or None if it holds.

        :param negated: Whether the caller asserted the predicate does NOT hold
        """
        if negated:
            return self.negated_message if self.passed else None

        return None if self.passed else self.message
