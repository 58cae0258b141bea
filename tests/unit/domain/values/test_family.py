from decimal import Decimal

import pytest

from decimal_assert.domain.values import ComparisonFamily, ComparisonOutcome


def _family(**overrides) -> ComparisonFamily:
    params = dict(
        name="close_to",
        predicate=lambda a, e, d: True,
        message="expected {act} to be within '{delta}' of {exp}",
        negated_message="expected {act} to be further than '{delta}' from {exp}",
        names=("is_close_to",),
        negated_names=("is_not_close_to",),
        operand_names=("exp", "delta"),
    )
    params.update(overrides)
    return ComparisonFamily(**params)


def test_family_arity_and_names():
    family = _family()

    assert family.arity == 2
    assert family.canonical_name == "is_close_to"
    assert family.all_names == ("is_close_to", "is_not_close_to")
    assert family.is_negated("is_not_close_to")
    assert not family.is_negated("is_close_to")
    assert str(family) == "close_to"


def test_family_render_binds_operands_by_name():
    message, negated = _family().render(Decimal("5"), (Decimal("10"), Decimal("0.5")))

    assert message == "expected 5 to be within '0.5' of 10"
    assert negated == "expected 5 to be further than '0.5' from 10"


def test_family_render_this_for_classifications():
    family = _family(
        message="expected {this} to be zero",
        negated_message="expected {this} to not be zero",
        operand_names=(),
    )

    assert family.render(Decimal("0.0"), ()) == (
        "expected 0.0 to be zero",
        "expected 0.0 to not be zero",
    )


def test_family_requires_names():
    with pytest.raises(ValueError):
        _family(names=())


def test_family_rejects_overlapping_names():
    with pytest.raises(ValueError):
        _family(names=("is_close_to",), negated_names=("is_close_to",))


def test_outcome_failure_message():
    held = ComparisonOutcome(passed=True, message="m", negated_message="n")
    failed = ComparisonOutcome(passed=False, message="m", negated_message="n")

    assert bool(held) is True
    assert held.failure_message() is None
    assert held.failure_message(negated=True) == "n"

    assert bool(failed) is False
    assert failed.failure_message() == "m"
    assert failed.failure_message(negated=True) is None
