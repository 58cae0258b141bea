"""
Decimal-aware comparisons for assertpy.

    >>> from assertpy import assert_that
    >>> import decimal_assert
    >>> registry = decimal_assert.install()
    >>> assert_that("10.6").decimal.is_greater_than(10)
"""

from decimal_assert.adapters.assertpy import install, installed_registry, uninstall
from decimal_assert.domain.exceptions import DomainException, InvalidOperandError
from decimal_assert.domain.services import normalize
from decimal_assert.domain.values import OperandKind, classify

__version__ = "1.0.0"

__all__ = [
    "DomainException",
    "InvalidOperandError",
    "OperandKind",
    "classify",
    "install",
    "installed_registry",
    "normalize",
    "uninstall",
]
