from .registry import (
    DECIMAL_FLAG,
    Comparator,
    DecimalMarker,
    DecimalRegistry,
    Registration,
    flag,
    host_builder_class,
    install,
    installed_registry,
    intercept,
    is_decimal_aware,
    uninstall,
)

__all__ = [
    "Comparator",
    "DECIMAL_FLAG",
    "DecimalMarker",
    "DecimalRegistry",
    "Registration",
    "flag",
    "host_builder_class",
    "install",
    "installed_registry",
    "intercept",
    "is_decimal_aware",
    "uninstall",
]
