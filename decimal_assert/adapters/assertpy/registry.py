import inspect
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Callable, Optional

import assertpy

from decimal_assert.domain.services import (
    ComparisonService,
    NormalizationPolicy,
    Normalizer,
)
from decimal_assert.domain.values import ComparisonFamily
from decimal_assert.shared.config import Settings, get_settings
from decimal_assert.shared.logging import get_logger

# pytest hides frames of modules carrying this marker, as it does for assertpy.
__tracebackhide__ = True

logger = get_logger(__name__)

Comparator = Callable[..., Any]

DECIMAL_FLAG = "decimal"
FLAGS_ATTRIBUTE = "_decimal_assert_flags"

_MISSING = object()


def flag(builder: Any, name: str, value: Any = _MISSING) -> Any:
    """
    Read or write a named flag on a single assertion builder.

    Flags live on the builder instance, so they last for one ``assert_that``
    chain and never leak into the next one.

    :param builder: assertpy AssertionBuilder
    :param name: Flag name
    :param value: New flag value; the flag is only read when omitted

    :return: Current flag value, None if it was never set
    """
    flags = vars(builder).setdefault(FLAGS_ATTRIBUTE, {})

    if value is not _MISSING:
        flags[name] = value

    return flags.get(name)


def is_decimal_aware(builder: Any) -> bool:
    return bool(flag(builder, DECIMAL_FLAG))


def intercept(
    family: ComparisonFamily,
    service: ComparisonService,
    negated: bool = False,
) -> Callable[[Optional[Comparator]], Comparator]:
    """
    Build the decorator wrapping one polarity of a comparison family.

    The decorated ``original`` is the host method captured at install time. It
    is called with the untouched arguments whenever the builder was not marked
    decimal aware. Without an original (names the host does not define) every
    call takes the decimal path.
    """

    def decorator(original: Optional[Comparator]) -> Comparator:
        def comparator(builder: Any, method_name: str, *args: Any, **kwargs: Any) -> Any:
            if original is not None and not is_decimal_aware(builder):
                return original(builder, *args, **kwargs)

            description = kwargs.pop("description", None)
            if kwargs:
                raise TypeError(
                    f"{method_name}() got unexpected keyword argument(s) "
                    f"{sorted(kwargs)} in decimal mode"
                )

            if len(args) != family.arity:
                raise TypeError(
                    f"{method_name}() takes {family.arity} operand(s) in decimal mode, "
                    f"{len(args)} given"
                )

            outcome = service.evaluate(family, builder.val, *args)

            failure = outcome.failure_message(negated=negated)
            if failure is not None:
                if description:
                    failure = f"[{description}] {failure}"
                return builder.error(failure)

            return builder

        comparator.__doc__ = (
            f"Assert the {family} comparison "
            f"{'does not hold' if negated else 'holds'} for Decimal operands."
        )
        return comparator

    return decorator


def _named(name: str, impl: Comparator) -> Comparator:
    # assertpy binds extensions by __name__, one function per alias.
    def method(self, *args, **kwargs):
        return impl(self, name, *args, **kwargs)

    method.__name__ = name
    method.__qualname__ = f"AssertionBuilder.{name}"
    method.__doc__ = impl.__doc__
    return method


@dataclass(frozen=True)
class Registration:
    name: str
    family: ComparisonFamily
    negated: bool
    original: Optional[Comparator]
    extension: Comparator

    @property
    def overrides_host(self) -> bool:
        return self.original is not None


@dataclass
class DecimalRegistry:
    """
    Registration table of every decimal-aware method installed on one host.
    """

    host: ModuleType
    marker: str
    service: ComparisonService
    registrations: list[Registration] = field(default_factory=list)

    @property
    def builder_class(self) -> type:
        return host_builder_class(self.host)

    @property
    def names(self) -> list[str]:
        return [registration.name for registration in self.registrations]

    def get(self, name: str) -> Registration:
        for registration in self.registrations:
            if registration.name == name:
                return registration
        raise KeyError(f"No decimal comparison registered as {name}")

    def build(self) -> "DecimalRegistry":
        """Capture host originals and create one extension per method name."""
        self.registrations.clear()

        for family in self.service:
            for negated, names in ((False, family.names), (True, family.negated_names)):
                if not names:
                    continue

                original = self._original(names)
                impl = intercept(family, self.service, negated=negated)(original)

                for name in names:
                    self.registrations.append(
                        Registration(
                            name=name,
                            family=family,
                            negated=negated,
                            original=original,
                            extension=_named(name, impl),
                        )
                    )

        return self

    def _original(self, names: tuple[str, ...]) -> Optional[Comparator]:
        for name in names:
            original = inspect.getattr_static(self.builder_class, name, None)
            if callable(original):
                return original
        return None


class DecimalMarker:
    """
    Read-only builder property marking the assertion chain as decimal aware.
    """

    def __init__(self, registry: DecimalRegistry):
        self.registry = registry

    def __get__(self, builder: Any, owner: type = None) -> Any:
        if builder is None:
            return self

        flag(builder, DECIMAL_FLAG, True)
        return builder

    def __set__(self, builder: Any, value: Any) -> None:
        raise AttributeError(f"'{self.registry.marker}' is a read-only property")


def host_builder_class(host: ModuleType) -> type:
    """Class of the builders host.assert_that() hands out."""
    return type(host.assert_that(None))


def installed_registry(host: ModuleType = None) -> Optional[DecimalRegistry]:
    host = host or assertpy

    for attribute in vars(host_builder_class(host)).values():
        if isinstance(attribute, DecimalMarker):
            return attribute.registry
    return None


def install(host: ModuleType = None, settings: Settings = None) -> DecimalRegistry:
    """
    Register decimal-aware comparisons on an assertpy host.

    Installing twice on the same host is a no-op returning the first registry.

    :param host: assertpy module (or any module exposing assert_that,
        add_extension and remove_extension)
    :param settings: Settings providing the marker name and big integer names

    :return: DecimalRegistry describing what was installed

    :raises ValueError: If the marker name would shadow a builder attribute
    """
    host = host or assertpy
    settings = settings or get_settings()

    existing = installed_registry(host)
    if existing is not None:
        logger.debug(
            "decimal_assertions_already_installed",
            host=host.__name__,
            marker=existing.marker,
        )
        return existing

    marker = settings.MARKER_PROPERTY
    cls = host_builder_class(host)
    if inspect.getattr_static(cls, marker, None) is not None:
        raise ValueError(
            f"Marker property '{marker}' would shadow AssertionBuilder.{marker}"
        )

    normalizer = Normalizer(
        NormalizationPolicy(
            big_integer_type_names=frozenset(settings.BIG_INTEGER_TYPE_NAMES)
        )
    )
    registry = DecimalRegistry(
        host=host, marker=marker, service=ComparisonService(normalizer)
    ).build()

    setattr(cls, marker, DecimalMarker(registry))
    for registration in registry.registrations:
        host.add_extension(registration.extension)

    logger.info(
        "decimal_assertions_installed",
        host=host.__name__,
        marker=marker,
        methods=len(registry.registrations),
        overridden=sum(r.overrides_host for r in registry.registrations),
    )

    return registry


def uninstall(host: ModuleType = None) -> bool:
    """
    Remove everything install() registered on the host.

    :return: bool(was anything installed?)
    """
    host = host or assertpy

    registry = installed_registry(host)
    if registry is None:
        return False

    for registration in registry.registrations:
        host.remove_extension(registration.extension)
    delattr(registry.builder_class, registry.marker)

    logger.info("decimal_assertions_uninstalled", host=host.__name__)
    return True
