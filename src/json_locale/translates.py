"""Bind translatable fields to a class and generate their accessors.

A translatable field holds a ``{locale: text}`` dict. Registering
``name_translations`` on a class adds:

- ``name(locale=None, *, fallback=..., fallback_on_presence=...)``
- ``set_name_translations(mapping, *, allow_blank=...)`` (alias ``set_name``)
- ``name_<l>(*, fallback=..., fallback_on_presence=...)`` and
  ``set_name_<l>(value, *, allow_blank=...)`` for every available locale ``l``

Example:
    configure(available_locales=["en", "es"])

    class Product(Translatable):
        def __init__(self):
            self.name_translations = {}

    Product.translates("name_translations", fallback=ANY)

    product = Product()
    product.set_name_es("Silla")
    product.name_en()  # "Silla"

Per-locale accessors are generated from the locales available at
registration time; locales added later do not get accessors on classes that
are already registered. Locale validity is checked at call time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from json_locale.config import BeforeSetHook, Configuration, DefaultLocale, get_configuration
from json_locale.errors import DuplicateRegistration, InvalidSuffix
from json_locale.locales import normalize_locale
from json_locale.resolution import FallbackSpec, read_translation
from json_locale.writer import write_translation

logger = logging.getLogger(__name__)

_REGISTRY_ATTR = "_json_locale_registrations"


class _Unset:
    """Marker for options the caller did not pass."""

    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


def _pick(value: Any, default: Any) -> Any:
    return default if value is _UNSET else value


@dataclass(frozen=True, eq=False)
class AttributeRegistration:
    """Policy captured for one translatable field when it was registered."""

    attr_name: str
    short_name: str
    allow_blank: bool
    fallback: FallbackSpec
    default_locale: DefaultLocale
    before_set: BeforeSetHook | None
    fallback_on_presence: bool
    locales: tuple[str, ...]  # snapshot used to generate per-locale accessors
    config: Configuration = field(repr=False)

    @property
    def available_locales(self) -> list[str]:
        """Locales accepted right now (live, unlike ``locales``)."""
        return self.config.available_locales

    def current_locale(self) -> Any:
        """Locale used by the locale-agnostic getter when none is given."""
        locale = self.default_locale
        if callable(locale):
            locale = locale()
        return locale

    def accessor_names(self) -> list[tuple[str, str, str | None]]:
        """Return ``(method_name, kind, locale)`` for every generated accessor."""
        names: list[tuple[str, str, str | None]] = [
            (self.short_name, "getter", None),
            (f"set_{self.attr_name}", "bulk setter", None),
            (f"set_{self.short_name}", "bulk setter", None),
        ]
        for locale in self.locales:
            token = normalize_locale(locale)
            names.append((f"{self.short_name}_{token}", "getter", locale))
            names.append((f"set_{self.short_name}_{token}", "setter", locale))
        return names

    def read(
        self,
        instance: Any,
        locale: Any,
        *,
        fallback: Any = _UNSET,
        fallback_on_presence: Any = _UNSET,
    ) -> Any:
        """Read ``locale`` from the instance's translation map."""
        return read_translation(
            getattr(instance, self.attr_name),
            locale,
            available_locales=self.available_locales,
            fallback=_pick(fallback, self.fallback),
            fallback_on_presence=_pick(fallback_on_presence, self.fallback_on_presence),
        )

    def write(
        self,
        instance: Any,
        locale: Any,
        value: str | None,
        *,
        allow_blank: Any = _UNSET,
    ) -> None:
        """Set ``locale`` on the instance and store the whole map back."""
        updated = write_translation(
            getattr(instance, self.attr_name),
            locale,
            value,
            available_locales=self.available_locales,
            allow_blank=_pick(allow_blank, self.allow_blank),
            before_set=self.before_set,
            attr_name=self.attr_name,
            instance=instance,
        )
        setattr(instance, self.attr_name, updated)


def _registrations(host: type) -> dict[str, AttributeRegistration]:
    """Registrations made on ``host`` itself (not inherited)."""
    registry = vars(host).get(_REGISTRY_ATTR)
    if registry is None:
        registry = {}
        setattr(host, _REGISTRY_ATTR, registry)
    return registry


def _plain_accessor(attr_name: str) -> property:
    """Property storing the raw map in the instance dict under the same name."""

    def fget(self: Any) -> Any:
        return self.__dict__.get(attr_name)

    def fset(self: Any, value: Any) -> None:
        self.__dict__[attr_name] = value

    return property(fget, fset, doc=f"Raw translations for {attr_name}.")


def _build_accessors(registration: AttributeRegistration) -> dict[str, Callable[..., Any]]:
    """Create the accessor functions for a registration, keyed by method name."""
    methods: dict[str, Callable[..., Any]] = {}

    def getter(self, locale=None, *, fallback=_UNSET, fallback_on_presence=_UNSET):
        if locale is None:
            locale = registration.current_locale()
        return registration.read(
            self, locale, fallback=fallback, fallback_on_presence=fallback_on_presence,
        )

    getter.__doc__ = (
        f"Return the {registration.short_name} text for ``locale`` "
        "(the default locale when omitted)."
    )

    methods[registration.short_name] = getter
    methods[f"set_{registration.attr_name}"] = _bulk_setter(registration)
    methods[f"set_{registration.short_name}"] = _bulk_setter(registration)

    for locale in registration.locales:
        token = normalize_locale(locale)
        methods[f"{registration.short_name}_{token}"] = _locale_getter(registration, locale)
        methods[f"set_{registration.short_name}_{token}"] = _locale_setter(registration, locale)

    return methods


def _bulk_setter(registration: AttributeRegistration) -> Callable[..., Any]:
    def bulk_setter(self, translations: Mapping[Any, str | None], *, allow_blank=_UNSET):
        for locale, value in translations.items():
            registration.write(self, normalize_locale(locale), value, allow_blank=allow_blank)

    bulk_setter.__doc__ = f"Set several locales of {registration.attr_name} at once."
    return bulk_setter


def _locale_getter(registration: AttributeRegistration, locale: str) -> Callable[..., Any]:
    def locale_getter(self, *, fallback=_UNSET, fallback_on_presence=_UNSET):
        return registration.read(
            self, locale, fallback=fallback, fallback_on_presence=fallback_on_presence,
        )

    locale_getter.__doc__ = f"Return the {registration.short_name} text for {locale!r}."
    return locale_getter


def _locale_setter(registration: AttributeRegistration, locale: str) -> Callable[..., Any]:
    def locale_setter(self, value: str | None, *, allow_blank=_UNSET):
        registration.write(self, locale, value, allow_blank=allow_blank)

    locale_setter.__doc__ = f"Set the {registration.short_name} text for {locale!r}."
    return locale_setter


def register(
    host: type,
    attr_name: str,
    *,
    suffix: str = _UNSET,
    allow_blank: bool = _UNSET,
    fallback: FallbackSpec = _UNSET,
    default_locale: DefaultLocale = _UNSET,
    before_set: BeforeSetHook | None = _UNSET,
    set_missing_accessor: bool = _UNSET,
    fallback_on_presence: bool = _UNSET,
    config: Configuration | None = None,
) -> AttributeRegistration:
    """Register ``attr_name`` as a translatable field of ``host``.

    Options left out take their value from ``config`` (the process-wide
    configuration by default) at the time of this call.

    Raises:
        InvalidSuffix: ``attr_name`` does not end with the suffix.
        DuplicateRegistration: ``attr_name`` is already registered on ``host``.
    """
    if config is None:
        config = get_configuration()

    attr_name = str(attr_name)
    suffix = _pick(suffix, config.suffix)
    if not suffix or not attr_name.endswith(suffix) or attr_name == suffix:
        raise InvalidSuffix(f"{attr_name} does not contain the suffix {suffix}")

    registry = _registrations(host)
    if attr_name in registry:
        raise DuplicateRegistration(f"{attr_name} translation has already been registered")

    if _pick(set_missing_accessor, config.set_missing_accessor) and not hasattr(host, attr_name):
        setattr(host, attr_name, _plain_accessor(attr_name))

    registration = AttributeRegistration(
        attr_name=attr_name,
        short_name=attr_name[: -len(suffix)],
        allow_blank=_pick(allow_blank, config.allow_blank),
        fallback=_pick(fallback, config.fallback),
        default_locale=_pick(default_locale, config.default_locale),
        before_set=_pick(before_set, config.before_set),
        fallback_on_presence=_pick(fallback_on_presence, config.fallback_on_presence),
        locales=tuple(str(locale) for locale in config.available_locales),
        config=config,
    )
    registry[attr_name] = registration
    host.translatable_attributes = list(registry)

    for name, method in _build_accessors(registration).items():
        if hasattr(host, name):
            logger.warning("%s.%s is replaced by a translation accessor", host.__name__, name)
        method.__name__ = name
        method.__qualname__ = f"{host.__qualname__}.{name}"
        setattr(host, name, method)

    logger.debug(
        "Registered %s.%s with %d locale accessor(s)",
        host.__name__, attr_name, len(registration.locales),
    )
    return registration


def get_registration(host: type | Any, attr_name: str) -> AttributeRegistration:
    """Return the registration of ``attr_name`` on a class (or an instance's class).

    Raises:
        KeyError: the field is not registered on that class.
    """
    cls = host if isinstance(host, type) else type(host)
    for klass in cls.__mro__:
        registry = vars(klass).get(_REGISTRY_ATTR)
        if registry and attr_name in registry:
            return registry[attr_name]
    raise KeyError(f"{attr_name} is not a translatable attribute of {cls.__name__}")


def is_translatable(host: type | Any) -> bool:
    """True if the class (or an instance's class) supports translated fields."""
    cls = host if isinstance(host, type) else type(host)
    if issubclass(cls, Translatable):
        return True
    return any(vars(klass).get(_REGISTRY_ATTR) for klass in cls.__mro__)


class Translatable:
    """Mixin giving a class the ``translates`` classmethod."""

    translatable_attributes: list[str] | None = None

    @classmethod
    def translates(cls, attr_name: str, **options: Any) -> AttributeRegistration:
        """Register ``attr_name`` on this class. See :func:`register`."""
        return register(cls, attr_name, **options)
