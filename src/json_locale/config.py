"""Process-wide default policy for translatable fields.

Registrations read their defaults from here at bind time; every option can
also be overridden per registration without touching these values. The
registry is a plain module-level object with no locking: mutate it during
start-up or test setup/teardown, not while accessors are being called from
other threads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import MISSING, dataclass, field, fields, replace
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from json_locale.errors import ConfigurationError
from json_locale.resolution import ANY, FallbackSpec

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = "_translations"

# Signature of before_set hooks: (attr_name, instance) -> None
BeforeSetHook = Callable[[str, Any], None]

# A fixed locale code, or a zero-argument callable returning one
DefaultLocale = str | Callable[[], Any] | None


@dataclass
class Configuration:
    """Default policy applied to new registrations."""

    available_locales: list[str] = field(default_factory=list)
    suffix: str = DEFAULT_SUFFIX
    allow_blank: bool = False
    fallback: FallbackSpec = False
    default_locale: DefaultLocale = None
    before_set: BeforeSetHook | None = None
    set_missing_accessor: bool = False
    fallback_on_presence: bool = True

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "available_locales":
            if not isinstance(value, (list, tuple)):
                raise TypeError("available_locales must be a list")
            value = list(value)
        super().__setattr__(name, value)

    def reset(self) -> None:
        """Restore every setting to its initial value, in place."""
        for f in fields(self):
            if f.default_factory is not MISSING:
                setattr(self, f.name, f.default_factory())
            else:
                setattr(self, f.name, f.default)


_SETTINGS = frozenset(f.name for f in fields(Configuration))

_config = Configuration()


def get_configuration() -> Configuration:
    """Return the process-wide configuration object."""
    return _config


def _apply(
    config: Configuration,
    mutator: Callable[[Configuration], None] | None,
    settings: dict[str, Any],
) -> Configuration:
    unknown = set(settings) - _SETTINGS
    if unknown:
        raise TypeError(f"unknown configuration setting(s): {', '.join(sorted(unknown))}")

    # Work on a copy so a failing setting leaves config untouched.
    candidate = replace(config)
    if mutator is not None:
        mutator(candidate)
    for name, value in settings.items():
        setattr(candidate, name, value)

    for f in fields(config):
        setattr(config, f.name, getattr(candidate, f.name))
    return config


def configure(
    mutator: Callable[[Configuration], None] | None = None,
    **settings: Any,
) -> Configuration:
    """Change the process-wide defaults.

    Either pass a callable that receives the configuration, keyword
    settings, or both (the callable runs first). Changes are made on a copy
    and applied only when every one of them succeeds::

        configure(available_locales=["en", "es"], default_locale="en")

        def setup(config):
            config.available_locales = ["en", "es"]
            config.before_set = mark_dirty
        configure(setup)
    """
    _apply(_config, mutator, settings)
    logger.debug("json_locale configured: %s", _config)
    return _config


def reset_configuration() -> Configuration:
    """Restore the process-wide defaults (used between tests)."""
    _config.reset()
    return _config


def load_configuration(path: str | Path, config: Configuration | None = None) -> Configuration:
    """Apply the ``[json_locale]`` table of a TOML file.

    Settings go to ``config`` when given, else to the process-wide defaults.

    Expected format:
        [json_locale]
        available_locales = ["en", "es", "pt-BR"]
        default_locale = "en"
        fallback = "any"          # false, true, "any", "en" or ["en", "es"]
        fallback_on_presence = true
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigurationError(f"Configuration file could not be read: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc

    table = data.get("json_locale", {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"[json_locale] in {path} must be a table")

    settings = dict(table)
    if "before_set" in settings:
        raise ConfigurationError("before_set cannot be set from a configuration file")
    _check_file_settings(settings, path)
    if settings.get("fallback") == ANY.value:
        settings["fallback"] = ANY

    target = _config if config is None else config
    try:
        _apply(target, None, settings)
    except TypeError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc

    logger.debug("Loaded json_locale settings from %s", path)
    return target


_FLAG_SETTINGS = ("allow_blank", "set_missing_accessor", "fallback_on_presence")
_TEXT_SETTINGS = ("suffix", "default_locale")


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _check_file_settings(settings: dict[str, Any], path: Path) -> None:
    """Reject TOML values whose type the policy cannot use."""
    for name in _FLAG_SETTINGS:
        if name in settings and not isinstance(settings[name], bool):
            raise ConfigurationError(f"{path}: {name} must be true or false")
    for name in _TEXT_SETTINGS:
        if name in settings and not isinstance(settings[name], str):
            raise ConfigurationError(f"{path}: {name} must be a string")
    if "available_locales" in settings and not _is_str_list(settings["available_locales"]):
        raise ConfigurationError(f"{path}: available_locales must be a list of strings")
    if "fallback" in settings:
        fallback = settings["fallback"]
        if not isinstance(fallback, (bool, str)) and not _is_str_list(fallback):
            raise ConfigurationError(
                f"{path}: fallback must be true, false, a locale or a list of locales"
            )
