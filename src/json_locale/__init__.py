"""json_locale: per-locale accessors for translation-map fields."""

from json_locale.config import (
    Configuration,
    configure,
    get_configuration,
    load_configuration,
    reset_configuration,
)
from json_locale.errors import (
    ConfigurationError,
    DuplicateRegistration,
    InvalidLocale,
    InvalidSuffix,
    JsonLocaleError,
)
from json_locale.locales import normalize_locale
from json_locale.resolution import ANY, Fallback
from json_locale.translates import (
    AttributeRegistration,
    Translatable,
    get_registration,
    is_translatable,
    register,
)

__version__ = "0.3.0"

__all__ = [
    "ANY",
    "AttributeRegistration",
    "Configuration",
    "ConfigurationError",
    "DuplicateRegistration",
    "Fallback",
    "InvalidLocale",
    "InvalidSuffix",
    "JsonLocaleError",
    "Translatable",
    "__version__",
    "configure",
    "get_configuration",
    "get_registration",
    "is_translatable",
    "load_configuration",
    "normalize_locale",
    "register",
    "reset_configuration",
]
