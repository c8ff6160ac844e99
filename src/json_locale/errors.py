"""Exceptions raised by json_locale."""

from __future__ import annotations


class JsonLocaleError(Exception):
    """Base exception for all json_locale errors."""


class InvalidSuffix(JsonLocaleError):
    """Raised when a translatable field name does not end with the required suffix."""


class DuplicateRegistration(JsonLocaleError):
    """Raised when a field is registered twice on the same class."""


class InvalidLocale(JsonLocaleError, ValueError):
    """Raised when a locale is missing or not one of the available locales."""


class ConfigurationError(JsonLocaleError):
    """Raised when a configuration file cannot be read or applied."""
