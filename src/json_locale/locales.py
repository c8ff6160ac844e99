"""Locale code helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from json_locale.errors import InvalidLocale

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_locale(locale: Any) -> str:
    """Turn a locale code into a token usable inside an accessor name.

    Lower-cases and drops everything outside ``a-z``:
    "pt-BR" → "ptbr", "zh_Hant" → "zhhant".
    """
    return _NON_LETTERS.sub("", str(locale).lower())


def resolve_locale(locale: Any, available: Iterable[Any]) -> str:
    """Return the available locale code matching ``locale``.

    An exact match wins; otherwise the first available locale with the same
    normalized token is used, so accessors generated from "pt-BR" (token
    "ptbr") address the "pt-BR" key.

    Raises:
        InvalidLocale: locale is None or matches no available locale.
    """
    if locale is None:
        raise InvalidLocale("invalid locale None")

    requested = str(locale)
    codes = [str(code) for code in available]
    if requested in codes:
        return requested

    token = normalize_locale(requested)
    if token:
        for code in codes:
            if normalize_locale(code) == token:
                return code

    raise InvalidLocale(f"invalid locale {requested}")
