"""Read side: look up a locale in a translation map, with fallbacks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from json_locale.errors import InvalidLocale
from json_locale.locales import resolve_locale


class Fallback(str, Enum):
    """Special fallback modes."""
    ANY = "any"


ANY = Fallback.ANY

# False/None, True/ANY, a single locale code, or an ordered list of codes
FallbackSpec = bool | str | Sequence[str] | None


def matches(translations: Mapping[str, Any], locale: str, fallback_on_presence: bool) -> bool:
    """Whether ``locale`` counts as translated in ``translations``.

    With ``fallback_on_presence`` the value must be present (not None, not
    ""); otherwise the key merely has to exist.
    """
    if fallback_on_presence:
        return translations.get(locale) not in (None, "")
    return locale in translations


def read_translation(
    translations: Mapping[str, Any] | None,
    locale: Any,
    *,
    available_locales: Iterable[Any],
    fallback: FallbackSpec = False,
    fallback_on_presence: bool = True,
) -> Any:
    """Return the text stored for ``locale``, or a fallback, or None.

    Fallbacks are only consulted when the requested locale itself does not
    match. Supported ``fallback`` values:

    - False / None: no fallback.
    - True / ANY: first other entry of the map (in map order) that matches.
    - "en": the raw value stored under "en", without a presence check.
    - ["de", "en"]: first listed locale that matches.

    Fallback codes are matched against the available locales like
    ``locale`` ("pt-br" addresses "pt-BR"); codes that are not available
    are looked up as given.

    Raises:
        InvalidLocale: ``locale`` is None or not an available locale.
    """
    available_locales = list(available_locales)
    locale = resolve_locale(locale, available_locales)

    if translations is None:
        return None

    if matches(translations, locale, fallback_on_presence):
        return translations.get(locale)

    if fallback is None or fallback is False:
        return None

    if fallback is True or fallback == ANY:
        for key, value in translations.items():
            if key != locale and matches(translations, key, fallback_on_presence):
                return value
        return None

    if isinstance(fallback, str):
        return translations.get(_fallback_key(fallback, available_locales))

    for candidate in fallback:
        candidate = _fallback_key(candidate, available_locales)
        if matches(translations, candidate, fallback_on_presence):
            return translations.get(candidate)
    return None


def _fallback_key(code: Any, available_locales: list[Any]) -> str:
    """Map key for a fallback code: the available locale it names, else the code itself."""
    try:
        return resolve_locale(code, available_locales)
    except InvalidLocale:
        return str(code)
