"""Write side: set or clear a single locale in a translation map."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from json_locale.locales import resolve_locale


def write_translation(
    translations: Mapping[str, Any] | None,
    locale: Any,
    value: str | None,
    *,
    available_locales: Iterable[Any],
    allow_blank: bool = False,
    before_set: Callable[[str, Any], None] | None = None,
    attr_name: str = "",
    instance: Any = None,
) -> dict[str, Any]:
    """Return a copy of ``translations`` with ``locale`` set to ``value``.

    A None or "" value removes the locale unless ``allow_blank`` is set, in
    which case it is stored as given. ``before_set(attr_name, instance)``
    runs before anything changes, and only when the stored value differs
    from ``value``; an exception from it aborts the write.

    Raises:
        InvalidLocale: ``locale`` is None or not an available locale.
    """
    locale = resolve_locale(locale, available_locales)
    updated = dict(translations or {})

    if before_set is not None and updated.get(locale) != value:
        before_set(attr_name, instance)

    if not allow_blank and (value is None or value == ""):
        updated.pop(locale, None)
    else:
        updated[locale] = value

    return updated
