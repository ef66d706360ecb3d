"""Column converters applied at the storage boundary.

Currencies travel as ISO 4217 alphabetic codes and locales as language tags
(``en-US``, ``zh-Hans-CN``). Empty values map to ``None`` in both directions.
"""
from __future__ import annotations

from typing import Optional, Union

from babel import Locale, UnknownLocaleError
from babel.core import get_locale_identifier
from babel.numbers import is_currency


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def normalize_currency(code: str) -> str:
    normalized = code.strip().upper()
    if not is_currency(normalized):
        raise ValueError(f"Unknown ISO 4217 currency code: {code!r}")
    return normalized


def encode_currency(code: Optional[str]) -> Optional[str]:
    if _blank(code):
        return None
    return normalize_currency(code)


def decode_currency(value: Optional[str]) -> Optional[str]:
    if _blank(value):
        return None
    return normalize_currency(value)


def encode_locale(locale: Optional[Union[Locale, str]]) -> Optional[str]:
    if isinstance(locale, str):
        locale = decode_locale(locale)
    if locale is None:
        return None
    return get_locale_identifier((locale.language, locale.territory, locale.script, locale.variant), sep="-")


def decode_locale(value: Optional[str]) -> Optional[Locale]:
    if _blank(value):
        return None
    tag = value.strip().replace("_", "-")
    try:
        return Locale.parse(tag, sep="-")
    except UnknownLocaleError as exc:
        raise ValueError(f"Unknown locale tag: {value!r}") from exc
