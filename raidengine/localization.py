"""Localized string tables, the active language and loading from JSON."""

from __future__ import annotations

import json
from enum import IntEnum
from typing import Optional, Union

from raidengine.delegate import Delegate

INVALID_LOCALIZATION_KEY = 0
MISSING_TEXT = "<MISSING TEXT>"

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK = (1 << 64) - 1


class LocalizationError(ValueError):
    """Raised when localization data cannot be read."""


class Language(IntEnum):
    ENGLISH = 0
    FRENCH = 1
    ITALIAN = 2
    GERMAN = 3
    SPANISH = 4
    JAPANESE = 5
    KOREAN = 6
    CHINESE_SIMPLIFIED = 7
    CHINESE_TRADITIONAL = 8


_LANGUAGE_CODES: dict[Language, str] = {
    Language.ENGLISH: "en",
    Language.FRENCH: "fr",
    Language.ITALIAN: "it",
    Language.GERMAN: "de",
    Language.SPANISH: "es",
    Language.JAPANESE: "ja",
    Language.KOREAN: "ko",
    Language.CHINESE_SIMPLIFIED: "zhCN",
    Language.CHINESE_TRADITIONAL: "zhTW",
}


def string_hash(text: str) -> int:
    """Stable 64-bit FNV-1a hash of ``text`` used as a localization key."""
    value = _FNV_OFFSET
    for byte in text.encode("utf-8"):
        value = ((value ^ byte) * _FNV_PRIME) & _MASK
    return value


def _key(key: Union[str, int]) -> int:
    return string_hash(key) if isinstance(key, str) else key


def language_from_code(code: str) -> Language:
    """Language for a code such as ``fr``; unknown codes fall back to English."""
    for language, language_code_ in _LANGUAGE_CODES.items():
        if language_code_ == code:
            return language
    return Language.ENGLISH


def language_code(language: Language) -> str:
    return _LANGUAGE_CODES.get(language, _LANGUAGE_CODES[Language.ENGLISH])


class LocalizationSet:
    """One table of strings keyed by hashed name."""

    def __init__(self) -> None:
        self._strings: dict[int, str] = {}

    def add_entry(self, key: Union[str, int], text: str) -> None:
        self._strings[_key(key)] = text

    def get_entry(self, key: Union[str, int]) -> Optional[str]:
        return self._strings.get(_key(key))

    def reset(self) -> None:
        self._strings.clear()

    def __len__(self) -> int:
        return len(self._strings)


class LocalizationSystem:
    """Looks strings up across registered sets and tracks the active language."""

    def __init__(self) -> None:
        self._language = Language.ENGLISH
        self.language_changed = Delegate()
        self._sets: list[LocalizationSet] = []

    @property
    def language(self) -> Language:
        return self._language

    @language.setter
    def language(self, language: Language) -> None:
        if self._language != language:
            self._language = language
            self.language_changed.invoke(language)

    def add_set(self, localization_set: LocalizationSet) -> None:
        self._sets.append(localization_set)

    def remove_set(self, localization_set: LocalizationSet) -> None:
        self._sets = [s for s in self._sets if s is not localization_set]

    def get_entry(self, key: Union[str, int]) -> str:
        """The first matching string from any set, or a missing-text marker."""
        hashed = _key(key)
        if hashed != INVALID_LOCALIZATION_KEY:
            for localization_set in self._sets:
                result = localization_set.get_entry(hashed)
                if result is not None:
                    return result
        return MISSING_TEXT

    def shutdown(self) -> None:
        self._sets.clear()


def load_localization_data(
    data: Union[str, bytes], language: Language, target: LocalizationSet
) -> int:
    """Add the strings for ``language`` from a JSON document; return how many were added."""
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LocalizationError(f"invalid localization JSON: {exc}") from exc

    if not isinstance(document, dict) or "version" not in document or "strings" not in document:
        raise LocalizationError("localization data needs 'version' and 'strings'")
    if not isinstance(document["version"], int) or not isinstance(document["strings"], list):
        raise LocalizationError("malformed 'version' or 'strings'")

    code = language_code(language)
    added = 0
    for item in document["strings"]:
        if not (
            isinstance(item, dict)
            and isinstance(item.get("key"), str)
            and isinstance(item.get("text"), dict)
        ):
            raise LocalizationError("each string needs a 'key' and a 'text' map")
        text = item["text"].get(code)
        if text is None:
            continue
        if not isinstance(text, str):
            raise LocalizationError(f"text for {item['key']!r} is not a string")
        target.add_entry(string_hash(item["key"]), text)
        added += 1
    return added