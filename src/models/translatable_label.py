"""
Translatable label model for Scale Compare.

A TranslatableLabel holds one piece of display text in every supported
language. Language codes are case-normalized to upper case ("en" and "EN"
address the same translation).

Lookups never fall back to another language: a missing translation is
returned as None and the caller (usually the LabelStore) decides what to
show instead.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from src.utils.constants import LANGUAGE_FIELD_SUFFIXES


def normalize_language(lang: Optional[str]) -> str:
    """Return the canonical (stripped, upper-case) form of a language code."""
    if lang is None:
        return ""
    return str(lang).strip().upper()


def label_from_record(
    record: Mapping[str, Any],
    prefix: str,
    suffixes: Optional[Mapping[str, str]] = None,
) -> "TranslatableLabel":
    """
    Build a label from per-language fields of a resource record.

    Resource records carry one field per language, named prefix + suffix
    (e.g. "ObjectEn", "ObjectFr"). Absent or null fields are skipped.

    Args:
        record: Decoded resource record
        prefix: Field name prefix (e.g. "Object", "UnitSymbol", "Label")
        suffixes: Mapping of language code to field suffix. Defaults to
            the application's supported languages.

    Returns:
        TranslatableLabel with one translation per present field
    """
    suffixes = LANGUAGE_FIELD_SUFFIXES if suffixes is None else suffixes
    pairs = []
    for lang, suffix in suffixes.items():
        text = record.get(f"{prefix}{suffix}")
        if text is not None:
            pairs.append((lang, str(text)))
    return TranslatableLabel(pairs)


class TranslatableLabel:
    """
    A single label translated into several languages.

    Example:
        >>> label = TranslatableLabel([("EN", "Hello"), ("FR", "Bonjour")])
        >>> label.get("fr")
        'Bonjour'
        >>> label.get("DE") is None
        True
    """

    def __init__(self, translations: Optional[Iterable[Tuple[str, Optional[str]]]] = None):
        """
        Initialize the label.

        Args:
            translations: Iterable of (language code, text) pairs. Pairs whose
                text is None are ignored so that absent resource fields do not
                shadow a fallback translation.
        """
        self._translations: Dict[str, str] = {}
        for lang, text in translations or ():
            if text is not None:
                self.set(lang, text)

    def get(self, lang: str) -> Optional[str]:
        """Get the translation for a language, or None if it is missing."""
        return self._translations.get(normalize_language(lang))

    def set(self, lang: str, text: str) -> None:
        """Add or replace the translation for a language."""
        self._translations[normalize_language(lang)] = text

    def languages(self) -> Tuple[str, ...]:
        """Language codes that have a translation, in insertion order."""
        return tuple(self._translations)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TranslatableLabel):
            return NotImplemented
        return self._translations == other._translations

    __hash__ = None

    def __repr__(self) -> str:
        """Return string representation of TranslatableLabel."""
        return f"TranslatableLabel({self._translations!r})"
