"""Label Store - Multilingual label registry for Scale Compare.

The LabelStore maps label ids to TranslatableLabel objects and resolves them
in the current language, falling back to the fallback language when a
translation is missing.

Resolution never fails: an unknown id is returned as its own text so a
missing label shows up on screen instead of crashing the display.

Example Usage:
    >>> store = LabelStore(["EN", "FR"], user_locale="fr_CH.UTF-8")
    >>> store.current_language
    'FR'
    >>> store.add_label(6, TranslatableLabel([("EN", "Object"), ("FR", "Objet")]))
    >>> store.resolve("6")
    'Objet'
    >>> store.resolve(99)
    '99'
"""

import logging
import re
from typing import Dict, Iterable, Optional, Tuple, Union

from src.models.translatable_label import TranslatableLabel, normalize_language
from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)

LabelId = Union[int, str]

# Placeholder for a known label that has no text in either language
MISSING_TRANSLATION_TEMPLATE = "*LABEL [{label_id}]*"

_INTEGER_ID = re.compile(r"^[+-]?\d+$")


def normalize_label_id(label_id: LabelId) -> LabelId:
    """
    Normalize a label id so "6", " 6 " and 6 address the same label.

    Numeric strings become integers; other strings are kept as-is.
    """
    if isinstance(label_id, str):
        stripped = label_id.strip()
        if _INTEGER_ID.match(stripped):
            return int(stripped)
    return label_id


class LabelStore:
    """
    Registry of translatable labels with current/fallback language resolution.

    Attributes:
        supported_languages: Ordered, upper-cased language codes
        fallback_language: Language used when a translation is missing in
            the current language (defaults to the first supported language)
    """

    def __init__(
        self,
        supported_languages: Iterable[str],
        fallback_language: Optional[str] = None,
        user_locale: Optional[str] = None,
    ):
        """
        Initialize the label store.

        Args:
            supported_languages: Language codes such as ["EN", "FR"]
            fallback_language: Explicit fallback language. Defaults to the
                first supported language.
            user_locale: User locale signal (e.g. "fr_FR.UTF-8", "en-US")
                used to pick the initial current language
        """
        languages = []
        for lang in supported_languages:
            code = normalize_language(lang)
            if code and code not in languages:
                languages.append(code)
        self._supported_languages: Tuple[str, ...] = tuple(languages)

        if fallback_language is not None:
            self._fallback_language = normalize_language(fallback_language)
        elif self._supported_languages:
            self._fallback_language = self._supported_languages[0]
        else:
            self._fallback_language = ""

        self._labels: Dict[LabelId, TranslatableLabel] = {}
        self._current_language = self.user_language(user_locale)

    @property
    def supported_languages(self) -> Tuple[str, ...]:
        """Supported language codes in declaration order."""
        return self._supported_languages

    @property
    def fallback_language(self) -> str:
        """Language used when the current language has no translation."""
        return self._fallback_language

    @property
    def current_language(self) -> str:
        """Language labels are resolved in."""
        return self._current_language

    @current_language.setter
    def current_language(self, lang: str) -> None:
        # Callers validate the value against supported_languages
        self._current_language = normalize_language(lang)
        log_operation(
            logger,
            operation="set_current_language",
            outcome="success",
            level=logging.DEBUG,
            language=self._current_language,
        )

    def user_language(self, locale_signal: Optional[str]) -> str:
        """
        Derive a supported language from a user locale signal.

        Only the primary language subtag is used ("fr_CH.UTF-8" -> "FR").

        Args:
            locale_signal: Locale string from the environment, or None

        Returns:
            The matching supported language, or the fallback language
        """
        if locale_signal:
            primary = re.split(r"[-_.@]", str(locale_signal).strip(), maxsplit=1)[0]
            code = normalize_language(primary)
            if code in self._supported_languages:
                return code
        return self._fallback_language

    def add_label(self, label_id: LabelId, label: TranslatableLabel) -> None:
        """Register a label under an id, replacing any previous label."""
        self._labels[normalize_label_id(label_id)] = label

    def has_label(self, label_id: LabelId) -> bool:
        """Check whether a label id is registered."""
        return normalize_label_id(label_id) in self._labels

    def resolve_label(self, label: TranslatableLabel) -> Optional[str]:
        """
        Resolve any translatable label with current/fallback resolution.

        Returns:
            Text in the current language, else in the fallback language,
            else None
        """
        text = label.get(self._current_language)
        if text is None:
            text = label.get(self._fallback_language)
        return text

    def resolve(self, label_id: LabelId) -> str:
        """
        Resolve a label id to display text.

        Args:
            label_id: Integer id or numeric string

        Returns:
            Text in the current language, else in the fallback language.
            An unknown id is returned as its own text; a known label with no
            usable translation is returned as "*LABEL [<id>]*".
        """
        label = self._labels.get(normalize_label_id(label_id))
        if label is None:
            return str(label_id)
        text = self.resolve_label(label)
        if text is None:
            return MISSING_TRANSLATION_TEMPLATE.format(label_id=label_id)
        return text

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label_id: LabelId) -> bool:
        return self.has_label(label_id)

    def __repr__(self) -> str:
        return (
            f"LabelStore(languages={list(self._supported_languages)}, "
            f"current='{self._current_language}', labels={len(self._labels)})"
        )
