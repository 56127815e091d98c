"""
Type-ahead filtering combobox widget.

This module provides an enhanced CTkComboBox with real-time type-ahead
filtering, used to pick the two objects to compare.

Usage:
    from src.ui.widgets.type_ahead_combobox import TypeAheadComboBox

    combo = TypeAheadComboBox(
        master=frame,
        values=['Ant', 'Earth', 'Mount Everest'],
        min_chars=2,
        command=on_select
    )
"""

import re
from typing import Any, Callable, List, Optional

import customtkinter as ctk

NAVIGATION_KEYS = ("Up", "Down", "Left", "Right", "Return", "Tab", "Escape")


def filter_values(values: List[str], typed: str) -> List[str]:
    """
    Filter a values list based on typed text.

    Prioritizes word boundary matches over contains matches.
    Word boundary: matches at start of any word (e.g., "ev" matches "Mount Everest")
    Contains: matches anywhere in string (e.g., "ar" matches "Earth")

    Args:
        values: Candidate values
        typed: The text typed by the user

    Returns:
        Filtered list with word boundary matches first
    """
    if not typed:
        return []

    typed_lower = typed.casefold()

    word_boundary = []
    contains = []

    for value in values:
        value_lower = value.casefold()

        # Split on common word separators
        words = re.split(r"[\s\-/'’]+", value_lower)
        if any(word.startswith(typed_lower) for word in words):
            word_boundary.append(value)
        elif typed_lower in value_lower:
            contains.append(value)

    return word_boundary + contains


class TypeAheadComboBox(ctk.CTkFrame):
    """
    Enhanced CTkComboBox with type-ahead filtering.

    This is a composite widget that wraps CTkComboBox in a CTkFrame.
    We don't subclass CTkComboBox directly to avoid interfering with
    its internal rendering and keyboard navigation.
    """

    def __init__(
        self,
        master: Any,
        values: Optional[List[str]] = None,
        min_chars: int = 2,
        command: Optional[Callable[[str], None]] = None,
        **kwargs,
    ):
        """
        Initialize the TypeAheadComboBox.

        Args:
            master: Parent widget
            values: List of dropdown values
            min_chars: Minimum characters before filtering starts (default 2)
            command: Callback when a value is selected or typed in
            **kwargs: Additional arguments passed to CTkComboBox
        """
        super().__init__(master, fg_color="transparent")

        self.full_values = values or []
        self.min_chars = min_chars
        self.filtered = False
        self._command = command

        self._combobox = ctk.CTkComboBox(
            self, values=self.full_values, command=self._on_select, **kwargs
        )
        self._combobox.pack(fill="x", expand=True)

        # Note: Using internal _entry attribute from CTkComboBox
        self._entry = self._combobox._entry

        self._entry.bind("<KeyRelease>", self._on_key_release)
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_return)

    def _reset_filter(self) -> None:
        if self.filtered:
            self._combobox.configure(values=self.full_values)
            self.filtered = False

    def _on_key_release(self, event) -> None:
        """Handle key release for type-ahead filtering."""
        if event.keysym in NAVIGATION_KEYS:
            return

        typed = self.get()

        if len(typed) < self.min_chars:
            self._reset_filter()
            return

        filtered = filter_values(self.full_values, typed)
        if filtered:
            self._combobox.configure(values=filtered)
            self.filtered = True
        else:
            # No matches - show all values so user can still select
            self._combobox.configure(values=self.full_values)
            self.filtered = False

    def _on_focus_out(self, event) -> None:
        """Handle focus out - reset filter and report typed text."""
        self._reset_filter()
        if self._command:
            self._command(self.get())

    def _on_return(self, event) -> None:
        """Report typed text when the user presses Enter."""
        if self._command:
            self._command(self.get())

    def _on_select(self, value: str) -> None:
        """Handle selection from dropdown."""
        self._reset_filter()
        if self._command:
            self._command(value)

    def reset_values(self, values: List[str]) -> None:
        """
        Update the full values list.

        Call this when the object names change (e.g., language switched).

        Args:
            values: New list of values
        """
        self.full_values = values
        self._combobox.configure(values=values)
        self.filtered = False

    def get(self) -> str:
        """Get current entry value."""
        return self._combobox.get()

    def set(self, value: str) -> None:
        """Set entry value."""
        self._combobox.set(value)
