#!/usr/bin/env python3
"""
Presentation-layer state shared by the GUI and the CLI.

The lookup functions in core stay pure; everything that changes over a
session (history, the degraded state after a failed load) lives here.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .core import (
    DEFAULT_LOCALE,
    HistoryEntry,
    IpaSymbolEntry,
    LoadError,
    WordNotFound,
    load_dictionary,
    load_dictionary_file,
    load_symbol_catalog,
    resolve,
)

PLACEHOLDER = "IPA translation will appear here."


@dataclass
class LookupOutcome:
    word: str
    ipa: Optional[str]
    message: str

    @property
    def ok(self) -> bool:
        return self.ipa is not None


class LookupSession:
    """Handles submitted words and keeps the lookup history."""

    def __init__(self, mapping: Mapping[str, str], load_error: Optional[LoadError] = None):
        self.mapping = mapping
        self.load_error = load_error
        self._history: List[HistoryEntry] = []

    @classmethod
    def from_locale(cls, locale: str = DEFAULT_LOCALE,
                    resource_root: Optional[Union[str, Path]] = None) -> "LookupSession":
        try:
            dictionary = load_dictionary(locale, resource_root)
        except LoadError as e:
            logging.error(f"Error loading dictionary for {locale}: {e}")
            return cls({}, load_error=e)
        logging.info(f"Loaded {len(dictionary)} words for locale {locale}")
        return cls(dictionary.words)

    @classmethod
    def from_dictionary_file(cls, file_path: str) -> "LookupSession":
        try:
            dictionary = load_dictionary_file(file_path)
        except LoadError as e:
            logging.error(f"Error loading dictionary file {file_path}: {e}")
            return cls({}, load_error=e)
        logging.info(f"Loaded {len(dictionary)} words from {file_path}")
        return cls(dictionary.words)

    @property
    def degraded(self) -> bool:
        return self.load_error is not None

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def submit(self, text: str) -> LookupOutcome:
        """Handle a submitted word.

        Args:
            text: Raw text from the input field.

        Returns:
            The outcome to display. Empty input yields the placeholder and
            never reaches the resolver.
        """
        word = text.strip()
        if not word:
            return LookupOutcome(word="", ipa=None, message=PLACEHOLDER)

        try:
            ipa = resolve(word, self.mapping)
        except WordNotFound as e:
            # Misses are user feedback, never logged at error level
            logging.info(f"error: {e}")
            return LookupOutcome(word=word, ipa=None, message=f"Error: {e}")

        self._history.append(HistoryEntry(word=word, ipa=ipa))
        return LookupOutcome(word=word, ipa=ipa, message=ipa)


def load_catalog_or_empty(resource_root: Optional[Union[str, Path]] = None
                          ) -> Tuple[List[IpaSymbolEntry], Optional[str]]:
    """Load the symbol catalog for display.

    Returns:
        The entries and None, or an empty list and the error message when
        the catalog could not be loaded.
    """
    try:
        return load_symbol_catalog(resource_root), None
    except LoadError as e:
        logging.error(f"Error loading IPA dictionary: {e}")
        return [], str(e)


def format_symbol_title(entry: IpaSymbolEntry) -> str:
    return f"{entry.symbol} – {entry.sound}"


def format_example_lines(entry: IpaSymbolEntry) -> List[str]:
    return [f"• {word} {ipa}" for word, ipa in entry.example_pairs()]


def format_history_row(entry: HistoryEntry) -> Dict[str, str]:
    return {"title": entry.ipa, "subtitle": entry.word}
