"""
word2ipa - Look up the IPA transcription of words and browse the IPA symbol table.
"""

__version__ = "0.1.0"

from .core import (
    Dictionary,
    IpaSymbolEntry,
    HistoryEntry,
    Word2IpaError,
    LoadError,
    ResourceMissing,
    EncodingError,
    MalformedJson,
    EmptyDictionary,
    ResolveError,
    WordNotFound,
    load_dictionary,
    load_dictionary_file,
    load_symbol_catalog,
    load_json_file,
    available_locales,
    normalize_word,
    resolve,
)
from .config import AppConfig, load_config, load_yaml_file
from .session import LookupSession, LookupOutcome, load_catalog_or_empty
