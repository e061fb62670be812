#!/usr/bin/env python3
import os
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

DATA_DIR = Path(__file__).resolve().parent / "data"
DICT_PATH_TEMPLATE = "dicts/{locale}.json"
SYMBOL_CATALOG_PATH = "dicts/ipa_lookup_table.json"
DEFAULT_LOCALE = "en_US"


class Word2IpaError(Exception):
    """Base class for all word2ipa errors."""


class LoadError(Word2IpaError):
    """A bundled resource could not be turned into data."""

    def __init__(self, resource: str, reason: str):
        self.resource = resource
        self.reason = reason
        super().__init__(f"{reason}: {resource}")


class ResourceMissing(LoadError):
    def __init__(self, resource: str):
        super().__init__(resource, "Failed to load resource")


class EncodingError(LoadError):
    def __init__(self, resource: str, detail: str = ""):
        reason = "Invalid UTF-8 in resource"
        if detail:
            reason = f"{reason} ({detail})"
        super().__init__(resource, reason)


class MalformedJson(LoadError):
    def __init__(self, resource: str, detail: str = ""):
        reason = "Failed to parse JSON"
        if detail:
            reason = f"{reason} ({detail})"
        super().__init__(resource, reason)


class EmptyDictionary(LoadError):
    def __init__(self, resource: str):
        super().__init__(resource, "Dictionary format error, no entry blocks")


class ResolveError(Word2IpaError):
    """A query could not be resolved against a word mapping."""


class WordNotFound(ResolveError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Word '{word}' not found.")


@dataclass
class Dictionary:
    """A loaded word dictionary.

    The on-disk format wraps the mapping in a list of entry blocks; only the
    first block is used for lookups.
    """
    locale: str
    entries: List[Dict[str, str]]

    @property
    def words(self) -> Dict[str, str]:
        return self.entries[0]

    def __len__(self) -> int:
        return len(self.words)


@dataclass
class IpaSymbolEntry:
    symbol: str
    sound: str
    description: str
    examples: List[str] = field(default_factory=list)
    ipa_examples: List[str] = field(default_factory=list)

    def example_pairs(self) -> List[tuple]:
        """Pair each example word with its transcription.

        Unpaired trailing items of the longer list are dropped.
        """
        return list(zip(self.examples, self.ipa_examples))

    @classmethod
    def from_dict(cls, data: Any, resource: str = "<memory>") -> "IpaSymbolEntry":
        if not isinstance(data, dict):
            raise MalformedJson(resource, "catalog entry is not an object")
        for key in ("symbol", "sound", "description"):
            if not isinstance(data.get(key), str):
                raise MalformedJson(resource, f"field '{key}' must be a string")
        for key in ("examples", "ipa_examples"):
            value = data.get(key)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise MalformedJson(resource, f"field '{key}' must be a list of strings")
        return cls(
            symbol=data["symbol"],
            sound=data["sound"],
            description=data["description"],
            examples=list(data["examples"]),
            ipa_examples=list(data["ipa_examples"]),
        )


@dataclass
class HistoryEntry:
    word: str
    ipa: str


def _resource_root(resource_root: Optional[Union[str, Path]]) -> Path:
    return Path(resource_root) if resource_root is not None else DATA_DIR


def read_resource(relative_path: str, resource_root: Optional[Union[str, Path]] = None) -> bytes:
    """Read the raw bytes of a bundled resource.

    Args:
        relative_path: Path of the resource relative to the resource root.
        resource_root: Directory to read from instead of the bundled data dir.

    Returns:
        The resource contents.
    """
    path = _resource_root(resource_root) / relative_path
    if not path.is_file():
        raise ResourceMissing(str(path))
    try:
        return path.read_bytes()
    except OSError as e:
        logging.debug(f"Could not read {path}: {e}")
        raise ResourceMissing(str(path)) from e


def decode_json_resource(raw: bytes, resource: str) -> Any:
    """Decode UTF-8 bytes and parse them as JSON."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(resource, str(e)) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJson(resource, str(e)) from e


def load_json_file(file_path: str) -> Any:
    """Load a JSON document from a file on disk.

    Args:
        file_path: Path to the JSON file.

    Returns:
        The parsed JSON data.
    """
    if not os.path.isfile(file_path):
        raise ResourceMissing(file_path)
    try:
        with open(file_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        logging.debug(f"Could not read {file_path}: {e}")
        raise ResourceMissing(file_path) from e
    return decode_json_resource(raw, file_path)


def parse_dictionary(data: Any, locale: str, resource: str = "<memory>") -> Dictionary:
    """Build a Dictionary from parsed JSON.

    Args:
        data: Parsed JSON, expected to be {"entries": [{word: ipa, ...}, ...]}.
        locale: Locale code the dictionary belongs to.
        resource: Name of the source, used in error messages.

    Returns:
        The validated Dictionary.
    """
    if not isinstance(data, dict) or "entries" not in data:
        raise MalformedJson(resource, "expected an object with an 'entries' key")
    entries = data["entries"]
    if not isinstance(entries, list):
        raise MalformedJson(resource, "'entries' must be a list")
    for block in entries:
        if not isinstance(block, dict):
            raise MalformedJson(resource, "entry block is not an object")
        for word, ipa in block.items():
            if not isinstance(ipa, str):
                raise MalformedJson(resource, f"transcription for '{word}' is not a string")
    if not entries:
        raise EmptyDictionary(resource)
    return Dictionary(locale=locale, entries=entries)


def load_dictionary(locale_code: str = DEFAULT_LOCALE,
                    resource_root: Optional[Union[str, Path]] = None) -> Dictionary:
    """Load the bundled word dictionary for a locale.

    Args:
        locale_code: Locale identifier, e.g. "en_US".
        resource_root: Directory to read from instead of the bundled data dir.

    Returns:
        The loaded Dictionary.
    """
    relative_path = DICT_PATH_TEMPLATE.format(locale=locale_code)
    raw = read_resource(relative_path, resource_root)
    data = decode_json_resource(raw, relative_path)
    dictionary = parse_dictionary(data, locale_code, relative_path)
    logging.debug(f"Loaded {len(dictionary)} words for locale {locale_code}")
    return dictionary


def load_dictionary_file(file_path: str) -> Dictionary:
    """Load a word dictionary from a file outside the bundled resources."""
    data = load_json_file(file_path)
    locale = Path(file_path).stem
    return parse_dictionary(data, locale, file_path)


def available_locales(resource_root: Optional[Union[str, Path]] = None) -> List[str]:
    """List the locale codes that have a dictionary resource."""
    dicts_dir = _resource_root(resource_root) / Path(DICT_PATH_TEMPLATE).parent
    if not dicts_dir.is_dir():
        return []
    catalog_name = Path(SYMBOL_CATALOG_PATH).name
    return sorted(p.stem for p in dicts_dir.glob("*.json") if p.name != catalog_name)


def normalize_word(word: str) -> str:
    return word.lower()


def resolve(word: str, mapping: Mapping[str, str]) -> str:
    """Look up the IPA transcription of a word.

    Args:
        word: The query as typed by the user.
        mapping: Word to IPA mapping with lowercase keys.

    Returns:
        The stored transcription.

    Raises:
        WordNotFound: If the lowercased word is not in the mapping. The error
            carries the original query.
    """
    ipa = mapping.get(normalize_word(word))
    if ipa is None:
        raise WordNotFound(word)
    return ipa


def parse_symbol_catalog(data: Any, resource: str = "<memory>") -> List[IpaSymbolEntry]:
    if not isinstance(data, list):
        raise MalformedJson(resource, "symbol catalog must be a JSON array")
    return [IpaSymbolEntry.from_dict(item, resource) for item in data]


def load_symbol_catalog(resource_root: Optional[Union[str, Path]] = None) -> List[IpaSymbolEntry]:
    """Load the bundled IPA symbol catalog.

    An empty array is a valid, empty catalog.

    Args:
        resource_root: Directory to read from instead of the bundled data dir.

    Returns:
        The catalog entries in file order.
    """
    raw = read_resource(SYMBOL_CATALOG_PATH, resource_root)
    data = decode_json_resource(raw, SYMBOL_CATALOG_PATH)
    return parse_symbol_catalog(data, SYMBOL_CATALOG_PATH)


def find_symbol(catalog: List[IpaSymbolEntry], symbol: str) -> Optional[IpaSymbolEntry]:
    for entry in catalog:
        if entry.symbol == symbol:
            return entry
    return None
