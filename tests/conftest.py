from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SAMPLE_WORDS = {
    "hello": "h ə l oʊ",
    "cat": "kæt",
    "straße": "ʃtʁaːsə",
    "ship": "ʃɪp",
}

SAMPLE_CATALOG = [
    {
        "symbol": "ʃ",
        "sound": "sh",
        "description": "voiceless postalveolar fricative",
        "examples": ["ship", "wish"],
        "ipa_examples": ["ʃɪp", "wɪʃ"],
    },
    {
        "symbol": "θ",
        "sound": "th",
        "description": "voiceless dental fricative",
        "examples": ["thin", "bath", "three"],
        "ipa_examples": ["θɪn", "bæθ"],
    },
]


def write_resource(root: Path, relative: str, content) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    elif isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """A resource directory with one dictionary and a symbol catalog."""
    write_resource(tmp_path, "dicts/en_US.json", {"entries": [SAMPLE_WORDS]})
    write_resource(tmp_path, "dicts/ipa_lookup_table.json", SAMPLE_CATALOG)
    return tmp_path


@pytest.fixture
def mapping() -> dict:
    return dict(SAMPLE_WORDS)
