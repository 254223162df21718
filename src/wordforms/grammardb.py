"""
grammardb.py — Location and release of the GrammarDB source data.

GrammarDB (Grammar Database of Belarusian language) is not fetched by this
package. It is expected as a git checkout of a fixed release tag.
"""

import os
from pathlib import Path
from typing import Optional


GRAMMARDB_URL = "https://github.com/Belarus/GrammarDB"
GRAMMARDB_TAG = "RELEASE-202309"

# Processed in this order
XML_FILES = [
    "A1.xml", "A2.xml", "C.xml", "E.xml", "I.xml", "K.xml",
    "M.xml", "N1.xml", "N2.xml", "N3.xml", "NP.xml", "P.xml",
    "R.xml", "S.xml", "V.xml", "W.xml", "Y.xml", "Z.xml",
]

DEFAULT_DATA_DIR = Path("GrammarDB") / "data"

MODERN_OUTPUT = "wordforms-be-2008.txt"
ALL_OUTPUT = "wordforms-be-all.txt"
ALT_PAIRS_OUTPUT = "wordforms-be-altpairs.txt"
MANIFEST_OUTPUT = "wordforms-be-manifest.json"


def default_data_dir() -> Path:
    """Data directory from $GRAMMARDB_DATA, or GrammarDB/data under the cwd."""
    return Path(os.environ.get("GRAMMARDB_DATA", DEFAULT_DATA_DIR))


def clone_instructions(tag: str = GRAMMARDB_TAG) -> str:
    return f"Please run 'git clone -b {tag} {GRAMMARDB_URL}.git'"


def missing_data_message(data_dir: Path) -> Optional[str]:
    """Return the remediation text if data_dir is unusable, else None."""
    if data_dir.is_dir():
        return None
    return f"GrammarDB data not found at {data_dir}. {clone_instructions()}"
