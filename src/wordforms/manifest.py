"""
manifest.py — Describe a finished build in wordforms-be-manifest.json.

The manifest records size, line count and SHA256 of every written list,
together with the GrammarDB tag and the aggregate counts, so that two
builds can be compared with a plain diff.
"""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import orjson

from wordforms import __version__
from wordforms.grammardb import GRAMMARDB_TAG, GRAMMARDB_URL


logger = logging.getLogger(__name__)


def compute_sha256(filepath: Path) -> str:
    sha256 = hashlib.sha256()

    with open(filepath, 'rb') as f:
        while chunk := f.read(8192):
            sha256.update(chunk)

    return sha256.hexdigest()


def count_data_lines(filepath: Path) -> int:
    """Lines that are not part of the '#' header."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return sum(1 for line in f if not line.startswith('#'))


def format_size(size_bytes: float) -> str:
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def get_file_info(filepath: Path) -> Dict:
    size = filepath.stat().st_size
    return {
        'name': filepath.name,
        'size_bytes': size,
        'size_human': format_size(size),
        'lines': count_data_lines(filepath),
        'sha256': compute_sha256(filepath),
    }


def build_manifest(
    outputs: List[Path],
    counts: Dict[str, int],
    tag: str = GRAMMARDB_TAG,
    generated: Optional[datetime] = None
) -> Dict:
    generated = generated or datetime.now(timezone.utc)
    return {
        'generator': f"wordforms {__version__}",
        'generated': generated.strftime('%Y-%m-%dT%H:%M:%SZ'),
        'source': {'url': GRAMMARDB_URL, 'tag': tag},
        'counts': counts,
        'files': [get_file_info(Path(p)) for p in outputs],
    }


def write_manifest(manifest: Dict, output_path: Path):
    logger.info(f"Generating: {output_path.name}")
    with open(output_path, 'wb') as f:
        f.write(orjson.dumps(manifest, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS))
        f.write(b'\n')
