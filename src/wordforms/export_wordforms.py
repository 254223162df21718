"""
export_wordforms.py — Write the aggregated GrammarDB data as text lists.

Outputs:
  - wordforms-be-2008.txt (lemma|form|form..., 2008 orthography)
  - wordforms-be-all.txt (lemma|form|form..., including Narkamaŭka)
  - wordforms-be-altpairs.txt (lemma|alternative)

Each file starts with a '#' comment block describing provenance, license
and format. Lemmas, forms and pairs are sorted by Unicode code point, so the
output is identical across runs.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Set, Tuple

from wordforms.aggregate import WordformAggregates
from wordforms.grammardb import (
    ALL_OUTPUT,
    ALT_PAIRS_OUTPUT,
    GRAMMARDB_TAG,
    GRAMMARDB_URL,
    MODERN_OUTPUT,
)


logger = logging.getLogger(__name__)


def provenance_header(tag: str) -> List[str]:
    return [
        f"This file was automatically generated from the {GRAMMARDB_URL}",
        f"data (Grammar Database of Belarusian language) using the {tag} tag.",
        "Creative Commons Attribution-ShareAlike 4.0 International License.",
        "",
    ]


def modern_header(tag: str = GRAMMARDB_TAG) -> List[str]:
    return provenance_header(tag) + [
        "Uses UTF-8 format with U+0301 stress marks and U+2BC apostrophes. Each line starts",
        "with a single lemma, followed by the '|' delimited list of all its possible forms.",
        "The ў/у variants and different apostrophe types are also present in the list.",
        "",
        "Official Belarusian orthography (be-1959acad) adhering to the latest 2008 reform.",
        "Intended to be used by spellcheckers, which need to be strict.",
        "",
    ]


def all_header(tag: str = GRAMMARDB_TAG) -> List[str]:
    return provenance_header(tag) + [
        "Uses UTF-8 format with U+0301 stress marks and U+2BC apostrophes. Each line starts",
        "with a single lemma, followed by the '|' delimited list of all its possible forms.",
        "The ў/у variants and different apostrophe types are also present in the list.",
        "",
        "Official Belarusian orthography (be-1959acad), but deprecated Narkamaŭka spelling",
        "forms are also included. Intended to be used by ebook dictionaries to 'catch them all'.",
        "",
    ]


def alt_pairs_header(tag: str = GRAMMARDB_TAG) -> List[str]:
    return provenance_header(tag) + [
        "Uses UTF-8 format with U+0301 stress marks and U+2BC apostrophes. Each line lists",
        "a pair of alternative spelling variants of the same word delimited by '|'.",
        "Intended to be used by ebook dictionaries. If these two are not separate headwords",
        "in a dictionary, then it makes sense to link them together.",
        "",
    ]


def write_header(f, header: Iterable[str]):
    for line in header:
        f.write(f"# {line}\n" if line else "#\n")


def format_wordform_line(lemma: str, forms: Set[str]) -> str:
    """Lemma followed by its sorted forms, without repeating the lemma."""
    return "|".join([lemma] + sorted(form for form in forms if form != lemma))


def write_wordforms(path: Path, header: Iterable[str], entries: Dict[str, Set[str]]) -> int:
    """Write one line per lemma in sorted order. Returns the number of lines."""
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        write_header(f, header)
        for lemma in sorted(entries):
            f.write(format_wordform_line(lemma, entries[lemma]) + "\n")

    return len(entries)


def write_alt_pairs(path: Path, header: Iterable[str], pairs: Iterable[Tuple[str, str]]) -> int:
    """Write deduplicated pairs in sorted order. Returns the number of lines."""
    unique_pairs = sorted(set(pairs))

    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        write_header(f, header)
        for left, right in unique_pairs:
            f.write(f"{left}|{right}\n")

    return len(unique_pairs)


def export_all(
    aggregates: WordformAggregates,
    output_dir: Path,
    tag: str = GRAMMARDB_TAG
) -> List[Path]:
    """Seal the aggregates and write all three lists into output_dir."""
    aggregates.seal()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []

    modern_path = output_dir / MODERN_OUTPUT
    logger.info(f"Generating: {MODERN_OUTPUT}")
    count = write_wordforms(modern_path, modern_header(tag), aggregates.modern)
    logger.info(f"  -> {count:,} lemmas")
    written.append(modern_path)

    all_path = output_dir / ALL_OUTPUT
    logger.info(f"Generating: {ALL_OUTPUT}")
    count = write_wordforms(all_path, all_header(tag), aggregates.all_variants)
    logger.info(f"  -> {count:,} lemmas")
    written.append(all_path)

    alt_path = output_dir / ALT_PAIRS_OUTPUT
    logger.info(f"Generating: {ALT_PAIRS_OUTPUT}")
    count = write_alt_pairs(alt_path, alt_pairs_header(tag), aggregates.sorted_alt_pairs())
    logger.info(f"  -> {count:,} pairs")
    written.append(alt_path)

    return written
