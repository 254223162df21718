"""
paradigm_parse.py — Walk GrammarDB XML and collect lemmas and their forms.

Reads:
  - GrammarDB/data/*.xml

Structure:
  <Wordlist>
    <Paradigm lemma="...">
      <Variant lemma="..." pravapis="A1957,A2008" type="...">
        <Form tag="..." type="...">фо+рма</Form>

Variant and Form elements marked nonstandard or potential never reach the
modern (2008) list. Any structural violation aborts the whole build.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from wordforms.aggregate import WordformAggregates
from wordforms.normalize import normalize, spellings
from wordforms.progress_display import ProgressDisplay


logger = logging.getLogger(__name__)


MODERN_PRAVAPIS = 'A2008'
NON_MODERN_TYPE = re.compile(r'nonstandard|potential')
SKIPPED_LEMMA_CHARS = re.compile(r'[-.\t\n\v\f\r ]')


class GrammarDBStructureError(Exception):
    """GrammarDB data violates an assumption the build depends on."""

    code = "error"

    def __init__(self, source: Path, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"{self.code}: {detail} ({Path(source).name})")


class MissingParadigmLemmaError(GrammarDBStructureError):
    code = "error 1"


class MissingVariantLemmaError(GrammarDBStructureError):
    code = "error 2"


class PipeInLemmaError(GrammarDBStructureError):
    code = "error 3"


@dataclass
class ParseStats:
    """Counters for one or more parsed files."""
    files: int = 0
    paradigms: int = 0
    variants: int = 0
    skipped_variants: int = 0
    forms: int = 0
    skipped_forms: int = 0

    def merge(self, other: 'ParseStats'):
        self.files += other.files
        self.paradigms += other.paradigms
        self.variants += other.variants
        self.skipped_variants += other.skipped_variants
        self.forms += other.forms
        self.skipped_forms += other.skipped_forms


def is_non_modern_type(element: ET.Element) -> bool:
    return NON_MODERN_TYPE.search(element.get('type', '')) is not None


def is_modern_variant(variant: ET.Element) -> bool:
    """True for 2008 orthography variants that are neither nonstandard nor potential."""
    pravapis = variant.get('pravapis')
    if pravapis is None or MODERN_PRAVAPIS not in pravapis:
        return False
    return not is_non_modern_type(variant)


def is_bad_form(word: str) -> bool:
    return word == '' or '|' in word or '-' in word


def parse_variant(
    variant: ET.Element,
    paradigm_lemma: str,
    aggregates: WordformAggregates,
    stats: ParseStats,
    source: Path,
    verbose: bool = False
):
    if 'lemma' not in variant.attrib:
        raise MissingVariantLemmaError(source, f"Variant without lemma in paradigm {paradigm_lemma!r}")

    modern = is_modern_variant(variant)
    lemma = normalize(variant.get('lemma'))

    if '|' in lemma:
        raise PipeInLemmaError(source, f"'|' in lemma {lemma!r}")

    if SKIPPED_LEMMA_CHARS.search(lemma):
        stats.skipped_variants += 1
        return

    stats.variants += 1

    if paradigm_lemma != lemma:
        aggregates.add_alt_pair(paradigm_lemma, lemma)

    aggregates.add_lemma(lemma, modern)

    for form in variant:
        if form.tag != 'Form':
            continue

        word = normalize(form.text or '')
        if is_bad_form(word):
            stats.skipped_forms += 1
            if verbose:
                logger.warning(f"== skipping bad form in {source.name}: ==")
                logger.warning(ET.tostring(variant, encoding='unicode'))
            continue

        stats.forms += 1
        modern_form = modern and not is_non_modern_type(form)
        for spelling in spellings(word):
            aggregates.add_form(lemma, spelling, modern_form)


def parse_xml_file(
    path: Path,
    aggregates: WordformAggregates,
    verbose: bool = False
) -> ParseStats:
    """
    Parse one GrammarDB XML file into the aggregates.

    Raises:
        GrammarDBStructureError: on a missing lemma attribute, a '|' in a
            lemma, or a root element other than Wordlist
        xml.etree.ElementTree.ParseError: on malformed XML
        OSError: if the file cannot be read
    """
    path = Path(path)
    stats = ParseStats(files=1)

    root = ET.parse(path).getroot()
    if root.tag != 'Wordlist':
        raise GrammarDBStructureError(path, f"expected <Wordlist> root, found <{root.tag}>")

    for paradigm in root:
        if paradigm.tag != 'Paradigm':
            continue

        if 'lemma' not in paradigm.attrib:
            raise MissingParadigmLemmaError(path, f"Paradigm without lemma (pdgId={paradigm.get('pdgId')})")

        stats.paradigms += 1
        paradigm_lemma = normalize(paradigm.get('lemma'))

        for variant in paradigm:
            if variant.tag != 'Variant':
                continue
            parse_variant(variant, paradigm_lemma, aggregates, stats, path, verbose)

    return stats


def parse_sources(
    data_dir: Path,
    filenames: Iterable[str],
    aggregates: WordformAggregates,
    verbose: bool = False,
    progress: Optional[ProgressDisplay] = None
) -> ParseStats:
    """Parse every file in order. Stops at the first error."""
    total = ParseStats()

    for fname in filenames:
        logger.info(f"Processing: {fname}")
        total.merge(parse_xml_file(Path(data_dir) / fname, aggregates, verbose))

        if progress is not None:
            progress.update(
                Files=total.files,
                Paradigms=total.paradigms,
                Lemmas=len(aggregates.all_variants),
                Forms=total.forms,
            )

    return total
