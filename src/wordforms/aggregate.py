"""
aggregate.py — Per-lemma word-form collections shared across source files.

One WordformAggregates instance is filled by every parse_xml_file() call of
a build and then handed to the writers. Once sealed it rejects changes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple


@dataclass
class WordformAggregates:
    """
    Accumulated build state.

    modern: lemma -> forms, 2008 orthography only
    all_variants: lemma -> forms, every orthography and standardness
    alt_pairs: (paradigm lemma, variant lemma) in encounter order, may repeat
    """

    modern: Dict[str, Set[str]] = field(default_factory=dict)
    all_variants: Dict[str, Set[str]] = field(default_factory=dict)
    alt_pairs: List[Tuple[str, str]] = field(default_factory=list)
    sealed: bool = False

    def _check_open(self):
        if self.sealed:
            raise RuntimeError("WordformAggregates is sealed; no further changes allowed")

    def add_lemma(self, lemma: str, modern: bool):
        """Register a lemma with an empty form set if not yet present."""
        self._check_open()
        self.all_variants.setdefault(lemma, set())
        if modern:
            self.modern.setdefault(lemma, set())

    def add_form(self, lemma: str, form: str, modern: bool):
        """Add a spelling to the lemma's form sets. The lemma must be registered."""
        self._check_open()
        self.all_variants[lemma].add(form)
        if modern:
            self.modern[lemma].add(form)

    def add_alt_pair(self, paradigm_lemma: str, lemma: str):
        self._check_open()
        self.alt_pairs.append((paradigm_lemma, lemma))

    def seal(self):
        """Freeze the aggregates before the writing phase."""
        self.sealed = True

    def sorted_alt_pairs(self) -> List[Tuple[str, str]]:
        """Deduplicated alt pairs in tuple order."""
        return sorted(set(self.alt_pairs))

    def counts(self) -> Dict[str, int]:
        return {
            'modern_lemmas': len(self.modern),
            'modern_forms': sum(len(forms) for forms in self.modern.values()),
            'all_lemmas': len(self.all_variants),
            'all_forms': sum(len(forms) for forms in self.all_variants.values()),
            'alt_pairs': len(set(self.alt_pairs)),
        }
