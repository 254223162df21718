"""
wordforms - Belarusian word-form lists built from GrammarDB.

Reads the GrammarDB XML paradigms and writes three pipe-delimited lists:

    wordforms-be-2008.txt      lemma|form|form... (2008 orthography only)
    wordforms-be-all.txt       lemma|form|form... (including Narkamaŭka)
    wordforms-be-altpairs.txt  lemma|alternative-lemma

Usage:
    wordforms-be --data-dir GrammarDB/data --output-dir dist
"""

__version__ = "0.1.0"
