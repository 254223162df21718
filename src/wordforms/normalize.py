"""
normalize.py — Canonical text forms and spelling variants for GrammarDB words.

GrammarDB marks stress with '+' after the stressed vowel and uses the ASCII
apostrophe. The published lists use U+0301 (combining acute accent) for
stress and U+02BC (modifier letter apostrophe) instead.
"""

from typing import List


STRESS_MARK = '+'
COMBINING_ACUTE = '\u0301'
ASCII_APOSTROPHE = "'"
MODIFIER_APOSTROPHE = '\u02bc'
CURLY_APOSTROPHE = '\u2019'

# Only ASCII whitespace is trimmed; NBSP and other Unicode spaces are data
ASCII_WHITESPACE = ' \t\n\v\f\r\0'

# Single syllable prepositions that GrammarDB marks as stressed but which are
# actually unstressed, see
#    https://be.wikisource.org/wiki/Page:Беларускі_правапіс_(1927).pdf/39
UNSTRESSED_PREPOSITIONS = frozenset({'у+', 'не+', 'бе+з'})


def normalize(word: str) -> str:
    """
    Convert a raw GrammarDB lemma or form to its canonical spelling.

    >>> normalize('дамы+')
    'дамы́'
    >>> normalize('у+')
    'у'
    """
    word = word.strip(ASCII_WHITESPACE)
    if word in UNSTRESSED_PREPOSITIONS:
        return word.replace(STRESS_MARK, '')
    return word.replace(STRESS_MARK, COMBINING_ACUTE).replace(ASCII_APOSTROPHE, MODIFIER_APOSTROPHE)


def spellings(word: str) -> List[str]:
    """
    Generate the alternative spellings of a normalized word.

    The word itself always comes first. A leading unstressed 'у' also gets
    its 'ў' spelling. When the word has an apostrophe, every spelling
    collected so far is repeated with the ASCII and the curly apostrophe,
    so the result has 1, 2, 3 or 6 entries.
    """
    result = [word]

    if word.startswith('у') and not word.startswith('у' + COMBINING_ACUTE):
        result.append('ў' + word[1:])

    if MODIFIER_APOSTROPHE in word:
        ascii_variants = [w.replace(MODIFIER_APOSTROPHE, ASCII_APOSTROPHE) for w in result]
        curly_variants = [w.replace(MODIFIER_APOSTROPHE, CURLY_APOSTROPHE) for w in result]
        result = result + ascii_variants + curly_variants

    return result
