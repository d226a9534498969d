"""
Traditional Mongolian script → Latin transliteration.

This module romanizes headwords written in the traditional (vertical) Mongolian
script so that they can be searched with a Latin keyboard. Two renderings are
available:

    normalized (default):
        Collapses distinctions a searcher usually cannot hear or type:
        u → o, ü → ö, t → d, free variation selectors and the vowel separator
        are dropped, and a ge/qe syllable is rewritten as he.

    strict:
        One Latin letter (or digraph) per script letter, selectors kept.

Functions:
    to_latin(text, normalize=True) -> str: Main transliteration entry point
    transliterate_pair(text) -> Tuple[str, str]: Both renderings at once
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


# Letters shared by both renderings
_COMMON = {
    # Vowels
    'ᠠ': 'a',
    'ᠡ': 'e',
    'ᠢ': 'i',
    'ᠣ': 'o',
    'ᠥ': 'ö',

    # Consonants
    'ᠨ': 'n',
    'ᠩ': 'ng',
    'ᠪ': 'b',
    'ᠫ': 'p',
    'ᠬ': 'q',
    'ᠭ': 'g',
    'ᠮ': 'm',
    'ᠯ': 'l',
    'ᠰ': 's',
    'ᠱ': 'š',
    'ᠳ': 'd',
    'ᠴ': 'č',
    'ᠵ': 'j',
    'ᠶ': 'y',
    'ᠷ': 'r',
    'ᠸ': 'w',
    'ᠹ': 'f',
    'ᠺ': 'k',
    'ᠻ': 'k',
    'ᠼ': 'c',
    'ᠽ': 'z',
    'ᠾ': 'h',
    'ᠿ': 'ž',
    'ᡀ': 'č',
    'ᡁ': 'r',
    'ᡂ': 'w',

    ' ': ' ',

    # Mongolian digits; FVS4 reads as a zero
    '\u180f': '0',
    '\u1810': '0',
    '\u1811': '1',
    '\u1812': '2',
    '\u1813': '3',
    '\u1814': '4',
    '\u1815': '5',
    '\u1816': '6',
    '\u1817': '7',
    '\u1818': '8',
    '\u1819': '9',
}

# Nirugu and free variation selectors FVS1-3
_SELECTORS = ('\u180a', '\u180b', '\u180c', '\u180d')
_VOWEL_SEPARATOR = '\u180e'

NORMALIZED_TABLE: Mapping[str, str] = MappingProxyType({
    **_COMMON,
    'ᠤ': 'o',   # u → o
    'ᠦ': 'ö',   # ü → ö
    'ᠲ': 'd',   # t → d
    **{selector: '' for selector in _SELECTORS},
    _VOWEL_SEPARATOR: '',
})

STRICT_TABLE: Mapping[str, str] = MappingProxyType({
    **_COMMON,
    'ᠤ': 'u',
    'ᠦ': 'ü',
    'ᠲ': 't',
    **{selector: selector for selector in _SELECTORS},
    _VOWEL_SEPARATOR: ' ',
})

# ge/qe → he, applied in this order: string start, after whitespace, mid-word.
# (pattern, replacement, count); count 0 rewrites every occurrence
_HE_REWRITES = tuple(
    (re.compile(pattern, re.IGNORECASE), replacement, count)
    for syllable in ('ge', 'qe')
    for pattern, replacement, count in (
        (r'^' + syllable, 'he', 1),
        (r'\s' + syllable, ' he', 0),
        # Lookbehind, so back-to-back syllables ("agege") are all rewritten
        (r'(?<=[a-zöüčšž])' + syllable, 'he', 0),
    )
)

NORMALIZATION_RULES = (
    ('Vowels', 'ᠤ (u) → o, ᠦ (ü) → ö'),
    ('Consonants', 'ᠲ (t) → d, ᠳ (d) → d'),
    ('Initial ᠬᠡ (qe/ge)', '→ he'),
    ('Medial ᠬᠡ (qe/ge)', '→ he'),
)


def to_latin(text: Optional[str], normalize: bool = True) -> Optional[str]:
    """
    Transliterate traditional Mongolian script into Latin letters.

    Characters the table does not know (Cyrillic, punctuation, Latin) are
    copied through unchanged, so mixed or partially encoded text still yields
    a usable result. ``None`` is returned as ``None``.

    Args:
        text: Text in traditional Mongolian script
        normalize: Use the normalized rendering (default) instead of the
            strict one

    Returns:
        Latin transliteration

    Examples:
        >>> to_latin("ᠮᠣᠩᠭᠣᠯ")
        'monggol'

        >>> to_latin("ᠲᠤᠮᠤᠷ"), to_latin("ᠲᠤᠮᠤᠷ", normalize=False)
        ('domor', 'tumur')

        >>> to_latin("ᠭᠡᠷ")
        'her'
    """
    if text is None:
        return None
    if not text:
        return text

    table = NORMALIZED_TABLE if normalize else STRICT_TABLE
    result = ''.join(table.get(char, char) for char in text)

    if normalize:
        result = apply_he_rewrites(result)

    return result


def apply_he_rewrites(text: str) -> str:
    """
    Rewrite ge/qe syllables as he at word start and inside words.

    Examples:
        >>> apply_he_rewrites("qeled gegen")
        'heled hehen'
    """
    for pattern, replacement, count in _HE_REWRITES:
        text = pattern.sub(replacement, text, count=count)
    return text


def transliterate_pair(text: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return the (normalized, strict) renderings of ``text``."""
    return to_latin(text, normalize=True), to_latin(text, normalize=False)


if __name__ == "__main__":
    samples = ["ᠲᠠᠮᠢᠷ", "ᠮᠣᠩᠭᠣᠯ", "ᠭᠡᠷ", "ᠬᠡᠯᠡ", "ᠦᠭᠡ"]
    for sample in samples:
        normalized, strict = transliterate_pair(sample)
        print(f"{sample:10s} → {normalized:15s} ({strict})")
