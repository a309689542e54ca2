"""Label cleaning shared by stop names and trip headsigns.

Every helper is total over `str` (empty in, empty out) and idempotent, so a
label can be cleaned again later in the pipeline without drifting.

Casing uses `str.lower` / `str.upper`, which follow the Unicode default case
mapping and never consult the process locale.
"""

from __future__ import annotations

import re

# Street-type abbreviation -> canonical form
STREET_TYPES: dict[str, str] = {
    "av": "avenue",
    "ave": "avenue",
    "blvd": "boulevard",
    "cir": "circle",
    "cres": "crescent",
    "crt": "court",
    "ct": "court",
    "dr": "drive",
    "esp": "esplanade",
    "hwy": "highway",
    "ln": "lane",
    "pkwy": "parkway",
    "pl": "place",
    "rd": "road",
    "sq": "square",
    "st": "street",
    "stn": "station",
    "ter": "terrace",
    "terr": "terrace",
    "wy": "way",
}

ORDINAL_WORDS: dict[str, str] = {
    "first": "1st",
    "second": "2nd",
    "third": "3rd",
    "fourth": "4th",
    "fifth": "5th",
    "sixth": "6th",
    "seventh": "7th",
    "eighth": "8th",
    "ninth": "9th",
    "tenth": "10th",
    "eleventh": "11th",
    "twelfth": "12th",
    "thirteenth": "13th",
    "fourteenth": "14th",
    "fifteenth": "15th",
    "sixteenth": "16th",
    "seventeenth": "17th",
    "eighteenth": "18th",
    "nineteenth": "19th",
    "twentieth": "20th",
}

# A "word" is delimited by anything that is not a word character or apostrophe.
_WORD_START = r"(?<![\w'])"
_WORD_END = r"(?![\w'])"

_STREET_TYPES_RE = re.compile(
    _WORD_START + r"(" + "|".join(sorted(STREET_TYPES, key=len, reverse=True)) + r")" + _WORD_END + r"(\.)?",
    re.IGNORECASE,
)
_ORDINAL_WORDS_RE = re.compile(
    _WORD_START + r"(" + "|".join(ORDINAL_WORDS) + r")" + _WORD_END, re.IGNORECASE
)
_ORDINAL_SUFFIX_RE = re.compile(r"(?<![\w.])(\d+)(st|nd|rd|th)" + _WORD_END, re.IGNORECASE)
_LEADING_ZEROS_RE = re.compile(r"(?<![\w.])0+(?=\d)")
_BOUNDS_RE = re.compile(_WORD_START + r"(north|south|east|west)\s*bound" + _WORD_END, re.IGNORECASE)

_WHITESPACE_RE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;:!?)])")
_SPACE_AFTER_PAREN_RE = re.compile(r"\(\s+")
_DANGLING_SEPARATORS_RE = re.compile(r"^[\s\-/,;:&]+|[\s\-/,;:&]+$")
_WORD_INITIAL_RE = re.compile(r"(^|[\s\-/(&])([^\W\d_])")


def _match_case(src: str, repl: str) -> str:
    """Apply the casing of `src` (lower / Title / UPPER) to `repl`."""
    if len(src) > 1 and src.isupper():
        return repl.upper()
    if src[:1].isupper():
        return repl[:1].upper() + repl[1:]
    return repl


def to_lower(text: str) -> str:
    return text.lower()


def remove_word(text: str, word: str) -> str:
    """Replace every standalone occurrence of `word` (any case) with a single space."""
    if not text or not word:
        return text
    pattern = _WORD_START + re.escape(word) + _WORD_END
    return re.sub(pattern, " ", text, flags=re.IGNORECASE)


def clean_bounds(text: str) -> str:
    """Strip `northbound` / `south bound` style direction boilerplate."""
    return _BOUNDS_RE.sub(" ", text)


def clean_street_types(text: str) -> str:
    """Expand street-type abbreviations, e.g. `Main St.` -> `Main Street`.

    A dot glued to the next word (`St.Paul`) becomes a space.
    """

    def _expand(m: re.Match[str]) -> str:
        full = _match_case(m.group(1), STREET_TYPES[m.group(1).lower()])
        if m.group(2) and m.string[m.end() : m.end() + 1].isalpha():
            return full + " "
        return full

    return _STREET_TYPES_RE.sub(_expand, text)


def clean_numbers(text: str) -> str:
    """Canonical numeric tokens: `First` -> `1st`, `2ND` -> `2nd`, `007` -> `7`."""
    text = _ORDINAL_WORDS_RE.sub(lambda m: ORDINAL_WORDS[m.group(1).lower()], text)
    text = _ORDINAL_SUFFIX_RE.sub(lambda m: m.group(1) + m.group(2).lower(), text)
    return _LEADING_ZEROS_RE.sub("", text)


def clean_label(text: str) -> str:
    """Final presentation cleanup.

    - trim and collapse whitespace
    - no space before closing punctuation or after `(`
    - no dangling separators (`-`, `/`, `,`, ...) at either end
    - first letter of every word upper-cased (the rest is left alone)
    """
    if not text:
        return ""
    text = _WHITESPACE_RE.sub(" ", text).strip()
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    text = _SPACE_AFTER_PAREN_RE.sub("(", text)
    text = _DANGLING_SEPARATORS_RE.sub("", text)
    return _WORD_INITIAL_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)
