"""Diacritics normalization for transparent Vietnamese/ASCII search."""

import unicodedata

# Precomposed Vietnamese letters keyed by their plain Latin base letter.
# Input reaching this table is already lowercased.
_VIETNAMESE_LETTERS = {
    "a": "àáạảãâầấậẩẫăằắặẳẵ",
    "e": "èéẹẻẽêềếệểễ",
    "i": "ìíịỉĩ",
    "o": "òóọỏõôồốộổỗơờớợởỡ",
    "u": "ùúụủũưừứựửữ",
    "y": "ỳýỵỷỹ",
    "d": "đ",
}

VIETNAMESE_BASE_LETTERS: dict[str, str] = {
    letter: base
    for base, letters in _VIETNAMESE_LETTERS.items()
    for letter in letters
}

_BASE_LETTER_TABLE = str.maketrans(VIETNAMESE_BASE_LETTERS)

# Unicode "Combining Diacritical Marks" block.
_COMBINING_MARKS = range(0x0300, 0x0370)


def replace_vietnamese_letters(text: str) -> str:
    """Map every precomposed lowercase Vietnamese letter to its base letter."""
    return text.translate(_BASE_LETTER_TABLE)


def strip_combining_marks(text: str) -> str:
    """Decompose text (NFD) and drop combining diacritical marks.

    Only the U+0300-U+036F block is removed. Letters that do not
    decompose into base plus mark (``ø``, ``ł``) are left untouched.
    """
    nfd = unicodedata.normalize("NFD", text)
    return "".join(c for c in nfd if ord(c) not in _COMBINING_MARKS)


def canonicalize(text: str | None) -> str:
    """Build a diacritics-free search key from free-form text.

    Lowercases first because the Vietnamese table only covers
    lowercase letters, then applies the table, then the generic
    NFD pass for any accent the table does not know about.

    Args:
        text: Input text (Vietnamese, ASCII or other Latin script).
            ``None`` is treated as empty.

    Returns:
        Lowercased, diacritics-free, trimmed text.
    """
    if not text:
        return ""

    lowered = text.lower()
    based = replace_vietnamese_letters(lowered)
    return strip_combining_marks(based).strip()


def matches(target: str | None, query: str | None) -> bool:
    """Check whether ``query`` is found within ``target``.

    True when the canonical query is a substring of the canonical
    target, or when the lowercased query is a substring of the
    lowercased target. The second check keeps accented queries
    matching accented text exactly. Containment is not word
    bounded: ``"cat"`` is found in ``"Category"``.

    Args:
        target: Text being searched (cafe name, address, ...).
        query: User search input.

    Returns:
        False when either input is empty.
    """
    if not target or not query:
        return False

    canonical_hit = canonicalize(query) in canonicalize(target)
    literal_hit = query.lower() in target.lower()
    return canonical_hit or literal_hit
