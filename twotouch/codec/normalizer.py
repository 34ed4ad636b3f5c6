"""Character folding ahead of symbol lookup."""

import jaconv

# Combining and half-width marks are folded onto their full-width spacing forms.
MARK_ALIASES = {
    "\u3099": "゛",
    "\u309a": "゜",
    "\uff9e": "゛",
    "\uff9f": "゜",
    "\uff70": "ー",
}


def fold_character(ch: str) -> str:
    """Map a single character onto the hiragana form the symbol table knows.

    Half-width katakana is widened first, then katakana is folded to
    hiragana.  The result is always exactly one character so that positions
    reported for the original text stay valid.

    Args:
        ch: One character of input text

    Returns:
        The folded character (unchanged if there is nothing to fold)
    """
    if ch in MARK_ALIASES:
        return MARK_ALIASES[ch]
    if "\uff61" <= ch <= "\uff9f":
        ch = jaconv.h2z(ch, kana=True, ascii=False, digit=False)
    return jaconv.kata2hira(ch)


def fold_digits(digits: str) -> str:
    """Fold full-width digits (０-９) to ASCII, leaving everything else alone."""
    return jaconv.z2h(digits, kana=False, ascii=False, digit=True)
