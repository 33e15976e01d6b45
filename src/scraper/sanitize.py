"""Unicode punctuation to ASCII normalization for scraped text."""

from __future__ import annotations

_REPLACEMENTS: dict[str, str] = {
    # curly single quotes
    "\u2018": "'",
    "\u2019": "'",
    "\u201A": "'",
    "\u201B": "'",
    # curly double quotes
    "\u201C": '"',
    "\u201D": '"',
    "\u201E": '"',
    "\u201F": '"',
    # guillemets
    "\u00AB": '"',
    "\u00BB": '"',
    "\u2039": "'",
    "\u203A": "'",
    # en / em dash
    "\u2013": "-",
    "\u2014": "-",
    "\u2026": "...",
    "\u00A0": " ",
}

# Single pass: replaced text is never re-scanned, so sanitize() is idempotent.
_TRANSLATION = str.maketrans(_REPLACEMENTS)


def sanitize(text: str | None = "") -> str:
    """Replace typographic punctuation with its plain ASCII equivalent.

    ``None`` is treated as an empty string. Characters outside the
    replacement table (ASCII, accented letters, emoji) are left alone.
    """
    if not text:
        return ""
    return text.translate(_TRANSLATION)
