"""Display width measurement and fixed-width chunking.

Width is counted per code point: every scalar is one column, and scalars
belonging to the Han, Hiragana, Katakana or Hangul scripts count as two.
Other wide characters (full-width Latin, emoji) are deliberately measured
as one column.
"""

from __future__ import annotations

from bisect import bisect_right

import grapheme


# ---------------------------------------------------------------------------
# Wide script ranges (inclusive, sorted, non-overlapping)
# ---------------------------------------------------------------------------

_WIDE_RANGES: tuple[tuple[int, int], ...] = (
    (0x1100, 0x11FF),    # Hangul Jamo
    (0x2E80, 0x2E99),    # CJK Radicals Supplement
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),    # Kangxi Radicals
    (0x3005, 0x3005),    # ideographic iteration mark
    (0x3007, 0x3007),    # ideographic number zero
    (0x3021, 0x3029),    # Hangzhou numerals
    (0x302E, 0x302F),    # Hangul tone marks
    (0x3038, 0x303B),
    (0x3041, 0x3096),    # Hiragana
    (0x309D, 0x309F),
    (0x30A1, 0x30FA),    # Katakana
    (0x30FD, 0x30FF),
    (0x3131, 0x318E),    # Hangul Compatibility Jamo
    (0x31F0, 0x321E),    # Katakana Phonetic Extensions, parenthesized Hangul
    (0x3260, 0x327E),    # circled Hangul
    (0x32D0, 0x32FE),    # circled Katakana
    (0x3300, 0x3357),    # squared Katakana
    (0x3400, 0x4DBF),    # CJK Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xA960, 0xA97C),    # Hangul Jamo Extended-A
    (0xAC00, 0xD7A3),    # Hangul Syllables
    (0xD7B0, 0xD7C6),    # Hangul Jamo Extended-B
    (0xD7CB, 0xD7FB),
    (0xF900, 0xFA6D),    # CJK Compatibility Ideographs
    (0xFA70, 0xFAD9),
    (0xFF66, 0xFF6F),    # halfwidth Katakana
    (0xFF71, 0xFF9D),
    (0xFFA0, 0xFFBE),    # halfwidth Hangul
    (0xFFC2, 0xFFC7),
    (0xFFCA, 0xFFCF),
    (0xFFD2, 0xFFD7),
    (0xFFDA, 0xFFDC),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x1AFF0, 0x1B122),  # Kana Extended-B, Kana Supplement, Kana Extended-A
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),  # Small Kana Extension
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),
    (0x1F200, 0x1F200),  # square hiragana hoka
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2EE5D),  # CJK Extensions C-I
    (0x2F800, 0x2FA1D),  # CJK Compatibility Ideographs Supplement
    (0x30000, 0x323AF),  # CJK Extensions G-H
)

_RANGE_STARTS = tuple(start for start, _ in _WIDE_RANGES)


def is_wide_char(ch: str) -> bool:
    """Return ``True`` if the single character *ch* occupies two columns."""
    cp = ord(ch)
    if cp < 0x1100:
        return False
    i = bisect_right(_RANGE_STARTS, cp) - 1
    return i >= 0 and cp <= _WIDE_RANGES[i][1]


def display_width(text: str) -> int:
    """Return the number of columns *text* occupies."""
    if not text:
        return 0
    if text.isascii():
        return len(text)
    return len(text) + sum(1 for ch in text if is_wide_char(ch))


# ---------------------------------------------------------------------------
# wrap_to_width
# ---------------------------------------------------------------------------

def wrap_to_width(text: str, width: int) -> list[str]:
    """Cut *text* into chunks no wider than *width* columns.

    Embedded newlines start a new chunk. Chunks are cut without regard to
    words, on grapheme cluster boundaries; a cluster wider than *width*
    gets a chunk of its own. A *width* of zero or less disables wrapping.
    """
    if width <= 0:
        return text.split("\n")

    result: list[str] = []
    for physical_line in text.split("\n"):
        if not physical_line:
            result.append("")
            continue

        current: list[str] = []
        current_width = 0
        for g in grapheme.graphemes(physical_line):
            g_width = display_width(g)
            if current and current_width + g_width > width:
                result.append("".join(current))
                current = []
                current_width = 0
            current.append(g)
            current_width += g_width
        result.append("".join(current))

    return result
