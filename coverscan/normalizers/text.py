"""
Line and word normalization shared by the cover heuristics.
"""

import unicodedata

# Decorations stripped from anywhere in a recognized line
DECORATION_CHARS = ("•", '"', "“", "”")


def is_punctuation(char: str) -> bool:
    """True for any Unicode punctuation character (categories Pc..Po)."""
    return unicodedata.category(char).startswith("P")


def trim_punctuation(text: str) -> str:
    """Remove leading and trailing punctuation, keeping inner punctuation."""
    start, end = 0, len(text)
    while start < end and is_punctuation(text[start]):
        start += 1
    while end > start and is_punctuation(text[end - 1]):
        end -= 1
    return text[start:end]


def split_lines(text: str) -> list[str]:
    """Split on newlines, trim each line and drop empty ones."""
    lines = (line.strip() for line in text.splitlines())
    return [line for line in lines if line]


def split_words(text: str) -> list[str]:
    return text.split()


def clean_line(line: str) -> str:
    """Strip bullets and double quotes, then trim punctuation and whitespace."""
    for char in DECORATION_CHARS:
        line = line.replace(char, "")
    return trim_punctuation(line).strip()


def is_all_caps(text: str) -> bool:
    return text == text.upper()


def capitalize_name(word: str) -> str:
    """First letter upper case, the rest lower case ("ZEVIN" -> "Zevin")."""
    return word[:1].upper() + word[1:].lower()
