"""
Text helpers: integer extraction from noisy labels and whitespace cleanup.
"""

from __future__ import annotations

import re
from typing import Optional

# Last run of digits, thousands separators allowed ("1,234").
_COUNT_TOKEN = re.compile(r"[0-9][0-9,]*")
_NON_DIGIT = re.compile(r"[^0-9]")
_PAGE_TOKEN = re.compile(r"[0-9]+")


def parse_integer(text: Optional[str]) -> Optional[int]:
    """
    Pull the count out of a label such as "1,234 results".

    Takes the last number in the text, drops its non-digit characters and
    parses the rest. Returns None when the text holds no digits.
    """
    if not text:
        return None
    tokens = _COUNT_TOKEN.findall(text)
    if not tokens:
        return None
    digits = _NON_DIGIT.sub("", tokens[-1])
    if not digits:
        return None
    return int(digits)


def extract_integer(text: Optional[str]) -> int:
    """Like `parse_integer`, but 0 stands in for "no number found"."""
    value = parse_integer(text)
    return 0 if value is None else value


def trailing_integer(label: Optional[str]) -> Optional[int]:
    """Parse the last whitespace-separated token of `label` as an int."""
    if not label:
        return None
    parts = label.split()
    if not parts:
        return None
    token = parts[-1]
    if not _PAGE_TOKEN.fullmatch(token):
        return None
    return int(token)


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace: collapse multiples, trim."""
    text = re.sub(r"\s+", " ", text)
    return text.strip()
