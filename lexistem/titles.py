"""
Title extraction.

Finds runs of capitalised words that look like names or titles
("Bank of America", "The Lord of the Rings", "Windows 11") and counts how
often each one occurs. Up to two short lowercase connectors (1-3 letters)
may sit between capitalised tokens.
"""

import re
from collections import Counter
from dataclasses import dataclass

# A capitalised (or numeric, or dotted) token of at least two characters.
_TOKEN = r"[A-Z.0-9][A-Za-z0-9]*?[.\-]*[A-Za-z0-9]+?"

TITLE_PATTERN = re.compile(
    r"(?:(?<=\s)|^)"
    + _TOKEN
    + r"(?:(?:[ \t][a-z]{1,3}){0,2}[ \t]" + _TOKEN + r"){1,4}"
    + r"(?=[.?!\s]|$)",
    re.MULTILINE,
)


@dataclass
class Title:
    text: str
    count: int


def extract_titles(text: str) -> list[Title]:
    """Return every title found in text with its count, in order of first appearance."""
    counts = Counter(m.group(0) for m in TITLE_PATTERN.finditer(text))
    return [Title(text=t, count=c) for t, c in counts.items()]
