"""
Declarative suffix tables for steps 3, 4 and 5.

Each rule names the suffix it matches, the character it is dispatched on
(the character before the last one for steps 3 and 5, the last character
for step 4), the replacement, and the measure the remaining stem must
exceed. Tables are ordered: ``apply_first_match`` stops at the first rule
whose suffix matches, even if that rule's measure condition then fails.
That is why "rational" keeps its "ational" instead of falling through to
"tional".
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from lexistem.buffer import WordBuffer
from lexistem.classifier import measure


@dataclass(frozen=True)
class SuffixRule:
    suffix: str
    dispatch: str
    replacement: str = ""
    min_measure: int = 0            # measure() must be greater than this
    guard: Optional[Callable[[WordBuffer], bool]] = None

    def matches(self, buf: WordBuffer) -> bool:
        if not buf.match_suffix(self.suffix):
            return False
        return self.guard is None or self.guard(buf)


def _ion_guard(buf: WordBuffer) -> bool:
    # -ion is only removed after s or t: adoption, decision, but not onion
    return buf.j >= 0 and buf.at(buf.j) in ("s", "t")


STEP3_RULES = (
    SuffixRule("ational", "a", "ate"),
    SuffixRule("tional", "a", "tion"),
    SuffixRule("enci", "c", "ence"),
    SuffixRule("anci", "c", "ance"),
    SuffixRule("izer", "e", "ize"),
    SuffixRule("bli", "l", "ble"),
    SuffixRule("alli", "l", "al"),
    SuffixRule("entli", "l", "ent"),
    SuffixRule("eli", "l", "e"),
    SuffixRule("ousli", "l", "ous"),
    SuffixRule("ization", "o", "ize"),
    SuffixRule("ation", "o", "ate"),
    SuffixRule("ator", "o", "ate"),
    SuffixRule("alism", "s", "al"),
    SuffixRule("iveness", "s", "ive"),
    SuffixRule("fulness", "s", "ful"),
    SuffixRule("ousness", "s", "ous"),
    SuffixRule("aliti", "t", "al"),
    SuffixRule("iviti", "t", "ive"),
    SuffixRule("biliti", "t", "ble"),
    SuffixRule("logi", "g", "log"),
)

STEP4_RULES = (
    SuffixRule("icate", "e", "ic"),
    SuffixRule("ative", "e", ""),
    SuffixRule("alize", "e", "al"),
    SuffixRule("iciti", "i", "ic"),
    SuffixRule("ical", "l", "ic"),
    SuffixRule("ful", "l", ""),
    SuffixRule("ness", "s", ""),
)

STEP5_RULES = (
    SuffixRule("al", "a", min_measure=1),
    SuffixRule("ance", "c", min_measure=1),
    SuffixRule("ence", "c", min_measure=1),
    SuffixRule("er", "e", min_measure=1),
    SuffixRule("ic", "i", min_measure=1),
    SuffixRule("able", "l", min_measure=1),
    SuffixRule("ible", "l", min_measure=1),
    SuffixRule("ant", "n", min_measure=1),
    SuffixRule("ement", "n", min_measure=1),
    SuffixRule("ment", "n", min_measure=1),
    # element etc. not stripped before the m
    SuffixRule("ent", "n", min_measure=1),
    SuffixRule("ion", "o", min_measure=1, guard=_ion_guard),
    SuffixRule("ou", "o", min_measure=1),
    SuffixRule("ism", "s", min_measure=1),
    SuffixRule("ate", "t", min_measure=1),
    SuffixRule("iti", "t", min_measure=1),
    SuffixRule("ous", "u", min_measure=1),
    SuffixRule("ive", "v", min_measure=1),
    SuffixRule("ize", "z", min_measure=1),
)


def conditional_replace(buf: WordBuffer, replacement: str, min_measure: int = 0) -> bool:
    """Replace the matched suffix only if measure() > min_measure."""
    if measure(buf) > min_measure:
        buf.apply_suffix(replacement)
        return True
    return False


def apply_first_match(buf: WordBuffer, rules: Sequence[SuffixRule], dispatch: Optional[str]) -> Optional[SuffixRule]:
    """
    Try the rules filed under ``dispatch`` in order and apply the first
    that matches, provided measure() exceeds its threshold.

    Returns the matched rule (applied or not), or None if nothing matched.
    """
    if dispatch is None:
        return None
    for rule in rules:
        if rule.dispatch != dispatch:
            continue
        if rule.matches(buf):
            conditional_replace(buf, rule.replacement, rule.min_measure)
            return rule
    return None
