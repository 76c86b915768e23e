"""
Porter stemmer.

Reduces a lowercase English word to its stem by running six ordered rule
passes over a WordBuffer:

    step1  plurals and -ed / -ing         caresses -> caress, hopping -> hop
    step2  terminal y -> i                happy -> happi
    step3  double suffixes to single      relational -> relate
    step4  -ic-, -full, -ness etc.        hopeful -> hope
    step5  -ant, -ence etc. when m > 1    adjustment -> adjust
    step6  tidy up a final -e / -ll       rate -> rate, controll -> control

Based on M.F. Porter, 1980, "An algorithm for suffix stripping",
Program, Vol. 14, no. 3, pp 130-137, including the later "logi" and
"bli" departures of the reference implementation.

Usage:
    from lexistem import stem

    stem("ponies")       # "poni"
    stem("relational")   # "relat"
"""

import logging
import re
from typing import Iterable, Optional

from lexistem.buffer import WordBuffer
from lexistem.classifier import is_cvc, is_double_consonant, measure, vowel_in_stem
from lexistem.config import StemmerConfig
from lexistem.errors import InvalidWordError
from lexistem.rules import STEP3_RULES, STEP4_RULES, STEP5_RULES, apply_first_match

logger = logging.getLogger(__name__)

_INVALID_CHAR = re.compile(r"[^a-z]")

# Doubled consonants that step 1 keeps: falling -> fall, hissing -> hiss
_KEEP_DOUBLE = ("l", "s", "z")


def step1(buf: WordBuffer) -> None:
    """
    Remove plurals and -ed or -ing.

        caresses -> caress     feed     -> feed
        ponies   -> poni       agreed   -> agree
        ties     -> ti         disabled -> disable
        caress   -> caress     matting  -> mat
        cats     -> cat        mating   -> mate
    """
    if buf.last == "s":
        if buf.match_suffix("sses"):
            buf.truncate(buf.k - 2)
        elif buf.match_suffix("ies"):
            buf.apply_suffix("i")
        elif buf.at(buf.k - 1) != "s":
            buf.truncate(buf.k - 1)

    if buf.match_suffix("eed"):
        if measure(buf) > 0:
            buf.truncate(buf.k - 1)
    elif (buf.match_suffix("ed") or buf.match_suffix("ing")) and vowel_in_stem(buf):
        buf.truncate(buf.j)
        if buf.match_suffix("at"):
            buf.apply_suffix("ate")
        elif buf.match_suffix("bl"):
            buf.apply_suffix("ble")
        elif buf.match_suffix("iz"):
            buf.apply_suffix("ize")
        elif is_double_consonant(buf, buf.k):
            if buf.at(buf.k - 1) not in _KEEP_DOUBLE:
                buf.truncate(buf.k - 1)
        elif measure(buf) == 1 and is_cvc(buf, buf.k):
            buf.apply_suffix("e")


def step2(buf: WordBuffer) -> None:
    """Turn terminal y into i when there is another vowel in the stem."""
    if buf.match_suffix("y") and vowel_in_stem(buf):
        buf.set_last("i")


def step3(buf: WordBuffer) -> None:
    """Map double suffixes to single ones: -ization (-ize + -ation) -> -ize."""
    if buf.k == 0:
        return
    apply_first_match(buf, STEP3_RULES, buf.at(buf.k - 1))


def step4(buf: WordBuffer) -> None:
    """Handle -ic-, -full, -ness etc."""
    apply_first_match(buf, STEP4_RULES, buf.last)


def step5(buf: WordBuffer) -> None:
    """Take off -ant, -ence etc. in context <c>vcvc<v>."""
    if buf.k == 0:
        return
    apply_first_match(buf, STEP5_RULES, buf.at(buf.k - 1))


def step6(buf: WordBuffer) -> None:
    """Remove a final -e if m > 1, and reduce a final -ll to -l if m > 1."""
    buf.j = buf.k
    if buf.last == "e":
        m = measure(buf)
        if m > 1 or (m == 1 and not is_cvc(buf, buf.k - 1)):
            buf.truncate(buf.k - 1)
    if buf.last == "l" and is_double_consonant(buf, buf.k) and measure(buf) > 1:
        buf.truncate(buf.k - 1)


STEPS = (step1, step2, step3, step4, step5, step6)


class PorterStemmer:
    """
    Porter stemmer.

    Holds configuration only; every call works on its own WordBuffer, so a
    single instance can be shared between threads.
    """

    def __init__(self, config: Optional[StemmerConfig] = None):
        self.config = config or StemmerConfig()

    def validate(self, word: str) -> None:
        """Raise InvalidWordError if word has characters outside a-z."""
        bad = _INVALID_CHAR.search(word)
        if bad:
            logger.debug(f"Rejected {word!r}: bad character at {bad.start()}")
            raise InvalidWordError(word, bad.start())

    def stem(self, word: str) -> str:
        """
        Stem a single word.

        Words of length <= 2 are returned unchanged. In the default
        permissive mode no exception is raised for any input; characters
        other than a-z are treated as consonants.

        Args:
            word: A lowercase ASCII word.

        Returns:
            The stem, never longer than ``word``.

        Raises:
            InvalidWordError: in strict mode, if word is not all a-z.
        """
        if self.config.strict:
            self.validate(word)
        buf = WordBuffer(word)
        if buf.k > 1:
            for step in STEPS:
                step(buf)
        return buf.stem

    def stem_words(self, words: Iterable[str]) -> list[str]:
        """Stem each word in turn."""
        return [self.stem(w) for w in words]

    __call__ = stem


_default = PorterStemmer()


def stem(word: str) -> str:
    """Stem a word with the default (permissive) stemmer."""
    return _default.stem(word)
