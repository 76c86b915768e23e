"""
Structural predicates over a WordBuffer.

These answer the questions every Porter rule asks: is a position a
consonant, does the stem contain a vowel, does it end in a double
consonant or a consonant-vowel-consonant triple, and what is its measure.

The measure m of a stem written as [C](VC)^m[V] counts its VC pairs:

    tr, ee, tree, y, by          m=0
    trouble, oats, trees, ivy    m=1
    troubles, private, oaten     m=2
"""

from lexistem.buffer import WordBuffer

VOWELS = frozenset("aeiou")

# A final consonant in one of these never triggers the silent-e rule.
NON_CVC_ENDINGS = frozenset("wxy")


def is_consonant(buf: WordBuffer, i: int) -> bool:
    """
    True if position i holds a consonant.

    ``y`` is a consonant at position 0 and after a vowel, and a vowel after
    a consonant. Anything that is not a lowercase vowel (digits,
    punctuation, uppercase, positions outside the buffer) counts as a
    consonant.
    """
    ch = buf.at(i)
    if ch in VOWELS:
        return False
    if ch != "y":
        return True
    # Walk back over the run of y's; classes alternate along it.
    run = 0
    pos = i
    while pos > 0 and buf.at(pos - 1) == "y":
        pos -= 1
        run += 1
    if pos == 0:
        first_is_consonant = True
    else:
        first_is_consonant = not is_consonant(buf, pos - 1)
    return first_is_consonant if run % 2 == 0 else not first_is_consonant


def vowel_in_stem(buf: WordBuffer) -> bool:
    """True if any position in [0, j] is a vowel."""
    return any(not is_consonant(buf, i) for i in range(buf.j + 1))


def is_double_consonant(buf: WordBuffer, pos: int) -> bool:
    """True if pos and pos-1 hold the same consonant."""
    if pos < 1:
        return False
    ch = buf.at(pos)
    if ch is None or ch != buf.at(pos - 1):
        return False
    return is_consonant(buf, pos)


def is_cvc(buf: WordBuffer, pos: int) -> bool:
    """
    True if pos-2, pos-1, pos are consonant-vowel-consonant and the last
    consonant is not w, x or y.

    Used to restore an e at the end of a short word: cav(e), lov(e),
    hop(e), crim(e), but snow, box, tray.
    """
    if pos < 2:
        return False
    if not is_consonant(buf, pos) or is_consonant(buf, pos - 1) or not is_consonant(buf, pos - 2):
        return False
    return buf.at(pos) not in NON_CVC_ENDINGS


def measure(buf: WordBuffer) -> int:
    """Number of VC sequences in [0, j]."""
    end = buf.j
    i = 0
    # Leading consonants
    while i <= end and is_consonant(buf, i):
        i += 1
    m = 0
    while i <= end:
        while i <= end and not is_consonant(buf, i):
            i += 1
        if i > end:
            break
        m += 1
        while i <= end and is_consonant(buf, i):
            i += 1
    return m
