"""
Tests for the suffix rule tables as data, and the first-match routine.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from lexistem.buffer import WordBuffer
from lexistem.rules import (
    STEP3_RULES,
    STEP4_RULES,
    STEP5_RULES,
    SuffixRule,
    apply_first_match,
    conditional_replace,
)


class TestTables:
    def test_step3_dispatch_on_penultimate_char(self):
        for rule in STEP3_RULES:
            assert rule.dispatch == rule.suffix[-2], rule

    def test_step5_dispatch_on_penultimate_char(self):
        for rule in STEP5_RULES:
            assert rule.dispatch == rule.suffix[-2], rule

    def test_step4_dispatch_on_last_char(self):
        for rule in STEP4_RULES:
            assert rule.dispatch == rule.suffix[-1], rule

    def test_thresholds(self):
        assert all(r.min_measure == 0 for r in STEP3_RULES + STEP4_RULES)
        assert all(r.min_measure == 1 for r in STEP5_RULES)
        assert all(r.replacement == "" for r in STEP5_RULES)

    def test_longer_suffix_precedes_its_tail(self):
        # Within a dispatch group a suffix must come before any rule whose
        # suffix is a proper tail of it, or the longer one is unreachable.
        for table in (STEP3_RULES, STEP4_RULES, STEP5_RULES):
            suffixes = [r.suffix for r in table]
            for i, longer in enumerate(suffixes):
                for shorter in suffixes[:i]:
                    assert not longer.endswith(shorter), (longer, shorter)

    def test_step3_table(self):
        pairs = {r.suffix: r.replacement for r in STEP3_RULES}
        assert pairs["ational"] == "ate"
        assert pairs["tional"] == "tion"
        assert pairs["bli"] == "ble"
        assert pairs["logi"] == "log"
        assert len(STEP3_RULES) == 21

    def test_step4_table(self):
        pairs = {r.suffix: r.replacement for r in STEP4_RULES}
        assert pairs == {
            "icate": "ic", "ative": "", "alize": "al", "iciti": "ic",
            "ical": "ic", "ful": "", "ness": "",
        }

    def test_only_ion_is_guarded(self):
        guarded = [r.suffix for r in STEP5_RULES if r.guard is not None]
        assert guarded == ["ion"]


class TestConditionalReplace:
    def test_applies_when_measure_positive(self):
        buf = WordBuffer("relational")
        assert buf.match_suffix("ational")
        assert conditional_replace(buf, "ate")
        assert buf.stem == "relate"

    def test_noop_when_measure_zero(self):
        buf = WordBuffer("rational")
        assert buf.match_suffix("ational")
        assert not conditional_replace(buf, "ate")
        assert buf.stem == "rational"


class TestApplyFirstMatch:
    def test_first_match_stops_even_if_not_applied(self):
        buf = WordBuffer("rational")
        rule = apply_first_match(buf, STEP3_RULES, "a")
        assert rule.suffix == "ational"
        assert buf.stem == "rational"

    def test_no_match_returns_none(self):
        buf = WordBuffer("hopping")
        assert apply_first_match(buf, STEP3_RULES, "n") is None
        assert buf.stem == "hopping"

    def test_missing_dispatch_char(self):
        buf = WordBuffer("x")
        assert apply_first_match(buf, STEP5_RULES, None) is None

    def test_other_groups_ignored(self):
        # "ational" is filed under "a"; dispatching on "o" never reaches it
        buf = WordBuffer("relational")
        assert apply_first_match(buf, STEP3_RULES, "o") is None
        assert buf.stem == "relational"

    def test_guard_failure_falls_through(self):
        buf = WordBuffer("onion")
        assert apply_first_match(buf, STEP5_RULES, "o") is None
        assert buf.stem == "onion"

    @pytest.mark.parametrize("word,expected", [
        ("adoption", "adopt"),
        ("decision", "decis"),
    ])
    def test_ion_after_s_or_t(self, word, expected):
        buf = WordBuffer(word)
        rule = apply_first_match(buf, STEP5_RULES, "o")
        assert rule.suffix == "ion"
        assert buf.stem == expected

    def test_custom_rule(self):
        rules = (SuffixRule("ship", "i", min_measure=0),)
        buf = WordBuffer("friendship")
        apply_first_match(buf, rules, "i")
        assert buf.stem == "friend"
