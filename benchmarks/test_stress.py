#!/usr/bin/env python3
"""
Stress Testing Suite

Verifies the stemmer holds up at volume:
1. 200k words - throughput
2. Long words - no quadratic blow-up on ordinary input
3. Concurrent stemming - one shared stemmer, many threads

Run:
    pytest benchmarks/test_stress.py -v -s
"""

import os
import random
import string
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

# Add parent to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from lexistem import PorterStemmer, KeywordAnalyzer

SUFFIXES = ["", "s", "es", "ed", "ing", "ational", "ization", "ness", "ful", "ment", "ive", "ly"]


def make_words(n: int, seed: int = 0) -> list[str]:
    rng = random.Random(seed)
    words = []
    for _ in range(n):
        root = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(2, 9)))
        words.append(root + rng.choice(SUFFIXES))
    return words


class TestThroughput:
    def test_bulk_stemming(self):
        """Stem 200k words and report words/second."""
        stemmer = PorterStemmer()
        words = make_words(200_000)

        start = time.time()
        stems = stemmer.stem_words(words)
        elapsed = time.time() - start

        print(f"\n  Stemmed {len(words):,} words in {elapsed:.2f}s ({len(words) / elapsed:,.0f} words/s)")
        assert len(stems) == len(words)
        assert all(len(s) <= len(w) for s, w in zip(stems, words))

    def test_long_words(self):
        """Words of a few hundred letters stay fast."""
        stemmer = PorterStemmer()
        words = make_words(200, seed=1)
        long_words = [w * 40 for w in words]

        start = time.time()
        for w in long_words:
            stemmer.stem(w)
        elapsed = time.time() - start

        print(f"\n  {len(long_words)} long words in {elapsed:.3f}s")
        assert elapsed < 10.0

    def test_analyzer_volume(self):
        """Analyze a ~100k word document."""
        words = make_words(100_000, seed=2)
        sentences = [" ".join(words[i:i + 12]).capitalize() + "." for i in range(0, len(words), 12)]
        text = "\n\n".join(" ".join(sentences[i:i + 8]) for i in range(0, len(sentences), 8))

        start = time.time()
        analysis = KeywordAnalyzer().analyze(text)
        elapsed = time.time() - start

        print(f"\n  Analyzed {analysis.word_count:,} words in {elapsed:.2f}s, {len(analysis.keywords):,} stems")
        assert analysis.word_count == len(words)


class TestConcurrentStemming:
    def test_threads_agree_with_sequential(self):
        stemmer = PorterStemmer()
        chunks = [make_words(10_000, seed=s) for s in range(8)]
        expected = [stemmer.stem_words(c) for c in chunks]

        start = time.time()
        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(stemmer.stem_words, c): i for i, c in enumerate(chunks)}
            for future in as_completed(futures):
                assert future.result() == expected[futures[future]]
        elapsed = time.time() - start

        print(f"\n  {sum(len(c) for c in chunks):,} words across 8 threads in {elapsed:.2f}s")
