"""
Keyword analysis — rank the words of a text by stem frequency.

Pipeline:
1. Split text into paragraphs, sentences and lowercase words
2. Stem every word with the Porter stemmer
3. Count stems, skipping stopwords and very short words
4. Rank stems by share of counted words, label each with its most
   frequent surface form
5. Extract capitalised titles from the raw text

Usage:
    from lexistem import KeywordAnalyzer, get_keywords

    analysis = KeywordAnalyzer().analyze(text)
    for kw in analysis.keywords[:5]:
        print(f"{kw.word}: {kw.rank:.3f}")

    get_keywords(text, rank_limit=10)
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Optional

from lexistem.config import AnalyzerConfig
from lexistem.errors import ConfigError
from lexistem.stemmer import PorterStemmer
from lexistem.titles import Title, extract_titles
from lexistem.tokenizers import is_stopword, split_paragraphs, split_sentences, tokenize_words

logger = logging.getLogger(__name__)


@dataclass
class Word:
    text: str
    stem: str


@dataclass
class Sentence:
    words: list[Word] = field(default_factory=list)


@dataclass
class Paragraph:
    sentences: list[Sentence] = field(default_factory=list)


@dataclass
class Keyword:
    word: str
    rank: float     # share of counted words carrying this stem (0-1]


@dataclass
class KeywordAnalysis:
    content: str
    word_count: int
    keywords: list[Keyword]
    paragraphs: list[Paragraph]
    titles: list[Title]


class KeywordAnalyzer:
    """Builds a KeywordAnalysis for a block of text."""

    def __init__(self, config: Optional[AnalyzerConfig] = None, stemmer: Optional[PorterStemmer] = None):
        self.config = config or AnalyzerConfig()
        self.stemmer = stemmer or PorterStemmer(self.config.stemmer)

    def _counts_towards_rank(self, word: str) -> bool:
        if len(word) < self.config.min_word_length:
            return False
        if self.config.use_stopwords and is_stopword(word):
            return False
        return True

    def analyze(self, text: str) -> KeywordAnalysis:
        """
        Analyze text.

        Args:
            text: Raw text, any case and punctuation.

        Returns:
            KeywordAnalysis with keywords sorted by rank (highest first,
            ties in order of first appearance).
        """
        paragraphs = []
        stem_counts: Counter = Counter()
        surface_forms: dict[str, Counter] = defaultdict(Counter)
        word_count = 0
        ranked_count = 0

        for para_text in split_paragraphs(text):
            paragraph = Paragraph()
            for sentence_text in split_sentences(para_text):
                sentence = Sentence()
                for token in tokenize_words(sentence_text):
                    word = Word(text=token, stem=self.stemmer.stem(token))
                    sentence.words.append(word)
                    word_count += 1
                    if self._counts_towards_rank(token):
                        stem_counts[word.stem] += 1
                        surface_forms[word.stem][token] += 1
                        ranked_count += 1
                if sentence.words:
                    paragraph.sentences.append(sentence)
            if paragraph.sentences:
                paragraphs.append(paragraph)

        keywords = []
        if ranked_count:
            # Counter.most_common is stable, so ties keep first-seen order
            for stem_, count in stem_counts.most_common():
                label = surface_forms[stem_].most_common(1)[0][0]
                keywords.append(Keyword(word=label, rank=count / ranked_count))

        keywords = top_keywords(keywords, self.config.rank_limit)

        titles = extract_titles(text)
        logger.debug(
            f"Analyzed {word_count} words in {len(paragraphs)} paragraphs: "
            f"{len(stem_counts)} stems, {len(titles)} titles"
        )
        return KeywordAnalysis(
            content=text,
            word_count=word_count,
            keywords=keywords,
            paragraphs=paragraphs,
            titles=titles,
        )


def top_keywords(keywords: list[Keyword], limit: Optional[int]) -> list[Keyword]:
    """Return the first limit keywords; None keeps them all."""
    if limit is None:
        return keywords
    if limit < 0:
        raise ConfigError(f"rank_limit must be >= 0, got {limit}")
    return keywords[:limit]


def get_keywords(text: str, rank_limit: Optional[int] = None, config: Optional[AnalyzerConfig] = None) -> list[str]:
    """Return the keywords of text, best first, optionally only the top rank_limit."""
    analysis = KeywordAnalyzer(config).analyze(text)
    return [k.word for k in top_keywords(analysis.keywords, rank_limit)]
