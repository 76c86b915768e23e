"""
Tokenizers for keyword analysis.

The stemmer only accepts lowercase ASCII words, so this module is where raw
text gets cut down to that shape:

1. Paragraph splitting (blank lines)
2. Sentence splitting (runs of . ! ?)
3. Word extraction (ASCII letter runs, lowercased)
"""

import re

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")
_WORD = re.compile(r"[A-Za-z]+")

# Common English function words. They stem to themselves or to noise
# ("thi", "wa") and would otherwise dominate every ranking.
STOPWORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "also", "am",
    "an", "and", "any", "are", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "could", "did",
    "do", "does", "doing", "down", "during", "each", "few", "for", "from",
    "further", "had", "has", "have", "having", "he", "her", "here", "hers",
    "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is",
    "it", "its", "itself", "just", "me", "more", "most", "my", "myself", "no",
    "nor", "not", "now", "of", "off", "on", "once", "only", "or", "other",
    "our", "ours", "ourselves", "out", "over", "own", "same", "she", "should",
    "so", "some", "such", "than", "that", "the", "their", "theirs", "them",
    "themselves", "then", "there", "these", "they", "this", "those", "through",
    "to", "too", "under", "until", "up", "very", "was", "we", "were", "what",
    "when", "where", "which", "while", "who", "whom", "why", "will", "with",
    "would", "you", "your", "yours", "yourself", "yourselves",
})


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def split_sentences(paragraph: str) -> list[str]:
    """
    Split a paragraph into sentences on . ! and ? followed by whitespace.

    Terminal punctuation stays with its sentence.
    """
    sentences = []
    for part in _SENTENCE_END.split(paragraph.strip()):
        part = part.strip()
        if part:
            sentences.append(part)
    return sentences


def tokenize_words(text: str) -> list[str]:
    """
    Extract lowercase ASCII words.

    Digits, punctuation and non-ASCII letters act as separators, so every
    token satisfies the stemmer's a-z precondition.
    """
    return [w.lower() for w in _WORD.findall(text)]


def is_stopword(word: str) -> bool:
    return word in STOPWORDS
