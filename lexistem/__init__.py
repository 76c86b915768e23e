"""
Lexistem — Porter stemming and keyword analysis for English text.

Usage:
    from lexistem import stem

    stem("caresses")     # "caress"
    stem("hopping")      # "hop"

    # Reject anything that is not lowercase a-z
    from lexistem import PorterStemmer, StemmerConfig
    strict = PorterStemmer(StemmerConfig(strict=True))

    # Rank the words of a document
    from lexistem import KeywordAnalyzer
    analysis = KeywordAnalyzer().analyze(text)
"""

from lexistem.stemmer import PorterStemmer, stem
from lexistem.config import StemmerConfig, AnalyzerConfig
from lexistem.errors import LexistemError, InvalidWordError, ConfigError
from lexistem.keywords import KeywordAnalyzer, KeywordAnalysis, Keyword, get_keywords
from lexistem.titles import Title, extract_titles

__all__ = [
    "PorterStemmer", "stem",
    "StemmerConfig", "AnalyzerConfig",
    "LexistemError", "InvalidWordError", "ConfigError",
    "KeywordAnalyzer", "KeywordAnalysis", "Keyword", "get_keywords",
    "Title", "extract_titles",
]
__version__ = "0.1.0"
