"""
Configuration for the stemmer and the keyword analyzer.

Defaults reproduce the classic Porter behaviour. Every field can be
overridden from the environment via ``from_env()``:

    LEXISTEM_STRICT=1            reject words with characters outside a-z
    LEXISTEM_MIN_WORD_LENGTH=3   shortest word that counts towards ranking
    LEXISTEM_USE_STOPWORDS=1     drop common English stopwords from ranking
    LEXISTEM_RANK_LIMIT=10       keep only the top N keywords
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from lexistem.errors import ConfigError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class StemmerConfig:
    """Stemmer settings.

    strict: raise InvalidWordError for words with characters outside a-z
            instead of classifying them as consonants.
    """

    strict: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "StemmerConfig":
        env = os.environ if env is None else env
        return cls(strict=_env_bool(env, "LEXISTEM_STRICT", False))


@dataclass(frozen=True)
class AnalyzerConfig:
    """Keyword analyzer settings."""

    min_word_length: int = 3
    use_stopwords: bool = True
    rank_limit: Optional[int] = None
    stemmer: StemmerConfig = field(default_factory=StemmerConfig)

    def __post_init__(self):
        if self.min_word_length < 1:
            raise ConfigError(f"min_word_length must be >= 1, got {self.min_word_length}")
        if self.rank_limit is not None and self.rank_limit < 0:
            raise ConfigError(f"rank_limit must be >= 0, got {self.rank_limit}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AnalyzerConfig":
        env = os.environ if env is None else env
        return cls(
            min_word_length=_env_int(env, "LEXISTEM_MIN_WORD_LENGTH", 3),
            use_stopwords=_env_bool(env, "LEXISTEM_USE_STOPWORDS", True),
            rank_limit=_env_int(env, "LEXISTEM_RANK_LIMIT", None),
            stemmer=StemmerConfig.from_env(env),
        )
