"""
Lexistem MCP Server — expose stemming and keyword analysis as MCP tools.

Usage:
    python3 -m lexistem.mcp_server

Configuration comes from the LEXISTEM_* environment variables (see
lexistem.config). Logs go to stderr, or to LEXISTEM_LOG_FILE if set;
stdout carries the MCP protocol.

Add to an MCP client config:
    {
      "mcpServers": {
        "lexistem": {
          "command": "python3",
          "args": ["-m", "lexistem.mcp_server"],
          "env": {"LEXISTEM_STRICT": "0"}
        }
      }
    }
"""

import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from lexistem.config import AnalyzerConfig
from lexistem.errors import LexistemError
from lexistem.keywords import KeywordAnalyzer, top_keywords
from lexistem.stemmer import PorterStemmer
from lexistem.titles import extract_titles

logger = logging.getLogger(__name__)

mcp = FastMCP("lexistem")

# Lazy singleton
_analyzer: KeywordAnalyzer | None = None


def _setup_logging() -> None:
    log_file = os.environ.get("LEXISTEM_LOG_FILE")
    handler = logging.FileHandler(log_file, mode="a") if log_file else logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [lexistem] %(message)s",
        handlers=[handler],
    )


def _get_analyzer() -> KeywordAnalyzer:
    global _analyzer
    if _analyzer is None:
        config = AnalyzerConfig.from_env()
        logger.info(f"Analyzer initialized (strict={config.stemmer.strict}, min_word_length={config.min_word_length})")
        _analyzer = KeywordAnalyzer(config)
    return _analyzer


def _get_stemmer() -> PorterStemmer:
    return _get_analyzer().stemmer


@mcp.tool(name="stem", description="Reduce a lowercase English word to its Porter stem")
def stem_word(word: str) -> dict:
    """Stem one word."""
    try:
        return {"word": word, "stem": _get_stemmer().stem(word)}
    except LexistemError as e:
        return {"word": word, "error": str(e)}


@mcp.tool(name="stem_batch", description="Stem a list of lowercase English words")
def stem_batch(words: list[str]) -> dict:
    """Stem many words; invalid words (strict mode) are reported, not fatal."""
    stemmer = _get_stemmer()
    results = []
    errors = []
    for word in words:
        try:
            results.append({"word": word, "stem": stemmer.stem(word)})
        except LexistemError as e:
            errors.append({"word": word, "error": str(e)})
    return {"results": results, "errors": errors}


@mcp.tool(name="keywords", description="Rank the keywords of a text by stem frequency")
def keywords(text: str, limit: int = 10) -> dict:
    """Return the top keywords of text with their ranks."""
    analysis = _get_analyzer().analyze(text)
    try:
        top = top_keywords(analysis.keywords, limit)
    except LexistemError as e:
        return {"error": str(e)}
    return {
        "word_count": analysis.word_count,
        "keywords": [{"word": k.word, "rank": round(k.rank, 4)} for k in top],
    }


@mcp.tool(name="titles", description="Extract capitalised titles (names, proper phrases) from a text")
def titles(text: str) -> dict:
    """Return titles found in text with occurrence counts."""
    found = extract_titles(text)
    return {
        "titles": [{"text": t.text, "count": t.count} for t in found],
        "total": len(found),
    }


if __name__ == "__main__":
    _setup_logging()
    mcp.run()
