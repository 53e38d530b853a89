"""Word tokenization shared by section search on databases without a text index."""

import re

# SQL name of search_text once registered on a SQLite connection
SEARCH_TEXT_FUNCTION = "lexcards_search_text"

_TOKEN_PATTERN = re.compile(r"\w+")


def search_tokens(query: str) -> list[str]:
    """Lowercased word tokens of a search string."""
    return _TOKEN_PATTERN.findall(query.lower())


def search_text(value: str | None) -> str | None:
    """
    Normalize a column value for token matching.

    Tokens come out lowercased and joined by single spaces, with one
    space on each side, so `` token `` only matches a whole word.
    """
    if value is None:
        return None
    return f" {' '.join(search_tokens(value))} "
