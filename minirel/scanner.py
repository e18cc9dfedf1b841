"""Classification of scanned words and quoted strings."""

from __future__ import annotations

from enum import Enum

# Words this long or longer are rejected by the scanner.
MAX_TOKEN_LEN = 50


class Keyword(Enum):
    """Reserved words of the query language."""

    SELECT = "select"
    INSERT = "insert"
    DELETE = "delete"
    CREATE = "create"
    DESTROY = "destroy"
    BUILD = "buildindex"
    REBUILD = "rebuildindex"
    DROP = "dropindex"
    LOAD = "load"
    PRINT = "print"
    HELP = "help"
    QUIT = "quit"
    INTO = "into"
    WHERE = "where"
    PRIMARY = "primary"
    NUMBUCKETS = "numbuckets"
    ALL = "all"
    FROM = "from"
    AS = "as"
    TABLE = "table"
    AND = "and"
    OR = "or"
    NOT = "not"
    VALUES = "values"
    INT_TYPE = "int"
    REAL_TYPE = "real"
    CHAR_TYPE = "char"


_KEYWORDS = {keyword.value: keyword for keyword in Keyword}


class TokenTooLongError(ValueError):
    """A word is too long to be a token."""


def _lower_ascii(word: str) -> str:
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in word
    )


def classify_word(word: str) -> Keyword | str:
    """Return the reserved word ``word`` spells, or ``word`` itself.

    Reserved words are recognised regardless of case. A word of
    MAX_TOKEN_LEN characters or more raises TokenTooLongError.
    """
    if len(word) >= MAX_TOKEN_LEN:
        raise TokenTooLongError(
            f"token longer than {MAX_TOKEN_LEN - 1} characters: {word[:MAX_TOKEN_LEN]}..."
        )
    keyword = _KEYWORDS.get(_lower_ascii(word))
    if keyword is not None:
        return keyword
    return word


def unquote(qstring: str) -> str:
    """Strip the opening and closing quote from a quoted string."""
    if len(qstring) < 2:
        raise ValueError(f"not a quoted string: {qstring!r}")
    return qstring[1:-1]