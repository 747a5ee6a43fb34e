# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenization and delimiter splitting for the Stampede context resolver.

`split_segments()` walks the raw argument vector lazily and yields `Segment`
objects. A segment starts at the beginning of input and after every token that
exactly matches one of the configured delimiters; the delimiter itself is
dropped. Empty segments (leading, trailing or doubled delimiters) are skipped.

Each token is classified syntactically:
- `DELIMITER`: exact match of a configured delimiter literal
- `FLAG`: starts with `-` or `--`, is not a bare `-`, and is not a negative number
- `VALUE`: everything else

Whether a flag token actually resolves is decided later, against the flag
store scope that is active when the resolver reaches it.

Example:
    >>> [s.texts for s in split_segments(["a", "-x", "+", "b"], delimiters=["+"])]
    [['a', '-x'], ['b']]
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Sequence

NEGATIVE_NUMBER = re.compile(r"^-\d+(\.\d+)?([eE][-+]?\d+)?$")


class TokenKind(Enum):
    FLAG = "flag"
    VALUE = "value"
    DELIMITER = "delimiter"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    One classified command-line token.

    Attributes:
        text (str): The raw token.
        kind (TokenKind): Syntactic classification.
        position (int): Index in the original argument vector.
        name (str): Flag part of a flag token (text before `=`), else the text.
        inline_value (str | None): Value after `=` in `--name=value`.
    """

    text: str
    kind: TokenKind
    position: int
    name: str = ""
    inline_value: str | None = None

    @property
    def is_bundle(self) -> bool:
        """True for single-dash tokens grouping several short flags, e.g. `-vvv`."""
        return (
            self.kind is TokenKind.FLAG
            and not self.name.startswith("--")
            and len(self.name) > 2
            and self.inline_value is None
        )


@dataclass
class Segment:
    """A delimiter-bounded run of tokens."""

    index: int
    tokens: list[Token] = field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        return [token.text for token in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)


def is_flag_text(text: str) -> bool:
    return text.startswith("-") and text != "-" and not NEGATIVE_NUMBER.match(text)


def classify(text: str, position: int, delimiters: Sequence[str] = ()) -> Token:
    """Classify a single token."""
    if text in delimiters:
        return Token(text=text, kind=TokenKind.DELIMITER, position=position, name=text)
    if is_flag_text(text):
        name, separator, value = text.partition("=")
        return Token(
            text=text,
            kind=TokenKind.FLAG,
            position=position,
            name=name,
            inline_value=value if separator else None,
        )
    return Token(text=text, kind=TokenKind.VALUE, position=position, name=text)


def tokenize(args: Iterable[str], delimiters: Sequence[str] = ()) -> Iterator[Token]:
    """Classify every token of `args` lazily."""
    for position, text in enumerate(args):
        yield classify(text, position, delimiters)


def split_segments(
    args: Iterable[str], delimiters: Sequence[str] = ()
) -> Iterator[Segment]:
    """
    Yield the delimiter-bounded segments of `args`.

    Args:
        args (Iterable[str]): Raw argument vector, program name excluded.
        delimiters (Sequence[str]): Literal tokens that end a segment.
    """
    index = 0
    current = Segment(index=index)
    for token in tokenize(args, delimiters):
        if token.kind is TokenKind.DELIMITER:
            if current.tokens:
                yield current
                index += 1
            current = Segment(index=index)
            continue
        current.tokens.append(token)
    if current.tokens:
        yield current
