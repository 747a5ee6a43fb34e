"""
Stampede CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parse_result import ParseOutcome, ParseResult
from .resolver import ContextResolver, ResolverState, define_builtin_flags
from .tokens import Segment, Token, TokenKind, split_segments, tokenize

__all__ = [
    "ContextResolver",
    "ParseOutcome",
    "ParseResult",
    "ResolverState",
    "Segment",
    "Token",
    "TokenKind",
    "define_builtin_flags",
    "split_segments",
    "tokenize",
]
