"""
Token-oriented text I/O для контейнеров.
"""

from src.core.io.token_stream import (
    TokenReader,
    TokenSource,
    as_token_reader,
    convert_tokens,
)

__all__ = [
    "TokenReader",
    "TokenSource",
    "as_token_reader",
    "convert_tokens",
]
