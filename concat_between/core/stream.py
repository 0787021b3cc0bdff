"""Token source interface and concrete token sources.

WHY: The concatenation filter pulls tokens one at a time from whatever
sits upstream, and is itself pulled by whatever sits downstream. A
single small interface lets sources and filters chain freely.

HOW: TokenStream is an ABC with next_token(), reset(), and end().
Iteration is layered on top of next_token(). Two sources ship with the
package:
  ListTokenStream     — replays a fixed list of tokens
  WhitespaceTokenizer — splits text on whitespace runs

RULES:
- next_token() returns None once the source is exhausted
- reset() rewinds to the start of the source
- end() returns the final offset; only meaningful after exhaustion
- Exceptions raised by a source propagate unchanged through filters
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from concat_between.config import DEFAULT_TOKEN_TYPE
from concat_between.core.ir import Token

_NON_WHITESPACE_RE = re.compile(r"\S+")


class TokenStream(ABC):
    """Abstract pull-based token source.

    To add a new source or filter:
    1. Subclass TokenStream
    2. Implement next_token() and reset()
    3. Override end() if the final offset is not 0
    """

    @abstractmethod
    def next_token(self) -> Optional[Token]:
        """Return the next token, or None at end of stream."""

    @abstractmethod
    def reset(self) -> None:
        """Rewind to the start of the stream."""

    def end(self) -> int:
        """Final offset of the stream, read after the last token."""
        return 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


class ListTokenStream(TokenStream):
    """Replays a fixed token list; useful for tests and pre-tokenized input."""

    def __init__(self, tokens: Iterable[Token], final_offset: Optional[int] = None) -> None:
        self._tokens: List[Token] = list(tokens)
        self._index = 0
        if final_offset is None:
            final_offset = self._tokens[-1].end_offset if self._tokens else 0
        self._final_offset = final_offset

    def next_token(self) -> Optional[Token]:
        if self._index >= len(self._tokens):
            return None
        token = self._tokens[self._index]
        self._index += 1
        return token

    def reset(self) -> None:
        self._index = 0

    def end(self) -> int:
        return self._final_offset


class WhitespaceTokenizer(TokenStream):
    """Split text into tokens at runs of whitespace.

    RULES:
    - Every token has type "word", position increment 1, position length 1
    - Offsets are character indexes into the original text
    - Final offset is len(text)
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._matches = _NON_WHITESPACE_RE.finditer(text)

    def next_token(self) -> Optional[Token]:
        match = next(self._matches, None)
        if match is None:
            return None
        return Token(
            text=match.group(),
            start_offset=match.start(),
            end_offset=match.end(),
            type=DEFAULT_TOKEN_TYPE,
        )

    def reset(self) -> None:
        self._matches = _NON_WHITESPACE_RE.finditer(self._text)

    def end(self) -> int:
        return len(self._text)
