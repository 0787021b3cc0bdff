"""Concatenation of token runs delimited by optional marker tokens.

WHY: Some fields need a span of tokens indexed as one term, e.g. a part
number tokenized on spaces or a phrase wrapped in <concat> markers.
ConcatenateBetweenFilter merges such runs into a single "shingle" token
while passing every other token through untouched.

HOW: A two-mode state machine pulls from the input stream:
  Normal mode        — tokens pass through until the start marker is seen
  Concatenating mode — tokens are folded into a merged-token builder until
                       the end marker is seen or the input runs out
With no start marker the filter begins in Concatenating mode, so the whole
stream (or everything up to the first end marker) becomes one token. An
excluded end marker is parked in a one-slot buffer and emitted on the
following call, right after the merged token it closed.

RULES:
- Marker matching is exact text equality; an empty marker never matches
- The separator goes between sub-tokens, never before the first one
- Merged offsets span first to last constituent (markers included when
  handled as include); position increment comes from the first
  constituent; position length is always 1; type is "shingle"
- A run still open at end of input is emitted, never dropped
- When start and end marker are the same text, each occurrence toggles
  the mode: start rules apply in Normal mode, end rules while concatenating
- An end marker closing an empty run: include emits the marker alone,
  exclude emits it unchanged, drop emits nothing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from concat_between.config import CONCATENATED_TOKEN_TYPE
from concat_between.core.ir import Token, TokenHandling
from concat_between.core.stream import TokenStream

logger = logging.getLogger(__name__)


@dataclass
class _MergedTokenBuilder:
    """In-progress concatenated token, seeded from its first constituent."""

    start_offset: int
    end_offset: int
    position_increment: int
    parts: List[str] = field(default_factory=list)

    @classmethod
    def start(cls, token: Token) -> _MergedTokenBuilder:
        return cls(
            start_offset=token.start_offset,
            end_offset=token.end_offset,
            position_increment=token.position_increment,
            parts=[token.text],
        )

    def append(self, token: Token) -> None:
        self.parts.append(token.text)
        self.end_offset = token.end_offset

    def build(self, separator: str) -> Token:
        return Token(
            text=separator.join(self.parts),
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            position_increment=self.position_increment,
            position_length=1,
            type=CONCATENATED_TOKEN_TYPE,
        )


class ConcatenateBetweenFilter(TokenStream):
    """Concatenate all tokens between a start token and an end token.

    Examples:
      Defaults:
        the quick brown fox => "the quick brown fox"
      start_token="<concat>", end_token="</concat>":
        the <concat> quick brown </concat> fox => the, "quick brown", fox
      start_token="START", start_token_handling="exclude":
        the START quick brown fox => the, START, "quick brown fox"
      separator="_", start_token="^", end_token="$",
      start_token_handling="include", end_token_handling="exclude":
        ^ the $ ^ quick brown $ fox => ^_the, $, ^_quick_brown, $, fox

    Args:
        input: Upstream token stream.
        separator: Text inserted between concatenated tokens.
        start_token: If set, only tokens after it are concatenated. If empty,
            concatenation starts at the beginning of the stream.
        end_token: If set, concatenation stops at it. If empty, a run lasts
            until the end of the stream.
        start_token_handling: include, exclude or drop (default) for the
            start marker.
        end_token_handling: include, exclude or drop (default) for the
            end marker.

    Raises:
        ConfigError: If a handling value is not include, exclude or drop.
    """

    def __init__(
        self,
        input: TokenStream,
        separator: str = " ",
        start_token: str = "",
        end_token: str = "",
        start_token_handling: str | TokenHandling = TokenHandling.drop,
        end_token_handling: str | TokenHandling = TokenHandling.drop,
    ) -> None:
        self._input = input
        self._separator = separator
        self._start_token = start_token
        self._end_token = end_token
        self._start_token_handling = TokenHandling.parse(start_token_handling)
        self._end_token_handling = TokenHandling.parse(end_token_handling)
        self._reset_state()

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def start_token(self) -> str:
        return self._start_token

    @property
    def end_token(self) -> str:
        return self._end_token

    @property
    def start_token_handling(self) -> TokenHandling:
        return self._start_token_handling

    @property
    def end_token_handling(self) -> TokenHandling:
        return self._end_token_handling

    def _reset_state(self) -> None:
        self._concatenating = not self._start_token
        self._accumulator: Optional[_MergedTokenBuilder] = None
        self._pending: Optional[Token] = None
        self._exhausted = False

    def reset(self) -> None:
        self._input.reset()
        self._reset_state()

    def end(self) -> int:
        return self._input.end()

    def next_token(self) -> Optional[Token]:
        if self._pending is not None:
            token, self._pending = self._pending, None
            return token

        if self._exhausted:
            return None

        while True:
            token = self._input.next_token()
            if token is None:
                self._exhausted = True
                # Input ended without an end marker; flush the open run
                return self._finish_run()

            if self._concatenating:
                output = self._continue_concatenating(token)
            else:
                output = self._handle_normally(token)

            if output is not None:
                return output

    def _handle_normally(self, token: Token) -> Optional[Token]:
        """Pass tokens through until the start marker switches modes.

        Returns the token to emit, or None to keep pulling.
        """
        if not self._start_token or token.text != self._start_token:
            return token

        self._concatenating = True
        if self._start_token_handling is TokenHandling.include:
            self._accumulator = _MergedTokenBuilder.start(token)
            return None
        if self._start_token_handling is TokenHandling.exclude:
            return token
        return None

    def _continue_concatenating(self, token: Token) -> Optional[Token]:
        """Fold tokens into the current run until the end marker closes it.

        Returns the token to emit, or None to keep pulling.
        """
        if not self._end_token or token.text != self._end_token:
            self._fold(token)
            return None

        if self._end_token_handling is TokenHandling.include:
            self._fold(token)
        merged = self._finish_run()
        if self._end_token_handling is TokenHandling.exclude:
            if merged is None:
                return token
            self._pending = token
        return merged

    def _fold(self, token: Token) -> None:
        if self._accumulator is None:
            self._accumulator = _MergedTokenBuilder.start(token)
        else:
            self._accumulator.append(token)

    def _finish_run(self) -> Optional[Token]:
        """Close the current run and return its merged token, if any."""
        self._concatenating = False
        if self._accumulator is None:
            return None
        merged = self._accumulator.build(self._separator)
        self._accumulator = None
        logger.debug(
            "Concatenated token %r [%d:%d]",
            merged.text, merged.start_offset, merged.end_offset,
        )
        return merged
