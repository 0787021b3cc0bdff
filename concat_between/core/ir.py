"""Token value type and marker handling enumeration.

WHY: Every stage of the analysis chain passes tokens to the next. A
frozen dataclass means the token a filter is reading can never be the
token it is building, so merging never aliases upstream state.

HOW: Two types:
  Token         — one term with offsets, position metadata, and a type tag
  TokenHandling — what to do with a start/end marker token

RULES:
- start_offset <= end_offset, both non-negative character offsets
- position_increment >= 0, position_length >= 1
- Derived tokens are built with dataclasses.replace(), never mutated
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from concat_between.config import DEFAULT_TOKEN_TYPE, ConfigError


@dataclass(frozen=True)
class Token:
    """A single term in an analyzed text stream.

    RULES:
    - text: the term itself
    - start_offset / end_offset: character offsets into the source text
    - position_increment: gap to the previous token in position space
    - position_length: number of position slots the token spans
    - type: origin tag ("word" for ordinary tokens, "shingle" for merges)
    """

    text: str
    start_offset: int
    end_offset: int
    position_increment: int = 1
    position_length: int = 1
    type: str = DEFAULT_TOKEN_TYPE


class TokenHandling(str, Enum):
    """What happens to a marker token relative to the run it borders.

    RULES:
    - include: the marker becomes part of the concatenated token
    - exclude: the marker is emitted unchanged as its own token
    - drop: the marker is removed from the stream
    """

    include = "include"
    exclude = "exclude"
    drop = "drop"

    @classmethod
    def parse(cls, value: str | TokenHandling) -> TokenHandling:
        """Convert a configuration string into a TokenHandling.

        Raises:
            ConfigError: If value is not one of include, exclude, drop.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(
                "Invalid token handling '{}'. Supported: {}".format(
                    value, ", ".join(h.value for h in cls)
                )
            ) from None
