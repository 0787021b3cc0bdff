"""Abstract base formatter and output container.

WHY: The CLI writes analyzed tokens in several shapes (bare terms, JSON,
a table). A shared base class keeps the CLI and server working with any
formatter generically.

HOW: BaseFormatter is an ABC with a ``name`` property and a ``format()``
method. FormatterOutput bundles a file suffix with its content and MIME
type.

RULES:
- ``format()`` receives the fully drained token list and the final offset
- ``suffix`` starts with a hyphen, e.g. ``"-tokens.json"``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from concat_between.core.ir import Token


@dataclass
class FormatterOutput:
    """One rendered output.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-tokens.json"`` -> ``"notes-tokens.json"``.
        content: The rendered text.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all token formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Token JSON'."""

    @abstractmethod
    def format(self, tokens: Sequence[Token], final_offset: int) -> FormatterOutput:
        """Render analyzed tokens.

        Args:
            tokens: Tokens in stream order, as emitted by the last filter.
            final_offset: The stream's final offset (TokenStream.end()).
        """


def positions(tokens: Sequence[Token]) -> List[int]:
    """Absolute position of each token: running sum of increments, from 0."""
    result: List[int] = []
    position = -1
    for token in tokens:
        position += token.position_increment
        result.append(position)
    return result
