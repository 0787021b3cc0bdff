"""Shared test fixtures for the concat_between test suite.

WHY: Several modules exercise the filter against the same marker-heavy
sample sentences. Centralizing them keeps expected outputs in one place.

HOW: Pytest fixtures provide the sample texts, token streams built from
them, and a token source that fails after its last token.

RULES:
- Sample texts are whitespace-tokenized; offsets are character indexes
- Test modules use these through fixtures only, never by importing conftest
"""

from typing import List

import pytest

from concat_between.core.ir import Token
from concat_between.core.stream import ListTokenStream, WhitespaceTokenizer

MARKED_TEXT = "zero one <concat> two three </concat> four <concat> five six seven </concat>"
START_END_TEXT = "one START two three END four"
SHARED_MARKER_TEXT = "one two | three four | five six | | seven eight | | | nine ten"


class FailingTokenStream(ListTokenStream):
    """Replays tokens, then raises instead of reporting end of stream."""

    def next_token(self):
        token = super().next_token()
        if token is None:
            raise OSError("upstream read failed")
        return token


@pytest.fixture
def marked_text() -> str:
    """Two <concat> ... </concat> runs between ordinary words."""
    return MARKED_TEXT


@pytest.fixture
def start_end_text() -> str:
    """One START ... END run between ordinary words."""
    return START_END_TEXT


@pytest.fixture
def shared_marker_text() -> str:
    """'|' used as both start and end marker, including back-to-back markers."""
    return SHARED_MARKER_TEXT


@pytest.fixture
def marked_stream(marked_text):
    """Whitespace tokens of the marked_text sample."""
    return WhitespaceTokenizer(marked_text)


@pytest.fixture
def failing_stream():
    """Token source yielding 'a' and 'b', then raising OSError."""
    return FailingTokenStream([Token("a", 0, 1), Token("b", 2, 3)])


@pytest.fixture
def gapped_tokens() -> List[Token]:
    """Tokens with non-default position increments (e.g. after stop words)."""
    return [
        Token("alpha", 0, 5, position_increment=1),
        Token("beta", 10, 14, position_increment=2),
        Token("gamma", 15, 20, position_increment=1),
    ]
