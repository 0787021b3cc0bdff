"""One term per line; the quickest way to eyeball a filter's output."""

from __future__ import annotations

from typing import Sequence

from concat_between.core.ir import Token
from concat_between.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, tokens: Sequence[Token], final_offset: int) -> FormatterOutput:
        content = "".join(token.text + "\n" for token in tokens)
        return FormatterOutput(
            suffix="-tokens.txt",
            content=content,
            media_type="text/plain",
        )
