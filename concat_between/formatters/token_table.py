"""Tab-separated token table with offsets, positions and type.

RULES:
- Header row: term, start, end, posInc, posLen, type
- One row per token, in stream order
- Tabs and newlines inside a term are escaped as \\t and \\n
"""

from __future__ import annotations

from typing import List, Sequence

from concat_between.core.ir import Token
from concat_between.formatters.base import BaseFormatter, FormatterOutput

_HEADER = ("term", "start", "end", "posInc", "posLen", "type")


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n")


class TokenTableFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Token table"

    def format(self, tokens: Sequence[Token], final_offset: int) -> FormatterOutput:
        rows: List[str] = ["\t".join(_HEADER)]
        for token in tokens:
            rows.append("\t".join([
                _escape(token.text),
                str(token.start_offset),
                str(token.end_offset),
                str(token.position_increment),
                str(token.position_length),
                token.type,
            ]))
        return FormatterOutput(
            suffix="-tokens.tsv",
            content="\n".join(rows) + "\n",
            media_type="text/tab-separated-values",
        )
