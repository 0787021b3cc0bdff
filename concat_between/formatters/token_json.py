"""JSON token listing in the shape of a search engine's analyze API.

WHY: Downstream tools (index debuggers, notebooks, the HTTP service's
clients) want structured output with every token attribute, not just
the terms.

HOW: Builds a dict with one entry per token, including the absolute
position derived from position increments, then validates it against
TOKEN_LIST_SCHEMA with jsonschema before serializing.

RULES:
- position = running sum of position increments minus one
- Schema validation is mandatory; raises on invalid output
- Output suffix is "-tokens.json"
"""

from __future__ import annotations

import json
from typing import Any, Dict, Sequence

import jsonschema

from concat_between.core.ir import Token
from concat_between.formatters.base import BaseFormatter, FormatterOutput, positions

TOKEN_LIST_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["tokens", "final_offset"],
    "additionalProperties": False,
    "properties": {
        "final_offset": {"type": "integer", "minimum": 0},
        "tokens": {
            "type": "array",
            "items": {
                "type": "object",
                "required": [
                    "token", "start_offset", "end_offset",
                    "type", "position", "position_length",
                ],
                "additionalProperties": False,
                "properties": {
                    "token": {"type": "string"},
                    "start_offset": {"type": "integer", "minimum": 0},
                    "end_offset": {"type": "integer", "minimum": 0},
                    "type": {"type": "string"},
                    "position": {"type": "integer", "minimum": -1},
                    "position_length": {"type": "integer", "minimum": 1},
                },
            },
        },
    },
}


def tokens_to_dict(tokens: Sequence[Token], final_offset: int) -> Dict[str, Any]:
    """Build the analyze-style dict for ``tokens``."""
    return {
        "tokens": [
            {
                "token": token.text,
                "start_offset": token.start_offset,
                "end_offset": token.end_offset,
                "type": token.type,
                "position": position,
                "position_length": token.position_length,
            }
            for token, position in zip(tokens, positions(tokens))
        ],
        "final_offset": final_offset,
    }


class TokenJSONFormatter(BaseFormatter):
    """Analyze-style JSON, validated against TOKEN_LIST_SCHEMA.

    Raises:
        jsonschema.ValidationError: If the generated JSON does not
            conform to the schema.
    """

    @property
    def name(self) -> str:
        return "Token JSON"

    def format(self, tokens: Sequence[Token], final_offset: int) -> FormatterOutput:
        output = tokens_to_dict(tokens, final_offset)
        jsonschema.validate(instance=output, schema=TOKEN_LIST_SCHEMA)
        return FormatterOutput(
            suffix="-tokens.json",
            content=json.dumps(output, indent=2, ensure_ascii=False),
            media_type="application/json",
        )
