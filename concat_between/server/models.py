"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Filter options are passed as strings, exactly as a factory receives them
- Token fields match the token_json formatter's output
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Text to analyze and the filter to run over it."""

    text: str = Field(description="Raw text; tokenized on whitespace before filtering.")
    filter: str = Field(
        default="concatenate_between",
        description="Registered filter name.",
    )
    options: Dict[str, str] = Field(
        default_factory=dict,
        description="Filter options, e.g. {'startToken': '<concat>'}.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "zero one <concat> two three </concat> four",
                "filter": "concatenate_between",
                "options": {"startToken": "<concat>", "endToken": "</concat>"},
            }
        ]
    }}


class TokenModel(BaseModel):
    """One analyzed token."""

    token: str = Field(description="Term text.")
    start_offset: int = Field(description="Start character offset in the input text.")
    end_offset: int = Field(description="End character offset in the input text.")
    type: str = Field(description="Token type ('word' or 'shingle').")
    position: int = Field(description="Absolute token position.")
    position_length: int = Field(description="Number of positions the token spans.")


class AnalyzeResponse(BaseModel):
    """Tokens produced by the filter chain."""

    tokens: List[TokenModel] = Field(description="Output tokens in stream order.")
    final_offset: int = Field(description="Final offset of the token stream.")


class FilterInfo(BaseModel):
    """Description of a registered filter."""

    name: str = Field(description="Filter name used in analyze requests.")
    options: List[str] = Field(description="Option keys the filter accepts.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
