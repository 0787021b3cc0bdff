"""FastAPI application exposing the analyze endpoint.

WHY: Clients need to try filter configurations over HTTP, the way a
search engine's _analyze API works, and to discover which filters and
options exist.

HOW: POST /analyze tokenizes the text on whitespace, builds the requested
filter from the option mapping, drains it, and returns every token.
POST /analyze/{format_key} renders the same tokens with a registered
formatter and answers with its media type. GET /filters lists registered
filters; GET /health is a liveness probe.

RULES:
- Configuration errors return 400, unknown formats 404, both with an
  ErrorResponse body
- Filters are built per request; no stream state outlives a request
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from concat_between import __version__
from concat_between.config import SERVER_HOST, ConfigError, load_server_port
from concat_between.core.ir import Token
from concat_between.core.stream import WhitespaceTokenizer
from concat_between.filters import FILTERS, create_filter
from concat_between.formatters import FORMATTERS
from concat_between.formatters.token_json import tokens_to_dict
from concat_between.server.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    FilterInfo,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Concatenate Between API",
    description=(
        "Run text through the concatenate-between token filter and "
        "inspect the resulting tokens, offsets and positions."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def _run_filter(request: AnalyzeRequest) -> Tuple[List[Token], int]:
    """Drain the requested filter over the request text.

    Raises HTTPException(400) for configuration errors.
    """
    try:
        stream = create_filter(request.filter, WhitespaceTokenizer(request.text), request.options)
    except ConfigError as exc:
        logger.info("Rejected analyze request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return list(stream), stream.end()


@app.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid filter configuration."}},
    tags=["analysis"],
    summary="Analyze text with a configured filter",
)
def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    tokens, final_offset = _run_filter(request)
    return AnalyzeResponse(**tokens_to_dict(tokens, final_offset))


@app.post(
    "/analyze/{format_key}",
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid filter configuration."},
        404: {"model": ErrorResponse, "description": "Unknown output format."},
    },
    tags=["analysis"],
    summary="Analyze text and render the tokens with a formatter",
)
def analyze_formatted(format_key: str, request: AnalyzeRequest) -> Response:
    formatter_cls = FORMATTERS.get(format_key)
    if formatter_cls is None:
        raise HTTPException(
            status_code=404,
            detail="Unknown format '{}'. Available: {}".format(
                format_key, ", ".join(sorted(FORMATTERS))
            ),
        )
    tokens, final_offset = _run_filter(request)
    output = formatter_cls().format(tokens, final_offset)
    return Response(content=output.content, media_type=output.media_type)


@app.get(
    "/filters",
    response_model=List[FilterInfo],
    tags=["analysis"],
    summary="List registered filters",
)
def list_filters() -> List[FilterInfo]:
    return [
        FilterInfo(name=name, options=list(factory_cls.options))
        for name, factory_cls in sorted(FILTERS.items())
    ]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health check",
)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def serve() -> None:
    """Run the API with uvicorn on SERVER_HOST and the CONCAT_PORT port."""
    uvicorn.run(app, host=SERVER_HOST, port=load_server_port())
