"""Concatenate Between — a streaming token concatenation filter.

WHY: Search analysis chains sometimes need a run of tokens indexed as a
single term (a product code split by spaces, a quoted phrase, a marked-up
span). This package rewrites a token stream so that runs delimited by
optional marker tokens are merged into one concatenated token.

HOW: Three layers — token sources (core.stream), the concatenation state
machine (core.concatenator), and the string-keyed factory registry
(filters) that builds configured filters. The CLI, formatters, and HTTP
server are thin shells around those layers.

RULES:
- The filter never tokenizes raw text; it only rewrites a token stream
- All state is scoped to one pass over one stream
- Invalid configuration fails at construction, never mid-stream
"""

__version__ = "0.1.0"
