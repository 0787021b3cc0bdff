"""Output formatter registry.

WHY: The CLI selects an output shape by name. A central dict makes it
trivial to add new formats: create the formatter class, import it here,
add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["token_json"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from concat_between.formatters.plain_text import PlainTextFormatter
from concat_between.formatters.token_json import TokenJSONFormatter
from concat_between.formatters.token_table import TokenTableFormatter

if TYPE_CHECKING:
    from concat_between.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "token_json": TokenJSONFormatter,
    "token_table": TokenTableFormatter,
}
