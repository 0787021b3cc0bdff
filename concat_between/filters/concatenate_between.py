"""Factory for ConcatenateBetweenFilter.

RULES:
- separator defaults to a single space; tokenSeparator is accepted as an
  alias, but not together with separator
- startToken / endToken default to unset (empty string)
- startTokenHandling / endTokenHandling default to drop
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from concat_between.config import ConfigError
from concat_between.core.concatenator import ConcatenateBetweenFilter
from concat_between.core.ir import TokenHandling
from concat_between.core.stream import TokenStream
from concat_between.filters.base import BaseFilterFactory

logger = logging.getLogger(__name__)


class ConcatenateBetweenFilterFactory(BaseFilterFactory):
    """Build ConcatenateBetweenFilter instances from string options."""

    options = (
        "separator",
        "tokenSeparator",
        "startToken",
        "endToken",
        "startTokenHandling",
        "endTokenHandling",
    )

    def __init__(self, args: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(args)
        if "separator" in self._args and "tokenSeparator" in self._args:
            raise ConfigError("Give either separator or tokenSeparator, not both")
        self.separator = self._get("separator", self._get("tokenSeparator", " "))
        self.start_token = self._get("startToken", "")
        self.end_token = self._get("endToken", "")
        self.start_token_handling = TokenHandling.parse(
            self._get("startTokenHandling", TokenHandling.drop.value)
        )
        self.end_token_handling = TokenHandling.parse(
            self._get("endTokenHandling", TokenHandling.drop.value)
        )
        self._check_consumed()
        logger.debug(
            "Configured %s: separator=%r start=%r/%s end=%r/%s",
            self.name,
            self.separator,
            self.start_token, self.start_token_handling.value,
            self.end_token, self.end_token_handling.value,
        )

    @property
    def name(self) -> str:
        return "concatenate_between"

    def create(self, input: TokenStream) -> ConcatenateBetweenFilter:
        return ConcatenateBetweenFilter(
            input,
            separator=self.separator,
            start_token=self.start_token,
            end_token=self.end_token,
            start_token_handling=self.start_token_handling,
            end_token_handling=self.end_token_handling,
        )
