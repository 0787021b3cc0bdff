"""Abstract base for string-configured filter factories.

WHY: Analysis chains are usually described as data (a config file, an
HTTP request body) mapping option names to string values. Factories turn
such a mapping into a configured filter and reject bad input before any
token is processed.

HOW: BaseFilterFactory copies the option mapping, lets subclasses pop
the keys they understand via _get(), then fails on anything left over.
Subclasses implement ``name``, ``options`` and ``create()``.

RULES:
- Option values are strings; subclasses parse them once, at construction
- Unknown keys raise ConfigError("Unknown parameters: ...")
- create() may be called many times; each call wraps a new input stream
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Tuple

from concat_between.config import ConfigError
from concat_between.core.stream import TokenStream


class BaseFilterFactory(ABC):
    """Abstract base for all filter factories.

    To add a new filter:
    1. Create a new file in filters/
    2. Subclass BaseFilterFactory
    3. Implement name, options and create()
    4. Register it in the FILTERS dict in filters/__init__.py
    """

    options: Tuple[str, ...] = ()
    """Option keys this factory accepts."""

    def __init__(self, args: Optional[Mapping[str, str]] = None) -> None:
        self._args: Dict[str, str] = dict(args or {})

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key of the filter, e.g. 'concatenate_between'."""

    @abstractmethod
    def create(self, input: TokenStream) -> TokenStream:
        """Wrap ``input`` in a new, configured filter."""

    def _get(self, key: str, default: str) -> str:
        """Pop ``key`` from the remaining options, falling back to ``default``."""
        return self._args.pop(key, default)

    def _check_consumed(self) -> None:
        """Raise ConfigError if any option was not recognized."""
        if self._args:
            raise ConfigError("Unknown parameters: {}".format(self._args))
