"""Filter factory registry.

WHY: The CLI and HTTP server select filters by name and configure them
from string options. A central dict maps each name to its factory class.

HOW: FILTERS maps string keys to factory *classes*. create_filter()
instantiates the factory (validating options) and wraps the input.

RULES:
- Keys are snake_case identifiers (used in CLI flags and request bodies)
- Unknown filter names raise ConfigError
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Type

from concat_between.config import ConfigError
from concat_between.core.stream import TokenStream
from concat_between.filters.base import BaseFilterFactory
from concat_between.filters.concatenate_between import ConcatenateBetweenFilterFactory

FILTERS: Dict[str, Type[BaseFilterFactory]] = {
    "concatenate_between": ConcatenateBetweenFilterFactory,
}


def get_factory(name: str, args: Optional[Mapping[str, str]] = None) -> BaseFilterFactory:
    """Instantiate the registered factory ``name`` with ``args``."""
    try:
        factory_cls = FILTERS[name]
    except KeyError:
        raise ConfigError(
            "Unknown filter '{}'. Available: {}".format(name, ", ".join(sorted(FILTERS)))
        ) from None
    return factory_cls(args)


def create_filter(
    name: str,
    input: TokenStream,
    args: Optional[Mapping[str, str]] = None,
) -> TokenStream:
    """Build the filter ``name`` configured with ``args`` around ``input``."""
    return get_factory(name, args).create(input)
