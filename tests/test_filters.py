"""Unit tests for the filter factory registry.

WHY: Filters are usually configured from string mappings (config files,
HTTP bodies). Typos there must fail loudly at construction, not produce
a silently misconfigured stream.

HOW: Tests build factories from option dicts and check both the parsed
configuration and the filters they create.

RULES:
- Option keys are the camelCase names used in analysis configs
"""

import pytest

from concat_between.config import ConfigError
from concat_between.core.concatenator import ConcatenateBetweenFilter
from concat_between.core.ir import TokenHandling
from concat_between.core.stream import WhitespaceTokenizer
from concat_between.filters import FILTERS, create_filter, get_factory
from concat_between.filters.concatenate_between import ConcatenateBetweenFilterFactory


class TestFactoryDefaults:

    def test_defaults(self):
        factory = ConcatenateBetweenFilterFactory({})
        assert factory.separator == " "
        assert factory.start_token == ""
        assert factory.end_token == ""
        assert factory.start_token_handling is TokenHandling.drop
        assert factory.end_token_handling is TokenHandling.drop

    def test_none_args(self):
        assert ConcatenateBetweenFilterFactory().separator == " "

    def test_does_not_mutate_caller_args(self):
        args = {"startToken": "<c>"}
        ConcatenateBetweenFilterFactory(args)
        assert args == {"startToken": "<c>"}


class TestFactoryOptions:

    def test_all_options(self):
        factory = ConcatenateBetweenFilterFactory({
            "separator": "_",
            "startToken": "^",
            "endToken": "$",
            "startTokenHandling": "include",
            "endTokenHandling": "exclude",
        })
        stream = factory.create(WhitespaceTokenizer(
            "^ the $ ^ quick brown $ fox jumped over ^ the lazy dog"
        ))
        assert isinstance(stream, ConcatenateBetweenFilter)
        assert [t.text for t in stream] == [
            "^_the", "$", "^_quick_brown", "$", "fox", "jumped", "over", "^_the_lazy_dog",
        ]

    def test_token_separator_alias(self):
        factory = ConcatenateBetweenFilterFactory({"tokenSeparator": "-"})
        assert factory.separator == "-"

    def test_both_separator_keys_rejected(self):
        with pytest.raises(ConfigError, match="not both"):
            ConcatenateBetweenFilterFactory({"separator": "-", "tokenSeparator": "_"})

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError, match="Unknown parameters"):
            ConcatenateBetweenFilterFactory({"startToken": "<c>", "stratToken": "x"})

    def test_invalid_handling_rejected(self):
        with pytest.raises(ConfigError, match="Invalid token handling 'keep'"):
            ConcatenateBetweenFilterFactory({"endTokenHandling": "keep"})

    def test_factory_creates_independent_filters(self):
        factory = ConcatenateBetweenFilterFactory({"startToken": "|"})
        first = factory.create(WhitespaceTokenizer("a | b c"))
        second = factory.create(WhitespaceTokenizer("d e | f"))
        assert first.next_token().text == "a"
        assert [t.text for t in second] == ["d", "e", "f"]
        assert [t.text for t in first] == ["b c"]


class TestRegistry:

    def test_registered(self):
        assert FILTERS["concatenate_between"] is ConcatenateBetweenFilterFactory

    def test_factory_name_matches_key(self):
        for key in FILTERS:
            assert get_factory(key).name == key

    def test_create_filter(self):
        stream = create_filter(
            "concatenate_between",
            WhitespaceTokenizer("one two | three four five"),
            {"startToken": "|"},
        )
        assert [t.text for t in stream] == ["one", "two", "three four five"]

    def test_unknown_filter(self):
        with pytest.raises(ConfigError, match="Unknown filter 'shingle'"):
            create_filter("shingle", WhitespaceTokenizer("a"))
