"""Unit tests for docpage.api.link.find_source_links."""

import types

import pytest

from docpage.api.link.find_source_links import find_source_links
from docpage.api.link.SourceLinkMatch import SourceLinkMatch


def test_single_link_groups():
    text = 'See <a href="/target/foo.go?s=10:20#L5">Foo</a>'
    (match,) = list(find_source_links(text))
    assert match == SourceLinkMatch(path="foo.go", start=10, end=20, span=(13, 38))
    assert text[match.span[0] : match.span[1]] == "/target/foo.go?s=10:20#L5"


def test_returns_lazy_generator():
    assert isinstance(find_source_links("/target/a.go?s=0:1#L1"), types.GeneratorType)


def test_matches_in_order_of_appearance():
    text = "/target/b.go?s=3:4#L1 then /target/a/c.go?s=1:2#L9"
    assert [(m.path, m.start, m.end) for m in find_source_links(text)] == [("b.go", 3, 4), ("a/c.go", 1, 2)]


def test_restartable_per_call():
    text = "/target/x.go?s=0:0#L1"
    assert list(find_source_links(text)) == list(find_source_links(text))


def test_ignored_line_suffix_may_be_empty():
    (match,) = list(find_source_links("/target/x.go?s=5:7#L"))
    assert (match.start, match.end) == (5, 7)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no links here",
        "/target/foo.go?s=10#L5",
        "/target/foo.go?s=a:b#L5",
        "/target/foo.go?s=10:20",
        "/src/foo.go?s=10:20#L5",
        "/target/?s=1:2#L3",
    ],
)
def test_malformed_text_is_not_a_match(text):
    assert list(find_source_links(text)) == []


def test_path_stops_at_quote():
    text = "\"/target/x.go?s=1:2#L3\" '/target/y.go?s=3:4#L5'"
    assert [m.path for m in find_source_links(text)] == ["x.go", "y.go"]
