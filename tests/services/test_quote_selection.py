"""Tests for quote document parsing and random selection."""

from __future__ import annotations

import json
import random

import pytest

from devrel_quotes.core.exceptions import QuoteContentError
from devrel_quotes.core.models import SelectedQuote
from devrel_quotes.services import quote_selection as qs

# pylint: disable=missing-function-docstring


def test_parse_quote_document_reads_info_and_authors(read_fixture) -> None:
    document = qs.parse_quote_document(read_fixture("data.json"))
    assert document.info == "Quotes from the Developer Relations team"
    assert [entry.author for entry in document.data] == [
        "Ada Lovelace",
        "Grace Hopper",
        "Alan Kay",
    ]
    assert len(document.data[2].quotes) == 3


def test_parse_quote_document_reads_numbers_as_text() -> None:
    document = qs.parse_quote_document(
        '{"info": 5, "data": [{"author": 1984, "quotes": [42, 2.5]}]}'
    )
    assert document.info == "5"
    assert document.data[0].author == "1984"
    assert document.data[0].quotes == ["42", "2.5"]


@pytest.mark.parametrize(
    "raw",
    [
        "{}",
        '{"info": true, "data": [{"author": "a", "quotes": ["q"]}]}',
        '{"info": "x", "data": [{"author": "a", "quotes": [{"text": "q"}]}]}',
        '{"info": "x"}',
        '{"data": [{"author": "a", "quotes": ["q"]}]}',
        '{"info": "x", "data": []}',
        '{"info": "x", "data": [{"author": "a", "quotes": []}]}',
        '{"info": "x", "data": [{"quotes": ["q"]}]}',
        '{"info": "x", "data": "not a list"}',
        "[]",
        "not json at all",
        b"",
    ],
)
def test_parse_quote_document_rejects_incomplete_content(raw) -> None:
    with pytest.raises(QuoteContentError):
        qs.parse_quote_document(raw)


def test_pick_index_uses_floor_of_scaled_random(make_random) -> None:
    assert qs.pick_index(3, make_random(0.0)) == 0
    assert qs.pick_index(3, make_random(0.34)) == 1
    assert qs.pick_index(3, make_random(0.999)) == 2


def test_pick_index_rejects_empty_collections(make_random) -> None:
    with pytest.raises(QuoteContentError):
        qs.pick_index(0, make_random(0.5))


def test_select_quote_uses_two_draws(read_fixture, make_random) -> None:
    rng = make_random(0.7, 0.5)
    quote = qs.select_from_raw(read_fixture("data.json"), rng)
    assert quote == SelectedQuote(
        info="Quotes from the Developer Relations team",
        author="Alan Kay",
        quote_text="Simple things should be simple, complex things should be possible.",
    )
    assert rng.calls == 2


def test_single_quote_document_is_deterministic(read_fixture) -> None:
    raw = read_fixture("single_quote.json")
    picks = {qs.select_from_raw(raw, random.Random(seed)) for seed in range(25)}
    assert picks == {
        SelectedQuote(
            info="One quote only",
            author="Grace Hopper",
            quote_text="A ship in port is safe, but that's not what ships are built for.",
        )
    }


def test_selection_always_comes_from_the_document(read_fixture) -> None:
    raw = read_fixture("data.json")
    source = json.loads(raw)
    pairs = {(entry["author"], quote) for entry in source["data"] for quote in entry["quotes"]}
    rng = random.Random(1234)
    for _ in range(200):
        quote = qs.select_from_raw(raw, rng)
        assert (quote.author, quote.quote_text) in pairs


def test_same_seed_gives_same_selection(read_fixture) -> None:
    raw = read_fixture("data.json")
    first = [qs.select_from_raw(raw, random.Random(42)) for _ in range(3)]
    second = [qs.select_from_raw(raw, random.Random(42)) for _ in range(3)]
    assert first == second
