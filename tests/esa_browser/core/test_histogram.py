import pandas as pd

from esa_browser.core.histogram import (
    DEFAULT_COLOUR,
    HIGHLIGHT_COLOUR,
    BinHighlighter,
    HistogramBin,
    bin_start_for,
    build_bins,
)


def _listings(pairs):
    return pd.DataFrame(pairs, columns=["year", "listings"])


def test_bins_start_on_multiples_of_five_and_cover_range():
    bins = build_bins(_listings([(1967, 14), (1968, 1), (1983, 4), (1984, 6), (1991, 2)]))

    assert [b.start for b in bins] == [1965, 1970, 1975, 1980, 1985, 1990]
    assert bins[-1].end == 1994
    # Contiguous, non-overlapping
    for a, b in zip(bins, bins[1:]):
        assert b.start == a.end + 1


def test_bin_totals_and_empty_bins():
    bins = build_bins(_listings([(1967, 14), (1968, 1), (1983, 4), (1984, 6), (1991, 2)]))
    totals = {b.start: b.total for b in bins}

    assert totals == {1965: 15, 1970: 0, 1975: 0, 1980: 10, 1985: 0, 1990: 2}
    assert sum(totals.values()) == 27


def test_bin_label_and_contains():
    b = HistogramBin(start=1980, end=1984, total=3)

    assert b.label == "1980–1984"
    assert b.contains(1982)
    assert not b.contains(1985)


def test_bin_start_for():
    assert bin_start_for(1982) == 1980
    assert bin_start_for(1985) == 1985
    assert bin_start_for(1989) == 1985


def test_no_listings_no_bins():
    assert build_bins(_listings([])) == []


def test_highlighter_colours_one_bin():
    bins = build_bins(_listings([(1980, 1), (1990, 1)]))
    highlighter = BinHighlighter(bins)

    highlighter.highlight(1985)

    assert highlighter.highlighted_start == 1985
    assert highlighter.colours() == [DEFAULT_COLOUR, HIGHLIGHT_COLOUR, DEFAULT_COLOUR]


def test_highlighter_out_of_range_is_silent_noop():
    bins = build_bins(_listings([(1980, 1), (1990, 1)]))
    highlighter = BinHighlighter(bins)
    highlighter.highlight(1985)

    highlighter.highlight(2030)

    assert highlighter.highlighted_start is None
    assert set(highlighter.colours()) == {DEFAULT_COLOUR}
