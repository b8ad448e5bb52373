"""Tests for index records and default variant selection."""

import pytest

from imdexer_images.errors import MissingImageData, MissingIndex, WidthNotFound
from imdexer_images.records import (
    GroupedImage,
    SingleImage,
    Variant,
    lookup_record,
    parse_record,
    select_by_width,
    select_default,
)
from imdexer_images.zones import Zone


def test_parse_record_discriminates_on_files(grouped_index):
    assert parse_record({"width": 10, "height": 20}) == SingleImage(10, 20)
    assert parse_record({"width": 10, "height": 20, "files": {}}) == SingleImage(10, 20)

    record = parse_record(grouped_index["cat.jpg"])
    assert isinstance(record, GroupedImage)
    assert [v.path for v in record.variants] == ["cat-400.jpg", "cat-800.jpg", "cat-1600.jpg"]


def test_lookup_is_exact(single_index):
    zone = Zone(index=single_index)
    assert lookup_record(zone, "x.png") == SingleImage(10, 20)
    with pytest.raises(MissingImageData):
        lookup_record(zone, "/x.png")
    with pytest.raises(MissingIndex):
        lookup_record(Zone(index=None), "x.png")


def test_empty_entry_counts_as_present():
    zone = Zone(index={"blank.png": {}})
    assert lookup_record(zone, "blank.png") == SingleImage(None, None)


def test_select_default_later_variant_wins_tie(tied_index):
    record = parse_record(tied_index["dog.jpg"])
    assert select_default(record.variants) == Variant("c.jpg", 200, 101)


def test_select_default_picks_widest():
    variants = (Variant("big.jpg", 900, 1), Variant("small.jpg", 300, 1))
    assert select_default(variants).path == "big.jpg"


def test_select_by_width_returns_first_exact_match(tied_index):
    record = parse_record(tied_index["dog.jpg"])
    assert select_by_width(record.variants, 200).path == "b.jpg"


def test_select_by_width_has_no_nearest_fallback(grouped_index):
    record = parse_record(grouped_index["cat.jpg"])
    with pytest.raises(WidthNotFound) as excinfo:
        select_by_width(record.variants, 801, "cat.jpg")
    assert excinfo.value.width == 801
