"""Shared fixtures for imdexer_images tests."""

import pytest

from imdexer_images.zones import Zone


# ---------------------------------------------------------------------------
# Index fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def single_index():
    return {"x.png": {"width": 10, "height": 20}}


@pytest.fixture
def grouped_index():
    return {
        "cat.jpg": {
            "width": 1600,
            "height": 900,
            "files": {
                "cat-400.jpg": {"width": 400, "height": 225},
                "cat-800.jpg": {"width": 800, "height": 450},
                "cat-1600.jpg": {"width": 1600, "height": 900},
            },
        }
    }


@pytest.fixture
def tied_index():
    """Two variants share the maximum width."""
    return {
        "dog.jpg": {
            "width": 200,
            "height": 100,
            "files": {
                "a.jpg": {"width": 100, "height": 50},
                "b.jpg": {"width": 200, "height": 100},
                "c.jpg": {"width": 200, "height": 101},
            },
        }
    }


# ---------------------------------------------------------------------------
# Zone fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def single_zone(single_index, grouped_index, tied_index):
    index = {**single_index, **grouped_index, **tied_index}
    return [Zone(index=index, base_url="/img", prefix="ignored/")]


@pytest.fixture
def language_zones(single_index, grouped_index):
    return [
        Zone(index=single_index, base_url="/en", prefix="en/"),
        Zone(index=grouped_index, base_url="/fr/", prefix="fr/"),
    ]
