"""Tests for reading zones from settings."""

import json
import runpy
from pathlib import Path

import pytest

import imdexer_images
from imdexer_images.config import load_index, zones_from_settings
from imdexer_images.errors import ImdexerConfigError

ROOT = Path(__file__).resolve().parent.parent


def test_zones_from_settings_loads_relative_json(tmp_path, single_index):
    (tmp_path / "index.json").write_text(json.dumps(single_index), encoding="utf-8")
    zones = zones_from_settings({
        "PATH": str(tmp_path),
        "IMDEXER_ZONES": [{"imdexer": "index.json", "base_url": "/img", "prefix": "ignored/"}],
    })
    assert len(zones) == 1
    assert zones[0].index == single_index
    assert zones[0].base_url == "/img"
    assert zones[0].prefix == "ignored/"


def test_zones_keep_inline_mappings(grouped_index):
    zones = zones_from_settings({
        "IMDEXER_ZONES": [
            {"prefix": "a/", "imdexer": grouped_index},
            {"prefix": "b/"},
        ],
    })
    assert zones[0].index is grouped_index
    assert zones[0].base_url == ""
    assert zones[1].index is None


@pytest.mark.parametrize(
    "raw_zones",
    [
        [],
        ["not a dict"],
        [{"prefix": "a/", "imdexer": {}}, {"imdexer": {}}],
        [{"imdexer": 42}],
    ],
)
def test_invalid_zone_settings(raw_zones):
    with pytest.raises(ImdexerConfigError):
        zones_from_settings({"IMDEXER_ZONES": raw_zones})


def test_load_index_reports_bad_files(tmp_path):
    with pytest.raises(ImdexerConfigError):
        load_index("missing.json", str(tmp_path))

    (tmp_path / "broken.json").write_text("{", encoding="utf-8")
    with pytest.raises(ImdexerConfigError):
        load_index("broken.json", str(tmp_path))

    (tmp_path / "list.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ImdexerConfigError):
        load_index(tmp_path / "list.json", str(tmp_path))


def test_site_settings_render_demo_article():
    settings = runpy.run_path(str(ROOT / "pelicanconf.py"))
    settings["PATH"] = str(ROOT / "content")
    host = imdexer_images.build_host(settings)

    html = host.expand_shortcodes("[[img: src=blog/cat.jpg; alt=A cat; class=wide]]")
    assert html == (
        '<img loading="lazy" sizes="auto" width="1600" height="900" '
        'srcset="/media/blog/cat-400.jpg 400w, /media/blog/cat-800.jpg 800w, /media/blog/cat-1600.jpg 1600w" '
        'src="/media/blog/cat-1600.jpg" class="wide" alt="A cat" />'
    )
    assert host.filters["img_url"]("cdn/banner.webp") == "https://cdn.example.com/img/banner.webp"
