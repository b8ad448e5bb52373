"""Image records as stored in an imdexer index, and default variant selection.

Raw index entries look like::

    {"width": 1600, "height": 900}                        # single image
    {"width": 1600, "height": 900,
     "files": {"cat-800.jpg": {"width": 800, "height": 450},
               "cat-1600.jpg": {"width": 1600, "height": 900}}}  # grouped

A non-empty ``files`` mapping is the only thing that makes an entry grouped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from .errors import MissingImageData, MissingIndex, WidthNotFound
from .zones import Zone


@dataclass(frozen=True)
class SingleImage:
    width: int
    height: int


@dataclass(frozen=True)
class Variant:
    path: str
    width: int
    height: int


@dataclass(frozen=True)
class GroupedImage:
    width: int
    height: int
    variants: Tuple[Variant, ...]


ImageRecord = Union[SingleImage, GroupedImage]


def parse_record(entry: Mapping[str, Any]) -> ImageRecord:
    files = entry.get('files')
    if files:
        variants = tuple(
            Variant(path, data.get('width'), data.get('height'))
            for path, data in files.items()
        )
        return GroupedImage(entry.get('width'), entry.get('height'), variants)
    return SingleImage(entry.get('width'), entry.get('height'))


def lookup_record(zone: Zone, local_source: str) -> ImageRecord:
    """Look up *local_source* in the zone's index by exact key."""
    if zone.index is None:
        raise MissingIndex(local_source)
    entry = zone.index.get(local_source)
    if entry is None:
        raise MissingImageData(local_source)
    return parse_record(entry)


def select_by_width(variants: Sequence[Variant], width: int, src: Optional[str] = None) -> Variant:
    """Return the first variant exactly *width* pixels wide."""
    for variant in variants:
        if variant.width == width:
            return variant
    raise WidthNotFound(width, src)


def select_default(variants: Sequence[Variant]) -> Variant:
    """Return the widest variant.

    Ties go to the variant that comes later in index order. Existing pages
    were rendered with that choice, so it must not change.
    """
    best = variants[0]
    for variant in variants[1:]:
        if not best.width > variant.width:
            best = variant
    return best
