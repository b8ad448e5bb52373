"""Zones partition image sources between imdexer indexes.

A zone pairs one index with the base URL its files are served from. When a
site has several zones, each one claims the sources starting with its prefix.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from .errors import NoZoneMatch


@dataclass(frozen=True)
class Zone:
    index: Optional[Mapping[str, Any]]
    base_url: str = ''
    prefix: Optional[str] = None


@dataclass(frozen=True)
class ZoneMatch:
    zone: Zone
    local_source: str


def match_zone(src: str, zones: Sequence[Zone]) -> Optional[ZoneMatch]:
    """Return the zone owning *src*, or ``None`` when no prefix matches.

    A single zone owns every source and its prefix is ignored. Otherwise the
    first zone in list order whose prefix starts *src* wins, even when a later
    prefix is longer.
    """
    if len(zones) == 1:
        return ZoneMatch(zones[0], src)

    for zone in zones:
        if zone.prefix is not None and src.startswith(zone.prefix):
            return ZoneMatch(zone, src[len(zone.prefix):])
    return None


def resolve_zone(src: str, zones: Sequence[Zone]) -> ZoneMatch:
    match = match_zone(src, zones)
    if match is None:
        raise NoZoneMatch(src)
    return match
