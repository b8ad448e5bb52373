"""Read imdexer zones from Pelican settings.

Example ``pelicanconf.py``::

    IMDEXER_ZONES = [
        {'prefix': 'blog/', 'imdexer': 'imdexer/blog.json', 'base_url': '/media/blog'},
        {'prefix': 'shop/', 'imdexer': 'imdexer/shop.json', 'base_url': 'https://cdn.example.com'},
    ]
    IMDEXER_SHORTCODE = 'img'       # None to disable
    IMDEXER_URL_FILTER = 'img_url'  # None to disable

``imdexer`` is either the index mapping itself or a path to its JSON dump;
relative paths are looked up under the content ``PATH``.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

from .errors import ImdexerConfigError
from .zones import Zone

logger = logging.getLogger(__name__)


def load_index(value: Any, content_path: str) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    if not isinstance(value, (str, Path)):
        raise ImdexerConfigError(f'imdexer must be a mapping or a JSON file path, got {type(value).__name__}')

    path = Path(value)
    if not path.is_absolute():
        path = Path(content_path) / path
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as exc:
        raise ImdexerConfigError(f'Cannot read imdexer index {path}: {exc}') from exc
    except json.JSONDecodeError as exc:
        raise ImdexerConfigError(f'Invalid JSON in imdexer index {path}: {exc}') from exc

    if not isinstance(data, dict):
        raise ImdexerConfigError(f'imdexer index {path} must contain a JSON object')
    logger.debug('Loaded %d imdexer entries from %s', len(data), path)
    return data


def zones_from_settings(settings: Mapping[str, Any]) -> List[Zone]:
    raw_zones = settings.get('IMDEXER_ZONES')
    if not raw_zones:
        raise ImdexerConfigError('IMDEXER_ZONES must list at least one zone')

    content_path = settings.get('PATH', 'content')
    zones = []
    for position, raw in enumerate(raw_zones):
        if not isinstance(raw, Mapping):
            raise ImdexerConfigError(f'IMDEXER_ZONES[{position}] must be a dict')
        prefix = raw.get('prefix')
        if len(raw_zones) > 1 and not isinstance(prefix, str):
            raise ImdexerConfigError(f'IMDEXER_ZONES[{position}] needs a string prefix when several zones exist')
        index = raw.get('imdexer')
        zones.append(Zone(
            index=load_index(index, content_path) if index is not None else None,
            base_url=raw.get('base_url', ''),
            prefix=prefix,
        ))

    logger.info('imdexer_images: %d zone(s) configured', len(zones))
    return zones
