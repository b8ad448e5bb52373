"""Shortcodes and filters on top of Pelican.

Pelican has no shortcode mechanism of its own, so a registered shortcode is
exposed twice: as a Jinja2 global callable from theme templates, and as a
``[[name: key=value; ...]]`` marker inside article and page content::

    [[img: src=blog/cat.jpg; alt=A cat asleep; class=wide; lazy=false; default_width=800]]

Filters become Jinja2 filters (``{{ 'blog/cat.jpg' | img_url }}``).
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Optional

from .errors import ImdexerConfigError
from .hooks import ARGUMENT_NAMES

logger = logging.getLogger(__name__)

TRUE_VALUES = ('true', 'yes', 'on', '1')
FALSE_VALUES = ('false', 'no', 'off', '0')


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ImdexerConfigError(f'Expected a boolean, got {value!r}')


def parse_marker_args(spec: str) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    for raw in spec.split(';'):
        entry = raw.strip()
        if not entry:
            continue
        if '=' not in entry:
            raise ImdexerConfigError(f'Shortcode argument {entry!r} is not key=value')
        key, value = (part.strip() for part in entry.split('=', 1))
        if key not in ARGUMENT_NAMES:
            raise ImdexerConfigError(f'Unknown shortcode argument {key!r}')
        name = ARGUMENT_NAMES[key]
        if name == 'lazy':
            kwargs[name] = _parse_bool(value)
        elif name == 'default_image_width':
            try:
                kwargs[name] = int(value)
            except ValueError as exc:
                raise ImdexerConfigError(f'default_width must be an integer, got {value!r}') from exc
        else:
            kwargs[name] = value
    return kwargs


class PelicanHost:
    """Collects shortcodes and filters and applies them to a Pelican build."""

    def __init__(self):
        self.shortcodes: Dict[str, Callable[..., str]] = {}
        self.filters: Dict[str, Callable[..., str]] = {}
        self._pattern: Optional[re.Pattern] = None

    def register_shortcode(self, name: str, fn: Callable[..., str]) -> None:
        logger.debug('Registering shortcode %s', name)
        self.shortcodes[name] = fn
        self._pattern = None

    def register_filter(self, name: str, fn: Callable[..., str]) -> None:
        logger.debug('Registering filter %s', name)
        self.filters[name] = fn

    def install(self, env) -> None:
        """Expose everything registered so far in a Jinja2 environment."""
        env.globals.update(self.shortcodes)
        env.filters.update(self.filters)

    @property
    def pattern(self) -> re.Pattern:
        if self._pattern is None:
            names = '|'.join(re.escape(name) for name in sorted(self.shortcodes, key=len, reverse=True))
            self._pattern = re.compile(rf'\[\[(?P<name>{names}):(?P<spec>.*?)]]', re.DOTALL)
        return self._pattern

    def expand_shortcodes(self, text: str) -> str:
        if not self.shortcodes or not text:
            return text

        def _repl(match: re.Match) -> str:
            name = match.group('name')
            kwargs = parse_marker_args(match.group('spec'))
            logger.debug('Expanding %s shortcode for %s', name, kwargs.get('src'))
            return self.shortcodes[name](**kwargs)

        return self.pattern.sub(_repl, text)
