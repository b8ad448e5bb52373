"""Bind the render functions to a host through two registration callables.

The host decides what a shortcode or a filter is; this module only hands it
functions closed over the configured zones.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from .render import image_tag, image_url
from .zones import Zone

RegisterFn = Callable[[str, Callable[..., str]], None]

# shortcode argument name -> image_tag keyword
ARGUMENT_NAMES = {
    'src': 'src',
    'alt': 'alt',
    'class': 'class_',
    'class_': 'class_',
    'lazy': 'lazy',
    'sizes': 'sizes',
    'default_width': 'default_image_width',
    'defaultImageWidth': 'default_image_width',
    'default_image_width': 'default_image_width',
}


def shortcode_kwargs(args: dict) -> dict:
    kwargs = {}
    for key, value in args.items():
        if key not in ARGUMENT_NAMES:
            raise TypeError(f'image shortcode got an unexpected keyword argument {key!r}')
        kwargs[ARGUMENT_NAMES[key]] = value
    return kwargs


def add_image_shortcode(register_shortcode: RegisterFn, shortcode_name: str, zones: Sequence[Zone]):
    """Register an image shortcode returning an ``<img>`` tag.

    It accepts ``class`` and ``defaultImageWidth`` as well as the Python
    spellings ``class_`` and ``default_image_width``.
    """

    def image_shortcode(src: Optional[str] = None, alt: Optional[str] = None, **args: Any) -> str:
        return image_tag(src, zones, alt=alt, **shortcode_kwargs(args))

    register_shortcode(shortcode_name, image_shortcode)
    return image_shortcode


def add_image_url_filter(register_filter: RegisterFn, filter_name: str, zones: Sequence[Zone]):
    """Register a filter returning the image URL; grouped images use their widest file."""

    def image_url_filter(src: str) -> str:
        return image_url(src, zones)

    register_filter(filter_name, image_url_filter)
    return image_url_filter
