"""
Imdexer Images Plugin for Pelican

This plugin renders images recorded in a precomputed imdexer index as
<img> tags, using srcset for images that come in several widths.

It converts:
  [[img: src=blog/cat.jpg; alt=A cat]]

To:
  <img loading="lazy" sizes="auto" width="1600" height="900"
       srcset="/media/blog/cat-800.jpg 800w, /media/blog/cat-1600.jpg 1600w"
       src="/media/blog/cat-1600.jpg"  alt="A cat" />

and adds an `img_url` Jinja2 filter returning the bare image URL. See
config.py for the settings.
"""

import logging

from pelican import signals
from pelican.contents import Article, Page

from .config import zones_from_settings
from .hooks import add_image_shortcode, add_image_url_filter
from .pelican_host import PelicanHost

logger = logging.getLogger(__name__)

_host = None


def build_host(settings):
    """Create a host with the shortcode and filter named in *settings*."""
    zones = zones_from_settings(settings)
    host = PelicanHost()

    shortcode_name = settings.get('IMDEXER_SHORTCODE', 'img')
    if shortcode_name:
        add_image_shortcode(host.register_shortcode, shortcode_name, zones)

    filter_name = settings.get('IMDEXER_URL_FILTER', 'img_url')
    if filter_name:
        add_image_url_filter(host.register_filter, filter_name, zones)

    return host


def initialize(pelican_obj):
    global _host
    settings = pelican_obj.settings
    if 'IMDEXER_ZONES' not in settings:
        logger.warning('imdexer_images: IMDEXER_ZONES is not set, plugin disabled')
        _host = None
        return
    _host = build_host(settings)


def install_template_helpers(generator):
    if _host is not None:
        _host.install(generator.env)


def replace_markers(instance):
    if _host is None or not isinstance(instance, (Article, Page)):
        return
    content = getattr(instance, '_content', None)
    if content:
        instance._content = _host.expand_shortcodes(content)  # noqa: SLF001


def register():
    """Register the plugin with Pelican."""
    signals.initialized.connect(initialize)
    signals.generator_init.connect(install_template_helpers)
    signals.content_object_init.connect(replace_markers)
