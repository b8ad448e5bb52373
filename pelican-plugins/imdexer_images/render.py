"""Render imdexer images as ``<img>`` tags or bare URLs.

Single images become::

    <img loading="lazy" width="800" height="600" src="/media/cat.jpg"  alt="A cat" />

Grouped images become a responsive tag whose ``srcset`` lists every variant
and whose ``src``/``width``/``height`` come from the default variant::

    <img loading="lazy" sizes="auto" width="1600" height="900"
         srcset="/media/cat-800.jpg 800w, /media/cat-1600.jpg 1600w"
         src="/media/cat-1600.jpg"  alt="A cat" />

Attribute order and spacing are fixed; pages built before must come out byte
for byte the same. Values are inserted without HTML escaping, so ``alt`` and
``class`` must already be safe.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .errors import MissingAlt, MissingImageData, MissingIndex, MissingSrc
from .records import GroupedImage, ImageRecord, lookup_record, select_by_width, select_default
from .zones import Zone, ZoneMatch, resolve_zone


def join_posix_path(path1: Optional[str], path2: Optional[str]) -> str:
    """Join two URL paths with exactly one ``/`` between them.

    Empty operands are concatenated as-is, so ``join_posix_path('', 'a.jpg')``
    is ``'a.jpg'`` and no separator is ever invented.
    """
    path1 = path1 or ''
    path2 = path2 or ''
    if not path1 or not path2:
        return path1 + path2
    if path1.endswith('/'):
        path1 = path1[:-1]
    if path2.startswith('/'):
        path2 = path2[1:]
    return f'{path1}/{path2}'


@dataclass(frozen=True)
class RenderOptions:
    alt: Optional[str]
    class_attr: Optional[str] = None
    lazy: bool = True
    sizes: str = 'auto'
    default_image_width: Optional[int] = None


@dataclass(frozen=True)
class ResolvedImage:
    zone: Zone
    local_source: str
    record: Optional[ImageRecord]


def resolve_image(match: ZoneMatch) -> ResolvedImage:
    record = lookup_record(match.zone, match.local_source)
    return ResolvedImage(match.zone, match.local_source, record)


def _loading_attr(lazy: bool) -> str:
    return 'loading="lazy"' if lazy else ''


def _class_attr(class_attr: Optional[str]) -> str:
    return f'class="{class_attr}"' if class_attr else ''


def build_image_tag(target: Union[ZoneMatch, ResolvedImage], options: RenderOptions) -> str:
    """Build the ``<img>`` tag for an already resolved source.

    *target* is either a bare zone match, in which case the record is looked
    up after the argument checks, or a :class:`ResolvedImage`.
    """
    zone = target.zone
    src = target.local_source

    if isinstance(target, ResolvedImage):
        if target.record is None:
            raise MissingIndex(src)
    elif zone.index is None:
        raise MissingIndex(src)

    # Decorative images pass alt="" explicitly; leaving it out is a mistake.
    if options.alt is None:
        raise MissingAlt(src)

    if not src:
        raise MissingSrc()

    record = target.record if isinstance(target, ResolvedImage) else lookup_record(zone, src)
    loading = _loading_attr(options.lazy)
    css_class = _class_attr(options.class_attr)

    if not isinstance(record, GroupedImage):
        full_src = join_posix_path(zone.base_url, src)
        return (
            f'<img {loading} width="{record.width}" height="{record.height}" '
            f'src="{full_src}" {css_class} alt="{options.alt}" />'
        )

    srcset = ', '.join(
        f'{join_posix_path(zone.base_url, variant.path)} {variant.width}w'
        for variant in record.variants
    )

    if options.default_image_width:
        default = select_by_width(record.variants, options.default_image_width, src)
    else:
        default = select_default(record.variants)

    default_src = join_posix_path(zone.base_url, default.path)
    return (
        f'<img {loading} sizes="{options.sizes}" width="{default.width}" height="{default.height}" '
        f'srcset="{srcset}" src="{default_src}" {css_class} alt="{options.alt}" />'
    )


def build_image_url(target: Union[ZoneMatch, ResolvedImage]) -> str:
    """Return the URL of a resolved source; grouped images use their widest file."""
    zone = target.zone
    if isinstance(target, ResolvedImage):
        record = target.record
        if record is None:
            raise MissingImageData(target.local_source)
    elif zone.index is None:
        raise MissingImageData(target.local_source)
    else:
        record = lookup_record(zone, target.local_source)

    if not isinstance(record, GroupedImage):
        return join_posix_path(zone.base_url, target.local_source)
    return join_posix_path(zone.base_url, select_default(record.variants).path)


def image_tag(src: str, zones: Sequence[Zone], alt: Optional[str] = None, class_: Optional[str] = None,
              lazy: Optional[bool] = True, sizes: Optional[str] = 'auto',
              default_image_width: Optional[int] = None) -> str:
    # Templates may pass None explicitly; that means "use the default".
    options = RenderOptions(
        alt=alt,
        class_attr=class_,
        lazy=True if lazy is None else lazy,
        sizes='auto' if sizes is None else sizes,
        default_image_width=default_image_width,
    )
    return build_image_tag(resolve_zone(src or '', zones), options)


def image_url(src: str, zones: Sequence[Zone]) -> str:
    return build_image_url(resolve_zone(src or '', zones))
