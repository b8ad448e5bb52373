"""Errors raised while resolving and rendering imdexer images.

Every failure aborts the render call that hit it; nothing here is retried or
replaced with a fallback value.
"""
from __future__ import annotations

from typing import Optional


class ImdexerError(Exception):
    """Base class for all imdexer image errors."""


class ImdexerConfigError(ImdexerError):
    """The plugin settings or a content marker are malformed."""


class NoZoneMatch(ImdexerError):
    def __init__(self, src: str):
        self.src = src
        super().__init__(f"No zone found for image: {src}")


class MissingIndex(ImdexerError):
    def __init__(self, src: Optional[str] = None):
        self.src = src
        super().__init__(f"imdexer_images requires an imdexer index (image: {src})")


class MissingImageData(ImdexerError):
    def __init__(self, src: str):
        self.src = src
        super().__init__(f"Missing image data for image: {src}")


class MissingAlt(ImdexerError):
    def __init__(self, src: Optional[str]):
        self.src = src
        super().__init__(f"Missing `alt` attribute for image: {src}")


class MissingSrc(ImdexerError):
    def __init__(self):
        super().__init__("Missing `src` attribute for image")


class WidthNotFound(ImdexerError):
    def __init__(self, width: int, src: Optional[str] = None):
        self.width = width
        self.src = src
        super().__init__(f"No image found with width {width} for image: {src}")
