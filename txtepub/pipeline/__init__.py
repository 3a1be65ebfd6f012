"""Conversion pipeline package.

This package orchestrates segmentation, identification, document emission,
and packaging for one text-to-EPUB conversion.
"""

from .converter import TextToEpubConverter, convert

__all__ = ["TextToEpubConverter", "convert"]
