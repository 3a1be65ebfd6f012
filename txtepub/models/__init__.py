"""Shared typed data models for txtepub.

This package contains dataclasses exchanged between conversion stages to avoid
cross-module coupling and circular imports.
"""

from .datatypes import BookMeta, Chapter, EpubArtifact, EpubPackage

__all__ = ["BookMeta", "Chapter", "EpubArtifact", "EpubPackage"]
