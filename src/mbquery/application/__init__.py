"""Application layer: the read-only query facade."""

from __future__ import annotations

from .query import Query

__all__ = ["Query"]
