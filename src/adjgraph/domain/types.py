"""Shared type aliases and constants used across the domain."""
from __future__ import annotations

from typing import TypeAlias

NodeId: TypeAlias = int
Weight: TypeAlias = float
EdgeKey: TypeAlias = tuple[int, int]  # (src, dst)

DEFAULT_WEIGHT: Weight = 1.0
