"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from profitshare.core.protocols import IKeyValueStore

__all__ = ["IKeyValueStore"]
