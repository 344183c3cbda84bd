"""Application layer for zippack.

This layer orchestrates packaging without direct filesystem I/O.
All side effects are delegated to adapters via port interfaces.
"""

__all__ = [
    "PackResult",
    "PackService",
]

from zippack.app.pack_service import PackResult, PackService
