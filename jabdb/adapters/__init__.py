"""
Storage abstraction layer for plug-and-play persistence.
Supports JSON (single file) and Memory (in-memory) backends.
"""
from .base import Adapter
from .memory_adapter import MemoryAdapter
from .json_adapter import JSONFileAdapter
from .factory import AdapterFactory

__all__ = [
    "Adapter",
    "MemoryAdapter",
    "JSONFileAdapter",
    "AdapterFactory"
]
