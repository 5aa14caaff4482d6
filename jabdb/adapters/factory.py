"""
Adapter Factory for creating storage adapters.
Implements Factory Pattern for plug-and-play storage support.
"""
from pathlib import Path
from typing import Optional

from .base import Adapter
from .json_adapter import JSONFileAdapter
from .memory_adapter import MemoryAdapter
from ..core import config
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class AdapterFactory:
    """
    Factory for creating storage adapters.
    Supports JSON (single file) and Memory (in-memory) backends.
    """

    @staticmethod
    def create(adapter_type: Optional[str] = None, **kwargs) -> Adapter:
        """
        Create an adapter instance.

        Args:
            adapter_type: Type of adapter ('json', 'memory', or None for JABDB_ADAPTER)
            **kwargs: Additional arguments for specific adapters

        Returns:
            Adapter instance

        Examples:
            # JSON (single file, persistent)
            adapter = AdapterFactory.create('json', source='data/db.json')

            # Memory (in-memory, non-persistent)
            adapter = AdapterFactory.create('memory')

            # From environment
            adapter = AdapterFactory.create()
        """
        if adapter_type is None:
            adapter_type = config.JABDB_ADAPTER

        adapter_type = adapter_type.lower()

        if adapter_type == "json":
            return AdapterFactory._create_json(**kwargs)
        elif adapter_type == "memory":
            return AdapterFactory._create_memory(**kwargs)
        else:
            raise ValueError(
                f"Unsupported adapter type: {adapter_type}. "
                f"Supported types: 'json', 'memory'"
            )

    @staticmethod
    def _create_memory(**kwargs) -> MemoryAdapter:
        """Create in-memory adapter (for demos and testing)."""
        return MemoryAdapter(initial=kwargs.get("initial"))

    @staticmethod
    def _create_json(**kwargs) -> JSONFileAdapter:
        """Create single-file JSON adapter."""
        source = kwargs.get("source") or config.JABDB_SOURCE
        require_json_file = kwargs.get("require_json_file", config.JABDB_REQUIRE_JSON_FILE)
        indent = kwargs.get("indent", config.JABDB_JSON_INDENT)
        logger.debug(f"Creating JSON file adapter for {source}")
        return JSONFileAdapter(Path(source), require_json_file=require_json_file, indent=indent)

    @staticmethod
    async def create_and_connect(adapter_type: Optional[str] = None, **kwargs) -> Adapter:
        """
        Create an adapter and connect it.

        Args:
            adapter_type: Type of adapter
            **kwargs: Additional arguments

        Returns:
            Connected Adapter instance
        """
        adapter = AdapterFactory.create(adapter_type, **kwargs)
        await adapter.connect()
        return adapter
