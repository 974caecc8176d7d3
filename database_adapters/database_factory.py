"""
Database factory for creating Neptune adapters by access path.
"""

import logging
from typing import Dict, Optional, Type

from config.settings import NeptuneConfig
from . import GraphDatabaseAdapter
from .neptune_bolt_adapter import NeptuneBoltAdapter
from .neptune_data_api_adapter import NeptuneDataApiAdapter

logger = logging.getLogger(__name__)

class DatabaseFactory:
    """Factory for creating Neptune adapter instances."""

    _adapter_map: Dict[str, Type[GraphDatabaseAdapter]] = {
        "bolt": NeptuneBoltAdapter,
        "data-api": NeptuneDataApiAdapter,
    }

    # Older name for the Bolt path
    _aliases: Dict[str, str] = {
        "neo4j": "bolt",
    }

    @classmethod
    def resolve_name(cls, name: str) -> Optional[str]:
        """Map a user-supplied access path name to its canonical name."""
        name = name.lower()
        name = cls._aliases.get(name, name)
        return name if name in cls._adapter_map else None

    @classmethod
    def supported(cls):
        return list(cls._adapter_map)

    @classmethod
    def create_adapter(cls, name: str, config: NeptuneConfig) -> GraphDatabaseAdapter:
        """
        Create an adapter for the given access path.

        Raises:
            ValueError: if the name isn't a known access path
        """
        canonical = cls.resolve_name(name)
        if canonical is None:
            raise ValueError(f"Unsupported adapter: {name}")

        adapter = cls._adapter_map[canonical](config)
        logger.debug(f"Created {canonical} adapter")
        return adapter
