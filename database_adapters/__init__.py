"""
Database adapters module for the Neptune access paths.
Provides a unified interface over the Bolt driver and the Neptune Data API client.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from enum import Enum

class QueryLanguage(Enum):
    """Query languages Neptune understands."""
    OPENCYPHER = "opencypher"
    GREMLIN = "gremlin"
    SPARQL = "sparql"

class GraphDatabaseAdapter(ABC):
    """Abstract base class for graph database adapters."""

    @abstractmethod
    def connect(self) -> None:
        """Open the driver or client."""
        pass

    @abstractmethod
    def disconnect(self):
        """Close the driver or client."""
        pass

    @abstractmethod
    def execute_query(self, query: str, parameters: Optional[Dict[str, Any]] = None,
                      language: QueryLanguage = QueryLanguage.OPENCYPHER) -> List[Dict[str, Any]]:
        """Execute a query and return result rows."""
        pass

    @abstractmethod
    def health_check(self) -> Dict[str, Any]:
        """Perform health check on database."""
        pass

    @property
    @abstractmethod
    def database_type(self) -> str:
        """Return database type identifier."""
        pass

    @property
    def supported_languages(self) -> List[QueryLanguage]:
        """Return list of supported query languages."""
        return [QueryLanguage.OPENCYPHER]

    def _check_language(self, language: QueryLanguage) -> None:
        if language not in self.supported_languages:
            supported = ", ".join(lang.value for lang in self.supported_languages)
            raise ValueError(f"{self.database_type} adapter only supports {supported}")

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
        return False
