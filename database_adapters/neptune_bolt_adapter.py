"""
Neptune adapter for the Bolt protocol.
Runs openCypher through the neo4j driver, with SigV4 auth when IAM is enabled.
"""

import logging
from typing import Dict, Any, List, Optional
from neo4j import GraphDatabase, TrustSystemCAs
from neo4j.exceptions import DriverError, Neo4jError

from config.settings import NeptuneConfig
from . import GraphDatabaseAdapter, QueryLanguage
from .neptune_auth import NeptuneAuthToken

logger = logging.getLogger(__name__)

class NeptuneBoltAdapter(GraphDatabaseAdapter):
    """Neptune adapter speaking Bolt through the neo4j driver."""

    def __init__(self, config: NeptuneConfig):
        """Initialize Bolt adapter with a Neptune config."""
        self.config = config
        self.uri = config.bolt_uri
        self.driver = None

    def _build_auth(self):
        if self.config.iam_auth:
            logger.debug("IAM auth enabled, signing Bolt auth tokens with SigV4")
            token = NeptuneAuthToken(self.config.region, self.config.https_uri, self.config.get_credentials)
            return token.to_auth_manager()
        return None

    def connect(self) -> None:
        """Create the Bolt driver."""
        self.driver = GraphDatabase.driver(
            self.uri,
            auth=self._build_auth(),
            encrypted=True,
            trusted_certificates=TrustSystemCAs(),
        )
        logger.info(f"Successfully created Bolt driver for URI: {self.uri}")

    def disconnect(self):
        """Close the Bolt driver."""
        if self.driver:
            self.driver.close()
            self.driver = None
            logger.info("Bolt driver closed")

    def session(self):
        """Open a driver session; the caller closes it."""
        if not self.driver:
            raise ConnectionError("No active Neptune Bolt connection")
        return self.driver.session()

    def execute_query(self, query: str, parameters: Optional[Dict[str, Any]] = None,
                      language: QueryLanguage = QueryLanguage.OPENCYPHER, session=None) -> List[Dict[str, Any]]:
        """
        Execute an openCypher query and return its records as dicts.

        Args:
            query: openCypher statement
            parameters: Query parameters
            language: Must be openCypher
            session: Existing session to run in; a new one is opened otherwise

        Returns:
            One dict per record
        """
        self._check_language(language)

        if session is not None:
            return self._run(session, query, parameters)

        with self.session() as new_session:
            return self._run(new_session, query, parameters)

    def _run(self, session, query: str, parameters: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
        try:
            result = session.run(query, parameters or {})
            records = [record.data() for record in result]
            logger.debug(f"Query executed successfully, returned {len(records)} records")
            return records
        except (Neo4jError, DriverError) as e:
            logger.error(f"Bolt driver error executing query: {e}", exc_info=True)
            raise

    def health_check(self) -> Dict[str, Any]:
        """Perform health check on database."""
        if not self.driver:
            return {
                "status": "disconnected",
                "database_type": self.database_type
            }

        try:
            self.driver.verify_connectivity()
            return {
                "status": "healthy",
                "database_type": self.database_type,
                "uri": self.uri
            }
        except (Neo4jError, DriverError) as e:
            return {
                "status": "unhealthy",
                "database_type": self.database_type,
                "error": str(e)
            }

    @property
    def database_type(self) -> str:
        """Return database type identifier."""
        return "neptune-bolt"
