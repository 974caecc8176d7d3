"""
Neptune adapter for the Neptune Data API (REST).
Runs openCypher through the boto3 "neptunedata" client.
"""

import json
import logging
from typing import Dict, Any, List, Optional

from botocore import UNSIGNED
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from config.settings import NeptuneConfig
from . import GraphDatabaseAdapter, QueryLanguage

logger = logging.getLogger(__name__)

class NeptuneDataApiAdapter(GraphDatabaseAdapter):
    """Neptune adapter calling the Data API with boto3."""

    def __init__(self, config: NeptuneConfig):
        """Initialize Data API adapter with a Neptune config."""
        self.config = config
        self.endpoint = config.data_api_endpoint
        self.endpoint_url = config.https_uri
        self.region = config.region
        self.client = None

    def connect(self) -> None:
        """Create the neptunedata client."""
        # Without IAM auth requests go out unsigned
        client_config = None if self.config.iam_auth else Config(signature_version=UNSIGNED)

        self.client = self.config.boto3_session().client(
            "neptunedata",
            region_name=self.region,
            endpoint_url=self.endpoint_url,
            config=client_config,
        )
        logger.info(f"Successfully created Neptune Data API client for endpoint: {self.endpoint}")

    def disconnect(self):
        """Close the neptunedata client."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Neptune Data API client closed")

    def _require_client(self):
        if not self.client:
            raise ConnectionError("No active Neptune Data API client")
        return self.client

    def execute_open_cypher(self, query: str, parameters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute an openCypher query and return the raw API response.

        Args:
            query: openCypher statement
            parameters: Query parameters, sent JSON-encoded

        Returns:
            The execute_open_cypher_query response
        """
        client = self._require_client()
        request = {"openCypherQuery": query}
        if parameters:
            request["parameters"] = json.dumps(parameters, default=str)

        try:
            response = client.execute_open_cypher_query(**request)
            logger.debug(f"Executed query: {query}")
            return response
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to execute query: {query}: {e}", exc_info=True)
            raise

    def execute_query(self, query: str, parameters: Optional[Dict[str, Any]] = None,
                      language: QueryLanguage = QueryLanguage.OPENCYPHER) -> List[Dict[str, Any]]:
        """Execute an openCypher query and return the result rows."""
        self._check_language(language)
        response = self.execute_open_cypher(query, parameters)
        results = response.get("results")
        return results if isinstance(results, list) else []

    def get_engine_status(self) -> Dict[str, Any]:
        """Return the cluster's engine status."""
        client = self._require_client()
        return client.get_engine_status()

    def health_check(self) -> Dict[str, Any]:
        """Perform health check on database."""
        if not self.client:
            return {
                "status": "disconnected",
                "database_type": self.database_type
            }

        try:
            status = self.get_engine_status()
            return {
                "status": "healthy" if status.get("status") == "healthy" else "unhealthy",
                "database_type": self.database_type,
                "engine_status": status.get("status"),
                "engine_version": status.get("dbEngineVersion")
            }
        except (ClientError, BotoCoreError) as e:
            return {
                "status": "unhealthy",
                "database_type": self.database_type,
                "error": str(e)
            }

    @property
    def database_type(self) -> str:
        """Return database type identifier."""
        return "neptune-data-api"
