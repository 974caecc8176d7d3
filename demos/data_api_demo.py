"""
Neptune demo over the Neptune Data API (REST).
Performs the same kind of work as the Bolt demo, but through boto3.
"""

import logging
from typing import Any, Dict, List, Optional

from config.settings import NeptuneConfig
from database_adapters.database_factory import DatabaseFactory
from database_adapters.neptune_data_api_adapter import NeptuneDataApiAdapter
from utils.helpers import format_records, get_value

logger = logging.getLogger(__name__)

TEST_QUERY = "RETURN 'Hello Neptune!' as message"

CREATE_QUERIES = [
    "CREATE (p:Person {name: 'Alice', age: 30})",
    "CREATE (p:Person {name: 'Bob', age: 25})",
    "CREATE (c:Company {name: 'TechCorp'})",
    "MATCH (a:Person {name: 'Alice'}), (c:Company {name: 'TechCorp'}) CREATE (a)-[:WORKS_FOR]->(c)",
    "MATCH (a:Person {name: 'Alice'}), (b:Person {name: 'Bob'}) CREATE (a)-[:KNOWS]->(b)",
]

PERSONS_QUERY = "MATCH (p:Person) RETURN p.name as name, p.age as age"

RELATIONSHIPS_QUERY = "MATCH (p1:Person)-[r]->(p2) RETURN p1.name as person1, type(r) as relationship, p2.name as person2"

CLEANUP_QUERY = "MATCH (n) DETACH DELETE n"


class NeptuneDataApiDemo:
    """Connects to the Neptune Data API and runs the sample openCypher queries."""

    def __init__(self, config: NeptuneConfig, adapter: Optional[NeptuneDataApiAdapter] = None):
        self.config = config
        self.adapter = adapter or DatabaseFactory.create_adapter("data-api", config)
        self.adapter.connect()

    def get_cluster_status(self) -> Optional[Dict[str, Any]]:
        """Log the cluster status. Failures are logged, not raised."""
        try:
            response = self.adapter.get_engine_status()
            logger.info(f"Neptune cluster status: {response.get('status')}")
            logger.info(f"Database engine: {response.get('dbEngineVersion')}")
            return response
        except Exception as e:
            logger.error(f"Failed to get cluster status: {e}", exc_info=True)
            return None

    def test_connection(self) -> List[Dict[str, Any]]:
        """
        Execute a simple query to test the connection.

        Raises:
            RuntimeError: wrapping whatever made the query fail
        """
        try:
            results = self.adapter.execute_query(TEST_QUERY)
            logger.info(f"Connection test successful. Response: {format_records(results)}")
            return results
        except Exception as e:
            logger.error(f"Connection test failed: {e}", exc_info=True)
            raise RuntimeError("Connection test failed") from e

    def create_sample_data(self) -> None:
        """Create sample nodes and relationships."""
        try:
            for query in CREATE_QUERIES:
                self.adapter.execute_query(query)
            logger.info("Sample data created successfully using Neptune Data API")
        except Exception as e:
            logger.error(f"Failed to create sample data: {e}", exc_info=True)
            raise

    def query_sample_data(self) -> None:
        """Query persons and their relationships, logging one line per row."""
        try:
            logger.info("Querying persons in the database:")
            persons = self.adapter.execute_query(PERSONS_QUERY)
            logger.info(f"Persons query results: {format_records(persons)}")
            for row in persons:
                if isinstance(row, dict):
                    logger.info(f"- Name: {get_value(row, 'name')}, Age: {get_value(row, 'age', 0)}")

            logger.info("Querying relationships:")
            relationships = self.adapter.execute_query(RELATIONSHIPS_QUERY)
            logger.info(f"Relationships query results: {format_records(relationships)}")
            for row in relationships:
                if isinstance(row, dict):
                    logger.info(f"- {get_value(row, 'person1')} {get_value(row, 'relationship')} "
                                f"{get_value(row, 'person2')}")
        except Exception as e:
            logger.error(f"Query execution failed: {e}", exc_info=True)
            raise

    def cleanup_sample_data(self) -> None:
        """Remove every node and relationship."""
        try:
            self.adapter.execute_query(CLEANUP_QUERY)
            logger.info("Sample data cleaned up using Neptune Data API")
        except Exception as e:
            logger.error(f"Failed to cleanup sample data: {e}", exc_info=True)
            raise

    def close(self) -> None:
        """Close the Data API client."""
        self.adapter.disconnect()

    def run(self) -> None:
        """Run the full demo sequence, always closing the client."""
        try:
            self.get_cluster_status()
            self.test_connection()
            self.create_sample_data()
            self.query_sample_data()
            self.cleanup_sample_data()
        finally:
            self.close()
