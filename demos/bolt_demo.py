"""
Neptune demo over the Bolt protocol.
Runs a fixed set of openCypher statements through the neo4j driver.
"""

import logging
from typing import Optional

from neo4j.exceptions import DriverError, Neo4jError

from config.settings import NeptuneConfig
from database_adapters.database_factory import DatabaseFactory
from database_adapters.neptune_bolt_adapter import NeptuneBoltAdapter
from utils.helpers import get_value

logger = logging.getLogger(__name__)

TEST_QUERY = "RETURN 'Hello from Neptune!' as message"

CREATE_QUERY = """
CREATE (p1:Person {name: 'Alice', age: 30})
CREATE (p2:Person {name: 'Bob', age: 25})
CREATE (c:Company {name: 'TechCorp'})
CREATE (p1)-[:WORKS_FOR]->(c)
CREATE (p2)-[:WORKS_FOR]->(c)
RETURN p1.name as person1, p2.name as person2, c.name as company
"""

FIND_PERSONS_QUERY = "MATCH (p:Person) RETURN p.name as name, p.age as age ORDER BY p.name"

RELATIONSHIPS_QUERY = """
MATCH (p:Person)-[r:WORKS_FOR]->(c:Company)
RETURN p.name as person, type(r) as relationship, c.name as company
"""

CLEANUP_QUERY = """
MATCH (n)
WHERE n:Person OR n:Company
DETACH DELETE n
"""


class NeptuneBoltDemo:
    """Connects to Neptune over Bolt and runs the sample openCypher queries."""

    def __init__(self, config: NeptuneConfig, adapter: Optional[NeptuneBoltAdapter] = None):
        self.config = config
        self.adapter = adapter or DatabaseFactory.create_adapter("bolt", config)
        self.adapter.connect()

    def test_connection(self) -> Optional[str]:
        """
        Execute a simple query to test the connection.

        Returns:
            The greeting returned by the server, or None if no row came back
        """
        try:
            logger.info(f"Executing test query: {TEST_QUERY}")
            records = self.adapter.execute_query(TEST_QUERY)

            if not records:
                logger.warning("Query executed but returned no results")
                return None

            message = records[0].get("message")
            logger.info(f"Connection test successful: {message}")
            return message
        except (Neo4jError, DriverError) as e:
            logger.error(f"Bolt driver error during test query: {e}", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Unexpected error during test query: {e}", exc_info=True)
            raise

    def run_sample_queries(self) -> None:
        """Create, query and remove a small Person/Company graph in one session."""
        try:
            with self.adapter.session() as session:
                logger.info("Starting sample OpenCypher queries")

                logger.info("Creating sample data")
                created = self.adapter.execute_query(CREATE_QUERY, session=session)
                if created:
                    row = created[0]
                    logger.info(f"Created: {row.get('person1')} and {row.get('person2')} "
                                f"working for {row.get('company')}")

                logger.info("Finding all persons")
                for row in self.adapter.execute_query(FIND_PERSONS_QUERY, session=session):
                    logger.info(f"Person: {get_value(row, 'name')} (age: {get_value(row, 'age', 0)})")

                logger.info("Finding relationships")
                for row in self.adapter.execute_query(RELATIONSHIPS_QUERY, session=session):
                    logger.info(f"{get_value(row, 'person')} {get_value(row, 'relationship')} "
                                f"{get_value(row, 'company')}")

                logger.info("Cleaning up test data")
                self.adapter.execute_query(CLEANUP_QUERY, session=session)
                logger.info("Test data cleaned up successfully")

                logger.info("Sample queries completed successfully")
        except (Neo4jError, DriverError) as e:
            logger.error(f"Bolt driver error during sample queries: {e}", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Unexpected error during sample queries: {e}", exc_info=True)
            raise

    def close(self) -> None:
        """Close the driver connection."""
        self.adapter.disconnect()

    def run(self) -> None:
        """Run the full demo sequence, always closing the driver."""
        try:
            self.test_connection()
            self.run_sample_queries()
        finally:
            self.close()
