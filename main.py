#!/usr/bin/env python3
"""
Main entry point for the Neptune openCypher demo.
Runs either the Bolt demo or the Data API demo based on a command-line argument.

Usage:
    python main.py bolt
    python main.py data-api
"""

import logging
import sys
from typing import List, Optional

from config.settings import NeptuneConfig
from database_adapters.database_factory import DatabaseFactory
from demos import NeptuneBoltDemo, NeptuneDataApiDemo
from utils.helpers import setup_logging, get_system_info

logger = logging.getLogger(__name__)

USAGE = """Usage: neptune-demo <demo-type>

Demo Types:
  bolt      - Run Neptune demo using the neo4j driver over the Bolt protocol
  data-api  - Run Neptune demo using the boto3 Neptune Data API client (REST)

Examples:
  neptune-demo bolt
  neptune-demo data-api
"""

DEMOS = {
    "bolt": ("Neptune Bolt Demo", "Bolt protocol", NeptuneBoltDemo),
    "data-api": ("Neptune Data API Demo", "REST", NeptuneDataApiDemo),
}

def run_demo(demo_type: str, config: Optional[NeptuneConfig] = None) -> None:
    """
    Run one demo end to end.

    Args:
        demo_type: Canonical demo name, "bolt" or "data-api"
        config: Neptune config, loaded from the environment when omitted
    """
    title, transport, demo_class = DEMOS[demo_type]
    config = config or NeptuneConfig.from_properties()
    config.validate()

    logger.info(f"Starting {title} ({transport})")
    logger.info(f"Connecting to Neptune at: {config.data_api_endpoint}")
    logger.info(f"AWS Region: {config.region} (IAM auth: {config.iam_auth})")

    demo_class(config).run()

    logger.info(f"{title} completed successfully")

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print("Error: Exactly one argument required.", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    demo_type = DatabaseFactory.resolve_name(args[0])
    if demo_type is None:
        print(f"Error: Invalid demo type '{args[0].lower()}'", file=sys.stderr)
        print("Valid options are: bolt, data-api", file=sys.stderr)
        print(file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    # Setup logging
    setup_logging()
    logger.debug(f"System info: {get_system_info()}")

    try:
        run_demo(demo_type)
    except Exception as e:
        logger.error(f"Error running demo: {e}", exc_info=True)
        print(f"Error running demo: {e}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
