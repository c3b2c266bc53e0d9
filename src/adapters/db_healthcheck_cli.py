"""Operator check that the fleet database is reachable.

Run it before exporting investor reports from a new machine: it logs the
configured ``FLEET_DB_URL`` target and issues one trivial query.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Connect to the fleet database and run ``SELECT 1``."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_fleet_engine()
    logger.info(f"Fleet DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Fleet database connection is working.")


if __name__ == "__main__":
    main()
