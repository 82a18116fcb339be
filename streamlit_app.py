"""
BrewOS - Streamlit Cloud Version
Standalone dashboard that works without the API server.

Telemetry is synthesized in-process and the demo flag is kept in a
local SQLite database (DATABASE_URL).
"""

import os
import logging

from api.database import SqlDemoStateStore, init_database
from api.dependencies import get_random_seed
from app.dashboard import run_dashboard
from app.data_sources import LocalDataSource

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    init_database()

    run_dashboard(
        SqlDemoStateStore(),
        LocalDataSource(random_seed=get_random_seed()),
        source_label="local simulation"
    )


if __name__ == "__main__":
    main()
