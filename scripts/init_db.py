"""Create the attendance tracker database and tables.

Usage: ``APP_ENV=production python scripts/init_db.py [--show-tables]``
"""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.log import configure_logging
from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, list_tables
from src.attendance_tracker.attendance_tracker.main import SCHEMA_PATH

logger = logging.getLogger("attendance_tracker.init_db")


def run(show_tables: bool = False) -> int:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SCHEMA_PATH)
    tables = list_tables(db_config)
    logger.info("database %s ready with %d tables", db_config.get("database"), len(tables))
    if show_tables:
        for name in tables:
            print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--show-tables", action="store_true", help="print table names afterwards")
    args = parser.parse_args(argv)

    configure_logging("INFO")
    return run(show_tables=args.show_tables)


if __name__ == "__main__":
    sys.exit(main())
