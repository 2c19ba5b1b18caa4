"""Create the claims database and its tables.

Run with:
    python scripts/init_db.py [--schema-file database/schema.sql]

Safe to re-run: every statement is CREATE ... IF NOT EXISTS.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.claim_system.claim_system.database.bootstrap import apply_schema, list_tables

DEFAULT_SCHEMA_FILE = REPO_ROOT / "database" / "schema.sql"


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply the claims schema")
    parser.add_argument(
        "--schema-file",
        type=Path,
        default=DEFAULT_SCHEMA_FILE,
        help=f"Path to schema SQL file (default: {DEFAULT_SCHEMA_FILE})",
    )
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=args.schema_file)
    print(f"Schema applied to {db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}")
    for table in list_tables(db_config):
        print(f"  {table}")


if __name__ == "__main__":
    main()
