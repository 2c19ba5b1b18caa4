"""Seed the user directory with one demo account per role.

Run with:
    python scripts/seed_db.py [--seed-file database/seed.sql]

Only ``users`` rows are inserted (INSERT IGNORE, so re-running is safe).
No claims are created; log in as the demo lecturer and submit one.
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

from src.claim_system.claim_system.core.enums import Role
from src.claim_system.claim_system.database.bootstrap import apply_seed_sql
from src.claim_system.claim_system.database.connection import DatabaseConnection, DBConfig
from src.claim_system.claim_system.users.mysql_user_directory import MySQLUserDirectory

DEFAULT_SEED_FILE = REPO_ROOT / "database" / "seed.sql"


def main() -> None:
    parser = argparse.ArgumentParser(description="Insert demo directory users (no claims)")
    parser.add_argument(
        "--seed-file",
        type=Path,
        default=DEFAULT_SEED_FILE,
        help=f"Path to seed SQL file (default: {DEFAULT_SEED_FILE})",
    )
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=args.seed_file)

    directory = MySQLUserDirectory(DatabaseConnection(DBConfig.from_dict(db_config)))
    print(f"Directory users in {db_config.get('database')}:")
    for role in Role:
        names = ", ".join(actor.full_name for actor in directory.list_by_role(role)) or "-"
        print(f"  {role.value:<22} {names}")


if __name__ == "__main__":
    main()
