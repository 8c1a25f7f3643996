"""Create the LaundryZone tables from database/schema.sql.

Usage: python scripts/init_db.py [--seed]

`--seed` also loads database/seed.sql (price list, employees, bookkeeping
entries) and the demo accounts, same as scripts/seed_db.py.
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

from src.laundry_zone.laundry_zone.database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables

EXPECTED_TABLES = {"users", "services", "employees", "orders", "financial_reports"}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create the LaundryZone schema")
    parser.add_argument("--seed", action="store_true", help="also load demo data and accounts")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    missing = EXPECTED_TABLES - set(list_tables(db_config))
    if missing:
        raise SystemExit(f"Schema applied but tables are missing: {', '.join(sorted(missing))}")

    if args.seed:
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        ensure_demo_users(db_config)

    print(f"OK: {db_config.get('database')} ready ({'schema + demo data' if args.seed else 'schema only'})")


if __name__ == "__main__":
    main()
