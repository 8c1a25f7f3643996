"""Load demo data into an existing LaundryZone database.

Run scripts/init_db.py first. Safe to re-run: seed rows use INSERT IGNORE and
the demo accounts are reset to their known passwords.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.laundry_zone.laundry_zone.database.bootstrap import apply_seed_sql, ensure_demo_users

DEMO_LOGINS = (("admin", "admin123", "admin"), ("pelanggan", "123456", "customer"))


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_users(db_config)

    print(f"OK: demo data loaded into {db_config.get('database')}")
    for username, password, role in DEMO_LOGINS:
        print(f"  {role:<9} {username} / {password}")


if __name__ == "__main__":
    main()
