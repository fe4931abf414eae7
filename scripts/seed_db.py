from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module  # noqa: E402

from src.hrms.hrms.database.bootstrap import apply_seed_sql, ensure_admin_account  # noqa: E402

logger = logging.getLogger("hrms.scripts.seed_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    email = getattr(settings, "ADMIN_EMAIL", "")
    password = getattr(settings, "ADMIN_PASSWORD", "")
    if not (email and password):
        raise SystemExit("Set ADMIN_EMAIL and ADMIN_PASSWORD to create the admin account.")
    ensure_admin_account(db_config, email=email, password=password)

    logger.info(
        "Seeded database -> %s@%s:%s/%s",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )


if __name__ == "__main__":
    main()
