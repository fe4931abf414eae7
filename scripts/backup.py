"""Dump the HRMS database with ``mysqldump`` into ./backups/."""

from __future__ import annotations

import importlib
import logging
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module  # noqa: E402

logger = logging.getLogger("hrms.scripts.backup")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db = settings.DB_CONFIG

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"{db['database']}_{datetime.now():%Y%m%d_%H%M%S}.sql"

    cmd = [
        "mysqldump",
        f"-h{db['host']}",
        f"-P{db.get('port', 3306)}",
        f"-u{db['user']}",
        f"-p{db['password']}",
        "--single-transaction",
        db["database"],
    ]

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
    except FileNotFoundError:
        raise SystemExit("mysqldump not found; install the MySQL client tools.")
    logger.info("Backup created: %s", out_file)


if __name__ == "__main__":
    main()
