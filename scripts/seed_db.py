from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "tutor_desk"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from tutor_desk.database.bootstrap import apply_seed_sql, ensure_demo_teacher


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    # classes.teacher_id references teachers, so the demo teacher goes first
    ensure_demo_teacher(db_config)
    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
