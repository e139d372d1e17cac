from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from hostel_leave.database.bootstrap import apply_schema
from hostel_leave.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_mapping(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    count = apply_schema(DatabaseConnection(config), config.database, schema_path=schema_path)
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} (statements={count})")


if __name__ == "__main__":
    main()
