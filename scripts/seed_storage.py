"""Write the demo dataset into the configured storage, replacing what is there."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.salon_manager.salon_manager.container import build_storage
from src.salon_manager.salon_manager.core.logging_config import setup_logging
from src.salon_manager.salon_manager.persistence.adapter import PersistenceAdapter
from src.salon_manager.salon_manager.store.seed import seed_collections


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    storage = build_storage(
        settings.STORAGE_BACKEND,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", {}),
    )
    adapter = PersistenceAdapter(storage)
    for name, records in seed_collections().items():
        adapter.save(name, records)
        print(f"OK: {adapter.key_for(name)} <- {len(records)} records")


if __name__ == "__main__":
    main()
