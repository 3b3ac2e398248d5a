"""Backup all collections.

Exports the six collections from the configured storage into one JSON file
under ``backups/`` (keyed by storage key, same record shape as stored).
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.salon_manager.salon_manager.container import build_storage
from src.salon_manager.salon_manager.core.constants import STORAGE_KEYS
from src.salon_manager.salon_manager.storage.base import KeyValueStorage


def export_collections(storage: KeyValueStorage) -> dict:
    out = {}
    for key in STORAGE_KEYS.values():
        raw = storage.get(key)
        out[key] = json.loads(raw) if raw is not None else None
    return out


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        settings.STORAGE_BACKEND,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", {}),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"salon_backup_{ts}.json"
    out_file.write_text(json.dumps(export_collections(storage), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: backup -> {out_file}")


if __name__ == "__main__":
    main()
