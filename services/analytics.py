# services/analytics.py
# Optional audit trail of store mutations, one JSON object per line.
import json
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

ANALYTICS_ENABLE = os.getenv("ANALYTICS_ENABLE", "0") == "1"
ANALYTICS_PATH = os.getenv("ANALYTICS_PATH") or str(Path(__file__).resolve().parent.parent / "data" / "events.jsonl")

_WRITE_LOCK = threading.Lock()

def mutation_event(kind: str, record: BaseModel) -> Dict[str, Any]:
    return {"type": kind, **record.model_dump()}

def _stamped(event: Dict[str, Any]) -> Dict[str, Any]:
    return {**event, "ts_iso": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")}

def log_event(event: Dict[str, Any], path: Optional[str] = None, enabled: Optional[bool] = None) -> bool:
    """
    Append `event` (plus a UTC timestamp) to the audit file.
    Module settings apply unless `path` / `enabled` are given. Returns True when a line was written.
    """
    if not (ANALYTICS_ENABLE if enabled is None else enabled):
        return False
    target = Path(path or ANALYTICS_PATH)
    target.parent.mkdir(parents=True, exist_ok=True)
    line = json.dumps(_stamped(event), ensure_ascii=False, separators=(",", ":"))
    with _WRITE_LOCK, target.open("a", encoding="utf-8") as fh:
        fh.write(line + "\n")
    return True
