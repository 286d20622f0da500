"""Structured JSONL logging helpers."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def log_event(log_path: Optional[Path], event_type: str, payload: Dict[str, Any]) -> None:
    """Append a structured event to a JSONL log; no-op when ``log_path`` is None."""
    if log_path is None:
        return
    record = {
        "timestamp": _utc_timestamp(),
        "event_type": event_type,
        "payload": payload,
    }
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, ensure_ascii=True) + "\n")
