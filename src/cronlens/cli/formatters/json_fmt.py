# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def format_json(result: BaseModel) -> str:
    """Return a result model as formatted JSON string."""
    return result.model_dump_json(indent=2)


def run_to_dict(run: datetime) -> dict[str, Any]:
    return {
        "iso": run.astimezone(UTC).isoformat().replace("+00:00", "Z"),
        "local": run.strftime("%Y-%m-%d %H:%M:%S"),
        "unix": int(run.timestamp()),
    }


def format_runs(expression: str, tz: str, runs: list[datetime], **extra: Any) -> str:
    data: dict[str, Any] = {
        "expression": expression,
        "timezone": tz,
        **extra,
        "count": len(runs),
        "next_runs": [run_to_dict(r) for r in runs],
    }
    return json.dumps(data, indent=2)
