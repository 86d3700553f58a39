# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Rendering helpers for probe outcomes."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .models.outcome import ProbeOutcome


def format_outcome(outcome: ProbeOutcome) -> str:
    """One human-readable progress line per outcome."""
    if outcome.ok:
        return f"[{outcome.status_code}] OK {outcome.url} in {outcome.elapsed_ms}ms"
    return f"[ERROR] {outcome.url} failed: {outcome.error} (after {outcome.elapsed_ms}ms)"


def outcomes_to_json(outcomes: Sequence[ProbeOutcome]) -> list[dict[str, Any]]:
    return [outcome.to_dict() for outcome in outcomes]


def write_json_report(outcomes: Sequence[ProbeOutcome], path: str | Path) -> Path:
    """Write the outcome records as a JSON array. Returns the written path."""
    target = Path(path)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(outcomes_to_json(outcomes), handle, indent=2)
        handle.write("\n")
    return target


def summarize(outcomes: Sequence[ProbeOutcome]) -> str:
    reachable = sum(1 for outcome in outcomes if outcome.ok)
    failed = len(outcomes) - reachable
    return f"{len(outcomes)} URL(s) checked: {reachable} reachable, {failed} failed"


__all__ = ["format_outcome", "outcomes_to_json", "summarize", "write_json_report"]
