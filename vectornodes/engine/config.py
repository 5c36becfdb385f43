"""Evaluation configuration: controls how the executor schedules nodes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EvaluationConfig:
    """Scheduling knobs for Executor."""

    # Footprints evaluated concurrently by evaluate_many
    max_concurrent: int = 8

    # Evaluations slower than this are logged at INFO
    slow_node_ms: float = 250.0

    # Per-evaluation DEBUG timing lines
    log_timings: bool = True
