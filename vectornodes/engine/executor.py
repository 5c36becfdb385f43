"""Executor: drives node evaluation on the asyncio event loop."""

from __future__ import annotations

import asyncio
import copy
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from vectornodes.config import settings
from vectornodes.engine.config import EvaluationConfig
from vectornodes.engine.footprint import Footprint
from vectornodes.engine.node import Node

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


@dataclass
class EvaluationReport(Generic[T]):
    """Results of evaluating one node under several footprints."""

    results: list[T] = field(default_factory=list)
    # Footprint index -> error message, for evaluations replaced by a placeholder
    errors: dict[int, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.errors


class Executor:
    """Evaluates node graphs under caller-supplied footprints."""

    def __init__(self, config: EvaluationConfig | None = None) -> None:
        self.config = config or EvaluationConfig()

    async def evaluate(self, node: Node[T], footprint: Footprint) -> T:
        """Evaluate ``node`` once. Failures are logged and re-raised."""
        t0 = time.perf_counter()
        try:
            value = await node.eval(footprint)
        except Exception as e:
            logger.warning("  %r FAILED: %s", node, e)
            raise

        elapsed = (time.perf_counter() - t0) * 1000
        if elapsed >= self.config.slow_node_ms:
            logger.info("  %r slow evaluation: %.1fms", node, elapsed)
        elif self.config.log_timings:
            logger.debug("  %r completed in %.1fms", node, elapsed)
        return value

    async def evaluate_many(
        self,
        node: Node[T],
        footprints: Sequence[Footprint],
        placeholder: Any = _MISSING,
    ) -> EvaluationReport[T]:
        """Evaluate ``node`` under independent footprints concurrently.

        Without ``placeholder`` the first failure propagates. With one, each
        failed evaluation yields a copy of it and the error text is recorded.
        """
        start = time.perf_counter()
        semaphore = asyncio.Semaphore(max(1, self.config.max_concurrent))
        report: EvaluationReport[T] = EvaluationReport()

        async def _one(index: int, footprint: Footprint) -> T:
            async with semaphore:
                try:
                    return await self.evaluate(node, footprint)
                except Exception as e:
                    if placeholder is _MISSING:
                        raise
                    report.errors[index] = str(e)
                    return copy.deepcopy(placeholder)

        report.results = list(await asyncio.gather(*(_one(i, fp) for i, fp in enumerate(footprints))))
        report.elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "Evaluated %r under %d footprints (%d failed) in %.0fms",
            node,
            len(footprints),
            len(report.errors),
            report.elapsed_ms,
        )
        return report

    def run(self, node: Node[T], footprint: Footprint | None = None) -> T:
        """Synchronous entry point for scripts and tests."""
        return asyncio.run(self.evaluate(node, footprint or Footprint()))


def create_executor(config: EvaluationConfig | None = None) -> Executor:
    """Factory function seeded from environment settings."""
    return Executor(config=config or EvaluationConfig(max_concurrent=settings.vectornodes_max_concurrent))
