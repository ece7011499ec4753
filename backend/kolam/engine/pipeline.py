"""Pipeline orchestrator: runs analysis stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        """Run every registered stage on the given context.

        Stage failures are recorded in ``ctx.errors``; the pipeline never raises.
        """
        start = time.perf_counter()

        ordered = self.registry.resolve_order()

        for spec in ordered:
            missing = [d for d in spec.dependencies if d in ctx.errors]
            if missing:
                ctx.errors[spec.id] = f"skipped: dependency failed ({', '.join(missing)})"
                logger.warning("  %s SKIPPED: %s failed", spec.id, ", ".join(missing))
                continue
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_stages.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s %s completed in %.1fms", spec.id, spec.description, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages on %d dots in %.1fms",
            len(ctx.completed_stages),
            len(ordered),
            ctx.num_dots,
            total,
        )
        return ctx


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module("kolam.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"kolam.engine.stages.{module_name}")


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    register_stages()
    return Pipeline()
