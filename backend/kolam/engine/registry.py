"""Stage registry: analysis stages are plain functions registered via decorator.

    @stage(id="S1.02", group=StageGroup.STRUCTURE, dependencies=["S0.01"])
    def symmetry_detection(ctx: AnalysisContext) -> None:
        ctx.symmetry = analyze_symmetry(ctx.dots, ctx.config)

A new stage is one more module under ``kolam.engine.stages``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from kolam.engine.context import AnalysisContext

logger = logging.getLogger(__name__)


class StageGroup(enum.IntEnum):
    DETECTION = 0
    STRUCTURE = 1
    SCORING = 2


@dataclass
class StageSpec:
    id: str
    group: StageGroup
    fn: Callable[["AnalysisContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.group.name)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.group, s.id))

    def resolve_order(self) -> list[StageSpec]:
        """Stages in dependency order; ties broken by (group, id).

        Dependencies on unregistered ids are ignored.
        """
        pending = {s.id: {d for d in s.dependencies if d in self._stages} for s in self.all()}
        ordered: list[StageSpec] = []
        while pending:
            ready = [sid for sid, deps in pending.items() if not deps]
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(pending)}")
            # pending preserves (group, id) order, so take the first ready stage
            sid = ready[0]
            ordered.append(self._stages[sid])
            del pending[sid]
            for deps in pending.values():
                deps.discard(sid)
        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    group: StageGroup,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a pipeline stage."""

    def decorator(fn: Callable[["AnalysisContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                group=group,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
