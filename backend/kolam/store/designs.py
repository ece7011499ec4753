"""In-memory, list-backed CRUD for saved kolam designs.

Designs live for the lifetime of the process. There is no durability and no
locking; ids are handed out from a monotonically increasing counter.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from kolam.models.design import Design, DesignCreate, DesignUpdate, default_design_name

logger = logging.getLogger(__name__)


class DesignStore:
    """List-backed design storage."""

    def __init__(self) -> None:
        self._designs: list[Design] = []
        self._id_counter = 0

    def create(self, data: DesignCreate) -> Design:
        self._id_counter += 1
        design = Design(
            id=self._id_counter,
            name=data.name or default_design_name(),
            dots=data.dots or [],
            lines=data.lines or [],
            circles=data.circles or [],
            connections=data.connections or [],
            image_data=data.image_data or "",
            style=data.style or "traditional",
        )
        self._designs.append(design)
        logger.info("Saved design %d (%s)", design.id, design.name)
        return design

    def find(self) -> list[Design]:
        """All designs, most recent first."""
        return list(reversed(self._designs))

    def find_with_limit(self, limit: int = 20) -> list[Design]:
        if limit <= 0:
            return []
        return list(reversed(self._designs[-limit:]))

    def find_by_id(self, design_id: int | str) -> Design | None:
        index = self._index_of(design_id)
        return self._designs[index] if index is not None else None

    def update(self, design_id: int | str, data: DesignUpdate) -> Design | None:
        index = self._index_of(design_id)
        if index is None:
            return None
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_at"] = datetime.now(timezone.utc)
        updated = self._designs[index].model_copy(update=changes)
        self._designs[index] = updated
        logger.info("Updated design %d (%s)", updated.id, ", ".join(sorted(changes)))
        return updated

    def delete(self, design_id: int | str) -> bool:
        index = self._index_of(design_id)
        if index is None:
            return False
        removed = self._designs.pop(index)
        logger.info("Deleted design %d", removed.id)
        return True

    def count(self) -> int:
        return len(self._designs)

    def clear_all(self) -> None:
        self._designs = []
        self._id_counter = 0

    def _index_of(self, design_id: int | str) -> int | None:
        try:
            wanted = int(design_id)
        except (TypeError, ValueError):
            return None
        for i, design in enumerate(self._designs):
            if design.id == wanted:
                return i
        return None


SAMPLE_DESIGNS: list[dict] = [
    {
        "name": "Classic Circular Kolam",
        "dots": [
            {"x": 300, "y": 100}, {"x": 350, "y": 120}, {"x": 400, "y": 100},
            {"x": 420, "y": 150}, {"x": 400, "y": 200}, {"x": 350, "y": 220},
            {"x": 300, "y": 200}, {"x": 280, "y": 150},
        ],
        "style": "traditional",
    },
    {
        "name": "Geometric Star Pattern",
        "dots": [
            {"x": 300, "y": 150}, {"x": 400, "y": 150},
            {"x": 450, "y": 200}, {"x": 400, "y": 300},
            {"x": 300, "y": 300}, {"x": 250, "y": 200},
        ],
        "style": "geometric",
    },
    {
        "name": "Floral Mandala",
        "dots": [
            {"x": 350, "y": 150}, {"x": 400, "y": 180}, {"x": 420, "y": 230},
            {"x": 380, "y": 270}, {"x": 320, "y": 270}, {"x": 280, "y": 230},
            {"x": 300, "y": 180}, {"x": 350, "y": 200},
        ],
        "style": "floral",
    },
]


def _closed_outline(dots: list[dict]) -> list[dict]:
    return [
        {"start": dict(a), "end": dict(dots[(i + 1) % len(dots)])}
        for i, a in enumerate(dots)
    ]


def seed_sample_designs(store: DesignStore) -> list[Design]:
    """Reset ``store`` to the bundled sample designs."""
    store.clear_all()
    created = []
    for sample in SAMPLE_DESIGNS:
        # The first two samples are drawn as closed outlines, the mandala as bare dots
        lines = _closed_outline(sample["dots"]) if sample["style"] != "floral" else []
        created.append(
            store.create(
                DesignCreate(
                    name=sample["name"],
                    dots=sample["dots"],
                    lines=lines,
                    style=sample["style"],
                )
            )
        )
    logger.info("Seeded %d sample designs", len(created))
    return created


# Singleton
_store: DesignStore | None = None


def get_design_store() -> DesignStore:
    """Get or create the global DesignStore singleton."""
    global _store
    if _store is None:
        _store = DesignStore()
        from kolam.config import settings

        if settings.seed_sample_designs:
            seed_sample_designs(_store)
    return _store
