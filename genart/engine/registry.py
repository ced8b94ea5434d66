"""Painting registry — every art piece is a standalone function registered via decorator.

Usage:
    @painting(id="maze", description="Perfect maze with its solution", tags={"grid"})
    def maze(ctx: PaintingContext) -> None:
        ctx.elements.append({"tag": "path", "d": ...})

Adding a new painting = creating one module in genart/paintings with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from genart.engine.context import PaintingContext

logger = logging.getLogger(__name__)


@dataclass
class PaintingSpec:
    id: str
    fn: Callable[["PaintingContext"], None]
    tags: set[str] = field(default_factory=set)
    description: str = ""


class PaintingRegistry:
    """Registry of all paintings, keyed by ID."""

    def __init__(self) -> None:
        self._paintings: dict[str, PaintingSpec] = {}

    def register(self, spec: PaintingSpec) -> None:
        if spec.id in self._paintings:
            raise ValueError(f"Duplicate painting ID: {spec.id}")
        self._paintings[spec.id] = spec
        logger.debug("Registered painting %s", spec.id)

    def get(self, painting_id: str) -> PaintingSpec:
        try:
            return self._paintings[painting_id]
        except KeyError:
            raise KeyError(f"Unknown painting: {painting_id}") from None

    def __contains__(self, painting_id: str) -> bool:
        return painting_id in self._paintings

    def with_tag(self, tag: str) -> list[PaintingSpec]:
        return [s for s in self.all() if tag in s.tags]

    def all(self) -> list[PaintingSpec]:
        return sorted(self._paintings.values(), key=lambda s: s.id)

    @property
    def count(self) -> int:
        return len(self._paintings)


# Module-level singleton
_registry = PaintingRegistry()


def get_registry() -> PaintingRegistry:
    return _registry


def painting(
    *,
    id: str,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a painting function."""

    def decorator(fn: Callable[["PaintingContext"], None]):
        spec = PaintingSpec(
            id=id,
            fn=fn,
            tags=tags or set(),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_paintings() -> PaintingRegistry:
    """Import all painting modules so @painting decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("genart.paintings")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"genart.paintings.{module_name}")
    return _registry
