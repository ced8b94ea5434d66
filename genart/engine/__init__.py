"""genart painting engine."""

from genart.engine.registry import painting, get_registry, load_paintings
from genart.engine.context import PaintingContext
from genart.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "painting",
    "get_registry",
    "load_paintings",
    "PaintingContext",
    "Pipeline",
    "create_pipeline",
]
