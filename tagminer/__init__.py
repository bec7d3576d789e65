from .errors import (
    TagMinerError,
    MissingResourceError,
    MalformedContentError,
    AggregationInvariantError,
)
from .pipeline import (
    TagPipeline,
    analyze,
    build_forest,
    extract_tags,
    rank_against_vocabulary,
    render,
)

__version__ = "0.1.0"

__all__ = [
    "TagMinerError",
    "MissingResourceError",
    "MalformedContentError",
    "AggregationInvariantError",
    "TagPipeline",
    "analyze",
    "build_forest",
    "extract_tags",
    "rank_against_vocabulary",
    "render",
]
