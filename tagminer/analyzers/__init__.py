from .base import TreeNode, TagReport, Forest, RankedResult
from .vocabulary import parse_vocabulary, load_vocabulary
from .frequency import (
    count_occurrences,
    restrict_to_vocabulary,
    rank,
    rank_tags,
)

__all__ = [
    "TreeNode",
    "TagReport",
    "Forest",
    "RankedResult",
    "parse_vocabulary",
    "load_vocabulary",
    "count_occurrences",
    "restrict_to_vocabulary",
    "rank",
    "rank_tags",
]
