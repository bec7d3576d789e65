from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

Label = str
TagBatch = Union[List[Any], Any]
Forest = List[Any]
RankedResult = List[Tuple[Label, int]]


@dataclass
class TreeNode:
    tags: Optional[TagBatch] = None
    children: Optional[List["TreeNode"]] = None


@dataclass
class TagReport:
    ranked: RankedResult
    occurrences: Counter = field(default_factory=Counter)
    tags: List[Any] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    malformed: List[str] = field(default_factory=list)

    @property
    def total_observed(self) -> int:
        return sum(self.occurrences.values())
