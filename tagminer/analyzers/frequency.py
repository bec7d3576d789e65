import json
import logging
from collections import Counter
from typing import Any, Dict, Hashable, Iterable, Sequence

from .base import RankedResult

logger = logging.getLogger(__name__)


def occurrence_key(value: Any) -> Hashable:
    """
    Key under which a tag value is counted.

    Strings count under themselves. Other values are keyed by type name and
    canonical JSON so that ``1``, ``1.0``, ``True`` and ``"1"`` stay apart
    and lists or objects can be counted at all.
    """
    if isinstance(value, str):
        return value
    return type(value).__name__, json.dumps(value, sort_keys=True)


def count_occurrences(tags: Iterable[Any]) -> Counter:
    """Count every observed tag, listed in the vocabulary or not."""
    return Counter(occurrence_key(tag) for tag in tags)


def restrict_to_vocabulary(occurrences: Counter, vocabulary: Sequence[str]) -> Dict[str, int]:
    """One entry per distinct vocabulary label, in first-seen order, default 0."""
    restricted: Dict[str, int] = {}
    for label in vocabulary:
        restricted[label] = occurrences.get(label, 0)
    return restricted


def rank(restricted: Dict[str, int]) -> RankedResult:
    """
    Order vocabulary counts from most to least frequent.

    The entries are stable-sorted ascending by count and the whole list is
    then reversed, so among equal counts the label that comes later in the
    vocabulary is listed first.
    """
    ascending = sorted(restricted.items(), key=lambda item: item[1])
    return list(reversed(ascending))


def rank_tags(tags: Iterable[Any], vocabulary: Sequence[str]) -> RankedResult:
    occurrences = count_occurrences(tags)
    restricted = restrict_to_vocabulary(occurrences, vocabulary)
    logger.debug(
        f"Counted {sum(occurrences.values())} tags, "
        f"{len(occurrences)} distinct, {len(restricted)} in vocabulary"
    )
    return rank(restricted)
