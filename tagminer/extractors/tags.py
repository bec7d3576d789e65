import logging
from typing import Any, Iterator, List, Mapping, Sequence, Tuple

from ..analyzers.base import TagBatch, TreeNode

logger = logging.getLogger(__name__)


def _has_value(value: Any) -> bool:
    """False for missing, null, false, zero and empty-string attributes."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True


def _node_attributes(node: Any) -> Tuple[Any, Any]:
    if isinstance(node, TreeNode):
        return node.tags, node.children
    if isinstance(node, Mapping):
        return node.get("tags"), node.get("children")
    return None, None


def iter_tag_batches(forest: Sequence[Any]) -> Iterator[TagBatch]:
    """
    Walk a forest in pre-order and yield the tag batch of every node.

    A node's own batch comes before the batches of its children, and a
    node's subtree is finished before its next sibling is visited. Values
    that are not nodes, and ``children`` that are not lists, are skipped.
    """
    if not isinstance(forest, (list, tuple)):
        return

    for node in forest:
        tags, children = _node_attributes(node)

        if _has_value(tags):
            yield tags

        if isinstance(children, (list, tuple)):
            yield from iter_tag_batches(children)


def extract_tags(forest: Sequence[Any]) -> List[Any]:
    """
    Flatten every tag batch of ``forest`` into one list, in traversal order.

    List batches are spread one level; any other batch (a bare string, a
    number, an object) is appended as a single tag.
    """
    tags: List[Any] = []
    for batch in iter_tag_batches(forest):
        if isinstance(batch, list):
            tags.extend(batch)
        else:
            tags.append(batch)

    logger.debug(f"Extracted {len(tags)} tags")
    return tags
