import logging
from typing import Any, List, Sequence

from ..errors import AggregationInvariantError
from .sanitizer import PARSE_ERRORS, parse_json

logger = logging.getLogger(__name__)


def aggregate_documents(texts: Sequence[str]) -> List[Any]:
    """
    Join sanitized JSON texts into a single forest, one root per text.

    Each text must already be a complete JSON value, so the comma-joined list
    wrapped in brackets is itself a JSON array and is parsed in one pass. The
    order of ``texts`` is kept.
    """
    joined = "[" + ",".join(texts) + "]"
    try:
        forest = parse_json(joined)
    except PARSE_ERRORS as e:
        raise AggregationInvariantError(
            f"Could not parse {len(texts)} sanitized documents as one array: {e}"
        ) from e

    logger.debug(f"Aggregated {len(forest)} documents into the forest")
    return forest
