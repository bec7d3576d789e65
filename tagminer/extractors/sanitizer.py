import json
import logging
from typing import Any, Optional

from ..errors import MalformedContentError

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "{}"

# Nesting deeper than the interpreter recursion limit cannot be decoded.
PARSE_ERRORS = (TypeError, ValueError, RecursionError)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def parse_json(text: str) -> Any:
    """Parse ``text`` as strict RFC 8259 JSON (no NaN or Infinity)."""
    return json.loads(text, parse_constant=_reject_constant)


def sanitize_json(text: str, source: Optional[Any] = None, strict: bool = False) -> str:
    """
    Return ``text`` unchanged if it is one well-formed JSON document.

    Anything else, including documents nested too deeply to decode, is
    replaced with an empty object so that a single corrupt file contributes
    no tags instead of failing the whole batch. A warning naming ``source``
    is logged. With ``strict`` the failure is raised as MalformedContentError
    instead.
    """
    try:
        parse_json(text)
        return text
    except PARSE_ERRORS as e:
        if strict:
            raise MalformedContentError(source, str(e)) from e
        logger.warning(f"Invalid json file {source}")
        logger.debug(f"Parse error in {source}: {e}")
        return EMPTY_DOCUMENT
