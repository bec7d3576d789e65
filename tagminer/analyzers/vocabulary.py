import logging
from pathlib import Path
from typing import List, Union

from ..extractors.files import file_exists, read_file_text

logger = logging.getLogger(__name__)


def parse_vocabulary(text: str) -> List[str]:
    """
    Turn a newline separated tag list into an ordered list of labels.

    Surrounding whitespace (and a leading byte order mark) is trimmed from the
    whole text before splitting; a trailing carriage return is removed from
    each line so CRLF files match. Duplicates and inner blank lines are kept.
    """
    lines = text.lstrip("\ufeff").strip().split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


async def load_vocabulary(path: Union[str, Path]) -> List[str]:
    """Read and parse the vocabulary file, failing if it does not exist."""
    confirmed = await file_exists(path)
    vocabulary = parse_vocabulary(await read_file_text(confirmed))
    logger.debug(f"Loaded {len(vocabulary)} vocabulary labels from {confirmed}")
    return vocabulary
