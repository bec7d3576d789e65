import asyncio
import logging
import os
from concurrent.futures import Executor
from pathlib import Path
from typing import List, Optional, Union

from ..errors import MissingResourceError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Below this detector confidence the bytes are decoded as UTF-8 with replacement.
MIN_ENCODING_CONFIDENCE = 0.7


def _chardet_available() -> bool:
    try:
        import chardet

        return True
    except ImportError:
        return False


def _matches_extension(filename: str, extension: Optional[str]) -> bool:
    """True when the text after the last dot equals ``extension``."""
    if not extension:
        return True
    return filename.rsplit(".", 1)[-1] == extension.lstrip(".")


def decode_text(raw: bytes, source: PathLike = "<bytes>") -> str:
    """
    Decode file bytes as UTF-8, falling back to chardet detection.

    A file that is not valid UTF-8 is decoded with the detected encoding when
    chardet is confident enough, otherwise with replacement characters.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    if _chardet_available():
        import chardet

        detected = chardet.detect(raw)
        encoding = detected.get("encoding")
        if encoding and (detected.get("confidence") or 0) > MIN_ENCODING_CONFIDENCE:
            try:
                text = raw.decode(encoding)
                logger.warning(f"{source} is not UTF-8, decoded as {encoding}")
                return text
            except (LookupError, UnicodeDecodeError):
                pass
    else:
        logger.warning("chardet not available, skipping encoding detection")

    logger.warning(f"{source} is not UTF-8, undecodable bytes replaced")
    return raw.decode("utf-8", errors="replace")


def _stat_path(path: Path) -> Path:
    try:
        os.stat(path)
    except FileNotFoundError as e:
        raise MissingResourceError(path) from e
    return path


def _list_directory(path: Path, extension: Optional[str]) -> List[str]:
    try:
        names = os.listdir(path)
    except FileNotFoundError as e:
        raise MissingResourceError(path) from e
    return [name for name in names if _matches_extension(name, extension)]


def _read_file_text(path: Path) -> str:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise MissingResourceError(path) from e
    return decode_text(raw, source=path)


async def file_exists(path: PathLike, executor: Optional[Executor] = None) -> Path:
    """Resolve to ``path`` when it exists, raise MissingResourceError otherwise."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, _stat_path, Path(path))


async def list_directory(
    path: PathLike,
    extension: Optional[str] = None,
    executor: Optional[Executor] = None,
) -> List[str]:
    """
    List file names in ``path`` in the order the filesystem yields them.

    With ``extension`` only names whose final dotted segment equals it are
    returned. The order is not sorted and may differ between platforms.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        executor, _list_directory, Path(path), extension
    )


async def read_file_text(path: PathLike, executor: Optional[Executor] = None) -> str:
    """Read a whole file as text."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, _read_file_text, Path(path))
