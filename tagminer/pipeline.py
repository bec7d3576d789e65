import asyncio
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from .config import Settings
from .extractors.files import file_exists, list_directory, read_file_text
from .extractors.sanitizer import sanitize_json
from .extractors.aggregator import aggregate_documents
from .extractors.tags import extract_tags
from .analyzers.base import Forest, RankedResult, TagReport
from .analyzers.vocabulary import load_vocabulary
from .analyzers.frequency import (
    count_occurrences,
    rank,
    rank_tags,
    restrict_to_vocabulary,
)
from .visualizers.text_report import render

logger = logging.getLogger(__name__)

__all__ = [
    "SanitizedDocument",
    "TagPipeline",
    "analyze",
    "build_forest",
    "extract_tags",
    "load_documents",
    "rank_against_vocabulary",
    "render",
]


@dataclass
class SanitizedDocument:
    source: Path
    text: str
    malformed: bool = False


async def _load_document(
    path: Path, strict: bool, executor: Optional[Executor]
) -> SanitizedDocument:
    confirmed = await file_exists(path, executor=executor)
    content = await read_file_text(confirmed, executor=executor)
    sanitized = sanitize_json(content, source=confirmed, strict=strict)
    return SanitizedDocument(
        source=confirmed, text=sanitized, malformed=sanitized is not content
    )


async def load_documents(
    directory: Union[str, Path],
    extension: str = "json",
    strict: bool = False,
    sort_files: bool = False,
    executor: Optional[Executor] = None,
) -> List[SanitizedDocument]:
    """
    Read and sanitize every ``extension`` file of ``directory`` concurrently.

    Results keep the directory listing order (lexicographic with
    ``sort_files``). A missing directory or file fails the whole batch.
    """
    directory = Path(directory)
    await file_exists(directory, executor=executor)
    names = await list_directory(directory, extension, executor=executor)
    if sort_files:
        names = sorted(names)

    logger.info(f"Loading {len(names)} document(s) from {directory}")
    return list(
        await asyncio.gather(
            *(_load_document(directory / name, strict, executor) for name in names)
        )
    )


async def build_forest(
    directory: Union[str, Path],
    extension: str = "json",
    strict: bool = False,
    sort_files: bool = False,
    executor: Optional[Executor] = None,
) -> Forest:
    """Load every document of ``directory`` into a forest, one root per file."""
    documents = await load_documents(
        directory,
        extension=extension,
        strict=strict,
        sort_files=sort_files,
        executor=executor,
    )
    return aggregate_documents([doc.text for doc in documents])


async def rank_against_vocabulary(
    tags: Sequence[Any], vocabulary_path: Union[str, Path]
) -> RankedResult:
    """Count ``tags`` and rank the labels listed in the vocabulary file."""
    vocabulary = await load_vocabulary(vocabulary_path)
    return rank_tags(tags, vocabulary)


class TagPipeline:
    """
    tagminer end-to-end pipeline.

    Stages:
      1. Load      - list, read and sanitize the JSON documents of data_dir
      2. Aggregate - join the documents into one forest
      3. Extract   - walk the forest and flatten every tag batch
      4. Rank      - count tags against the vocabulary in tags_file

    Usage:
        report = TagPipeline(Settings(data_dir="data")).run()
        print(render(report.ranked))

    Every run builds its state from scratch, so repeated runs over unchanged
    inputs give identical reports.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    async def run_async(self) -> TagReport:
        settings = self.settings
        with ThreadPoolExecutor(max_workers=max(1, settings.workers)) as executor:
            documents = await load_documents(
                settings.data_dir,
                extension=settings.extension,
                strict=settings.strict,
                sort_files=settings.sort_files,
                executor=executor,
            )
            forest = aggregate_documents([doc.text for doc in documents])
            tags = extract_tags(forest)
            vocabulary = await load_vocabulary(settings.tags_file)

        occurrences = count_occurrences(tags)
        ranked = rank(restrict_to_vocabulary(occurrences, vocabulary))

        malformed = [str(doc.source) for doc in documents if doc.malformed]
        if malformed:
            logger.warning(f"{len(malformed)} malformed document(s) contributed no tags")
        logger.info(
            f"Ranked {len(ranked)} labels from {len(tags)} tags "
            f"in {len(documents)} document(s)"
        )

        return TagReport(
            ranked=ranked,
            occurrences=occurrences,
            tags=tags,
            sources=[str(doc.source) for doc in documents],
            malformed=malformed,
        )

    def run(self) -> TagReport:
        return asyncio.run(self.run_async())


async def analyze(
    data_dir: Union[str, Path], tags_file: Union[str, Path], **settings
) -> TagReport:
    """Run the pipeline once for ``data_dir`` against ``tags_file``."""
    pipeline = TagPipeline(Settings(data_dir=data_dir, tags_file=tags_file, **settings))
    return await pipeline.run_async()
