from .files import file_exists, list_directory, read_file_text
from .sanitizer import sanitize_json
from .aggregator import aggregate_documents
from .tags import iter_tag_batches, extract_tags

__all__ = [
    "file_exists",
    "list_directory",
    "read_file_text",
    "sanitize_json",
    "aggregate_documents",
    "iter_tag_batches",
    "extract_tags",
]
