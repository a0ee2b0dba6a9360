"""Core module pour page_content : document, erreurs, config, parcours, opérations."""
from .config import (
    MAX_DEPTH,
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    STRICT_FIELDS,
    EditorConfig,
)
from .errors import (
    ContentError,
    ContentValidationError,
    TypeMismatchError,
    BlockNotFoundError,
    EditorStateError,
    UploadError,
    format_path,
)
from .schemas import PageContent
from .traversal import BlockLocation, BlockVisitor, walk, iter_containers, block_ids
from .operations import (
    validate,
    locate_block,
    find_block,
    merge_attributes,
    update_block,
    remove_block,
    insert_block,
    renumber,
    normalize_order,
)

__all__ = [
    "MAX_DEPTH",
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "STRICT_FIELDS",
    "EditorConfig",
    "ContentError",
    "ContentValidationError",
    "TypeMismatchError",
    "BlockNotFoundError",
    "EditorStateError",
    "UploadError",
    "format_path",
    "PageContent",
    "BlockLocation",
    "BlockVisitor",
    "walk",
    "iter_containers",
    "block_ids",
    "validate",
    "locate_block",
    "find_block",
    "merge_attributes",
    "update_block",
    "remove_block",
    "insert_block",
    "renumber",
    "normalize_order",
]
