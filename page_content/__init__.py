"""
page_content v0.1 — modèle de blocs de contenu structuré + surface d'édition.

Usage (document):
    >>> from page_content import PageContent, ParagraphBlock, ImageBlock, validate, find_block
    >>> doc = PageContent(blocks=[
    ...     ParagraphBlock(id="p1", order=0, content="Bonjour"),
    ...     ImageBlock(id="img-1", order=1, url="a.png"),
    ... ])
    >>> validate(doc)

Usage (JSON):
    >>> from page_content import dumps, loads
    >>> assert loads(dumps(doc)) == doc

Usage (édition):
    >>> from page_content import BlockEditorSurface
    >>> surface = BlockEditorSurface(doc, "img-1")
    >>> surface.set_alignment("left")
"""

__version__ = "0.1.0"

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockType, ContentBlock, BLOCK_REGISTRY,
    ParagraphBlock, HeadingBlock, QuoteBlock, CodeBlock, HtmlBlock,
    ImageBlock, EmbedBlock,
    ListBlock, TableBlock,
    ButtonBlock, SpacerBlock,
    Column, ColumnsBlock,
)

# ── Document + opérations ────────────────────────────────────────────────────
from .core import (
    PageContent,
    EditorConfig,
    ContentError, ContentValidationError, TypeMismatchError, BlockNotFoundError,
    EditorStateError, UploadError,
    BlockLocation, BlockVisitor, walk, block_ids,
    validate, locate_block, find_block, merge_attributes, update_block,
    remove_block, insert_block, renumber, normalize_order,
)

# ── Sérialisation ────────────────────────────────────────────────────────────
from .serialization import to_dict, from_dict, dumps, loads

# ── Édition ──────────────────────────────────────────────────────────────────
from .editor import BlockEditorSurface, EditorState

# ── Upload ───────────────────────────────────────────────────────────────────
from .uploads import UploadResult, Uploader, HttpUploader, image_block_from_upload

__all__ = [
    # blocs
    "BaseBlock", "BlockType", "ContentBlock", "BLOCK_REGISTRY",
    "ParagraphBlock", "HeadingBlock", "QuoteBlock", "CodeBlock", "HtmlBlock",
    "ImageBlock", "EmbedBlock", "ListBlock", "TableBlock",
    "ButtonBlock", "SpacerBlock", "Column", "ColumnsBlock",
    # document
    "PageContent", "EditorConfig",
    "ContentError", "ContentValidationError", "TypeMismatchError", "BlockNotFoundError",
    "EditorStateError", "UploadError",
    "BlockLocation", "BlockVisitor", "walk", "block_ids",
    "validate", "locate_block", "find_block", "merge_attributes", "update_block",
    "remove_block", "insert_block", "renumber", "normalize_order",
    # sérialisation
    "to_dict", "from_dict", "dumps", "loads",
    # édition
    "BlockEditorSurface", "EditorState",
    # upload
    "UploadResult", "Uploader", "HttpUploader", "image_block_from_upload",
]
