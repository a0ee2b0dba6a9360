"""
Blocs — exports publics + ContentBlock discriminé par `type`.
"""
from typing import Annotated, Dict, Type, Union
from pydantic import Field

from .base import (
    BaseBlock, BlockType, TextAlign, ImageAlign, Number, Dimension, Percent, PERCENT_PATTERN,
    IDENTITY_FIELDS, IMMUTABLE_FIELDS,
)
from .text import ParagraphBlock, HeadingBlock, QuoteBlock, CodeBlock, HtmlBlock
from .media import ImageBlock, EmbedBlock
from .structured import ListBlock, TableBlock
from .layout import ButtonBlock, SpacerBlock
from .columns import Column, ColumnsBlock

# Union fermée : un type inconnu est rejeté à la désérialisation
ContentBlock = Annotated[
    Union[
        ParagraphBlock,
        HeadingBlock,
        ImageBlock,
        ListBlock,
        QuoteBlock,
        CodeBlock,
        EmbedBlock,
        ColumnsBlock,
        ButtonBlock,
        SpacerBlock,
        HtmlBlock,
        TableBlock,
    ],
    Field(discriminator="type"),
]

# Résolution de la récursion Column → ContentBlock → ColumnsBlock
Column.model_rebuild()
ColumnsBlock.model_rebuild()

BLOCK_REGISTRY: Dict[str, Type[BaseBlock]] = {
    BlockType.PARAGRAPH.value: ParagraphBlock,
    BlockType.HEADING.value:   HeadingBlock,
    BlockType.IMAGE.value:     ImageBlock,
    BlockType.LIST.value:      ListBlock,
    BlockType.QUOTE.value:     QuoteBlock,
    BlockType.CODE.value:      CodeBlock,
    BlockType.EMBED.value:     EmbedBlock,
    BlockType.COLUMNS.value:   ColumnsBlock,
    BlockType.BUTTON.value:    ButtonBlock,
    BlockType.SPACER.value:    SpacerBlock,
    BlockType.HTML.value:      HtmlBlock,
    BlockType.TABLE.value:     TableBlock,
}

__all__ = [
    # Base
    "BaseBlock", "BlockType", "TextAlign", "ImageAlign", "Number", "Dimension", "Percent",
    "PERCENT_PATTERN", "IDENTITY_FIELDS", "IMMUTABLE_FIELDS",
    # Texte
    "ParagraphBlock", "HeadingBlock", "QuoteBlock", "CodeBlock", "HtmlBlock",
    # Média
    "ImageBlock", "EmbedBlock",
    # Structurés
    "ListBlock", "TableBlock",
    # Layout
    "ButtonBlock", "SpacerBlock",
    # Colonnes
    "Column", "ColumnsBlock",
    # Union + registry
    "ContentBlock", "BLOCK_REGISTRY",
]
