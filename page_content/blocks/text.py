"""Blocs texte — paragraphe, titre, citation, code, HTML brut."""
from typing import Literal, Optional
from pydantic import Field
from .base import BaseBlock, TextAlign


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    content: str
    align: Optional[TextAlign] = None


class HeadingBlock(BaseBlock):
    type: Literal["heading"] = "heading"
    content: str
    level: int = Field(..., ge=1, le=6)
    align: Optional[TextAlign] = None


class QuoteBlock(BaseBlock):
    type: Literal["quote"] = "quote"
    content: str
    citation: Optional[str] = None


class CodeBlock(BaseBlock):
    type: Literal["code"] = "code"
    content: str
    language: Optional[str] = None


class HtmlBlock(BaseBlock):
    """Markup brut. Échappement ou confiance : décidé par le consommateur."""
    type: Literal["html"] = "html"
    content: str
