"""
Bloc de base pour page_content.
Identité (id) + position (order) + discriminant (type), communs à toutes les variantes.
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


class BlockType(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING   = "heading"
    IMAGE     = "image"
    LIST      = "list"
    QUOTE     = "quote"
    CODE      = "code"
    EMBED     = "embed"
    COLUMNS   = "columns"
    BUTTON    = "button"
    SPACER    = "spacer"
    HTML      = "html"
    TABLE     = "table"


TextAlign  = Literal["left", "center", "right"]
ImageAlign = Literal["left", "center", "right", "wide", "full"]

# int et float séparés : un nombre JSON garde son type exact
Number = Union[int, float]

PERCENT_PATTERN = r"^\d{1,3}(\.\d+)?%$"
Percent = Annotated[str, StringConstraints(pattern=PERCENT_PATTERN)]

# Dimension d'un média : nombre brut ou pourcentage ("75%")
Dimension = Union[int, float, Percent]

# Champs hors variante, jamais modifiables par un merge
IDENTITY_FIELDS = ("id", "order", "type")

# Champs de variante fixés à la création (la source d'une image ne se remplace pas)
IMMUTABLE_FIELDS = {"image": ("url",)}


class BaseBlock(BaseModel):
    """Bloc de base (classe parente de toutes les variantes)."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    id: str = Field(..., min_length=1, description="Identifiant stable, unique dans le document")
    order: int = Field(default=0, ge=0, description="Copie de l'index dans la séquence parente")
    type: str
