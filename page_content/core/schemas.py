"""
PageContent — agrégat racine : séquence ordonnée de blocs + version de structure.
L'ordre de `blocks` est l'ordre de rendu ; `order` n'en est qu'une copie.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from ..blocks import ContentBlock
from .config import CURRENT_VERSION


class PageContent(BaseModel):
    """Document complet d'une page."""
    model_config = ConfigDict(extra="forbid", strict=True)

    blocks: List[ContentBlock] = Field(default_factory=list)
    version: str = Field(default=CURRENT_VERSION, description="Version du schéma de blocs")
