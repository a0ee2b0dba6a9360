"""
Bloc Columns — seul bloc récursif.
Chaque colonne contient une séquence complète de ContentBlock (forward ref,
résolue dans blocks/__init__.py une fois l'union définie).
"""
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field
from .base import BaseBlock, Number


class Column(BaseModel):
    """Colonne : largeur (la somme n'est pas contrôlée, c'est du layout) + blocs."""
    model_config = ConfigDict(extra="forbid", strict=True)

    width: Number
    blocks: List["ContentBlock"] = Field(default_factory=list)  # noqa: F821


class ColumnsBlock(BaseBlock):
    type: Literal["columns"] = "columns"
    columns: List[Column]
