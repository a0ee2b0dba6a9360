"""Blocs structurés — liste et tableau."""
from typing import List, Literal
from pydantic import Field
from .base import BaseBlock


class ListBlock(BaseBlock):
    type: Literal["list"] = "list"
    items: List[str]
    list_type: Literal["ordered", "unordered"] = Field(..., alias="listType")


class TableBlock(BaseBlock):
    """Tableau. Lignes de longueurs inégales acceptées (problème de rendu, pas de structure)."""
    type: Literal["table"] = "table"
    rows: List[List[str]]
    has_header: bool = Field(..., alias="hasHeader")
