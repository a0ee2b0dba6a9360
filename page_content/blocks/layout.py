"""Blocs de mise en page — bouton et espaceur."""
from typing import Literal, Optional
from .base import BaseBlock, Number, TextAlign


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    text: str
    url: str
    style: Optional[Literal["primary", "secondary", "outline"]] = None
    align: Optional[TextAlign] = None


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    height: Number
