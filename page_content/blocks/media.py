"""Blocs média — image (avec caption optionnelle) et embed."""
from typing import Literal, Optional
from .base import BaseBlock, Dimension, ImageAlign


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    url: str
    alt: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None
    align: Optional[ImageAlign] = None


class EmbedBlock(BaseBlock):
    type: Literal["embed"] = "embed"
    url: str
    caption: Optional[str] = None
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None
