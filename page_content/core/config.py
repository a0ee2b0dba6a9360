"""
Configuration — variables d'environnement lues à l'import + EditorConfig.

PAGE_CONTENT_MAX_DEPTH            profondeur max d'imbrication Columns (32)
PAGE_CONTENT_VERSION              version écrite dans les nouveaux documents ("1.0")
PAGE_CONTENT_SUPPORTED_VERSIONS   versions acceptées, séparées par des virgules
PAGE_CONTENT_STRICT               "1" : champs inconnus rejetés, "0" : ignorés
UPLOAD_API_URL                    base de l'API d'upload
"""
import os
from typing import Literal

from pydantic import BaseModel, Field, model_validator

MAX_DEPTH       = int(os.getenv("PAGE_CONTENT_MAX_DEPTH", "32"))
CURRENT_VERSION = os.getenv("PAGE_CONTENT_VERSION", "1.0")
SUPPORTED_VERSIONS = tuple(
    v.strip()
    for v in os.getenv("PAGE_CONTENT_SUPPORTED_VERSIONS", CURRENT_VERSION).split(",")
    if v.strip()
)
STRICT_FIELDS  = os.getenv("PAGE_CONTENT_STRICT", "1").lower() not in ("0", "false", "no")
UPLOAD_API_URL = os.getenv("UPLOAD_API_URL", "http://localhost:3000/api")


class EditorConfig(BaseModel):
    """Bornes du contrôle de taille + alignement par défaut de la surface d'édition."""
    width_min: int = Field(default=10, ge=1)
    width_max: int = Field(default=100, ge=1)
    width_step: int = Field(default=5, ge=1)
    default_alignment: Literal["left", "center", "right"] = "center"

    @model_validator(mode="after")
    def _check_range(self):
        if self.width_min > self.width_max:
            raise ValueError(f"width_min ({self.width_min}) > width_max ({self.width_max})")
        return self
