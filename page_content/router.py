"""
Router FastAPI — endpoints page_content (sans état, aucune persistance).

GET  /page-content/catalog        → liste des variantes + leurs JSON schemas
POST /page-content/validate       → {"valid": bool, "error"?, "path"?}
POST /page-content/normalize      → document avec `order` renumérotés
POST /page-content/blocks/merge   → {document, block_id, delta} → document
POST /page-content/blocks/remove  → {document, block_id} → document
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from .blocks import BLOCK_REGISTRY
from .core.errors import (
    BlockNotFoundError,
    ContentValidationError,
    TypeMismatchError,
)
from .core.operations import normalize_order, remove_block, update_block, validate as validate_document
from .serialization import from_dict, to_dict

log = logging.getLogger(__name__)

router = APIRouter(prefix="/page-content", tags=["page_content"])


class MergeRequest(BaseModel):
    document: Dict[str, Any]
    block_id: str
    delta: Dict[str, Any] = Field(default_factory=dict)


class RemoveRequest(BaseModel):
    document: Dict[str, Any]
    block_id: str


def _load(data: Dict[str, Any]):
    try:
        document = from_dict(data)
        validate_document(document)
    except ContentValidationError as e:
        raise HTTPException(422, str(e))
    return document


@router.get("/catalog", summary="Liste les variantes de blocs et leurs schemas")
def catalog() -> dict:
    return {
        "blocks": [
            {"type": block_type, "schema": cls.model_json_schema(by_alias=True)}
            for block_type, cls in BLOCK_REGISTRY.items()
        ]
    }


@router.post("/validate", summary="Valide un document sans le modifier")
def validate(document: Dict[str, Any]) -> dict:
    try:
        validate_document(from_dict(document))
        return {"valid": True}
    except ContentValidationError as e:
        return {"valid": False, "error": str(e), "path": list(e.path)}


@router.post("/normalize", summary="Renumérote les order d'après les positions")
def normalize(document: Dict[str, Any]) -> dict:
    try:
        doc = from_dict(document)
        normalize_order(doc)
        validate_document(doc)
    except ContentValidationError as e:
        raise HTTPException(422, str(e))
    return to_dict(doc)


@router.post("/blocks/merge", summary="Merge un delta d'attributs dans un bloc")
def merge(req: MergeRequest) -> dict:
    doc = _load(req.document)
    try:
        update_block(doc, req.block_id, req.delta)
    except BlockNotFoundError as e:
        raise HTTPException(404, str(e))
    except (TypeMismatchError, ContentValidationError) as e:
        raise HTTPException(422, str(e))
    return to_dict(doc)


@router.post("/blocks/remove", summary="Supprime un bloc (racine ou colonne)")
def remove(req: RemoveRequest) -> dict:
    doc = _load(req.document)
    try:
        remove_block(doc, req.block_id)
    except BlockNotFoundError as e:
        raise HTTPException(404, str(e))
    return to_dict(doc)
