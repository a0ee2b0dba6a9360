"""
Codec JSON — PageContent ⇄ dict/str.

Préserve l'ordre des blocs, les ids, la version et le type exact des champs
(un nombre reste un nombre, un booléen reste un booléen). Les champs
optionnels absents ne sont pas écrits.

Champs inconnus : mode strict (défaut, PAGE_CONTENT_STRICT=1) → rejet ;
mode lenient → supprimés avec un warning.
"""
import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from ..blocks import BLOCK_REGISTRY, Column
from ..core.config import MAX_DEPTH, STRICT_FIELDS
from ..core.errors import ContentValidationError
from ..core.operations import describe_pydantic_error, validate as validate_document
from ..core.schemas import PageContent

log = logging.getLogger(__name__)


def _allowed_keys(model_cls) -> set:
    keys = set()
    for name, info in model_cls.model_fields.items():
        keys.add(name)
        if info.alias:
            keys.add(info.alias)
    return keys


def _check_raw_depth(data: Any, max_depth: int) -> None:
    """Garde de profondeur sur le dict brut, avant que pydantic ne descende récursivement."""
    if not isinstance(data, dict) or not isinstance(data.get("blocks"), list):
        return
    stack = [(data["blocks"], (), 0)]
    while stack:
        blocks, prefix, depth = stack.pop()
        for index, raw in enumerate(blocks):
            if not isinstance(raw, dict) or raw.get("type") != "columns":
                continue
            columns = raw.get("columns")
            if not isinstance(columns, list) or not columns:
                continue
            path = prefix + (index,)
            if depth + 1 > max_depth:
                raise ContentValidationError(
                    f"Profondeur d'imbrication > {max_depth} (Columns imbriqués)", path
                )
            for col_idx, col in enumerate(columns):
                if isinstance(col, dict) and isinstance(col.get("blocks"), list):
                    stack.append((col["blocks"], path + (col_idx,), depth + 1))


def _strip_block(raw: Any) -> Any:
    if not isinstance(raw, dict):
        return raw
    block_cls = BLOCK_REGISTRY.get(raw.get("type"))
    if block_cls is None:
        return raw  # type inconnu : laissé à pydantic, qui le rejette
    allowed = _allowed_keys(block_cls)
    dropped = sorted(k for k in raw if k not in allowed)
    if dropped:
        log.warning("Bloc %s : champs inconnus ignorés %s", raw.get("id"), dropped)
    clean = {k: v for k, v in raw.items() if k in allowed}
    if block_cls.model_fields.get("columns") is not None and isinstance(clean.get("columns"), list):
        clean["columns"] = [_strip_column(c) for c in clean["columns"]]
    return clean


def _strip_column(raw: Any) -> Any:
    if not isinstance(raw, dict):
        return raw
    allowed = _allowed_keys(Column)
    dropped = sorted(k for k in raw if k not in allowed)
    if dropped:
        log.warning("Colonne : champs inconnus ignorés %s", dropped)
    clean = {k: v for k, v in raw.items() if k in allowed}
    if isinstance(clean.get("blocks"), list):
        clean["blocks"] = [_strip_block(b) for b in clean["blocks"]]
    return clean


def _strip_unknown(data: Dict[str, Any]) -> Dict[str, Any]:
    """Mode lenient : retire les champs inconnus (racine, colonnes, blocs)."""
    allowed = _allowed_keys(PageContent)
    dropped = sorted(k for k in data if k not in allowed)
    if dropped:
        log.warning("Document : champs inconnus ignorés %s", dropped)
    clean = {k: v for k, v in data.items() if k in allowed}
    if isinstance(clean.get("blocks"), list):
        clean["blocks"] = [_strip_block(b) for b in clean["blocks"]]
    return clean


# ── API publique ──────────────────────────────────────────────────────────────

def to_dict(document: PageContent) -> Dict[str, Any]:
    """PageContent → dict JSON-compatible (noms camelCase, champs absents omis)."""
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps(document: PageContent, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(document), ensure_ascii=False, indent=indent)


def from_dict(
    data: Dict[str, Any],
    strict: Optional[bool] = None,
    max_depth: Optional[int] = None,
) -> PageContent:
    """
    dict → PageContent.

    1. Garde de profondeur sur le dict brut
    2. Mode lenient : suppression des champs inconnus
    3. Validation pydantic (union discriminée par `type`)
    """
    if not isinstance(data, dict):
        raise ContentValidationError(f"Document attendu (objet JSON), reçu {type(data).__name__}")
    strict = STRICT_FIELDS if strict is None else strict
    _check_raw_depth(data, MAX_DEPTH if max_depth is None else max_depth)

    if not strict:
        data = _strip_unknown(data)
    try:
        return PageContent.model_validate(data)
    except PydanticValidationError as e:
        raise ContentValidationError(f"Document invalide : {describe_pydantic_error(e)}") from e


def loads(
    text: str,
    strict: Optional[bool] = None,
    max_depth: Optional[int] = None,
    validate: bool = True,
) -> PageContent:
    """JSON → PageContent. `validate=True` : applique aussi validate() (ids, order, version)."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ContentValidationError(f"JSON invalide : {e}") from e
    except RecursionError as e:
        raise ContentValidationError("JSON invalide : imbrication trop profonde") from e
    document = from_dict(data, strict=strict, max_depth=max_depth)
    if validate:
        validate_document(document, max_depth=max_depth)
    return document
