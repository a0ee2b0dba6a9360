"""
Opérations du modèle de blocs : validate, find, merge, update, remove, insert.

Politique de position : l'index dans la séquence parente fait foi ; `order`
en est une copie recalculée à chaque mutation structurelle (remove/insert)
et par `normalize_order`.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..blocks import BLOCK_REGISTRY, IDENTITY_FIELDS, IMMUTABLE_FIELDS, BaseBlock, ColumnsBlock
from .config import MAX_DEPTH, SUPPORTED_VERSIONS
from .errors import BlockNotFoundError, ContentValidationError, TypeMismatchError, format_path
from .schemas import PageContent
from .traversal import BlockLocation, BlockPath, block_ids, iter_containers, walk

log = logging.getLogger(__name__)


def describe_pydantic_error(exc: PydanticValidationError) -> str:
    """Résumé lisible d'une erreur pydantic : "loc: msg; loc: msg"."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "?"
        parts.append(f"{loc}: {err.get('msg', 'invalide')}")
    return "; ".join(parts)


# ── Validation ────────────────────────────────────────────────────────────────

def validate(
    document: PageContent,
    max_depth: Optional[int] = None,
    supported_versions: Optional[Iterable[str]] = None,
) -> None:
    """
    Vérifie un document, sans le modifier. Lève ContentValidationError à la
    première violation :

    1. version reconnue
    2. discriminant `type` cohérent avec la classe du bloc
    3. `order` égal à l'index dans la séquence parente
    4. unicité des ids sur tout l'arbre (colonnes comprises)
    5. profondeur d'imbrication ≤ max_depth
    """
    versions = SUPPORTED_VERSIONS if supported_versions is None else tuple(supported_versions)
    if document.version not in versions:
        raise ContentValidationError(
            f"Version {document.version!r} non reconnue (supportées : {', '.join(versions)})"
        )

    seen: Dict[str, BlockPath] = {}
    for loc in walk(document, max_depth=max_depth):
        block = loc.block
        block_type = getattr(block, "type", None)
        expected = BLOCK_REGISTRY.get(block_type)
        if expected is None or type(block) is not expected:
            raise ContentValidationError(
                f"Discriminant {block_type!r} incohérent avec {type(block).__name__}", loc.path
            )
        if block.order != loc.index:
            raise ContentValidationError(
                f"order={block.order} ne correspond pas à la position {loc.index}", loc.path
            )
        if block.id in seen:
            raise ContentValidationError(
                f"Id {block.id!r} dupliqué (déjà utilisé en {format_path(seen[block.id])})",
                loc.path,
            )
        seen[block.id] = loc.path

    log.debug("Document valide — %d blocs, version %s", len(seen), document.version)


# ── Recherche ─────────────────────────────────────────────────────────────────

def locate_block(
    document: PageContent,
    block_id: str,
    max_depth: Optional[int] = None,
) -> Optional[BlockLocation]:
    """Premier bloc portant `block_id` en ordre document, avec sa position."""
    for loc in walk(document, max_depth=max_depth):
        if loc.block.id == block_id:
            return loc
    return None


def find_block(document: PageContent, block_id: str) -> Optional[BaseBlock]:
    loc = locate_block(document, block_id)
    return loc.block if loc else None


# ── Merge ─────────────────────────────────────────────────────────────────────

def _accepted_names(block_cls: type) -> Dict[str, str]:
    """Nom accepté dans un delta (nom de champ ou alias) → nom de champ."""
    names = {}
    for name, info in block_cls.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def merge_attributes(block: BaseBlock, delta: Mapping[str, Any]) -> BaseBlock:
    """
    Applique un delta partiel sur les champs de variante d'un bloc.

    Retourne un nouveau bloc validé ; `block` n'est jamais modifié. Les champs
    absents du delta sont conservés, `None` efface un champ optionnel.

    Raises:
        TypeMismatchError: champ inconnu pour la variante, id/order/type, ou
            champ figé à la création (url d'une image)
        ContentValidationError: valeur illégale (largeur malformée, level hors 1..6…)
    """
    block_cls = type(block)
    accepted = _accepted_names(block_cls)

    frozen = IDENTITY_FIELDS + IMMUTABLE_FIELDS.get(block.type, ())
    illegal = [k for k in delta if k not in accepted or accepted[k] in frozen]
    if illegal:
        raise TypeMismatchError(block.type, illegal)

    data = {name: getattr(block, name) for name in block_cls.model_fields}
    for key, value in delta.items():
        data[accepted[key]] = value

    try:
        merged = block_cls.model_validate(data)
    except PydanticValidationError as e:
        raise ContentValidationError(
            f"Delta invalide pour le bloc {block.id!r} : {describe_pydantic_error(e)}"
        ) from e

    log.debug("Merge %s sur %s (%s)", sorted(delta), block.id, block.type)
    return merged


def _check_subtree(
    document: PageContent,
    block: BaseBlock,
    depth: int,
    path: BlockPath = (),
    replaced: Optional[BaseBlock] = None,
) -> None:
    """
    Contrôles d'un sous-arbre placé à la profondeur `depth` : profondeur max,
    ids déjà présents dans le document (hors sous-arbre `replaced`) ou répétés.
    """
    if depth > MAX_DEPTH:
        raise ContentValidationError(f"Profondeur d'imbrication > {MAX_DEPTH}", path)
    incoming = block_ids([block], max_depth=MAX_DEPTH - depth)
    existing = set(block_ids(document))
    if replaced is not None:
        existing -= set(block_ids([replaced]))
    clashes = sorted({i for i in incoming if i in existing or incoming.count(i) > 1})
    if clashes:
        raise ContentValidationError(f"Id(s) déjà présent(s) : {', '.join(clashes)}", path)


def update_block(document: PageContent, block_id: str, delta: Mapping[str, Any]) -> BaseBlock:
    """
    Merge `delta` dans le bloc `block_id`, où qu'il soit. Document inchangé en cas d'échec.

    Un nouveau contenu de colonnes passe les mêmes contrôles qu'une insertion
    (ids, profondeur) ; ses séquences sont renumérotées.
    """
    loc = locate_block(document, block_id)
    if loc is None:
        raise BlockNotFoundError(block_id)
    merged = merge_attributes(loc.block, delta)
    if isinstance(merged, ColumnsBlock):
        _check_subtree(document, merged, loc.depth, loc.path, replaced=loc.block)
        for path, container in iter_containers([merged]):
            if path:
                renumber(container)
    loc.container[loc.index] = merged
    return merged


# ── Mutations structurelles ───────────────────────────────────────────────────

def renumber(blocks: List[BaseBlock]) -> int:
    """Recalcule `order` = index dans une séquence. Retourne le nombre de blocs corrigés."""
    changed = 0
    for index, block in enumerate(blocks):
        if block.order != index:
            block.order = index
            changed += 1
    return changed


def normalize_order(document: PageContent, max_depth: Optional[int] = None) -> int:
    """Renumérote toutes les séquences du document (racine + colonnes)."""
    changed = sum(renumber(container) for _, container in iter_containers(document, max_depth))
    if changed:
        log.info("normalize_order : %d blocs renumérotés", changed)
    return changed


def remove_block(document: PageContent, block_id: str) -> BaseBlock:
    """
    Retire un bloc de la racine ou d'une colonne. Les ids ne sont jamais
    réattribués ; seuls les `order` des voisins de la même séquence changent.
    """
    loc = locate_block(document, block_id)
    if loc is None:
        raise BlockNotFoundError(block_id)
    del loc.container[loc.index]
    renumber(loc.container)
    log.info("Bloc %s supprimé (%s)", block_id, format_path(loc.path))
    return loc.block


def insert_block(
    document: PageContent,
    block: BaseBlock,
    index: Optional[int] = None,
    parent_id: Optional[str] = None,
    column: int = 0,
) -> BaseBlock:
    """
    Insère un bloc à la racine (parent_id=None) ou dans la colonne `column`
    du bloc Columns `parent_id`. `index=None` → en fin de séquence.

    Rejette tout id déjà présent dans le document, y compris ceux du
    sous-arbre inséré, et tout sous-arbre qui dépasserait la profondeur max.
    """
    if parent_id is None:
        container, depth = document.blocks, 0
    else:
        parent = locate_block(document, parent_id)
        if parent is None:
            raise BlockNotFoundError(parent_id)
        if not isinstance(parent.block, ColumnsBlock):
            raise TypeMismatchError(parent.block.type, ["columns"])
        if not 0 <= column < len(parent.block.columns):
            raise ContentValidationError(f"Colonne {column} inexistante", parent.path)
        container, depth = parent.block.columns[column].blocks, parent.depth + 1

    _check_subtree(document, block, depth, () if parent_id is None else parent.path)

    position = len(container) if index is None else max(0, min(index, len(container)))
    container.insert(position, block)
    renumber(container)
    log.info("Bloc %s (%s) inséré en position %d", block.id, block.type, position)
    return block
