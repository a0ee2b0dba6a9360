"""
Parcours de l'arbre de blocs (racine → Columns → colonnes → blocs…).

Parcours itératif (pile explicite) en ordre document : la profondeur est
bornée par `max_depth`, jamais par la pile Python.
"""
from typing import Any, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from ..blocks import BaseBlock, ColumnsBlock
from .config import MAX_DEPTH
from .errors import ContentValidationError
from .schemas import PageContent

BlockPath = Tuple[int, ...]


class BlockLocation(NamedTuple):
    """Position d'un bloc : le bloc, son chemin, la liste qui le contient, son index, sa profondeur."""
    block: BaseBlock
    path: BlockPath
    container: List[Any]
    index: int
    depth: int


def _root_blocks(source: Union[PageContent, Sequence[BaseBlock]]) -> List[Any]:
    return source.blocks if isinstance(source, PageContent) else source


def walk(
    source: Union[PageContent, Sequence[BaseBlock]],
    max_depth: Optional[int] = None,
) -> Iterator[BlockLocation]:
    """
    Itère sur tous les blocs en pré-ordre (ordre document).

    Profondeur 0 = racine ; les blocs d'une colonne d'un Columns de profondeur d
    sont à d+1. Dépasser `max_depth` lève ContentValidationError au chemin du
    Columns fautif, avant de descendre.
    """
    limit = MAX_DEPTH if max_depth is None else max_depth
    blocks = _root_blocks(source)
    frames = [(blocks, (), 0, iter(enumerate(blocks)))]

    while frames:
        container, prefix, depth, it = frames[-1]
        nxt = next(it, None)
        if nxt is None:
            frames.pop()
            continue
        index, block = nxt
        path = prefix + (index,)
        yield BlockLocation(block, path, container, index, depth)

        if isinstance(block, ColumnsBlock) and block.columns:
            if depth + 1 > limit:
                raise ContentValidationError(
                    f"Profondeur d'imbrication > {limit} (Columns imbriqués)", path
                )
            # Colonnes empilées à l'envers : la première est traitée en premier
            for col_idx in reversed(range(len(block.columns))):
                col_blocks = block.columns[col_idx].blocks
                frames.append((col_blocks, path + (col_idx,), depth + 1, iter(enumerate(col_blocks))))


def iter_containers(
    source: Union[PageContent, Sequence[BaseBlock]],
    max_depth: Optional[int] = None,
) -> Iterator[Tuple[BlockPath, List[Any]]]:
    """Itère sur chaque séquence de blocs (racine puis colonnes), avec son chemin."""
    yield (), _root_blocks(source)
    for loc in walk(source, max_depth=max_depth):
        if isinstance(loc.block, ColumnsBlock):
            for col_idx, column in enumerate(loc.block.columns):
                yield loc.path + (col_idx,), column.blocks


def block_ids(
    source: Union[PageContent, Sequence[BaseBlock]],
    max_depth: Optional[int] = None,
) -> List[str]:
    """Ids de tous les blocs, ordre document."""
    return [loc.block.id for loc in walk(source, max_depth=max_depth)]


class BlockVisitor:
    """
    Visiteur par variante, façon ast.NodeVisitor.

    `visit(block)` appelle `visit_<type>` (ex. `visit_image`) si la méthode
    existe, sinon `generic_visit`. `visit_document` s'appuie sur `walk` :
    chaque bloc imbriqué est visité une fois, dans l'ordre document, sous la
    même garde de profondeur.

    >>> class ImageCollector(BlockVisitor):
    ...     def __init__(self):
    ...         self.urls = []
    ...     def visit_image(self, block):
    ...         self.urls.append(block.url)
    """

    def visit(self, block: BaseBlock) -> Any:
        method = getattr(self, f"visit_{block.type}", None)
        if method is not None:
            return method(block)
        return self.generic_visit(block)

    def generic_visit(self, block: BaseBlock) -> Any:
        """Repli sans effet ; la descente dans les colonnes revient à visit_document."""
        return None

    def visit_document(
        self,
        source: Union[PageContent, Sequence[BaseBlock]],
        max_depth: Optional[int] = None,
    ) -> None:
        for loc in walk(source, max_depth=max_depth):
            self.visit(loc.block)
