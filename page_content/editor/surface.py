"""
Surface d'édition interactive d'un bloc (exemple type : l'image redimensionnable).

Une instance = un bloc monté. Vocabulaire d'édition borné : alignement,
largeur proportionnelle, suppression. Chaque commit passe par
`update_block` (merge d'attributs) ; les positions intermédiaires d'un
redimensionnement restent locales jusqu'au relâchement.

    Idle ⇄ Hover → Resizing → Hover
      └──────┴────────┴──→ Deleted (terminal)
"""
import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from ..blocks import BaseBlock
from ..core.config import EditorConfig
from ..core.errors import (
    BlockNotFoundError,
    ContentValidationError,
    EditorStateError,
    TypeMismatchError,
)
from ..core.operations import find_block, remove_block, update_block
from ..core.schemas import PageContent

log = logging.getLogger(__name__)


class EditorState(str, Enum):
    IDLE     = "idle"
    HOVER    = "hover"
    RESIZING = "resizing"
    DELETED  = "deleted"


class EditableFields(NamedTuple):
    """Champs du bloc pilotés par la surface (None = contrôle absent)."""
    alignment: Optional[str]
    width: Optional[str]
    alignments: Tuple[str, ...] = ()
    normalize_alignment: bool = False


_TEXT_ALIGNMENTS = ("left", "center", "right")

EDITABLE_FIELDS: Dict[str, EditableFields] = {
    "image":     EditableFields("align", "width", _TEXT_ALIGNMENTS, normalize_alignment=True),
    "embed":     EditableFields(None, "width"),
    "paragraph": EditableFields("align", None, _TEXT_ALIGNMENTS),
    "heading":   EditableFields("align", None, _TEXT_ALIGNMENTS),
    "button":    EditableFields("align", None, _TEXT_ALIGNMENTS),
}


def parse_percent(value: Any, fallback: int = 100) -> int:
    """"75%" → 75 ; toute autre valeur (nombre px, None, texte) → fallback."""
    if isinstance(value, str) and value.endswith("%"):
        try:
            return int(float(value[:-1]))
        except ValueError:
            return fallback
    return fallback


class BlockEditorSurface:
    """
    Enveloppe avec état autour d'un bloc éditable d'un PageContent.

    Usage:
        >>> surface = BlockEditorSurface(document, "img-1")   # normalise align si absent
        >>> surface.pointer_enter()
        >>> surface.open_size_control()
        >>> surface.set_width_live(35)
        >>> surface.set_width_live(60)
        >>> surface.commit_width()                           # un seul merge : width="60%"
    """

    def __init__(
        self,
        document: PageContent,
        block_id: str,
        config: Optional[EditorConfig] = None,
        on_commit: Optional[Callable[[BaseBlock], None]] = None,
    ):
        self.document = document
        self.block_id = block_id
        self.config = config or EditorConfig()
        self.on_commit = on_commit
        self.commits = 0
        self.state = EditorState.IDLE

        block = find_block(document, block_id)
        if block is None:
            raise BlockNotFoundError(block_id)
        fields = EDITABLE_FIELDS.get(block.type)
        if fields is None:
            raise TypeMismatchError(block.type, ["alignment", "width"])
        self.fields = fields

        self._live_width = self._persisted_percent(block)
        self._pending = False
        self._mount(block)

    # ── Montage ──────────────────────────────────────────────────────────────

    def _mount(self, block: BaseBlock) -> None:
        """Normalisation unique : alignement par défaut si absent au premier montage."""
        field = self.fields.alignment
        if self.fields.normalize_alignment and field and getattr(block, field) is None:
            self._commit({field: self.config.default_alignment})

    # ── Lecture ──────────────────────────────────────────────────────────────

    @property
    def block(self) -> BaseBlock:
        self._ensure_alive()
        block = find_block(self.document, self.block_id)
        if block is None:
            raise BlockNotFoundError(self.block_id)
        return block

    @property
    def controls_visible(self) -> bool:
        return self.state in (EditorState.HOVER, EditorState.RESIZING)

    @property
    def live_width(self) -> int:
        return self._live_width

    @property
    def has_pending_width(self) -> bool:
        return self._pending

    def render_state(self) -> Dict[str, Any]:
        """Instantané lecture seule pour la vue. Ne déclenche aucune mutation."""
        block = self.block
        return {
            "block_id": self.block_id,
            "state": self.state.value,
            "controls_visible": self.controls_visible,
            "alignment": getattr(block, self.fields.alignment) if self.fields.alignment else None,
            "width": getattr(block, self.fields.width) if self.fields.width else None,
            "live_width": self._live_width if self.state == EditorState.RESIZING else None,
        }

    # ── Pointeur ─────────────────────────────────────────────────────────────

    def pointer_enter(self) -> None:
        self._ensure_alive()
        if self.state == EditorState.IDLE:
            self.state = EditorState.HOVER

    def pointer_leave(self) -> None:
        self._ensure_alive()
        # Un redimensionnement en cours survit à la sortie du pointeur
        if self.state == EditorState.HOVER:
            self.state = EditorState.IDLE

    def open_size_control(self) -> None:
        self._ensure_alive()
        if self.fields.width is None:
            raise EditorStateError(f"Bloc {self.block_id!r} : pas de contrôle de largeur")
        if self.state != EditorState.HOVER:
            raise EditorStateError(f"Contrôle de taille inaccessible depuis l'état {self.state.value}")
        self._live_width = self._persisted_percent(self.block)
        self.state = EditorState.RESIZING

    # ── Largeur ──────────────────────────────────────────────────────────────

    def set_width_live(self, percent: Any) -> int:
        """Met à jour la valeur locale (bornée + arrondie au pas). Aucun merge."""
        self._ensure_alive()
        if self.state != EditorState.RESIZING:
            raise EditorStateError("set_width_live hors redimensionnement")
        if isinstance(percent, bool) or not isinstance(percent, (int, float)) or not math.isfinite(percent):
            raise ContentValidationError(f"Largeur invalide : {percent!r}")
        self._live_width = self._snap(percent)
        self._pending = True
        return self._live_width

    def commit_width(self) -> Optional[BaseBlock]:
        """
        Relâchement : merge unique de la valeur locale en "<n>%".
        Sans set_width_live depuis le dernier commit : aucun merge, le contrôle se
        referme quand même (Resizing → Hover).
        """
        self._ensure_alive()
        if not self._pending:
            if self.state == EditorState.RESIZING:
                self.state = EditorState.HOVER
            return None
        block = self._commit({self.fields.width: f"{self._live_width}%"})
        self._pending = False
        if self.state == EditorState.RESIZING:
            self.state = EditorState.HOVER
        return block

    # ── Alignement ───────────────────────────────────────────────────────────

    def set_alignment(self, alignment: str) -> BaseBlock:
        """Commit immédiat : un clic = un merge."""
        self._ensure_alive()
        if self.fields.alignment is None:
            raise EditorStateError(f"Bloc {self.block_id!r} : pas de contrôle d'alignement")
        if alignment not in self.fields.alignments:
            raise ContentValidationError(
                f"Alignement {alignment!r} hors vocabulaire {list(self.fields.alignments)}"
            )
        return self._commit({self.fields.alignment: alignment})

    # ── Suppression ──────────────────────────────────────────────────────────

    def delete(self) -> BaseBlock:
        self._ensure_alive()
        removed = remove_block(self.document, self.block_id)
        self.state = EditorState.DELETED
        self._pending = False
        self.document = None
        log.info("Surface %s : bloc supprimé", self.block_id)
        return removed

    # ── Interne ──────────────────────────────────────────────────────────────

    def _ensure_alive(self) -> None:
        if self.state == EditorState.DELETED:
            raise EditorStateError(f"Bloc {self.block_id!r} supprimé : surface inactive")

    def _commit(self, delta: Dict[str, Any]) -> BaseBlock:
        block = update_block(self.document, self.block_id, delta)
        self.commits += 1
        log.info("Surface %s : commit %s", self.block_id, delta)
        if self.on_commit is not None:
            self.on_commit(block)
        return block

    def _snap(self, value: float) -> int:
        cfg = self.config
        snapped = int(math.floor(value / cfg.width_step + 0.5)) * cfg.width_step
        return max(cfg.width_min, min(cfg.width_max, snapped))

    def _persisted_percent(self, block: BaseBlock) -> int:
        if self.fields.width is None:
            return self.config.width_max
        return self._snap(parse_percent(getattr(block, self.fields.width), self.config.width_max))
