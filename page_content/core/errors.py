"""
Taxonomie d'erreurs du modèle de contenu.
Aucune opération n'avale une erreur : tout échec remonte à l'appelant.
"""
from typing import Iterable, Tuple


def format_path(path: Tuple[int, ...]) -> str:
    """(0, 1, 2) → "blocks[0].columns[1].blocks[2]"."""
    if not path:
        return "document"
    parts = []
    for i, idx in enumerate(path):
        parts.append(f"blocks[{idx}]" if i % 2 == 0 else f"columns[{idx}]")
    return ".".join(parts)


class ContentError(Exception):
    """Racine des erreurs page_content."""


class ContentValidationError(ContentError):
    """Violation structurelle : id dupliqué, champ illégal, profondeur, version inconnue."""

    def __init__(self, message: str, path: Tuple[int, ...] = ()):
        self.path = tuple(path)
        self.message = message
        super().__init__(f"{format_path(self.path)} : {message}" if self.path else message)


class TypeMismatchError(ContentError):
    """Un delta cible des champs non légaux pour la variante du bloc."""

    def __init__(self, block_type: str, fields: Iterable[str]):
        self.block_type = block_type
        self.fields = tuple(sorted(fields))
        super().__init__(
            f"Champs non autorisés pour un bloc {block_type!r} : {', '.join(self.fields)}"
        )


class BlockNotFoundError(ContentError, LookupError):
    def __init__(self, block_id: str):
        self.block_id = block_id
        super().__init__(f"Bloc {block_id!r} introuvable")


class EditorStateError(ContentError):
    """Opération invalide dans l'état courant de la surface d'édition."""


class UploadError(ContentError):
    """Échec du collaborateur d'upload (réseau, HTTP, réponse malformée)."""
