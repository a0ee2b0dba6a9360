"""
Collaborateur d'upload — interface uniquement.

Un upload reçoit un fichier binaire + un dossier de destination et renvoie
URL publique, nom, type MIME et taille. Le modèle de blocs ne stocke que l'URL.
"""
import logging
import mimetypes
import uuid
from typing import Optional, Protocol, runtime_checkable

import requests as http
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .blocks import ImageBlock
from .core.config import UPLOAD_API_URL
from .core.errors import UploadError

log = logging.getLogger(__name__)

DEFAULT_FOLDER = "partners"


class UploadResult(BaseModel):
    url: str
    filename: str
    mimetype: str
    size: int = Field(..., ge=0)


@runtime_checkable
class Uploader(Protocol):
    def upload(self, content: bytes, filename: str, folder: str = DEFAULT_FOLDER) -> UploadResult: ...


class HttpUploader:
    """
    Client de l'API d'upload : POST multipart {file, folder} sur <api_url>/uploads.

    Args:
        api_url: base de l'API (défaut : UPLOAD_API_URL)
        timeout: timeout HTTP en secondes
    """

    def __init__(self, api_url: Optional[str] = None, timeout: float = 30):
        self.api_url = (api_url or UPLOAD_API_URL).rstrip("/")
        self.timeout = timeout

    def upload(self, content: bytes, filename: str, folder: str = DEFAULT_FOLDER) -> UploadResult:
        mimetype = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        try:
            r = http.post(
                f"{self.api_url}/uploads",
                files={"file": (filename, content, mimetype)},
                data={"folder": folder},
                timeout=self.timeout,
            )
            r.raise_for_status()
            result = UploadResult(**r.json())
        except http.RequestException as e:
            log.error("Upload %s échoué : %s", filename, e)
            raise UploadError(f"Upload de {filename!r} échoué : {e}") from e
        except (ValueError, TypeError, PydanticValidationError) as e:
            raise UploadError(f"Réponse d'upload malformée pour {filename!r} : {e}") from e

        log.info("Upload %s → %s (%d octets)", filename, result.url, result.size)
        return result


def image_block_from_upload(
    result: UploadResult,
    block_id: Optional[str] = None,
    alt: Optional[str] = None,
    caption: Optional[str] = None,
) -> ImageBlock:
    """Bloc image à partir d'un upload : seule l'URL est conservée."""
    return ImageBlock(
        id=block_id or str(uuid.uuid4()),
        url=result.url,
        alt=alt,
        caption=caption,
    )
