"""
page_content — FastAPI app
Démarrer : uvicorn page_content.app:app --reload --port 8001
"""
import logging
from fastapi import FastAPI

from . import __version__
from .router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="page_content — modèle de blocs", version=__version__, docs_url="/docs")
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "page_content", "version": __version__}
