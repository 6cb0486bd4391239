"""
ADVERTORIAL_BUILDER — FastAPI app
Démarrer : uvicorn advertorial_builder.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="ADVERTORIAL_BUILDER — Pages advertorial", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "advertorial_builder", "version": __version__}
