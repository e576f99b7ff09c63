"""FastAPI server that renders bracket-notation trees to SVG."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lingtree import config
from lingtree.document import find_tree_sources, render_document
from lingtree.errors import ParseError
from lingtree.render import build_scene
from lingtree.tree.svg import scene_to_svg

# Configure logging on import — before anything else logs
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)

app = FastAPI(title="lingtree", description="Syntax tree rendering service")

if config.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


class RenderRequest(BaseModel):
    source: str


class RenderResponse(BaseModel):
    svg: str
    width: float
    height: float


class DocumentRequest(BaseModel):
    text: str


class DocumentResponse(BaseModel):
    html: str
    trees: int


def _check_size(text: str) -> None:
    if len(text) > config.MAX_SOURCE_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Source is {len(text)} characters; limit is {config.MAX_SOURCE_CHARS}",
        )


def _render(source: str) -> RenderResponse:
    _check_size(source)
    t0 = time.perf_counter()
    try:
        scene = build_scene(source)
    except ParseError as e:
        logger.info("Parse error after %.3fs: %s", time.perf_counter() - t0, e)
        raise HTTPException(status_code=422, detail=str(e))
    svg = scene_to_svg(scene)
    logger.info(
        "Rendered %d primitives, %.0fx%.0f, %.3fs",
        len(scene.primitives), scene.width, scene.height, time.perf_counter() - t0,
    )
    return RenderResponse(svg=svg, width=scene.width, height=scene.height)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/render", response_model=RenderResponse)
def render_tree(req: RenderRequest):
    logger.info("POST /render source=%r", req.source[:120])
    return _render(req.source)


@app.post("/render.svg")
def render_tree_svg(req: RenderRequest):
    logger.info("POST /render.svg source=%r", req.source[:120])
    return Response(content=_render(req.source).svg, media_type="image/svg+xml")


@app.post("/document", response_model=DocumentResponse)
def render_doc(req: DocumentRequest):
    _check_size(req.text)
    t0 = time.perf_counter()
    trees = len(find_tree_sources(req.text))
    out = render_document(req.text)
    logger.info("POST /document: %d tree(s), %.3fs", trees, time.perf_counter() - t0)
    return DocumentResponse(html=out, trees=trees)
