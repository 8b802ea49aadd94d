"""FastAPI application exposing the FileFinder indexes."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from filefinder.config import AppConfig
from filefinder.index.indexer import FileCatalog, IndexStats, Indexer
from filefinder.index.search import Searcher, SearchResult
from filefinder.utils.text import parse_size

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="FileFinder Web", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_state: dict[str, Any] = {"catalog": FileCatalog(), "roots": []}


class IndexPayload(BaseModel):
    paths: List[str]
    include_hidden: bool = False


class PrefixPayload(BaseModel):
    prefix: str = ""
    limit: int = AppConfig().max_results


class RangePayload(BaseModel):
    low: int | str
    high: int | str
    limit: int = AppConfig().max_results


def _clamp_limit(limit: int) -> int:
    return max(1, min(limit, 500))


def _to_bytes(value: int | str) -> int:
    if isinstance(value, int):
        if value < 0:
            raise HTTPException(status_code=400, detail=f"Invalid size: {value}")
        return value
    try:
        return parse_size(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _safe_base_dir() -> Path:
    return Path(os.path.realpath(str(Path.home())))


def _resolve_paths(raw_paths: List[str]) -> List[Path]:
    # Indexing is restricted to the user's home directory, compared on canonical paths.
    safe_base_str = str(_safe_base_dir()) + os.sep
    resolved: List[Path] = []
    for raw in raw_paths:
        clean = raw.strip().replace("\r", "").replace("\n", "")
        if not clean:
            continue
        if "\0" in clean:
            raise HTTPException(status_code=400, detail="Invalid path: contains null byte")

        real_path = os.path.realpath(os.path.expanduser(clean))
        if not (real_path + os.sep).startswith(safe_base_str):
            raise HTTPException(
                status_code=403,
                detail="Access denied: path is outside allowed directory",
            )

        path = Path(real_path)
        if not path.exists():
            raise HTTPException(status_code=404, detail="Path not found: %s" % clean)
        resolved.append(path)
    return resolved


def _run_index_job(paths: List[Path], include_hidden: bool) -> tuple[FileCatalog, IndexStats]:
    catalog = FileCatalog()
    stats = Indexer(catalog, include_hidden=include_hidden).index(paths)
    return catalog, stats


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/index")
async def index_files(payload: IndexPayload) -> dict[str, Any]:
    """Scan the given paths and replace the in-memory catalog."""
    paths = _resolve_paths(payload.paths)
    if not paths:
        raise HTTPException(status_code=400, detail="No path provided")

    try:
        catalog, stats = await asyncio.to_thread(_run_index_job, paths, payload.include_hidden)
    except Exception as exc:  # pragma: no cover - defensive
        LOGGER.exception("Indexing failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    previous = _state["catalog"]
    _state["catalog"] = catalog
    _state["roots"] = [str(path) for path in paths]
    previous.close()

    LOGGER.info("Indexed %d files from %d path(s)", stats.indexed, len(paths))
    return {
        "status": "ok",
        "stats": {
            "indexed": stats.indexed,
            "failed": stats.failed,
            "total_bytes": stats.total_bytes,
        },
    }


@app.post("/search/prefix")
async def search_prefix(payload: PrefixPayload) -> dict[str, List[SearchResult]]:
    searcher = Searcher(_state["catalog"])
    return {"results": searcher.by_prefix(payload.prefix, limit=_clamp_limit(payload.limit))}


@app.post("/search/range")
async def search_range(payload: RangePayload) -> dict[str, List[SearchResult]]:
    low = _to_bytes(payload.low)
    high = _to_bytes(payload.high)
    searcher = Searcher(_state["catalog"])
    return {"results": searcher.by_size(low, high, limit=_clamp_limit(payload.limit))}


@app.get("/stats")
async def get_stats() -> dict[str, Any]:
    catalog: FileCatalog = _state["catalog"]
    return {
        "file_count": len(catalog),
        "total_bytes": sum(record.size for record in catalog.sizes),
        "roots": list(_state["roots"]),
    }
