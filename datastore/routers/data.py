from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from ..di import get_store
from ..storage.memory import InMemoryStore, StoreUnavailable

logger = logging.getLogger(__name__)

router = APIRouter(tags=["data"])

PREFIX = "/data/"

def _text(content: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(content=content, status_code=status_code)

def _single_segment(request: Request, key: str) -> bool:
    # routes match the decoded path, so "a%2Fb" and "a/b" both land here;
    # only the first is one segment
    raw = request.scope.get("raw_path")
    if raw is None: return bool(key) and "/" not in key
    segment = raw.split(b"?", 1)[0].split(PREFIX.encode(), 1)[-1]
    return bool(segment) and b"/" not in segment

@router.get(PREFIX + "{key:path}", response_class=PlainTextResponse)
async def get_data(key: str, request: Request, store: InMemoryStore = Depends(get_store)) -> PlainTextResponse:
    if not _single_segment(request, key): return _text(f"not found: {request.url.path}", 404)
    try: value = await store.get(key)
    except KeyError: return _text(f"key not found: {key}", 404)
    except StoreUnavailable: return _text("internal server error", 500)
    return _text(value)

@router.put(PREFIX + "{key:path}", response_class=PlainTextResponse)
async def set_data(key: str, request: Request, store: InMemoryStore = Depends(get_store)) -> PlainTextResponse:
    if not _single_segment(request, key): return _text(f"not found: {request.url.path}", 404)
    raw = await request.body()
    try: value = raw.decode("utf-8")
    except UnicodeDecodeError: return _text("value is not valid UTF-8", 400)
    logger.info("Setting data: %s", key)
    try: await store.set(key, value)
    except StoreUnavailable: return _text("internal server error", 500)
    return _text(value)
