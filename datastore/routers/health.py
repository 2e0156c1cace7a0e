from __future__ import annotations
from fastapi import APIRouter, Depends
from ..di import get_store
from ..models import Liveness, Readiness
from ..storage.memory import InMemoryStore

router = APIRouter(tags=["health"])

@router.get("/healthz/live", response_model=Liveness)
async def liveness() -> Liveness:
    return Liveness()

@router.get("/healthz/ready", response_model=Readiness)
async def readiness(store: InMemoryStore = Depends(get_store)) -> Readiness:
    return Readiness(entries=await store.count())
