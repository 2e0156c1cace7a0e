from __future__ import annotations
from fastapi import Request
from .storage.memory import InMemoryStore

def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store
