from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

class Liveness(BaseModel):
    status: Literal["live"] = "live"

class Readiness(BaseModel):
    status: Literal["ready"] = "ready"
    entries: int = 0
