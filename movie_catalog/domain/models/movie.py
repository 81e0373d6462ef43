from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Movie(BaseModel):
    title: str = ""
    year: int = 0
    runtime: int = 0
    genres: List[str] = Field(default_factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    version: int = 1
