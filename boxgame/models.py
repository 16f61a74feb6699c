from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt


class PlayRequest(BaseModel):
    weights: List[NonNegativeInt] = Field(default_factory=list)


class ScoresResp(BaseModel):
    scoreA: float
    scoreB: float
    winner: Optional[Literal["A", "B"]] = None
