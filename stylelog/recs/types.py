from dataclasses import dataclass
from typing import List, Optional

from stylelog.schemas.outfits import Outfit


@dataclass(frozen=True)
class SubScores:
    weather: float
    occasion: float
    personal: float
    confidence: float


@dataclass
class Candidate:
    """One strategy's pick before scoring. ``outfit`` is None when history has nothing to offer."""
    strategy: str
    outfit: Optional[Outfit]
    reasons: List[str]
