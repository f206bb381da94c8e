from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SpawnAnimation:
    pos: Tuple[int,int]
    value: int
    linear: float = 0.0
