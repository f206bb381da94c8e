from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SlideAnimation:
    move_id: int
    src: Tuple[int,int]
    dst: Tuple[int,int]
    value: int
    merge: bool = False
    linear: float = 0.0  # 0..1
