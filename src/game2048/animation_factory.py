from esper import World
from game2048.components.animation_slide import SlideAnimation
from game2048.components.animation_spawn import SpawnAnimation
from game2048.components.duration import Duration
from game2048.constants import SLIDE_DURATION, SPAWN_DURATION
from typing import Tuple, List

class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_slide_group(self, move_id: int, moves: List[dict], duration: float = SLIDE_DURATION) -> List[int]:
        ents = []
        for m in moves:
            ent = self.world.create_entity()
            self.world.add_component(
                ent,
                SlideAnimation(move_id=move_id, src=m['from'], dst=m['to'], value=m['value'], merge=m.get('merge', False)),
            )
            self.world.add_component(ent, Duration(duration))
            ents.append(ent)
        return ents

    def create_spawn_group(self, tiles: List[Tuple[Tuple[int,int], int]], duration: float = SPAWN_DURATION) -> List[int]:
        ents = []
        for pos, value in tiles:
            ent = self.world.create_entity()
            self.world.add_component(ent, SpawnAnimation(pos=pos, value=value))
            self.world.add_component(ent, Duration(duration))
            ents.append(ent)
        return ents
