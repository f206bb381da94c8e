from collections import defaultdict

from esper import World

from game2048.animation_factory import AnimationFactory
from game2048.components.animation_slide import SlideAnimation
from game2048.components.animation_spawn import SpawnAnimation
from game2048.components.duration import Duration
from game2048.events.bus import (EVENT_TICK, EventBus, EVENT_ANIMATION_START, EVENT_ANIMATION_COMPLETE,
                                 EVENT_GAME_STARTED)


class AnimationSystem:
    """Drives timing of animations; each animated tile is its own entity.

    Slide tweens of one plan form a group: the group reports completion once,
    after its last tween finished, so the post-move step never runs per tile.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind'); items = kwargs.get('items', [])
        if kind == 'slide':
            move_id = kwargs.get('move_id')
            if not items:
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='slide', items=[], move_id=move_id)
                return
            self.factory.create_slide_group(move_id, items)
        elif kind == 'spawn':
            self.factory.create_spawn_group(items)

    def on_game_started(self, sender, **kwargs):
        # Tweens of the previous game are dropped without completion events.
        for comp_type in (SlideAnimation, SpawnAnimation):
            for ent, _ in list(self.world.get_component(comp_type)):
                self._delete_animation_entity(ent)

    def is_animating(self) -> bool:
        return bool(self.world.get_component(SlideAnimation))

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        # Slide progression, completed per move group
        slides = list(self.world.get_component(SlideAnimation))
        if slides:
            groups = defaultdict(list)
            for ent, slide in slides:
                if slide.linear < 1.0:
                    d = self.world.component_for_entity(ent, Duration)
                    slide.linear += dt / d.value if d.value > 0 else 1.0
                    if slide.linear > 1.0:
                        slide.linear = 1.0
                groups[slide.move_id].append((ent, slide))
            for move_id, members in groups.items():
                if all(slide.linear >= 1.0 for _, slide in members):
                    items = [
                        {'from': slide.src, 'to': slide.dst, 'value': slide.value, 'merge': slide.merge}
                        for _, slide in members
                    ]
                    for ent, _ in members:
                        self._delete_animation_entity(ent)
                    self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='slide', items=items, move_id=move_id)
        # Spawn progression
        spawns = list(self.world.get_component(SpawnAnimation))
        if spawns:
            for ent, spawn in spawns:
                if spawn.linear < 1.0:
                    d = self.world.component_for_entity(ent, Duration)
                    spawn.linear += dt / d.value if d.value > 0 else 1.0
                    if spawn.linear > 1.0:
                        spawn.linear = 1.0
            if all(spawn.linear >= 1.0 for _, spawn in spawns):
                items = [(spawn.pos, spawn.value) for _, spawn in spawns]
                for ent, _ in spawns:
                    self._delete_animation_entity(ent)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='spawn', items=items, move_id=None)

    def _delete_animation_entity(self, ent: int):
        self.world.delete_entity(ent, immediate=True)
