"""Stage objects that take part in the life cycle but have no behaviour of their own yet."""

from __future__ import annotations

from dataclasses import dataclass, field

from nattojump.constants import GameScene, Vec2
from nattojump.game_object import GameContext, GameObject


@dataclass
class TargetSlot:
    """Position and size of one target."""

    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)


class Target(GameObject):
    """Targets for the string-shooting stage, held in a fixed set of slots."""

    game_scene = GameScene.GAME_TEST
    TARGET_NUM_MAX = 50

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.targets = [TargetSlot() for _ in range(self.TARGET_NUM_MAX)]


class Throw(GameObject):
    """Throwing part of the scramble stage."""

    game_scene = GameScene.SCRAMBLE
    TEXTURE_NAME = "data/TEXTURE/"

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None


class Natto(GameObject):
    """The natto itself in the scramble stage."""

    game_scene = GameScene.SCRAMBLE
    TEXTURE_NAME = "data/TEXTURE/納豆.png"

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None