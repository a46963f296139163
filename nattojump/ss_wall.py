"""A fixed pool of wall tiles laid out once for the string-shooting stage."""

from __future__ import annotations

from dataclasses import dataclass, field

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject


@dataclass
class _Wall:
    pos: Vec2 = field(default_factory=lambda: Vec2(100.0, 100.0))
    size: Vec2 = field(default_factory=lambda: Vec2(50.0, 50.0))
    used: bool = False


class WallGrid(GameObject):
    """Holds up to ``WALL_NUM_MAX`` wall tiles and places the stage layout on first update."""

    game_scene = GameScene.GAME_TEST
    TEXTURE_NAME = "data/TEXTURE/wall1.png"

    WALL_NUM_MAX = 300
    WALL_NUM_X = 32
    WALL_NUM_Y = 18
    WALL_WIDTH = SCREEN_WIDTH / WALL_NUM_X
    WALL_HEIGHT = SCREEN_HEIGHT / WALL_NUM_Y

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.walls: list[_Wall] = []
        self._layout_pending = False

    @property
    def used_walls(self) -> list[_Wall]:
        """The tiles currently in play."""
        return [wall for wall in self.walls if wall.used]

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.walls = [_Wall() for _ in range(self.WALL_NUM_MAX)]
        self._layout_pending = True

    def update(self) -> None:
        self.place_layout()

    def draw(self) -> None:
        for wall in self.used_walls:
            self.context.canvas.draw_sprite_left_top(
                self.texture,
                wall.pos.x,
                wall.pos.y,
                wall.size.x,
                wall.size.y,
                1.0,
                1.0,
                1.0,
                1.0,
            )

    def place(self, pos: Vec2 | None = None, size: Vec2 | None = None) -> _Wall | None:
        """Put a tile into the first free slot; returns it, or ``None`` when all are used."""
        wall = next((w for w in self.walls if not w.used), None)
        if wall is None:
            return None
        if pos is not None:
            wall.pos = pos.copy()
        if size is not None:
            wall.size = size.copy()
        wall.used = True
        return wall

    def place_layout(self) -> None:
        """Lay out a floor row and a pillar column; only the first call has an effect."""
        if not self._layout_pending:
            return
        self._layout_pending = False
        size = Vec2(self.WALL_WIDTH, self.WALL_HEIGHT)
        for row in range(self.WALL_NUM_Y):
            for col in range(self.WALL_NUM_X):
                self.place(Vec2(self.WALL_WIDTH * col, self.WALL_HEIGHT * 5), size)
            self.place(Vec2(self.WALL_WIDTH * 5, self.WALL_HEIGHT * row), size)