"""The cursor-driven player of the natto scramble stage."""

from __future__ import annotations

from nattojump.constants import SCREEN_WIDTH, Color, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject
from nattojump.input import Key, MouseButton

_STEP = 1.0


class Player(GameObject):
    """Moves with the arrow keys and jumps to the cursor while the left button is held."""

    game_scene = GameScene.SCRAMBLE
    TEXTURE_NAME = "data/TEXTURE/player.png"

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.pos = Vec2()
        self.size = Vec2()
        self.vel = Vec2()
        self.color = Color()

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.pos = Vec2(SCREEN_WIDTH / 2, 440.0)
        self.size = Vec2(50.0, 50.0)
        self.vel = Vec2(1.0, 1.0)
        self.color = Color(1.0, 1.0, 1.0, 1.0)

    def update(self) -> None:
        keys = self.context.input
        if keys.is_key_pressed(Key.UP):
            self.pos.y -= _STEP
        if keys.is_key_pressed(Key.DOWN):
            self.pos.y += _STEP
        if keys.is_key_pressed(Key.LEFT):
            self.pos.x -= _STEP
        if keys.is_key_pressed(Key.RIGHT):
            self.pos.x += _STEP
        if keys.is_mouse_pressed(MouseButton.LEFT):
            self.pos.x = float(keys.mouse_x)
            self.pos.y = float(keys.mouse_y)

    def draw(self) -> None:
        self.context.canvas.draw_sprite(
            self.texture,
            self.pos.x,
            self.pos.y,
            self.size.x,
            self.size.y,
            0.0,
            0.0,
            0.5,
            0.5,
        )