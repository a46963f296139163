"""The falling stage: the player walks off a wall with a parabolic jump."""

from __future__ import annotations

from nattojump.constants import GameScene, Vec2
from nattojump.game_object import GameContext, GameObject
from nattojump.input import Key


class Fall(GameObject):
    """Jumps along an arc when Space is tapped; flags the stage as done when the arc ends."""

    game_scene = GameScene.FALL
    TEXTURE_FALL = "data/TEXTURE/fall1.png"
    TEXTURE_WALK = "data/TEXTURE/walk1.png"
    TEXTURE_WALL = "data/TEXTURE/wall.png"

    GRAVITY = 0.3
    JUMPING_FRAME = 180
    FALL_TEXTURE_FRAME = 30

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture_fall = 0
        self.texture_walk = 0
        self.texture_wall = 0
        self.current_texture = 0

        self.pos = Vec2()
        self.size = Vec2()
        self.counter = 0
        self.use = False

        self.is_transition = True
        self.is_jumping = False
        self.up_speed = 8.0
        self.right_speed = 2.0
        self.jump_frame = 0

    def initialize(self) -> None:
        textures = self.context.textures
        self.texture_fall = textures.load(self.TEXTURE_FALL)
        self.texture_walk = textures.load(self.TEXTURE_WALK)
        self.texture_wall = textures.load(self.TEXTURE_WALL)
        self.current_texture = self.texture_walk

        self.pos = Vec2(150.0, 125.0)
        self.size = Vec2(200.0, 200.0)
        self.counter = 0
        self.use = True

    def update(self) -> None:
        self._jump()

    def draw(self) -> None:
        canvas = self.context.canvas
        canvas.draw_sprite(self.texture_wall, 100.0, 500.0, 200.0, 600.0, 1.0, 1.0, 1.0, 1.0)
        canvas.draw_sprite(
            self.current_texture,
            self.pos.x,
            self.pos.y,
            self.size.x,
            self.size.y,
            1.0,
            1.0,
            1.0,
            1.0,
        )

    def _jump(self) -> None:
        # Input is ignored while a jump is in progress.
        if not self.is_jumping:
            self.is_jumping = self.context.input.is_key_triggered(Key.SPACE)
        if not self.is_jumping:
            return

        if self.jump_frame >= self.JUMPING_FRAME:
            self.jump_frame = 0
            self.is_jumping = False
            self.is_transition = False
        else:
            self.jump_frame += 1
            self.pos.x += self.right_speed
            self.pos.y -= self.up_speed
            self.up_speed -= self.GRAVITY

        if self.jump_frame == self.FALL_TEXTURE_FRAME:
            self.current_texture = self.texture_fall