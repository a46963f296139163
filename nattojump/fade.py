"""Full-screen fade out / fade in used when switching between screens."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Any

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, Color
from nattojump.game_object import GameContext

FADE_RATE = 0.02


class FadeState(IntEnum):
    """What the fade is doing."""

    NONE = 0
    IN = 1
    OUT = 2


class Fade:
    """Darkens the screen, asks for the next screen, then brightens it again.

    ``on_scene_change`` is called with the requested screen once the screen is
    fully covered (or straight away for ``fade_in``).
    """

    TEXTURE_NAME = "data/TEXTURE/fade_white.png"

    def __init__(
        self,
        context: GameContext | None = None,
        on_scene_change: Callable[[Any], None] | None = None,
    ) -> None:
        self.context = context if context is not None else GameContext()
        self.on_scene_change = on_scene_change
        self.texture: int | None = None
        self.state = FadeState.NONE
        self.next_scene: Any = None
        self.color = Color(1.0, 1.0, 1.0, 1.0)

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.state = FadeState.NONE
        self.next_scene = None
        self.color = Color(1.0, 1.0, 1.0, 1.0)

    def update(self) -> None:
        if self.state == FadeState.OUT:
            self.color.a += FADE_RATE
            if self.color.a >= 1.0:
                self.color.a = 1.0
                self.state = FadeState.IN
                self._request(self.next_scene)
        elif self.state == FadeState.IN:
            self.color.a -= FADE_RATE
            if self.color.a <= 0.0:
                self.color.a = 0.0
                self.state = FadeState.NONE

    def draw(self) -> None:
        if self.state == FadeState.NONE:
            return
        self.context.canvas.draw_sprite_color(
            self.texture,
            SCREEN_WIDTH / 2,
            SCREEN_HEIGHT / 2,
            SCREEN_WIDTH,
            SCREEN_HEIGHT,
            0.0,
            0.0,
            1.0,
            1.0,
            self.color,
        )

    def transition(self, next_scene: Any) -> None:
        """Fade out, switch to ``next_scene``, then fade back in."""
        self.next_scene = next_scene
        self.state = FadeState.OUT

    def fade_in(self, next_scene: Any) -> None:
        """Switch to ``next_scene`` at once and reveal it with a fade in."""
        self.color.a = 1.0
        self.state = FadeState.IN
        self._request(next_scene)

    def set_color(self, r: float, g: float, b: float) -> None:
        """Set the fade colour; alpha is reset to fully opaque."""
        self.color = Color(r, g, b, 1.0)

    def _request(self, scene: Any) -> None:
        if self.on_scene_change is not None:
            self.on_scene_change(scene)