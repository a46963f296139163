"""Ten-second countdown shown as a whole-second digit and two decimal digits."""

from __future__ import annotations

from dataclasses import dataclass, field

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, Color, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject


@dataclass
class _Digit:
    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    value: int = 0
    u: float = 0.0
    v: float = 0.0


class Timer(GameObject):
    """Counts down 600 frames; ``active`` turns false when the time is up."""

    game_scene = GameScene.SCRAMBLE
    TEXTURE_NAME = "data/TEXTURE/number2.png"

    DURATION_FRAMES = 600
    FRAMES_PER_SECOND = 60
    NUMBER_X = 4
    NUMBER_Y = 4
    NUMBER_WIDTH = 1.0 / NUMBER_X
    NUMBER_HEIGHT = 1.0 / NUMBER_Y

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.alpha = 1.0
        self.counter = 0
        self.active = False
        self.seconds = _Digit()
        self.tenths = _Digit()
        self.hundredths = _Digit()

    @property
    def digits(self) -> tuple[int, int, int]:
        """The three displayed digit values."""
        return (self.seconds.value, self.tenths.value, self.hundredths.value)

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.alpha = 1.0
        self.counter = 0
        self.active = True
        cx = SCREEN_WIDTH / 2
        cy = SCREEN_HEIGHT / 2
        self.seconds = _Digit(Vec2(cx, cy), Vec2(75.0, 75.0))
        self.tenths = _Digit(Vec2(cx + 100.0, cy), Vec2(75.0, 75.0))
        self.hundredths = _Digit(Vec2(cx + 200.0, cy), Vec2(75.0, 75.0))

    def update(self) -> None:
        self._update_seconds()
        remaining = self.DURATION_FRAMES - self.counter
        self._set_digit(self.tenths, (remaining // 6) % 10)
        self._set_digit(self.hundredths, (remaining * 10 // 6) % 10)

    def draw(self) -> None:
        if not self.active:
            return
        color = Color(1.0, 1.0, 1.0, self.alpha)
        for digit in (self.seconds, self.tenths, self.hundredths):
            self.context.canvas.draw_sprite_color(
                self.texture,
                digit.pos.x,
                digit.pos.y,
                digit.size.x,
                digit.size.y,
                digit.u,
                digit.v,
                self.NUMBER_WIDTH,
                self.NUMBER_HEIGHT,
                color,
            )

    def _update_seconds(self) -> None:
        if not self.active:
            return
        if self.counter >= self.DURATION_FRAMES:
            self.counter = 0
            self.active = False
        else:
            self.counter += 1

        remaining = self.DURATION_FRAMES - self.counter
        # Blinks as the digit changes.
        self.alpha = float((remaining % self.FRAMES_PER_SECOND) // 10)
        self._set_digit(self.seconds, remaining // self.FRAMES_PER_SECOND)

    def _set_digit(self, digit: _Digit, value: int) -> None:
        digit.value = value
        digit.u = self.NUMBER_WIDTH * (value % self.NUMBER_X)
        digit.v = self.NUMBER_HEIGHT * (value // self.NUMBER_Y)