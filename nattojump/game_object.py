"""Base class for everything that lives inside the game screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from nattojump.constants import GameScene
from nattojump.input import InputState
from nattojump.sprite import Canvas, RecordingCanvas
from nattojump.texture import TextureRegistry


@dataclass
class GameContext:
    """The input, textures and drawing surface shared by game objects."""

    input: InputState = field(default_factory=InputState)
    textures: TextureRegistry = field(default_factory=TextureRegistry)
    canvas: Canvas = field(default_factory=RecordingCanvas)


class GameObject:
    """An object with a life cycle; it only runs while ``game_scene`` is active."""

    game_scene: GameScene = GameScene.NONE

    def __init__(self, context: GameContext | None = None) -> None:
        self.context = context if context is not None else GameContext()

    def initialize(self) -> None:
        """Prepare the object; nothing to do by default."""

    def finalize(self) -> None:
        """Release what the object holds; nothing to do by default."""

    def update(self) -> None:
        """Advance one frame; nothing to do by default."""

    def draw(self) -> None:
        """Render the object; draws nothing by default."""