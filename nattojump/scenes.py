"""The top-level screens (title, game, result, game over) and switching between them."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Protocol

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from nattojump.fade import Fade, FadeState
from nattojump.framework import GameFramework
from nattojump.game_object import GameContext
from nattojump.input import Key


class Scene(IntEnum):
    """The screens of the program."""

    NONE = 0
    TITLE = 1
    GAME = 2
    RESULT = 3
    GAMEOVER = 4


class _Screen(Protocol):
    def initialize(self) -> None: ...

    def finalize(self) -> None: ...

    def update(self) -> None: ...

    def draw(self) -> None: ...


class ImageScreen:
    """A full-screen picture that moves on to ``next_scene`` when Return is tapped."""

    def __init__(
        self,
        context: GameContext,
        fade: Fade,
        texture_name: str,
        next_scene: Scene,
    ) -> None:
        self.context = context
        self.fade = fade
        self.texture_name = texture_name
        self.next_scene = next_scene
        self.texture: int | None = None

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.texture_name)

    def finalize(self) -> None:
        """Nothing to release."""

    def update(self) -> None:
        if self.context.input.is_key_triggered(Key.RETURN) and self.fade.state == FadeState.NONE:
            self.fade.transition(self.next_scene)

    def draw(self) -> None:
        self.context.canvas.draw_sprite_left_top(
            self.texture, 0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT, 0.0, 0.0, 1.0, 1.0
        )


class GameScreen:
    """Runs the game framework; Return moves on to the result screen."""

    def __init__(self, context: GameContext, fade: Fade) -> None:
        self.context = context
        self.fade = fade
        self.framework = GameFramework(context)

    def initialize(self) -> None:
        self.framework.initialize()

    def finalize(self) -> None:
        self.framework.finalize()

    def update(self) -> None:
        self.framework.update()
        if self.context.input.is_key_triggered(Key.RETURN) and self.fade.state == FadeState.NONE:
            self.fade.transition(Scene.RESULT)

    def draw(self) -> None:
        self.framework.draw()


class SceneManager:
    """Holds the current screen and swaps it when a new one has been requested."""

    def __init__(
        self,
        context: GameContext | None = None,
        screens: Mapping[Scene, _Screen] | None = None,
    ) -> None:
        self.context = context if context is not None else GameContext()
        self.fade = Fade(self.context, on_scene_change=self.set_scene)
        if screens is None:
            screens = {
                Scene.TITLE: ImageScreen(
                    self.context, self.fade, "data/TEXTURE/title.png", Scene.GAME
                ),
                Scene.GAME: GameScreen(self.context, self.fade),
                Scene.RESULT: ImageScreen(
                    self.context, self.fade, "data/TEXTURE/result.png", Scene.TITLE
                ),
                Scene.GAMEOVER: ImageScreen(
                    self.context, self.fade, "data/TEXTURE/gameOver.png", Scene.TITLE
                ),
            }
        self.screens: dict[Scene, _Screen] = dict(screens)
        self.current = Scene.NONE
        self.next_scene = Scene.NONE

    @property
    def screen(self) -> _Screen | None:
        """The screen that is running now, if any."""
        return self.screens.get(self.current)

    def init_scene(self, scene: Scene) -> None:
        """Make ``scene`` current and initialize it."""
        self.current = self.next_scene = Scene(scene)
        screen = self.screen
        if screen is not None:
            screen.initialize()

    def uninit_scene(self) -> None:
        """Finalize the current screen."""
        screen = self.screen
        if screen is not None:
            screen.finalize()

    def update(self) -> None:
        screen = self.screen
        if screen is not None:
            screen.update()
        self.fade.update()

    def draw(self) -> None:
        screen = self.screen
        if screen is not None:
            screen.draw()
        self.fade.draw()

    def set_scene(self, scene: Scene) -> None:
        """Request a switch to ``scene``; it happens at the next ``check_scene``."""
        self.next_scene = Scene(scene)

    def check_scene(self) -> None:
        """Switch screens if a different one has been requested."""
        if self.current != self.next_scene:
            self.uninit_scene()
            self.init_scene(self.next_scene)