"""Runs the game screen: owns its objects and moves between stages."""

from __future__ import annotations

from nattojump.bungee import Bungee
from nattojump.constants import SCREEN_HEIGHT, GameScene
from nattojump.fall import Fall
from nattojump.game_object import GameContext, GameObject
from nattojump.player import Player
from nattojump.props import Throw
from nattojump.scramble import Scramble, ScrambleRotation
from nattojump.ss_manager import ShootStringManager
from nattojump.timer import Timer


class GameFramework:
    """Holds the game objects and updates and draws those of the current stage."""

    GAME_OBJECT_MAX = 100

    def __init__(self, context: GameContext | None = None) -> None:
        self.context = context if context is not None else GameContext()
        self.objects: list[GameObject] = []
        self.scene = GameScene.GAME_TEST

        self.player = Player(self.context)
        self.vortex = Scramble(self.context)
        self.vortex_rotation = ScrambleRotation(self.context)
        self.throw = Throw(self.context)
        self.timer = Timer(self.context)
        self.fall = Fall(self.context)
        self.bungee = Bungee(self.context)
        self.ss_manager = ShootStringManager(self.context)

        for obj in (
            self.vortex,
            self.player,
            self.vortex_rotation,
            self.throw,
            self.timer,
            self.fall,
            self.bungee,
            self.ss_manager,
        ):
            self.register(obj)

    def initialize(self) -> None:
        for obj in self.objects:
            obj.initialize()
        self._link_objects()

    def finalize(self) -> None:
        for obj in self.objects:
            obj.finalize()

    def update(self) -> None:
        self.transition_scene()
        for obj in self._active_objects():
            obj.update()

    def draw(self) -> None:
        for obj in self._active_objects():
            obj.draw()

    def register(self, obj: GameObject) -> bool:
        """Add ``obj``; returns False and ignores it when the framework is full."""
        if len(self.objects) >= self.GAME_OBJECT_MAX:
            return False
        self.objects.append(obj)
        return True

    def transition_scene(self) -> None:
        """Move to the next stage once the current one reports it is finished."""
        if self.scene == GameScene.SCRAMBLE:
            if not self.timer.active:
                self.timer.active = True
                self.scene = GameScene.FALL
        elif self.scene == GameScene.FALL:
            if not self.fall.is_transition:
                self.fall.is_transition = True
                self.scene = GameScene.BUNGEE_JUMP
        elif self.scene == GameScene.BUNGEE_JUMP:
            if self.bungee.pos_y >= SCREEN_HEIGHT:
                self.scene = GameScene.GAME_TEST

    def _active_objects(self) -> list[GameObject]:
        # Snapshot so a scene change mid-frame does not affect this frame.
        scene = self.scene
        return [obj for obj in self.objects if obj.game_scene == scene]

    def _link_objects(self) -> None:
        self.vortex_rotation.player = self.player
        self.vortex_rotation.vortex = self.vortex