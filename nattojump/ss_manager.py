"""Owns and drives every object of the string-shooting stage."""

from __future__ import annotations

from nattojump.constants import GameScene
from nattojump.game_object import GameContext, GameObject
from nattojump.props import Target
from nattojump.ss_background import ScrollingBackground
from nattojump.ss_communication import Communication
from nattojump.ss_player import SwingPlayer
from nattojump.ss_shot_string import ShotString
from nattojump.ss_wall import WallGrid


class ShootStringManager(GameObject):
    """Creates the stage objects and runs their life cycle in registration order."""

    game_scene = GameScene.GAME_TEST
    SS_GAMEOBJECT_MAX = 50

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.objects: list[GameObject] = []
        self.background = ScrollingBackground(self.context)
        self.player = SwingPlayer(self.context)
        self.wall = WallGrid(self.context)
        self.communication = Communication(self.context)
        self.target = Target(self.context)
        self.shot_string = ShotString(self.context)
        for obj in (
            self.background,
            self.player,
            self.wall,
            self.communication,
            self.target,
            self.shot_string,
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
        for obj in self.objects:
            obj.update()

    def draw(self) -> None:
        for obj in self.objects:
            obj.draw()

    def register(self, obj: GameObject) -> bool:
        """Add ``obj``; returns False and ignores it when the manager is full."""
        if len(self.objects) >= self.SS_GAMEOBJECT_MAX:
            return False
        self.objects.append(obj)
        return True

    def _link_objects(self) -> None:
        self.communication.background = self.background
        self.communication.player = self.player
        self.communication.shot_string = self.shot_string