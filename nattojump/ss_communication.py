"""Coordinates the objects of the string-shooting stage with each other."""

from __future__ import annotations

import math
from enum import Enum

from nattojump.constants import PI, RADIAN, GameScene
from nattojump.game_object import GameContext, GameObject
from nattojump.ss_background import ScrollingBackground
from nattojump.ss_player import SwingPlayer
from nattojump.ss_shot_string import ShotString
from nattojump.ss_wall import WallGrid


class PlayerMove(Enum):
    """How the player reacts after the string is shot."""

    NONE = 0
    NO_JUMP = 1
    YES_JUMP = 2


class Communication(GameObject):
    """The one object that knows the others; it moves values between them each frame."""

    game_scene = GameScene.GAME_TEST
    DEFAULT_JUMP_COUNT_MAX = 60

    def __init__(
        self,
        context: GameContext | None = None,
        background: ScrollingBackground | None = None,
        player: SwingPlayer | None = None,
        shot_string: ShotString | None = None,
        wall: WallGrid | None = None,
        move: PlayerMove = PlayerMove.YES_JUMP,
    ) -> None:
        super().__init__(context)
        self.background = background
        self.player = player
        self.shot_string = shot_string
        self.wall = wall
        self.move = move
        self.jump_counter = 0
        self.jump_count_max = self.DEFAULT_JUMP_COUNT_MAX

    def update(self) -> None:
        if self.background is None or self.player is None or self.shot_string is None:
            raise RuntimeError("communication needs a background, a player and a shot string")
        self.shot_string.pos = self.player.pos.copy()
        if self.move is PlayerMove.NO_JUMP:
            self._move_without_jump()
        elif self.move is PlayerMove.YES_JUMP:
            self._move_with_jump()

    def _move_without_jump(self) -> None:
        shot = self.shot_string
        if not shot.is_click:
            return
        if self.jump_counter >= self.jump_count_max:
            shot.is_click = False
            self.jump_counter = 0
        else:
            self.background.add_u(math.cos(shot.angle) / 100.0)
            self.jump_counter += 1
        # The length of the swing is fixed on its first frame.
        if self.jump_counter <= 1:
            self.jump_count_max = int(math.cos(math.cos(shot.angle)) * 60.0)

    def _move_with_jump(self) -> None:
        shot = self.shot_string
        if not shot.is_click:
            return
        if self.jump_counter >= self.jump_count_max:
            self.player.reset_gravity()
            shot.is_click = False
            self.jump_counter = 0
        else:
            self.background.sub_u(math.cos(shot.angle) / 100.0)
            degrees = shot.angle * 180.0 / PI
            swing = self.jump_counter * RADIAN
            if 90 <= degrees < 180 or -180 <= degrees < -90:
                self.player.wave_plus(swing)
            else:
                self.player.wave_minus(swing)
            self.jump_counter += 1
        if self.jump_counter <= 1:
            self.jump_count_max = int(abs(math.cos(shot.angle) * 60.0))