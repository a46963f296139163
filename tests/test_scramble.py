import math

import pytest

from nattojump.constants import SCREEN_HEIGHT_HALF, SCREEN_WIDTH_HALF, Color, GameScene, Vec2
from nattojump.game_object import GameContext
from nattojump.player import Player
from nattojump.scramble import Scramble, ScrambleRotation
from nattojump.sprite import rotated_quad


@pytest.fixture
def linked():
    context = GameContext()
    player = Player(context)
    vortex = Scramble(context)
    player.initialize()
    vortex.initialize()
    return ScrambleRotation(context, player=player, vortex=vortex), player, vortex


def test_vortex_initial_state():
    vortex = Scramble()
    vortex.initialize()
    assert vortex.pos == Vec2(SCREEN_WIDTH_HALF, SCREEN_HEIGHT_HALF)
    assert vortex.size == Vec2(500.0, 500.0)
    assert vortex.angle == 0.0
    assert vortex.game_scene == GameScene.SCRAMBLE
    assert vortex.texture == vortex.context.textures.load(Scramble.TEXTURE_NAME)


def test_vortex_update_leaves_angle(linked):
    _, _, vortex = linked
    vortex.angle = 1.25
    vortex.update()
    assert vortex.angle == 1.25


def test_player_below_gives_zero_angle(linked):
    rotation, player, vortex = linked
    player.pos = Vec2(vortex.pos.x, vortex.pos.y + 100.0)
    rotation.update()
    assert vortex.angle == pytest.approx(0.0)


def test_player_to_the_right_gives_quarter_turn(linked):
    rotation, player, vortex = linked
    player.pos = Vec2(vortex.pos.x + 100.0, vortex.pos.y)
    rotation.update()
    assert vortex.angle == pytest.approx(math.pi / 2)


def test_player_above_gives_half_turn(linked):
    rotation, player, vortex = linked
    player.pos = Vec2(vortex.pos.x, vortex.pos.y - 100.0)
    rotation.update()
    assert abs(vortex.angle) == pytest.approx(math.pi)


def test_draw_uses_current_angle(linked):
    rotation, player, vortex = linked
    player.pos = Vec2(vortex.pos.x + 30.0, vortex.pos.y + 40.0)
    rotation.update()
    vortex.draw()
    texture, quad = vortex.context.canvas.draws[-1]
    expected = rotated_quad(
        vortex.pos.x, vortex.pos.y, 500.0, 500.0, 0.0, 0.0, 1.0, 1.0, Color(), vortex.angle
    )
    assert texture == vortex.texture
    assert quad == expected


def test_unlinked_rotation_raises():
    with pytest.raises(RuntimeError):
        ScrambleRotation().update()


def test_rotation_draws_nothing(linked):
    rotation, _, _ = linked
    rotation.draw()
    assert rotation.context.canvas.draws == []