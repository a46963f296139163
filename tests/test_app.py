import math

import pygame
import pytest

from nattojump.app import App, PygameCanvas, main
from nattojump.constants import Color
from nattojump.fade import FadeState
from nattojump.game_object import GameContext
from nattojump.input import Key
from nattojump.scenes import Scene
from nattojump.sprite import RecordingCanvas
from nattojump.texture import TextureRegistry

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


def _solid(color, size=(10, 10)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _canvas_with(texture):
    surface = pygame.Surface((100, 100))
    surface.fill(BLACK)
    registry = TextureRegistry(loader=lambda name: texture)
    index = registry.load("tex")
    return surface, PygameCanvas(surface, registry), index


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _recording_app():
    context = GameContext(canvas=RecordingCanvas())
    return App(context), context


def test_app_starts_by_requesting_title_with_black_fade():
    app, _ = _recording_app()
    assert app.scenes.current == Scene.NONE
    assert app.scenes.next_scene == Scene.TITLE
    assert app.scenes.fade.state == FadeState.IN
    assert app.scenes.fade.color == Color(0.0, 0.0, 0.0, 1.0)


def test_first_step_switches_to_title():
    app, _ = _recording_app()
    app.step()
    assert app.scenes.current == Scene.TITLE
    assert app.frames == 1
    assert app.scenes.fade.color.a < 1.0


def test_step_draws_title_then_fade():
    app, context = _recording_app()
    app.step()
    app.step()
    title = context.textures.load("data/TEXTURE/title.png")
    fade_tex = context.textures.load("data/TEXTURE/fade_white.png")
    textures = [texture for texture, _ in context.canvas.draws]
    assert textures == [title, fade_tex]


def test_return_on_title_leads_to_game():
    app, context = _recording_app()
    for _ in range(100):
        app.step()
        if app.scenes.fade.state == FadeState.NONE:
            break
    assert app.scenes.fade.state == FadeState.NONE

    context.input.update(keys_down=[Key.RETURN])
    app.step()
    assert app.scenes.fade.state == FadeState.OUT

    context.input.update()
    for _ in range(100):
        app.step()
        if app.scenes.current == Scene.GAME:
            break
    assert app.scenes.current == Scene.GAME
    assert app.scenes.fade.state == FadeState.IN


def test_run_without_window_raises():
    app, _ = _recording_app()
    with pytest.raises(RuntimeError):
        app.run()


def test_textured_sprite_covers_its_area_only():
    surface, canvas, index = _canvas_with(_solid(RED))
    canvas.draw_sprite(index, 50, 50, 20, 20, 0.0, 0.0, 1.0, 1.0)
    assert _pixel(surface, 50, 50) == RED
    assert _pixel(surface, 10, 10) == BLACK


def test_texture_region_selects_right_half():
    texture = pygame.Surface((2, 1))
    texture.set_at((0, 0), RED)
    texture.set_at((1, 0), BLUE)
    surface, canvas, index = _canvas_with(texture)
    canvas.draw_sprite(index, 50, 50, 20, 20, 0.5, 0.0, 0.5, 1.0)
    assert _pixel(surface, 50, 50) == BLUE


def test_texture_coordinates_wrap():
    texture = pygame.Surface((2, 1))
    texture.set_at((0, 0), RED)
    texture.set_at((1, 0), BLUE)
    surface, canvas, index = _canvas_with(texture)
    canvas.draw_sprite(index, 50, 50, 20, 20, 1.5, 0.0, 0.5, 1.0)
    assert _pixel(surface, 50, 50) == BLUE


def test_vertex_color_modulates_texture():
    surface, canvas, index = _canvas_with(_solid((255, 255, 255)))
    canvas.draw_sprite_color(index, 50, 50, 20, 20, 0.0, 0.0, 1.0, 1.0, Color(0.0, 1.0, 0.0, 1.0))
    assert _pixel(surface, 50, 50) == (0, 255, 0)


def test_missing_texture_draws_vertex_color():
    surface, canvas, index = _canvas_with(None)
    canvas.draw_sprite_color(index, 50, 50, 20, 20, 0.0, 0.0, 1.0, 1.0, Color(0.0, 0.0, 1.0, 1.0))
    assert _pixel(surface, 50, 50) == BLUE
    assert _pixel(surface, 5, 5) == BLACK


def test_translucent_flat_quad_blends():
    surface, canvas, index = _canvas_with(None)
    surface.fill((255, 255, 255))
    canvas.draw_sprite_color(index, 50, 50, 20, 20, 0.0, 0.0, 1.0, 1.0, Color(0.0, 0.0, 0.0, 0.5))
    r, g, b = _pixel(surface, 50, 50)
    assert 0 < r < 255
    assert r == g == b


def test_unknown_texture_index_draws_white():
    surface, canvas, _ = _canvas_with(_solid(RED))
    canvas.draw_sprite(7, 50, 50, 20, 20, 0.0, 0.0, 1.0, 1.0)
    assert _pixel(surface, 50, 50) == (255, 255, 255)


def test_zero_width_sprite_draws_nothing():
    surface, canvas, index = _canvas_with(_solid(RED))
    canvas.draw_sprite(index, 50, 50, 0, 20, 0.0, 0.0, 1.0, 1.0)
    assert _pixel(surface, 50, 50) == BLACK


def test_rotated_sprite_turns_corners_away():
    surface, canvas, index = _canvas_with(_solid(RED))
    canvas.draw_sprite_color_rotate(
        index, 50, 50, 20, 20, 0.0, 0.0, 1.0, 1.0, Color(), math.pi / 4
    )
    assert _pixel(surface, 50, 50) == RED
    assert _pixel(surface, 50, 38) == RED
    assert _pixel(surface, 41, 41) == BLACK


def test_main_runs_a_few_frames(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    assert main(["--frames", "3", "--scale", "0.25"]) == 0


def test_main_rejects_non_positive_scale(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with pytest.raises(SystemExit):
        main(["--scale", "0"])