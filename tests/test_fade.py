from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from nattojump.fade import Fade, FadeState
from nattojump.game_object import GameContext


def _make():
    requested = []
    fade = Fade(GameContext(), on_scene_change=requested.append)
    fade.initialize()
    return fade, requested


def test_initialize_state_and_texture():
    fade, _ = _make()
    assert fade.state == FadeState.NONE
    assert tuple(fade.color) == (1.0, 1.0, 1.0, 1.0)
    assert Fade.TEXTURE_NAME in fade.context.textures
    assert fade.texture == fade.context.textures.load(Fade.TEXTURE_NAME)


def test_draw_nothing_when_idle():
    fade, _ = _make()
    fade.draw()
    assert fade.context.canvas.draws == []


def test_update_idle_changes_nothing():
    fade, requested = _make()
    fade.update()
    assert fade.state == FadeState.NONE
    assert fade.color.a == 1.0
    assert requested == []


def test_transition_from_opaque_switches_on_first_update():
    fade, requested = _make()
    fade.transition("next")
    assert fade.state == FadeState.OUT
    assert requested == []
    fade.update()
    assert fade.state == FadeState.IN
    assert fade.color.a == 1.0
    assert requested == ["next"]


def test_fade_in_requests_scene_immediately_and_clears():
    fade, requested = _make()
    fade.fade_in("title")
    assert requested == ["title"]
    assert fade.state == FadeState.IN
    alphas = []
    for _ in range(200):
        fade.update()
        alphas.append(fade.color.a)
        if fade.state == FadeState.NONE:
            break
    assert fade.state == FadeState.NONE
    assert fade.color.a == 0.0
    assert all(a >= b for a, b in zip(alphas, alphas[1:]))


def test_fade_out_from_clear_rises_to_opaque():
    fade, requested = _make()
    fade.fade_in("first")
    while fade.state != FadeState.NONE:
        fade.update()
    fade.transition("second")
    alphas = []
    for _ in range(200):
        fade.update()
        alphas.append(fade.color.a)
        if fade.state == FadeState.IN:
            break
    assert fade.state == FadeState.IN
    assert fade.color.a == 1.0
    assert requested == ["first", "second"]
    assert all(a <= b for a, b in zip(alphas, alphas[1:]))


def test_set_color_resets_alpha():
    fade, _ = _make()
    fade.color.a = 0.3
    fade.set_color(0.0, 0.5, 0.25)
    assert tuple(fade.color) == (0.0, 0.5, 0.25, 1.0)


def test_draw_covers_screen_while_fading():
    fade, _ = _make()
    fade.set_color(0.0, 0.0, 0.0)
    fade.transition("x")
    fade.draw()
    draws = fade.context.canvas.draws
    assert len(draws) == 1
    texture, quad = draws[0]
    assert texture == fade.texture
    assert (quad[0].x, quad[0].y) == (0.0, 0.0)
    assert (quad[3].x, quad[3].y) == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert quad[0].color == fade.color


def test_works_without_callback():
    fade = Fade()
    fade.initialize()
    fade.transition("x")
    fade.update()
    assert fade.state == FadeState.IN
    assert fade.next_scene == "x"