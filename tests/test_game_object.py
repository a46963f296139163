from nattojump.constants import GameScene
from nattojump.game_object import GameContext, GameObject
from nattojump.input import Key
from nattojump.sprite import RecordingCanvas


def test_context_components_are_independent():
    first = GameContext()
    second = GameContext()
    first.textures.load("a.png")
    first.input.update(keys_down=[Key.SPACE])
    assert len(second.textures) == 0
    assert not second.input.is_key_pressed(Key.SPACE)
    assert first.input.is_key_pressed(Key.SPACE)


def test_default_canvas_records():
    context = GameContext()
    assert isinstance(context.canvas, RecordingCanvas)
    assert context.canvas.draws == []


def test_object_without_context_gets_its_own():
    a = GameObject()
    b = GameObject()
    assert a.context is not b.context
    a.context.textures.load("x.png")
    assert len(b.context.textures) == 0


def test_objects_share_a_given_context():
    context = GameContext()
    a = GameObject(context)
    b = GameObject(context)
    assert a.context is b.context is context


def test_base_object_has_no_scene_and_draws_nothing():
    obj = GameObject()
    assert obj.game_scene == GameScene.NONE
    obj.initialize()
    obj.update()
    obj.draw()
    obj.finalize()
    assert obj.context.canvas.draws == []