from nattojump.constants import SCREEN_HEIGHT, GameScene
from nattojump.framework import GameFramework
from nattojump.game_object import GameObject


class Recorder(GameObject):
    game_scene = GameScene.GAME_TEST

    def __init__(self, log, context=None):
        super().__init__(context)
        self.log = log

    def update(self):
        self.log.append("update")

    def finalize(self):
        self.log.append("finalize")


def make():
    framework = GameFramework()
    framework.initialize()
    return framework


def test_starts_in_game_test_stage():
    assert GameFramework().scene == GameScene.GAME_TEST


def test_initialize_links_vortex_rotation():
    framework = make()
    assert framework.vortex_rotation.player is framework.player
    assert framework.vortex_rotation.vortex is framework.vortex


def test_update_only_runs_current_stage():
    framework = make()
    bungee_y = framework.bungee.pos.y
    swing_y = framework.ss_manager.player.pos.y
    framework.update()
    assert framework.bungee.pos.y == bungee_y
    assert framework.ss_manager.player.pos.y > swing_y


def test_scramble_moves_to_fall_when_timer_finishes():
    framework = make()
    framework.scene = GameScene.SCRAMBLE
    framework.timer.active = False
    framework.transition_scene()
    assert framework.scene == GameScene.FALL
    assert framework.timer.active is True


def test_scramble_stays_while_timer_runs():
    framework = make()
    framework.scene = GameScene.SCRAMBLE
    framework.update()
    assert framework.scene == GameScene.SCRAMBLE
    assert framework.timer.counter == 1


def test_fall_moves_to_bungee_when_jump_ends():
    framework = make()
    framework.scene = GameScene.FALL
    framework.fall.is_transition = False
    framework.transition_scene()
    assert framework.scene == GameScene.BUNGEE_JUMP
    assert framework.fall.is_transition is True


def test_bungee_moves_to_game_test_when_off_screen():
    framework = make()
    framework.scene = GameScene.BUNGEE_JUMP
    framework.transition_scene()
    assert framework.scene == GameScene.BUNGEE_JUMP
    framework.bungee.pos.y = SCREEN_HEIGHT
    framework.transition_scene()
    assert framework.scene == GameScene.GAME_TEST


def test_draw_only_current_stage_objects():
    framework = make()
    framework.scene = GameScene.SCRAMBLE
    framework.draw()
    textures = {texture for texture, _ in framework.context.canvas.draws}
    assert textures == {
        framework.vortex.texture,
        framework.player.texture,
        framework.timer.texture,
    }


def test_scramble_update_turns_vortex_toward_player():
    framework = make()
    framework.scene = GameScene.SCRAMBLE
    framework.player.pos.x = framework.vortex.pos.x
    framework.player.pos.y = framework.vortex.pos.y + 100.0
    framework.update()
    assert framework.vortex.angle == 0.0


def test_register_stops_at_capacity():
    framework = GameFramework()
    results = [framework.register(GameObject()) for _ in range(120)]
    assert len(framework.objects) == GameFramework.GAME_OBJECT_MAX
    assert results[-1] is False


def test_registered_object_follows_life_cycle():
    log = []
    framework = make()
    framework.register(Recorder(log, framework.context))
    framework.update()
    framework.finalize()
    assert log == ["update", "finalize"]