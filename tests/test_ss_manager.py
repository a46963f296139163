from nattojump.game_object import GameObject
from nattojump.props import Target
from nattojump.ss_background import ScrollingBackground
from nattojump.ss_communication import Communication
from nattojump.ss_manager import ShootStringManager
from nattojump.ss_player import SwingPlayer
from nattojump.ss_shot_string import ShotString
from nattojump.ss_wall import WallGrid


class Recorder(GameObject):
    def __init__(self, log, context=None):
        super().__init__(context)
        self.log = log

    def finalize(self):
        self.log.append("finalize")


def test_objects_registered_in_order():
    manager = ShootStringManager()
    assert [type(o) for o in manager.objects] == [
        ScrollingBackground,
        SwingPlayer,
        WallGrid,
        Communication,
        Target,
        ShotString,
    ]


def test_children_share_the_manager_context():
    manager = ShootStringManager()
    assert all(obj.context is manager.context for obj in manager.objects)


def test_initialize_links_communication():
    manager = ShootStringManager()
    manager.initialize()
    comm = manager.communication
    assert comm.background is manager.background
    assert comm.player is manager.player
    assert comm.shot_string is manager.shot_string


def test_update_runs_every_object():
    manager = ShootStringManager()
    manager.initialize()
    y_before = manager.player.pos.y
    manager.update()
    assert manager.player.pos.y > y_before
    assert len(manager.wall.used_walls) > 0
    assert manager.shot_string.pos == manager.player.pos


def test_draw_includes_background_and_player():
    manager = ShootStringManager()
    manager.initialize()
    manager.draw()
    textures = {texture for texture, _ in manager.context.canvas.draws}
    assert manager.background.texture in textures
    assert manager.player.texture in textures


def test_register_stops_at_capacity():
    manager = ShootStringManager()
    results = [manager.register(GameObject()) for _ in range(60)]
    assert len(manager.objects) == ShootStringManager.SS_GAMEOBJECT_MAX
    assert results[-1] is False
    assert results[0] is True


def test_finalize_reaches_registered_objects():
    log = []
    manager = ShootStringManager()
    manager.register(Recorder(log))
    manager.finalize()
    assert log == ["finalize"]