from gdiquest.defines import DEAD, NOEVENT, ObjId, RenderId
from gdiquest.object_manager import ObjectManager
from gdiquest.objects import GameObject, Services


class Probe(GameObject):
    def __init__(self, x=0.0, y=0.0, log=None, on_late=None):
        super().__init__(Services())
        self.set_pos(x, y)
        self.log = log if log is not None else []
        self.on_late = on_late
        self.render_id = RenderId.GAMEOBJECT
        self.late_calls = 0

    def initialize(self):
        pass

    def update(self):
        return DEAD if self.dead else NOEVENT

    def late_update(self):
        self.late_calls += 1
        if self.on_late:
            self.on_late()

    def render(self, surface):
        self.log.append(self)


def test_get_target_picks_nearest_living():
    manager = ObjectManager()
    near = Probe(10.0, 0.0)
    far = Probe(50.0, 0.0)
    dead = Probe(1.0, 0.0)
    dead.dead = True
    for obj in (far, dead, near):
        manager.add_object(ObjId.MONSTER, obj)
    assert manager.get_target(ObjId.MONSTER, Probe()) is near


def test_get_target_empty_gives_none():
    assert ObjectManager().get_target(ObjId.MONSTER, Probe()) is None


def test_add_ignores_end_and_none():
    manager = ObjectManager()
    manager.add_object(ObjId.END, Probe())
    manager.add_object(ObjId.PLAYER, None)
    assert all(not objs for objs in manager.object_lists.values())


def test_update_removes_dead_objects():
    manager = ObjectManager()
    alive, doomed = Probe(), Probe()
    doomed.dead = True
    manager.add_object(ObjId.BULLET, alive)
    manager.add_object(ObjId.BULLET, doomed)
    manager.update()
    assert manager.object_lists[ObjId.BULLET] == [alive]


def test_render_sorts_by_y_and_clears_queue():
    log = []
    manager = ObjectManager()
    low, high = Probe(0.0, 300.0, log), Probe(0.0, 100.0, log)
    manager.add_object(ObjId.MONSTER, low)
    manager.add_object(ObjId.MONSTER, high)
    manager.late_update()
    assert manager.render_lists[RenderId.GAMEOBJECT] == [low, high]
    manager.render(None)
    assert log == [high, low]
    assert manager.render_lists[RenderId.GAMEOBJECT] == []


def test_unset_render_layer_is_not_queued():
    manager = ObjectManager()
    obj = Probe()
    obj.render_id = RenderId.END
    manager.add_object(ObjId.BULLET, obj)
    manager.late_update()
    assert obj.late_calls == 1
    assert all(not queue for queue in manager.render_lists.values())


def test_late_update_stops_when_list_emptied():
    manager = ObjectManager()
    first = Probe(on_late=lambda: manager.delete_object(ObjId.BUTTON))
    second = Probe()
    manager.add_object(ObjId.BUTTON, first)
    manager.add_object(ObjId.BUTTON, second)
    manager.late_update()
    assert second.late_calls == 0
    assert manager.render_lists[RenderId.GAMEOBJECT] == []


def test_delete_object_and_release():
    manager = ObjectManager()
    manager.add_object(ObjId.BUTTON, Probe())
    manager.add_object(ObjId.PLAYER, Probe())
    manager.delete_object(ObjId.BUTTON)
    assert manager.object_lists[ObjId.BUTTON] == []
    assert len(manager.object_lists[ObjId.PLAYER]) == 1
    manager.release()
    assert manager.object_lists[ObjId.PLAYER] == []