from raidengine.entity import Component, Entity
from raidengine.game import INVALID_ENTITY_ID, GameEvent, GameFrame
from raidengine.world import World


class Recorder(Component):
    def __init__(self, parent):
        super().__init__(parent)
        self.calls = []

    def init(self):
        self.calls.append("init")

    def update(self, frame):
        self.calls.append(("update", frame.frame))

    def on_game_event(self, event):
        self.calls.append(("event", event))

    def shutdown(self):
        self.calls.append("shutdown")


class Listener:
    def __init__(self):
        self.removed = []

    def on_entity_removed(self, entity):
        self.removed.append(entity)


def make_entity():
    entity = Entity()
    recorder = entity.add_component(Recorder)
    return entity, recorder


def test_register_assigns_distinct_valid_ids_and_inits():
    world = World()
    first, rec = make_entity()
    second, _ = make_entity()
    world.register_entity(first)
    world.register_entity(second)
    assert first.id != INVALID_ENTITY_ID
    assert second.id != INVALID_ENTITY_ID
    assert first.id != second.id
    assert rec.calls == ["init"]
    assert len(world) == 2


def test_first_id_follows_invalid():
    world = World()
    entity, _ = make_entity()
    world.register_entity(entity)
    assert entity.id == INVALID_ENTITY_ID + 1


def test_find_entity_and_entity_at():
    world = World()
    entity, _ = make_entity()
    world.register_entity(entity)
    assert world.find_entity(entity.id) is entity
    assert world.find_entity(entity.id + 100) is None
    assert world.entity_at(0) is entity
    assert world.entity_at(1) is None
    assert world.entity_at(-1) is None


def test_unregister_notifies_listeners():
    world = World()
    listener = Listener()
    world.add_listener(listener)
    entity, _ = make_entity()
    world.register_entity(entity)
    world.unregister_entity(entity)
    assert listener.removed == [entity]
    assert len(world) == 0
    assert world.find_entity(entity.id) is None


def test_removed_listener_is_not_notified():
    world = World()
    listener = Listener()
    world.add_listener(listener)
    world.remove_listener(listener)
    entity, _ = make_entity()
    world.register_entity(entity)
    world.unregister_entity(entity)
    assert listener.removed == []


def test_update_and_events_reach_components():
    world = World()
    entity, rec = make_entity()
    world.register_entity(entity)
    event = GameEvent()
    world.update(GameFrame(7, 10, 0.5))
    world.on_game_event(event)
    assert rec.calls[1:] == [("update", 7), ("event", event)]


def test_reset_destroys_entities_and_restarts_ids():
    world = World()
    entity, rec = make_entity()
    world.register_entity(entity)
    first_id = entity.id
    world.reset()
    assert len(world) == 0
    assert rec.calls[-1] == "shutdown"
    again, _ = make_entity()
    world.register_entity(again)
    assert again.id == first_id


def test_for_each_stops_when_callback_returns_true():
    world = World()
    entities = [make_entity()[0] for _ in range(3)]
    for entity in entities:
        world.register_entity(entity)
    seen = []

    def callback(entity):
        seen.append(entity)
        return entity is entities[1]

    world.for_each(callback)
    assert seen == entities[:2]