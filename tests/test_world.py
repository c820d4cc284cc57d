import pytest

from throwengine.transform import Transform
from throwengine.world import (
    CameraComponent,
    ComponentStorage,
    ComponentType,
    LightComponent,
    MaterialComponent,
    MeshComponent,
    TransformComponent,
    World,
)


def test_entities_start_at_one_and_increase():
    world = World()
    assert world.create_entity() == 1
    assert world.create_entity() == 2
    assert world.create_entity() == 3


def test_storage_add_get_remove():
    storage = ComponentStorage()
    storage.add(5, "five")
    assert storage.get(5) == "five"
    assert 5 in storage
    storage.remove(5)
    assert storage.get(5) is None
    storage.remove(5)
    assert len(storage) == 0


def test_storage_add_replaces():
    storage = ComponentStorage()
    storage.add(1, "a")
    storage.add(1, "b")
    assert list(storage.items()) == [(1, "b")]


def test_add_and_get_component_by_class_and_kind():
    world = World()
    e = world.create_entity()
    comp = TransformComponent(Transform())
    world.add_component(e, comp)
    assert world.get_component(e, TransformComponent) is comp
    assert world.get_component(e, ComponentType.TRANSFORM) is comp
    assert world.get_component(e, LightComponent) is None


def test_delete_entity_removes_all_components():
    world = World()
    e = world.create_entity()
    other = world.create_entity()
    world.add_component(e, TransformComponent(Transform()))
    world.add_component(e, MeshComponent(None, "cube"))
    world.add_component(e, MaterialComponent())
    world.add_component(e, LightComponent())
    world.add_component(e, CameraComponent())
    world.add_component(other, LightComponent("kept"))
    world.delete_entity(e)
    for kind in ComponentType:
        assert world.get_component(e, kind) is None
    assert world.get_component(other, LightComponent).light == "kept"


def test_storage_is_shared_between_class_and_kind():
    world = World()
    assert world.storage(ComponentType.MESH) is world.storage(MeshComponent)


def test_worlds_do_not_share_components():
    first, second = World(), World()
    e = first.create_entity()
    first.add_component(e, CameraComponent("cam"))
    assert second.get_component(e, CameraComponent) is None


def test_items_lists_every_entity():
    world = World()
    a, b = world.create_entity(), world.create_entity()
    world.add_component(a, LightComponent("x"))
    world.add_component(b, LightComponent("y"))
    found = {entity: comp.light for entity, comp in world.storage(LightComponent).items()}
    assert found == {a: "x", b: "y"}


def test_mesh_component_default_vao():
    comp = MeshComponent(None, "sphere")
    assert comp.vao == 0
    assert comp.sub_mesh_name == "sphere"


def test_storage_rejects_non_type():
    world = World()
    with pytest.raises(TypeError):
        world.storage("transform")