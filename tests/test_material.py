import json

import pytest
from PIL import Image

from throwengine.material import MaterialLibrary
from throwengine.textures import TextureManager


def write_json(tmp_path, data, name="materials.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


def material_entry(name, **extra):
    entry = {
        "name": name,
        "ambient": [0.25, 0.5, 0.75],
        "diffuse": [1.0, 0.5, 0.25],
        "specular": [0.5, 0.5, 0.5],
        "shininess": 32.0,
    }
    entry.update(extra)
    return entry


def test_create_materials_reads_colours(tmp_path):
    path = write_json(tmp_path, {"materials": [material_entry("gold")]})
    library = MaterialLibrary(tmp_path)
    assert library.create_materials(path, TextureManager()) is True
    gold = library.get_material("gold")
    assert gold.name == "gold"
    assert gold.ambient == (0.25, 0.5, 0.75)
    assert gold.diffuse == (1.0, 0.5, 0.25)
    assert gold.specular == (0.5, 0.5, 0.5)
    assert gold.shininess == 32.0
    assert gold.diffuse_texture is None
    assert gold.specular_texture is None


def test_wrong_vector_size_is_skipped(tmp_path, capsys):
    bad = material_entry("bad", ambient=[1.0, 1.0])
    path = write_json(tmp_path, {"materials": [bad, material_entry("good")]})
    library = MaterialLibrary(tmp_path)
    assert library.create_materials(path, TextureManager()) is True
    assert "bad" not in library
    assert "good" in library
    assert len(library) == 1
    assert 'Material "bad"' in capsys.readouterr().err


def test_first_material_with_a_name_wins(tmp_path):
    first = material_entry("dup", shininess=1.0)
    second = material_entry("dup", shininess=2.0)
    path = write_json(tmp_path, {"materials": [first, second]})
    library = MaterialLibrary(tmp_path)
    library.create_materials(path, TextureManager())
    assert library.get_material("dup").shininess == 1.0


def test_missing_name_becomes_unnamed(tmp_path):
    entry = material_entry("x")
    del entry["name"]
    path = write_json(tmp_path, {"materials": [entry]})
    library = MaterialLibrary(tmp_path)
    library.create_materials(path, TextureManager())
    assert "unnamed" in library


def test_missing_or_empty_file(tmp_path):
    library = MaterialLibrary(tmp_path)
    assert library.create_materials(tmp_path / "absent.json", TextureManager()) is False
    empty = tmp_path / "empty.json"
    empty.write_text("")
    assert library.create_materials(empty, TextureManager()) is False
    assert len(library) == 0


@pytest.mark.parametrize("data", [{"other": []}, {"materials": {"name": "x"}}, [1, 2]])
def test_invalid_structure(tmp_path, data):
    path = write_json(tmp_path, data)
    library = MaterialLibrary(tmp_path)
    assert library.create_materials(path, TextureManager()) is False


def test_malformed_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        MaterialLibrary(tmp_path).create_materials(path, TextureManager())


def test_textures_are_loaded_from_assets(tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    Image.new("RGB", (2, 2), (5, 5, 5)).save(assets / "wood.png")
    entry = material_entry("wood", diffuseTexture=["wood.png"])
    path = write_json(tmp_path, {"materials": [entry]})
    textures = TextureManager()
    library = MaterialLibrary(assets)
    assert library.create_materials(path, textures) is True
    wood = library.get_material("wood")
    assert wood.diffuse_texture is textures.get_by_name("wood.png")
    assert wood.diffuse_texture.path == str(assets / "wood.png")
    assert wood.specular_texture is None


def test_unloadable_texture_is_left_empty(tmp_path):
    entry = material_entry("stone", specularTexture=["missing.png"])
    path = write_json(tmp_path, {"materials": [entry]})
    library = MaterialLibrary(tmp_path)
    assert library.create_materials(path, TextureManager()) is True
    assert library.get_material("stone").specular_texture is None


def test_unknown_material_returns_default(capsys):
    library = MaterialLibrary()
    material = library.get_material("nope")
    assert material.name == "default"
    assert material.ambient == (0.1, 0.1, 0.1)
    assert material.diffuse == (1.0, 1.0, 1.0)
    assert material.shininess == 8.0
    assert 'Material "nope" not found' in capsys.readouterr().err


def test_default_materials_are_independent():
    a = MaterialLibrary.default_material()
    b = MaterialLibrary.default_material()
    assert a is not b
    a.shininess = 100.0
    assert b.shininess == 8.0