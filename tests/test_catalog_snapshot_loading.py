from __future__ import annotations

from pathlib import Path

import pytest

from nodedump.catalog.models import FunctionFlags, ParamDirection, PropertyFlags, ReflectionKind
from nodedump.catalog.snapshot import CatalogSnapshotError, load_catalog_snapshot
from nodedump.extract.normalizer import MemberNormalizer

FIXTURE = Path(__file__).parent / "fixtures" / "engine_catalog.json"


@pytest.mark.basic
def test_snapshot_file_loads_types_members_and_flags() -> None:
    cat = load_catalog_snapshot(FIXTURE)

    assert [t.name for t in cat.list_types()][:3] == ["Vector", "KismetMathLibrary", "KismetSystemLibrary"]
    math_lib = cat.find_type("/Script/Engine.KismetMathLibrary")
    assert math_lib is not None and math_lib.kind == ReflectionKind.CLASS

    add = cat.list_functions(math_lib)[0]
    assert add.owner == math_lib.path
    assert add.flags == FunctionFlags.CALLABLE | FunctionFlags.PURE | FunctionFlags.STATIC
    assert add.display_name == "vector + vector"
    assert cat.metadata(add, "Keywords") == "+ add plus"
    assert cat.metadata(add, "Missing") == ""
    assert add.params[2].direction == ParamDirection.RETURN
    ref = add.params[0].pin_type.referenced
    assert ref is not None and ref.kind == ReflectionKind.SCRIPT_STRUCT

    keeper = cat.find_type("/Script/Game.ScoreKeeper")
    props = {p.name: p for p in cat.list_properties(keeper)}
    assert props["MaxScore"].flags == PropertyFlags.VISIBLE | PropertyFlags.READ_ONLY
    # Unknown referenced type degrades to no reference.
    assert props["Spawn"].pin_type.referenced is None


@pytest.mark.basic
def test_snapshot_rejects_unknown_flags() -> None:
    raw = {"types": [{"name": "A", "path": "/Script/X.A", "functions": [{"name": "F", "flags": ["teleport"]}]}]}
    with pytest.raises(CatalogSnapshotError):
        load_catalog_snapshot(raw)


@pytest.mark.basic
def test_snapshot_rejects_duplicate_type_paths() -> None:
    raw = {"types": [{"name": "A", "path": "/Script/X.A"}, {"name": "A2", "path": "/Script/X.A"}]}
    with pytest.raises(CatalogSnapshotError):
        load_catalog_snapshot(raw)


@pytest.mark.basic
def test_snapshot_file_errors_are_wrapped(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogSnapshotError):
        load_catalog_snapshot(bad)
    with pytest.raises(CatalogSnapshotError):
        load_catalog_snapshot(tmp_path / "missing.json")

    arr = tmp_path / "array.json"
    arr.write_text("[]", encoding="utf-8")
    with pytest.raises(CatalogSnapshotError):
        load_catalog_snapshot(arr)


@pytest.mark.basic
def test_leaf_types_resolve_to_bare_type_paths() -> None:
    cat = load_catalog_snapshot(
        {
            "leafTypes": ["/Script/Game.LootTable", "  "],
            "types": [
                {
                    "name": "Chest",
                    "path": "/Script/Game.Chest",
                    "properties": [
                        {"name": "Loot", "pinType": {"category": "object", "referencedType": "/Script/Game.LootTable"}},
                        {"name": "Key", "pinType": {"category": "object", "referencedType": "/Script/Game.Missing"}},
                    ],
                }
            ],
        }
    )
    chest = cat.find_type("/Script/Game.Chest")
    loot, key = cat.list_properties(chest)

    assert loot.pin_type.referenced is not None
    assert loot.pin_type.referenced.path == "/Script/Game.LootTable"
    assert loot.pin_type.referenced.kind is None
    assert key.pin_type.referenced is None
    # Leaf paths are referenceable only; they are not walked as types.
    assert [t.name for t in cat.list_types()] == ["Chest"]

    get_loot = MemberNormalizer(cat, cat).normalize(chest, loot)[0]
    assert get_loot.outputs[0].referencedTypePath == "/Script/Game.LootTable"
    get_key = MemberNormalizer(cat, cat).normalize(chest, key)[0]
    assert get_key.outputs[0].referencedTypePath == ""
