from __future__ import annotations

import logging

import pytest

from nodedump.catalog.in_memory import InMemoryCatalog
from nodedump.catalog.models import (
    FunctionFlags,
    PinType,
    PropertyFlags,
    ReflectedFunction,
    ReflectedProperty,
    ReflectedType,
)
from nodedump.core.config import DumpConfig
from nodedump.extract.walker import TypeCatalogWalker

ACTOR = ReflectedType(name="Actor", path="/Script/Engine.Actor")
PAWN = ReflectedType(name="Pawn", path="/Script/Engine.Pawn")
SKEL = ReflectedType(name="SKEL_MyActor_C", path="/Game/MyActor.SKEL_MyActor_C")
REINST = ReflectedType(name="REINST_MyActor_C_0", path="/Engine/Transient.REINST_MyActor_C_0")

INT = PinType(category="int")


def _catalog() -> InMemoryCatalog:
    cat = InMemoryCatalog()
    cat.add_type(
        ACTOR,
        functions=[
            ReflectedFunction(name="K2_DestroyActor", owner=ACTOR.path, flags=FunctionFlags.CALLABLE),
            ReflectedFunction(name="GetActorLocation", owner=ACTOR.path, flags=FunctionFlags.PURE),
            ReflectedFunction(name="ReceiveBeginPlay", owner=ACTOR.path, flags=FunctionFlags.EVENT),
            ReflectedFunction(name="ExecuteUbergraph", owner=ACTOR.path, flags=FunctionFlags.EVENT),
            ReflectedFunction(name="InternalOnly", owner=ACTOR.path, flags=FunctionFlags.NONE),
        ],
        properties=[
            ReflectedProperty(name="Tags", owner=ACTOR.path, flags=PropertyFlags.VISIBLE, pin_type=INT),
            ReflectedProperty(name="Hidden", owner=ACTOR.path, flags=PropertyFlags.NONE, pin_type=INT),
            ReflectedProperty(
                name="OldField",
                owner=ACTOR.path,
                flags=PropertyFlags.VISIBLE | PropertyFlags.DEPRECATED,
                pin_type=INT,
            ),
        ],
    )
    cat.add_type(
        PAWN,
        functions=[
            # Inherited function re-seen through the subclass.
            ReflectedFunction(name="K2_DestroyActor", owner=ACTOR.path, flags=FunctionFlags.CALLABLE),
            ReflectedFunction(name="AddMovementInput", owner=PAWN.path, flags=FunctionFlags.CALLABLE),
        ],
        properties=[
            ReflectedProperty(name="Tags", owner=ACTOR.path, flags=PropertyFlags.VISIBLE, pin_type=INT),
            ReflectedProperty(name="BaseEyeHeight", owner=PAWN.path, flags=PropertyFlags.VISIBLE, pin_type=INT),
        ],
    )
    cat.add_type(
        SKEL,
        functions=[ReflectedFunction(name="UserConstructionScript", owner=SKEL.path, flags=FunctionFlags.EVENT)],
    )
    cat.add_type(
        REINST,
        properties=[ReflectedProperty(name="Health", owner=REINST.path, flags=PropertyFlags.VISIBLE, pin_type=INT)],
    )
    return cat


@pytest.mark.basic
def test_walker_yields_exposed_members_declared_on_each_type_in_order() -> None:
    walker = TypeCatalogWalker(_catalog())

    seen = [(owner.name, member.name) for owner, member in walker.enumerate()]

    assert seen == [
        ("Actor", "K2_DestroyActor"),
        ("Actor", "GetActorLocation"),
        ("Actor", "ReceiveBeginPlay"),
        ("Actor", "Tags"),
        ("Pawn", "AddMovementInput"),
        ("Pawn", "BaseEyeHeight"),
    ]


@pytest.mark.basic
def test_walker_is_restartable_with_a_fresh_enumeration() -> None:
    walker = TypeCatalogWalker(_catalog())

    it = walker.enumerate()
    next(it)
    next(it)

    first = [m.name for _, m in walker.enumerate()]
    second = [m.name for _, m in walker.enumerate()]
    assert first == second
    assert first[0] == "K2_DestroyActor"


@pytest.mark.basic
def test_walker_synthetic_prefixes_are_configurable() -> None:
    walker = TypeCatalogWalker(_catalog(), config=DumpConfig(synthetic_type_prefixes=("SKEL_",)))

    owners = {owner.name for owner, _ in walker.enumerate()}

    assert "SKEL_MyActor_C" not in owners
    assert "REINST_MyActor_C_0" in owners


@pytest.mark.basic
def test_walker_skips_members_without_owner(caplog) -> None:
    cat = InMemoryCatalog()
    cat.add_type(
        ACTOR,
        functions=[
            ReflectedFunction(name="Orphan", owner="", flags=FunctionFlags.CALLABLE),
            ReflectedFunction(name="K2_DestroyActor", owner=ACTOR.path, flags=FunctionFlags.CALLABLE),
        ],
    )

    with caplog.at_level(logging.WARNING, logger="nodedump"):
        names = [m.name for _, m in TypeCatalogWalker(cat).enumerate()]

    assert names == ["K2_DestroyActor"]
    assert "Skipping member without owner" in caplog.text
    assert "Orphan" in caplog.text
