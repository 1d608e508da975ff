"""Tests for member-wise copy and clone.

Critical Invariants:
- Only known-type members present on both sides are copied
- Destination members outside the intersection keep their values
- Clones are value-equal but independent instances
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

from memberwise import (
    InstantiationError,
    clone_object,
    copy_data_members,
    copy_fields,
    copy_properties,
    data_member,
    sync_object,
)

if TYPE_CHECKING:
    from collections import OrderedDict as TypingOnly


@dataclass
class Nested:
    value: int = 0


@dataclass
class OrderForm:
    number: str = ""
    total: Decimal = Decimal(0)
    lines: list[str] = field(default_factory=list)
    customer: Nested = field(default_factory=Nested)
    note: str | None = None


@dataclass
class OrderRow:
    number: str = ""
    total: Decimal = Decimal(0)
    lines: list[str] = field(default_factory=list)
    customer: Nested = field(default_factory=Nested)
    note: str | None = "unset"
    row_id: int = 7


@dataclass(frozen=True)
class FrozenRow:
    number: str = ""


class Slot:
    __slots__ = ("code",)
    code: str


class Item:
    def __init__(self) -> None:
        self._title = ""
        self._price = 0
        self._parts: list[str] = []
        self._hidden = "item"

    @data_member
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    @data_member
    def price(self) -> int:
        return self._price

    @price.setter
    def price(self, value: int) -> None:
        self._price = value

    @data_member
    def parts(self) -> list[str]:
        return self._parts

    @parts.setter
    def parts(self, value: list[str]) -> None:
        self._parts = value

    @property
    def hidden(self) -> str:
        return self._hidden

    @hidden.setter
    def hidden(self, value: str) -> None:
        self._hidden = value


class ItemView:
    def __init__(self) -> None:
        self._title = "view"
        self._price = -1
        self._parts: list[str] = ["keep"]
        self._hidden = "view"

    @data_member
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    @data_member
    def price(self) -> int:
        return self._price

    @data_member
    def parts(self) -> list[str]:
        return self._parts

    @parts.setter
    def parts(self, value: list[str]) -> None:
        self._parts = value

    @property
    def hidden(self) -> str:
        return self._hidden

    @hidden.setter
    def hidden(self, value: str) -> None:
        self._hidden = value


class SpecialItem(Item):
    def __init__(self) -> None:
        super().__init__()
        self._grade = ""

    @data_member
    def grade(self) -> str:
        return self._grade

    @grade.setter
    def grade(self, value: str) -> None:
        self._grade = value


@dataclass
class Point:
    x: int = 0
    y: int = 0
    labels: list[str] = field(default_factory=list)


class NeedsArgs:
    def __init__(self, value: int) -> None:
        self.value = value


@dataclass
class CustomerRow:
    name: "str" = ""
    age: "int" = 0
    index: "TypingOnly | None" = None


# copy_fields


def test_copy_fields_copies_known_intersection(cache):
    source = OrderForm("A-1", Decimal("9.50"), ["x"], Nested(3), "fragile")
    dest = OrderRow()

    copy_fields(source, dest, cache)

    assert dest.number == "A-1"
    assert dest.total == Decimal("9.50")
    assert dest.note == "fragile"


def test_copy_fields_skips_unknown_types(cache):
    """Collections and nested objects are never copied."""
    source = OrderForm(lines=["x"], customer=Nested(3))
    dest = OrderRow()

    copy_fields(source, dest, cache)

    assert dest.lines == []
    assert dest.customer == Nested(0)


def test_copy_fields_leaves_destination_only_fields(cache):
    dest = OrderRow(row_id=42)

    copy_fields(OrderForm("A-2"), dest, cache)

    assert dest.row_id == 42


def test_copy_fields_copies_none(cache):
    dest = OrderRow()

    copy_fields(OrderForm(note=None), dest, cache)

    assert dest.note is None


def test_copy_fields_skips_read_only_destination(cache):
    dest = FrozenRow("orig")

    copy_fields(OrderForm("A-3"), dest, cache)

    assert dest.number == "orig"


def test_copy_fields_skips_unset_slot(cache):
    source, dest = Slot(), Slot()
    dest.code = "kept"

    copy_fields(source, dest, cache)

    assert dest.code == "kept"


def test_copy_fields_with_unresolvable_annotation(cache):
    """Scalar fields are copied even when a sibling annotation cannot be resolved."""
    dest = CustomerRow()

    copy_fields(CustomerRow("Bob", 30), dest, cache)

    assert (dest.name, dest.age) == ("Bob", 30)


# copy_properties


def test_copy_properties_copies_marked_known(cache):
    source = Item()
    source.title = "Lamp"
    source.price = 20
    dest = ItemView()

    copy_properties(source, dest, cache)

    assert dest.title == "Lamp"


def test_copy_properties_skips_unwritable_unknown_and_unmarked(cache):
    source = Item()
    source.price = 20
    source.parts = ["bulb"]
    source.hidden = "secret"
    dest = ItemView()

    copy_properties(source, dest, cache)

    assert dest.price == -1  # no setter on destination
    assert dest.parts == ["keep"]  # list is not a known type
    assert dest.hidden == "view"  # not a data member


def test_sync_object_copies_fields_and_properties(cache):
    source = SpecialItem()
    source.title = "Desk"
    source.grade = "A"
    dest = SpecialItem()

    sync_object(source, dest, cache)

    assert (dest.title, dest.grade) == ("Desk", "A")


# copy_data_members


def test_copy_data_members_copies_own_declared_only(cache):
    source = SpecialItem()
    source.title = "Desk"
    source.grade = "B"
    source.parts = ["leg"]
    dest = SpecialItem()

    copy_data_members(source, dest, cache=cache)

    assert dest.grade == "B"
    assert dest.title == ""  # inherited


def test_copy_data_members_ignores_known_type_filter(cache):
    source = Item()
    source.parts = ["leg"]
    dest = Item()

    copy_data_members(source, dest, cache=cache)

    assert dest.parts is source.parts


def test_copy_data_members_with_base_type(cache):
    source, dest = SpecialItem(), SpecialItem()
    source.title = "Chair"
    source.grade = "C"

    copy_data_members(source, dest, Item, cache=cache)

    assert dest.title == "Chair"
    assert dest.grade == ""


def test_copy_data_members_rejects_other_types(cache):
    with pytest.raises(TypeError, match="requires SpecialItem instances"):
        copy_data_members(SpecialItem(), Item(), cache=cache)


# clone_object


def test_clone_is_equal_but_distinct(cache):
    """CRITICAL: Clone equals the source but is a separate object."""
    source = Point(1, 2, ["a"])

    clone = clone_object(source, cache=cache)

    assert clone == source
    assert clone is not source
    assert type(clone) is Point


def test_mutating_clone_does_not_affect_source(cache):
    source = Point(1, 2)

    clone = clone_object(source, cache=cache)
    clone.x = 99

    assert source.x == 1


def test_clone_is_shallow(cache):
    source = Point(labels=["a"])

    clone = clone_object(source, cache=cache)

    assert clone.labels is source.labels


def test_clone_copies_public_writable_properties(cache):
    source = SpecialItem()
    source.title = "Shelf"
    source.hidden = "h"
    source.grade = "A"

    clone = clone_object(source, cache=cache)

    assert isinstance(clone, SpecialItem)
    assert (clone.title, clone.hidden, clone.grade) == ("Shelf", "h", "A")


def test_clone_uses_factory(cache):
    source = NeedsArgs(5)

    clone = clone_object(source, factory=lambda: NeedsArgs(0), cache=cache)

    assert isinstance(clone, NeedsArgs)


def test_clone_without_no_arg_construction_fails(cache):
    with pytest.raises(InstantiationError, match="Cannot construct NeedsArgs") as exc_info:
        clone_object(NeedsArgs(5), cache=cache)

    assert isinstance(exc_info.value.__cause__, TypeError)
    assert isinstance(exc_info.value, TypeError)
