from dataclasses import dataclass

import pytest

from atlasutil.compat import json_copy, json_slice_merge


@dataclass
class Item:
    id: str | None = None
    name: str | None = None


@dataclass
class OtherItem:
    id: str | None = None
    name: str | None = None
    colour: str | None = None


def _dst():
    return [Item("00001", "dst1"), Item("00002", "dst2"), Item("00003", "dst3")]


def test_json_copy_overwrites_only_present_fields():
    @dataclass
    class Old:
        field1: str
        field3: str

    @dataclass
    class New:
        field1: str
        field2: str

    old = Old("old field1", "old field3")
    json_copy(old, New("new field1", "new field2"))

    assert old.field1 == "new field1"
    assert old.field3 == "old field3"
    assert not hasattr(old, "field2")


def test_json_copy_merges_nested_dicts():
    dst = {"a": {"x": 1, "y": 2}, "b": "keep"}
    json_copy(dst, {"a": {"y": 3}, "c": [1, 2]})
    assert dst == {"a": {"x": 1, "y": 3}, "b": "keep", "c": [1, 2]}


def test_json_copy_rejects_non_object_json():
    dst = {"a": 1}
    with pytest.raises(TypeError):
        json_copy(dst, [1, 2])
    assert dst == {"a": 1}


def test_json_copy_rejects_immutable_dst():
    with pytest.raises(TypeError):
        json_copy("text", {"a": 1})


def test_slice_merge_src_is_longer():
    dst = _dst()
    src = [
        {"id": "99999", "name": "src1"},
        {"name": "src2"},
        {},
        {"id": "12345", "name": "extra"},
    ]
    json_slice_merge(dst, src)
    assert dst == [
        Item("99999", "src1"),
        Item("00002", "src2"),
        Item("00003", "dst3"),
        Item("12345", "extra"),
    ]


def test_slice_merge_src_dataclasses_omit_none_fields():
    dst = _dst()
    src = [
        OtherItem("99999", "src1", "red"),
        OtherItem(None, "src2"),
        OtherItem(),
        OtherItem("12345", "extra"),
    ]
    json_slice_merge(dst, src)
    assert dst == [
        Item("99999", "src1"),
        Item("00002", "src2"),
        Item("00003", "dst3"),
        Item("12345", "extra"),
    ]


def test_slice_merge_dst_is_longer():
    dst = _dst()
    json_slice_merge(dst, [{"id": "99999", "name": "src1"}])
    assert dst == [
        Item("99999", "src1"),
        Item("00002", "dst2"),
        Item("00003", "dst3"),
    ]


def test_slice_merge_src_is_none():
    dst = _dst()
    with pytest.raises(TypeError, match="src must be a list or a tuple"):
        json_slice_merge(dst, None)
    assert dst == _dst()


def test_slice_merge_dst_is_none():
    with pytest.raises(TypeError, match="dst must be a list"):
        json_slice_merge(None, [{"id": "99999", "name": "src1"}])


def test_slice_merge_into_empty_list_appends_plain_values():
    dst = []
    json_slice_merge(dst, [{"id": "1"}, {"id": "2"}])
    assert dst == [{"id": "1"}, {"id": "2"}]


def test_slice_merge_reports_index_of_bad_element():
    dst = _dst()
    with pytest.raises(TypeError, match="index 1"):
        json_slice_merge(dst, [{"id": "a"}, "not an object"])