"""Copying values between loosely matching structures through JSON."""

from __future__ import annotations

import dataclasses
import json
from typing import Any


def _is_object(value: Any) -> bool:
    """Tell whether ``value`` is an instance whose attributes can take JSON fields."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__")


def _jsonable(value: Any) -> Any:
    """Turn dataclasses into dictionaries, leaving out fields that are None."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for field in dataclasses.fields(value):
            field_value = getattr(value, field.name)
            if field_value is not None:
                result[field.name] = _jsonable(field_value)
        return result
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def _roundtrip(value: Any) -> Any:
    """Serialise ``value`` to JSON and read it back as plain Python data."""
    return json.loads(json.dumps(_jsonable(value)))


def _attribute_names(target: Any) -> set[str]:
    if dataclasses.is_dataclass(target):
        return {field.name for field in dataclasses.fields(target)}
    return set(vars(target))


def _merge(target: Any, data: Any) -> Any:
    """Merge decoded JSON ``data`` into ``target`` and return the resulting value."""
    if isinstance(data, dict):
        if isinstance(target, dict):
            for key, value in data.items():
                target[key] = _merge(target[key], value) if key in target else value
            return target
        if _is_object(target):
            names = _attribute_names(target)
            for key, value in data.items():
                if key in names:
                    setattr(target, key, _merge(getattr(target, key), value))
            return target
    return data


def _copy_into(target: Any, data: Any) -> Any:
    """Copy decoded JSON into ``target``; structured targets are updated in place."""
    if isinstance(target, dict) or _is_object(target):
        if data is None:
            return target
        if not isinstance(data, dict):
            raise TypeError(
                f"cannot copy JSON {type(data).__name__} into {type(target).__name__}"
            )
        return _merge(target, data)
    return data


def _new_element(prototype: Any, data: Any) -> Any:
    """Build a new list element shaped like ``prototype`` from decoded JSON."""
    cls = type(prototype)
    if dataclasses.is_dataclass(prototype) and isinstance(data, dict):
        kwargs = {
            field.name: data[field.name]
            for field in dataclasses.fields(cls)
            if field.init and field.name in data
        }
        return cls(**kwargs)
    return data


def _index_error(index: int, exc: Exception) -> Exception:
    error_type = ValueError if isinstance(exc, ValueError) else TypeError
    return error_type(f"cannot copy value at index {index}: {exc}")


def json_copy(dst: Any, src: Any) -> None:
    """Copy ``src`` into ``dst`` by serialising it to JSON and decoding it over ``dst``.

    ``dst`` is a dictionary or an object with attributes; fields present in the
    JSON form of ``src`` overwrite those of ``dst``, all others stay untouched.
    Dataclass fields of ``src`` that are None are left out.
    """
    if not (isinstance(dst, dict) or _is_object(dst)):
        raise TypeError("dst must be a mapping or an object with attributes")
    _copy_into(dst, _roundtrip(src))


def json_slice_merge(dst: list, src: Any) -> None:
    """Merge the list ``src`` into the list ``dst`` element by element.

    1. If both have the same length, all elements are merged.
    2. If ``dst`` is longer, only its first ``len(src)`` elements are merged.
    3. If ``src`` is longer, the first ``len(dst)`` elements are merged and the
       rest are appended to ``dst``, shaped like the elements already in it.
    """
    if not isinstance(dst, list):
        raise TypeError("dst must be a list")
    if not isinstance(src, (list, tuple)):
        raise TypeError("src must be a list or a tuple")

    common = min(len(dst), len(src))
    for index, (current, item) in enumerate(zip(dst[:common], src[:common])):
        try:
            dst[index] = _copy_into(current, _roundtrip(item))
        except (TypeError, ValueError) as exc:
            raise _index_error(index, exc) from exc

    prototype = next((element for element in dst if element is not None), None)
    for index, item in enumerate(src[common:], start=common):
        try:
            dst.append(_new_element(prototype, _roundtrip(item)))
        except (TypeError, ValueError) as exc:
            raise _index_error(index, exc) from exc