"""Kubernetes naming helpers: object keys, name normalisation and validation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_INVALID_START_END = re.compile(r"(^[^a-z0-9]+)|([^a-z0-9]+\Z)")
_NON_IDENTIFIER = re.compile(r"[^a-z0-9.]+")
_NON_LABEL = re.compile(r"[^a-z0-9._]+")

_DNS1123_LABEL = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS1123_SUBDOMAIN = re.compile(_DNS1123_LABEL + r"(\." + _DNS1123_LABEL + r")*")
_LABEL_VALUE = re.compile(r"(([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9])?")

_DNS1123_SUBDOMAIN_MAX_LENGTH = 253
_LABEL_VALUE_MAX_LENGTH = 63


@dataclass(frozen=True)
class ObjectKey:
    """Namespace and name identifying a Kubernetes object."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


def object_key(namespace: str, name: str) -> ObjectKey:
    """Build the key of the object ``name`` in ``namespace``."""
    return ObjectKey(namespace=namespace, name=name)


def object_key_from_object(obj: Any) -> ObjectKey:
    """Build the key of an object given as a manifest mapping or with attributes."""
    if isinstance(obj, Mapping):
        metadata = obj.get("metadata", obj)
        return object_key(metadata.get("namespace", ""), metadata.get("name", ""))
    return object_key(obj.namespace, obj.name)


def is_dns1123_subdomain(value: str) -> bool:
    """Tell whether ``value`` is a valid DNS-1123 subdomain."""
    return (
        len(value) <= _DNS1123_SUBDOMAIN_MAX_LENGTH
        and _DNS1123_SUBDOMAIN.fullmatch(value) is not None
    )


def is_valid_label_value(value: str) -> bool:
    """Tell whether ``value`` is a valid label value (the empty string is)."""
    return (
        len(value) <= _LABEL_VALUE_MAX_LENGTH
        and _LABEL_VALUE.fullmatch(value) is not None
    )


def normalize_identifier(name: str) -> str:
    """Return ``name`` fit for a standard Kubernetes identifier.

    Runs of disallowed characters become a single dash.
    """
    if is_dns1123_subdomain(name):
        return name
    return _normalize(name, _DNS1123_SUBDOMAIN_MAX_LENGTH, _NON_IDENTIFIER)


def normalize_label_value(name: str) -> str:
    """Return ``name`` fit for a label value.

    Runs of disallowed characters become a single dash.
    """
    if is_valid_label_value(name):
        return name
    return _normalize(name, _LABEL_VALUE_MAX_LENGTH, _NON_LABEL)


def parse_deployment_name_from_pod_name(pod_name: str) -> str:
    """Return the Deployment name for a Pod name such as ``name-797f946f88-97f2q``."""
    parts = pod_name.split("-")
    if len(parts) <= 2:
        raise ValueError(
            'the Pod name must follow the format "<deployment_name>-797f946f88-97f2q" '
            f"but got {pod_name}"
        )
    return "-".join(parts[:-2])


def _normalize(name: str, limit: int, invalid: re.Pattern[str]) -> str:
    # Not every case is fixed: "a.#b" still yields "a.-b".
    name = name[:limit].lower()
    name = _INVALID_START_END.sub("", name)
    return invalid.sub("-", name)