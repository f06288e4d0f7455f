"""Helpers for Kubernetes operators: JSON copying and merging, name normalization, identifier set operations, ISO 8601 dates and HTTP session decoration."""

__version__ = "0.5.0"

__all__ = ["compat", "httputil", "identifiable", "kube", "stringutil", "timeutil"]