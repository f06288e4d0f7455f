# atlasutil

Small helpers for code that manages Kubernetes resources backed by a hosted
database API: copying and merging data through JSON, Kubernetes name
normalization, set operations on identified objects, ISO 8601 dates and
decorated HTTP sessions.

## Installation

```
pip install atlasutil
```

For the test suite:

```
pip install "atlasutil[test]"
pytest
```

## Modules

### `atlasutil.compat`

- `json_copy(dst, src)` serializes `src` to JSON and decodes the result over
  `dst`, which must be a dictionary or an object with attributes (a
  `TypeError` is raised otherwise). Fields present in the JSON form of `src`
  overwrite those of `dst`; all other fields keep their values. Dataclass
  fields of `src` that are `None` are left out, so they never overwrite
  anything. For objects, only keys naming an existing attribute are copied.
- `json_slice_merge(dst, src)` merges the list `src` (a list or tuple) into
  the list `dst` element by element:
  1. with equal lengths, every element is merged;
  2. if `dst` is longer, only its first `len(src)` elements are merged;
  3. if `src` is longer, the extra elements are appended to `dst`, built as
     the same dataclass as the elements already in `dst` where there are any.

  A non-list `dst` or a `src` that is not a list or tuple raises `TypeError`;
  a failure on one element is reported with its index.

```python
from dataclasses import dataclass
from atlasutil.compat import json_slice_merge

@dataclass
class Item:
    id: str | None = None
    name: str | None = None

items = [Item("00001", "dst1")]
json_slice_merge(items, [Item(name="src1"), Item("12345", "extra")])
# items == [Item("00001", "src1"), Item("12345", "extra")]
```

### `atlasutil.httputil`

Options are callables that modify a `requests.Session`.

- `decorate_client(client, *args)` applies each option to the session in
  order and returns it. An exception raised by an option propagates.
- `digest(public_key, private_key)` sets HTTP digest authentication on the
  session.
- `logging_transport(log)` wraps the adapters mounted on the session so that
  every request is logged at debug level on the given `logging.Logger`, with
  method, URL, duration in milliseconds and either the status code or the
  error. Adapters mounted later are not wrapped.

```python
import logging
import requests
from atlasutil.httputil import decorate_client, digest, logging_transport

session = decorate_client(
    requests.Session(),
    digest("public-key-id", "secret"),
    logging_transport(logging.getLogger("http")),
)
```

### `atlasutil.kube`

- `ObjectKey` is a frozen dataclass of `namespace` and `name`; its string
  form is `namespace/name`. `object_key(namespace, name)` builds one, and
  `object_key_from_object(obj)` takes it from a manifest mapping (its
  `metadata`, or the mapping itself) or from an object with `namespace` and
  `name` attributes.
- `is_dns1123_subdomain(value)` and `is_valid_label_value(value)` check the
  Kubernetes rules for resource names (at most 253 characters) and label
  values (at most 63 characters; the empty string is valid).
- `normalize_identifier(name)` and `normalize_label_value(name)` return a
  valid name unchanged; otherwise they truncate it to the length limit,
  lower-case it, strip invalid characters at the start and end and replace
  each run of other invalid characters with a single dash. Not every case is
  fixed: `normalize_label_value("a.#b")` gives `"a.-b"`.

```python
>>> from atlasutil.kube import normalize_identifier
>>> normalize_identifier("ab*c$d")
'ab-c-d'
```

- `parse_deployment_name_from_pod_name(pod_name)` returns the Deployment name
  of a Pod, such as `"prometheus-adapter"` for
  `"prometheus-adapter-797f946f88-97f2q"`, and raises `ValueError` when the
  name has fewer than three dash-separated parts.

### `atlasutil.identifiable`

`Identifiable` is a runtime-checkable protocol for objects with an
`identifier()` method.

- `difference(left, right)` returns, in order, the elements of `left` whose
  identifier matches no element of `right`.
- `intersection(left, right)` returns `(left_element, right_element)` tuples
  for every pair that shares an identifier, in `left` order.

Either argument may be `None`, treated as empty. Elements that are not
`Identifiable` raise `TypeError`.

### `atlasutil.stringutil`

`contains(items, s)` tells whether `s` is one of the strings in `items`.

### `atlasutil.timeutil`

- `parse_iso8601(date_time)` accepts a date alone (`2021-11-30`), a date and
  time with no zone, or a date and time with a zone written as `-07`,
  `+08:00`, `-0700` or `Z`, with optional fractional seconds. The result is
  always timezone-aware; values without a zone are taken as UTC. Anything
  else raises `ValueError`.
- `must_parse_iso8601(date_time)` parses the same way and also raises
  `ValueError` on bad input.
- `format_iso8601(date_time)` writes `YYYY-MM-DDThh:mm:ss[.fff]Z`, with
  milliseconds truncated and trailing zeros dropped. The clock time is
  written as it stands in the value's own zone; convert to UTC first for a
  true UTC timestamp.

## What this package does not do

These are building blocks only. The package has no command-line tool, does
not talk to a Kubernetes cluster or to the database service's API, and runs
no controller or reconciliation loop.