"""Decorating HTTP sessions with authentication and request logging."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable

import requests
from requests.adapters import BaseAdapter
from requests.auth import HTTPDigestAuth

ClientOpt = Callable[[requests.Session], None]


def decorate_client(client: requests.Session, *opts: ClientOpt) -> requests.Session:
    """Apply each option to ``client`` in order and return it.

    An exception raised by an option stops the decoration and propagates.
    """
    for opt in opts:
        opt(client)
    return client


def digest(public_key: str, private_key: str) -> ClientOpt:
    """Option adding HTTP digest authentication to a session."""

    def apply(client: requests.Session) -> None:
        client.auth = HTTPDigestAuth(public_key, private_key)

    return apply


def logging_transport(log: logging.Logger) -> ClientOpt:
    """Option logging method, URL, duration and status of every request."""

    def apply(client: requests.Session) -> None:
        for prefix, adapter in list(client.adapters.items()):
            client.mount(prefix, _LoggingAdapter(adapter, log))

    return apply


class _LoggingAdapter(BaseAdapter):
    """Adapter that delegates to another one and logs each exchange."""

    def __init__(self, inner: BaseAdapter, log: logging.Logger) -> None:
        super().__init__()
        self._inner = inner
        self._log = log

    def send(self, request, **kwargs):
        start = time.monotonic()
        try:
            response = self._inner.send(request, **kwargs)
        except Exception as exc:
            self._log.debug(
                "HTTP Request (%s) %s [time (ms): %d, error=%s]",
                request.method,
                request.url,
                _elapsed_ms(start),
                json.dumps(str(exc)),
            )
            raise
        self._log.debug(
            "HTTP Request (%s) %s [time (ms): %d, status: %d]",
            request.method,
            request.url,
            _elapsed_ms(start),
            response.status_code,
        )
        return response

    def close(self) -> None:
        self._inner.close()


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)