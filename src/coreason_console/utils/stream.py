# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import threading
from typing import Any, Dict
from weakref import WeakKeyDictionary

_registry_lock = threading.Lock()
_stream_locks: "WeakKeyDictionary[Any, threading.Lock]" = WeakKeyDictionary()
_fallback_locks: Dict[int, threading.Lock] = {}


def _lock_for(stream: Any) -> threading.Lock:
    with _registry_lock:
        try:
            return _stream_locks.setdefault(stream, threading.Lock())
        except TypeError:
            # Streams that cannot be weakly referenced are keyed by identity.
            return _fallback_locks.setdefault(id(stream), threading.Lock())


def write_stream(data: str, stream: Any) -> None:
    """
    Writes `data` to `stream` and flushes it.

    Writes to one stream are serialized so concurrent log calls never interleave.
    """
    with _lock_for(stream):
        stream.write(data)
        flush = getattr(stream, "flush", None)
        if callable(flush):
            flush()
