"""Correlation ID shared by every log record of one API call."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

call_id_var: ContextVar[str] = ContextVar("call_id", default="")


def get_call_id() -> str:
    return call_id_var.get()


@contextmanager
def call_scope() -> Iterator[str]:
    """Bind a call ID for the duration of the block.

    An ID already bound by an enclosing scope is reused, so a classified
    request and the send beneath it log under the same ID.
    """
    current = call_id_var.get()
    if current:
        yield current
        return
    token = call_id_var.set(uuid.uuid4().hex)
    try:
        yield call_id_var.get()
    finally:
        call_id_var.reset(token)
