"""Minimal synchronous stream driver for pass-through stages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, TypeVar

T = TypeVar("T")


class StreamStage(Protocol):
    """A stage with a per-item visit and an end-of-stream flush."""

    def on_item(self, record: T) -> T:
        ...

    def on_complete(self) -> None:
        ...


def run_stream(records: Iterable[T], *stages: StreamStage) -> Iterator[T]:
    """Feed ``records`` through ``stages`` in order, yielding what comes out.

    Each stage's ``on_complete`` runs once, in stage order, after the source
    is exhausted. A consumer that stops early never triggers it.
    """

    for record in records:
        for stage in stages:
            record = stage.on_item(record)
        yield record

    for stage in stages:
        stage.on_complete()


def drain(records: Iterable[T], *stages: StreamStage) -> list[T]:
    """Run the stream to completion and collect the downstream records."""

    return list(run_stream(records, *stages))


__all__ = ["StreamStage", "drain", "run_stream"]
