from __future__ import annotations

import logging
import logging.handlers
import sys
from typing import TYPE_CHECKING

import pytest
from rich.logging import RichHandler

from step_counter import Settings, create_counter, logs

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def root_handlers() -> Iterator[list[logging.Handler]]:
    before = list(logging.root.handlers)
    level = logging.root.level
    excepthook = sys.excepthook
    yield before
    for handler in logging.root.handlers[:]:
        if handler not in before:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
    sys.excepthook = excepthook


def _added_handlers(before: list[logging.Handler]) -> list[logging.Handler]:
    return [h for h in logging.root.handlers if h not in before]


def test_configure_routes_root_logger_through_queue(
    root_handlers: list[logging.Handler],
) -> None:
    listener = logs.configure(Settings())

    added = _added_handlers(root_handlers)
    assert len(added) == 1
    queue_handler = added[0]
    assert isinstance(queue_handler, logging.handlers.QueueHandler)
    assert listener.queue is queue_handler.queue
    assert len(listener.handlers) == 1
    assert isinstance(listener.handlers[0], RichHandler)


@pytest.mark.usefixtures("root_handlers")
@pytest.mark.parametrize(
    ("debug", "level"), [(False, logging.INFO), (True, logging.DEBUG)]
)
def test_configure_takes_level_from_settings(debug: bool, level: int) -> None:  # noqa: FBT001
    logging.root.setLevel(logging.WARNING)

    logs.configure(Settings(debug=debug))

    assert logging.root.level == level


@pytest.mark.usefixtures("root_handlers")
def test_debug_settings_deliver_counter_changes(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    listener = logs.configure(Settings(debug=True))
    emitted: list[logging.LogRecord] = []
    monkeypatch.setattr(listener.handlers[0], "handle", emitted.append)
    counter = create_counter()

    listener.start()
    try:
        counter.set_val(2)
        counter.increment()
    finally:
        listener.stop()

    assert [r.getMessage() for r in emitted] == [
        "val: 1 -> 2",
        "count: 0 -> 2",
    ]
