from __future__ import annotations

import logging
import logging.handlers
import queue
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import Settings
    from .typing_compat import Any


def configure(settings: Settings, /) -> logging.handlers.QueueListener:
    """Send root log records through a queue to a rich console handler.

    ``settings.debug`` selects DEBUG, which includes every counter change;
    otherwise INFO. The returned listener is not started.
    """
    log_queue: queue.Queue[Any] = queue.Queue()
    logging.root.addHandler(logging.handlers.QueueHandler(log_queue))
    logging.root.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    import rich.traceback  # noqa: PLC0415
    from rich.logging import RichHandler  # noqa: PLC0415

    rich.traceback.install(width=80, extra_lines=0, word_wrap=True)
    handler = RichHandler(
        show_path=False,
        rich_tracebacks=True,
        tracebacks_width=80,
        tracebacks_word_wrap=True,
    )
    return logging.handlers.QueueListener(log_queue, handler)
