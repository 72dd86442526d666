from __future__ import annotations

import logging
import numbers
import threading
from typing import TYPE_CHECKING

import attrs

from .null_context import NullContext
from .settings import Settings

if TYPE_CHECKING:
    from .typing_compat import Any

logger = logging.getLogger(__name__)


def _lock_converter(value: bool, /) -> threading.Lock | NullContext:  # noqa: FBT001
    if not isinstance(value, bool):
        msg = f"thread_safe must be a bool, got {type(value).__name__}: {value!r}"
        raise TypeError(msg)
    return threading.Lock() if value else NullContext()


@attrs.frozen(kw_only=True, match_args=False)
class CounterState:
    """Point-in-time view of a counter's accumulator and step."""

    count: Any
    val: Any


@attrs.define(
    repr=False,
    weakref_slot=False,
    kw_only=True,
    eq=False,
    getstate_setstate=False,
    match_args=False,
)
class Counter:
    """Accumulator that advances by a replaceable step.

    Starts at ``count == 0`` with ``val == 1``. Every ``increment()`` adds
    the step held at that moment, so the count is always the sum of the
    steps observed by each increment, in call order.

    Args:
        strict: Reject steps that are not numbers (``bool`` included) with
            ``TypeError``. When false, any value is stored and handed to
            ``+`` as-is.
        thread_safe: Guard ``increment()`` and ``set_val()`` with a lock so
            one instance can be shared between threads.
    """

    strict: bool = attrs.field(
        default=True,
        validator=attrs.validators.instance_of(bool),
        on_setattr=attrs.setters.frozen,
    )
    _lock: threading.Lock | NullContext = attrs.field(
        default=False,
        converter=_lock_converter,
        alias="thread_safe",
        on_setattr=attrs.setters.frozen,
    )
    _count: Any = attrs.field(default=0, init=False)
    _val: Any = attrs.field(default=1, init=False)

    @property
    def count(self) -> Any:
        return self._count

    @property
    def val(self) -> Any:
        return self._val

    @property
    def thread_safe(self) -> bool:
        return not isinstance(self._lock, NullContext)

    @property
    def state(self) -> CounterState:
        # Both fields must come from the same moment.
        with self._lock:
            return CounterState(count=self._count, val=self._val)

    def set_val(self, new_val: Any, /) -> None:
        """Replace the step used by later increments."""
        with self._lock:
            old_val = self._val
            self._val = new_val
        logger.debug("val: %r -> %r", old_val, new_val)

    def increment(self) -> None:
        """Add the current step to the count."""
        with self._lock:
            old_count = self._count
            new_count = old_count + self._val
            self._count = new_count
        logger.debug("count: %r -> %r", old_count, new_count)

    @_val.validator
    def _validate_val(
        self,
        attribute: attrs.Attribute[Any],  # noqa: ARG002
        value: Any,
        /,
    ) -> None:
        if self.strict and (
            isinstance(value, bool) or not isinstance(value, numbers.Number)
        ):
            msg = f"val must be a number, got {type(value).__name__}: {value!r}"
            raise TypeError(msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count!r}, val={self._val!r})"


def create_counter(
    *,
    settings: Settings | None = None,
    strict: bool | None = None,
    thread_safe: bool | None = None,
) -> Counter:
    """Return a new counter in its initial ``(count=0, val=1)`` state.

    Keyword arguments that are not None take precedence over ``settings``.
    """
    if settings is None:
        settings = Settings()
    return Counter(
        strict=settings.strict if strict is None else strict,
        thread_safe=settings.thread_safe if thread_safe is None else thread_safe,
    )
