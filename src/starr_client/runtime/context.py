"""
Cancellation context for client calls.

A Context is a cooperative cancellation token with an optional deadline. It is
passed explicitly through every call chain (binding -> transport -> page loop)
and checked before each network exchange. The transport registers a cancel
hook while a response is in flight so cancelling closes the connection.
"""

from __future__ import annotations
import logging
import threading
import time
import weakref
from typing import Callable, List, Optional

from .errors import CancelledError, DeadlineExceededError, StarrError


logger = logging.getLogger(__name__)


class Context:
    """
    Cancellable, deadline-bearing execution context.

    Example:
        ```python
        ctx = Context.with_timeout(10)
        records = lidarr.get_block_list(0, ctx=ctx)

        # from another thread
        ctx.cancel()
        ```
    """

    def __init__(self, deadline: Optional[float] = None, parent: Optional[Context] = None):
        """
        Args:
            deadline: Absolute ``time.monotonic()`` value after which the context is done
            parent: Cancelling the parent cancels this context too
        """
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)

        self.deadline = deadline
        self._lock = threading.Lock()
        self._cancelled = threading.Event()
        self._callbacks: List[Callable[[], None]] = []
        self._detach: Callable[[], None] = lambda: None

        if parent is not None:
            # The parent holds only a weak reference; the hook is removed once
            # this context is cancelled or collected.
            ref = weakref.ref(self)
            detach = parent.on_cancel(lambda: _cancel_ref(ref))
            self._detach = detach
            weakref.finalize(self, detach)

    @classmethod
    def background(cls) -> Context:
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, parent: Optional[Context] = None) -> Context:
        """A context whose deadline is ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds, parent=parent)

    @classmethod
    def with_cancel(cls, parent: Optional[Context] = None) -> Context:
        """A cancellable child of ``parent`` (or of nothing)."""
        return cls(parent=parent)

    @property
    def cancelled(self) -> bool:
        """True once ``cancel()`` ran, directly or through a parent."""
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        """True once the deadline has passed."""
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without one."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def cancel(self) -> None:
        """Cancel the context and run every registered hook once."""
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks, self._callbacks = self._callbacks, []

        self._detach()

        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                # Hooks close sockets; a failing close must not stop the others.
                logger.debug(f"Cancel hook {callback!r} failed: {e}")

    def on_cancel(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register ``callback`` to run when the context is cancelled.

        Runs immediately if the context is already cancelled.

        Returns:
            A function that unregisters the callback
        """
        with self._lock:
            if not self._cancelled.is_set():
                self._callbacks.append(callback)
                return lambda: self._unregister(callback)

        callback()
        return lambda: None

    def _unregister(self, callback: Callable[[], None]) -> None:
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

    def err(self, request: Optional[str] = None) -> Optional[StarrError]:
        """The error describing why the context is done, or None."""
        if self.cancelled:
            return CancelledError(request=request)
        if self.expired:
            return DeadlineExceededError(request=request)
        return None

    def raise_if_done(self, request: Optional[str] = None) -> None:
        """Raise the context error if the context is done."""
        error = self.err(request)
        if error is not None:
            raise error


def _cancel_ref(ref: "weakref.ReferenceType[Context]") -> None:
    ctx = ref()
    if ctx is not None:
        ctx.cancel()


__all__ = ["Context"]
