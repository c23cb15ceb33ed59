"""Background computations whose results are polled once per frame."""

from __future__ import annotations

import queue
import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_POLL_TIMEOUT = 500e-6


class FutureNotReady(Exception):
    """Raised when a future's result is demanded before it is available."""


class Future(Generic[T]):
    """The eventual result of a computation run on a background thread.

    A future that goes unread for a whole frame is cancelled by
    :meth:`Futures.sweep`; reading it again later restarts the computation.
    """

    def __init__(
        self,
        fn: Optional[Callable[[threading.Event], T]] = None,
        owner: Optional[Futures] = None,
    ) -> None:
        self._fn = fn
        self._owner = owner
        self._results: queue.Queue = queue.Queue(maxsize=1)
        self._cancelled = threading.Event()
        self._done = threading.Event()
        self._res: Optional[T] = None
        self._res_set = False
        # A fresh future isn't cancelled in the frame that created it.
        self._read = True

    def _run(self, cancelled: threading.Event) -> None:
        res = self._fn(cancelled)
        if cancelled.is_set():
            return
        try:
            self._results.put_nowait(res)
        except queue.Full:
            # A previous run already delivered a result; discard this one.
            pass
        else:
            self._done.set()
        if self._owner is not None:
            self._owner._invalidate()

    def _start(self) -> None:
        threading.Thread(target=self._run, args=(self._cancelled,), daemon=True).start()

    def _store(self, res: T) -> tuple[T, bool]:
        self._res = res
        self._res_set = True
        return res, True

    def _poll(self, timeout: Optional[float]) -> tuple[Optional[T], bool]:
        if self._res_set:
            return self._res, True

        self._read = True

        try:
            return self._store(self._results.get_nowait())
        except queue.Empty:
            pass

        if self._cancelled.is_set():
            # Cancelled and wanted again: restart the computation.
            self._cancelled = threading.Event()
            if self._owner is not None:
                self._owner._add(self)
            self._start()
            return None, False

        if timeout:
            try:
                return self._store(self._results.get(timeout=timeout))
            except queue.Empty:
                pass
        return None, False

    def _was_read(self) -> bool:
        read = self._read
        self._read = False
        return read

    def _cancel(self) -> None:
        self._cancelled.set()

    def is_done(self) -> bool:
        """Report whether the result has been obtained."""
        return self._res_set

    def result_no_wait(self) -> tuple[Optional[T], bool]:
        """Return (value, True) if ready, else (None, False) without blocking."""
        return self._poll(None)

    def result(self) -> tuple[Optional[T], bool]:
        """Like result_no_wait, but wait briefly for the result to arrive."""
        return self._poll(_POLL_TIMEOUT)

    def must_result(self) -> T:
        """Return the result, raising FutureNotReady if it isn't available."""
        value, ok = self.result()
        if not ok:
            raise FutureNotReady("future wasn't ready")
        return value

    def wait(self) -> T:
        """Block until the computation finishes and return its result."""
        if self._res_set:
            return self._res
        self._done.wait()
        return self.must_result()


def immediate(value: T) -> Future[T]:
    """Return a future that already holds value."""
    ft: Future[T] = Future()
    ft._store(value)
    return ft


class Futures:
    """Tracks running futures and cancels those nobody reads."""

    def __init__(self, invalidate: Optional[Callable[[], None]] = None) -> None:
        self._on_invalidate = invalidate
        self._futures: list[Future] = []

    def _invalidate(self) -> None:
        if self._on_invalidate is not None:
            self._on_invalidate()

    def _add(self, ft: Future) -> None:
        self._futures.append(ft)

    def __len__(self) -> int:
        return len(self._futures)

    def new_future(self, fn: Callable[[threading.Event], T]) -> Future[T]:
        """Start fn on a background thread; fn receives a cancellation event."""
        ft: Future[T] = Future(fn, self)
        self._add(ft)
        ft._start()
        return ft

    def sweep(self) -> None:
        """Drop finished futures and cancel those not read since the last sweep."""
        kept = []
        for ft in self._futures:
            if ft.is_done():
                continue
            if not ft._was_read():
                ft._cancel()
                continue
            kept.append(ft)
        self._futures = kept