import threading
import typing

from . import domain
from . import logger


class Observer[T]:
    """
    Live endpoint of a single subscription.

    At most one of `error` / `complete` reaches the handlers,
    after that every notification is a no-op.
    The teardown runs exactly once, whichever way the observer was closed.
    """

    def __init__(
        self,
        handlers: domain.ObserverHandlers,
    ):
        self.handlers = handlers
        self._closed = False
        self._teardown: domain.Teardown | None = None
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def next(
        self,
        value: T,
    ) -> None:
        if self._closed:
            return
        if callable(self.handlers.next):
            self.handlers.next(value)

    def error(
        self,
        e: typing.Any,
    ) -> None:
        if not self._claim():
            return
        try:
            if callable(self.handlers.error):
                self.handlers.error(e)
        finally:
            self._run_teardown()

    def complete(self) -> None:
        if not self._claim():
            return
        try:
            if callable(self.handlers.complete):
                self.handlers.complete()
        finally:
            self._run_teardown()

    def unsubscribe(self) -> None:
        """
        silent cancellation, handlers are not notified
        """
        self._claim()
        self._run_teardown()

    def set_teardown(
        self,
        teardown: domain.Teardown,
    ) -> None:
        """
        replaces a teardown that has not run yet,
        runs immediately when the observer is already closed
        """
        with self._lock:
            if not self._closed:
                self._teardown = teardown
                return
        logger.debug('observer already closed, teardown immediately')
        teardown()

    def _claim(self) -> bool:
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            return True

    def _run_teardown(self) -> None:
        with self._lock:
            teardown = self._teardown
            self._teardown = None
        if teardown is None:
            return
        logger.debug('teardown')
        teardown()
