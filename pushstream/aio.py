import asyncio
import enum
import typing

from . import domain
from . import logger
from .observable import Observable
from .observer import Observer


def from_async_iterable[T](
    source: typing.AsyncIterable[T],
) -> Observable[T]:
    """
    Forwards every item of `source` from a task on the running loop.
    Must be subscribed from inside a running event loop,
    unsubscribe cancels the task and may be called from any thread.
    """

    def producer(observer: Observer[T]) -> domain.Teardown:
        loop = asyncio.get_running_loop()

        async def pump():
            logger.debug('async source begin')
            try:
                async for value in source:
                    if observer.closed:
                        break
                    observer.next(value)
            except asyncio.CancelledError:
                logger.debug('async source cancelled')
                raise
            except Exception as e:
                observer.error(e)
            else:
                observer.complete()
            logger.debug('async source end')

        task = loop.create_task(pump())

        def cancel():
            if not task.done():
                loop.call_soon_threadsafe(task.cancel)

        return cancel

    return Observable(producer)


class _Notification(enum.Enum):
    Next = 1
    Error = -1
    Complete = 0


async def as_iterator[T](
    observable: Observable[T],
) -> typing.AsyncGenerator[T, None]:
    """
    Yields values as they are pushed.

        async for value in as_iterator(observable):
            ...

    `complete` stops the iteration, `error` raises the payload.
    Leaving the loop early unsubscribes.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[tuple[_Notification, typing.Any]] = asyncio.Queue()

    def push(kind: _Notification, payload: typing.Any = None):
        loop.call_soon_threadsafe(queue.put_nowait, (kind, payload))

    subscription = observable.subscribe(
        next=lambda value: push(_Notification.Next, value),
        error=lambda e: push(_Notification.Error, e),
        complete=lambda: push(_Notification.Complete),
    )
    try:
        while True:
            kind, payload = await queue.get()
            if kind is _Notification.Next:
                yield payload
            elif kind is _Notification.Error:
                if isinstance(payload, BaseException):
                    raise payload
                raise domain.StreamError(payload)
            else:
                break
    finally:
        subscription.unsubscribe()
