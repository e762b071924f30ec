import typing

from . import domain
from . import logger
from .observer import Observer


class Subscription:
    """
    Handle returned by `Observable.subscribe`.
    """

    __slots__ = ('unsubscribe',)

    def __init__(
        self,
        unsubscribe: typing.Callable[[], None],
    ):
        self.unsubscribe = unsubscribe


def as_teardown(value: typing.Any) -> domain.Teardown | None:
    if value is None:
        return None
    if callable(value):
        return value
    unsubscribe = getattr(value, 'unsubscribe', None)
    if callable(unsubscribe):
        return unsubscribe
    raise domain.InvalidTeardown(f'expected callable or unsubscribable, got {value!r}')


class Observable[T]:
    """
    Inert description of how to produce values.

    The producer runs once per `subscribe` call,
    with a fresh observer each time.
    """

    def __init__(
        self,
        producer: domain.Producer[T],
    ):
        self.producer = producer

    def subscribe(
        self,
        handlers: domain.ObserverHandlers | typing.Mapping[str, typing.Any] | None = None,
        /,
        *,
        next: typing.Callable[[T], typing.Any] | None = None,
        error: typing.Callable[[typing.Any], typing.Any] | None = None,
        complete: typing.Callable[[], typing.Any] | None = None,
    ) -> Subscription:
        """
        handlers may be given as `ObserverHandlers`,
        as a mapping or as keyword arguments:

            observable.subscribe(next=print, complete=on_complete)
        """
        keywords = {
            name: handler
            for name, handler in (('next', next), ('error', error), ('complete', complete))
            if handler is not None
        }
        observer: Observer[T] = Observer(domain.new_handlers(handlers, **keywords))
        logger.debug('new subscription', producer=repr(self.producer))

        try:
            teardown = as_teardown(self.producer(observer))
        except Exception:
            observer.unsubscribe()
            raise

        if teardown is not None:
            observer.set_teardown(teardown)

        return Subscription(observer.unsubscribe)

    @classmethod
    def from_iterable(
        cls,
        values: typing.Iterable[T],
    ) -> 'Observable[T]':
        """
        emits every element in order, then completes,
        all before `subscribe` returns
        """
        def producer(observer: Observer[T]) -> domain.Teardown:
            for value in values:
                if observer.closed:
                    break
                observer.next(value)
            observer.complete()

            def teardown():
                logger.debug('unsubscribed')

            return teardown

        return cls(producer)

    from_ = from_iterable
