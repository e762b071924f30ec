import collections.abc
import typing

from . import shared


if typing.TYPE_CHECKING:
    from . import observer


class SomethingWentWrong(Exception):

    def __init__(
        self,
        message: str | None = None,
    ):
        super().__init__(message)
        self.message: str | None = message


class InvalidHandlers(SomethingWentWrong):
    """
    subscribe was given something other than
    `next`, `error` and `complete` callables.
    """


class InvalidTeardown(SomethingWentWrong):
    """
    producer returned a value that cannot be used as a teardown.
    """


class StreamError(SomethingWentWrong):
    """
    wraps an error payload that is not an exception,
    so that it can be raised.
    """

    def __init__(
        self,
        payload: typing.Any,
    ):
        super().__init__(repr(payload))
        self.payload = payload


type Teardown = typing.Callable[[], typing.Any]


class Unsubscribable(typing.Protocol):

    def unsubscribe(self) -> None:
        ...


type Producer[T] = typing.Callable[
    ['observer.Observer[T]'],
    Teardown | Unsubscribable | None,
]


@shared.FrozenDomain
class ObserverHandlers:
    """
    every handler is optional,
    a missing handler means the notification is ignored.
    """
    next: collections.abc.Callable | None = None
    error: collections.abc.Callable | None = None
    complete: collections.abc.Callable | None = None


def load_handlers(
    handlers: typing.Mapping[str, typing.Any],
) -> ObserverHandlers:
    try:
        return shared.load(ObserverHandlers, dict(handlers), config=shared.StrictLoad)
    except shared.LoadFail as e:
        raise InvalidHandlers(str(e)) from e


def new_handlers(
    handlers: ObserverHandlers | typing.Mapping[str, typing.Any] | None = None,
    /,
    **kwargs,
) -> ObserverHandlers:
    if handlers is not None and kwargs:
        raise InvalidHandlers('pass handlers either positionally or as keywords, not both')
    if handlers is None:
        handlers = kwargs
    if isinstance(handlers, ObserverHandlers):
        return handlers
    if isinstance(handlers, collections.abc.Mapping):
        return load_handlers(handlers)
    raise InvalidHandlers(f'unsupported handlers {handlers!r}')
