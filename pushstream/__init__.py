from .domain import (
    SomethingWentWrong,
    InvalidHandlers,
    InvalidTeardown,
    StreamError,
    ObserverHandlers,
    Producer,
    Teardown,
)
from .observer import (
    Observer,
)
from .observable import (
    Observable,
    Subscription,
)
from .aio import (
    from_async_iterable,
    as_iterator,
)
