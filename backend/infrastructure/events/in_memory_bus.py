"""In-memory event bus.

Handlers live in process memory and are awaited one after the other
in subscription order.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Type, TypeVar

from domain.shared.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)

Handler = Callable[[Any], Awaitable[None]]


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


class InMemoryEventBus:
    """
    IEventBus adapter keeping subscriptions in a dict keyed by event type.

    Subscriptions are lost on restart. A failing handler is logged with
    its traceback and the next handler still runs, so publish() never
    raises because of a handler.

    Example:
        >>> bus = InMemoryEventBus()
        >>> register_user_event_handlers(bus)
        >>> await bus.publish(UserCreated.create(user_id=1, email="a@b.io"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Handler]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """Subscribing the same handler twice makes it run twice."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "event_bus.subscribed",
            extra={"event_type": event_type.__name__, "handler": _handler_name(handler)},
        )

    async def publish(self, event: TEvent) -> None:
        # Copy: a handler may subscribe/unsubscribe while we iterate
        handlers = list(self._handlers.get(type(event), []))
        logger.debug(
            "event_bus.publish",
            extra={
                "event_type": type(event).__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            await self._dispatch(handler, event)

    async def _dispatch(self, handler: Handler, event: DomainEvent) -> None:
        try:
            await handler(event)
        except Exception as e:
            logger.error(
                "event_bus.handler_failed",
                extra={
                    "event_type": type(event).__name__,
                    "event_id": str(event.event_id),
                    "handler": _handler_name(handler),
                    "error": str(e),
                },
                exc_info=True,
            )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """Remove the first subscription of handler; False if there is none."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False

        handlers.remove(handler)
        return True

    def clear(self) -> None:
        self._handlers.clear()

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        return len(self._handlers.get(event_type, []))
