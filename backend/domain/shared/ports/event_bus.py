"""Event bus port.

Application services publish user lifecycle events through this
interface; the infrastructure layer decides how they are delivered.
"""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from domain.shared.events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """
    Publish/subscribe contract for domain events.

    Delivery is by exact event type: a handler subscribed to
    DomainEvent does not receive UserCreated.

    Example:
        >>> async def audit(event: UserRemoved) -> None:
        ...     log.info("removed %s", event.user_id)
        >>> event_bus.subscribe(UserRemoved, audit)
        >>> await event_bus.publish(UserRemoved.create(user_id=1, email="a@b.io"))
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        """Register handler for event_type (appended after existing ones)."""
        ...

    async def publish(self, event: TEvent) -> None:
        """
        Deliver event to the handlers of its type, in subscription order.

        A handler failure must not stop the remaining handlers nor
        surface to the publisher.
        """
        ...

    def unsubscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> bool:
        """Drop one subscription; False if handler was not subscribed."""
        ...

    def clear(self) -> None:
        ...
