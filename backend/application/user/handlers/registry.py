"""Wiring of user event handlers onto an event bus."""

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_removed import UserRemoved
from domain.user.core.events.user_signed_in import UserSignedIn
from domain.user.core.events.user_updated import UserUpdated
from application.user.handlers.user_created_handler import UserCreatedHandler
from application.user.handlers.user_removed_handler import UserRemovedHandler
from application.user.handlers.user_signed_in_handler import UserSignedInHandler
from application.user.handlers.user_updated_handler import UserUpdatedHandler


def register_user_event_handlers(event_bus: IEventBus) -> None:
    """Subscribe the user domain handlers to their events.

    Args:
        event_bus: Bus shared by the application services
    """
    event_bus.subscribe(UserCreated, UserCreatedHandler().handle)
    event_bus.subscribe(UserSignedIn, UserSignedInHandler().handle)
    event_bus.subscribe(UserUpdated, UserUpdatedHandler().handle)
    event_bus.subscribe(UserRemoved, UserRemovedHandler().handle)
