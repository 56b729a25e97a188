"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    create_booking_use_case,
    create_event_use_case,
    delete_event_use_case,
    process_payment_use_case,
    update_event_use_case,
    user_command_use_case,
)
from src.service.ticketing.app.query import (
    get_event_use_case,
    list_booking_tickets_use_case,
    list_events_use_case,
    user_query_use_case,
)
from src.service.ticketing.driving_adapter.http_controller import user_controller
from src.service.ticketing.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_event_use_case,
    update_event_use_case,
    delete_event_use_case,
    create_booking_use_case,
    process_payment_use_case,
    user_command_use_case,
    list_events_use_case,
    get_event_use_case,
    list_booking_tickets_use_case,
    user_query_use_case,
    role_auth,
    user_controller,
]
