"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.domain.enum.capability import Capability

__all__ = ['BookingStatus', 'Capability']
