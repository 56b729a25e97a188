"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_booking_repo import IBookingRepo
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_payment_repo import IPaymentRepo
from src.service.ticketing.app.interface.i_user_repo import IUserRepo

__all__ = ['IBookingRepo', 'IEventRepo', 'IPaymentRepo', 'IUserRepo']
