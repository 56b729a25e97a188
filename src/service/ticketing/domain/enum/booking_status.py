from enum import StrEnum


class BookingStatus(StrEnum):
    """
    Lifecycle of a ticket-purchase intent.

    A stored booking without a status is REQUESTED. COMPLETED is never
    persisted on the booking: completing a payment deletes the booking.
    """

    REQUESTED = 'requested'
    PAYMENT_PROCESSING = 'payment_processing'
    COMPLETED = 'completed'
    FAILED = 'failed'
