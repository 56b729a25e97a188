from prometheus_client import Counter, Histogram


class TicketingMetrics:
    """
    Business metrics for the booking and payment flow.

    Exposed by the app factory at /metrics.
    """

    def __init__(self) -> None:
        self.bookings_created = Counter(
            'bookings_created_total',
            'Total bookings stored',
        )

        self.payments_processed = Counter(
            'payments_processed_total',
            'Payment processing attempts by outcome',
            ['result'],  # completed / replayed / not_found / conflict / failed
        )

        self.payment_duration = Histogram(
            'payment_processing_duration_seconds',
            'End-to-end payment processing time',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0],
        )

        self.tickets_sold = Counter(
            'tickets_sold_total',
            'Tickets deducted from event inventory',
        )

        self.auth_failures = Counter(
            'auth_failures_total',
            'Rejected requests by status code',
            ['status_code'],
        )

    def record_booking_created(self) -> None:
        self.bookings_created.inc()

    def record_payment(self, *, result: str, duration: float, tickets: int = 0) -> None:
        self.payments_processed.labels(result=result).inc()
        self.payment_duration.observe(duration)
        if tickets:
            self.tickets_sold.inc(tickets)

    def record_auth_failure(self, *, status_code: int) -> None:
        self.auth_failures.labels(status_code=str(status_code)).inc()


# Global metrics instance
metrics = TicketingMetrics()
