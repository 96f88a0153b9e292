from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Booking engine business metrics

    Tracks submission outcomes, seat conflicts and status transitions per showtime
    """

    def __init__(self) -> None:
        self.booking_submissions = Counter(
            'booking_submissions_total',
            'Total booking submissions',
            ['result'],  # result: confirmed/conflict/rejected/storage_failure
        )

        self.seat_conflicts = Counter(
            'booking_seat_conflicts_total',
            'Seats rejected at commit because another booking holds them',
            ['showtime_id'],
        )

        self.booking_submit_duration = Histogram(
            'booking_submit_duration_seconds',
            'Time spent checking availability and committing a booking',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.booking_status_transitions = Counter(
            'booking_status_transitions_total',
            'Applied booking status transitions',
            ['from_status', 'to_status'],
        )

    def record_submission(self, *, result: str) -> None:
        self.booking_submissions.labels(result=result).inc()

    def record_seat_conflict(self, *, showtime_id: int, seat_count: int) -> None:
        self.seat_conflicts.labels(showtime_id=str(showtime_id)).inc(seat_count)

    def record_status_transition(self, *, from_status: str, to_status: str) -> None:
        self.booking_status_transitions.labels(from_status=from_status, to_status=to_status).inc()


booking_metrics = BookingMetrics()
