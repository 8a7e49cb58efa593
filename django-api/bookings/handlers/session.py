"""Keep booking attempts in the user's session, one per event."""

from bookings.domain import BookingAttempt, BookingStage

SESSION_KEY = "booking_attempts"


class SessionAttemptStore:
    def __init__(self, session) -> None:
        self._session = session

    def load(self, event_id: str) -> BookingAttempt | None:
        data = self._session.get(SESSION_KEY, {}).get(event_id)
        return BookingAttempt.from_dict(data) if data else None

    def load_or_start(self, event_id: str) -> BookingAttempt:
        """The attempt in progress, or a fresh one once the last was submitted."""
        attempt = self.load(event_id)
        if attempt is None or attempt.stage is BookingStage.SUBMITTED:
            return BookingAttempt.start(event_id)
        return attempt

    def save(self, attempt: BookingAttempt) -> None:
        attempts = dict(self._session.get(SESSION_KEY, {}))
        attempts[attempt.event_id] = attempt.to_dict()
        self._session[SESSION_KEY] = attempts

    def clear(self, event_id: str) -> None:
        attempts = dict(self._session.get(SESSION_KEY, {}))
        if attempts.pop(event_id, None) is not None:
            self._session[SESSION_KEY] = attempts
