from datetime import datetime, timedelta, timezone

from backend.schemas import EventRequest, SessionRequest, to_naive_utc


def test_to_naive_utc_converts_aware_values() -> None:
    aware = datetime(2026, 5, 14, 9, 0, tzinfo=timezone(timedelta(hours=2)))

    assert to_naive_utc(aware) == datetime(2026, 5, 14, 7, 0)
    assert to_naive_utc(datetime(2026, 5, 14, 9, 0)) == datetime(2026, 5, 14, 9, 0)


def test_event_request_normalizes_date() -> None:
    request = EventRequest(name='PyCon', date='2026-05-14T09:00:00-04:00')

    assert request.date == datetime(2026, 5, 14, 13, 0)


def test_session_request_compares_mixed_offsets() -> None:
    request = SessionRequest(
        title='Keynote',
        start_time='2026-05-14T11:00:00Z',
        end_time='2026-05-14T11:45:00',
        event_id=1,
        speaker_id=1,
    )

    assert request.start_time == datetime(2026, 5, 14, 11, 0)
    assert request.end_time.tzinfo is None
