from datetime import date
from urllib.parse import urlparse, parse_qs

from tripmate.services.planning.calendar_link import build_google_calendar_url


class TestBuildGoogleCalendarUrl:
    def test_end_is_exclusive(self):
        url = build_google_calendar_url(date(2025, 7, 1), date(2025, 7, 3), "Trip")
        query = parse_qs(urlparse(url).query)
        assert query["dates"] == ["20250701/20250704"]
        assert query["action"] == ["TEMPLATE"]
        assert query["text"] == ["Trip"]

    def test_crosses_year_end(self):
        url = build_google_calendar_url(date(2025, 12, 30), date(2025, 12, 31), "NYE")
        assert parse_qs(urlparse(url).query)["dates"] == ["20251230/20260101"]

    def test_details_are_encoded(self):
        url = build_google_calendar_url(date(2025, 7, 1), date(2025, 7, 1), "Trip & fun", "Alice: 2025-07-01\nBob")
        parsed = urlparse(url)
        assert parsed.netloc == "www.google.com"
        assert parsed.path == "/calendar/render"
        query = parse_qs(parsed.query)
        assert query["text"] == ["Trip & fun"]
        assert query["details"] == ["Alice: 2025-07-01\nBob"]

    def test_no_link_when_trip_ends_on_last_representable_day(self):
        assert build_google_calendar_url(date(9999, 12, 30), date.max, "Trip") is None
