import unittest
from datetime import datetime, timedelta, timezone

from drivenodes.util.time import normalize_dt, parse_rfc3339, to_rfc3339


class TestUtilTime(unittest.TestCase):
    def test_normalize_dt_rejects_naive(self) -> None:
        naive = datetime(2015, 1, 1, 12, 0, 0)
        with self.assertRaises(ValueError):
            normalize_dt(naive)

    def test_normalize_dt_rejects_non_datetime(self) -> None:
        with self.assertRaises(TypeError):
            normalize_dt("2015-01-01")  # type: ignore[arg-type]

    def test_parse_rfc3339_z(self) -> None:
        dt = parse_rfc3339("2015-01-01T12:34:56Z")
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2015, 1, 1, 12, 34, 56, tzinfo=timezone.utc))

    def test_parse_rfc3339_milliseconds(self) -> None:
        dt = parse_rfc3339("2014-03-07T22:31:12.173Z")
        self.assertEqual(
            dt, datetime(2014, 3, 7, 22, 31, 12, 173000, tzinfo=timezone.utc)
        )

    def test_parse_rfc3339_offset_converts_to_utc(self) -> None:
        dt = parse_rfc3339("2015-01-01T12:34:56+09:00")
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2015, 1, 1, 3, 34, 56, tzinfo=timezone.utc))

    def test_parse_rfc3339_rejects_empty(self) -> None:
        with self.assertRaises(ValueError):
            parse_rfc3339("")

    def test_to_rfc3339(self) -> None:
        self.assertEqual(
            to_rfc3339(datetime(2015, 1, 1, tzinfo=timezone.utc)),
            "2015-01-01T00:00:00Z",
        )
        self.assertEqual(
            to_rfc3339(datetime(2015, 1, 1, 0, 0, 0, 173000, tzinfo=timezone.utc)),
            "2015-01-01T00:00:00.173000Z",
        )
        jst = timezone(timedelta(hours=9))
        self.assertEqual(
            to_rfc3339(datetime(2015, 1, 1, 9, 0, 0, tzinfo=jst)),
            "2015-01-01T00:00:00Z",
        )


if __name__ == "__main__":
    unittest.main()
