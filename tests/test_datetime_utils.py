import unittest
from datetime import datetime, timedelta, timezone
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nearby_events.utils import get_current_timestamp, to_iso_string


class TestDatetimeUtils(unittest.TestCase):

    def test_current_timestamp_is_utc(self):
        now = get_current_timestamp()
        self.assertEqual(now.utcoffset(), timedelta(0))

    def test_naive_datetime_treated_as_utc(self):
        self.assertEqual(
            to_iso_string(datetime(2019, 4, 24, 14, 0)), "2019-04-24T14:00:00.000Z"
        )

    def test_aware_datetime_converted_to_utc(self):
        eastern = timezone(timedelta(hours=-4))
        self.assertEqual(
            to_iso_string(datetime(2019, 4, 24, 10, 0, tzinfo=eastern)),
            "2019-04-24T14:00:00.000Z",
        )

    def test_milliseconds_truncated(self):
        self.assertEqual(
            to_iso_string(datetime(2019, 4, 24, 14, 0, 0, 123456)),
            "2019-04-24T14:00:00.123Z",
        )

    def test_iso_strings(self):
        self.assertEqual(to_iso_string("2019-04-24T14:00:00Z"), "2019-04-24T14:00:00.000Z")
        self.assertEqual(
            to_iso_string("2019-04-24T10:00:00-04:00"), "2019-04-24T14:00:00.000Z"
        )

    def test_epoch_milliseconds(self):
        self.assertEqual(to_iso_string(1556114400000), "2019-04-24T14:00:00.000Z")

    def test_empty_and_invalid_values(self):
        self.assertIsNone(to_iso_string(None))
        self.assertIsNone(to_iso_string(""))
        self.assertIsNone(to_iso_string("not a date"))
        self.assertIsNone(to_iso_string(True))
        self.assertIsNone(to_iso_string({"$date": "2019-04-24"}))


if __name__ == '__main__':
    unittest.main()
