import unittest
from unittest.mock import patch, MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nearby_events.workflows import near_point_feed, priority_and_nearby_feed, upcoming_feed


class TestEventFeed(unittest.TestCase):

    def setUp(self):
        self.mock_repository = MagicMock()
        self.raw_events = [
            {
                "title": {"en-US": "Rally"},
                "location": {"type": "Point", "coordinates": [-73.99, 40.73]},
                "highPriority": True,
                "mobilizeId": 1,
            },
            {"title": {"en-US": "Canvass"}, "highPriority": False, "mobilizeId": 2},
        ]

    def test_upcoming_feed(self):
        self.mock_repository.list_upcoming.return_value = self.raw_events

        feed = upcoming_feed(self.mock_repository)

        self.mock_repository.list_upcoming.assert_called_once_with()
        self.assertEqual([event["title"]["en-US"] for event in feed], ["Rally", "Canvass"])
        self.assertEqual(feed[0]["latitude"], 40.73)
        self.assertNotIn("highPriority", feed[0])

    def test_priority_and_nearby_feed(self):
        self.mock_repository.list_upcoming_high_priority_and_nearby.return_value = self.raw_events

        feed = priority_and_nearby_feed(-73.99, 40.73, self.mock_repository)

        self.mock_repository.list_upcoming_high_priority_and_nearby.assert_called_once_with(
            -73.99, 40.73
        )
        self.assertEqual(len(feed), 2)
        self.assertIsNone(feed[1]["longitude"])

    def test_near_point_feed_empty(self):
        self.mock_repository.list_near_point.return_value = []

        self.assertEqual(near_point_feed(-73.99, 40.73, self.mock_repository), [])
        self.mock_repository.list_near_point.assert_called_once_with(-73.99, 40.73)

    @patch('nearby_events.workflows.event_feed.get_event_repository')
    def test_default_repository(self, mock_get_repository):
        mock_get_repository.return_value = self.mock_repository
        self.mock_repository.list_upcoming.return_value = None

        self.assertEqual(upcoming_feed(), [])
        mock_get_repository.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
