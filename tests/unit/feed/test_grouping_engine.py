"""Unit tests for the grouping engine."""

import unittest

from feed.enums import NotificationType
from feed.services.grouping_engine import (
    flatten_members,
    group_key,
    group_notifications,
)
from tests.factories import BASE_TIME, make_record


class TestGroupKey(unittest.TestCase):
    """Tests for group_key."""

    def test_followed_records_share_one_key(self):
        first = make_record(notification_type=NotificationType.FOLLOWED)
        second = make_record(notification_type=NotificationType.FOLLOWED)

        self.assertEqual(group_key(first), "followed")
        self.assertEqual(group_key(second), "followed")

    def test_thing_types_are_keyed_by_type_and_thing(self):
        record = make_record(notification_type=NotificationType.COMMENT, thing_id="t1")

        self.assertEqual(group_key(record), "comment_t1")

    def test_missing_thing_goes_to_unknown_bucket(self):
        record = make_record(notification_type=NotificationType.REC_GIVEN)

        self.assertEqual(group_key(record), "rec_given_unknown")

    def test_post_liked_is_keyed_by_record_id(self):
        record = make_record(
            record_id="n-42", notification_type=NotificationType.POST_LIKED, post_id="p1"
        )

        self.assertEqual(group_key(record), "n-42")

    def test_same_thing_different_type_gives_distinct_keys(self):
        comment = make_record(notification_type=NotificationType.COMMENT, thing_id="t1")
        rec = make_record(notification_type=NotificationType.REC_GIVEN, thing_id="t1")
        tag = make_record(notification_type=NotificationType.TAGGED, thing_id="t1")

        self.assertEqual(
            len({group_key(comment), group_key(rec), group_key(tag)}), 3
        )


class TestGroupNotifications(unittest.TestCase):
    """Tests for group_notifications."""

    def test_empty_input_gives_empty_output(self):
        self.assertEqual(group_notifications([]), [])

    def test_members_are_newest_first(self):
        old = make_record(record_id="a", minutes_ago=30)
        new = make_record(record_id="b", minutes_ago=1)
        middle = make_record(record_id="c", minutes_ago=10)

        (group,) = group_notifications([old, new, middle])

        self.assertEqual(group.member_ids, ["b", "c", "a"])
        self.assertEqual(group.most_recent.id, "b")

    def test_ties_are_broken_by_larger_id(self):
        low = make_record(record_id="n-1", created_at=BASE_TIME)
        high = make_record(record_id="n-2", created_at=BASE_TIME)

        (group,) = group_notifications([low, high])

        self.assertEqual(group.member_ids, ["n-2", "n-1"])

    def test_groups_are_ordered_by_most_recent_member(self):
        followed = make_record(notification_type=NotificationType.FOLLOWED, minutes_ago=5)
        comment_old = make_record(
            notification_type=NotificationType.COMMENT, thing_id="t1", minutes_ago=60
        )
        comment_new = make_record(
            notification_type=NotificationType.COMMENT, thing_id="t1", minutes_ago=1
        )
        liked = make_record(notification_type=NotificationType.POST_LIKED, minutes_ago=20)

        groups = group_notifications([followed, comment_old, liked, comment_new])

        self.assertEqual(
            [group.group_key for group in groups],
            ["comment_t1", "followed", liked.id],
        )
        self.assertEqual(groups[0].total_count, 2)

    def test_comment_and_rec_on_same_thing_stay_separate(self):
        comment = make_record(notification_type=NotificationType.COMMENT, thing_id="t1")
        rec = make_record(notification_type=NotificationType.REC_GIVEN, thing_id="t1")

        groups = group_notifications([comment, rec])

        self.assertEqual(len(groups), 2)

    def test_result_does_not_depend_on_input_order(self):
        records = [
            make_record(record_id=f"n-{i}", minutes_ago=i % 3, thing_id=f"t{i % 2}",
                        notification_type=NotificationType.COMMENT)
            for i in range(6)
        ]

        self.assertEqual(
            group_notifications(records), group_notifications(list(reversed(records)))
        )

    def test_grouping_is_idempotent(self):
        records = [
            make_record(notification_type=NotificationType.FOLLOWED, minutes_ago=3),
            make_record(notification_type=NotificationType.FOLLOWED, minutes_ago=9),
            make_record(notification_type=NotificationType.TAGGED, thing_id="t9"),
            make_record(notification_type=NotificationType.POST_LIKED, minutes_ago=7),
            make_record(notification_type=NotificationType.REC_GIVEN, minutes_ago=2),
        ]

        once = group_notifications(records)
        twice = group_notifications(flatten_members(once))

        self.assertEqual(once, twice)

    def test_unread_count_matches_members(self):
        records = [
            make_record(read=True, minutes_ago=1),
            make_record(read=False, minutes_ago=2),
            make_record(read=False, minutes_ago=3),
        ]

        (group,) = group_notifications(records)

        self.assertEqual(group.unread_count, 2)
        self.assertEqual(group.total_count, 3)
        self.assertTrue(group.has_unread)


if __name__ == "__main__":
    unittest.main()
