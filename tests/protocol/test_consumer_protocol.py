import collections

from tests import cases
from tests.cases import wire

from consumer_offsets import exc
from consumer_offsets.protocol import consumer_protocol


decode_subscription = consumer_protocol.decode_consumer_protocol_subscription
decode_assignment = consumer_protocol.decode_consumer_protocol_assignment


class SubscriptionTests(cases.DecodingTestCase):

    def test_version_0(self):
        raw = wire.subscription(0, ["events", "clicks"], user_data=b"\x01")

        subscription = decode_subscription(raw)

        self.assertEqual(subscription.version, 0)
        self.assertEqual(subscription.topics, [u"events", u"clicks"])
        self.assertEqual(subscription.user_data, b"\x01")
        self.assertIsNone(subscription.owned_partitions)
        self.assertIsNone(subscription.generation_id)
        self.assertIsNone(subscription.rack_id)

    def test_version_1(self):
        raw = wire.subscription(
            1, ["events"], owned_partitions=[("events", [0, 2])]
        )

        subscription = decode_subscription(raw)

        self.assertIsNone(subscription.user_data)
        self.assertEqual(
            subscription.owned_partitions,
            [
                consumer_protocol.TopicPartitions(
                    topic="events", partitions=[0, 2]
                )
            ]
        )
        self.assertIsNone(subscription.generation_id)
        self.assertIsNone(subscription.rack_id)

    def test_version_2(self):
        raw = wire.subscription(
            2, ["events"], owned_partitions=[], generation_id=8
        )

        subscription = decode_subscription(raw)

        self.assertEqual(subscription.owned_partitions, [])
        self.assertEqual(subscription.generation_id, 8)
        self.assertIsNone(subscription.rack_id)

    def test_version_3(self):
        raw = wire.subscription(
            3, ["events", "clicks"],
            user_data=b"sticky",
            owned_partitions=[("events", [1]), ("clicks", [0, 3])],
            generation_id=4,
            rack_id="use1-az1",
        )

        subscription = decode_subscription(raw)

        self.assertEqual(subscription.version, 3)
        self.assertEqual(subscription.topics, [u"events", u"clicks"])
        self.assertEqual(subscription.user_data, b"sticky")
        self.assertEqual(
            [(tp.topic, tp.partitions)
             for tp in subscription.owned_partitions],
            [(u"events", [1]), (u"clicks", [0, 3])]
        )
        self.assertEqual(subscription.generation_id, 4)
        self.assertEqual(subscription.rack_id, u"use1-az1")

    def test_null_topics_distinct_from_empty(self):
        null = decode_subscription(wire.subscription(0, None))
        empty = decode_subscription(wire.subscription(0, []))

        self.assertIsNone(null.topics)
        self.assertEqual(empty.topics, [])

    def test_null_owned_partitions_for_a_topic(self):
        raw = wire.subscription(
            1, ["events"], owned_partitions=[("events", None)]
        )

        with self.assertRaises(exc.InvalidLength) as context:
            decode_subscription(raw)

        self.assertEqual(context.exception.length, -1)
        self.assertEqual(context.exception.remaining, 0)

    def test_trailing_bytes_are_ignored(self):
        raw = wire.subscription(0, ["events"]) + b"\x00\x00\x00\x00"

        self.assertEqual(decode_subscription(raw).topics, [u"events"])

    def test_unknown_version(self):
        raw = wire.subscription(3, ["events"], owned_partitions=[])
        raw = b"\x00\x04" + raw[2:]

        with self.assertRaises(exc.UnknownEmbeddedVersion) as context:
            decode_subscription(raw)

        self.assertEqual(context.exception.version, 4)
        self.assertEqual(
            context.exception.kind, "consumer protocol subscription"
        )

    def test_negative_version(self):
        self.assertRaises(
            exc.UnknownEmbeddedVersion,
            decode_subscription, b"\xff\xff\x00\x00\x00\x00"
        )

    def test_empty_subscription_is_an_error(self):
        self.assertRaises(exc.UnexpectedEOF, decode_subscription, b"")

    def test_truncation(self):
        raw = wire.subscription(
            3, ["events"],
            user_data=b"abc",
            owned_partitions=[("events", [1, 2])],
            generation_id=4,
            rack_id="rack",
        )

        self.assert_truncations_raise_eof(decode_subscription, raw)

    def test_corrupted_topic_count(self):
        raw = wire.subscription(0, ["events"])
        raw = raw[:2] + b"\x00\x00\x10\x00" + raw[6:]

        self.assert_overrun(decode_subscription, raw)


class AssignmentTests(cases.DecodingTestCase):

    def test_assignment(self):
        raw = wire.assignment(
            0, [("events", [0, 1]), ("clicks", [2])], user_data=b"\x00\x01"
        )

        assignment = decode_assignment(raw)

        self.assertEqual(assignment.version, 0)
        self.assertIsInstance(assignment.partitions, collections.OrderedDict)
        self.assertEqual(
            list(assignment.partitions.items()),
            [(u"events", [0, 1]), (u"clicks", [2])]
        )
        self.assertEqual(assignment.user_data, b"\x00\x01")

    def test_all_known_versions(self):
        for version in range(4):
            with self.subTest(version=version):
                raw = wire.assignment(version, [("events", [3])])

                assignment = decode_assignment(raw)

                self.assertEqual(assignment.version, version)
                self.assertEqual(assignment.partitions, {u"events": [3]})
                self.assertIsNone(assignment.user_data)

    def test_repeated_topic_partitions_are_merged(self):
        raw = wire.assignment(1, [("events", [0]), ("events", [4])])

        assignment = decode_assignment(raw)

        self.assertEqual(assignment.partitions, {u"events": [0, 4]})

    def test_null_partitions(self):
        assignment = decode_assignment(wire.assignment(0, None))

        self.assertIsNone(assignment.partitions)

    def test_null_partitions_for_a_topic(self):
        raw = wire.assignment(0, [("events", None)])

        with self.assertRaises(exc.InvalidLength) as context:
            decode_assignment(raw)

        self.assertNotIsInstance(context.exception, exc.UnexpectedEOF)
        self.assertEqual(context.exception.length, -1)
        self.assertEqual(context.exception.remaining, 4)

    def test_null_partitions_differ_from_empty(self):
        empty = decode_assignment(wire.assignment(0, [("events", [])]))

        self.assertEqual(empty.partitions, {u"events": []})
        self.assertRaises(
            exc.InvalidLength,
            decode_assignment, wire.assignment(0, [("events", None)])
        )

    def test_empty_partitions(self):
        assignment = decode_assignment(wire.assignment(0, []))

        self.assertEqual(assignment.partitions, collections.OrderedDict())
        self.assertIsNotNone(assignment.partitions)

    def test_none_blob_is_a_type_error(self):
        self.assertRaises(TypeError, decode_assignment, None)
        self.assertRaises(TypeError, decode_subscription, None)
        self.assertRaises(exc.UnexpectedEOF, decode_assignment, b"")

    def test_unknown_version(self):
        raw = b"\x00\x04" + wire.assignment(0, [])[2:]

        with self.assertRaises(exc.UnknownEmbeddedVersion) as context:
            decode_assignment(raw)

        self.assertEqual(context.exception.version, 4)
        self.assertEqual(
            str(context.exception),
            "Unknown consumer protocol assignment version: 4"
        )

    def test_truncation(self):
        raw = wire.assignment(
            0, [("events", [0, 1]), ("clicks", [2])], user_data=b"xyz"
        )

        self.assert_truncations_raise_eof(decode_assignment, raw)

    def test_assignment_is_immutable(self):
        assignment = decode_assignment(wire.assignment(0, []))

        with self.assertRaises(AttributeError):
            assignment.user_data = b"foo"
