import threading
import unittest

from tests.cases import wire

from consumer_offsets import decode_group_metadata_value


class ConcurrentDecodingTests(unittest.TestCase):

    def test_threads_decode_independently(self):
        raws = [
            wire.group_metadata_value(
                3, "consumer", generation, "range", "m-0",
                [
                    wire.member(
                        3, "m-%d" % i, "client", "/127.0.0.1", 10000,
                        wire.subscription(0, ["topic-%d" % generation]),
                        wire.assignment(0, [("topic-%d" % generation, [i])]),
                        rebalance_timeout=1000,
                    )
                    for i in range(3)
                ],
                current_state_timestamp=generation,
            )
            for generation in range(8)
        ]
        expected = [decode_group_metadata_value(raw) for raw in raws]
        results = {}

        def decode_many(index):
            results[index] = [
                decode_group_metadata_value(raws[index]) for _ in range(50)
            ]

        threads = [
            threading.Thread(target=decode_many, args=(index,))
            for index in range(len(raws))
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for index, decoded in results.items():
            for value in decoded:
                self.assertEqual(value, expected[index])
                self.assertEqual(value.generation, index)
