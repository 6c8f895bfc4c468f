import unittest

from aoc.algorithms.look_and_say import look_and_say_iteration, look_and_say_n_times


class TestLookAndSay(unittest.TestCase):
    def test_single_iterations(self):
        self.assertEqual(look_and_say_iteration("1"), "11")
        self.assertEqual(look_and_say_iteration("11"), "21")
        self.assertEqual(look_and_say_iteration("21"), "1211")
        self.assertEqual(look_and_say_iteration("1211"), "111221")
        self.assertEqual(look_and_say_iteration("111221"), "312211")

    def test_empty_input(self):
        self.assertEqual(look_and_say_iteration(""), "")
        self.assertEqual(look_and_say_n_times("", 10), "")

    def test_n_times(self):
        self.assertEqual(look_and_say_n_times("1", 5), "312211")
        self.assertEqual(look_and_say_n_times("1", 0), "1")

    def test_length_grows(self):
        self.assertEqual(len(look_and_say_n_times("1113222113", 40)), 252594)

    def test_debug_excerpt_is_logged(self):
        with self.assertLogs("LookAndSay", level="DEBUG") as captured:
            look_and_say_n_times("1", 20, excerpt_length=10)
        self.assertEqual(len(captured.records), 1)
        self.assertIn("...", captured.output[0])


if __name__ == "__main__":
    unittest.main()
