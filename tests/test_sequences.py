import unittest

from aoc.util.sequences import (
    between,
    initialize_list,
    map_cross_product,
    map_self_cross_product,
    to_list_string,
    where_not,
    window,
)


class TestSequences(unittest.TestCase):
    def test_between(self):
        self.assertTrue(between(0, 0, 5))
        self.assertFalse(between(5, 0, 5))
        self.assertTrue(between(5, 0, 5, include_end=True))
        self.assertFalse(between(-1, 0, 5))

    def test_where_not(self):
        self.assertEqual(list(where_not(range(6), lambda n: n % 2)), [0, 2, 4])

    def test_window_over_list(self):
        self.assertEqual(list(window([1, 2, 3, 4], 2)), [[1, 2], [2, 3], [3, 4]])
        self.assertEqual(list(window([1, 2], 3)), [])

    def test_window_over_string(self):
        self.assertEqual(list(window("abcd", 3)), ["abc", "bcd"])

    def test_self_cross_product(self):
        pairs = list(map_self_cross_product([1, 2, 3], lambda a, b: (a, b), ignore_self=True))
        self.assertEqual(pairs, [(1, 2), (1, 3), (2, 3)])

        with_self = list(map_self_cross_product([1, 2], lambda a, b: (a, b)))
        self.assertEqual(with_self, [(1, 1), (1, 2), (2, 2)])

        both = list(map_self_cross_product([1, 2], lambda a, b: a - b, both_directions=True, ignore_self=True))
        self.assertEqual(both, [-1, 1])

    def test_cross_product(self):
        self.assertEqual(list(map_cross_product([1, 2], "ab", lambda n, c: c * n)), ["a", "b", "aa", "bb"])
        reversed_too = list(map_cross_product([1], [2], lambda a, b: a - b, both_directions=True))
        self.assertEqual(reversed_too, [-1, 1])

    def test_cross_product_with_reverse_mapper(self):
        labels = list(map_cross_product(
            [1, 2],
            "a",
            lambda n, c: f"{n}{c}",
            both_directions=True,
            reverse_mapper=lambda c, n: f"{c}{n}",
        ))
        self.assertEqual(labels, ["1a", "a1", "2a", "a2"])

    def test_to_list_string(self):
        self.assertEqual(to_list_string([1, 2, 3]), "[1,2,3]")
        self.assertEqual(to_list_string(["a", "b"], "->", "", ""), "a->b")
        self.assertEqual(to_list_string(None), "[]")
        self.assertEqual(to_list_string(None, prefix="<", postfix=">"), "<>")

    def test_initialize_list_uses_fresh_values(self):
        lists = initialize_list(3, list)
        lists[0].append(1)
        self.assertEqual(lists, [[1], [], []])


if __name__ == "__main__":
    unittest.main()
