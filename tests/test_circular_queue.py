import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from circular_queue import Queue


class TestQueue(unittest.TestCase):
    def test_new_queue_is_empty(self):
        q = Queue()
        self.assertEqual(q.size(), 0)
        self.assertTrue(q.is_empty())
        self.assertFalse(q)

    def test_non_positive_capacity_raises(self):
        with self.assertRaises(ValueError):
            Queue(0)

    def test_empty_queue_accessors_raise(self):
        q = Queue()
        with self.assertRaises(IndexError):
            q.dequeue()
        with self.assertRaises(IndexError):
            q.front()
        with self.assertRaises(IndexError):
            q.back()

    def test_fifo_order(self):
        q = Queue()
        q.enqueue(1)
        q.enqueue(2)
        q.enqueue(3)
        self.assertEqual(q.dequeue(), 1)
        self.assertEqual(q.dequeue(), 2)
        self.assertEqual(q.dequeue(), 3)
        self.assertTrue(q.is_empty())

    def test_front_and_back_do_not_remove(self):
        q = Queue()
        q.enqueue(10)
        q.enqueue(20)
        self.assertEqual(q.front(), 10)
        self.assertEqual(q.back(), 20)
        self.assertEqual(len(q), 2)

    def test_wrap_around_without_growth(self):
        q = Queue()
        for i in range(4):
            q.enqueue(i)
        q.dequeue()
        q.dequeue()
        q.enqueue(10)
        q.enqueue(11)
        self.assertEqual(q.front(), 2)
        self.assertEqual(q.back(), 11)
        self.assertEqual([q.dequeue() for _ in range(4)], [2, 3, 10, 11])

    def test_growth_after_wrap_preserves_order(self):
        q = Queue(capacity=2)
        q.enqueue(1)
        q.enqueue(2)
        q.dequeue()
        q.enqueue(3)
        q.enqueue(4)
        q.enqueue(5)
        self.assertEqual([q.dequeue() for _ in range(4)], [2, 3, 4, 5])

    def test_clear_then_reuse(self):
        q = Queue()
        q.enqueue(1)
        q.enqueue(2)
        q.clear()
        self.assertTrue(q.is_empty())
        q.enqueue(3)
        self.assertEqual(q.front(), 3)
        self.assertEqual(q.size(), 1)

    def test_copy_is_independent(self):
        q = Queue()
        for i in range(5):
            q.enqueue(i)
        q.dequeue()
        clone = q.copy()
        q.dequeue()
        q.enqueue(99)
        self.assertEqual(clone.size(), 4)
        self.assertEqual(clone.front(), 1)
        self.assertEqual(clone.back(), 4)
        self.assertEqual(q.back(), 99)

    def test_holds_non_primitive_values(self):
        q = Queue()
        q.enqueue([1, 2, 3])
        q.enqueue({"key": "value"})
        self.assertEqual(q.dequeue(), [1, 2, 3])
        self.assertEqual(q.dequeue(), {"key": "value"})

    def test_many_wrap_around_cycles(self):
        q = Queue()
        for cycle in range(100):
            q.enqueue(cycle)
            q.enqueue(cycle + 1000)
            self.assertEqual(q.dequeue(), cycle)
            self.assertEqual(q.dequeue(), cycle + 1000)
        self.assertTrue(q.is_empty())

    def test_repr_lists_items_front_to_back(self):
        q = Queue()
        q.enqueue("a")
        q.enqueue("b")
        self.assertEqual(repr(q), "Queue(['a', 'b'])")


if __name__ == "__main__":
    unittest.main()
