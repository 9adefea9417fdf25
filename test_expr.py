import copy
import dataclasses
import threading
import unittest

from symdiff import (Constant, Difference, Product, Sum, Variable, as_expr,
                     constant, differentiate, evaluate, new_variable)
from symdiff.ids import IDManager


class Tests(unittest.TestCase):
    def setUp(self):
        self.x = new_variable("x")
        self.y = new_variable("y")

    def test_repr(self):
        self.assertEqual(repr(2 * (self.x + 4)), "(2.0 * (x + 4.0))")
        self.assertEqual(repr(self.x / self.y - 1), "((x / y) - 1.0)")
        self.assertTrue(repr(new_variable()).startswith("v"))

    def test_operators_build_nodes(self):
        x, y = self.x, self.y
        self.assertEqual(x + y, Sum(x, y))
        self.assertEqual(x - y, Difference(x, y))
        self.assertEqual(3 * x, Product(Constant(3), x))
        self.assertEqual(x * 3, Product(x, Constant(3)))
        self.assertEqual(-x, Difference(Constant(0), x))
        self.assertEqual(-constant(3), Constant(-3))
        self.assertIs(+x, x)

    def test_constant_coerces_to_float(self):
        c = constant(2)
        self.assertIsInstance(c.value, float)
        self.assertEqual(c, Constant(2.0))

    def test_bad_operands(self):
        with self.assertRaises(TypeError):
            self.x + "a"
        with self.assertRaises(TypeError):
            "a" * self.x
        with self.assertRaises(TypeError):
            as_expr(None)
        with self.assertRaises(TypeError):
            constant(True)
        with self.assertRaises(TypeError):
            constant(self.x)

    def test_nodes_are_immutable(self):
        c = constant(3)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            c.value = 4.0
        s = self.x + self.y
        with self.assertRaises(dataclasses.FrozenInstanceError):
            s.lhs = c

    def test_copies_keep_identity(self):
        x = self.x
        for z in (copy.copy(x), copy.deepcopy(x), Variable(x.id)):
            self.assertEqual(z.id, x.id)
            self.assertEqual(z, x)
            self.assertEqual(evaluate(z, {x: 7}), 7.0)
            self.assertEqual(differentiate(z, x), Constant(1))

    def test_same_name_different_variables(self):
        a = new_variable("a")
        b = new_variable("a")
        self.assertNotEqual(a.id, b.id)
        self.assertNotEqual(a, b)
        self.assertEqual(differentiate(a, b), Constant(0))
        self.assertEqual(evaluate(a, {b: 5}), 0.0)

    def test_variables(self):
        x, y = self.x, self.y
        self.assertEqual((x * y + 3).variables(), {x.id, y.id})
        self.assertEqual(constant(1).variables(), frozenset())

    def test_call_evaluates(self):
        f = 3 * self.x + 2
        self.assertEqual(f(self.x.bind(5)), 17.0)
        self.assertEqual(f(), 2.0)

    def test_hashable(self):
        self.assertEqual(len({self.x + 1, self.x + 1, self.y + 1}), 2)

    def test_ids_unique_across_threads(self):
        idm = IDManager()
        minted = []
        lock = threading.Lock()

        def mint():
            ids = [idm.new_id() for _ in range(200)]
            with lock:
                minted.extend(ids)

        threads = [threading.Thread(target=mint) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(set(minted)), 8 * 200)


if __name__ == '__main__':
    unittest.main()
