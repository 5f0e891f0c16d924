import math
import unittest

from shapepoly.core.poly import (
    add, canonicalize, equal, inner, is_zero, make_const, make_var, make_zero,
    mk_polynomial, mult, negate, prune, scale, substract, termwise_product, variables,
)
from shapepoly.core.monomial import as_key, check_identifier, occurrences, remove_all, remove_first, sort_key
from shapepoly.errors import DimensionMismatch


class TestMonomialKey(unittest.TestCase):

    def test_occurrences(self):
        self.assertEqual(occurrences("x", "xxy"), 2.0)
        self.assertEqual(occurrences("z", "xxy"), 0.0)
        self.assertIsInstance(occurrences("x", ""), float)

    def test_key_helpers(self):
        self.assertEqual(remove_first("x", "yxx"), "yx")
        self.assertEqual(sort_key("yxzx"), "xxyz")
        self.assertEqual(as_key(["x", "y"]), "xy")
        self.assertEqual(remove_all("x", "xyxx"), "y")

    def test_check_identifier(self):
        self.assertEqual(check_identifier("x"), "x")
        for bad in ("", "xy", 1, None):
            with self.assertRaises(ValueError):
                check_identifier(bad)


class TestConstruction(unittest.TestCase):

    def test_last_pair_wins(self):
        p = mk_polynomial([("x", 1.0), ("y", 3.0), ("x", 2.0)])
        self.assertEqual(p, {"x": 2.0, "y": 3.0})

    def test_from_mapping(self):
        self.assertEqual(mk_polynomial({"xy": 4.0}), {"xy": 4.0})

    def test_sequence_keys_are_joined(self):
        self.assertEqual(mk_polynomial([(("x", "x", "y"), 5.0)]), {"xxy": 5.0})

    def test_coefficients_not_validated(self):
        p = mk_polynomial([("", float("nan")), ("x", float("inf"))])
        self.assertTrue(math.isnan(p[""]))
        self.assertEqual(p["x"], float("inf"))

    def test_helpers(self):
        self.assertEqual(make_zero(), {})
        self.assertEqual(make_const(3), {"": 3.0})
        self.assertEqual(make_var("z"), {"z": 1.0})
        with self.assertRaises(ValueError):
            make_var("xy")

    def test_variables(self):
        p = mk_polynomial([("", 1.0), ("x", 4.0), ("xy", 4.0), ("y", 3.0)])
        self.assertEqual(variables(p), "xy")
        self.assertEqual(variables({"yzy": 1.0}), "yz")
        self.assertEqual(variables({}), "")


class TestRingOperations(unittest.TestCase):

    def setUp(self):
        self.p = mk_polynomial([("", 1.0), ("x", 2.0), ("y", 3.0)])
        self.q = mk_polynomial([("x", 2.0), ("xy", 4.0)])

    def test_add(self):
        self.assertEqual(add(self.p, self.q), {"": 1.0, "x": 4.0, "xy": 4.0, "y": 3.0})

    def test_add_commutative(self):
        self.assertEqual(add(self.p, self.q), add(self.q, self.p))

    def test_add_zero_identity(self):
        self.assertEqual(add(self.p, make_zero()), self.p)
        self.assertEqual(add(make_zero(), self.p), self.p)

    def test_substract(self):
        self.assertEqual(
            substract(self.p, self.q),
            {"": 1.0, "x": 0.0, "xy": -4.0, "y": 3.0},
        )

    def test_substract_self_keeps_zero_terms(self):
        p = mk_polynomial([("", 1.0), ("x", 2.0), ("y", 3.0), ("xy", 4.0), ("xxy", 5.0)])
        d = substract(p, p)
        self.assertEqual(set(d), set(p))
        self.assertTrue(all(c == 0.0 for c in d.values()))
        self.assertTrue(is_zero(d))

    def test_mult(self):
        self.assertEqual(
            mult(self.p, self.q),
            {"x": 2.0, "xx": 4.0, "xxy": 8.0, "xy": 4.0, "yx": 6.0, "yxy": 12.0},
        )

    def test_mult_is_commutative_up_to_key_order(self):
        pq = mult(self.p, self.q)
        qp = mult(self.q, self.p)
        self.assertNotEqual(pq, qp)
        self.assertTrue(equal(pq, qp))

    def test_mult_sums_shared_keys(self):
        s = mk_polynomial([("x", 1.0), ("", 1.0)])
        self.assertEqual(mult(s, s), {"xx": 1.0, "x": 2.0, "": 1.0})

    def test_mult_by_zero(self):
        self.assertEqual(mult(self.p, make_zero()), {})

    def test_negate_and_scale(self):
        self.assertEqual(negate(self.q), {"x": -2.0, "xy": -4.0})
        self.assertEqual(scale(self.q, 0.5), {"x": 1.0, "xy": 2.0})

    def test_inputs_not_modified(self):
        p_before, q_before = dict(self.p), dict(self.q)
        add(self.p, self.q)
        mult(self.p, self.q)
        substract(self.p, self.q)
        termwise_product(self.p, self.q)
        self.assertEqual(self.p, p_before)
        self.assertEqual(self.q, q_before)

    def test_is_zero(self):
        self.assertTrue(is_zero({}))
        self.assertFalse(is_zero(self.p))


class TestInner(unittest.TestCase):

    def test_termwise_product(self):
        a = {"x": 2.0, "y": 3.0}
        b = {"x": 5.0, "z": 7.0}
        self.assertEqual(termwise_product(a, b), {"x": 10.0, "y": 3.0, "z": 7.0})

    def test_inner_default_product(self):
        ps = [{"x": 2.0}, {"": 1.0}]
        qs = [{"x": 3.0}, {"y": 4.0}]
        self.assertEqual(inner(ps, qs), {"x": 6.0, "": 1.0, "y": 4.0})

    def test_inner_ring_product(self):
        ps = [{"x": 2.0}, {"": 1.0}]
        qs = [{"x": 3.0}, {"y": 4.0}]
        self.assertEqual(inner(ps, qs, mult), {"xx": 6.0, "y": 4.0})

    def test_inner_empty(self):
        self.assertEqual(inner([], []), {})

    def test_inner_length_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            inner([{"x": 1.0}], [{"x": 1.0}, {"y": 1.0}])


class TestCanonicalForm(unittest.TestCase):

    def test_canonicalize_merges_commuted_keys(self):
        self.assertEqual(canonicalize({"xy": 1.0, "yx": 2.0, "": 1.0}), {"xy": 3.0, "": 1.0})

    def test_prune(self):
        self.assertEqual(prune({"x": 0.0, "y": 1.0}), {"y": 1.0})

    def test_equal_ignores_zero_terms_and_order(self):
        self.assertTrue(equal({"yx": 2.0, "z": 0.0}, {"xy": 2.0}))
        self.assertFalse(equal({"x": 1.0}, {"y": 1.0}))


if __name__ == "__main__":
    unittest.main()
