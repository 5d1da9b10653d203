import unittest

import lug
from lug.errors import IndexOutOfRange, InvalidArgument, LugError
from lug.math import V2


class AutoloadTests(unittest.TestCase):
    def tearDown(self) -> None:
        lug._AUTOLOAD.pop("Fraction", None)
        vars(lug).pop("Fraction", None)

    def test_v2_is_exposed_under_stable_name(self) -> None:
        self.assertIs(lug.V2, V2)
        self.assertEqual(lug.V2(1, 2), V2(1, 2))
        self.assertIn("V2", dir(lug))
        self.assertIn("V2", lug.__all__)

    def test_unknown_name_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            lug.Quat
        self.assertFalse(hasattr(lug, "Buffer"))

    def test_register_loads_on_first_access(self) -> None:
        from fractions import Fraction

        lug.register("Fraction", "fractions")
        self.assertEqual(lug.registered()["Fraction"], "fractions")
        self.assertNotIn("Fraction", vars(lug))
        with self.assertLogs("lug", level="DEBUG") as captured:
            self.assertIs(lug.Fraction, Fraction)
        self.assertIn("Autoloading lug.Fraction from fractions", captured.output[0])
        self.assertIn("Fraction", vars(lug))

    def test_register_is_idempotent_for_same_module(self) -> None:
        lug.register("Fraction", "fractions")
        lug.register("Fraction", "fractions")
        self.assertEqual(lug.registered()["Fraction"], "fractions")

    def test_register_conflict_raises(self) -> None:
        with self.assertRaises(InvalidArgument):
            lug.register("V2", "somewhere.else")
        self.assertEqual(lug.registered()["V2"], "lug.math.vec2")

    def test_registered_returns_copy(self) -> None:
        snapshot = lug.registered()
        snapshot["Other"] = "other.module"
        self.assertNotIn("Other", lug.registered())


class ErrorHierarchyTests(unittest.TestCase):
    def test_errors_extend_builtins(self) -> None:
        self.assertTrue(issubclass(IndexOutOfRange, IndexError))
        self.assertTrue(issubclass(IndexOutOfRange, LugError))
        self.assertTrue(issubclass(InvalidArgument, ValueError))
        self.assertTrue(issubclass(InvalidArgument, LugError))
        self.assertIs(lug.InvalidArgument, InvalidArgument)


if __name__ == "__main__":
    unittest.main()
