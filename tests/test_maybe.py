import unittest
from unittest.mock import Mock

from lambdafx import Maybe, Just, NOTHING, maybe, merge_maybes, identity


def add(a):
    return lambda b: a + b


class TestMaybeConstruction(unittest.TestCase):
    def test_of_classifies_absence(self):
        for v in (None, "", [], (), {}):
            self.assertIs(Maybe.of(v), NOTHING)
        for v in (0, False, "abc", [1], {"a": 1}):
            m = Maybe.of(v)
            self.assertIsInstance(m, Just)
            self.assertEqual(m.value, v)

    def test_direct_constructors_bypass_classification(self):
        self.assertEqual(Maybe.just("").value, "")
        self.assertIs(Maybe.nothing(), NOTHING)
        self.assertIsNone(NOTHING.value)

    def test_predicates(self):
        self.assertTrue(Maybe.of(123).is_just())
        self.assertFalse(Maybe.of(None).is_just())
        self.assertTrue(NOTHING.is_nothing())
        self.assertFalse(Just("7urtle").is_nothing())

    def test_inspect(self):
        self.assertEqual(Maybe.of("abc").inspect(), "Just('abc')")
        self.assertEqual(NOTHING.inspect(), "Nothing")
        self.assertEqual(repr(Just([1, 2])), "Just([1, 2])")


class TestMaybeFunctorMonad(unittest.TestCase):
    def test_map_applies_and_reclassifies(self):
        self.assertEqual(Maybe.of(3).map(lambda a: a + 2), Just(5))
        self.assertEqual(Maybe.of(3).map(lambda a: Maybe.of(a + 2)), Just(Just(5)))
        self.assertIs(Just("x").map(lambda _: ""), NOTHING)

    def test_map_short_circuits_on_nothing(self):
        f = Mock()
        self.assertIs(NOTHING.map(f), NOTHING)
        f.assert_not_called()

    def test_map_does_not_catch(self):
        def boom(_):
            raise ValueError("boom")
        with self.assertRaises(ValueError):
            Just(1).map(boom)

    def test_functor_identity(self):
        self.assertEqual(Just(3).map(identity), Just(3))
        self.assertIs(NOTHING.map(identity), NOTHING)

    def test_flat_map(self):
        self.assertEqual(Maybe.of(3).flat_map(lambda a: Maybe.of(a + 2)), Just(5))
        self.assertIs(Maybe.of(3).flat_map(lambda a: Maybe.of(None)), NOTHING)
        self.assertEqual(Maybe.of(3).flat_map(lambda a: a + 2), 5)
        f = Mock()
        self.assertIs(NOTHING.flat_map(f), NOTHING)
        f.assert_not_called()

    def test_left_identity(self):
        def f(x):
            return Just(x * 2)
        self.assertEqual(Maybe.of(4).flat_map(f), f(4))

    def test_map_to_value(self):
        self.assertEqual(Just(3).map_to_value(lambda a: a + 2), 5)
        self.assertEqual(NOTHING.map_to_value(lambda a: a + 2, 0), 0)

    def test_ap(self):
        self.assertEqual(Maybe.of(1).map(add).ap(Maybe.of(2)), Just(3))
        self.assertIs(Maybe.of(1).map(add).ap(Maybe.of(None)), NOTHING)
        self.assertEqual(Maybe.of(add).ap(Maybe.of(1)).ap(Maybe.of(2)), Just(3))
        self.assertIs(NOTHING.ap(Just(1)), NOTHING)

    def test_get_or_else(self):
        self.assertEqual(Just(1).get_or_else(5), 1)
        self.assertEqual(Maybe.of(None).get_or_else(5), 5)


class TestMaybeCompanions(unittest.TestCase):
    def test_maybe_eliminator(self):
        self.assertEqual(maybe(lambda: "error")(lambda v: v)(Maybe.of("abc")), "abc")
        self.assertEqual(maybe(lambda: "error")(lambda v: v)(Maybe.of(None)), "error")
        self.assertEqual(maybe(lambda: "error", lambda v: v + "!", Maybe.of("abc")), "abc!")

    def test_on_nothing_gets_no_arguments(self):
        on_nothing = Mock(return_value="n")
        maybe(on_nothing, Mock(), NOTHING)
        on_nothing.assert_called_once_with()

    def test_merge_maybes(self):
        self.assertEqual(merge_maybes(Maybe.of("abc"), Just("def")), Just(["abc", "def"]))
        self.assertIs(merge_maybes(Maybe.of("abc"), NOTHING), NOTHING)
        self.assertIs(merge_maybes(NOTHING, Maybe.of("def")), NOTHING)
        self.assertIs(merge_maybes(NOTHING, NOTHING), NOTHING)
        self.assertEqual(merge_maybes(), Just([]))
