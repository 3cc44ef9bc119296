# python
"""
Options module behavioral tests.

Scope
- Validate Argument and Option declarations: construction, normalization, immutability.
- Validate sub-argument lookup by id and the UnknownArgumentError path.
- Validate Validator wrapping (plain callables, subclasses) and the @option decorator.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from sextant import (
    Argument,
    Option,
    Validator,
    FunctionValidator,
    validator,
    option,
    DuplicateArgumentError,
    UnknownArgumentError,
    ConfigurationError,
)
from sextant.utils import Unset


class TestArgument(TestCase):
    """Behavioral tests for Argument (sub-argument) declarations."""

    def testArgumentFields(self):
        a = Argument("arg1", "The argument 1.")
        self.assertEqual(a.id, "arg1")
        self.assertEqual(a.descr, "The argument 1.")

    def testArgumentDescrDefaultsToEmpty(self):
        self.assertEqual(Argument("arg1").descr, "")

    def testArgumentDescrTabsExpanded(self):
        self.assertEqual(Argument("arg1", "x\ty").descr, "x       y")

    def testArgumentIdMustBeNonEmpty(self):
        with self.assertRaises(ValueError):
            Argument("")

    def testArgumentIdRejectsWhitespace(self):
        with self.assertRaises(ValueError):
            Argument("two words")

    def testArgumentIdMustBeString(self):
        with self.assertRaises(TypeError):
            Argument(1)

    def testArgumentIsReadOnly(self):
        a = Argument("arg1")
        with self.assertRaises(AttributeError):
            a.id = "other"


class TestOption(TestCase):
    """Behavioral tests for Option declarations."""

    def testOptionRequiresAtLeastOneAlias(self):
        with self.assertRaises(TypeError):
            Option()

    def testOptionCanonicalNameIsFirstAlias(self):
        o = Option("-v", "--version", mandatory=False)
        self.assertEqual(o.name, "-v")
        self.assertEqual(o.aliases, ("-v", "--version"))

    def testOptionAcceptsSlashAliases(self):
        self.assertEqual(Option("/x").name, "/x")

    def testOptionMandatoryByDefault(self):
        self.assertTrue(Option("--opt").mandatory)

    def testOptionMandatoryMustBeBoolean(self):
        with self.assertRaises(TypeError):
            Option("--opt", mandatory="yes")

    def testOptionDescrDefaultsToEmpty(self):
        self.assertEqual(Option("--opt").descr, "")

    def testOptionDescrTabsExpanded(self):
        self.assertEqual(Option("--opt", descr="Shows\tit.").descr, "Shows   it.")

    def testOptionDescrMustBeString(self):
        with self.assertRaises(TypeError):
            Option("--opt", descr=None)

    def testOptionDuplicateAliasesRejected(self):
        with self.assertRaises(ValueError):
            Option("--dup", "--dup")

    def testOptionEmptyAliasRejected(self):
        with self.assertRaises(ValueError):
            Option("")

    def testOptionArgumentsKeepDeclarationOrder(self):
        o = Option("--pair", arguments=[Argument("first"), "second", Argument("third", "3rd")])
        self.assertEqual([a.id for a in o.arguments], ["first", "second", "third"])
        self.assertEqual(o.arguments[1].descr, "")

    def testOptionArgumentsRejectBareString(self):
        with self.assertRaises(TypeError):
            Option("--pair", arguments="ab")

    def testOptionArgumentsRejectForeignItems(self):
        with self.assertRaises(TypeError):
            Option("--pair", arguments=[1])

    def testOptionDuplicateArgumentIdsRejected(self):
        with self.assertRaises(DuplicateArgumentError) as caught:
            Option("--pair", arguments=["a", "a"])
        self.assertIsInstance(caught.exception, ConfigurationError)
        self.assertIsInstance(caught.exception, ValueError)
        self.assertEqual(caught.exception.options["argument"], "a")

    def testOptionArgumentLookup(self):
        o = Option("--pair", arguments=[Argument("a", "first"), "b"])
        self.assertEqual(o.argument("a").descr, "first")

    def testOptionUnknownArgumentRaises(self):
        o = Option("--pair", arguments=["a"])
        with self.assertRaises(UnknownArgumentError) as caught:
            o.argument("z")
        self.assertIsInstance(caught.exception, LookupError)

    def testOptionValidatorDefaultsToUnset(self):
        self.assertIs(Option("--opt").validator, Unset)

    def testOptionWrapsCallableValidator(self):
        o = Option("--opt", validator=lambda binding: True)
        self.assertIsInstance(o.validator, FunctionValidator)

    def testOptionRejectsNonCallableValidator(self):
        with self.assertRaises(TypeError):
            Option("--opt", validator="nope")

    def testOptionIsReadOnly(self):
        o = Option("--opt")
        with self.assertRaises(AttributeError):
            o.mandatory = False


class TestValidator(TestCase):
    """Behavioral tests for the Validator capability and its helpers."""

    def testValidatorSubclassIsKeptAsIs(self):
        class Always(Validator):
            def check(self, binding, /):
                return True

        always = Always()
        self.assertIs(validator(always), always)
        self.assertIs(Option("--opt", validator=always).validator, always)

    def testValidatorCallCoercesToBool(self):
        wrapped = validator(lambda binding: "non-empty")
        self.assertIs(wrapped(object()), True)
        self.assertIs(validator(lambda binding: 0)(object()), False)

    def testValidatorIsAbstract(self):
        with self.assertRaises(TypeError):
            Validator()

    def testFunctionValidatorRequiresCallable(self):
        with self.assertRaises(TypeError):
            FunctionValidator(42)

    def testOptionDecoratorBuildsOption(self):
        seen = []

        @option("-v", "--version", descr="Shows the version.", mandatory=False)
        def version(binding):
            seen.append(binding)
            return True

        self.assertIsInstance(version, Option)
        self.assertEqual(version.aliases, ("-v", "--version"))
        self.assertFalse(version.mandatory)
        self.assertTrue(version.validator("binding"))
        self.assertEqual(seen, ["binding"])

    def testOptionDecoratorRejectsExplicitValidator(self):
        with self.assertRaises(TypeError):
            option("--opt", validator=lambda binding: True)


if __name__ == "__main__":
    unittest.main()
