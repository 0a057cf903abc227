# python
"""
Options module behavioral tests (records, registration, matching).

Scope
- Validate Option construction: name rules, dest inference, typed fields.
- Validate OptionTable registration through tokens (add) and keywords (option).
- Validate registration faults: unknown tokens, unknown actions, duplicates.
- Validate the matcher: long vs short columns, exact and case-sensitive.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from shellopts import (
    Option,
    OptionTable,
    NamelessOptionError,
    DuplicatedOptionError,
    DuplicatedConfigFileError,
    RequiredWithoutDestError,
    UnknownParameterError,
    UnknownActionError,
    RegistrationError,
    FaultCode,
)
from shellopts.utils import Unset


class TestOption(TestCase):
    """Behavioral tests for Option records."""

    def testOptionRequiresAtLeastOneName(self):
        with self.assertRaises(NamelessOptionError):
            Option()

    def testOptionNamesRejectLeadingDash(self):
        with self.assertRaises(ValueError):
            Option("-x")

    def testOptionNamesRejectEmpty(self):
        with self.assertRaises(ValueError):
            Option(long="")

    def testOptionDestDefaultsToLongName(self):
        o = Option("n", "number")
        self.assertEqual(o.dest, "number")

    def testOptionExplicitDestWins(self):
        o = Option("n", "number", dest="myNumber")
        self.assertEqual(o.dest, "myNumber")

    def testOptionShortOnlyHasNoDest(self):
        o = Option("v")
        self.assertIsNone(o.dest)

    def testOptionExplicitNoneDestIsKept(self):
        o = Option("x", "long", dest=None)
        self.assertIsNone(o.dest)

    def testOptionEmptyDestFallsBackToLongName(self):
        o = Option("x", "long", dest="")
        self.assertEqual(o.dest, "long")

    def testOptionDefaultUnsetVersusEmpty(self):
        self.assertIs(Option(long="a").default, Unset)
        self.assertEqual(Option(long="b", default="").default, "")

    def testOptionDefaultMustBeString(self):
        with self.assertRaises(TypeError):
            Option(long="count", default=3)

    def testOptionActionMustBeCallable(self):
        with self.assertRaises(TypeError):
            Option(long="go", action="echo hi")

    def testOptionRequiredWithoutDestRejected(self):
        with self.assertRaises(RequiredWithoutDestError):
            Option("x", required=True)

    def testOptionNamesDisplayAndIdentifier(self):
        both = Option("n", "number")
        self.assertEqual(both.names, ("-n", "--number"))
        self.assertEqual(both.display, "-n")
        self.assertEqual(both.identifier, "-n,--number")

        long = Option(long="number")
        self.assertEqual(long.display, "--number")
        self.assertEqual(long.identifier, "--number")

    def testOptionFlagPolarity(self):
        self.assertFalse(Option(long="value").isflag)
        self.assertTrue(Option(long="on", flag=True).isflag)
        self.assertTrue(Option(long="off", flag=False).isflag)

    def testOptionFieldsAreReadOnly(self):
        o = Option("n", "number")
        with self.assertRaises(AttributeError):
            o.dest = "other"


class TestOptionTable(TestCase):
    """Behavioral tests for option registration."""

    def testHelpIsOptionZero(self):
        table = OptionTable()
        self.assertEqual(len(table), 1)
        self.assertEqual(table[0].names, ("-h", "--help"))
        self.assertIsNone(table[0].dest)
        self.assertIsNotNone(table[0].action)
        self.assertIs(table.helper, table[0])

    def testHelpCanBeLeftOut(self):
        table = OptionTable(help=False)
        self.assertEqual(len(table), 0)
        self.assertIsNone(table.helper)
        table.add("-h", "--host")
        self.assertEqual(table.search("-h").dest, "host")

    def testIndexIsPriorLength(self):
        table = OptionTable()
        first = table.add("-n", "--number")
        second = table.add("-a", "--aux", "flagTrue")
        self.assertEqual((first.index, second.index), (1, 2))
        self.assertEqual(list(table), [table[0], first, second])

    def testAddParsesEveryTokenKind(self):
        called = []
        table = OptionTable(actions={"remember": called.append})
        o = table.add(
            "-n", "--number", "dest=myNumber", "action=remember", "default=3",
            "required", "help=Specify some number", "dontShow"
        )
        self.assertEqual((o.short, o.long, o.dest), ("n", "number", "myNumber"))
        self.assertIs(o.action.__self__, called)
        self.assertEqual(o.default, "3")
        self.assertTrue(o.required)
        self.assertTrue(o.hidden)
        self.assertEqual(o.help, "Specify some number")

    def testAddFlagTokens(self):
        table = OptionTable()
        self.assertIs(table.add("-a", "flagTrue", "dest=a").flag, True)
        self.assertIs(table.add("-b", "flagFalse", "dest=b").flag, False)

    def testAddDefaultMayBeEmpty(self):
        table = OptionTable()
        self.assertEqual(table.add("--name", "default=").default, "")

    def testAddDefaultKeepsSpacesAndEquals(self):
        table = OptionTable()
        self.assertEqual(table.add("--expr", "default=a = b").default, "a = b")

    def testAddLaterTokensOverwrite(self):
        table = OptionTable()
        o = table.add("--out", "help=first", "help=second", "dest=x", "dest=y")
        self.assertEqual((o.help, o.dest), ("second", "y"))

    def testAddConfigFileToken(self):
        table = OptionTable()
        o = table.add("-c", "--config", "configFile")
        self.assertTrue(o.config)
        self.assertIs(table.config, o)

    def testAddUnknownParameterRaises(self):
        table = OptionTable()
        with self.assertRaises(UnknownParameterError) as context:
            table.add("-x", "mandatory")
        self.assertEqual(str(context.exception), "unknown parameter to registerOption: mandatory")
        self.assertEqual(context.exception.code, FaultCode.UNKNOWN_PARAMETER)
        self.assertIsInstance(context.exception, RegistrationError)
        self.assertEqual(len(table), 1)

    def testAddUnknownActionRaises(self):
        table = OptionTable()
        with self.assertRaises(UnknownActionError):
            table.add("-x", "action=launchRockets")

    def testAddActionKeywordTakesCallable(self):
        table = OptionTable()
        o = table.add("-v", "--version", action=print)
        self.assertIs(o.action, print)

    def testAddWithoutNamesRaises(self):
        table = OptionTable()
        with self.assertRaises(NamelessOptionError):
            table.add("dest=orphan")

    def testDuplicateShortNameRejected(self):
        table = OptionTable()
        table.add("-n", "--number")
        with self.assertRaises(DuplicatedOptionError) as context:
            table.add("-n", "--name")
        self.assertIn("-n", str(context.exception))
        self.assertEqual(len(table), 2)

    def testDuplicateLongNameRejected(self):
        table = OptionTable()
        table.add("--number")
        with self.assertRaises(DuplicatedOptionError) as context:
            table.add("-x", "--number")
        self.assertIn("--number", str(context.exception))

    def testHelpNamesAreTaken(self):
        table = OptionTable()
        with self.assertRaises(DuplicatedOptionError):
            table.add("-h", "--host")

    def testSecondConfigFileRejected(self):
        table = OptionTable()
        table.add("-c", "--config", "configFile")
        with self.assertRaises(DuplicatedConfigFileError):
            table.add("--settings", "configFile")

    def testOptionKeywordForm(self):
        table = OptionTable()
        o = table.option("-a", "--aux", flag=True, help="Another option")
        self.assertEqual((o.dest, o.flag, o.help), ("aux", True, "Another option"))

    def testOptionKeywordRejectsUndashedNames(self):
        table = OptionTable()
        with self.assertRaises(ValueError):
            table.option("number")

    def testDestsListedOnce(self):
        table = OptionTable()
        table.add("-a", "dest=shared")
        table.add("-b", "dest=shared")
        table.add("--other")
        self.assertEqual(table.dests, ["shared", "other"])

    def testHelpHasNoDest(self):
        table = OptionTable()
        self.assertEqual(table.dests, [])
        self.assertNotIn("help", table.dests)

    def testOptionKeywordAcceptsNoneDest(self):
        table = OptionTable()
        o = table.option("-V", "--version", dest=None, action=print)
        self.assertIsNone(o.dest)
        self.assertEqual(table.dests, [])


class TestSearch(TestCase):
    """Behavioral tests for token matching."""

    def setUp(self) -> None:
        self.table = OptionTable()
        self.number = self.table.add("-n", "--number")
        self.long = self.table.add("--verbose", "flagTrue")

    def testShortAndLongForms(self):
        self.assertIs(self.table.search("-n"), self.number)
        self.assertIs(self.table.search("--number"), self.number)
        self.assertIs(self.table.search("--verbose"), self.long)

    def testColumnsAreNotMixed(self):
        self.assertIsNone(self.table.search("--n"))
        self.assertIsNone(self.table.search("-number"))
        self.assertIsNone(self.table.search("-verbose"))

    def testNoAbbreviationNorCaseFolding(self):
        self.assertIsNone(self.table.search("--num"))
        self.assertIsNone(self.table.search("-N"))
        self.assertIsNone(self.table.search("--Number"))

    def testBareDashesNeverMatch(self):
        self.assertIsNone(self.table.search("-"))
        self.assertIsNone(self.table.search("--"))

    def testPlainTokensNeverMatch(self):
        self.assertIsNone(self.table.search("number"))
        self.assertIsNone(self.table.search("n"))

    def testContains(self):
        self.assertIn("-h", self.table)
        self.assertIn("--help", self.table)
        self.assertNotIn("-z", self.table)


if __name__ == "__main__":
    unittest.main()
