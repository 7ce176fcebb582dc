"""
Value read-back tests (raw text and typed conversion).

Scope
- Typed reads by short or long name agree.
- Each kind converts its text (decimal, hexadecimal with or without 0x, float, bool).
- Unset and unknown options read as the zero value of the kind.
- Conversion and index failures raise ConversionError / PositionalIndexError.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argloom import (
    ArgumentParser,
    OptionKind,
    Requirement,
    ConversionError,
    PositionalIndexError,
    FaultCode,
)


class TestTypedOptions(TestCase):
    """Typed reads of loaded options."""

    def setUp(self):
        self.parser = ArgumentParser()
        self.parser.register_option(("i", "int"), Requirement.OPTIONAL, OptionKind.INT)
        self.parser.register_option(("x", "hex"), Requirement.OPTIONAL, OptionKind.HEX)
        self.parser.register_option(("f", "float"), Requirement.OPTIONAL, OptionKind.FLOAT)
        self.parser.register_option(("s", "string"), Requirement.OPTIONAL, OptionKind.STRING)
        self.parser.register_option(("v", "verbose"), Requirement.OPTIONAL, OptionKind.BOOL)
        self.parser.register_option(("b", "block"), Requirement.OPTIONAL, OptionKind.HEX, default="200")

    def testIntegerByEitherName(self):
        self.parser.load_arguments(["prog", "-i", "42"])
        self.assertEqual(self.parser.parse_option("int"), 42)
        self.assertEqual(self.parser.parse_option("i"), 42)

    def testHexadecimal(self):
        self.parser.load_arguments(["prog", "--hex", "ff"])
        self.assertEqual(self.parser.parse_option("hex"), 255)

    def testHexadecimalWithPrefix(self):
        self.parser.load_arguments(["prog", "--hex", "0x1F"])
        self.assertEqual(self.parser.parse_option("x"), 31)

    def testHexDefault(self):
        self.parser.load_arguments(["prog"])
        self.assertEqual(self.parser.parse_option("block"), 512)

    def testFloat(self):
        self.parser.load_arguments(["prog", "-f", "2.5"])
        self.assertEqual(self.parser.parse_option("float"), 2.5)

    def testString(self):
        self.parser.load_arguments(["prog", "-s", "hello world"])
        self.assertEqual(self.parser.parse_option("string"), "hello world")

    def testBoolReadsSetFlag(self):
        self.parser.load_arguments(["prog", "-v"])
        self.assertIs(self.parser.parse_option("verbose"), True)

    def testHexReadAsIntegerKeepsBase16(self):
        self.parser.load_arguments(["prog", "--hex", "ff"])
        self.assertEqual(self.parser.values.integer("hex"), 255)
        self.assertEqual(self.parser.parse_option("hex", OptionKind.INT), 255)
        self.assertEqual(self.parser.values.real("hex"), 255.0)
        self.assertEqual(self.parser.values.string("hex"), "ff")

    def testHexDigitsReadAsIntegerAreNotDecimal(self):
        self.parser.load_arguments(["prog", "--hex", "10"])
        self.assertEqual(self.parser.parse_option("hex", OptionKind.INT), 16)

    def testFloatReadAsIntegerTruncates(self):
        self.parser.load_arguments(["prog", "-f", "2.75"])
        self.assertEqual(self.parser.values.integer("float"), 2)

    def testStringParsedWithRequestedKind(self):
        self.parser.load_arguments(["prog", "-s", "10"])
        self.assertEqual(self.parser.parse_option("string", OptionKind.INT), 10)
        self.assertEqual(self.parser.parse_option("string", OptionKind.HEX), 16)

    def testUnsetOptionsReadZero(self):
        self.parser.load_arguments(["prog"])
        self.assertEqual(self.parser.parse_option("int"), 0)
        self.assertEqual(self.parser.parse_option("hex"), 0)
        self.assertEqual(self.parser.parse_option("float"), 0.0)
        self.assertEqual(self.parser.parse_option("string"), "")
        self.assertIs(self.parser.parse_option("verbose"), False)

    def testUnknownOptionReadsZero(self):
        self.parser.load_arguments(["prog"])
        self.assertEqual(self.parser.parse_option("nope"), "")
        self.assertEqual(self.parser.parse_option("nope", OptionKind.INT), 0)
        self.assertEqual(self.parser["nope"], "")

    def testUnparsableTextRaises(self):
        self.parser.load_arguments(["prog", "-i", "forty"])
        with self.assertRaises(ConversionError) as context:
            self.parser.parse_option("int")
        self.assertIs(context.exception.options["code"], FaultCode.CONVERSION_FAILED)
        self.assertEqual(context.exception.options["value"], "forty")

    def testConversionErrorIsValueError(self):
        self.parser.load_arguments(["prog", "-f", "x"])
        with self.assertRaises(ValueError):
            self.parser.parse_option("float")

    def testOptionWithoutValueFailsTypedRead(self):
        self.parser.load_arguments(["prog", "--int"])
        with self.assertRaises(ConversionError):
            self.parser.parse_option("int")
        self.assertEqual(self.parser.parse_option("int", OptionKind.STRING), "")

    def testShorthandReaders(self):
        self.parser.load_arguments(["prog", "-i", "7", "-v"])
        self.assertEqual(self.parser.values.integer("i"), 7)
        self.assertEqual(self.parser.values.hexadecimal("i"), 7)
        self.assertEqual(self.parser.values.real("i"), 7.0)
        self.assertEqual(self.parser.values.string("i"), "7")
        self.assertIs(self.parser.values.flag("v"), True)


class TestTypedPositionals(TestCase):
    """Raw and typed reads of positionals."""

    def setUp(self):
        self.parser = ArgumentParser()
        self.parser.register_positional(3, ["COUNT", "MASK", "FLAG"])
        self.parser.load_arguments(["prog", "12", "a0", "yes"])

    def testRawByIndex(self):
        self.assertEqual(self.parser[0], "12")
        self.assertEqual(self.parser[1], "a0")

    def testStringIsTheDefaultKind(self):
        self.assertEqual(self.parser.parse_positional(0), "12")

    def testTypedByIndex(self):
        self.assertEqual(self.parser.parse_positional(0, OptionKind.INT), 12)
        self.assertEqual(self.parser.parse_positional(1, OptionKind.HEX), 160)
        self.assertIs(self.parser.parse_positional(2, OptionKind.BOOL), True)

    def testBadConversion(self):
        with self.assertRaises(ConversionError):
            self.parser.parse_positional(1, OptionKind.INT)

    def testOutOfRange(self):
        with self.assertRaises(PositionalIndexError) as context:
            self.parser.parse_positional(3)
        self.assertIs(context.exception.options["code"], FaultCode.POSITIONAL_OUT_OF_RANGE)
        with self.assertRaises(IndexError):
            self.parser[-1]


if __name__ == "__main__":
    unittest.main()
