"""
Sextant faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain so logs and searches stay predictable.
- OptionException: base type carrying message + options that knows how to render
  itself through rich (header, one-sentence body, a single clear hint).
- Three families:
  • ParseError: reported by Parser.parse() to the error console and recorded on the
    parser; never raised (parse communicates through its ParseResult).
  • LookupFault: raised when reading back an unregistered alias or an undeclared
    sub-argument id.
  • ConfigurationError: raised at setup time when a declaration is inconsistent.

Integration
- The host application may expose __codes__ (FaultCode → label) and __styles__
  (palette overrides) in __main__.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - parsing (211xx)
      • INVALID_ARGUMENT, MISSING_SUBARGUMENT, VALIDATION_FAILED, MANDATORY_OPTION_MISSING
    - lookups (221xx)
      • UNKNOWN_ARGUMENT, OPTION_NOT_FOUND
    - configuration (231xx)
      • DUPLICATE_ALIAS, DUPLICATE_ARGUMENT, RESERVED_ALIAS
    """
    # --- parse errors (21xxx) ---
    INVALID_ARGUMENT            = 21101
    MISSING_SUBARGUMENT         = 21102
    VALIDATION_FAILED           = 21103
    MANDATORY_OPTION_MISSING    = 21104

    # --- lookup errors (22xxx) ---
    UNKNOWN_ARGUMENT            = 22101
    OPTION_NOT_FOUND            = 22102

    # --- configuration errors (23xxx) ---
    DUPLICATE_ALIAS             = 23101
    DUPLICATE_ARGUMENT          = 23102
    RESERVED_ALIAS              = 23103

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class OptionException(Exception):
    """
    base of every sextant fault.

    class attributes
    - code: FaultCode identifying the fault.
    - title: short, lowercase title shown in the rendered header.
    - hint: default actionable hint (instances may override it through options).

    options (read-only mapping)
    - program: name shown in the header (defaults to "sextant").
    - colorful: apply the palette when rendering.
    - hint: per-instance hint override.
    - anything else the reporter wants to attach (token, alias, argument...).
    """
    code = Unset
    title = "fault"
    hint = ""

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError("%s() message must be a string" % type(self).__name__)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message

    def __rich__(self):
        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # green arrow
            "hint": "italic #9CE19C",  # green hint text
        } | getattr(__import__("__main__"), "__styles__", {}))

        colorful = self.options.get("colorful", False)

        def text(fragment, style):
            return Text(str(fragment), styles[style] if colorful else "")

        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"

        header = Text.assemble(
            "[ ",
            text(self.options.get("program") or "sextant", "prog-name"),
            " — ",
            text(code, "code"),
            " | ",
            text(self.title.title(), "error-title"),
            " ]",
        )
        message = text(self.message, "error-message")
        renders = [header, message]
        if hint := self.options.get("hint", self.hint):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
        return Group(*renders)


class ParseError(OptionException):
    hint = "please use --help for more information"


class InvalidArgumentError(ParseError):
    code = FaultCode.INVALID_ARGUMENT
    title = "invalid argument"


class MissingSubArgumentError(ParseError):
    code = FaultCode.MISSING_SUBARGUMENT
    title = "missing argument"


class ValidationFailedError(ParseError):
    code = FaultCode.VALIDATION_FAILED
    title = "validation failed"


class MandatoryOptionMissingError(ParseError):
    code = FaultCode.MANDATORY_OPTION_MISSING
    title = "mandatory parameter"


class LookupFault(OptionException):
    hint = ""


class UnknownArgumentError(LookupFault, LookupError):
    code = FaultCode.UNKNOWN_ARGUMENT
    title = "unknown argument"


class OptionNotFoundError(LookupFault, LookupError):
    code = FaultCode.OPTION_NOT_FOUND
    title = "option not found"


class ConfigurationError(OptionException, ValueError):
    hint = ""


class DuplicateAliasError(ConfigurationError):
    code = FaultCode.DUPLICATE_ALIAS
    title = "duplicate alias"


class DuplicateArgumentError(ConfigurationError):
    code = FaultCode.DUPLICATE_ARGUMENT
    title = "duplicate argument"


class ReservedAliasError(ConfigurationError):
    code = FaultCode.RESERVED_ALIAS
    title = "reserved alias"


__all__ = (
    "FaultCode",
    "OptionException",
    "ParseError",
    "InvalidArgumentError",
    "MissingSubArgumentError",
    "ValidationFailedError",
    "MandatoryOptionMissingError",
    "LookupFault",
    "UnknownArgumentError",
    "OptionNotFoundError",
    "ConfigurationError",
    "DuplicateAliasError",
    "DuplicateArgumentError",
    "ReservedAliasError",
)
