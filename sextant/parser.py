"""
Sextant parsing engine.

What this module provides
- Parser: a Registry that walks an argument vector, binds sub-argument values,
  enforces mandatory options and renders its help document.
- ParseResult: outcome of a parse; callers branch their exit behavior on it.

Quick start
    from sextant import Parser, Option, Argument, ParseResult

    parser = Parser("Sample Application", "9.9.9.9", "This is a sample application.")
    parser.register(Option("--mandatory", descr="Two values.", arguments=["arg1", "arg2"]))

    if parser.parse(["--mandatory", "foo", "bar"]) == ParseResult.OK:
        print(parser.lookup("--mandatory").value("arg1"))

Parsing rules
- A single forward pass; an option is recognized by exact match of a token against
  an alias. Help aliases (--help, -h, /?) stop everything and print the help.
- Sub-arguments are consumed positionally, one token each, in declaration order.
  Consumed tokens are opaque values: they are never looked up as aliases, so "-v"
  can be the value of a sub-argument.
- The first problem ends the parse: it is reported to the error console, recorded
  as parser.fault and turned into a ParseResult. Values already bound stay bound.
- Mandatory options are checked in registration order after the whole vector
  was consumed.
"""
import shlex
import sys
from collections.abc import Iterable
from enum import IntEnum

from rich.console import Console
from rich.text import Text

from .faults import *
from .formatter import DEFAULT_WIDTH, render
from .registry import HELP_ALIASES, Bindings, Registry
from .utils import *


class ParseResult(IntEnum):
    """outcome of Parser.parse()."""
    OK                  = 0
    HELP_REQUESTED      = 1
    FAILED              = -2
    FAILED_VALIDATION   = -3


def _tokenize(prompt):
    """
    normalize a prompt into a list of tokens.

    - Unset: sys.argv[1:].
    - str: shell-like string, split with shlex.split.
    - Iterable[str]: used verbatim (no trimming, empty tokens kept).
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("parse() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("parse() argument must be a string or an iterable of strings")


class Parser(Registry):
    """
    Option registry with parsing and help rendering.

    Parameters
    - program: str, shown in the help header (the header is omitted when empty).
    - version: str, right-aligned next to the program name.
    - descr: str, wrapped under the header (tabs in program, version and descr are
      expanded to spaces).
    - width: int >= 10, total columns of the help document (default 80).
    - stdout / stderr: rich Consoles receiving the help and the faults (defaults to
      the process streams).
    - colorful: style rendered faults with the palette (overridable through __styles__ in __main__).
    """

    def __init__(
            self,
            program="",
            version="",
            descr="",
            *,
            width=DEFAULT_WIDTH,
            stdout=Unset,
            stderr=Unset,
            colorful=False,
    ):
        super().__init__()
        for field, value in (("program", program), ("version", version), ("descr", descr)):
            if not isinstance(value, str):
                raise TypeError("Parser() %s must be a string" % field)
        if not isinstance(width, int) or isinstance(width, bool):
            raise TypeError("Parser() width must be an integer")
        if width < 10:
            raise ValueError("Parser() width must be at least 10 columns")
        for field, value in (("stdout", stdout), ("stderr", stderr)):
            if value is not Unset and not isinstance(value, Console):
                raise TypeError("Parser() %s must be a rich console" % field)
        if not isinstance(colorful, bool):
            raise TypeError("Parser() colorful must be a boolean")

        self._program = program.expandtabs()
        self._version = version.expandtabs()
        self._descr = descr.expandtabs()
        self._width = width
        self._stdout = coalesce(stdout, Console(highlight=False))
        self._stderr = coalesce(stderr, Console(stderr=True, highlight=False))
        self._colorful = colorful
        self._fault = None
        self._result = Unset

    program = readonly("program")
    version = readonly("version")
    descr = readonly("descr")
    width = readonly("width")
    stdout = readonly("stdout")
    stderr = readonly("stderr")
    colorful = readonly("colorful")

    @property
    def fault(self):
        """Fault reported by the latest parse, or None."""
        return self._fault

    @property
    def result(self):
        """ParseResult of the latest parse (Unset before the first one)."""
        return self._result

    def help(self):
        """Return the rendered help document."""
        return render(self)

    def trigger(self, fault, /):
        """record `fault` as the outcome of the current parse and print it to the error console."""
        self._fault = fault
        self._stderr.print(fault, soft_wrap=True)

    def _fail(self, type, message, /, **options):
        self.trigger(type(message, program=self._program, colorful=self._colorful, **options))

    def parse(self, prompt=Unset, /):
        """
        Parse `prompt` (sys.argv[1:] by default) against the registered options.

        Returns
        - ParseResult.HELP_REQUESTED as soon as a help alias is met (help printed).
        - ParseResult.FAILED on an unknown token, a missing sub-argument or a missing
          mandatory option.
        - ParseResult.FAILED_VALIDATION when a validator rejects its option.
        - ParseResult.OK otherwise.

        Every call starts from fresh bindings; lookup() reads the state left by the
        latest call, including values bound before a failure.
        """
        tokens = _tokenize(prompt)
        self._bindings = bindings = Bindings(self._options)
        self._fault = None
        self._result = result = self._parseargs(tokens, bindings)
        return result

    def _parseargs(self, tokens, bindings):
        index = 0
        while index < len(tokens):
            token = tokens[index]

            if token in HELP_ALIASES:
                self._stdout.print(Text(self.help()), soft_wrap=True)
                return ParseResult.HELP_REQUESTED

            try:
                handle = self._aliases[token]
            except KeyError:
                self._fail(
                    InvalidArgumentError,
                    "Invalid argument '%s'" % token,
                    token=token,
                    index=index,
                )
                return ParseResult.FAILED

            option = self._options[handle]
            slot = bindings.slot(handle)

            for argument in option.arguments:
                if index + 1 >= len(tokens):
                    self._fail(
                        MissingSubArgumentError,
                        "Missing argument '%s' for parameter '%s'" % (argument.id, token),
                        token=token,
                        argument=argument.id,
                    )
                    return ParseResult.FAILED
                index += 1
                slot.values[argument.id] = tokens[index]

            if option.validator is not Unset and not option.validator(bindings.binding(handle)):
                self._fail(
                    ValidationFailedError,
                    "Validation failed for parameter '%s'" % token,
                    token=token,
                )
                return ParseResult.FAILED_VALIDATION

            slot.provided = True
            index += 1

        for handle, option in enumerate(self._options):
            if not bindings.binding(handle).satisfied:
                self._fail(
                    MandatoryOptionMissingError,
                    "Mandatory parameter '%s' not provided" % option.name,
                    alias=option.name,
                )
                return ParseResult.FAILED

        return ParseResult.OK


__all__ = (
    "HELP_ALIASES",
    "ParseResult",
    "Parser",
)
