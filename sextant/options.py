r"""
Sextant option declarations.

Overview
- Argument: one positional sub-argument consumed after an option alias ({id} + description).
- Option: one recognized flag: its aliases (first is canonical), description, mandatory
  marker, ordered sub-arguments and an optional validator.
- Validator: capability interface with a single check(binding) operation. A plain
  callable handed to Option(validator=...) is wrapped automatically.

- Decorators
  • @validator: turn a function into a Validator.
  • @option(...): build an Option whose validator is the decorated function.

Declarations are immutable once built. The values bound by a parse and the "provided"
marker live in the registry's per-parse bindings, never on the Option itself, so one
declaration can serve any number of parses.

Validation highlights
- Aliases and argument ids are non-empty strings without whitespace.
- Aliases are unique within an Option (ValueError); argument ids are unique within an
  Option (DuplicateArgumentError).
- Descriptions are strings (default ""); tabs are expanded to spaces so the help
  document counts columns the same way the console prints them.

Quick example:
    >>> from sextant import Argument, Option
    >>> Option("--mandatory", descr="Expects two values.",
    ...        arguments=[Argument("arg1", "The argument 1."), "arg2"])
"""
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .faults import DuplicateArgumentError, UnknownArgumentError
from .utils import *


def _token(owner, field, value):
    if not isinstance(value, str):
        raise TypeError("%s() %s must be a string" % (owner, field))
    if not value or re.search(r"\s", value):
        raise ValueError("%s() %s must be a non-empty string without whitespace, got %r" % (owner, field, value))
    return value


class Argument:
    """
    Declaration of one sub-argument: a value consumed positionally after an alias.

    Fields
    - id: str, identity within the owning Option (used by Binding.value(id)).
    - descr: str, shown in help as "{id} => descr".
    """
    __slots__ = ("_id", "_descr")

    def __init__(self, id, /, descr=""):
        self._id = _token("Argument", "id", id)
        if not isinstance(descr, str):
            raise TypeError("Argument() descr must be a string")
        self._descr = descr.expandtabs()

    id = readonly("id")
    descr = readonly("descr")

    def __repr__(self):
        return "Argument(%r, %r)" % (self._id, self._descr)

    def __rich_repr__(self):
        yield self._id
        yield "descr", self._descr, ""


class Validator(ABC):
    """
    Capability interface invoked by the parser once all sub-arguments of an option
    are bound. check() receives the option's Binding (bound values are readable
    through binding.value(id)) and returns a truthy value to accept it.
    """

    @abstractmethod
    def check(self, binding, /):
        raise NotImplementedError

    def __call__(self, binding, /):
        return bool(self.check(binding))


class FunctionValidator(Validator):
    """Validator backed by a plain callable."""
    __slots__ = ("_function",)

    def __init__(self, function, /):
        if not callable(function):
            raise TypeError("FunctionValidator() argument must be callable")
        self._function = function

    function = readonly("function")

    def check(self, binding, /):
        return self._function(binding)

    def __repr__(self):
        return "FunctionValidator(%s)" % getattr(self._function, "__qualname__", repr(self._function))


def validator(function, /):
    """
    Wrap a callable into a Validator (usable as a decorator).

    Validators are returned unchanged.
    """
    if isinstance(function, Validator):
        return function
    return FunctionValidator(function)


class Option:
    """
    Declaration of one recognized flag.

    Fields
    - aliases: tuple[str, ...], at least one; the first is canonical (see name).
    - descr: str, help text.
    - mandatory: bool, parse fails when a mandatory option is absent (default True).
    - arguments: tuple[Argument, ...], consumed in declaration order after the alias.
    - validator: Validator | Unset.
    """
    __slots__ = ("_aliases", "_descr", "_mandatory", "_arguments", "_indexes", "_validator")

    def __init__(self, *aliases, descr="", mandatory=True, arguments=(), validator=Unset):
        if not aliases:
            raise TypeError("Option() requires at least one alias")
        aliases = [_token("Option", "alias", alias) for alias in aliases]
        if len(set(aliases)) != len(aliases):
            raise ValueError("Option() aliases must be unique, got %r" % (tuple(aliases),))

        if not isinstance(descr, str):
            raise TypeError("Option() descr must be a string")
        if not isinstance(mandatory, bool):
            raise TypeError("Option() mandatory must be a boolean")
        if isinstance(arguments, str) or not isinstance(arguments, Iterable):
            raise TypeError("Option() arguments must be an iterable of Argument or strings")

        declared = []
        indexes = {}
        for argument in arguments:
            if isinstance(argument, str):
                argument = Argument(argument)
            elif not isinstance(argument, Argument):
                raise TypeError("Option() arguments must be an iterable of Argument or strings")
            if indexes.setdefault(argument.id, len(declared)) != len(declared):
                raise DuplicateArgumentError(
                    "argument %r is declared twice for option %r" % (argument.id, aliases[0]),
                    argument=argument.id,
                    alias=aliases[0],
                )
            declared.append(argument)

        if validator is not Unset:
            if not callable(validator):
                raise TypeError("Option() validator must be a Validator or a callable")
            if not isinstance(validator, Validator):
                validator = FunctionValidator(validator)

        self._aliases = tuple(aliases)
        self._descr = descr.expandtabs()
        self._mandatory = mandatory
        self._arguments = tuple(declared)
        self._indexes = indexes
        self._validator = validator

    aliases = readonly("aliases")
    descr = readonly("descr")
    mandatory = readonly("mandatory")
    arguments = readonly("arguments")
    validator = readonly("validator")

    @property
    def name(self):
        """Canonical alias (the first one declared)."""
        return self._aliases[0]

    def argument(self, id, /):
        """
        Return the declared Argument named `id`.

        Raises
        - UnknownArgumentError: when `id` is not a sub-argument of this option.
        """
        try:
            return self._arguments[self._indexes[id]]
        except (KeyError, TypeError):
            raise UnknownArgumentError(
                "invalid argument %r for option %r" % (id, self.name),
                argument=id,
                alias=self.name,
            ) from None

    def __repr__(self):
        return "Option(%s, descr=%r, mandatory=%r, arguments=%r)" % (
            ", ".join(map(repr, self._aliases)), self._descr, self._mandatory, self._arguments,
        )

    def __rich_repr__(self):
        yield from self._aliases
        yield "descr", self._descr, ""
        yield "mandatory", self._mandatory, True
        yield "arguments", self._arguments, ()
        yield "validator", self._validator, Unset


def option(*aliases, **metadata):
    """
    Build an Option whose validator is the decorated function.

    The function receives the option's Binding once its sub-arguments are bound and
    returns a truthy value to accept them. Returns the Option (ready to register).

        @option("-v", "--version", descr="Shows the version.", mandatory=False)
        def version(binding):
            ...
            return True
    """
    if "validator" in metadata:
        raise TypeError("@option() takes its validator from the decorated function")

    def wrapper(function, /):
        if not callable(function):
            raise TypeError("@option() must be applied to a callable")
        return Option(*aliases, **metadata, validator=function)

    return wrapper


__all__ = (
    "Argument",
    "Option",
    "Validator",
    "FunctionValidator",
    "validator",
    "option",
)
