"""
Option registry and per-parse bindings.

Storage
- Options live in an append-only arena (a list); an option's handle is its index and
  never changes, so the alias index (alias → handle) stays valid as options are added.
- Registration is setup-time only: aliases are checked against every alias already
  indexed and against the reserved help aliases before anything is stored.

Bindings
- Parsing state (the "provided" marker and bound sub-argument values) is kept apart
  from the declarations in a Bindings object keyed by handle. The parser installs a
  fresh Bindings at the start of each parse, so consecutive parses never leak values
  into each other.
- lookup(alias) returns a Binding: a read-only view joining the declaration with the
  state of the latest parse. Before any parse every value reads as "".
"""
from types import MappingProxyType

from .faults import *
from .options import Option

HELP_ALIASES = ("--help", "-h", "/?")


class _Slot:
    __slots__ = ("provided", "values")

    def __init__(self, option):
        self.provided = False
        self.values = dict.fromkeys((argument.id for argument in option.arguments), "")


class Bindings:
    """
    Run state of one parse: handle → slot(provided, values).

    Slots are created on first access, which also covers options registered after
    the bindings were installed.
    """
    __slots__ = ("_options", "_slots")

    def __init__(self, options, /):
        self._options = options
        self._slots = {}

    def slot(self, handle, /):
        try:
            return self._slots[handle]
        except KeyError:
            return self._slots.setdefault(handle, _Slot(self._options[handle]))

    def binding(self, handle, /):
        return Binding(self._options[handle], self.slot(handle))


class Binding:
    """
    Read-only view of an Option together with its state from the latest parse.

    Validators receive a Binding; callers obtain one through Registry.lookup().
    """
    __slots__ = ("_option", "_slot")

    def __init__(self, option, slot, /):
        self._option = option
        self._slot = slot

    @property
    def option(self):
        return self._option

    @property
    def name(self):
        return self._option.name

    @property
    def aliases(self):
        return self._option.aliases

    @property
    def descr(self):
        return self._option.descr

    @property
    def mandatory(self):
        return self._option.mandatory

    @property
    def arguments(self):
        return self._option.arguments

    @property
    def provided(self):
        """True once the option matched, its sub-arguments were bound and its validator accepted them."""
        return self._slot.provided

    @property
    def satisfied(self):
        """True if the option is optional or was provided."""
        return not self._option.mandatory or self._slot.provided

    @property
    def values(self):
        return MappingProxyType(self._slot.values)

    def value(self, id, /):
        """
        Return the value bound to sub-argument `id` ("" when nothing was bound).

        Raises
        - UnknownArgumentError: when `id` is not declared by the option.
        """
        self._option.argument(id)
        return self._slot.values[id]

    def __repr__(self):
        return "Binding(%r, provided=%r, values=%r)" % (self._option.name, self._slot.provided, self._slot.values)


class Registry:
    """
    Owns the registered Options and the alias index.

    Operations
    - register(option) / register_all(options): setup-time insertion.
    - lookup(alias) (or registry[alias]): Binding for the option owning `alias`.
    - alias in registry, len(registry), iter(registry) over the declared Options.
    """

    def __init__(self):
        self._options = []
        self._aliases = {}
        self._bindings = Bindings(self._options)

    @property
    def options(self):
        return tuple(self._options)

    def _admit(self, options):
        """
        check a batch of options against the index and against each other.

        nothing is stored: callers index the batch only once every option passed.
        """
        taken = {}
        for option in options:
            if not isinstance(option, Option):
                raise TypeError("register() argument must be an Option")
            for alias in option.aliases:
                if alias in HELP_ALIASES:
                    raise ReservedAliasError(
                        "alias %r is reserved for help" % alias,
                        alias=alias,
                    )
                if alias in self._aliases:
                    owner = self._options[self._aliases[alias]].name
                elif alias in taken:
                    owner = taken[alias]
                else:
                    taken[alias] = option.name
                    continue
                raise DuplicateAliasError(
                    "alias %r of option %r is already registered by option %r" % (alias, option.name, owner),
                    alias=alias,
                )

    def register(self, option, /):
        """
        Append `option` and index all of its aliases.

        Raises
        - TypeError: when `option` is not an Option.
        - ReservedAliasError: when an alias is one of the help aliases.
        - DuplicateAliasError: when an alias is already registered (nothing is stored).

        Returns the option, so declarations can be registered inline.
        """
        self._admit((option,))
        handle = len(self._options)
        self._options.append(option)
        for alias in option.aliases:
            self._aliases[alias] = handle
        return option

    def register_all(self, options, /):
        """
        Register every option of `options` in order.

        The batch is all-or-nothing: when any option is rejected, none is stored.
        """
        options = tuple(options)
        self._admit(options)
        for option in options:
            self.register(option)

    def lookup(self, alias, /):
        """
        Return the Binding of the option registered under `alias`.

        Raises
        - OptionNotFoundError: when `alias` is not registered.
        """
        try:
            handle = self._aliases[alias]
        except (KeyError, TypeError):
            raise OptionNotFoundError(
                "option %r not found" % (alias,),
                alias=alias,
            ) from None
        return self._bindings.binding(handle)

    def __getitem__(self, alias, /):
        return self.lookup(alias)

    def __contains__(self, alias, /):
        try:
            return alias in self._aliases
        except TypeError:
            return False

    def __iter__(self):
        return iter(tuple(self._options))

    def __len__(self):
        return len(self._options)


__all__ = (
    "HELP_ALIASES",
    "Registry",
    "Bindings",
    "Binding",
)
