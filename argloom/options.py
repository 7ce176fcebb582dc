"""
Option registry.

OptionSpec holds the state of one declared option: its raw text value, kind,
"is set" flag, default flag and description. OptionRegistry owns the specs,
keyed by OptionKey, keeps the mandatory set and resolves names to specs.

Registration never raises on a bad declaration: it returns False and leaves the
registry untouched, so the host decides whether to proceed.
"""
from .kinds import OptionKey, OptionKind, Requirement, Default


class OptionSpec:
    """
    state of a declared option.

    invariant: a spec registered with a default starts with is_set=True and its
    value holding the default text. for OptionKind.BOOL only is_set matters.
    """
    __slots__ = ("value", "kind", "is_set", "has_default", "description", "_default")

    def __init__(self, kind, description="", default=Default()):
        self.kind = OptionKind(kind)
        self.description = description
        self.value = default.text
        self.is_set = default.present
        self.has_default = default.present
        self._default = default.text

    @property
    def default(self):
        """the default text, or None when the option has no default."""
        return self._default if self.has_default else None

    def __repr__(self):
        return "OptionSpec(kind=%s, value=%r, is_set=%r, has_default=%r)" % (
            self.kind.name, self.value, self.is_set, self.has_default
        )


class OptionRegistry:
    """
    declared options, keyed by OptionKey, in registration order.

    lookups go through an alias index mapping every short and long name to its
    key; a name can belong to a single key, so lookups never alias two options.
    """

    def __init__(self, groups):
        self._groups = groups
        self._options = {}
        self._aliases = {}
        self._mandatory = {}

    def register(self, key, requirement, kind, description="", group_name="", default=Default()):
        """
        declare an option; returns True when it was stored.

        fails (False, nothing stored) when
        - the key is empty,
        - requirement is INHERIT_GROUP without a group,
        - the key, or one of its names, is already registered,
        - the group does not exist or refuses the key.

        on success a REQUIRED option joins the mandatory set and promotes its
        group; any member of a mandatory group joins the mandatory set.
        """
        key = OptionKey.of(key)
        requirement = Requirement(requirement)
        default = Default.of(default)

        if key.empty:
            return False
        if requirement is Requirement.INHERIT_GROUP and not group_name:
            return False
        if key in self._options or any(name in self._aliases for name in key.names):
            return False

        group = None
        if group_name:
            if (group := self._groups.get(group_name)) is None:
                return False
            if not self._groups.insert(group_name, key):
                return False

        self._options[key] = OptionSpec(kind, description, default)
        for name in key.names:
            self._aliases[name] = key

        if requirement is Requirement.REQUIRED:
            self._mandatory[key] = None
            if group is not None:
                group.promote()

        if group is not None and group.mandatory:
            self._mandatory[key] = None

        return True

    def key_of(self, name):
        """the key whose short or long name is exactly `name`, or None."""
        return self._aliases.get(name)

    def find(self, name):
        """the spec whose short or long name is exactly `name`, or None."""
        if (key := self._aliases.get(name)) is None:
            return None
        return self._options[key]

    def has(self, name):
        return name in self._aliases

    def is_set(self, name):
        """
        True when `name` is registered and set; accepts a name or an OptionKey.
        """
        if isinstance(name, OptionKey):
            spec = self._options.get(name)
        else:
            spec = self.find(name)
        return spec is not None and spec.is_set

    def spec(self, key):
        """the spec stored under an exact key, or None."""
        return self._options.get(OptionKey.of(key))

    def is_mandatory(self, key):
        return OptionKey.of(key) in self._mandatory

    @property
    def names(self):
        """every registered short and long name."""
        return tuple(self._aliases)

    @property
    def mandatory(self):
        """mandatory keys in the order they became mandatory."""
        return tuple(self._mandatory)

    def __contains__(self, key):
        return key in self._options

    def __iter__(self):
        return iter(self._options.items())

    def __len__(self):
        return len(self._options)


__all__ = (
    "OptionSpec",
    "OptionRegistry",
)
