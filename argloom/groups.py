"""
Mutually exclusive option groups.

A Group is a named, ordered set of option keys of which at most one may be set.
A mandatory group additionally requires at least one member to be set. The
mandatory flag is a one-way ratchet: it is read-only and only promote() changes
it, always to True.

Each option key belongs to at most one group; GroupRegistry.insert refuses a
key already owned by another group.
"""
from .kinds import OptionKey
from .utils import mirror


class Group:
    __slots__ = ("_name", "_members", "_mandatory")

    name = mirror("name")
    members = mirror("members")

    def __init__(self, name, mandatory=False):
        self._name = name
        self._members = []
        self._mandatory = bool(mandatory)

    @property
    def mandatory(self):
        return self._mandatory

    def promote(self):
        """make the group mandatory; there is no way back."""
        self._mandatory = True

    def __contains__(self, key):
        return key in self._members

    def __iter__(self):
        return iter(tuple(self._members))

    def __len__(self):
        return len(self._members)

    def __repr__(self):
        return "Group(%r, members=%r, mandatory=%r)" % (self._name, self._members, self._mandatory)


class GroupRegistry:
    """
    mutually exclusive groups by name, in creation order.
    """

    def __init__(self):
        self._groups = {}
        self._owners = {}

    def add_group(self, name, mandatory=False):
        """create a group; False when the name is empty or already taken."""
        if not isinstance(name, str):
            raise TypeError("group name must be a string")
        if not name or name in self._groups:
            return False
        self._groups[name] = Group(name, mandatory)
        return True

    def insert(self, name, key):
        """
        add `key` to group `name`.

        False when the group does not exist or the key already belongs to a
        different group; re-inserting a key into its own group is a no-op.
        """
        key = OptionKey.of(key)
        if (group := self._groups.get(name)) is None:
            return False
        if (owner := self._owners.get(key)) is not None:
            return owner == name
        group._members.append(key)
        self._owners[key] = name
        return True

    def promote(self, name):
        """make group `name` mandatory; False when it does not exist."""
        if (group := self._groups.get(name)) is None:
            return False
        group.promote()
        return True

    def get(self, name):
        return self._groups.get(name)

    def group_of(self, key):
        """the group owning `key`, or None."""
        if (name := self._owners.get(OptionKey.of(key))) is None:
            return None
        return self._groups[name]

    def is_key_in_any_group(self, key):
        return OptionKey.of(key) in self._owners

    def missing(self, is_set):
        """mandatory groups where no member is set, per the `is_set(key)` predicate."""
        return [group for group in self._groups.values() if group.mandatory and not any(map(is_set, group))]

    def conflicts(self, is_set):
        """groups where more than one member is set, per the `is_set(key)` predicate."""
        return [group for group in self._groups.values() if sum(map(is_set, group)) > 1]

    def __contains__(self, name):
        return name in self._groups

    def __iter__(self):
        return iter(self._groups.values())

    def __len__(self):
        return len(self._groups)


__all__ = (
    "Group",
    "GroupRegistry",
)
