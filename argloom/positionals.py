"""
Positional argument slots.

The slot count fixed by register() calls is exactly the number of positional
values the loader fills, in order of appearance. Slots are only ever appended.
"""
from .faults import FaultCode, PositionalIndexError


class PositionalSlot:
    __slots__ = ("value", "name")

    def __init__(self, name, value=""):
        self.name = name
        self.value = value

    def __repr__(self):
        return "PositionalSlot(%r, value=%r)" % (self.name, self.value)


class PositionalRegistry:

    def __init__(self):
        self._slots = []
        self.filled = 0

    def register(self, count, names=()):
        """
        append `count` empty slots; slot i takes names[i] or the placeholder ARG_<i+1>.
        """
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise TypeError("positional count must be a non-negative integer")
        names = list(names)
        for index in range(count):
            self._slots.append(PositionalSlot(names[index] if index < len(names) else "ARG_%d" % (index + 1)))

    def fill(self, value):
        """
        write `value` into the next free slot; False when every slot is taken.
        """
        if self.filled >= len(self._slots):
            return False
        self._slots[self.filled].value = value
        self.filled += 1
        return True

    @property
    def names(self):
        return tuple(slot.name for slot in self._slots)

    def __getitem__(self, index):
        # negative indices are out of range: positions are counted from the first slot
        if not isinstance(index, int) or not 0 <= index < len(self._slots):
            raise PositionalIndexError(
                "positional argument index %r out of range" % (index,),
                title="positional out of range",
                code=FaultCode.POSITIONAL_OUT_OF_RANGE,
                index=index,
                hint="valid indices are 0 to %d" % (len(self._slots) - 1) if self._slots else "no positional arguments are declared",
            )
        return self._slots[index]

    def __iter__(self):
        return iter(tuple(self._slots))

    def __len__(self):
        return len(self._slots)


__all__ = (
    "PositionalSlot",
    "PositionalRegistry",
)
