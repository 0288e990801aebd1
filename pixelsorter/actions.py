"""
Queued animation actions.

An Action describes one comparison, pivot selection or swap performed by a
sorting algorithm. The algorithm runs to completion up front and fills an
ActionQueue; the animation engine then plays the queue back one stage per
tick. Each action counts its stage down from its kind's total to zero.
"""
from collections import deque
from enum import Enum


class ActionKind(Enum):
    SWAP    = "swap"
    PIVOT   = "pivot"
    COMPARE = "compare"


# Stages each kind of action takes to play back.
STAGE_COUNTS = {
    ActionKind.SWAP:    10,
    ActionKind.PIVOT:   2,
    ActionKind.COMPARE: 2,
}


class Action:
    """
    One animation operation.

    Attributes
    ----------
    kind         : ActionKind
    index_a      : int  — first array position
    index_b      : int  — second array position (0 for pivots)
    total_stages : int  — playback length, fixed by kind
    stage        : int  — counts down from total_stages; 0 means finished
    """
    __slots__ = ('kind', 'index_a', 'index_b', 'total_stages', '_stage')

    def __init__(self, kind: ActionKind, index_a: int, index_b: int = 0,
                 stage_counts=None):
        table = STAGE_COUNTS if stage_counts is None else stage_counts
        self.kind         = kind
        self.index_a      = index_a
        self.index_b      = index_b
        self.total_stages = table[kind]
        self._stage       = self.total_stages

    @classmethod
    def swap(cls, a, b, stage_counts=None):
        return cls(ActionKind.SWAP, a, b, stage_counts)

    @classmethod
    def pivot(cls, a, stage_counts=None):
        return cls(ActionKind.PIVOT, a, 0, stage_counts)

    @classmethod
    def compare(cls, a, b, stage_counts=None):
        return cls(ActionKind.COMPARE, a, b, stage_counts)

    @property
    def stage(self) -> int:
        return self._stage

    @property
    def finished(self) -> bool:
        return self._stage <= 0

    def advance(self) -> bool:
        """Move to the next stage. Returns True once the last stage is done."""
        if self._stage > 0:
            self._stage -= 1
        return self._stage <= 0

    def __eq__(self, other):
        if not isinstance(other, Action):
            return NotImplemented
        return (self.kind, self.index_a, self.index_b) == \
               (other.kind, other.index_a, other.index_b)

    def __hash__(self):
        return hash((self.kind, self.index_a, self.index_b))

    def __repr__(self):
        if self.kind is ActionKind.PIVOT:
            args = f"{self.index_a}"
        else:
            args = f"{self.index_a}, {self.index_b}"
        return f"{self.kind.name}({args}) [{self._stage}/{self.total_stages}]"


class ActionQueue:
    """
    FIFO of pending actions. Algorithms append at the back; the engine
    peeks and pops the front.
    """

    def __init__(self):
        self._items = deque()

    def append(self, action: Action):
        self._items.append(action)

    # algorithms take any callable sink; the queue itself is one
    __call__ = append

    def peek(self):
        return self._items[0] if self._items else None

    def pop(self) -> Action:
        return self._items.popleft()

    def clear(self):
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)
