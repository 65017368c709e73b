# ballistics/editor/history.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from ballistics import settings
from ballistics.world.grid import GridSnapshot

@dataclass
class History:
    """Undo/redo stacks of immutable grid snapshots.

    record() is called with the state *before* an edit; undo()/redo() take the
    current state so it can be pushed onto the opposite stack.
    """
    limit: int = settings.HISTORY_LIMIT
    _undo: deque[GridSnapshot] = field(init=False)
    _redo: list[GridSnapshot] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self._undo = deque(maxlen=self.limit)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record(self, before: GridSnapshot) -> None:
        self._undo.append(before)
        self._redo.clear()

    def undo(self, current: GridSnapshot) -> Optional[GridSnapshot]:
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: GridSnapshot) -> Optional[GridSnapshot]:
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()
