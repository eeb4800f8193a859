"""Slot storage addressed by generational ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

__all__ = ["GenerationalId", "GenerationalStorage"]

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """A slot index paired with the generation it was issued for."""

    index: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """Stores values in reusable slots; stale ids never reach newer values."""

    def __init__(self) -> None:
        self._cells: list[Optional[_Cell[T]]] = []
        self._free: list[tuple[int, int]] = []

    def push(self, data: T) -> GenerationalId:
        """Store data and return its id, reusing the last freed slot if any."""
        if self._free:
            index, old_generation = self._free.pop()
            if self._cells[index] is not None:
                raise RuntimeError(f"free slot {index} is occupied")
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            generation = 0
            self._cells.append(_Cell(generation, data))
            index = len(self._cells) - 1
        return GenerationalId(index, generation)

    def _cell(self, gen_id: GenerationalId) -> Optional[_Cell[T]]:
        if not 0 <= gen_id.index < len(self._cells):
            return None
        cell = self._cells[gen_id.index]
        if cell is None or cell.generation != gen_id.generation:
            return None
        return cell

    def get(self, gen_id: GenerationalId) -> Optional[T]:
        """The value stored under gen_id, or None if the id is stale or unknown."""
        cell = self._cell(gen_id)
        return None if cell is None else cell.state

    def replace(self, gen_id: GenerationalId, data: T) -> None:
        """Replace the value under gen_id; raise KeyError if the id is stale."""
        cell = self._cell(gen_id)
        if cell is None:
            raise KeyError(gen_id)
        cell.state = data

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Free every value for which predicate returns false, in slot order."""
        for index, cell in enumerate(self._cells):
            if cell is None:
                continue
            if not predicate(cell.state):
                self._free.append((index, cell.generation))
                self._cells[index] = None

    def count(self) -> int:
        """Number of live values."""
        return sum(1 for cell in self._cells if cell is not None)

    def __len__(self) -> int:
        return self.count()

    def clear(self) -> None:
        """Drop every value and forget all slots."""
        self._cells.clear()
        self._free.clear()

    def free(self, gen_id: GenerationalId) -> None:
        """Release the slot of gen_id; stale or unknown ids are ignored."""
        if self._cell(gen_id) is None:
            return
        self._free.append((gen_id.index, gen_id.generation))
        self._cells[gen_id.index] = None