"""Description of interleaved vertex buffer layouts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from rendercore.enums import ElementType, element_count, element_size

__all__ = ["BufferElement", "BufferLayout"]


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class BufferElement:
    """One attribute inside a vertex buffer."""

    name: str
    type: ElementType
    normalized: bool = False
    offset: int = 0
    count: int = field(init=False)
    nbytes: int = field(init=False)

    def __post_init__(self) -> None:
        self.count = element_count(self.type)
        self.nbytes = element_size(self.type)

    def __str__(self) -> str:
        return (
            "<BufferElement\n"
            f"  name: {self.name}\n"
            f"  type: {self.type}\n"
            f"  count: {self.count}\n"
            f"  nbytes: {self.nbytes}\n"
            f"  offset: {self.offset}\n"
            f"  normalized: {_flag(self.normalized)}\n"
            ">\n"
        )


class BufferLayout:
    """Ordered elements with offsets packed one after another."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements: list[BufferElement] = []
        self._stride = 0
        for element in elements:
            self.add_element(element)

    @property
    def stride(self) -> int:
        """Total bytes taken by one vertex."""
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return tuple(self._elements)

    def add_element(self, element: BufferElement) -> None:
        """Append an element, placing it right after the previous ones."""
        placed = replace(element, offset=self._stride)
        self._stride += placed.nbytes
        self._elements.append(placed)

    def __getitem__(self, index: int) -> BufferElement:
        if not 0 <= index < len(self._elements):
            raise IndexError(
                f"BufferLayout> index {index} out of range [0-{len(self._elements)})"
            )
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __str__(self) -> str:
        lines = [
            f"  [name={e.name}, type={e.type}, count={e.count}, nbytes={e.nbytes}, "
            f"offset={e.offset}, normalized={_flag(e.normalized)}]\n"
            for e in self._elements
        ]
        return "<BufferLayout({\n" + "".join(lines) + "})>\n"