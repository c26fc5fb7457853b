"""
Record model for mesh description files.

Records are frozen once parsed: every sequence field is a tuple, and the
parsers build a fresh record for each block they emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union


class RecordKind(Enum):
    """Which record family a merge run reads and writes."""

    ELEMENT = "element"
    NODE = "node"

    @property
    def stopper(self) -> str:
        """Keyword that ends the free-text header of a file of this kind."""
        return "Element" if self is RecordKind.ELEMENT else "Node"


@dataclass(frozen=True)
class Node:
    """
    A node record.

    Attributes:
        id: Node number from the ``Node:`` line.
        values: Field values in file order.
    """
    id: int
    values: Tuple[float, ...] = ()


@dataclass(frozen=True)
class Element:
    """
    An element record.

    Attributes:
        id: Composite key; one element may carry several numeric identifiers.
        values: Numbers from the ``Values:`` section.
        nodes: Node references from the ``Nodes:`` section.
        scale: Numbers from the ``Scale factors:`` section.
    """
    id: Tuple[int, ...]
    values: Tuple[float, ...] = ()
    nodes: Tuple[int, ...] = ()
    scale: Tuple[float, ...] = ()


Record = Union[Node, Element]


# ---------- Proximity comparison ----------

def close_enough(v1: float, v2: float, precision: float) -> bool:
    """True when two floats are within ``precision`` of each other."""
    return abs(v1 - v2) <= precision


def floats_equivalent(a: Sequence[float], b: Sequence[float], precision: float) -> bool:
    if len(a) != len(b):
        return False
    return all(close_enough(x, y, precision) for x, y in zip(a, b))


def nodes_equivalent(n1: Node, n2: Node, precision: float) -> bool:
    return n1.id == n2.id and floats_equivalent(n1.values, n2.values, precision)


def elements_equivalent(e1: Element, e2: Element, precision: float) -> bool:
    return (
        tuple(e1.id) == tuple(e2.id)
        and tuple(e1.nodes) == tuple(e2.nodes)
        and floats_equivalent(e1.values, e2.values, precision)
        and floats_equivalent(e1.scale, e2.scale, precision)
    )


def records_equivalent(
    left: Sequence[Record], right: Sequence[Record], precision: float
) -> bool:
    """
    Compare two record lists position by position.

    Integers must match exactly; floats are compared with ``close_enough``.
    Callers are expected to pass lists that have already been sorted.
    """
    if len(left) != len(right):
        return False

    for a, b in zip(left, right):
        if isinstance(a, Node) and isinstance(b, Node):
            if not nodes_equivalent(a, b, precision):
                return False
        elif isinstance(a, Element) and isinstance(b, Element):
            if not elements_equivalent(a, b, precision):
                return False
        else:
            return False
    return True
