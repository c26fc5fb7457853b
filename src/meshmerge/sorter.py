"""
Deterministic ordering for merged record lists.

Nodes sort by id. Elements sort by the length of their composite key
first, then by the key itself, so ``[9]`` precedes ``[1, 1]``. Records with
equal keys stay adjacent; their relative order is not part of the contract.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from meshmerge.models import Element, Node, Record, RecordKind


def node_sort_key(node: Node) -> int:
    return node.id


def element_sort_key(element: Element) -> Tuple[int, Tuple[int, ...]]:
    return len(element.id), tuple(element.id)


def sort_nodes(nodes: Iterable[Node]) -> List[Node]:
    return sorted(nodes, key=node_sort_key)


def sort_elements(elements: Iterable[Element]) -> List[Element]:
    return sorted(elements, key=element_sort_key)


def sort_records(kind: RecordKind, records: Sequence[Record]) -> List[Record]:
    if kind is RecordKind.NODE:
        return sort_nodes(records)  # type: ignore[arg-type]
    return sort_elements(records)  # type: ignore[arg-type]
