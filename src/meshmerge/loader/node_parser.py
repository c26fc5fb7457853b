# src/meshmerge/loader/node_parser.py

"""
Node body parser.

A node body is a sequence of blocks::

    Node: 12
        0.500000
        1.250000

The parser is a two-state machine. ``node_transition`` maps (state, draft,
line) to the next step without touching any reader; values are appended to
the draft in place and frozen into a Node when it is emitted. ``parse_nodes``
drives it over a LineReader and performs the push-back it asks for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from meshmerge.config import DEFAULT_PRECISION
from meshmerge.logging import get_logger
from meshmerge.models import Node

from .line_reader import LineReader
from .tokenizer import parse_float_prefix, parse_int_prefix, snap_zero, trim

log = get_logger(__name__)

NODE_KEYWORD = "Node:"
# The id is read from this column on, past "Node:" and one separator.
NODE_ID_COLUMN = 6


class NodeState(Enum):
    AWAITING_ID = 0
    COLLECTING_VALUES = 1


@dataclass
class NodeDraft:
    """In-progress node; transitions extend ``values`` in place."""
    id: int
    values: List[float] = field(default_factory=list)

    def to_record(self) -> Node:
        return Node(id=self.id, values=tuple(self.values))


@dataclass(frozen=True)
class NodeStep:
    """
    Result of one transition.

    Attributes:
        state: State to continue in.
        draft: In-progress node after this line (None when idle).
        emitted: Completed node to append to the result list, if any.
        rewind: Hand the line back to the reader before continuing.
    """
    state: NodeState
    draft: Optional[NodeDraft]
    emitted: Optional[Node] = None
    rewind: bool = False


def node_transition(
    state: NodeState,
    draft: Optional[NodeDraft],
    line: str,
    precision: float = DEFAULT_PRECISION,
) -> NodeStep:
    stripped = trim(line)

    if not stripped:
        return NodeStep(state, draft)

    if state is NodeState.AWAITING_ID:
        if not stripped.startswith(NODE_KEYWORD):
            return NodeStep(state, draft)
        node_id = parse_int_prefix(stripped[NODE_ID_COLUMN:]) or 0
        return NodeStep(NodeState.COLLECTING_VALUES, NodeDraft(id=node_id))

    value = parse_float_prefix(stripped)
    if value is None:
        emitted = draft.to_record() if draft is not None and draft.id else None
        return NodeStep(NodeState.AWAITING_ID, None, emitted=emitted, rewind=True)

    if draft is None:
        draft = NodeDraft(id=0)
    draft.values.append(snap_zero(value, precision))
    return NodeStep(state, draft)


def finish_nodes(state: NodeState, draft: Optional[NodeDraft]) -> Optional[Node]:
    """Record left in progress at end of input, if it should be kept."""
    if state is NodeState.COLLECTING_VALUES and draft is not None and draft.id:
        return draft.to_record()
    return None


def parse_nodes(
    reader: LineReader,
    precision: float = DEFAULT_PRECISION,
    into: Optional[List[Node]] = None,
) -> List[Node]:
    """
    Parse node records from ``reader`` until EOF.

    Nodes whose id is 0 are dropped. Lines outside a node block are ignored.

    Args:
        reader: Source positioned after the header.
        precision: Zero-snap tolerance for values.
        into: Optional list to append to (used to accumulate across files).

    Returns:
        The list the nodes were appended to, in file order.
    """
    nodes: List[Node] = into if into is not None else []
    state = NodeState.AWAITING_ID
    draft: Optional[NodeDraft] = None
    dropped = 0

    for line in reader:
        step = node_transition(state, draft, line, precision)
        if step.rewind:
            reader.unread(line)
            if step.emitted is None and draft is not None:
                dropped += 1
        if step.emitted is not None:
            nodes.append(step.emitted)
        state, draft = step.state, step.draft

    tail = finish_nodes(state, draft)
    if tail is not None:
        nodes.append(tail)
    elif state is NodeState.COLLECTING_VALUES:
        dropped += 1

    if dropped:
        log.debug("Dropped %d node block(s) with id 0", dropped)

    return nodes
