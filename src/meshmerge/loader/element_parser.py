# src/meshmerge/loader/element_parser.py

"""
Element body parser.

Each element block has a fixed shape::

    Element: 1 0 0
    Values:
       0.1 0.2 0.3 0.4

    Nodes:
       1 2 3 4
    Scale factors:
       1.0 1.0 1.0 1.0

The machine cycles through seven states. A block whose ``Values:``,
``Nodes:`` or ``Scale factors:`` keyword line is missing is discarded and
scanning resumes at the offending line. A numeric run ends at the first
line that does not start with a digit or ``-``; that line is handed back
so the next state sees it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple, TypeVar

from meshmerge.config import DEFAULT_PRECISION
from meshmerge.logging import get_logger
from meshmerge.models import Element

from .line_reader import LineReader
from .tokenizer import (
    parse_float_prefix,
    parse_int_prefix,
    snap_zero,
    split_tokens,
    trim,
)

log = get_logger(__name__)

ELEMENT_KEYWORD = "Element:"
VALUES_KEYWORD = "Values:"
NODES_KEYWORD = "Nodes:"
SCALE_KEYWORD = "Scale factors:"

T = TypeVar("T")


class ElementState(Enum):
    AWAITING_ID = 0
    AWAITING_VALUES_KEYWORD = 1
    VALUES_BODY = 2
    AWAITING_NODES_KEYWORD = 3
    NODES_BODY = 4
    AWAITING_SCALE_KEYWORD = 5
    SCALE_BODY = 6


# keyword state -> (expected keyword, body state it opens)
_KEYWORD_STATES = {
    ElementState.AWAITING_VALUES_KEYWORD: (VALUES_KEYWORD, ElementState.VALUES_BODY),
    ElementState.AWAITING_NODES_KEYWORD: (NODES_KEYWORD, ElementState.NODES_BODY),
    ElementState.AWAITING_SCALE_KEYWORD: (SCALE_KEYWORD, ElementState.SCALE_BODY),
}


@dataclass
class ElementDraft:
    """In-progress element; transitions extend its sections in place."""
    id: Tuple[int, ...]
    values: List[float] = field(default_factory=list)
    nodes: List[int] = field(default_factory=list)
    scale: List[float] = field(default_factory=list)

    def to_record(self) -> Element:
        return Element(
            id=self.id,
            values=tuple(self.values),
            nodes=tuple(self.nodes),
            scale=tuple(self.scale),
        )


@dataclass(frozen=True)
class ElementStep:
    """
    Result of one transition.

    Attributes:
        state: State to continue in.
        draft: In-progress element after this line (None when idle or
            after a discard).
        emitted: Completed element to append to the result list, if any.
        rewind: Hand the line back to the reader before continuing.
        discarded: The in-progress element was abandoned on this line.
    """
    state: ElementState
    draft: Optional[ElementDraft]
    emitted: Optional[Element] = None
    rewind: bool = False
    discarded: bool = False


def _is_numeric_row(text: str) -> bool:
    return text[:1].isdigit() or text.startswith("-")


def _parse_row(text: str, convert: Callable[[str], Optional[T]]) -> Optional[List[T]]:
    """Convert every token of a row, or return None if any token is not a number."""
    out: List[T] = []
    for token in split_tokens(text):
        value = convert(token)
        if value is None:
            return None
        out.append(value)
    return out


def _parse_id(text: str) -> Tuple[int, ...]:
    # A token without a leading number counts as 0
    return tuple(parse_int_prefix(token) or 0 for token in split_tokens(text))


def element_transition(
    state: ElementState,
    draft: Optional[ElementDraft],
    line: str,
    precision: float = DEFAULT_PRECISION,
) -> ElementStep:
    stripped = trim(line)

    if not stripped:
        return ElementStep(state, draft)

    if state is ElementState.AWAITING_ID:
        if not stripped.startswith(ELEMENT_KEYWORD):
            return ElementStep(state, draft)
        element_id = _parse_id(stripped[len(ELEMENT_KEYWORD):])
        return ElementStep(ElementState.AWAITING_VALUES_KEYWORD, ElementDraft(id=element_id))

    if draft is None:
        draft = ElementDraft(id=())

    if state in _KEYWORD_STATES:
        keyword, body_state = _KEYWORD_STATES[state]
        if stripped != keyword:
            return ElementStep(
                ElementState.AWAITING_ID, None, rewind=True, discarded=True
            )
        return ElementStep(body_state, draft)

    if state is ElementState.NODES_BODY:
        row = _parse_row(stripped, parse_int_prefix) if _is_numeric_row(stripped) else None
        if row is None:
            return ElementStep(ElementState.AWAITING_SCALE_KEYWORD, draft, rewind=True)
        draft.nodes.extend(row)
        return ElementStep(state, draft)

    row = _parse_row(stripped, parse_float_prefix) if _is_numeric_row(stripped) else None
    snapped = [snap_zero(v, precision) for v in row] if row is not None else []

    if state is ElementState.VALUES_BODY:
        if row is None:
            return ElementStep(ElementState.AWAITING_NODES_KEYWORD, draft, rewind=True)
        draft.values.extend(snapped)
        return ElementStep(state, draft)

    # SCALE_BODY
    if row is None:
        return ElementStep(
            ElementState.AWAITING_ID, None, emitted=draft.to_record(), rewind=True
        )
    draft.scale.extend(snapped)
    return ElementStep(state, draft)


def finish_elements(state: ElementState, draft: Optional[ElementDraft]) -> Optional[Element]:
    """
    Record left in progress at end of input.

    Any non-idle state yields whatever was accumulated, so a truncated
    trailing block is still emitted, possibly with empty sections.
    """
    if state is ElementState.AWAITING_ID:
        return None
    if draft is None:
        draft = ElementDraft(id=())
    return draft.to_record()


def parse_elements(
    reader: LineReader,
    precision: float = DEFAULT_PRECISION,
    into: Optional[List[Element]] = None,
) -> List[Element]:
    """
    Parse element records from ``reader`` until EOF.

    Args:
        reader: Source positioned after the header.
        precision: Zero-snap tolerance for values and scale factors.
        into: Optional list to append to (used to accumulate across files).

    Returns:
        The list the elements were appended to, in file order.
    """
    elements: List[Element] = into if into is not None else []
    state = ElementState.AWAITING_ID
    draft: Optional[ElementDraft] = None

    for line in reader:
        step = element_transition(state, draft, line, precision)
        if step.discarded:
            log.debug(
                "Discarding element %s at line %d: unexpected %r",
                list(draft.id) if draft is not None else [],
                reader.lineno,
                trim(line),
            )
        if step.rewind:
            reader.unread(line)
        if step.emitted is not None:
            elements.append(step.emitted)
        state, draft = step.state, step.draft

    tail = finish_elements(state, draft)
    if tail is not None:
        log.debug("Input ended inside element %s; keeping partial record", list(tail.id))
        elements.append(tail)

    return elements
