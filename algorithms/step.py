"""
step.py — Trace Step Snapshot
==============================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything a renderer needs to
draw one frame:

    • The primary array, plus which indices are being compared / moved
    • The auxiliary structure (linked list, tree, graph, …) if any
    • Transient annotations (current value, highlighted nodes, visited set, …)
    • Which line of the source listing is executing right now
    • A plain-English narration of the step

Design decisions:
  - Step is a frozen dataclass (no methods that mutate anything).
    The algorithm generator is the only writer; stepper / recorder /
    renderers are pure readers.
  - The structural payload is a tagged union (see payloads.py).  The
    payload's type decides `structure_kind`; no payload = plain array view.
  - `array` and every list field are copied by StepBuilder.build, so a
    step never aliases the generator's working state.
"""

import math
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Optional

from algorithms.payloads import Number, Structure, StructureKind


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in its trace.
        array           : Current state of the primary buffer.  For structural
                          generators this is the untouched (truncated) input.
        comparisons     : Indices currently being compared.
        swaps           : Indices currently being exchanged / placed.
        message         : Human-readable narration.
        source_line     : 1-based line into the algorithm's CODE listing (0 = n/a).
        structure       : Structural payload (tagged union) or None.
        operation       : Name of the data-structure operation in progress.
        current_value   : Value being inserted / searched / hashed.
        highlight_nodes : Node ids (list arena index / tree position) to highlight.
        highlight_index : Single slot to highlight (stack top, queue front, bucket).
        deleted_node    : Node id that was just unlinked.
        popped_value    : Value returned by the latest stack pop.
        dequeued_value  : Value returned by the latest queue dequeue.
        visited         : Graph node ids visited so far.
        current         : Graph node id under examination.
        path            : Ordered node ids of an announced path.
        distances       : {node_id: shortest distance estimate}.
        is_final        : True on the very last step.
    """

    step_number:     int                    = 0
    array:           List[Number]           = field(default_factory=list)
    comparisons:     List[int]              = field(default_factory=list)
    swaps:           List[int]              = field(default_factory=list)
    message:         str                    = ""
    source_line:     int                    = 0
    structure:       Optional[Structure]    = None
    operation:       Optional[str]          = None
    current_value:   Optional[Number]       = None
    highlight_nodes: List[int]              = field(default_factory=list)
    highlight_index: Optional[int]          = None
    deleted_node:    Optional[int]          = None
    popped_value:    Optional[Number]       = None
    dequeued_value:  Optional[Number]       = None
    visited:         List[int]              = field(default_factory=list)
    current:         Optional[int]          = None
    path:            List[int]              = field(default_factory=list)
    distances:       Dict[int, float]       = field(default_factory=dict)
    is_final:        bool                   = False

    @property
    def structure_kind(self) -> Optional[StructureKind]:
        return self.structure.kind if self.structure is not None else None

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the camelCase wire shape consumed by renderers."""
        d: Dict[str, Any] = {
            "stepNumber":  self.step_number,
            "array":       list(self.array),
            "comparisons": list(self.comparisons),
            "swaps":       list(self.swaps),
            "message":     self.message,
            "sourceLine":  self.source_line,
            "isFinal":     self.is_final,
        }
        if self.structure is not None:
            d["structureKind"] = self.structure.kind.value
            d.update(self.structure.to_dict())

        optional = {
            "operation":      self.operation,
            "currentValue":   self.current_value,
            "highlightIndex": self.highlight_index,
            "deletedNode":    self.deleted_node,
            "poppedValue":    self.popped_value,
            "dequeuedValue":  self.dequeued_value,
            "current":        self.current,
        }
        d.update({k: v for k, v in optional.items() if v is not None})

        if self.highlight_nodes:
            d["highlightNodes"] = list(self.highlight_nodes)
        if self.visited:
            d["visited"] = list(self.visited)
        if self.path:
            d["path"] = list(self.path)
        if self.distances:
            # JSON has no Infinity; unreached nodes go out as null
            d["distances"] = {
                str(k): (None if math.isinf(v) else v) for k, v in self.distances.items()
            }
        return d


_ANNOTATIONS = {f.name for f in fields(Step)} - {
    "step_number", "array", "comparisons", "swaps", "message", "source_line", "structure", "is_final",
}


# ---------------------------------------------------------------------------
# Convenience builder so generators don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Stamps consecutive step numbers and snapshots the shared context
    (working array + structural payload) into each Step.

    Usage inside a generator:
        sb = StepBuilder(arr)
        yield sb.build("Starting Bubble Sort", 1)
        ...
        yield sb.build(f"Comparing {a} and {b}", 11, comparisons=[j, j + 1])

    Structural generators pass a zero-arg `snapshot` callable returning
    the current frozen payload; it is invoked on every build.
    """

    def __init__(
        self,
        array: List[Number],
        snapshot: Optional[Callable[[], Structure]] = None,
    ):
        self.array    = array
        self.snapshot = snapshot
        self.step_no  = 0

    def build(
        self,
        message: str,
        source_line: int = 0,
        *,
        comparisons: Optional[List[int]] = None,
        swaps: Optional[List[int]] = None,
        is_final: bool = False,
        **annotations: Any,
    ) -> Step:
        unknown = set(annotations) - _ANNOTATIONS
        if unknown:
            raise TypeError(f"Unknown step annotation(s): {sorted(unknown)}")

        # copy every mutable annotation so later mutation can't leak back
        for key, value in annotations.items():
            if isinstance(value, (list, set, tuple)):
                annotations[key] = sorted(value) if isinstance(value, set) else list(value)
            elif isinstance(value, dict):
                annotations[key] = dict(value)

        step = Step(
            step_number=self.step_no,
            array=list(self.array),
            comparisons=list(comparisons or []),
            swaps=list(swaps or []),
            message=message,
            source_line=source_line,
            structure=self.snapshot() if self.snapshot is not None else None,
            is_final=is_final,
            **annotations,
        )
        self.step_no += 1
        return step

    def final(self, message: str, source_line: int = 0, **annotations: Any) -> Step:
        """The terminal 'operation complete' marker."""
        return self.build(message, source_line, is_final=True, **annotations)
