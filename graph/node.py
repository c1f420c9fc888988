# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    A graph vertex.  Ids are the 0-based positions of the input values
    the graph was synthesised from, so node 0 is always the traversal
    source.

    Attributes:
        id : Integer identifier.
    """

    __slots__ = ("id",)

    def __init__(self, node_id: int):
        self.id: int = node_id

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
