"""Error raised for circular augments/implements/mixes chains."""


class RelationCycleError(ValueError):
    """Raised when a doclet is reachable from itself through its relations."""

    def __init__(self, cycle: list[str]) -> None:
        """Store the offending longname chain, first and last entries being equal."""
        self.cycle = cycle
        super().__init__("Circular doclet relation: " + " -> ".join(cycle))
