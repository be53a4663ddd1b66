"""Domain service marker."""


class Service:
    """Marker base for domain services.

    Services own the rules that span entities: invite transitions, contact
    gating, presence and message routing. They hold no transport state.
    """
