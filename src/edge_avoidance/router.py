"""
Host adapter for diagram engines.

AvoidanceRouter connects the pure ``route`` function to a host diagram
through the small ``DiagramHost`` contract. The host decides when to
reroute and calls the matching trigger method; the adapter never
registers listeners of its own:

- handle_edge_added / handle_edge_endpoint_changed: reroute one edge
- handle_node_move_end / handle_node_added / handle_graph_rendered:
  reroute every edge

Each routed edge fires one event (routed, degraded or skipped).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .candidates import DEFAULT_OFFSETS
from .routing import route_edge
from .types import (
    EdgeRef,
    NodeLike,
    Point,
    RouteCallback,
    RouteEvent,
    RouteEventType,
    RouteResult,
)
from .validation import MissingAnchorError, validate_offsets, validate_padding

logger = logging.getLogger(__name__)


class DiagramHost(Protocol):
    """What the adapter needs from a diagram engine."""

    def get_nodes(self) -> Sequence[NodeLike]: ...

    def get_edge(self, edge_id: Hashable) -> Optional[EdgeRef]: ...

    def get_edge_ids(self) -> Sequence[Hashable]: ...

    def apply_path(self, edge_id: Hashable, points: Sequence[Point]) -> None: ...


class AvoidanceRouter:
    """
    Reroutes a host's edges around its nodes.

    Example:
        diagram = Diagram()
        diagram.add_node("a", x=0, y=0, width=40, height=40)
        diagram.add_node("b", x=300, y=0, width=40, height=40)
        diagram.add_node("block", x=150, y=0, width=60, height=60)
        diagram.add_edge("a->b", "a", "b")

        router = AvoidanceRouter(diagram, padding=10)
        router.handle_edge_added("a->b")
        diagram.edge_points("a->b")
    """

    def __init__(
        self,
        host: DiagramHost,
        *,
        padding: float = 10.0,
        enabled: bool = True,
        offsets: Sequence[float] = DEFAULT_OFFSETS,
        on_routed: Optional[RouteCallback] = None,
        on_degraded: Optional[RouteCallback] = None,
        on_skipped: Optional[RouteCallback] = None,
    ) -> None:
        """
        Initialize the router.

        Args:
            host: Diagram engine implementing DiagramHost
            padding: Clearance kept around every obstacle node
            enabled: If False, triggers are ignored until enable()
            offsets: Candidate offset lattice
            on_routed: Callback for edges that got a clear path
            on_degraded: Callback for edges whose best path still overlaps a node
            on_skipped: Callback for edges that kept their previous path
        """
        self._host = host
        self._padding: float = validate_padding(padding)
        self._offsets: tuple[float, ...] = validate_offsets(offsets)
        self._enabled: bool = bool(enabled)
        self._events: dict[RouteEventType, RouteCallback] = {}

        if on_routed:
            self._events[RouteEventType.routed] = on_routed
        if on_degraded:
            self._events[RouteEventType.degraded] = on_degraded
        if on_skipped:
            self._events[RouteEventType.skipped] = on_skipped

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def host(self) -> DiagramHost:
        return self._host

    @property
    def padding(self) -> float:
        """Get obstacle padding."""
        return self._padding

    @padding.setter
    def padding(self, value: float) -> None:
        """
        Set obstacle padding.

        Raises:
            InvalidPaddingError: If value is negative
        """
        self._padding = validate_padding(value)

    @property
    def offsets(self) -> tuple[float, ...]:
        """Get the candidate offset lattice."""
        return self._offsets

    @offsets.setter
    def offsets(self, value: Sequence[float]) -> None:
        self._offsets = validate_offsets(value)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: RouteEventType | str, callback: RouteCallback) -> Self:
        """
        Subscribe to a routing event.

        Args:
            event: Event type (RouteEventType enum or its name)
            callback: Function to call when the event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = RouteEventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: RouteEvent) -> None:
        """Call the callback registered for ``event['type']``, if any."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def enable(self) -> Self:
        """Start reacting to triggers."""
        if not self._enabled:
            self._enabled = True
            logger.debug("AvoidanceRouter enabled")
        return self

    def disable(self) -> Self:
        """Stop reacting to triggers. Existing paths are left as they are."""
        if self._enabled:
            self._enabled = False
            logger.debug("AvoidanceRouter disabled")
        return self

    def set_options(
        self,
        *,
        padding: Optional[float] = None,
        enabled: Optional[bool] = None,
        offsets: Optional[Sequence[float]] = None,
    ) -> Self:
        """
        Update options, rerouting every edge when the result could change.

        All edges are rerouted if the router goes from disabled to enabled,
        or if padding/offsets change while it stays enabled.

        Returns:
            self (for chaining)
        """
        was_enabled = self._enabled
        geometry_changed = False

        if padding is not None:
            new_padding = validate_padding(padding)
            geometry_changed = geometry_changed or new_padding != self._padding
            self._padding = new_padding
        if offsets is not None:
            new_offsets = validate_offsets(offsets)
            geometry_changed = geometry_changed or new_offsets != self._offsets
            self._offsets = new_offsets
        if enabled is not None:
            if enabled:
                self.enable()
            else:
                self.disable()

        if self._enabled and (not was_enabled or geometry_changed):
            self.reroute_all_edges()
        return self

    # -------------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------------

    def update_edge(self, edge_id: Hashable) -> Optional[RouteResult]:
        """
        Route one edge and apply the result to the host.

        Returns:
            The applied RouteResult, or None if the edge kept its previous
            path (router disabled, unknown edge, or missing anchor)
        """
        if not self._enabled:
            return None

        edge = self._host.get_edge(edge_id)
        if edge is None:
            self._skip(edge_id, "unknown edge")
            return None

        try:
            result = route_edge(
                edge.start,
                edge.end,
                self._host.get_nodes(),
                edge.source_node_id,
                edge.target_node_id,
                padding=self._padding,
                offsets=self._offsets,
            )
        except MissingAnchorError as exc:
            self._skip(edge_id, str(exc))
            return None

        self._host.apply_path(edge_id, list(result.points))
        logger.debug(
            "Edge %r routed through %d point(s), %d obstruction(s), %d candidate(s)",
            edge_id,
            len(result.points),
            result.obstructions,
            result.candidates_evaluated,
        )

        event_type = RouteEventType.routed if result.is_clear else RouteEventType.degraded
        self.trigger({"type": event_type, "edge_id": edge_id, "result": result, "reason": None})
        return result

    def update_edges(self, edge_ids: Sequence[Hashable]) -> dict[Hashable, RouteResult]:
        """Route several edges in order; skipped edges are left out of the result."""
        results: dict[Hashable, RouteResult] = {}
        for edge_id in edge_ids:
            result = self.update_edge(edge_id)
            if result is not None:
                results[edge_id] = result
        return results

    def reroute_all_edges(self) -> dict[Hashable, RouteResult]:
        """Route every edge the host currently has."""
        if not self._enabled:
            return {}
        return self.update_edges(list(self._host.get_edge_ids()))

    # -------------------------------------------------------------------------
    # Host triggers
    # -------------------------------------------------------------------------

    def handle_edge_added(self, edge_id: Hashable) -> Optional[RouteResult]:
        return self.update_edge(edge_id)

    def handle_edge_endpoint_changed(self, edge_id: Hashable) -> Optional[RouteResult]:
        return self.update_edge(edge_id)

    def handle_node_move_end(self, node_id: Hashable) -> dict[Hashable, RouteResult]:
        """A moved node can land on any edge, so everything is rerouted."""
        return self.reroute_all_edges()

    def handle_node_added(self, node_id: Hashable) -> dict[Hashable, RouteResult]:
        """A new node can obstruct any edge, so everything is rerouted."""
        return self.reroute_all_edges()

    def handle_graph_rendered(self) -> dict[Hashable, RouteResult]:
        return self.reroute_all_edges()

    def _skip(self, edge_id: Hashable, reason: str) -> None:
        logger.debug("Edge %r keeps its previous path: %s", edge_id, reason)
        self.trigger(
            {"type": RouteEventType.skipped, "edge_id": edge_id, "result": None, "reason": reason}
        )


__all__ = ["AvoidanceRouter", "DiagramHost"]
