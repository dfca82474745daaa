"""Layers that receive updates and events, and the ordered stack holding them."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional


class Layer:
    """A unit of application behaviour; subclasses override the hooks they need.

    The base hooks keep simple bookkeeping: whether the layer is attached and
    how many updates, UI renders and events it has seen.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.update_count = 0
        self.ui_render_count = 0
        self.event_count = 0

    def on_update(self) -> None:
        """Called once per frame."""
        self.update_count += 1

    def on_attach(self) -> None:
        """Called when the layer is pushed onto an application."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed or the application shuts down."""
        self.attached = False

    def on_event(self, event: Any) -> None:
        """Called when an event is dispatched to the layer; leaves it unhandled."""
        self.event_count += 1

    def on_ui_render(self) -> None:
        """Called once per frame while the user interface is drawn."""
        self.ui_render_count += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers in update order: ordinary layers first, then overlays."""

    def __init__(self) -> None:
        self._layers: List[Layer] = []
        self._insert_index = 0

    def _position(self, layer: Layer) -> Optional[int]:
        return next(
            (index for index, held in enumerate(self._layers) if held is layer), None
        )

    def push_layer(self, layer: Layer) -> None:
        """Add a layer after the existing layers but before every overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay after everything already on the stack."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> Optional[Layer]:
        """Remove a layer; returns it, or None if it is not on the stack."""
        position = self._position(layer)
        if position is None:
            return None
        removed = self._layers.pop(position)
        self._insert_index -= 1
        return removed

    def pop_overlay(self, overlay: Layer) -> Optional[Layer]:
        """Remove an overlay; returns it, or None if it is not on the stack."""
        position = self._position(overlay)
        if position is None:
            return None
        return self._layers.pop(position)

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)