"""Shape key format configuration.

Holds the structural limits of the short-form shape key so the parser,
encoder and data model agree on them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShapeKeyFormat:
    """
    Structural parameters of a shape key.

    A key is up to `max_layers` layers joined by `layer_separator`, each
    layer holding `quads_per_layer` two-character quads. A quad written as
    `empty_quad` is an empty slot.
    """
    max_layers: int = 4
    quads_per_layer: int = 4
    layer_separator: str = ":"
    empty_quad: str = "--"

    def __post_init__(self):
        """Validate the format parameters."""
        if self.max_layers < 1:
            raise ValueError(f"max_layers must be at least 1: {self.max_layers}")
        if self.quads_per_layer < 1:
            raise ValueError(f"quads_per_layer must be at least 1: {self.quads_per_layer}")
        if len(self.empty_quad) != 2:
            raise ValueError(f"empty_quad must be 2 characters: {self.empty_quad!r}")
        if len(self.layer_separator) != 1:
            raise ValueError(f"layer_separator must be 1 character: {self.layer_separator!r}")

    @property
    def layer_length(self) -> int:
        """Number of characters in one layer."""
        return self.quads_per_layer * 2


DEFAULT_FORMAT = ShapeKeyFormat()
