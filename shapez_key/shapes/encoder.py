"""Shape key encoding utilities."""

from typing import List, Optional

from .config import DEFAULT_FORMAT, ShapeKeyFormat
from .shape import Layer, Quad, Shape


class ShapeKeyEncoder:
    """Encoder for short-form shape keys."""

    def __init__(self, key_format: ShapeKeyFormat = DEFAULT_FORMAT):
        self.key_format = key_format

    def encode(self, shape: Shape) -> str:
        """
        Encode a Shape object into a shape key string.

        Args:
            shape: The Shape object to encode

        Returns:
            The encoded shape key, layers bottom to top
        """
        return self.key_format.layer_separator.join(
            self.encode_layer(layer) for layer in shape.layers
        )

    def encode_layer(self, layer: Layer) -> str:
        """Encode a single layer."""
        return "".join(self.encode_quad(quad) for quad in layer.quads)

    def encode_quad(self, quad: Optional[Quad]) -> str:
        """Encode a single quad slot, empty slots as the empty marker."""
        if quad is None:
            return self.key_format.empty_quad
        return quad.to_code()

    def format_for_display(self, shape: Shape, multiline: bool = False) -> str:
        """
        Format a shape for human-readable display.

        Args:
            shape: The shape to format
            multiline: If True, show each layer on a separate line, top first

        Returns:
            Formatted string representation
        """
        code = self.encode(shape)

        if not multiline:
            return code

        lines = []
        for layer_idx in reversed(range(shape.num_layers)):
            layer_code = self.encode_layer(shape.layers[layer_idx])
            lines.append(f"Layer {layer_idx}: {layer_code}")

        return "\n".join(lines)

    def describe(self, shape: Shape) -> List[str]:
        """List each layer's quads by name, e.g. "Layer 0: Circle/Red, -, -, -"."""
        lines = []
        for layer_idx, layer in enumerate(shape.layers):
            names = [
                "-" if quad is None
                else f"{quad.subshape.name.title()}/{quad.color.name.title()}"
                for quad in layer.quads
            ]
            lines.append(f"Layer {layer_idx}: {', '.join(names)}")
        return lines
