"""Core shape data structures."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

from .config import DEFAULT_FORMAT, ShapeKeyFormat


class Subshape(Enum):
    """Sub-shape kinds a quad can hold."""
    CIRCLE = "C"
    SQUARE = "S"
    RECTANGLE = "R"
    WINDMILL = "W"

    @classmethod
    def from_code(cls, code: str) -> "Subshape":
        """Parse a sub-shape from its code character."""
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown sub-shape code: {code}") from None


class Color(Enum):
    """Quad colors."""
    RED = "r"
    GREEN = "g"
    BLUE = "b"
    YELLOW = "y"
    PURPLE = "p"
    CYAN = "c"
    WHITE = "w"
    UNCOLORED = "u"

    @classmethod
    def from_code(cls, code: str) -> "Color":
        """Parse a color from its code character."""
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown color code: {code}") from None


@dataclass(frozen=True)
class Quad:
    """A filled quadrant: a sub-shape with a color."""
    subshape: Subshape
    color: Color

    def to_code(self) -> str:
        """Encode this quad to its two-character code."""
        return f"{self.subshape.value}{self.color.value}"

    def __repr__(self) -> str:
        return f"Quad({self.subshape.name}, {self.color.name})"


@dataclass(frozen=True)
class Layer:
    """
    One layer of a shape.

    Slots are ordered quadrants, each either a Quad or None for an empty
    quadrant. A layer holds exactly `quads_per_layer` slots of its key
    format, at least one of them a Quad.
    """
    quads: Tuple[Optional[Quad], ...]
    key_format: ShapeKeyFormat = field(default=DEFAULT_FORMAT, compare=False, repr=False)

    def __post_init__(self):
        """Validate the layer."""
        quads = tuple(self.quads)
        object.__setattr__(self, "quads", quads)
        if len(quads) != self.key_format.quads_per_layer:
            raise ValueError(
                f"Layer must have {self.key_format.quads_per_layer} quad slots: {len(quads)}"
            )
        if all(quad is None for quad in quads):
            raise ValueError("Layer must not be empty")

    def to_code(self) -> str:
        """Encode this layer to its code string."""
        from .encoder import ShapeKeyEncoder
        return ShapeKeyEncoder(self.key_format).encode_layer(self)

    @property
    def num_quads(self) -> int:
        """Get the number of quad slots in this layer."""
        return len(self.quads)

    @property
    def filled_count(self) -> int:
        """Number of non-empty slots."""
        return sum(1 for quad in self.quads if quad is not None)

    def get_quad(self, index: int) -> Optional[Quad]:
        """Get a quad slot by index."""
        return self.quads[index]

    def __iter__(self) -> Iterator[Optional[Quad]]:
        return iter(self.quads)

    def __len__(self) -> int:
        return len(self.quads)


@dataclass(frozen=True)
class Shape:
    """A complete shape, layers ordered bottom to top."""
    layers: Tuple[Layer, ...]
    key_format: ShapeKeyFormat = field(default=DEFAULT_FORMAT, compare=False, repr=False)

    def __post_init__(self):
        """Validate the shape."""
        layers = tuple(self.layers)
        object.__setattr__(self, "layers", layers)
        if not layers:
            raise ValueError("Shape must have at least one layer")
        if len(layers) > self.key_format.max_layers:
            raise ValueError(
                f"Shape must have at most {self.key_format.max_layers} layers: {len(layers)}"
            )

    @classmethod
    def from_layers(
        cls,
        layers: Sequence[Sequence[Optional[Quad]]],
        key_format: ShapeKeyFormat = DEFAULT_FORMAT,
    ) -> "Shape":
        """Build a shape from raw quad slot sequences."""
        return cls(
            tuple(Layer(tuple(slots), key_format) for slots in layers),
            key_format,
        )

    @classmethod
    def from_code(cls, code: str) -> "Shape":
        """Parse a shape from its full code string."""
        from .parser import ShapeKeyParser
        return ShapeKeyParser().parse(code)

    def to_code(self) -> str:
        """Encode this shape to its full code string."""
        from .encoder import ShapeKeyEncoder
        return ShapeKeyEncoder(self.key_format).encode(self)

    @property
    def num_layers(self) -> int:
        """Get the number of layers."""
        return len(self.layers)

    def get_layer(self, index: int) -> Optional[Layer]:
        """Get a layer by index (0 = bottom)."""
        if 0 <= index < len(self.layers):
            return self.layers[index]
        return None

    def __repr__(self) -> str:
        return f"Shape({self.to_code()})"
