"""Shape key diagnostics and ordinal position formatting."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence


class ErrorKind(Enum):
    """Kinds of shape key violations."""
    EMPTY_INPUT = auto()
    TOO_MANY_LAYERS = auto()
    INVALID_LAYER_LENGTH = auto()
    INVALID_SUBSHAPE = auto()
    INVALID_COLOR = auto()
    EMPTY_LAYER = auto()


def ordinal(index: int) -> str:
    """
    Format a 0-based index as a 1-based English ordinal.

    Examples: 0 -> "1st", 1 -> "2nd", 10 -> "11th", 20 -> "21st".
    """
    n = index + 1
    if n % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def position(layer_index: int, quad_index: Optional[int] = None) -> str:
    """Human-readable position, e.g. "2nd layer, 3rd quad"."""
    if quad_index is None:
        return f"{ordinal(layer_index)} layer"
    return f"{ordinal(layer_index)} layer, {ordinal(quad_index)} quad"


@dataclass(frozen=True)
class Diagnostic:
    """A single problem found in a shape key."""
    kind: ErrorKind
    message: str
    layer_index: Optional[int] = None  # 0-based, None for key-wide errors
    quad_index: Optional[int] = None
    char: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class ShapeKeyError(ValueError):
    """Raised when a shape key cannot be turned into a Shape."""

    def __init__(self, key: str, diagnostics: Sequence[Diagnostic]):
        if not diagnostics:
            raise ValueError("ShapeKeyError needs at least one diagnostic")
        self.key = key
        self.diagnostics: List[Diagnostic] = list(diagnostics)
        super().__init__("; ".join(d.message for d in self.diagnostics))

    @property
    def kinds(self) -> List[ErrorKind]:
        """Kinds of all diagnostics, in report order."""
        return [d.kind for d in self.diagnostics]

    @property
    def first(self) -> Diagnostic:
        """The first diagnostic reported."""
        return self.diagnostics[0]


# Message builders. Each returns a Diagnostic ready to be reported.

def empty_input() -> Diagnostic:
    return Diagnostic(ErrorKind.EMPTY_INPUT, "Empty input")


def too_many_layers(max_layers: int) -> Diagnostic:
    return Diagnostic(
        ErrorKind.TOO_MANY_LAYERS,
        f"Input has more than {max_layers} layers",
    )


def invalid_layer_length(layer_index: int, length: int, expected: int) -> Diagnostic:
    if length % 2 != 0:
        message = f"{ordinal(layer_index)} layer has odd number of characters"
    else:
        more_or_less = "more" if length > expected else "less"
        message = f"{ordinal(layer_index)} layer has {more_or_less} than {expected} characters"
    return Diagnostic(ErrorKind.INVALID_LAYER_LENGTH, message, layer_index=layer_index)


def invalid_subshape(char: str, layer_index: int, quad_index: int) -> Diagnostic:
    return Diagnostic(
        ErrorKind.INVALID_SUBSHAPE,
        f'Invalid sub-shape "{char}" in {position(layer_index, quad_index)}',
        layer_index=layer_index,
        quad_index=quad_index,
        char=char,
    )


def invalid_color(char: str, layer_index: int, quad_index: int) -> Diagnostic:
    return Diagnostic(
        ErrorKind.INVALID_COLOR,
        f'Invalid color "{char}" in {position(layer_index, quad_index)}',
        layer_index=layer_index,
        quad_index=quad_index,
        char=char,
    )


def empty_layer(layer_index: int) -> Diagnostic:
    return Diagnostic(
        ErrorKind.EMPTY_LAYER,
        f"{position(layer_index)} is empty",
        layer_index=layer_index,
    )
