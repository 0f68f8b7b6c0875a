"""Shape key parsing utilities."""

import logging
from typing import List, NoReturn, Optional, Tuple

from . import errors
from .config import DEFAULT_FORMAT, ShapeKeyFormat
from .encoder import ShapeKeyEncoder
from .errors import Diagnostic, ShapeKeyError
from .shape import Color, Layer, Quad, Shape, Subshape

logger = logging.getLogger(__name__)


class ShapeKeyParser:
    """Parser for short-form shape keys."""

    def __init__(self, key_format: ShapeKeyFormat = DEFAULT_FORMAT):
        self.key_format = key_format

    def parse(self, code: str) -> Shape:
        """
        Parse a shape key into a Shape object.

        Format: Layer:Layer:... (bottom to top, at most 4 layers)
        Layer format: four quads, each "--" or a sub-shape and a color
        Quad format: SubshapeColor (e.g., "Cr" = red circle)

        Layers are checked in order. Structural problems (empty key, too
        many layers, a layer of the wrong length) stop the parse where they
        are found; diagnostics from earlier layers are reported with them.
        Invalid characters and empty layers do not stop the parse and are
        reported together.

        Args:
            code: The shape key string

        Returns:
            The parsed Shape object

        Raises:
            ShapeKeyError: If the key is invalid
        """
        if not code:
            self._reject(code, [errors.empty_input()])

        layer_codes = self.split_layers(code)

        layers = []
        diagnostics: List[Diagnostic] = []
        for layer_index, layer_code in enumerate(layer_codes):
            length_error = self.check_layer_length(layer_code, layer_index)
            if length_error is not None:
                self._reject(code, diagnostics + [length_error])
            quad_codes = self.split_quads(code, layer_code, layer_index)
            layer, layer_diagnostics = self.validate_layer(quad_codes, layer_index)
            diagnostics.extend(layer_diagnostics)
            if layer is not None:
                layers.append(layer)

        if diagnostics:
            self._reject(code, diagnostics)

        shape = Shape(tuple(layers), self.key_format)
        logger.debug("Parsed %r into %d layer(s)", code, shape.num_layers)
        return shape

    def split_layers(self, code: str) -> List[str]:
        """Split a key into its layer codes, enforcing the layer limit."""
        layer_codes = code.split(self.key_format.layer_separator)
        if len(layer_codes) > self.key_format.max_layers:
            self._reject(code, [errors.too_many_layers(self.key_format.max_layers)])
        return layer_codes

    def check_layer_length(self, layer_code: str, layer_index: int) -> Optional[Diagnostic]:
        """Return a diagnostic if a layer code is not exactly one layer long."""
        expected = self.key_format.layer_length
        if len(layer_code) != expected:
            return errors.invalid_layer_length(layer_index, len(layer_code), expected)
        return None

    def split_quads(self, code: str, layer_code: str, layer_index: int) -> List[str]:
        """Split a layer code into two-character quad codes."""
        length_error = self.check_layer_length(layer_code, layer_index)
        if length_error is not None:
            self._reject(code, [length_error])
        expected = self.key_format.layer_length
        return [layer_code[i:i + 2] for i in range(0, expected, 2)]

    def classify_quad(
        self, quad_code: str, layer_index: int, quad_index: int
    ) -> Tuple[Optional[Quad], List[Diagnostic]]:
        """
        Classify a two-character quad code.

        Returns (None, []) for the empty marker. Sub-shape and color are
        checked independently, so a quad can yield two diagnostics.
        """
        if quad_code == self.key_format.empty_quad:
            return None, []

        subshape_char, color_char = quad_code[0], quad_code[1]
        diagnostics = []

        try:
            subshape = Subshape.from_code(subshape_char)
        except ValueError:
            subshape = None
            diagnostics.append(errors.invalid_subshape(subshape_char, layer_index, quad_index))

        try:
            color = Color.from_code(color_char)
        except ValueError:
            color = None
            diagnostics.append(errors.invalid_color(color_char, layer_index, quad_index))

        if diagnostics:
            return None, diagnostics
        return Quad(subshape, color), []

    def validate_layer(
        self, quad_codes: List[str], layer_index: int
    ) -> Tuple[Optional[Layer], List[Diagnostic]]:
        """
        Classify every quad of a layer and check it is not empty.

        Returns the Layer, or None with the diagnostics found.
        """
        quads = []
        diagnostics = []
        empty_count = 0
        for quad_index, quad_code in enumerate(quad_codes):
            quad, quad_diagnostics = self.classify_quad(quad_code, layer_index, quad_index)
            if quad_diagnostics:
                diagnostics.extend(quad_diagnostics)
            elif quad is None:
                empty_count += 1
            quads.append(quad)

        if empty_count == len(quad_codes):
            diagnostics.append(errors.empty_layer(layer_index))

        if diagnostics:
            return None, diagnostics
        return Layer(tuple(quads), self.key_format), []

    def check(self, code: str) -> List[Diagnostic]:
        """Parse a key and return its diagnostics; an empty list means valid."""
        try:
            self.parse(code)
        except ShapeKeyError as e:
            return e.diagnostics
        return []

    def validate(self, code: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a shape key.

        Returns:
            A tuple of (is_valid, error_message)
        """
        try:
            self.parse(code)
            return True, None
        except ShapeKeyError as e:
            return False, str(e)

    def normalize(self, code: str) -> str:
        """Parse and re-encode a shape key."""
        return ShapeKeyEncoder(self.key_format).encode(self.parse(code))

    @staticmethod
    def _reject(code: str, diagnostics: List[Diagnostic]) -> NoReturn:
        logger.debug("Rejected shape key %r: %s", code, "; ".join(map(str, diagnostics)))
        raise ShapeKeyError(code, diagnostics)


_default_parser = ShapeKeyParser()


def shapez_shape(code: str) -> Shape:
    """
    Construct a Shape from a short-form shape key.

    Each pair of characters is a quad: a sub-shape (C, S, R or W) followed
    by a color (r, g, b, y, p, c, w or u), or "--" for an empty quad. Up to
    4 layers of 4 quads each, separated by colons:

        >>> shapez_shape("RuCrSgWw:Rr------").num_layers
        2

    Raises:
        ShapeKeyError: If the key is empty, has more than 4 layers, has a
            layer that is not 4 quads long, contains an invalid sub-shape
            or color, or contains an empty layer.
    """
    return _default_parser.parse(code)
