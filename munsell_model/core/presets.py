"""The four fixed neutral colours at the ends of the value axis."""

from munsell_model.core.munsell_parser import parse
from munsell_model.core.types import MunsellColor


def pure_white() -> MunsellColor:
    """N 10.0"""
    return parse('N 10.0')


def pure_black() -> MunsellColor:
    """N 0.0"""
    return parse('N 0.0')


def near_white() -> MunsellColor:
    """N 9.5, the lightest value that still counts as near-white."""
    return parse('N 9.5')


def near_black() -> MunsellColor:
    """N 1.0, the darkest value that still counts as near-black."""
    return parse('N 1.0')
