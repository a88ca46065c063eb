"""munsell-model — Munsell colour notation as immutable, validated values.

    >>> from munsell_model import parse, degree, undegree
    >>> color = parse('9R 5.5/14')
    >>> str(color)
    '9R 5.5/14'
    >>> degree('5YR')
    15.0
    >>> undegree(15)
    '5YR'
"""

from munsell_model.core.circle import as_degrees, hue_difference, hue_distance, interpolate_hue, mean_hue, to_radians
from munsell_model.core.degree import degree, undegree
from munsell_model.core.munsell_parser import construct, parse
from munsell_model.core.presets import near_black, near_white, pure_black, pure_white
from munsell_model.core.types import (
    HUE_NUMBER,
    HUE_ORDER,
    Chromatic,
    ConstructResult,
    DegreeError,
    ErrorCause,
    HueFamily,
    MunsellColor,
    MunsellError,
    MunsellValidationError,
    Neutral,
)

__all__ = [
    'HUE_NUMBER',
    'HUE_ORDER',
    'Chromatic',
    'ConstructResult',
    'DegreeError',
    'ErrorCause',
    'HueFamily',
    'MunsellColor',
    'MunsellError',
    'MunsellValidationError',
    'Neutral',
    'as_degrees',
    'construct',
    'degree',
    'hue_difference',
    'hue_distance',
    'interpolate_hue',
    'mean_hue',
    'near_black',
    'near_white',
    'parse',
    'pure_black',
    'pure_white',
    'to_radians',
    'undegree',
]
