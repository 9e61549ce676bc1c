from rtcore.vector import Color, Point3, Vector3, cross, dot, unit_vector
from rtcore.color import COLOR_SCALE, write_color

__all__ = [
    "Vector3",
    "Point3",
    "Color",
    "dot",
    "cross",
    "unit_vector",
    "COLOR_SCALE",
    "write_color",
]
