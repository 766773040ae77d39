from dataclasses import dataclass, field

import numpy as np

from Nodes.Axis import Axis, check_dimensions


@dataclass(frozen=True)
class Point:
    """ Punto 2D inmutable. `data` es carga opcional y no participa en la igualdad """
    x: object
    y: object
    data: object = field(default=None, compare=False, repr=False)

    @classmethod
    def from_coords(cls, coords, data=None):
        coords = tuple(coords)
        check_dimensions(len(coords))
        return cls(coords[0], coords[1], data)

    def get(self, axis):
        return self.x if axis is Axis.X else self.y

    def gt(self, other, axis):
        return self.get(axis) > other.get(axis)

    def cmp(self, other, axis):
        """ -1, 0 o 1 comparando solo la coordenada del eje dado """
        a, b = self.get(axis), other.get(axis)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def as_tuple(self):
        return self.x, self.y


def distance(ls, rs):
    """Distancia euclidiana; la suma de cuadrados se hace en el tipo de la coordenada."""
    dx = ls.x - rs.x
    dy = ls.y - rs.y
    return float(np.sqrt(np.float64(dx * dx + dy * dy)))
