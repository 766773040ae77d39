from enum import Enum

DIMENSIONS = 2


class Axis(Enum):
    X = 0
    Y = 1

    @staticmethod
    def from_depth(depth):
        """Eje de corte para una profundidad: X en pares, Y en impares (raíz = 0)."""
        if depth < 0:
            raise ValueError(f"La profundidad debe ser no negativa (recibido {depth})")

        n = depth % DIMENSIONS
        if n == 0:
            return Axis.X
        if n == 1:
            return Axis.Y
        raise ValueError("Higher dimensions not implemented")

    def other(self):
        return Axis.Y if self is Axis.X else Axis.X

    def __repr__(self):
        return f"Axis.{self.name}"


def axis(depth):
    return Axis.from_depth(depth)


def check_dimensions(n):
    """Solo se soportan 2 dimensiones; cualquier otra cantidad falla de inmediato."""
    if n != DIMENSIONS:
        raise ValueError(f"Higher dimensions not implemented: se esperaban {DIMENSIONS} coordenadas, recibido {n}")
