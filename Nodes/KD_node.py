import numpy as np

from Nodes.Axis import Axis


def median_index(n):
    """ Con cantidad par se toma el menor de los dos centrales """
    return n // 2 - 1 if n % 2 == 0 else n // 2


def split_on_median(points, axis):
    """Ordena por el eje (orden estable) y separa en (mediana, menores, mayores).

    Los puntos anteriores a la mediana van al subárbol "right" y los posteriores
    al subárbol "left"; la mediana no queda en ninguno de los dos.
    """
    values = np.array([p.get(axis) for p in points])
    order = values.argsort(kind="stable")
    points = [points[i] for i in order]

    idx = median_index(len(points))
    return points[idx], points[:idx], points[idx + 1:]


class KDNode:
    """Nodo interno: un punto, su eje y dos hijos (None = vacío).

    `split_axes` guarda los ejes por los que se repartieron los descendientes en
    este nodo: build reparte por `axis`, insert por el eje del nivel siguiente.
    """

    def __init__(self, point, axis, left=None, right=None, split_axes=None):
        self.point = point
        self.axis = axis
        self.left = left
        self.right = right
        self.split_axes = set(split_axes or ())

    @classmethod
    def build(cls, points, depth=0):
        """Construye recursivamente un subárbol balanceado; devuelve None si no hay puntos.

        Todo nodo del nivel `depth` corta por el eje de ese nivel, de modo que la
        raíz queda en X.
        """
        points = list(points)
        if not points:
            return None

        axis = Axis.from_depth(depth)
        if len(points) == 1:
            return cls(points[0], axis)

        median, smaller, larger = split_on_median(points, axis)
        return cls(median, axis,
                   left=cls.build(larger, depth + 1),
                   right=cls.build(smaller, depth + 1),
                   split_axes=(axis,))

    def insert(self, point, depth=0):
        """Desciende sin rebalancear hasta un hueco vacío y cuelga ahí el punto.

        En cada nodo se compara por el eje del nivel siguiente (el de los hijos),
        no por el eje propio del nodo.
        """
        node = self
        while True:
            next_axis = Axis.from_depth(depth + 1)
            node.split_axes.add(next_axis)
            if node.point.gt(point, next_axis):
                if node.right is None:
                    node.right = KDNode(point, next_axis)
                    return node.right
                node = node.right
            else:
                if node.left is None:
                    node.left = KDNode(point, next_axis)
                    return node.left
                node = node.left
            depth += 1

    def is_leaf(self):
        return self.left is None and self.right is None

    def children(self):
        return self.left, self.right

    def collect_points(self):
        """Recolecta todos los puntos del subárbol (preorden)."""
        pts = []
        stack = [self]
        while stack:
            node = stack.pop()
            pts.append(node.point)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return pts

    def size(self):
        return len(self.collect_points())

    def height(self):
        best = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            best = max(best, level)
            for child in node.children():
                if child is not None:
                    stack.append((child, level + 1))
        return best

    def __repr__(self):
        return (f"KDNode(point={self.point!r}, axis={self.axis!r}, "
                f"left={self.left!r}, right={self.right!r})")
