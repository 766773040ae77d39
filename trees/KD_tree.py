from bisect import bisect_left

import numpy as np

from Nodes.Axis import Axis
from Nodes.KD_node import KDNode
from Nodes.Point import Point, distance
from trees.logger import logger


def _as_point(origin):
    if isinstance(origin, Point):
        return origin
    return Point.from_coords(origin)


class KDTree:
    """k-d tree de 2 dimensiones.

    Convención de lados: el hijo "right" guarda la mitad menor o igual según el
    eje de corte y el hijo "left" la mitad mayor.
    """

    def __init__(self, points=None):
        self.root = None
        if points is not None and len(points) > 0:
            points = [_as_point(p) for p in points]
            self.root = KDNode.build(points)
            logger.debug("KDTree construido con %d puntos (altura %d)", len(points), self.height())

    @classmethod
    def build(cls, points):
        return cls(list(points))

    # --- inserción ---
    def insert(self, x, y):
        return self.insert_point(Point(x, y))

    def insert_point(self, point):
        """Inserta un punto sin rebalancear; muchas inserciones degradan el balance."""
        point = _as_point(point)
        if self.root is None:
            self.root = KDNode(point, Axis.from_depth(0))
            node = self.root
        else:
            node = self.root.insert(point, 0)
        logger.debug("Insertado %r en eje %s", point, node.axis.name)
        return self

    # --- consultas ---
    def nearest_neighbor(self, origin, radius):
        """Puntos a distancia <= radius del origen, ordenados por distancia ascendente.

        El borde es inclusivo: un punto exactamente a `radius` se incluye.
        """
        radius = float(radius)
        if np.isnan(radius) or radius < 0:
            raise ValueError(f"El radio debe ser no negativo (recibido {radius})")
        return self._search(_as_point(origin), radius, None)

    def nearest_neighbor_xy(self, x, y, radius):
        return self.nearest_neighbor(Point(x, y), radius)

    def n_nearest_neighbor(self, origin, max_points):
        """Hasta `max_points` vecinos ordenados por distancia.

        Búsqueda acotada aproximada: el radio es infinito y la expansión se corta
        al llenar la lista, así que no garantiza los k más cercanos exactos.
        """
        if max_points < 0:
            raise ValueError(f"max_points debe ser no negativo (recibido {max_points})")
        if max_points == 0:
            return []
        return self._search(_as_point(origin), np.inf, int(max_points))

    def _search(self, origin, radius, max_points):
        if self.root is None:
            return []

        # pila con el camino raíz -> hoja candidata; se desapila de la más profunda
        stack = self._drill_down(origin)
        found = []
        dists = []
        members = set()
        expanded = set()
        pruned = 0

        while stack:
            node = stack.pop()
            if id(node) in expanded:
                continue
            if max_points is not None and len(found) >= max_points:
                break
            expanded.add(id(node))

            dist = distance(origin, node.point)
            if dist <= radius:
                self._insert_sorted(found, dists, members, node, dist)

            # se apila "right" primero para que "left" se expanda antes
            for side, child in (("right", node.right), ("left", node.left)):
                if child is None or id(child) in members or id(child) in expanded:
                    continue
                if not self._can_reach(node, side, origin, radius):
                    pruned += 1
                    continue
                stack.append(child)

        logger.debug("Búsqueda desde %r (radio=%s, max=%s): %d nodos expandidos, %d subárboles podados, %d resultados",
                     origin, radius, max_points, len(expanded), pruned, len(found))
        return [node.point for node in found]

    def _drill_down(self, origin):
        """Desciende por el lado más cercano al origen apilando cada nodo visitado."""
        path = []
        node = self.root
        while node is not None:
            path.append(node)
            if node.is_leaf():
                break
            if node.point.cmp(origin, node.axis) < 0:
                node = node.left
            else:
                node = node.right
        return path

    @staticmethod
    def _can_reach(node, side, origin, radius):
        """Prueba del hiperplano: ¿puede el círculo de búsqueda cruzar hacia `side`?

        El subárbol se descarta solo si ninguno de los cortes hechos en el nodo
        (ver `KDNode.split_axes`) queda a distancia <= radius del origen.
        """
        for axis in sorted(node.split_axes, key=lambda a: a.value):
            o = np.float64(origin.get(axis))
            p = np.float64(node.point.get(axis))
            if side == "right" and o - radius <= p:
                return True
            if side == "left" and o + radius >= p:
                return True
        return False

    @staticmethod
    def _insert_sorted(found, dists, members, node, dist):
        """ Inserción ordenada por distancia, sin repetir el mismo nodo """
        if not isinstance(node, KDNode):
            raise RuntimeError(f"Nodo vacío en la lista de resultados: {node!r}")
        if id(node) in members:
            return
        idx = bisect_left(dists, dist)
        dists.insert(idx, dist)
        found.insert(idx, node)
        members.add(id(node))

    # --- utilidades ---
    def is_empty(self):
        return self.root is None

    def points(self):
        return [] if self.root is None else self.root.collect_points()

    def height(self):
        return 0 if self.root is None else self.root.height()

    def __len__(self):
        return len(self.points())

    def __iter__(self):
        return iter(self.points())

    def __repr__(self):
        return f"KDTree({self.root!r})"
