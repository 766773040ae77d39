from Nodes.Point import Point
from trees.KD_tree import KDTree

tree = KDTree.build([
    Point(1, 8),
    Point(2, 2),
    Point(3, 6),
    Point(4, 9),
    Point(7, 3),
    Point(8, 8),
    Point(9, 1),
    Point(9, 9),
])

radius = 1.5
origin = Point(8, 8)
nearest = tree.nearest_neighbor(origin, radius)
assert nearest == [Point(8, 8), Point(9, 9)]

print(f"Vecinos a menos de {radius} de {origin}: {nearest}")
