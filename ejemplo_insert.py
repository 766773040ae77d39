from Nodes.Point import Point
from trees.KD_tree import KDTree

tree = KDTree()
assert tree.is_empty()

# raíz
tree.insert(1, 1)
# segundo nivel (se compara por Y)
tree.insert(2, 2)
tree.insert(2, -12)

print(tree)
print(tree.nearest_neighbor_xy(1, 1, 1.0))
print(tree.nearest_neighbor(Point(1, 1), 1.0))
