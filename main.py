import argparse
import sys

import folium
import numpy as np

from Nodes.Point import Point, distance
from trees.KD_tree import KDTree
from trees.logger import logger, set_debug
from trees.metrics import analyze_kdtree_instance
from trees.osm_loader import fetch_points_by_bbox

SAMPLE_POINTS = [
    (1, 8), (2, 2), (3, 6), (4, 9),
    (7, 3), (8, 8), (9, 1), (9, 9),
]

# Medellín
DEFAULT_CENTER = (-75.58, 6.24)
METERS_PER_DEGREE = 111_320


def load_points(source, count=100, seed=None, bbox_size=0.02):
    if source == 'sample':
        return [Point(x, y) for x, y in SAMPLE_POINTS]
    if source == 'random':
        rng = np.random.default_rng(seed)
        coords = rng.uniform(0, 10, size=(count, 2))
        return [Point(float(x), float(y)) for x, y in coords]
    if source == 'osm':
        lon, lat = DEFAULT_CENTER
        bbox = (lat - bbox_size, lon - bbox_size, lat + bbox_size, lon + bbox_size)
        return fetch_points_by_bbox(bbox, limit=count)
    raise ValueError(f"Fuente desconocida: {source}")


def render_map(tree, origin, radius, found, path, geographic=False):
    """Guarda un mapa HTML con los puntos del árbol, el círculo de búsqueda y los vecinos.

    Con geographic=True las coordenadas son (lon, lat) y el radio está en grados;
    si no, se usa un plano cartesiano (CRS simple de Leaflet).
    """
    location = [float(origin.y), float(origin.x)]
    if geographic:
        mapa = folium.Map(location=location, zoom_start=15, tiles="OpenStreetMap")
        circle_radius = radius * METERS_PER_DEGREE
    else:
        mapa = folium.Map(location=location, zoom_start=5, crs="Simple", tiles=None)
        circle_radius = radius

    folium.Circle(location=location, radius=circle_radius, color="blue", fill=False).add_to(mapa)
    folium.Marker(location=location, tooltip=f"origen ({origin.x}, {origin.y})").add_to(mapa)

    highlighted = set((p.x, p.y) for p in found)
    for p in tree:
        name = None
        if isinstance(p.data, dict):
            name = p.data.get('tags', {}).get('name') or p.data.get('id')
        color = "red" if (p.x, p.y) in highlighted else "gray"
        folium.CircleMarker(location=[float(p.y), float(p.x)], radius=4, color=color, fill=True,
                            tooltip=name or f"({p.x}, {p.y})").add_to(mapa)

    mapa.save(path)
    logger.info("Mapa guardado en %s", path)
    return path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Demo del k-d tree 2D: construcción y búsqueda de vecinos")
    parser.add_argument('--source', choices=['sample', 'random', 'osm'], default='sample')
    parser.add_argument('--count', type=int, default=100, help="puntos aleatorios / límite de POIs")
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--origin', type=float, nargs=2, metavar=('X', 'Y'), default=None)
    parser.add_argument('--radius', type=float, default=1.5)
    parser.add_argument('--max', type=int, default=4, dest='max_points')
    parser.add_argument('--map', default=None, dest='map_path', help="ruta del HTML a generar")
    parser.add_argument('--debug', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    set_debug(args.debug)

    points = load_points(args.source, count=args.count, seed=args.seed)
    tree = KDTree.build(points)

    if args.origin is not None:
        origin = Point(*args.origin)
    elif args.source == 'osm':
        origin = Point(*DEFAULT_CENTER)
    else:
        origin = Point(8, 8)

    stats = analyze_kdtree_instance(tree)
    print(f"Árbol: {stats['size']} puntos, altura {stats['height']} (óptima {stats['optimal_height']})")
    if args.source == 'sample':
        print(tree)

    found = tree.nearest_neighbor(origin, args.radius)
    print(f"Vecinos a <= {args.radius} de ({origin.x}, {origin.y}):")
    for p in found:
        print(f"  ({p.x}, {p.y})  d={distance(origin, p):.4f}")

    nearest = tree.n_nearest_neighbor(origin, args.max_points)
    print(f"Hasta {args.max_points} vecinos cercanos:")
    for p in nearest:
        print(f"  ({p.x}, {p.y})  d={distance(origin, p):.4f}")

    if args.map_path:
        render_map(tree, origin, args.radius, found, args.map_path, geographic=args.source == 'osm')

    return 0


if __name__ == "__main__":
    sys.exit(main())
