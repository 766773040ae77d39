import time
import random
import tracemalloc
import gc
import math
from statistics import mean

from Nodes.Axis import Axis
from Nodes.Point import Point
from .KD_tree import KDTree


def _random_points(n, rng):
    return [Point(rng.random(), rng.random()) for _ in range(n)]


def _walk_stats(root):
    # devuelve (num_hojas, conteo de nodos por eje)
    leaves = 0
    axis_counts = {Axis.X.name: 0, Axis.Y.name: 0}

    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        axis_counts[node.axis.name] += 1
        if node.is_leaf():
            leaves += 1
        for child in node.children():
            if child is not None:
                stack.append(child)

    return leaves, axis_counts


def benchmark_kdtree(sizes, queries=50, radius=0.05, n_nearest=5, seed=None):
    """Construye, inserta y consulta árboles con puntos aleatorios en [0,1)².

    Para cada tamaño n:
    - build_times: tiempo de construir con n puntos
    - insert_times: tiempo de insertar n puntos uno a uno en un árbol vacío
    - search_times: tiempo medio por consulta de radio sobre el árbol construido
    - mem_peaks: pico de memoria durante la construcción
    - heights: altura del árbol construido y del árbol por inserciones
    - avg_results: cantidad media de vecinos por consulta de radio
    """
    rng = random.Random(seed)
    sizes = list(sizes)
    build_times = []
    insert_times = []
    search_times = []
    n_search_times = []
    mem_peaks = []
    heights = []
    insert_heights = []
    avg_results = []

    for n in sizes:
        points = _random_points(n, rng)

        gc.collect()
        tracemalloc.start()
        start = time.perf_counter()

        tree = KDTree.build(points)

        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        build_times.append(elapsed)
        mem_peaks.append(peak)
        heights.append(tree.height())

        start = time.perf_counter()
        inserted = KDTree()
        for p in points:
            inserted.insert_point(p)
        insert_times.append(time.perf_counter() - start)
        insert_heights.append(inserted.height())

        # consultas
        origins = _random_points(queries, rng)
        per_query = []
        counts = []
        for origin in origins:
            start = time.perf_counter()
            found = tree.nearest_neighbor(origin, radius)
            per_query.append(time.perf_counter() - start)
            counts.append(len(found))
        search_times.append(mean(per_query) if per_query else 0)
        avg_results.append(mean(counts) if counts else 0)

        per_query = []
        for origin in origins:
            start = time.perf_counter()
            tree.n_nearest_neighbor(origin, n_nearest)
            per_query.append(time.perf_counter() - start)
        n_search_times.append(mean(per_query) if per_query else 0)

    return {
        'sizes': sizes,
        'build_times': build_times,
        'insert_times': insert_times,
        'search_times': search_times,
        'n_search_times': n_search_times,
        'mem_peaks': mem_peaks,
        'heights': heights,
        'insert_heights': insert_heights,
        'avg_results': avg_results
    }


def analyze_kdtree_instance(tree: KDTree):
    """Analiza un KDTree existente: tamaño, altura y qué tan lejos está del balance óptimo."""
    size = len(tree)
    height = tree.height()
    leaves, axis_counts = _walk_stats(tree.root)

    # altura mínima posible para `size` nodos
    optimal = math.ceil(math.log2(size + 1)) if size > 0 else 0
    balance = (height / optimal) if optimal > 0 else 0

    return {
        'size': size,
        'height': height,
        'optimal_height': optimal,
        'balance_factor': balance,
        'leaves': leaves,
        'axis_counts': axis_counts
    }
