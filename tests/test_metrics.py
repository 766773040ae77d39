from Nodes.Point import Point
from trees.KD_tree import KDTree
from trees.metrics import analyze_kdtree_instance, benchmark_kdtree


def test_benchmark_kdtree():
    res = benchmark_kdtree([10, 50], queries=5, radius=0.2, n_nearest=3, seed=0)
    assert res['sizes'] == [10, 50]
    for key in ('build_times', 'insert_times', 'search_times', 'n_search_times',
                'mem_peaks', 'heights', 'insert_heights', 'avg_results'):
        assert len(res[key]) == 2
    assert all(t >= 0 for t in res['build_times'])
    assert res['heights'] == [4, 6]
    assert all(h >= b for h, b in zip(res['insert_heights'], res['heights']))


def test_analyze_kdtree_instance():
    tree = KDTree.build([Point(x, y) for x, y in [(1, 8), (2, 2), (3, 6), (4, 9),
                                                  (7, 3), (8, 8), (9, 1), (9, 9)]])
    stats = analyze_kdtree_instance(tree)
    assert stats['size'] == 8
    assert stats['height'] == 4
    assert stats['optimal_height'] == 4
    assert stats['balance_factor'] == 1.0
    assert stats['leaves'] == 4
    assert stats['axis_counts'] == {'X': 5, 'Y': 3}


def test_analyze_empty_tree():
    stats = analyze_kdtree_instance(KDTree())
    assert stats['size'] == 0
    assert stats['height'] == 0
    assert stats['balance_factor'] == 0
    assert stats['leaves'] == 0
