import logging

from Nodes.Point import Point
from trees.KD_tree import KDTree
from trees.logger import LOGGER_NAME, logger, set_debug


def test_set_debug():
    try:
        set_debug(True)
        assert logger.level == logging.DEBUG
        set_debug(False)
        assert logger.level == logging.INFO
    finally:
        set_debug(False)


def test_search_logs_summary(caplog):
    tree = KDTree.build([Point(1, 1), Point(2, 2), Point(5, 5)])
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        tree.nearest_neighbor(Point(1, 1), 1.5)
    assert any("subárboles podados" in r.getMessage() for r in caplog.records)
