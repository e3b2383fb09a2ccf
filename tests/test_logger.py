"""Tests for the timestamped logger and its use by the quadtree."""

import re

import logger
from quadtree import Point, Rectangle, QuadTree

STAMP = re.compile(r"^\[\+\d+\.\d{3}s\] ")


def test_log_prefixes_elapsed_time(capsys):
    logger.reset_clock()
    logger.log("hello")
    out = capsys.readouterr().out
    assert STAMP.match(out)
    assert out.rstrip().endswith("hello")


def test_debug_is_silent_unless_verbose(capsys):
    logger.debug("hidden")
    assert capsys.readouterr().out == ""

    logger.set_verbose(True)
    assert logger.is_verbose()
    logger.debug("shown")
    assert "DEBUG: shown" in capsys.readouterr().out


def test_subdivision_is_logged_in_verbose_mode(capsys):
    tree = QuadTree(Rectangle(0, 0, 10, 10), 1)
    tree.insert(Point(1, 1))
    tree.insert(Point(9, 9))
    assert capsys.readouterr().out == ""

    logger.set_verbose(True)
    tree.insert(Point(8, 8))
    tree.insert(Point(9.5, 9.5))
    assert "Subdivided node" in capsys.readouterr().out


def test_bulk_insert_and_flip_are_quiet_by_default(capsys):
    tree = QuadTree(Rectangle(0, 0, 10, 10), 2)
    tree.insert_many([(1, 1), (2, 2), (20, 20)])
    tree.flip(10)
    assert capsys.readouterr().out == ""


def test_bulk_insert_and_flip_report_in_verbose_mode(capsys):
    logger.set_verbose(True)
    tree = QuadTree(Rectangle(0, 0, 10, 10), 2)
    tree.insert_many([(1, 1), (2, 2), (20, 20)])
    tree.flip(10)
    out = capsys.readouterr().out
    assert "Bulk insert: 2 of 3 points accepted" in out
    assert "Flipped 2 points against height 10." in out
