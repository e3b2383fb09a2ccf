#quadtree.py

import math
from dataclasses import dataclass
import numpy as np
import constants as C
import logger as log

@dataclass(frozen=True)
class Point:
    """An immutable 2D point. Equality is positional, so duplicates compare equal."""
    x: float
    y: float

    @classmethod
    def validated(cls, x, y):
        """Builds a point, rejecting NaN or infinite coordinates."""
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point coordinates must be finite, got ({x}, {y})")
        return cls(x, y)

    def __str__(self):
        return f"({self.x}, {self.y})"

    def distance_to(self, other):
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

@dataclass(frozen=True)
class Rectangle:
    """
    An immutable axis-aligned rectangle anchored at its top-left corner (x, y).
    It covers [x, x + width] x [y, y + height]; every edge is inclusive.
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def validated(cls, x, y, width, height):
        """Builds a rectangle, rejecting non-finite values and negative sizes."""
        values = (x, y, width, height)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Rectangle values must be finite, got {values}")
        if width < 0 or height < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {width}x{height}")
        return cls(x, y, width, height)

    @property
    def area(self):
        return self.width * self.height

    def contains(self, point):
        """Checks if a point is inside this rectangle, boundary included."""
        return (self.x <= point.x <= self.x + self.width and
                self.y <= point.y <= self.y + self.height)

    def intersects(self, range_rect):
        """Checks if another rectangle overlaps this one. Touching edges count."""
        return not (range_rect.x > self.x + self.width or
                    range_rect.x + range_rect.width < self.x or
                    range_rect.y > self.y + self.height or
                    range_rect.y + range_rect.height < self.y)

    def quadrants(self):
        """Returns the (ne, nw, se, sw) halves-by-halves of this rectangle."""
        x = self.x
        y = self.y
        w = self.width / 2
        h = self.height / 2

        ne = Rectangle(x + w, y, w, h)
        nw = Rectangle(x, y, w, h)
        se = Rectangle(x + w, y + h, w, h)
        sw = Rectangle(x, y + h, w, h)
        return ne, nw, se, sw

class QuadTree:
    """
    A point quadtree node. The root is built by the caller; every other node
    comes from subdivide(). Points already in a node's bucket stay there after
    it subdivides; only later arrivals are pushed down to the children.
    """
    def __init__(self, boundary, capacity=C.QUADTREE_CAPACITY, max_depth=C.QUADTREE_MAX_DEPTH, depth=0):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Capacity must be an integer >= 1, got {capacity!r}")
        if max_depth is not None and (isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0):
            raise ValueError(f"Max depth must be None or an integer >= 0, got {max_depth!r}")

        self.boundary = boundary
        self.capacity = capacity
        self.max_depth = max_depth
        self.depth = depth
        self.points = []
        self.divided = False
        self.northeast = None
        self.northwest = None
        self.southeast = None
        self.southwest = None

    def __len__(self):
        return sum(len(node.points) for node in self.nodes())

    def __bool__(self):
        # An empty index is still a valid index.
        return True

    def __repr__(self):
        return (f"QuadTree(boundary={self.boundary!r}, capacity={self.capacity}, "
                f"depth={self.depth}, points={len(self.points)}, divided={self.divided})")

    def children(self):
        """The four children in insertion order, or an empty tuple if undivided."""
        if not self.divided:
            return ()
        return (self.northeast, self.northwest, self.southeast, self.southwest)

    def nodes(self):
        """Yields every node of this subtree, parents before children."""
        yield self
        for child in self.children():
            yield from child.nodes()

    def height(self):
        """Number of levels below this node; 0 for an undivided node."""
        if not self.divided:
            return 0
        return 1 + max(child.height() for child in self.children())

    def subdivide(self):
        """Divides the quadtree into four new sub-quadrants."""
        if self.divided:
            raise RuntimeError(f"Node at depth {self.depth} is already divided")

        ne, nw, se, sw = self.boundary.quadrants()
        child_depth = self.depth + 1
        self.northeast = QuadTree(ne, self.capacity, self.max_depth, child_depth)
        self.northwest = QuadTree(nw, self.capacity, self.max_depth, child_depth)
        self.southeast = QuadTree(se, self.capacity, self.max_depth, child_depth)
        self.southwest = QuadTree(sw, self.capacity, self.max_depth, child_depth)

        self.divided = True
        log.debug(f"Subdivided node {self.boundary!r} at depth {self.depth}.")

    def insert(self, point):
        """Inserts a point. Returns False, without touching the tree, if it lies outside."""
        if not self.boundary.contains(point):
            return False

        if not self.divided:
            if len(self.points) < self.capacity:
                self.points.append(point)
                return True

            # At the depth limit the bucket grows instead of splitting again.
            if self.max_depth is not None and self.depth >= self.max_depth:
                if len(self.points) == self.capacity:
                    log.debug(f"Node {self.boundary!r} reached max depth {self.max_depth}; bucket now overflows.")
                self.points.append(point)
                return True

            self.subdivide()

        if self.northeast.insert(point): return True
        if self.northwest.insert(point): return True
        if self.southeast.insert(point): return True
        if self.southwest.insert(point): return True
        return False

    def insert_many(self, coords):
        """
        Inserts a batch of points and returns how many were accepted.

        Args:
            coords: an (N, 2) array-like of x, y pairs, or an iterable of Points.
                Every row is checked for finiteness before anything is inserted.
        """
        if not isinstance(coords, np.ndarray):
            coords = [(p.x, p.y) if isinstance(p, Point) else p for p in coords]
        coords = np.asarray(coords, dtype=C.COORDINATE_DTYPE)

        if coords.size == 0:
            return 0
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Expected an (N, 2) array of coordinates, got shape {coords.shape}")

        finite_rows = np.isfinite(coords).all(axis=1)
        if not finite_rows.all():
            bad = int(np.flatnonzero(~finite_rows)[0])
            raise ValueError(f"Coordinates must be finite; row {bad} is {coords[bad].tolist()}")

        accepted = 0
        for x, y in coords.tolist():
            if self.insert(Point(x, y)):
                accepted += 1

        log.debug(f"Bulk insert: {accepted:,} of {len(coords):,} points accepted into {self.boundary!r}.")
        return accepted

    def query(self, range_rect, found=None):
        """Returns the points inside range_rect, skipping subtrees that cannot overlap it."""
        if found is None:
            found = []

        if not self.boundary.intersects(range_rect):
            return found

        for p in self.points:
            if range_rect.contains(p):
                found.append(p)

        if self.divided:
            self.northwest.query(range_rect, found)
            self.northeast.query(range_rect, found)
            self.southwest.query(range_rect, found)
            self.southeast.query(range_rect, found)

        return found

    def flip(self, height=C.FLIP_HEIGHT):
        """
        Mirrors the subtree vertically inside a surface of the given height.
        Boundaries and points are replaced by their reflections, and the
        north/south children swap places so each quadrant keeps its name.
        """
        self._flip(height)
        log.debug(f"Flipped {len(self):,} points against height {height}.")

    def _flip(self, height):
        b = self.boundary
        self.boundary = Rectangle(b.x, height - (b.y + b.height), b.width, b.height)
        self.points = [Point(p.x, height - p.y) for p in self.points]

        if self.divided:
            self.northeast, self.southeast = self.southeast, self.northeast
            self.northwest, self.southwest = self.southwest, self.northwest
            for child in self.children():
                child._flip(height)
