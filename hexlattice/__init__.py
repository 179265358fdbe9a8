"""Hexagonal grid coordinate algebra, enumeration and search."""

import logging

from .bounds import HexBounds
from .config import CacheSettings, LatticeConfig, SearchSettings
from .conversions import (
    Doubled,
    DoubledLayout,
    Offset,
    OffsetLayout,
    axial_to_cube,
    axial_to_doubled,
    axial_to_offset,
    cube_to_axial,
    doubled_to_axial,
    offset_to_axial,
)
from .coords import Cube, Hex, by_length, by_qr, by_rq, range_count, ring_count, wedge_count
from .directions import DirectionWay, EdgeDirection, VertexDirection
from .grid import GridEdge, GridVertex
from .heuristics import distance, euclidean_distance, length
from .iteration import HexSequence, average, bounds_of, center
from .lines import line_to, rectiline_to
from .neighbors import (
    diagonals,
    neighbors,
    neighbors_bounded,
    neighbors_offset,
    neighbors_offset_bounded,
    neighbors_wrapped,
)
from .orientation import Orientation
from .resolution import from_hexmod, to_hexmod, to_higher_res, to_local, to_lower_res, wrap_in_range
from .rings import RingCache, custom_ring, ring, ring_edge, ring_edges, rings, spiral_range
from .shapes import (
    corner_wedge,
    corner_wedge_to,
    custom_wedge_to,
    flat_rectangle,
    full_wedge,
    hex_range,
    parallelogram,
    pointy_rectangle,
    rhombus,
    triangle,
    wedge,
    wedge_to,
    xrange,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CacheSettings",
    "Cube",
    "DirectionWay",
    "Doubled",
    "DoubledLayout",
    "EdgeDirection",
    "GridEdge",
    "GridVertex",
    "Hex",
    "HexBounds",
    "HexSequence",
    "LatticeConfig",
    "Offset",
    "OffsetLayout",
    "Orientation",
    "RingCache",
    "SearchSettings",
    "VertexDirection",
    "average",
    "axial_to_cube",
    "axial_to_doubled",
    "axial_to_offset",
    "bounds_of",
    "by_length",
    "by_qr",
    "by_rq",
    "center",
    "corner_wedge",
    "corner_wedge_to",
    "cube_to_axial",
    "custom_ring",
    "custom_wedge_to",
    "diagonals",
    "distance",
    "doubled_to_axial",
    "euclidean_distance",
    "flat_rectangle",
    "from_hexmod",
    "full_wedge",
    "hex_range",
    "length",
    "line_to",
    "neighbors",
    "neighbors_bounded",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "neighbors_wrapped",
    "offset_to_axial",
    "parallelogram",
    "pointy_rectangle",
    "range_count",
    "rectiline_to",
    "rhombus",
    "ring",
    "ring_count",
    "ring_edge",
    "ring_edges",
    "rings",
    "spiral_range",
    "to_hexmod",
    "to_higher_res",
    "to_local",
    "to_lower_res",
    "triangle",
    "wedge",
    "wedge_count",
    "wedge_to",
    "wrap_in_range",
    "xrange",
]
