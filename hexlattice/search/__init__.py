from .astar import EdgeCost, a_star
from .fov import Blocking, directional_field_of_view, field_of_view, has_line_of_sight
from .graph import MovementGraph, graph_path, movement_graph, path_travel_cost
from .movement import EnterCost, field_of_movement, movement_costs
from .pathfinder import PathState, Pathfinder, move_cost

__all__ = [
    "Blocking",
    "EdgeCost",
    "EnterCost",
    "MovementGraph",
    "PathState",
    "Pathfinder",
    "a_star",
    "directional_field_of_view",
    "field_of_movement",
    "field_of_view",
    "graph_path",
    "has_line_of_sight",
    "move_cost",
    "movement_costs",
    "movement_graph",
    "path_travel_cost",
]
