from hexlattice import EdgeDirection, Hex, HexBounds, hex_range
from hexlattice.search import directional_field_of_view, field_of_movement, field_of_view

MAP_RADIUS = 6
BUDGET = 4

bounds = HexBounds.from_radius(MAP_RADIUS)
origin = Hex(0, 0)
walls = {Hex(2, -1), Hex(2, 0), Hex(-1, 2), Hex(-3, 1)}
swamp = {Hex(1, 1), Hex(0, 2), Hex(-1, 1)}


def blocking(h: Hex) -> bool:
    return h in walls


def cost(h: Hex) -> float | None:
    if h not in bounds or h in walls:
        return None
    return 3.0 if h in swamp else 1.0


def render(marked: set[Hex]) -> str:
    lines = []
    for r in range(-MAP_RADIUS, MAP_RADIUS + 1):
        row = [" " * abs(r)]
        for q in range(-MAP_RADIUS, MAP_RADIUS + 1):
            h = Hex(q, r)
            if h not in bounds:
                continue
            if h == origin:
                row.append("@ ")
            elif h in walls:
                row.append("# ")
            elif h in marked:
                row.append("o ")
            else:
                row.append(". ")
        lines.append("".join(row))
    return "\n".join(lines)


if __name__ == "__main__":
    print("field of view")
    print(render(field_of_view(origin, MAP_RADIUS, blocking)))
    print()
    print("directional field of view (right)")
    print(render(directional_field_of_view(origin, MAP_RADIUS, EdgeDirection.POINTY_RIGHT, blocking)))
    print()
    print(f"field of movement (budget {BUDGET})")
    reachable = field_of_movement(origin, BUDGET, cost)
    print(render(reachable))
    print(f"{len(reachable)} of {len(hex_range(origin, BUDGET))} cells reachable")
