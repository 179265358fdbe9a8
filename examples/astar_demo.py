from hexlattice import Hex, HexBounds
from hexlattice.search import a_star

bounds = HexBounds.from_radius(6)
start = Hex(-4, 0)
goal = Hex(4, -1)

blocked = {Hex(0, r) for r in range(-4, 5)} - {Hex(0, 4)}


def passable(a: Hex) -> bool:
    return a in bounds and a not in blocked


if __name__ == "__main__":
    path, total_cost = a_star(start, goal, passable=passable, max_expansions=10_000)
    print("path:", path)
    print("cost:", total_cost)
