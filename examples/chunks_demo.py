from collections import Counter

from hexlattice import Hex, HexBounds, hex_range, to_higher_res, to_lower_res

CHUNK_RADIUS = 2

map_coords = hex_range(Hex(0, 0), 8)
wrap_map = HexBounds.from_radius(3)


if __name__ == "__main__":
    chunks = Counter(to_lower_res(c, CHUNK_RADIUS) for c in map_coords)
    for parent, size in sorted(chunks.items(), key=lambda item: item[0].to_tuple()):
        print(f"chunk {parent} centred on {to_higher_res(parent, CHUNK_RADIUS)}: {size} cells")

    for coord in (Hex(0, 4), Hex(4, 0), Hex(4, -4)):
        print(f"{coord} wraps to {wrap_map.wrap(coord)}")
