from hex_tiles import GridSettings, grid_path, without_cells
from hex_tiles.geometry import Cube, cone, line

settings = GridSettings(hex_size=1.0, orientation="flat", radius=5)
layout = settings.layout()

start = Cube(0, 0, 0)
goal = Cube(4, -1, -3)

blocked = {Cube(1, 0, -1), Cube(2, -1, -1), Cube(2, 0, -2)}


if __name__ == "__main__":
    graph = without_cells(settings.build_grid(), blocked)
    print("path:", grid_path(graph, start, goal))
    print("line:", line(start, goal))
    print("cone:", cone(start, 0, 3, 120.0, settings.orientation))
    print("goal center:", layout.to_planar(goal))
    print("cell at goal center:", layout.to_cube(layout.to_planar(goal)))
