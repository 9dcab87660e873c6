import sys
import os

# Add parent directories to path to import mirror_maze modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from mirror_maze.core.session import MirrorMaze
from mirror_maze.core.grid import RoomCoord
from mirror_maze.analysis import describe_ray_path, check_bounces, save_path_csv, save_path_json


def single_bounce_demo():
    """Light reaching the neighbouring room with one bounce, then two.

    Problem Statement
    The object and the receptor sit in the home room (0, 1). The target room
    is (0, 2), one room to the East, so one reflective wall is needed.

    Expected Behavior
    Auto-selection switches on the East wall of the home room (drawn on the
    canvas at x=520). The solved path bounces once on that wall.
    Moving the target to (1, 2) needs an East and a South bounce.
    """
    output_dir = os.path.join(os.path.dirname(__file__), 'output')
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)

    maze = MirrorMaze(name="single bounce demo", verbose=1)
    print(f"\n{maze}")
    print(f"Minimum bounces: {maze.minimum_bounces()}")
    print(f"Mirror sequence: {maze.mirror_sequence()}")

    path = maze.solve_path()
    print(describe_ray_path(path))
    for check in check_bounces(path):
        print(f"  bounce {check.index} on {check.wall}: angle law {'ok' if check.ok else 'VIOLATED'}")
    print(f"Saved: {save_path_csv(path, output_dir, filename='single_bounce.csv')}")

    maze.set_target_room(RoomCoord(1, 2))
    print(f"\nTarget moved: {maze}")
    print(f"Active walls: {maze.mirror_manager.get_active_walls(maze.home_room)}")
    path = maze.solve_path()
    print(describe_ray_path(path))
    print(f"Saved: {save_path_csv(path, output_dir, filename='double_bounce.csv')}")
    print(f"Saved: {save_path_json(path, output_dir, filename='double_bounce.json')}")

    print(f"\nLine of sight crossings: {[(c.wall, c.room) for c in maze.line_of_sight()]}")


if __name__ == "__main__":
    single_bounce_demo()
