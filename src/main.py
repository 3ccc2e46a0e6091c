"""Entry point: open the window and let the explorer wander the maze.

Everything frame-related lives in `core.engine`; the level, player and ray
sweep are owned by `world.simulation`.
"""

from core.engine import Engine


def main():
    Engine().run()


if __name__ == "__main__":
    main()
