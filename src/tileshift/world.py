import random

from esper import World


def create_world(*, rng: random.Random | None = None) -> World:
    """Create the ECS world shared by the puzzle systems.

    The random generator is attached as ``world.random`` so every system that
    shuffles draws from one seedable source.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    return world
