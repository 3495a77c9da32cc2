import random

from esper import World

from lines.components.game_rules import GameRules
from lines.components.human_agent import HumanAgent
from lines.components.random_agent import RandomAgent


def create_world(
    *,
    rules: GameRules | None = None,
    autoplay: bool = False,
    rng: random.Random | None = None,
) -> World:
    """Build the session world: rules singleton, player entity and session RNG.

    The board is not a world resource; the turn controller creates and owns it.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(rules or GameRules())

    if autoplay:
        seed = world.random.randrange(2**32)
        world.create_entity(RandomAgent(seed=seed))
    else:
        world.create_entity(HumanAgent())
    return world


def get_rules(world: World) -> GameRules:
    for _, rules in world.get_component(GameRules):
        return rules
    raise RuntimeError("GameRules definitions not found")


def get_player_entity(world: World) -> int | None:
    for entity, _ in world.get_component(HumanAgent):
        return entity
    for entity, _ in world.get_component(RandomAgent):
        return entity
    return None
