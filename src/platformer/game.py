# src/platformer/game.py
import sys, argparse, json, logging
from collections import Counter
from dataclasses import asdict
from enum import Enum

from .config import WIDTH, HEIGHT, FPS, MAX_LEVEL, COLOR_FG
from .background import generate_background
from .level import generate_level, resolve_level_number
from .player import Player
from .world import World, EventKind, host_frame
from src.analysis.level_stats import average_gap

PAN_PX_PER_FRAME = 4.0


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate and preview platformer levels.")
    p.add_argument("--level", type=int, default=1, help=f"Level number 1..{MAX_LEVEL}.")
    p.add_argument("--dump", action="store_true",
                   help="Print the level + background blueprints as JSON and exit.")
    p.add_argument("--log-level", default="INFO", help="Python logging level.")
    return p.parse_args(argv)


def _json_default(o):
    if isinstance(o, Enum):
        return o.value
    raise TypeError(f"Not JSON serializable: {type(o).__name__}")


def describe_level(level_number: int) -> dict:
    """Both blueprints plus a short summary, as plain JSON-ready data."""
    level = generate_level(level_number)
    background = generate_background(level.level_number)
    kinds = Counter(e.kind.value for e in level.enemies)
    summary = {
        "level": level.level_number,
        "difficulty": round(level.difficulty, 4),
        "platforms": len(level.platforms),
        "moving_platforms": len(level.moving_platforms),
        "enemies": dict(sorted(kinds.items())),
        "collectibles": len(level.collectibles),
        "average_gap": round(float(average_gap(level)), 3),
        "level_width": level.level_width,
        "background_layers": [l.element_type.value for l in background.layers],
    }
    # round-trip through json so enums become their string values
    data = {"summary": summary, "level": asdict(level), "background": asdict(background)}
    return json.loads(json.dumps(data, default=_json_default))


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.dump:
        print(json.dumps(describe_level(args.level), indent=2))
        return

    import pygame
    from .draw import draw_frame

    pygame.init()
    pygame.display.set_caption("Super Kiro World — level preview")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    def load(level_number):
        world = World.from_level(resolve_level_number(level_number))
        return world, Player(), 0.0, Counter()

    world, player, camera_x, tally = load(args.level)
    paused = False

    while True:
        clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == pygame.K_SPACE:
                    paused = not paused
                if event.key == pygame.K_n:
                    world, player, camera_x, tally = load(world.blueprint.level_number % MAX_LEVEL + 1)
                if event.key == pygame.K_p:
                    world, player, camera_x, tally = load((world.blueprint.level_number - 2) % MAX_LEVEL + 1)

        if not paused:
            for ev in host_frame(world, player):
                tally[ev.kind] += 1
            camera_x = (camera_x + PAN_PX_PER_FRAME) % max(1.0, world.blueprint.level_width)

        draw_frame(screen, world, camera_x, player)
        bp = world.blueprint
        hud = (f"Level {bp.level_number}  difficulty {bp.difficulty:.2f}  "
               f"enemies {len(world.enemies)}  bolts {len(world.projectiles)}  "
               f"hits {tally[EventKind.PLAYER_DAMAGED]}")
        screen.blit(font.render(hud, True, COLOR_FG), (12, 10))
        screen.blit(font.render("N/P level | SPACE pause | ESC quit", True, COLOR_FG), (12, 32))
        pygame.display.flip()


if __name__ == "__main__":
    run()
