from src.platformer.collision import Rect
from src.platformer.config import (
    COIN_LIFT, ENEMY_DEFEAT_POINTS, GROUND_Y, MAX_LEVEL, PLAYER_START_X, STOMP_BOUNCE_VY,
)
from src.platformer.enemies import GroundPatroller, PlasmaShooter, Projectile
from src.platformer.level import CollectibleKind, generate_level
from src.platformer.player import Player
from src.platformer.world import EventKind, MovingPlatform, World, host_frame


def _far_player():
    return Player(x=-5000.0, y=-5000.0)


def _quiet_world(level=1):
    """World with no blueprint enemies or pickups, for hand-placed scenarios."""
    world = World(generate_level(level))
    world.enemies = []
    world.collectibles = []
    return world


def test_world_seeds_from_blueprint():
    for n in range(1, MAX_LEVEL + 1):
        world = World.from_level(n)
        bp = world.blueprint
        assert len(world.enemies) == len(bp.enemies)
        assert world.projectiles == []
        assert len(world.collectibles) == len(bp.collectibles)
        assert len(world.moving_platforms) == len(bp.moving_platforms)
        assert world.background is not None and world.background.level_number == n
        assert world.bounds.width == bp.level_width


def test_idle_frames_report_nothing():
    world = World.from_level(1)
    player = _far_player()
    for _ in range(30):
        assert world.step(player) == []
    assert world.frame == 30


def test_runtime_is_reproducible():
    def trace(level):
        world = World.from_level(level)
        player = Player()
        snapshots = []
        for _ in range(400):
            player.update_physics(world.platform_rects())
            if player.out_of_world():
                player.respawn()
            kinds = [e.kind for e in world.step(player)]
            snapshots.append((
                tuple((e.x, e.y, e.alive) for e in world.enemies),
                tuple((b.x, b.y) for b in world.projectiles),
                tuple(kinds),
            ))
        return snapshots

    assert trace(MAX_LEVEL) == trace(MAX_LEVEL)


def test_stomp_reports_defeat_and_prunes_enemy():
    world = _quiet_world()
    plat = world.blueprint.platforms[0]
    enemy = GroundPatroller(x=60, y=plat.y - 30, patrol_start=10, patrol_end=plat.width - 40, speed=1)
    world.enemies = [enemy]
    player = Player(x=60, y=plat.y - 30 - 40 + 3, vy=5.0)

    events = world.step(player)
    assert [e.kind for e in events] == [EventKind.ENEMY_DEFEATED]
    assert events[0].points == ENEMY_DEFEAT_POINTS
    assert world.enemies == []


def test_side_contact_reports_damage_and_keeps_enemy():
    world = _quiet_world()
    plat = world.blueprint.platforms[0]
    enemy = GroundPatroller(x=60, y=plat.y - 30, patrol_start=10, patrol_end=plat.width - 40, speed=1)
    world.enemies = [enemy]
    player = Player(x=45, y=plat.y - 40, vy=0.0)

    events = world.step(player)
    assert [e.kind for e in events] == [EventKind.PLAYER_DAMAGED]
    assert world.enemies == [enemy]


def test_projectile_hit_reports_damage_and_is_pruned():
    world = _quiet_world()
    player = Player(x=100, y=400)
    world.projectiles.append(Projectile(x=105, y=405, velocity_x=1, velocity_y=0, bounds=world.bounds))
    events = world.step(player)
    assert [e.kind for e in events] == [EventKind.PLAYER_DAMAGED]
    assert world.projectiles == []


def test_spent_projectiles_are_pruned():
    world = _quiet_world()
    world.projectiles.append(Projectile(x=-99, y=300, velocity_x=-5, velocity_y=0, bounds=world.bounds))
    world.step(_far_player())
    assert world.projectiles == []


def test_fallen_enemies_are_pruned():
    world = _quiet_world()
    world.enemies = [GroundPatroller(x=-2000, y=0, patrol_start=-2100, patrol_end=-1900, speed=1)]
    player = _far_player()
    for _ in range(100):
        world.step(player)
    assert world.enemies == []


def _world_with(pred):
    """First level world holding a collectible matching pred, enemies cleared."""
    for n in range(1, MAX_LEVEL + 1):
        world = World(generate_level(n))
        world.enemies = []
        item = next((c for c in world.collectibles if pred(world, c)), None)
        if item is not None:
            return world, item
    raise AssertionError("no level holds a matching collectible")


def _ground_coin(world, c):
    # ground tier only (extra lives sit on raised platforms), away from the flag
    return (c.kind is CollectibleKind.COIN and c.y + COIN_LIFT == GROUND_Y
            and c.x < world.blueprint.final_platform.x)


def test_coin_pickup():
    world, coin = _world_with(_ground_coin)
    before = len(world.collectibles)
    player = Player(x=coin.x + 8, y=coin.y + 8, width=4, height=4)

    events = world.step(player)
    assert [e.kind for e in events] == [EventKind.COIN_COLLECTED]
    assert events[0].points == 10
    assert len(world.collectibles) == before - 1
    assert world.step(player) == []


def test_extra_life_pickup():
    world, life = _world_with(lambda w, c: c.kind is CollectibleKind.EXTRA_LIFE)
    player = Player(x=life.x + 10, y=life.y + 10, width=4, height=4)
    events = world.step(player)
    lives = [e for e in events if e.kind is EventKind.EXTRA_LIFE_COLLECTED]
    assert len(lives) == 1 and lives[0].points == 100


def test_reaching_flag_completes_once():
    world = _quiet_world(MAX_LEVEL)
    flag = world.blueprint.end_flag
    player = Player(x=flag.x, y=flag.y + 10)
    events = world.step(player)
    assert EventKind.LEVEL_COMPLETE in [e.kind for e in events]
    assert world.completed
    assert EventKind.LEVEL_COMPLETE not in [e.kind for e in world.step(player)]


def test_moving_platform_oscillates_inside_span():
    mp = MovingPlatform(x=100, y=450, width=100, height=20, start_x=100, end_x=200, speed=1.5)
    xs = []
    for _ in range(500):
        mp.update()
        xs.append(mp.x)
        assert 100 - 1.5 <= mp.x <= 200 + 1.5
    assert max(xs) >= 200 and min(xs) <= 100


def test_player_rides_moving_platform():
    world = _quiet_world()
    mp = MovingPlatform(x=-3000, y=450, width=100, height=20, start_x=-3000, end_x=-2800, speed=1.5)
    world.moving_platforms = [mp]
    player = Player(x=-2990, y=450 - 40, grounded=True)
    world.step(player)
    assert player.x == -2990 + 1.5


def test_hit_sends_player_back_once_per_contact():
    world = _quiet_world()
    world.moving_platforms = []
    world.static_rects = [Rect(-10_000, 550, 20_000, 50)]
    # walks left into an idle player, turns at 500 and never reaches the start area
    world.enemies = [GroundPatroller(x=600, y=520, patrol_start=500, patrol_end=900,
                                     speed=1, direction=-1)]
    player = Player(x=480, y=510, grounded=True)

    kinds = [e.kind for _ in range(400) for e in host_frame(world, player)]
    assert kinds.count(EventKind.PLAYER_DAMAGED) == 1
    assert player.x == PLAYER_START_X
    assert world.enemies and world.enemies[0].alive


def test_stomp_bounces_player_through_host_frame():
    world = _quiet_world()
    world.moving_platforms = []
    world.static_rects = [Rect(-10_000, 550, 20_000, 50)]
    world.enemies = [GroundPatroller(x=600, y=520, patrol_start=500, patrol_end=900, speed=1)]
    player = Player(x=600, y=478, vy=4.0)

    events = host_frame(world, player)
    assert [e.kind for e in events] == [EventKind.ENEMY_DEFEATED]
    assert player.vy == STOMP_BOUNCE_VY


def test_shooter_bolt_travels_hits_and_is_pruned():
    world = _quiet_world()
    shooter = PlasmaShooter(x=400, y=520, fire_range=300, fire_rate=3, world_bounds=world.bounds)
    world.enemies = [shooter]
    player = Player(x=500, y=515)

    assert world.step(player) == [] and world.step(player) == []
    assert world.step(player) == []
    assert len(world.projectiles) == 1
    bolt = world.projectiles[0]
    assert bolt.velocity_x > 0

    last_x = bolt.x
    damaged = []
    for _ in range(60):
        damaged = [e for e in world.step(player) if e.kind is EventKind.PLAYER_DAMAGED]
        if damaged:
            break
        assert bolt.x > last_x
        last_x = bolt.x
    assert len(damaged) == 1
    assert not bolt.active
    assert bolt not in world.projectiles
    assert shooter.alive
