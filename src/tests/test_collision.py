from types import SimpleNamespace

from src.platformer.collision import CollisionOutcome, Rect, classify_contact, resolve_landing
from src.platformer.config import STOMP_TOLERANCE

ENEMY = Rect(100, 500, 30, 30)   # top at y=500


def test_rect_edges_and_center():
    r = Rect(10, 20, 30, 40)
    assert (r.left, r.right, r.top, r.bottom) == (10, 40, 20, 60)
    assert r.center == (25, 40)
    assert r.inflate(5) == Rect(5, 15, 40, 50)


def test_touching_rects_do_not_overlap():
    assert not Rect(0, 0, 10, 10).overlaps(Rect(10, 0, 10, 10))
    assert not Rect(0, 0, 10, 10).overlaps(Rect(0, 10, 10, 10))
    assert Rect(0, 0, 10, 10).overlaps(Rect(9.5, 9.5, 10, 10))


def test_no_overlap_no_outcome():
    player = Rect(300, 300, 40, 40)
    assert classify_contact(player, 5.0, ENEMY) is None


def test_falling_from_above_defeats():
    player = Rect(100, 470, 40, 40)   # bottom 510, was 505 before a +5 step
    assert classify_contact(player, 5.0, ENEMY) is CollisionOutcome.DEFEAT


def test_stomp_tolerance_boundary_is_inclusive():
    vy = 2.0
    # previous bottom lands exactly on enemy top + tolerance
    player = Rect(100, ENEMY.top + STOMP_TOLERANCE + vy - 40, 40, 40)
    assert classify_contact(player, vy, ENEMY) is CollisionOutcome.DEFEAT
    deeper = Rect(100, player.y + 0.5, 40, 40)
    assert classify_contact(deeper, vy, ENEMY) is CollisionOutcome.DAMAGE


def test_side_and_rising_contacts_damage():
    side = Rect(80, 495, 40, 40)
    assert classify_contact(side, 0.0, ENEMY) is CollisionOutcome.DAMAGE
    rising = Rect(100, 470, 40, 40)
    assert classify_contact(rising, -3.0, ENEMY) is CollisionOutcome.DAMAGE


def test_resolve_landing_snaps_onto_platform_top():
    body = SimpleNamespace(x=10.0, y=522.0, width=30, height=30, vy=2.0, grounded=False)
    landed = resolve_landing(body, prev_bottom=550.0, platforms=[Rect(0, 550, 200, 50)])
    assert landed
    assert body.y == 520.0 and body.vy == 0.0 and body.grounded


def test_resolve_landing_ignores_rising_and_misses():
    rising = SimpleNamespace(x=10.0, y=522.0, width=30, height=30, vy=-2.0, grounded=False)
    assert not resolve_landing(rising, 554.0, [Rect(0, 550, 200, 50)])
    beside = SimpleNamespace(x=300.0, y=522.0, width=30, height=30, vy=2.0, grounded=False)
    assert not resolve_landing(beside, 550.0, [Rect(0, 550, 200, 50)])
    assert not beside.grounded
