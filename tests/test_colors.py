from dorga.colors import BACKGROUND_PALETTES, Color, ColorManager


def _snapshot(manager):
    return (
        manager.background(),
        manager.coin(),
        manager.background_star(),
        manager.asteroid_000(),
        manager.asteroid_001(),
    )


def _rocket(manager):
    return (
        manager.rocket_base(),
        manager.rocket_top(),
        manager.rocket_window(),
        manager.rocket_propeller_000(),
        manager.rocket_propeller_001(),
        manager.rocket_propeller_002(),
        manager.rocket_fire(),
    )


def test_initial_palette_values():
    manager = ColorManager()
    assert manager.background() == Color(133, 60, 217, 255)
    assert manager.coin() == Color(236, 176, 246, 255)
    assert manager.asteroid_001() == Color(150, 76, 225, 255)


def test_initial_rocket_colors():
    manager = ColorManager()
    assert manager.rocket_base() == Color(213, 167, 247, 255)
    assert manager.rocket_top() == Color(189, 129, 237, 255)
    assert manager.rocket_fire() == Color(229, 197, 247, 255)


def test_next_palette_advances_background():
    manager = ColorManager()
    manager.next_palette()
    assert manager.background() == Color(55, 69, 109, 255)
    assert manager.background_star() == Color(106, 134, 197, 255)


def test_palette_cycle_wraps_around():
    manager = ColorManager()
    start = _snapshot(manager)
    seen = set()
    for _ in range(BACKGROUND_PALETTES):
        seen.add(manager.coin())
        manager.next_palette()
    assert _snapshot(manager) == start
    assert len(seen) == BACKGROUND_PALETTES


def test_next_palette_leaves_rocket_alone():
    manager = ColorManager()
    before = _rocket(manager)
    for _ in range(5):
        manager.next_palette()
    assert _rocket(manager) == before


def test_colors_are_opaque():
    manager = ColorManager()
    for _ in range(BACKGROUND_PALETTES):
        assert all(color.a == 255 for color in _snapshot(manager))
        manager.next_palette()