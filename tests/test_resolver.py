import math

import numpy as np
import pytest

from prize_wheel.prizes import PALETTE
from prize_wheel.resolver import (NO_SECTOR, GazeSectorResolver, locate_angle,
                                  normalize_angle, ray_angle, resolve_sector)
from prize_wheel.sectors import (WHEEL_END, WHEEL_START, Sector, SectorWheel,
                                 generate_wheel)
from tracking.heading import HeadingVector


@pytest.mark.parametrize("angle, expected", [
    (0.0, 0.0),
    (-math.pi / 2, -math.pi / 2),
    (-math.pi, math.pi),
    (3 * math.pi / 2, -math.pi / 2),
    (5 * math.pi, math.pi),
    (-7 * math.pi / 2, math.pi / 2),
])
def test_normalize_angle(angle, expected):
    assert normalize_angle(angle) == pytest.approx(expected)


def test_normalized_angle_stays_in_domain():
    for angle in np.linspace(-20, 20, 2001):
        result = normalize_angle(angle)
        assert WHEEL_START <= result < WHEEL_END


def test_mirror_negates_x():
    assert ray_angle((1.0, 0.0)) == pytest.approx(math.pi)
    assert ray_angle((1.0, 0.0), display_is_mirrored=False) == pytest.approx(0.0)
    assert ray_angle((0.0, 1.0)) == pytest.approx(math.pi / 2)


def test_heading_right_resolves_to_sector_containing_pi(three_equal_wheel):
    index = resolve_sector(HeadingVector(1.0, 0.0), three_equal_wheel)

    assert three_equal_wheel[index].contains(math.pi)
    assert not three_equal_wheel[index].contains(0.0)
    assert index == 2


def test_unmirrored_display_uses_raw_heading(three_equal_wheel):
    index = resolve_sector(HeadingVector(1.0, 0.0), three_equal_wheel,
                           display_is_mirrored=False)

    assert index == 0


def test_heading_up_resolves_to_first_sector(three_equal_wheel):
    assert resolve_sector(HeadingVector(0.0, -1.0), three_equal_wheel) == 0


def test_heading_down_resolves_by_cumulative_spans(three_equal_wheel):
    # Setores: [-90°, 30°), [30°, 150°), [150°, 270°)
    assert resolve_sector(HeadingVector(0.0, 1.0), three_equal_wheel) == 1


@pytest.mark.parametrize("seed", range(10))
def test_boundary_belongs_to_the_sector_starting_there(seed):
    wheel = generate_wheel(PALETTE, 20, rng=np.random.default_rng(seed))

    for i, sector in enumerate(wheel):
        assert locate_angle(wheel, sector.start_angle) == i


@pytest.mark.parametrize("seed", range(5))
def test_dense_sampling_hits_exactly_one_sector(seed):
    wheel = generate_wheel(PALETTE, 20, rng=np.random.default_rng(seed))

    for angle in np.linspace(WHEEL_START, WHEEL_END, 7200, endpoint=False):
        matches = [i for i, s in enumerate(wheel) if s.contains(angle)]
        assert len(matches) == 1
        assert locate_angle(wheel, angle) == matches[0]


def test_angle_at_closing_seam_wraps_to_first_sector(three_equal_wheel):
    assert locate_angle(three_equal_wheel, WHEEL_END) == 0


def test_fallback_to_last_sector():
    # Resíduo de ponto flutuante: o último setor termina um pouco antes de 3π/2
    wheel = SectorWheel((
        Sector(WHEEL_START, math.pi / 2, 1.0, "#FF78A3"),
        Sector(math.pi / 2, WHEEL_END - 1e-9, 1.0, "#47D495"),
    ), total_weight=2.0)

    assert locate_angle(wheel, WHEEL_END - 1e-12) == 1


def test_no_wheel_returns_no_sector():
    assert resolve_sector(HeadingVector(0.3, 0.1), None) is NO_SECTOR


def test_resolver_object_uses_configured_mirror(three_equal_wheel):
    mirrored = GazeSectorResolver(display_is_mirrored=True)
    plain = GazeSectorResolver(display_is_mirrored=False)
    heading = HeadingVector(1.0, 0.0)

    assert mirrored.resolve(heading, three_equal_wheel) == 2
    assert plain.resolve(heading, three_equal_wheel) == 0
    assert mirrored.resolve(heading, None) is NO_SECTOR


def test_mirror_flag_picks_between_opposite_sectors(three_equal_wheel):
    heading = HeadingVector(-1.0, 0.0)

    # Espelhado: (1, 0) -> ângulo 0; sem espelho: ângulo π
    assert resolve_sector(heading, three_equal_wheel) == 0
    assert resolve_sector(heading, three_equal_wheel, display_is_mirrored=False) == 2
    assert GazeSectorResolver(True).ray_angle(heading) == pytest.approx(0.0)
    assert GazeSectorResolver(False).ray_angle(heading) == pytest.approx(math.pi)
