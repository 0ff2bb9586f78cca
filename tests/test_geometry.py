"""
Tests for the geometric core: distance, radial sampling, convex hull.
"""

from __future__ import annotations

import math

import pytest

from commute_zones.geometry import (
    DEFAULT_RING_RADII_DEG,
    KM_PER_DEGREE_LAT,
    Bounds,
    Coordinate,
    SampledPoint,
    circle_boundary,
    convex_hull,
    cross,
    haversine_km,
    km_to_lat_degrees,
    radial_sample,
)

PARIS = Coordinate(lat=48.8566, lon=2.3522)
LONDON = Coordinate(lat=51.5074, lon=-0.1278)


def _ground_radius_deg(origin: Coordinate, p: Coordinate) -> float:
    """Undo the longitude stretch to recover the sampling radius."""
    dlat = p.lat - origin.lat
    dlon = (p.lon - origin.lon) * math.cos(math.radians(origin.lat))
    return math.hypot(dlat, dlon)


def _inside_or_on(hull: list[Coordinate], p: Coordinate, eps: float = 1e-12) -> bool:
    """Point-in-convex-polygon for a counter-clockwise hull."""
    n = len(hull)
    return all(cross(hull[i], hull[(i + 1) % n], p) >= -eps for i in range(n))


class TestHaversine:
    """Test great-circle distance."""

    def test_zero_for_same_point(self) -> None:
        assert haversine_km(PARIS, PARIS) == 0.0

    def test_symmetric(self) -> None:
        assert haversine_km(PARIS, LONDON) == haversine_km(LONDON, PARIS)

    def test_paris_london(self) -> None:
        """Known distance is roughly 344 km."""
        assert haversine_km(PARIS, LONDON) == pytest.approx(343.5, abs=1.0)

    def test_one_degree_latitude(self) -> None:
        a = Coordinate(lat=10.0, lon=20.0)
        b = Coordinate(lat=11.0, lon=20.0)
        assert haversine_km(a, b) == pytest.approx(KM_PER_DEGREE_LAT)

    def test_km_to_lat_degrees(self) -> None:
        assert km_to_lat_degrees(KM_PER_DEGREE_LAT * 2) == pytest.approx(2.0)


class TestRadialSample:
    """Test ring-grid sampling."""

    def test_point_count(self) -> None:
        points = radial_sample(PARIS, [0.01, 0.02, 0.03], directions=8)
        assert len(points) == 24

    def test_default_grid(self) -> None:
        points = radial_sample(PARIS)
        assert len(points) == len(DEFAULT_RING_RADII_DEG) * 12

    def test_points_at_claimed_radius(self) -> None:
        radii = [0.015, 0.06, 0.105]
        points = radial_sample(PARIS, radii, directions=10)
        for ring, radius in enumerate(radii):
            for p in points[ring * 10 : (ring + 1) * 10]:
                assert _ground_radius_deg(PARIS, p) == pytest.approx(radius, rel=1e-9)

    def test_first_direction_is_north(self) -> None:
        (north, east, south, west) = radial_sample(PARIS, [0.1], directions=4)
        assert north.lat == pytest.approx(PARIS.lat + 0.1)
        assert north.lon == pytest.approx(PARIS.lon)
        assert east.lon > PARIS.lon
        assert south.lat == pytest.approx(PARIS.lat - 0.1)
        assert west.lon < PARIS.lon

    def test_longitude_correction(self) -> None:
        """East-west offsets widen with latitude so rings keep their ground size."""
        east = radial_sample(Coordinate(lat=60.0, lon=0.0), [0.1], directions=4)[1]
        assert east.lon == pytest.approx(0.1 / math.cos(math.radians(60.0)))
        assert east.lon == pytest.approx(0.2)

    def test_ring_ground_radius(self) -> None:
        """Default rings span ~1.7 km to ~11.7 km on the ground."""
        inner = radial_sample(PARIS, [DEFAULT_RING_RADII_DEG[0]], directions=4)
        outer = radial_sample(PARIS, [DEFAULT_RING_RADII_DEG[-1]], directions=4)
        assert haversine_km(PARIS, inner[0]) == pytest.approx(1.67, abs=0.05)
        assert haversine_km(PARIS, outer[0]) == pytest.approx(11.7, abs=0.1)

    def test_rejects_zero_directions(self) -> None:
        with pytest.raises(ValueError):
            radial_sample(PARIS, [0.1], directions=0)

    def test_circle_boundary(self) -> None:
        ring = circle_boundary(PARIS, 0.05)
        assert len(ring) == 32
        assert all(_ground_radius_deg(PARIS, p) == pytest.approx(0.05) for p in ring)


class TestConvexHull:
    """Test Graham-scan hull construction."""

    def test_empty(self) -> None:
        assert convex_hull([]) == []

    def test_fewer_than_three_returned_unchanged(self) -> None:
        pts = [Coordinate(1, 1), Coordinate(0, 0)]
        assert convex_hull(pts) == pts

    def test_duplicates_count_as_one(self) -> None:
        pts = [Coordinate(0, 0), Coordinate(0, 0), Coordinate(1, 1)]
        assert convex_hull(pts) == pts

    def test_triangle_counter_clockwise(self) -> None:
        a, b, c = Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 0)
        hull = convex_hull([b, a, c])
        assert set(hull) == {a, b, c}
        assert len(hull) == 3
        assert cross(hull[0], hull[1], hull[2]) > 0

    def test_starts_at_pivot(self) -> None:
        """Pivot: lowest first coordinate, ties broken by lowest second."""
        pts = [Coordinate(1, 1), Coordinate(0, 2), Coordinate(0, 1), Coordinate(2, 0)]
        assert convex_hull(pts)[0] == Coordinate(0, 1)

    def test_interior_points_dropped(self) -> None:
        corners = [Coordinate(0, 0), Coordinate(0, 2), Coordinate(2, 2), Coordinate(2, 0)]
        inner = [Coordinate(1, 1), Coordinate(0.5, 1.5), Coordinate(1.5, 0.2)]
        hull = convex_hull(inner + corners)
        assert set(hull) == set(corners)
        assert len(hull) == 4

    def test_collinear_edge_point_removed(self) -> None:
        """A point exactly on an edge is popped (cross == 0)."""
        pts = [Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2), Coordinate(2, 0)]
        hull = convex_hull(pts)
        assert Coordinate(0, 1) not in hull
        assert len(hull) == 3

    def test_all_collinear_is_degenerate(self) -> None:
        pts = [Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2), Coordinate(3, 3)]
        assert len(convex_hull(pts)) < 3

    def test_hull_is_subset_and_contains_all(self) -> None:
        pts = radial_sample(PARIS, [0.01, 0.03, 0.05], directions=7) + [PARIS]
        hull = convex_hull(pts)
        assert set(hull) <= set(pts)
        assert all(_inside_or_on(hull, p) for p in pts)

    def test_strictly_convex_turns(self) -> None:
        pts = radial_sample(PARIS, [0.02], directions=16)
        hull = convex_hull(pts)
        n = len(hull)
        assert n == 16
        assert all(cross(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0 for i in range(n))

    def test_input_not_mutated(self) -> None:
        pts = [Coordinate(2, 0), Coordinate(0, 0), Coordinate(0, 2), Coordinate(1, 1)]
        before = list(pts)
        convex_hull(pts)
        assert pts == before


class TestSampledPoint:
    """Test SampledPoint dataclass."""

    def test_duration_minutes(self) -> None:
        p = SampledPoint(coordinate=PARIS, duration_seconds=900)
        assert p.duration_minutes == 15.0
        assert p.estimated is False

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValueError):
            SampledPoint(coordinate=PARIS, duration_seconds=-1)


class TestBounds:
    """Test bounding boxes."""

    def test_from_coordinates(self) -> None:
        box = Bounds.from_coordinates([Coordinate(1, 5), Coordinate(3, 2), Coordinate(2, 4)])
        assert box == Bounds(south=1, west=2, north=3, east=5)

    def test_empty_is_none(self) -> None:
        assert Bounds.from_coordinates([]) is None

    def test_padded(self) -> None:
        box = Bounds(south=0, west=0, north=10, east=20).padded(0.1)
        assert box == Bounds(south=-1, west=-2, north=11, east=22)

    def test_contains_and_leaflet(self) -> None:
        box = Bounds(south=0, west=0, north=1, east=1)
        assert box.contains(Coordinate(0.5, 0.5))
        assert not box.contains(Coordinate(2, 0.5))
        assert box.as_leaflet() == [[0, 0], [1, 1]]
