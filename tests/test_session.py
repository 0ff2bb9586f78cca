"""
Tests for MapSession request sequencing.
"""

from __future__ import annotations

from commute_zones.estimation import ConstantSpeedStrategy
from commute_zones.geometry import Coordinate
from commute_zones.isochrones import build_isochrones
from commute_zones.schemas import TransportMode
from commute_zones.session import MapSession

PARIS = Coordinate(lat=48.8566, lon=2.3522)
LYON = Coordinate(lat=45.764, lon=4.8357)


class TestBegin:
    """Test request contexts."""

    def test_ids_increase(self) -> None:
        session = MapSession()
        ids = [session.begin(PARIS).request_id for _ in range(3)]
        assert ids == [1, 2, 3]
        assert session.latest_request == 3

    def test_auto_fit_until_first_result_applied(self) -> None:
        session = MapSession()
        first = session.begin(PARIS)
        assert first.auto_fit is True
        session.apply(build_isochrones(first, ConstantSpeedStrategy(5.0)))
        assert session.begin(LYON).auto_fit is False

    def test_auto_fit_kept_after_failed_first_request(self) -> None:
        """A request that never applies leaves the next one framing the view."""
        session = MapSession()
        session.begin(PARIS)
        assert session.begin(PARIS).auto_fit is True

    def test_begin_clears_previous_zones(self) -> None:
        session = MapSession()
        context = session.begin(PARIS)
        session.apply(build_isochrones(context, ConstantSpeedStrategy(5.0)))
        assert session.zones

        session.begin(LYON)

        assert session.zones == []
        assert session.bounds is None

    def test_auto_fit_explicit(self) -> None:
        session = MapSession()
        assert session.begin(PARIS, auto_fit=False).auto_fit is False
        assert session.begin(LYON, auto_fit=True).auto_fit is True

    def test_tracks_origin_and_label(self) -> None:
        session = MapSession()
        context = session.begin(PARIS, label="Paris, France")
        assert session.origin == PARIS
        assert session.origin_label == "Paris, France"
        assert context.label == "Paris, France"

    def test_mode_passed_through(self) -> None:
        session = MapSession(mode=TransportMode.CYCLING)
        assert session.begin(PARIS).mode == TransportMode.CYCLING
        assert session.begin(PARIS, mode=TransportMode.DRIVING).mode == TransportMode.DRIVING
        assert session.mode == TransportMode.DRIVING


class TestSelectMode:
    """Test mode changes."""

    def test_without_origin(self) -> None:
        session = MapSession()
        assert session.select_mode(TransportMode.DRIVING) is None
        assert session.mode == TransportMode.DRIVING
        assert session.latest_request == 0

    def test_with_origin_recomputes(self) -> None:
        session = MapSession()
        first = session.begin(PARIS, label="Paris")
        session.apply(build_isochrones(first, ConstantSpeedStrategy(5.0)))
        context = session.select_mode(TransportMode.PUBLIC_TRANSIT)
        assert context is not None
        assert context.origin == PARIS
        assert context.mode == TransportMode.PUBLIC_TRANSIT
        assert context.label == "Paris"
        assert context.auto_fit is False


class TestApply:
    """Test that stale results never overwrite fresher ones."""

    def test_latest_result_applied(self) -> None:
        session = MapSession()
        context = session.begin(PARIS)
        result = build_isochrones(context, ConstantSpeedStrategy(5.0))

        assert session.apply(result) is True
        assert session.zones == result.zones
        assert session.bounds == result.bounds
        assert session.applied_request == context.request_id

    def test_superseded_result_dropped(self) -> None:
        session = MapSession()
        old = session.begin(PARIS)
        new = session.begin(LYON)

        new_result = build_isochrones(new, ConstantSpeedStrategy(5.0))
        old_result = build_isochrones(old, ConstantSpeedStrategy(40.0))

        assert session.apply(new_result) is True
        assert session.apply(old_result) is False
        assert session.zones == new_result.zones
        assert session.applied_request == new.request_id

    def test_slow_result_dropped_even_if_first_to_finish(self) -> None:
        session = MapSession()
        old = session.begin(PARIS)
        session.begin(LYON)

        assert session.apply(build_isochrones(old, ConstantSpeedStrategy(5.0))) is False
        assert session.zones == []
        assert session.applied_request == 0
