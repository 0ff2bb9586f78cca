"""
Tests for CommuteMap user interactions.
"""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from commute_zones.config import Settings
from commute_zones.datasources.nominatim import GeocodeResult
from commute_zones.errors import InputError, RateLimited, UpstreamUnavailable
from commute_zones.geometry import Coordinate, radial_sample
from commute_zones.schemas import StrategyName, TransportMode
from commute_zones.service import CommuteMap, validate_origin

PARIS = Coordinate(lat=48.8566, lon=2.3522)


def _settings() -> Settings:
    return Settings(ors_api_key="", navitia_token="", transit_batch_pause_s=0.0)


def _map() -> CommuteMap:
    return CommuteMap(_settings())


class TestSearch:
    """Test address search."""

    def test_empty_address(self) -> None:
        with pytest.raises(InputError) as exc_info:
            _map().search("   ")
        assert exc_info.value.message == "Please enter a location"

    @patch("commute_zones.service.geocode_address", return_value=None)
    def test_not_found(self, _mock: Mock) -> None:
        commute_map = _map()
        with pytest.raises(InputError) as exc_info:
            commute_map.search("xyzzy")
        assert exc_info.value.message == "Location not found. Please try a different address."
        assert commute_map.session.latest_request == 0

    @patch("commute_zones.service.geocode_address")
    def test_found(self, mock_geocode: Mock) -> None:
        mock_geocode.return_value = GeocodeResult(PARIS, "Paris, France")
        commute_map = _map()

        result = commute_map.search("  Paris ")

        assert mock_geocode.call_args.args[0] == "Paris"
        assert result is not None
        assert result.origin == PARIS
        assert result.strategy == StrategyName.CONSTANT_SPEED
        assert [z.minutes for z in result.zones] == [45, 30, 15]
        assert result.bounds is not None
        assert commute_map.session.origin_label == "Paris, France"
        assert commute_map.session.zones == result.zones

    @patch("commute_zones.service.geocode_address")
    def test_upstream_error_leaves_map_untouched(self, mock_geocode: Mock) -> None:
        mock_geocode.side_effect = UpstreamUnavailable("Error searching for location. Please try again.")
        commute_map = _map()
        with pytest.raises(UpstreamUnavailable):
            commute_map.search("Paris")
        assert commute_map.session.zones == []


class TestClick:
    """Test map clicks."""

    def test_click_builds_zones(self) -> None:
        commute_map = _map()
        result = commute_map.click(48.8566, 2.3522)
        assert result is not None
        assert commute_map.session.origin_label == "Selected Location"

    def test_second_click_keeps_view(self) -> None:
        commute_map = _map()
        first = commute_map.click(48.8566, 2.3522)
        second = commute_map.click(48.86, 2.36)
        assert first is not None and first.bounds is not None
        assert second is not None and second.bounds is None

    def test_invalid_coordinates(self) -> None:
        with pytest.raises(InputError):
            _map().click(123.0, 2.0)


class TestChangeMode:
    """Test mode switches."""

    def test_without_origin(self) -> None:
        commute_map = _map()
        assert commute_map.change_mode("driving") is None
        assert commute_map.session.mode == TransportMode.DRIVING

    def test_with_origin_recomputes(self) -> None:
        commute_map = _map()
        walking = commute_map.click(48.8566, 2.3522)
        driving = commute_map.change_mode(TransportMode.DRIVING)
        assert walking is not None and driving is not None
        assert driving.mode == TransportMode.DRIVING
        assert driving.request_id > walking.request_id
        assert driving.zones[0].label == "45 minutes by driving"

    def test_accepts_ors_alias(self) -> None:
        commute_map = _map()
        commute_map.change_mode("cycling-regular")
        assert commute_map.session.mode == TransportMode.CYCLING

    def test_unknown_mode(self) -> None:
        with pytest.raises(InputError):
            _map().change_mode("teleport")


class TestFailedComputation:
    """A request whose routing call fails leaves no stale zones behind."""

    @patch("commute_zones.estimation.routing_engine.fetch_isochrones")
    def test_retry_after_failed_first_request_frames_view(self, mock_fetch: Mock) -> None:
        ring = radial_sample(PARIS, [0.02], directions=8)
        mock_fetch.side_effect = [
            RateLimited("API rate limit exceeded. Please try again later.", 429),
            {900: ring, 1800: ring, 2700: ring},
        ]
        commute_map = CommuteMap(Settings(ors_api_key="k", navitia_token=""))

        with pytest.raises(RateLimited):
            commute_map.click(48.8566, 2.3522)
        result = commute_map.click(48.8566, 2.3522)

        assert result is not None
        assert result.request_id == 2
        assert result.strategy == StrategyName.ROUTING_ENGINE
        assert result.bounds is not None

    @patch("commute_zones.estimation.routing_engine.fetch_isochrones")
    def test_failure_clears_previous_zones(self, mock_fetch: Mock) -> None:
        ring = radial_sample(PARIS, [0.02], directions=8)
        mock_fetch.side_effect = [
            {900: ring, 1800: ring, 2700: ring},
            RateLimited("API rate limit exceeded. Please try again later.", 429),
        ]
        commute_map = CommuteMap(Settings(ors_api_key="k", navitia_token=""))
        commute_map.click(48.8566, 2.3522)
        assert commute_map.session.zones

        with pytest.raises(RateLimited):
            commute_map.click(48.86, 2.36)

        assert commute_map.session.zones == []
        assert commute_map.session.bounds is None


class TestComputeStaleResult:
    """A request superseded while computing is dropped."""

    def test_superseded_returns_none(self) -> None:
        commute_map = _map()
        original = commute_map.session.begin

        def begin_then_supersede(*args: object, **kwargs: object) -> object:
            context = original(*args, **kwargs)  # type: ignore[arg-type]
            original(Coordinate(0, 0))
            return context

        with patch.object(commute_map.session, "begin", side_effect=begin_then_supersede):
            assert commute_map.click(48.8566, 2.3522) is None
        assert commute_map.session.zones == []


class TestValidateOrigin:
    """Test coordinate validation."""

    def test_valid(self) -> None:
        assert validate_origin(48.8566, 2.3522) == PARIS

    @pytest.mark.parametrize(("lat", "lon"), [(91.0, 0.0), (0.0, -181.0)])
    def test_out_of_range(self, lat: float, lon: float) -> None:
        with pytest.raises(InputError):
            validate_origin(lat, lon)
