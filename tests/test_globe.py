"""
Tests for the GLOBE observation source.
"""

from __future__ import annotations

import logging
from unittest.mock import Mock, patch

import pytest
import requests

from bee_heatmap.datasources import globe
from bee_heatmap.schemas import BoundingBox

BBOX = BoundingBox(south=39.5, west=-105.5, north=40.5, east=-104.5)


def _feature(fid: int, lon: float, lat: float, **props: object) -> dict:
    return {
        "type": "Feature",
        "id": fid,
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": {
            "siteName": f"Site {fid}",
            "countryName": "United States",
            "organizationName": "Boulder Valley School District",
            "elevation": 1650.0,
            **props,
        },
    }


SAMPLE_RESPONSE: dict = {
    "type": "FeatureCollection",
    "features": [
        _feature(1, -105.0, 40.0),
        _feature(2, -80.0, 35.0),  # outside the box
        _feature(3, -104.5, 40.5),  # on the box corner
        {"type": "Feature", "id": 4, "geometry": None, "properties": {}},
        _feature(5, -105.1, 39.9, elevation="n/a"),
    ],
}


def _response(payload: object) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestParseFeatures:
    def test_filters_to_bbox(self) -> None:
        observations = globe.parse_features(SAMPLE_RESPONSE, BBOX)

        assert [o.id for o in observations] == ["1", "3"]
        first = observations[0]
        assert first.site_name == "Site 1"
        assert first.organization_name == "Boulder Valley School District"
        assert first.country_name == "United States"
        assert first.elevation == 1650.0
        assert (first.coordinate.lat, first.coordinate.lon) == (40.0, -105.0)

    def test_no_features(self) -> None:
        assert globe.parse_features({}, BBOX) == []

    def test_string_properties_ignored(self) -> None:
        feature = _feature(1, -105.0, 40.0)
        feature["properties"] = "x"

        observations = globe.parse_features({"features": [feature]}, BBOX)

        assert [o.id for o in observations] == ["1"]
        assert observations[0].site_name is None

    def test_missing_id_skipped(self) -> None:
        feature = _feature(1, -105.0, 40.0)
        del feature["id"]
        data = {"features": [feature, _feature(2, -105.0, 40.1)]}

        observations = globe.parse_features(data, BBOX)

        assert [o.id for o in observations] == ["2"]


class TestFetchObservations:
    """Test fetching with graceful degradation."""

    @patch("bee_heatmap.datasources.globe.observations.session.get")
    def test_query_params(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(SAMPLE_RESPONSE)

        observations = globe.fetch_observations(BBOX, country_code="USA")

        assert len(observations) == 2
        params = mock_get.call_args.kwargs["params"]
        assert params["protocols"] == "vegatation_covers"
        assert params["countrycode"] == "USA"
        assert params["startdate"] == "2023-05-05"
        assert params["enddate"] == "2025-05-05"
        assert params["geojson"] == "TRUE"
        assert mock_get.call_args.args[0] == globe.MEASUREMENT_SEARCH
        assert mock_get.call_args.kwargs["timeout"] == 20

    @patch("bee_heatmap.datasources.globe.observations.session.get")
    def test_timeout_returns_empty(
        self, mock_get: Mock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_get.side_effect = requests.Timeout("slow")

        with caplog.at_level(logging.WARNING):
            assert globe.fetch_observations(BBOX) == []
        assert "GLOBE observations unavailable" in caplog.text

    @patch("bee_heatmap.datasources.globe.observations.session.get")
    def test_bad_json_returns_empty(self, mock_get: Mock) -> None:
        resp = _response(None)
        resp.json.side_effect = requests.JSONDecodeError("Expecting value", "", 0)
        mock_get.return_value = resp

        assert globe.fetch_observations(BBOX) == []

    @patch("bee_heatmap.datasources.globe.observations.session.get")
    def test_non_object_returns_empty(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(["unexpected"])
        assert globe.fetch_observations(BBOX) == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"features": 5},
            {"features": "abc"},
            {"features": {"id": 1}},
            {"features": [{"id": 1, "geometry": [1, 2]}]},
            {"features": [{"id": 1, "geometry": {"coordinates": "-105.0,40.0"}}]},
            {"features": [{"id": 1, "geometry": {"coordinates": {"lon": -105.0}}}]},
            {"features": [None, 7, "feature"]},
        ],
    )
    @patch("bee_heatmap.datasources.globe.observations.session.get")
    def test_malformed_shapes_return_empty(self, mock_get: Mock, payload: dict) -> None:
        mock_get.return_value = _response(payload)
        assert globe.fetch_observations(BBOX) == []
