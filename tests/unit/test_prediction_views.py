"""Tests for prediction API views."""

import httpx
import pytest

from web.api import prediction
from web.api.errors import DataSourceUnavailableError, ValidationError

COUNTS = {'malaria prevention "Nigeria"': 1000, '"Nigeria"': 1_000_000}


class TestGetPrediction:
    def test_response(self, mock_openalex, works_transport):
        mock_openalex(works_transport(COUNTS))
        resp = prediction.get_prediction("malaria prevention", "Nigeria")

        assert resp.topic == "malaria prevention"
        assert resp.topic_volume_label == "1.0K"
        assert resp.country_volume_label == "1.0M"
        assert resp.flagship.rate_pct == 46
        assert resp.flagship.rate_label == "46%"
        assert resp.flagship.margin_label == f"±{resp.flagship.margin_pp} pp"
        assert resp.flagship.risk_level == "High"
        assert not resp.flagship.ceiling_effect

    def test_small_model_ceiling_effect(self, mock_openalex, works_transport):
        mock_openalex(works_transport(COUNTS))
        small = prediction.get_prediction("malaria prevention", "Nigeria").small

        # rate 0.929 stays uncapped; only the labels change
        assert abs(small.rate - 0.929) < 1e-6
        assert small.rate_pct == 93
        assert small.ceiling_effect
        assert small.rate_label == ">90%"
        assert small.margin_label == "ceiling effect"

    @pytest.mark.parametrize("topic,country", [("", "Nigeria"), ("malaria", "  "), ("   ", "")])
    def test_blank_input_rejected(self, topic, country):
        with pytest.raises(ValidationError):
            prediction.get_prediction(topic, country)

    def test_server_error_unavailable(self, mock_openalex, works_transport):
        mock_openalex(works_transport(COUNTS, status_code=500))
        with pytest.raises(DataSourceUnavailableError) as exc:
            prediction.get_prediction("malaria prevention", "Nigeria")
        assert exc.value.message == "Could not reach OpenAlex. Please try again."

    def test_malformed_body_unavailable(self, mock_openalex):
        mock_openalex(httpx.MockTransport(lambda request: httpx.Response(200, json={"meta": {"count": "n/a"}})))
        with pytest.raises(DataSourceUnavailableError):
            prediction.get_prediction("malaria prevention", "Nigeria")

    def test_invalid_json_unavailable(self, mock_openalex):
        mock_openalex(httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")))
        with pytest.raises(DataSourceUnavailableError):
            prediction.get_prediction("malaria prevention", "Nigeria")


class TestGetPredictionFromCounts:
    def test_counts(self):
        resp = prediction.get_prediction_from_counts(1000, 1_000_000)
        assert resp.topic is None
        assert abs(resp.flagship.rate - 0.461) < 1e-6

    def test_zero_counts(self):
        resp = prediction.get_prediction_from_counts(0, 0)
        assert resp.flagship.rate == 1.0
        assert resp.flagship.risk_level == "Severe"
        assert resp.flagship.ceiling_effect


class TestGetModelInfo:
    def test_info(self):
        info = prediction.get_model_info()
        assert info.sample_size == 1435
        assert info.r_squared == 0.302
        assert info.overall.intercept == 1.565
        assert set(info.categories) == {"verified", "verified_with_error", "needs_review", "unverified"}
