"""Unit tests for the response contract and decoder."""

from __future__ import annotations

import json

import pytest

from scamfinder.exceptions import AnalysisFailure, DecodeError, SchemaError
from scamfinder.models.results import UrlRiskLevel, Verdict
from scamfinder.schema import REQUIRED_FIELDS, RESPONSE_SCHEMA, decode


class TestResponseSchema:
    def test_required_fields(self):
        assert RESPONSE_SCHEMA["required"] == ["verdict", "scam_score", "red_flags", "urls", "summary"]

    def test_verdict_enum(self):
        assert RESPONSE_SCHEMA["properties"]["verdict"]["enum"] == ["SAFE", "SUSPICIOUS", "SCAM", "UNCERTAIN"]

    def test_url_risk_enum(self):
        url_item = RESPONSE_SCHEMA["properties"]["urls"]["items"]
        assert url_item["properties"]["risk"]["enum"] == ["High", "Medium", "Low", "Safe"]
        assert url_item["required"] == ["url", "risk"]

    def test_image_details_keys(self):
        details = RESPONSE_SCHEMA["properties"]["image_analysis_details"]["properties"]
        assert set(details) == {"skin_smoothness", "background_warping", "reflection_symmetry", "edge_consistency"}


class TestDecodeSuccess:
    def test_scenario_d(self):
        raw = '{"verdict":"SCAM","scam_score":95,"red_flags":["urgency"],"urls":[],"summary":"..."}'
        result = decode(raw)
        assert result.verdict == Verdict.SCAM
        assert result.scam_score == 95
        assert result.red_flags == ("urgency",)
        assert result.urls == ()
        assert result.ai_image_probability is None

    def test_full_image_response(self, image_response):
        result = decode(json.dumps(image_response))
        assert result.verdict == Verdict.SUSPICIOUS
        assert result.ai_image_probability == pytest.approx(0.82)
        assert result.image_analysis_details.background_warping == "Bent door frame behind subject"

    def test_url_entries(self, scam_response):
        result = decode(json.dumps(scam_response))
        assert result.urls[0].url == "http://bit.ly/xyz"
        assert result.urls[0].risk == UrlRiskLevel.HIGH
        assert result.urls[0].issues == ("URL shortener",)

    def test_markdown_fences_stripped(self, scam_response):
        raw = "```json\n" + json.dumps(scam_response) + "\n```"
        assert decode(raw).verdict == Verdict.SCAM

    def test_unknown_fields_ignored(self, scam_response):
        scam_response["confidence"] = "very"
        assert decode(json.dumps(scam_response)).scam_score == 95

    @pytest.mark.parametrize("score", [-5, 150])
    def test_scam_score_not_clamped(self, scam_response, score):
        scam_response["scam_score"] = score
        assert decode(json.dumps(scam_response)).scam_score == score

    def test_ai_probability_not_clamped(self, image_response):
        image_response["ai_image_probability"] = 1.7
        assert decode(json.dumps(image_response)).ai_image_probability == pytest.approx(1.7)


class TestDecodeFailures:
    def test_invalid_json(self):
        with pytest.raises(DecodeError) as exc_info:
            decode("{not json")
        assert exc_info.value.reason == "invalid_json"
        assert isinstance(exc_info.value, AnalysisFailure)

    def test_oversized_integer(self, scam_response):
        raw = json.dumps(scam_response).replace('"scam_score": 95', '"scam_score": ' + "9" * 5000)
        with pytest.raises(DecodeError) as exc_info:
            decode(raw)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_deeply_nested_json(self):
        with pytest.raises(DecodeError):
            decode("[" * 100_000 + "]" * 100_000)

    def test_url_without_risk(self, scam_response):
        scam_response["urls"] = [{"url": "http://evil.example"}]
        with pytest.raises(SchemaError, match="risk"):
            decode(json.dumps(scam_response))

    def test_url_without_address(self, scam_response):
        scam_response["urls"] = [{"risk": "High", "issues": []}]
        with pytest.raises(SchemaError, match="url"):
            decode(json.dumps(scam_response))

    def test_missing_summary(self, scam_response):
        del scam_response["summary"]
        with pytest.raises(SchemaError) as exc_info:
            decode(json.dumps(scam_response))
        assert exc_info.value.missing_fields == ["summary"]
        assert "summary" in str(exc_info.value)
        assert exc_info.value.reason == "unparseable_result"

    def test_all_missing_fields_listed(self):
        with pytest.raises(SchemaError) as exc_info:
            decode("{}")
        assert exc_info.value.missing_fields == list(REQUIRED_FIELDS)

    @pytest.mark.parametrize("raw", ["[]", '"SCAM"', "42", "null"])
    def test_non_object(self, raw):
        with pytest.raises(SchemaError):
            decode(raw)

    def test_unknown_verdict(self, scam_response):
        scam_response["verdict"] = "PROBABLY_FINE"
        with pytest.raises(SchemaError, match="verdict"):
            decode(json.dumps(scam_response))

    def test_wrong_type(self, scam_response):
        scam_response["red_flags"] = "urgency"
        with pytest.raises(SchemaError, match="red_flags"):
            decode(json.dumps(scam_response))

    def test_result_is_immutable(self, scam_response):
        result = decode(json.dumps(scam_response))
        with pytest.raises(Exception):
            result.scam_score = 0
