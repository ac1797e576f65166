"""Unit tests for request, prompt and result models."""

from __future__ import annotations

import json

import pytest

from scamfinder.models import (
    AnalysisRequest,
    FilePayload,
    InlineBinary,
    PromptPayload,
    ScanResult,
    TextPart,
    TextPayload,
    Verdict,
)


class TestFilePayload:
    def test_size_defaults_to_length(self):
        payload = FilePayload(raw_bytes=b"12345", file_name="a.txt")
        assert payload.size_bytes == 5

    def test_explicit_size_kept(self):
        payload = FilePayload(raw_bytes=b"", file_name="a.txt", size_bytes=99)
        assert payload.size_bytes == 99

    def test_from_path(self, tmp_path):
        path = tmp_path / "invoice.html"
        path.write_bytes(b"<html></html>")
        payload = FilePayload.from_path(path)
        assert payload.file_name == "invoice.html"
        assert payload.raw_bytes == b"<html></html>"
        assert payload.size_bytes == 13
        assert payload.declared_mime_type == ""

    def test_repr_hides_bytes(self):
        payload = FilePayload(raw_bytes=b"secret-bytes", file_name="a.bin")
        assert "secret-bytes" not in repr(payload)


class TestAnalysisRequest:
    def test_empty(self):
        assert AnalysisRequest().is_empty
        assert AnalysisRequest(text="   ").is_empty

    def test_text_only(self):
        request = AnalysisRequest.from_text(TextPayload(content="hello"))
        assert request.has_text
        assert not request.is_empty

    def test_file_only(self):
        request = AnalysisRequest(file=FilePayload(raw_bytes=b"x", file_name="x.png"))
        assert not request.is_empty
        assert not request.has_text


class TestPromptPayload:
    def test_sequence_behaviour(self):
        prompt = PromptPayload(parts=(InlineBinary(data=b"x", mime_type="image/png"), TextPart(text="go")))
        assert len(prompt) == 2
        assert list(prompt)[1] == TextPart(text="go")
        assert prompt.instruction == TextPart(text="go")
        assert prompt.has_inline_binary

    def test_instruction_missing(self):
        with pytest.raises(ValueError):
            PromptPayload().instruction


class TestScanResult:
    def _result(self, score: int) -> ScanResult:
        return ScanResult(verdict=Verdict.UNCERTAIN, scam_score=score, red_flags=[], urls=[], summary="s")

    @pytest.mark.parametrize(
        ("score", "band"),
        [(0, "low"), (40, "low"), (41, "medium"), (70, "medium"), (71, "high"), (100, "high")],
    )
    def test_risk_band(self, score, band):
        assert self._result(score).risk_band == band

    def test_scam_and_safe_flags(self):
        assert self._result(71).is_likely_scam
        assert not self._result(70).is_likely_scam
        assert self._result(19).is_likely_safe
        assert not self._result(20).is_likely_safe

    def test_to_json_uses_wire_names_and_drops_nulls(self, scam_response):
        result = ScanResult.model_validate(scam_response)
        data = json.loads(result.to_json())
        assert data == scam_response
