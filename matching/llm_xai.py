from typing import Optional

import requests

from logger import log_debug, log_error
from matching.prompts import build_match_request
from parsers.match_response import parse_match_response
from schemas import ChatCompletionRequest, JobMatchRequest, JobMatchResponse
from settings import XAIConfig


class MatchAnalysisError(RuntimeError):
    """The remote model could not be reached or returned an unusable payload."""


class XAIClient:
    """Chat-completion client for the xAI API, scoped to job match analysis."""

    def __init__(self, config: XAIConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.config.base_url}/chat/completions"

    def complete(self, payload: ChatCompletionRequest) -> str:
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = self.session.post(
                self.url,
                headers=headers,
                json=payload.model_dump(),
                timeout=self.config.timeout_s,
            )
            response.raise_for_status()
            data = response.json()
            return data["choices"][0]["message"]["content"] or ""
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
            log_error(e, {"url": self.url, "model": payload.model})
            raise MatchAnalysisError(f"xAI completion failed: {e}") from e

    def analyze_job_match(self, request: JobMatchRequest) -> JobMatchResponse:
        payload = build_match_request(request, self.config.model, self.config.temperature)
        raw = self.complete(payload)
        log_debug("Received match analysis", {"chars": len(raw)})
        return parse_match_response(raw)
