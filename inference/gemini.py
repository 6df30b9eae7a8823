import json
import logging
import re
from typing import Any, Dict, Optional, Tuple

import httpx

from .base import ModelBackend
from .types import GenerationPrompt, AttemptOutcome

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# Backend overloaded or rate limited: another model may still answer.
_RETRYABLE_STATUS = frozenset({429, 503})
# Credential problems: every model under the same key fails identically.
_FATAL_STATUS = frozenset({401, 403})
_BLOCKED_FINISH_REASONS = frozenset({"SAFETY", "BLOCKLIST", "PROHIBITED_CONTENT", "SPII"})

_CODE_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)
_decoder = json.JSONDecoder()


def _first_subject_body_object(candidate: str) -> Optional[Dict[str, Any]]:
    # Decode from each "{" so prose braces before or after the object are skipped.
    start = candidate.find("{")
    while start != -1:
        try:
            parsed, _ = _decoder.raw_decode(candidate, start)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict) and "subject" in parsed and "body" in parsed:
            return parsed
        start = candidate.find("{", start + 1)
    return None


def extract_subject_body(text: str) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """
    Best-effort extraction of {"subject": ..., "body": ...} from raw model text.

    Models frequently wrap the JSON in markdown fences or add a sentence
    before or after it, so the fenced blocks are tried first and then the
    whole text. Within each, the first complete JSON object carrying both
    keys wins; placeholder braces such as {ctaLink} in surrounding prose
    are ignored.

    Returns:
        (parsed_dict, None)  on success
        (None, reason)       when nothing usable could be recovered
    """
    candidates = [m.group(1) for m in _CODE_FENCE_RE.finditer(text)]
    candidates.append(text)

    for candidate in candidates:
        parsed = _first_subject_body_object(candidate)
        if parsed is not None:
            return parsed, None

    return None, "Malformed response: no subject/body JSON object found"


class GeminiModelBackend(ModelBackend):
    """
    Google Gemini backend (Generative Language REST API).

    One instance per model name; the model name doubles as the backend
    identifier in the cascade. The system instruction and the user prompt
    are sent as two parts of a single user turn.
    """

    def __init__(
        self,
        model_name: str,
        api_key: Optional[str],
        base_url: str = GEMINI_BASE_URL,
        timeout_s: float = 30.0,
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
    ):
        """
        Initialize Gemini backend.

        Args:
            model_name:        e.g. "gemini-2.0-flash"
            api_key:           Generative Language API key (None/empty = not configured)
            base_url:          API root, without the /models suffix
            timeout_s:         Per-call HTTP timeout
            temperature:       Sampling temperature
            max_output_tokens: Generation length cap
        """
        self.name = model_name
        self.model_name = model_name
        self._api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    def build_payload(self, prompt: GenerationPrompt) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": prompt.system_instruction},
                        {"text": f"Generate an email for this request: {prompt.user_prompt}"},
                    ]
                }
            ],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    async def generate(self, prompt: GenerationPrompt) -> AttemptOutcome:
        """
        Run one generateContent call and classify the result.

        Flow:
          1. Refuse locally if no API key is configured (no network call)
          2. POST the payload; key goes in the query string, never in logs
          3. Non-2xx → classify by status code
          4. 2xx → check safety blocks, extract text, parse subject/body

        Returns:
            AttemptOutcome; never raises
        """
        meta = {"backend": "gemini", "model": self.model_name, "trace_id": prompt.trace_id}

        if not self.is_configured:
            return AttemptOutcome.recoverable("API key not configured", **meta)

        logger.info(f"Trying Gemini model: {self.model_name}", extra=meta)

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self._api_key},
                    json=self.build_payload(prompt),
                    headers={"Content-Type": "application/json"},
                )

            if response.status_code < 200 or response.status_code >= 300:
                return self._classify_http_error(response, meta)

            try:
                data = response.json()
            except ValueError:
                logger.error(f"{self.model_name} returned a non-JSON body", extra=meta)
                return AttemptOutcome.recoverable(
                    "Malformed response: body is not JSON",
                    status_code=response.status_code,
                    **meta,
                )

            return self._parse_success_body(data, meta)

        except httpx.TimeoutException:
            logger.error(f"{self.model_name} timed out after {self.timeout_s}s", extra=meta)
            return AttemptOutcome.recoverable("Request timed out", **meta)

        except httpx.RequestError as e:
            logger.error(f"{self.model_name} transport error: {e}", extra=meta)
            return AttemptOutcome.recoverable(f"Network error: {e}", **meta)

        except Exception as e:
            logger.error(f"{self.model_name} exception: {e}", exc_info=True, extra=meta)
            return AttemptOutcome.recoverable(str(e) or type(e).__name__, **meta)

    def _classify_http_error(self, response: httpx.Response, meta: Dict[str, Any]) -> AttemptOutcome:
        status = response.status_code
        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        error = error_data.get("error") if isinstance(error_data, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        message = message or f"HTTP {status}"

        logger.error(
            f"{self.model_name} failed: {status} - {message}",
            extra={**meta, "status_code": status},
        )

        if status in _RETRYABLE_STATUS:
            return AttemptOutcome.recoverable(f"Rate limited ({status})", status_code=status, **meta)

        if status in _FATAL_STATUS:
            return AttemptOutcome.fatal("Invalid API key", status_code=status, **meta)

        return AttemptOutcome.recoverable(message, status_code=status, **meta)

    def _parse_success_body(self, data: Any, meta: Dict[str, Any]) -> AttemptOutcome:
        if not isinstance(data, dict):
            return AttemptOutcome.recoverable("Malformed response: unexpected payload shape", **meta)

        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        if block_reason:
            logger.error(f"{self.model_name} blocked: {block_reason}", extra=meta)
            return AttemptOutcome.recoverable(f"Content blocked: {block_reason}", **meta)

        candidates = data.get("candidates") or []
        first = candidates[0] if candidates and isinstance(candidates[0], dict) else {}

        finish_reason = first.get("finishReason")
        if finish_reason in _BLOCKED_FINISH_REASONS:
            logger.error(f"{self.model_name} blocked: {finish_reason}", extra=meta)
            return AttemptOutcome.recoverable(f"Content blocked: {finish_reason}", **meta)

        parts = (first.get("content") or {}).get("parts") or []
        text = parts[0].get("text") if parts and isinstance(parts[0], dict) else None
        if not text:
            logger.error(f"{self.model_name} returned empty response", extra=meta)
            return AttemptOutcome.recoverable("Empty response from AI", **meta)

        parsed, error = extract_subject_body(text)
        if parsed is None:
            logger.error(f"{self.model_name} returned invalid JSON format", extra=meta)
            logger.debug(f"Raw response: {text[:500]}")
            return AttemptOutcome.recoverable(error, **meta)

        subject = parsed.get("subject")
        body = parsed.get("body")
        if not isinstance(subject, str) or not isinstance(body, str) or not subject.strip() or not body.strip():
            return AttemptOutcome.recoverable(
                "Malformed response: missing subject or body", **meta
            )

        logger.info(f"{self.model_name} success", extra=meta)
        return AttemptOutcome.success(subject, body, **meta)
