"""
papercite/gemini_router.py

Gemini AI fallback for sources that structured lookup could not resolve.

Only called when the selected provider adapter returned nothing. Gemini sees
the raw source string and today's date and writes all four citations
itself; its output bypasses SourceMetadata and the formatters entirely.

Anything short of four parseable citation strings is a failure
(CitationGenerationError), including the model saying it has no
accurate data.
"""

import json
import re
from typing import Optional, Dict, Any

import requests

from models import Citations, CitationGenerationError
from config import GEMINI_API_KEY, GEMINI_MODEL, GEMINI_API_URL, DEFAULT_TIMEOUT


STYLE_KEYS = ('apa7', 'mla9', 'chicago', 'harvard')


class GeminiRouter:
    """
    AI-powered citation writer using Google's Gemini API.

    Only used when structured resolution fails.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = GEMINI_MODEL):
        self.api_key = api_key if api_key is not None else GEMINI_API_KEY
        self.model = model
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Lazy-load requests session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    @property
    def is_available(self) -> bool:
        """Check if Gemini API is configured."""
        return bool(self.api_key)

    def generate_citations(self, raw_input: str, today_long: str) -> Citations:
        """
        Ask Gemini for all four citations of raw_input.

        Raises:
            CitationGenerationError: not configured, request failed, output
                unparseable, or the model reported no accurate data
        """
        if not self.is_available:
            print("[GeminiRouter] No API key configured")
            raise CitationGenerationError()

        text = self._call_gemini(self._build_prompt(raw_input, today_long))
        return self.parse_citations(text)

    def _call_gemini(self, prompt: str) -> str:
        """Make API call to Gemini and return the generated text."""
        url = f"{GEMINI_API_URL}/{self.model}:generateContent"

        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt}
                    ]
                }
            ],
            "generationConfig": {
                "temperature": 0.1,  # Low temperature for consistent formatting
                "maxOutputTokens": 1024,
                "responseMimeType": "application/json"
            }
        }

        try:
            response = self.session.post(
                url,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=DEFAULT_TIMEOUT
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"[GeminiRouter] API error: {e}")
            raise CitationGenerationError() from e

        candidates = data.get("candidates") or []
        if not candidates:
            print("[GeminiRouter] Empty response")
            raise CitationGenerationError()

        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)

    def _build_prompt(self, raw_input: str, today_long: str) -> str:
        """Build the citation prompt."""
        return f'''You are a citation generator. Identify the source below and cite it.

Source: "{raw_input}"
Today's date (use as the access date): {today_long}

Write the citation in APA 7th edition, MLA 9th edition, Chicago (bibliography) and Harvard.
Wrap italicized titles in <i></i> tags. Use "n.d." when the date is unknown.
Only use facts you are confident about. If you cannot identify the source, do not guess.

Respond with JSON only:
{{
    "found": true,
    "apa7": "...",
    "mla9": "...",
    "chicago": "...",
    "harvard": "..."
}}
or, if you have no accurate data about this source:
{{
    "found": false
}}'''

    @staticmethod
    def parse_citations(text: str) -> Citations:
        """
        Parse Gemini's JSON answer into Citations.

        Tolerates a ```json fenced block around the object.
        """
        cleaned = re.sub(r'^```(?:json)?\s*|\s*```$', '', (text or '').strip())
        try:
            data: Dict[str, Any] = json.loads(cleaned)
        except json.JSONDecodeError:
            print(f"[GeminiRouter] Failed to parse response: {cleaned[:100]}")
            raise CitationGenerationError()

        if not isinstance(data, dict) or data.get("found") is False or data.get("error"):
            print("[GeminiRouter] Model reported no accurate data")
            raise CitationGenerationError()

        values = {key: data.get(key) for key in STYLE_KEYS}
        if not all(isinstance(v, str) and v.strip() for v in values.values()):
            print("[GeminiRouter] Missing citation styles in response")
            raise CitationGenerationError()

        return Citations(**{key: value.strip() for key, value in values.items()})


# Singleton instance
_gemini_router: Optional[GeminiRouter] = None


def get_gemini_router() -> GeminiRouter:
    """Get or create the Gemini router singleton."""
    global _gemini_router
    if _gemini_router is None:
        _gemini_router = GeminiRouter()
    return _gemini_router


def gemini_generate_citations(raw_input: str, today_long: str) -> Citations:
    """Convenience function: AI fallback through the singleton router."""
    return get_gemini_router().generate_citations(raw_input, today_long)
