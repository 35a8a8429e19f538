from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests
from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError

from homeventure.errors import ProviderError, ProviderErrorKind
from homeventure.providers.http import new_session, request_json

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class _Part(BaseModel):
    text: Optional[str] = None


class _Content(BaseModel):
    parts: List[_Part] = Field(default_factory=list)


class _Candidate(BaseModel):
    content: _Content = Field(default_factory=_Content)


class GenerateContentResponse(BaseModel):
    candidates: List[_Candidate] = Field(default_factory=list)

    def first_text(self) -> str:
        for cand in self.candidates:
            for part in cand.content.parts:
                if part.text:
                    return part.text
        return ""


def first_json_value(text: str, opener: str, provider: str = "gemini") -> Any:
    """Decode the first JSON value starting with `opener` ('{' or '[') in `text`.

    Model output is free text: markdown fences and prose around the payload are
    skipped.
    """

    decoder = json.JSONDecoder()
    idx = text.find(opener)
    while idx != -1:
        try:
            value, _ = decoder.raw_decode(text, idx)
            return value
        except json.JSONDecodeError:
            idx = text.find(opener, idx + 1)
    raise ProviderError(provider, ProviderErrorKind.NO_PAYLOAD, f"no JSON {opener!r} value in model output")


@dataclass
class GeminiClient:
    api_key: str
    model: str = "gemini-2.0-flash"
    user_agent: str = "HomeVenture/1.0"
    timeout_s: float = 15.0
    temperature: float = 0.1
    max_output_tokens: int = 256
    base_url: str = GEMINI_BASE_URL
    session: Optional[requests.Session] = field(default=None, repr=False)

    name = "gemini"

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = new_session(self.user_agent)

    def generate(self, prompt: str) -> str:
        data = request_json(
            self.session,
            "POST",
            f"{self.base_url}/{self.model}:generateContent",
            provider=self.name,
            timeout=self.timeout_s,
            params={"key": self.api_key},
            json_body={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": self.temperature,
                    "maxOutputTokens": self.max_output_tokens,
                },
            },
            headers={"Content-Type": "application/json"},
        )
        try:
            parsed = GenerateContentResponse.model_validate(data)
        except SchemaError as e:
            raise ProviderError(self.name, ProviderErrorKind.SCHEMA_MISMATCH, str(e)) from e
        return parsed.first_text()

    def generate_json_object(self, prompt: str) -> Any:
        return first_json_value(self.generate(prompt), "{", self.name)

    def generate_json_array(self, prompt: str) -> Any:
        return first_json_value(self.generate(prompt), "[", self.name)
