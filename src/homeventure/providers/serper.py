from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

from homeventure.errors import ProviderError, ProviderErrorKind
from homeventure.models import SearchResult
from homeventure.providers.http import new_session, request_json

SERPER_SEARCH_URL = "https://google.serper.dev/search"


class KnowledgeGraph(BaseModel):
    title: Optional[str] = None
    address: Optional[str] = None


class SerperResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    organic: List[SearchResult] = Field(default_factory=list)
    knowledge_graph: Optional[KnowledgeGraph] = Field(default=None, alias="knowledgeGraph")


@dataclass
class SerperClient:
    """Google web search through serper.dev."""

    api_key: str
    user_agent: str = "HomeVenture/1.0"
    timeout_s: float = 15.0
    base_url: str = SERPER_SEARCH_URL
    session: Optional[requests.Session] = field(default=None, repr=False)

    name = "serper"

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = new_session(self.user_agent)

    def search(self, query: str, *, num: int = 5, gl: Optional[str] = None) -> SerperResponse:
        body = {"q": query, "num": num}
        if gl:
            body["gl"] = gl
        data = request_json(
            self.session,
            "POST",
            self.base_url,
            provider=self.name,
            timeout=self.timeout_s,
            json_body=body,
            headers={"X-API-KEY": self.api_key, "Content-Type": "application/json"},
        )
        try:
            return SerperResponse.model_validate(data)
        except SchemaError as e:
            raise ProviderError(self.name, ProviderErrorKind.SCHEMA_MISMATCH, str(e)) from e
