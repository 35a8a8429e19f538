import pytest
import requests

from homeventure.errors import ProviderError, ProviderErrorKind
from homeventure.providers import build_gemini, build_nominatim, build_serper
from homeventure.providers.gemini import GeminiClient, first_json_value
from homeventure.providers.http import new_session, request_json
from homeventure.providers.nominatim import FLORIDA_VIEWBOX, NominatimClient
from homeventure.providers.serper import SerperClient
from homeventure.settings import get_settings


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            raise ValueError(f"Expecting value: {self._text[:10]}")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_new_session_sets_user_agent():
    session = new_session("HomeVenture/test")
    assert session.headers["User-Agent"] == "HomeVenture/test"
    assert session.headers["Accept"] == "application/json"


@pytest.mark.parametrize(
    "session,kind",
    [
        (FakeSession(error=requests.ConnectionError("refused")), ProviderErrorKind.NETWORK),
        (FakeSession(error=requests.Timeout("slow")), ProviderErrorKind.NETWORK),
        (FakeSession(FakeResponse(status_code=429)), ProviderErrorKind.HTTP_STATUS),
        (FakeSession(FakeResponse(text="<html>")), ProviderErrorKind.INVALID_JSON),
    ],
)
def test_request_json_error_kinds(session, kind):
    with pytest.raises(ProviderError) as info:
        request_json(session, "GET", "https://example.invalid", provider="x", timeout=1)
    assert info.value.kind is kind
    assert info.value.provider == "x"


def test_request_json_passes_through_arguments():
    session = FakeSession(FakeResponse(payload={"ok": True}))
    out = request_json(
        session,
        "POST",
        "https://example.invalid/a",
        provider="x",
        timeout=3,
        params={"k": "v"},
        json_body={"q": 1},
        headers={"H": "1"},
    )
    assert out == {"ok": True}
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "https://example.invalid/a")
    assert kwargs == {"params": {"k": "v"}, "json": {"q": 1}, "headers": {"H": "1"}, "timeout": 3}


def test_first_json_value_skips_fences_and_prose():
    text = 'Sure! Here you go:\n```json\n{"beds": 3, "baths": 2}\n```'
    assert first_json_value(text, "{") == {"beds": 3, "baths": 2}
    assert first_json_value('note [sic] then ["1 A St, Jupiter, FL"]', "[") == ["1 A St, Jupiter, FL"]


def test_first_json_value_without_payload():
    with pytest.raises(ProviderError) as info:
        first_json_value("I could not find anything.", "{")
    assert info.value.kind is ProviderErrorKind.NO_PAYLOAD


def test_nominatim_search_florida_parses_string_coordinates():
    payload = [
        {
            "lat": "26.9342",
            "lon": "-80.2104",
            "display_name": "17653, 126th Terrace North, Jupiter, Florida, United States",
            "address": {"house_number": "17653", "road": "126th Terrace North", "state": "Florida"},
            "importance": 0.3,
        }
    ]
    session = FakeSession(FakeResponse(payload=payload))
    client = NominatimClient(session=session)
    places = client.search_florida("17653 126th, Florida")

    assert places[0].lat == pytest.approx(26.9342)
    assert places[0].lon == pytest.approx(-80.2104)
    assert places[0].address.road == "126th Terrace North"
    params = session.calls[0][2]["params"]
    assert params["viewbox"] == FLORIDA_VIEWBOX
    assert params["bounded"] == "1"
    assert params["countrycodes"] == "us"
    assert params["limit"] == "5"


def test_nominatim_geocode_empty_and_schema_mismatch():
    assert NominatimClient(session=FakeSession(FakeResponse(payload=[]))).geocode("nowhere") is None

    bad = NominatimClient(session=FakeSession(FakeResponse(payload=[{"lat": "north"}])))
    with pytest.raises(ProviderError) as info:
        bad.geocode("1 Main St")
    assert info.value.kind is ProviderErrorKind.SCHEMA_MISMATCH


def test_serper_request_shape():
    payload = {
        "organic": [{"title": "t", "link": "https://zillow.com/x", "snippet": "s", "position": 1}],
        "knowledgeGraph": {"title": "Home", "address": "1 A St"},
    }
    session = FakeSession(FakeResponse(payload=payload))
    response = SerperClient(api_key="secret", session=session).search("1 A St", num=10, gl="us")

    assert response.organic[0].link == "https://zillow.com/x"
    assert response.knowledge_graph.address == "1 A St"
    method, _, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["headers"]["X-API-KEY"] == "secret"
    assert kwargs["json"] == {"q": "1 A St", "num": 10, "gl": "us"}


def test_serper_without_organic_results():
    session = FakeSession(FakeResponse(payload={"searchParameters": {}}))
    assert SerperClient(api_key="k", session=session).search("x").organic == []


def test_gemini_request_and_json_extraction():
    payload = {"candidates": [{"content": {"parts": [{"text": '```json\n{"beds": 4}\n```'}]}}]}
    session = FakeSession(FakeResponse(payload=payload))
    client = GeminiClient(api_key="g", model="gemini-2.0-flash-lite", session=session)

    assert client.generate_json_object("prompt") == {"beds": 4}
    _, url, kwargs = session.calls[0]
    assert url.endswith("/gemini-2.0-flash-lite:generateContent")
    assert kwargs["params"] == {"key": "g"}
    assert kwargs["json"]["contents"] == [{"parts": [{"text": "prompt"}]}]
    assert kwargs["json"]["generationConfig"]["temperature"] == 0.1


def test_gemini_empty_candidates_has_no_payload():
    client = GeminiClient(api_key="g", session=FakeSession(FakeResponse(payload={"candidates": []})))
    assert client.generate("p") == ""
    with pytest.raises(ProviderError) as info:
        client.generate_json_array("p")
    assert info.value.kind is ProviderErrorKind.NO_PAYLOAD


def test_builders_follow_settings(set_env):
    settings = get_settings()
    assert build_serper(settings) is None
    assert build_gemini(settings, settings.enrich_model) is None
    assert build_nominatim(settings).timeout_s == 15.0

    set_env(SERPER_API_KEY="s", GEMINI_API_KEY="g", HOMEVENTURE_HTTP_TIMEOUT="4")
    settings = get_settings()
    assert build_serper(settings).api_key == "s"
    assert build_gemini(settings, "m").model == "m"
    assert build_nominatim(settings).timeout_s == 4.0
