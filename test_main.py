from fastapi.testclient import TestClient

from config import Settings
from main import app, get_settings

import json
from pathlib import Path
from typing import Any, Type, TypeVar, Union

import httpx
import pytest

from githubkit import GitHub
from githubkit.exception import AuthCredentialError, RequestError, RequestFailed
from githubkit.utils import UNSET
from githubkit.response import Response
from githubkit.typing import URLTypes, UnsetType

client = TestClient(app)


def get_settings_override():
    return Settings(github_api_secret="very_secret_very_secure")


app.dependency_overrides[get_settings] = get_settings_override

FAKE_RESPONSE_DATA = Path(__file__).parent / "fake_response_data"
GIST_STARS = json.loads((FAKE_RESPONSE_DATA / "gist_stars.json").read_text())
GIST_NOT_FOUND = json.loads((FAKE_RESPONSE_DATA / "gist_not_found.json").read_text())
GIST_MISSING_URL = json.loads(
    (FAKE_RESPONSE_DATA / "gist_missing_url.json").read_text()
)
GRAPHQL_NOT_FOUND_ERROR = json.loads(
    (FAKE_RESPONSE_DATA / "graphql_not_found_error.json").read_text()
)
GRAPHQL_FORBIDDEN_ERROR = json.loads(
    (FAKE_RESPONSE_DATA / "graphql_forbidden_error.json").read_text()
)

GIST_ID = "47a4d00457a92aa426dbd48a18776322"

T = TypeVar("T")


def make_mock_arequest(payload: Any):
    async def mock_arequest(
        g: GitHub,
        method: str,
        url: URLTypes,
        *,
        response_model: Union[Type[Any], UnsetType] = UNSET,
        **kwargs: Any,
    ) -> Response[Any]:
        if method == "POST" and str(url).endswith("graphql"):
            assert kwargs["json"]["variables"] == {"gistId": GIST_ID}
            return Response[T](
                httpx.Response(status_code=200, json=payload),
                Any if response_model is UNSET else response_model,
            )
        raise RuntimeError(f"Unexpected request: {method} {url}")

    return mock_arequest


def make_failing_arequest(error: Exception):
    async def mock_arequest(g: GitHub, method: str, url: URLTypes, **kwargs: Any):
        raise error

    return mock_arequest


def get_badge(mock_arequest):
    with pytest.MonkeyPatch.context() as m:
        m.setattr(GitHub, "arequest", mock_arequest)
        return client.get(f"/github/stars/gists/{GIST_ID}")


def test_gist_stars():
    response = get_badge(make_mock_arequest(GIST_STARS))
    assert response.status_code == 200
    assert response.json() == {
        "schemaVersion": 1,
        "label": "Stars",
        "message": "29",
        "color": "blue",
        "namedLogo": "github",
        "link": [
            "https://gist.github.com/x/abc",
            "https://gist.github.com/x/abc/stargazers",
        ],
        "isError": False,
    }


def test_gist_not_found():
    response = get_badge(make_mock_arequest(GIST_NOT_FOUND))
    assert response.status_code == 404
    assert response.json() == {
        "schemaVersion": 1,
        "label": "Stars",
        "message": "gist not found",
        "color": "red",
        "namedLogo": "github",
        "link": [],
        "isError": True,
    }


def test_invalid_response():
    response = get_badge(make_mock_arequest(GIST_MISSING_URL))
    assert response.status_code == 502
    assert response.json()["message"] == "invalid response data"
    assert response.json()["color"] == "lightgrey"
    assert response.json()["isError"] is True


def test_graphql_not_found_error():
    response = get_badge(make_mock_arequest(GRAPHQL_NOT_FOUND_ERROR))
    assert response.status_code == 404
    assert (
        response.json()["message"]
        == "Could not resolve to a User with the login of 'ghost'."
    )


def test_auth_failed():
    request = httpx.Request("POST", "https://api.github.com/graphql")
    error = RequestFailed(
        Response[T](httpx.Response(status_code=401, request=request), Any)
    )
    response = get_badge(make_failing_arequest(error))
    assert response.status_code == 403
    assert response.json()["message"] == "auth failed"


def test_gist_key_missing():
    response = get_badge(make_mock_arequest({"data": {"viewer": {}}}))
    assert response.status_code == 404
    assert response.json()["message"] == "gist not found"
    assert response.json()["color"] == "red"


def test_graphql_error_other_than_not_found():
    response = get_badge(make_mock_arequest(GRAPHQL_FORBIDDEN_ERROR))
    assert response.status_code == 502
    assert response.json()["message"] == "invalid"
    assert response.json()["color"] == "lightgrey"
    assert response.json()["isError"] is True


def test_auth_credential_error():
    error = AuthCredentialError("Bad credentials")
    response = get_badge(make_failing_arequest(error))
    assert response.status_code == 403
    assert response.json()["message"] == "auth failed"


def test_github_server_error():
    request = httpx.Request("POST", "https://api.github.com/graphql")
    error = RequestFailed(
        Response[T](httpx.Response(status_code=500, request=request), Any)
    )
    response = get_badge(make_failing_arequest(error))
    assert response.status_code == 503
    assert response.json()["message"] == "inaccessible"


def test_github_unreachable():
    error = RequestError(httpx.ConnectError("connection refused"))
    response = get_badge(make_failing_arequest(error))
    assert response.status_code == 503
    assert response.json()["message"] == "inaccessible"


def test_examples():
    response = client.get("/github/stars/gists")
    assert response.status_code == 200
    [example] = response.json()
    assert example["title"] == "Github Gist stars"
    assert example["namedParams"] == {"gistId": GIST_ID}
    assert example["staticPreview"] == {
        "label": "Stars",
        "message": "29",
        "style": "social",
    }
    assert "'gist not found' is returned" in example["documentation"]
