from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

import primeapi
from prime import CORS_HEADERS


@pytest.fixture
def client() -> TestClient:
    return TestClient(primeapi.app)


def test_root_banner(client: TestClient) -> None:
    assert client.get("/").json() == {"message": "Prime number checker"}


def test_post_prime(client: TestClient) -> None:
    response = client.post("/prime", content='{"number": 17}')
    assert response.status_code == 200
    assert response.json() == {"number": 17, "isPrime": True, "message": "17 is a prime number"}
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


def test_post_malformed_body(client: TestClient) -> None:
    response = client.post("/prime", content="{oops")
    assert response.status_code == 400
    assert "error" in response.json()
    assert response.headers["access-control-allow-origin"] == "*"


def test_options_preflight(client: TestClient) -> None:
    response = client.options("/prime")
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"


def test_get_lookup(client: TestClient) -> None:
    response = client.get("/prime/221")
    assert response.status_code == 200
    assert response.json()["message"] == "221 is not a prime number"


def test_get_lookup_rejects_out_of_range(client: TestClient) -> None:
    response = client.get(f"/prime/{2 ** 64}")
    assert response.status_code == 400


def test_mangum_handler_serves_api_gateway_events() -> None:
    # REST API (v1) proxy event as API Gateway delivers it
    event = {
        "resource": "/prime",
        "path": "/prime",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json"},
        "multiValueHeaders": {"Content-Type": ["application/json"]},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "resourcePath": "/prime",
            "httpMethod": "POST",
            "path": "/prod/prime",
            "stage": "prod",
            "identity": {"sourceIp": "127.0.0.1"},
        },
        "body": '{"number": 97}',
        "isBase64Encoded": False,
    }
    response = primeapi.handler(event, object())
    assert response["statusCode"] == 200
    assert json.loads(response["body"])["isPrime"] is True
