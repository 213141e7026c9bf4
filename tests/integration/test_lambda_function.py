"""Integration tests for the Lambda proxy entry point."""

import base64
import json
from types import SimpleNamespace

import pytest

import lambda_function
from config import AppSettings
from errors import SecretsUnavailableError
from tests.helpers import FakePipeline, make_body

CONTEXT = SimpleNamespace(aws_request_id="req-1")


@pytest.fixture
def pipeline(monkeypatch):
    monkeypatch.setattr(lambda_function, "_container", None)
    return FakePipeline()


def _event(body=None, method="POST", **extra) -> dict:
    event = {"httpMethod": method, "body": body}
    event.update(extra)
    return event


def _body(resp: dict) -> dict:
    return json.loads(resp["body"])


class TestLambdaHandler:
    def test_happy_path(self, pipeline):
        lambda_function.init(pipeline.container())
        resp = lambda_function.handler(_event(json.dumps(make_body())), CONTEXT)
        assert resp["statusCode"] == 200
        assert _body(resp) == {"success": True, "message": "Form submitted successfully"}
        pipeline.verifier.verify.assert_awaited_once_with("tok")

    def test_preflight(self, pipeline):
        lambda_function.init(pipeline.container())
        resp = lambda_function.handler(_event(method="OPTIONS"), CONTEXT)
        assert resp["statusCode"] == 200
        assert "body" not in resp

    def test_malformed_json(self, pipeline):
        lambda_function.init(pipeline.container())
        resp = lambda_function.handler(_event('{"mail": '), CONTEXT)
        assert resp["statusCode"] == 400
        assert _body(resp)["errorCode"] == "JSON_PARSE_ERROR"

    def test_missing_body(self, pipeline):
        lambda_function.init(pipeline.container())
        resp = lambda_function.handler(_event(None), CONTEXT)
        assert _body(resp)["errorCode"] == "JSON_PARSE_ERROR"

    def test_secrets_never_loaded(self, pipeline):
        pipeline.provider.get_secrets.side_effect = SecretsUnavailableError("denied")
        lambda_function.init(pipeline.container())
        resp = lambda_function.handler(_event(json.dumps(make_body())), CONTEXT)
        assert resp["statusCode"] == 500
        assert _body(resp)["errorCode"] == "SECRET_RETRIEVAL_ERROR"

    def test_secrets_loaded_once_across_invocations(self, pipeline):
        lambda_function.init(pipeline.container())
        for _ in range(3):
            lambda_function.handler(_event(json.dumps(make_body())), CONTEXT)
        pipeline.provider.get_secrets.assert_awaited_once()

    def test_base64_body(self, pipeline):
        lambda_function.init(pipeline.container())
        encoded = base64.b64encode(json.dumps(make_body()).encode()).decode()
        resp = lambda_function.handler(_event(encoded, isBase64Encoded=True), CONTEXT)
        assert resp["statusCode"] == 200

    def test_http_api_v2_event(self, pipeline):
        lambda_function.init(pipeline.container())
        event = {
            "requestContext": {"http": {"method": "OPTIONS"}},
            "body": None,
        }
        resp = lambda_function.handler(event, CONTEXT)
        assert resp["statusCode"] == 200
        assert "body" not in resp

    def test_allow_origin_from_settings(self, pipeline, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://example.com"]')
        lambda_function.init(pipeline.container(AppSettings()))
        resp = lambda_function.handler(_event(method="OPTIONS"), CONTEXT)
        assert resp["headers"]["Access-Control-Allow-Origin"] == "https://example.com"


@pytest.mark.parametrize(
    "event, expected",
    [
        ({"httpMethod": "POST"}, "POST"),
        ({"requestContext": {"http": {"method": "OPTIONS"}}}, "OPTIONS"),
        ({}, None),
    ],
    ids=["rest_api", "http_api", "missing"],
)
def test_get_method(event, expected):
    assert lambda_function.get_method(event) == expected


class TestGetBody:
    def test_plain(self):
        assert lambda_function.get_body({"body": "{}"}) == "{}"

    def test_base64(self):
        event = {"body": base64.b64encode(b'{"a": 1}').decode(), "isBase64Encoded": True}
        assert lambda_function.get_body(event) == b'{"a": 1}'

    def test_invalid_base64_passed_through(self):
        event = {"body": "not base64!!", "isBase64Encoded": True}
        assert lambda_function.get_body(event) == "not base64!!"


class TestColdStartFailure:
    @pytest.fixture
    def broken_settings(self, monkeypatch):
        def _raise():
            raise ValueError("Provided region_name 'not a region!' doesn't match a supported format.")

        monkeypatch.setattr(lambda_function, "_container", None)
        monkeypatch.setattr(lambda_function, "AppSettings", _raise)

    def test_post_answers_secret_retrieval_error(self, broken_settings):
        resp = lambda_function.handler(_event(json.dumps(make_body())), CONTEXT)
        assert resp["statusCode"] == 500
        assert _body(resp) == {
            "success": False,
            "errorCode": "SECRET_RETRIEVAL_ERROR",
            "message": "Error retrieving secrets from Secrets Manager",
        }
        assert resp["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_preflight_still_ok(self, broken_settings):
        resp = lambda_function.handler(_event(method="OPTIONS"), CONTEXT)
        assert resp["statusCode"] == 200
        assert "body" not in resp

    def test_every_invocation_gets_an_envelope(self, broken_settings):
        for _ in range(2):
            resp = lambda_function.handler(_event(json.dumps(make_body())), CONTEXT)
            assert _body(resp)["errorCode"] == "SECRET_RETRIEVAL_ERROR"
        assert lambda_function._container is None
