import json

import boto3
import pytest
from unittest.mock import MagicMock
from moto import mock_aws

from handlers import config

KEY_ENV_VARS = [
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY_SSM_PARAMETER",
    "GOOGLE_API_KEY_SSM_PARAMETER",
    "GEMINI_MODEL",
    "GEMINI_API_BASE_URL",
]

GEMINI_RESPONSE = {
    "candidates": [{
        "content": {"parts": [{"text": "Olá! Como posso ajudar?"}], "role": "model"},
        "finishReason": "STOP"
    }],
    "usageMetadata": {"promptTokenCount": 4, "candidatesTokenCount": 7}
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Garante que nenhum teste herda chave do ambiente local ou do cache SSM."""
    for name in KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.clear_cache()
    yield
    config.clear_cache()


@pytest.fixture(scope="function")
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture(scope="function")
def ssm_client(aws_credentials):
    with mock_aws():
        conn = boto3.client("ssm", region_name="us-east-1")
        conn.put_parameter(
            Name="/prompt-proxy/test/gemini-api-key",
            Value="ssm_secret_456",
            Type="SecureString"
        )
        yield conn


def make_http_response(status_code=200, data=None, text=None):
    """Simula um requests.Response do Gemini."""
    response = MagicMock()
    response.status_code = status_code
    # Igual ao requests: ok é True para qualquer status < 400
    response.ok = status_code < 400
    response.text = text if text is not None else json.dumps(data)
    response.json.return_value = data
    return response


@pytest.fixture
def mock_session():
    """requests.Session falsa: responde 200 com um generateContent válido."""
    session = MagicMock()
    session.post.return_value = make_http_response(200, GEMINI_RESPONSE)
    return session


def make_event(method="POST", body=None, version=1):
    """Evento no formato do API Gateway (v1 = REST API, v2 = HTTP API)."""
    if version == 2:
        event = {"requestContext": {"http": {"method": method}}}
    else:
        event = {"httpMethod": method}
    if body is not None:
        event["body"] = body if isinstance(body, str) else json.dumps(body)
    return event


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def http_response_factory():
    return make_http_response


@pytest.fixture
def gemini_response():
    return json.loads(json.dumps(GEMINI_RESPONSE))
