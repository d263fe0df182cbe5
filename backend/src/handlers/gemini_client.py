from dataclasses import dataclass

import requests

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash-preview-05-20"

# Singleton da sessão HTTP (reaproveita conexão TLS entre invocações quentes)
_HTTP_SESSION = None


def get_http_session():
    global _HTTP_SESSION
    if _HTTP_SESSION is None:
        _HTTP_SESSION = requests.Session()
    return _HTTP_SESSION


@dataclass
class UpstreamSuccess:
    data: dict


@dataclass
class UpstreamFailure:
    status_code: int
    detail: str


class GeminiClient:
    """
    Cliente mínimo da REST API do Gemini (generateContent).
    Uma única tentativa, sem timeout nem retry: quem decide reenviar é o cliente.
    """

    def __init__(self, api_key, model=DEFAULT_MODEL, base_url=DEFAULT_BASE_URL, session=None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.session = session if session else get_http_session()

    @property
    def url(self):
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate_content(self, payload):
        # A chave vai como query param (?key=...), nunca no body
        response = self.session.post(
            self.url,
            params={"key": self.api_key},
            headers={"Content-Type": "application/json"},
            json=payload
        )

        if not 200 <= response.status_code < 300:
            return UpstreamFailure(status_code=response.status_code, detail=response.text)

        # Erro de parse aqui sobe para o handler (vira 500)
        return UpstreamSuccess(data=response.json())
