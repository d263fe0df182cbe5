import base64
import json

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type"
}


def get_method(event):
    """
    Lê o verbo HTTP do evento do API Gateway.
    REST API (v1) usa 'httpMethod', HTTP API (v2) usa requestContext.http.method.
    """
    method = event.get("httpMethod")
    if not method:
        method = event.get("requestContext", {}).get("http", {}).get("method")
    return (method or "").upper()


def parse_body(event):
    """
    Retorna o body já decodificado.
    Invocação direta da Lambda pode mandar um dict; API Gateway manda string.
    JSON inválido levanta exceção (tratada pelo handler como erro 500).
    """
    raw = event.get("body")
    if not raw:
        return {}
    if not isinstance(raw, str):
        return raw

    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")

    return json.loads(raw)


def build_response(status_code, body=None, extra_headers=None):
    headers = dict(CORS_HEADERS)
    if extra_headers:
        headers.update(extra_headers)

    if body is None:
        return {"statusCode": status_code, "headers": headers, "body": ""}

    headers["Content-Type"] = "application/json"
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(body)
    }


def error_response(status_code, message, extra_headers=None):
    return build_response(status_code, {"error": message}, extra_headers)
