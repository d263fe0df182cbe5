from handlers.gemini_client import GeminiClient, UpstreamFailure, UpstreamSuccess
from handlers.http_event import build_response, error_response, get_method, parse_body

MISSING_KEY_MESSAGE = "API key is not configured on the server."
MISSING_PROMPT_MESSAGE = "Prompt is required in the request body."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


class InvalidRequest(Exception):
    """Erro de input do cliente (vira 400, não é falha do servidor)."""


# --- Estratégias de formatação da resposta de sucesso ---

def passthrough(data):
    """Devolve a resposta do Gemini sem alterações."""
    return data


def extract_text(data):
    """
    Extrai só o texto do primeiro candidato: candidates[0].content.parts[0].text.
    Se o formato não bater, devolve texto vazio em vez de quebrar.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = ""
    return {"text": text if isinstance(text, str) else ""}


def build_payload(prompt, system_instruction=None):
    payload = {
        "contents": [{"parts": [{"text": prompt}]}]
    }
    if system_instruction:
        payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
    return payload


def read_prompt(body):
    if not isinstance(body, dict):
        raise InvalidRequest(MISSING_PROMPT_MESSAGE)

    prompt = body.get("prompt")
    if prompt is None or prompt == "":
        raise InvalidRequest(MISSING_PROMPT_MESSAGE)
    if not isinstance(prompt, str):
        raise InvalidRequest("Prompt must be a string.")

    system_instruction = body.get("systemInstruction")
    if system_instruction and not isinstance(system_instruction, str):
        raise InvalidRequest("systemInstruction must be a string.")

    return prompt, system_instruction


class PromptProxyHandler:
    """
    Proxy de prompt para o Gemini.
    A chave fica só no servidor; o cliente manda {prompt, systemInstruction?}.

    Args:
        settings: ProxySettings (api_key pode ser None -> erro de configuração).
        shaper: função que converte o JSON do Gemini no body devolvido.
        session: requests.Session opcional (injeção de dependência para testes).
    """

    def __init__(self, settings, shaper=passthrough, session=None):
        self.settings = settings
        self.shaper = shaper
        self.session = session

    def handle(self, event):
        method = get_method(event)
        print(f"Requisição recebida: {method} (body presente: {bool(event.get('body'))})")

        # 1. Preflight CORS
        if method == "OPTIONS":
            return build_response(200)

        # 2. Só POST
        if method != "POST":
            return error_response(405, f"Method {method} Not Allowed", {"Allow": "POST"})

        # 3. Chave configurada? Antes de qualquer parsing ou chamada externa
        if not self.settings.api_key:
            print("ERRO DE CONFIGURAÇÃO: chave da API do Gemini não definida.")
            return error_response(500, MISSING_KEY_MESSAGE)

        try:
            # 4. Validação do input
            prompt, system_instruction = read_prompt(parse_body(event))

            # 5. Payload novo a cada requisição
            payload = build_payload(prompt, system_instruction)

            # 6. Chamada única ao Gemini
            client = GeminiClient(
                self.settings.api_key,
                model=self.settings.model,
                base_url=self.settings.base_url,
                session=self.session
            )
            result = client.generate_content(payload)

            # 7/8. Tradução do resultado
            if isinstance(result, UpstreamFailure):
                print(f"Erro da API do Google ({result.status_code}): {result.detail}")
                return error_response(
                    result.status_code,
                    f"An error occurred with the Google API: {result.detail}"
                )

            if isinstance(result, UpstreamSuccess):
                return build_response(200, self.shaper(result.data))

            raise TypeError(f"Resultado inesperado do cliente: {result!r}")

        except InvalidRequest as e:
            return error_response(400, str(e))

        except Exception as e:
            # 9. Qualquer outra falha: detalhe só no log
            print(f"ERRO NO SERVIDOR: {str(e)}")
            return error_response(500, INTERNAL_ERROR_MESSAGE)
