from handlers.config import load_settings
from handlers.http_event import error_response
from handlers.prompt_proxy import INTERNAL_ERROR_MESSAGE, PromptProxyHandler, passthrough

KEY_ENV_VAR = "GEMINI_API_KEY"


def lambda_handler(event, context, session=None, ssm_client=None):
    """
    Proxy do Gemini: devolve a resposta completa do generateContent.
    Rota: POST /gemini
    Args:
        session: requests.Session opcional para testes.
        ssm_client: cliente SSM opcional para testes.
    """
    try:
        # Chave lida a cada invocação (o env da Lambda pode mudar entre deploys)
        settings = load_settings(KEY_ENV_VAR, ssm_client=ssm_client)
        handler = PromptProxyHandler(settings, shaper=passthrough, session=session)
        return handler.handle(event or {})

    except Exception as e:
        print(f"ERRO CRÍTICO: {str(e)}")
        return error_response(500, INTERNAL_ERROR_MESSAGE)
