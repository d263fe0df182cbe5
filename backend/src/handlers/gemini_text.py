from handlers.config import load_settings
from handlers.http_event import error_response
from handlers.prompt_proxy import INTERNAL_ERROR_MESSAGE, PromptProxyHandler, extract_text

KEY_ENV_VAR = "GOOGLE_API_KEY"


def lambda_handler(event, context, session=None, ssm_client=None):
    """
    Variante do proxy que devolve só {"text": ...} do primeiro candidato.
    Rota: POST /gemini/text
    """
    try:
        settings = load_settings(KEY_ENV_VAR, ssm_client=ssm_client)
        handler = PromptProxyHandler(settings, shaper=extract_text, session=session)
        return handler.handle(event or {})

    except Exception as e:
        print(f"ERRO CRÍTICO: {str(e)}")
        return error_response(500, INTERNAL_ERROR_MESSAGE)
