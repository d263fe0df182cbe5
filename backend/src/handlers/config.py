import os
from dataclasses import dataclass

import boto3
from botocore.config import Config

from handlers.gemini_client import DEFAULT_BASE_URL, DEFAULT_MODEL

# --- Singleton do cliente SSM e cache da chave (Warm Start) ---
_SSM_CLIENT = None
_SSM_CACHE = {}


@dataclass
class ProxySettings:
    api_key: str = None
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL


def get_ssm_client():
    global _SSM_CLIENT
    if _SSM_CLIENT is None:
        config = Config(retries={'max_attempts': 3, 'mode': 'standard'})
        _SSM_CLIENT = boto3.client("ssm", config=config)
    return _SSM_CLIENT


def read_ssm_secret(parameter_name, ssm_client=None):
    """
    Busca a chave no SSM Parameter Store (SecureString), uma vez por processo.
    Falha de leitura retorna None: o handler responde 500 de configuração.
    """
    if parameter_name in _SSM_CACHE:
        return _SSM_CACHE[parameter_name]

    try:
        client = ssm_client if ssm_client else get_ssm_client()
        response = client.get_parameter(Name=parameter_name, WithDecryption=True)
    except Exception as e:
        print(f"ERRO ao ler parâmetro SSM {parameter_name}: {str(e)}")
        return None

    value = response["Parameter"]["Value"]
    _SSM_CACHE[parameter_name] = value
    return value


def load_settings(key_env_var, ssm_client=None):
    """
    Monta as configurações do proxy a partir do ambiente da Lambda.
    A chave vem de <key_env_var>; se não existir, tenta <key_env_var>_SSM_PARAMETER.
    """
    api_key = os.environ.get(key_env_var)

    if not api_key:
        parameter_name = os.environ.get(f"{key_env_var}_SSM_PARAMETER")
        if parameter_name:
            api_key = read_ssm_secret(parameter_name, ssm_client=ssm_client)

    return ProxySettings(
        api_key=api_key or None,
        model=os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
        base_url=os.environ.get("GEMINI_API_BASE_URL") or DEFAULT_BASE_URL
    )


def clear_cache():
    _SSM_CACHE.clear()
