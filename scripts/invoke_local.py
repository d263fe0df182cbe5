import json
import os
import sys
import argparse

# --- CONFIGURAÇÃO DE AMBIENTE ---
# Carrega GEMINI_API_KEY / GOOGLE_API_KEY de backend/.env
from dotenv import load_dotenv

current_dir = os.path.dirname(os.path.abspath(__file__))
backend_src = os.path.abspath(os.path.join(current_dir, "../backend/src"))
sys.path.append(backend_src)
load_dotenv(os.path.join(current_dir, "../backend/.env"))


def run_local(prompt, system_instruction=None, variant="proxy"):
    print(f"🧪 Invocando o proxy localmente (variante: {variant})")
    print("-" * 60)

    # Lazy import para garantir que o path esteja certo
    if variant == "text":
        from handlers.gemini_text import lambda_handler
    else:
        from handlers.gemini_proxy import lambda_handler

    body = {"prompt": prompt}
    if system_instruction:
        body["systemInstruction"] = system_instruction

    # Simula o evento que o API Gateway (REST) enviaria
    event = {"httpMethod": "POST", "body": json.dumps(body)}

    response = lambda_handler(event, None)

    status = response["statusCode"]
    print(f"{'✅' if status == 200 else '❌'} Status: {status}")
    try:
        print(json.dumps(json.loads(response["body"]), indent=2, ensure_ascii=False))
    except ValueError:
        print(response["body"])


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Invoca o proxy do Gemini localmente.")
    parser.add_argument("prompt")
    parser.add_argument("--system", dest="system_instruction")
    parser.add_argument("--variant", choices=["proxy", "text"], default="proxy")
    args = parser.parse_args()

    run_local(args.prompt, args.system_instruction, args.variant)
