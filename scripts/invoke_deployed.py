import boto3
import json
import sys

# --- CONFIGURAÇÃO ---
# Nomes das funções criadas no Terraform
FUNCTIONS = {
    "proxy": "prompt-proxy-gemini-dev",
    "text": "prompt-proxy-gemini-text-dev",
}
REGION = "us-east-1"


def run_test(variant="proxy", prompt="Diga olá em uma frase."):
    function_name = FUNCTIONS[variant]
    print(f"🚀 Invocando a função: {function_name}...")

    lambda_client = boto3.client("lambda", region_name=REGION)

    # Payload simulando o que o API Gateway enviaria
    payload = {
        "httpMethod": "POST",
        "body": json.dumps({"prompt": prompt})
    }

    try:
        response = lambda_client.invoke(
            FunctionName=function_name,
            InvocationType='RequestResponse',
            Payload=json.dumps(payload)
        )
        result = json.loads(response['Payload'].read())
    except Exception as e:
        print(f"❌ ERRO NA INVOCAÇÃO: {str(e)}")
        sys.exit(1)

    status = result.get("statusCode")
    print(f"📡 Status: {status}")
    print(f"   Body: {result.get('body')}")

    if status != 200:
        print("❌ FALHA: o proxy não retornou 200.")
        sys.exit(1)

    print("✨ SUCESSO: o proxy respondeu.")


if __name__ == "__main__":
    variant = sys.argv[1] if len(sys.argv) > 1 else "proxy"
    run_test(variant)
