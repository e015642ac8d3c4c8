from __future__ import annotations
import json
import os
import boto3
from botocore.exceptions import ClientError


def load_api_key() -> str:
    """
    Returns the Wistia API key (the basic-auth password).
    Pulls from Secrets Manager if WISTIA_SECRET_ARN set; else from WISTIA_API_TOKEN.
    The secret may be a bare string or a JSON object with
    "WISTIA_API_TOKEN" / "api_token".
    """
    arn = os.getenv("WISTIA_SECRET_ARN")
    if not arn:
        token = os.getenv("WISTIA_API_TOKEN")
        if not token:
            raise RuntimeError(
                "Missing WISTIA_API_TOKEN; set WISTIA_SECRET_ARN "
                "or WISTIA_API_TOKEN (env or .env)."
            )
        return token

    sm = boto3.client("secretsmanager")
    try:
        resp = sm.get_secret_value(SecretId=arn)
    except ClientError as e:
        msg = e.response.get("Error", {}).get("Message", str(e))
        raise RuntimeError(f"Failed to read secret {arn}: {msg}") from e

    secret = (resp.get("SecretString") or "").strip()
    if not secret:
        raise RuntimeError(f"Secret {arn} is empty")
    try:
        obj = json.loads(secret)
    except json.JSONDecodeError:
        return secret
    if not isinstance(obj, dict):
        return secret
    token = obj.get("WISTIA_API_TOKEN") or obj.get("api_token")
    if not token:
        raise RuntimeError(f"Secret {arn} missing 'WISTIA_API_TOKEN'/'api_token'")
    return token
