# reflect_server/auth/token_verifier.py
import json
import logging
import time

import jwt
import requests
from jwt.algorithms import RSAAlgorithm
from reflect_server.config.settings import settings

logger = logging.getLogger(__name__)

# JWKS is downloaded on first use and kept for auth_jwks_ttl_seconds
jwks_cache = {
    "keys": None,
    "expires_at": 0
}

def get_jwks():
    now = time.time()

    if jwks_cache["keys"] and now < jwks_cache["expires_at"]:
        return jwks_cache["keys"]

    res = requests.get(settings.auth_jwks_url, timeout=10)
    res.raise_for_status()

    jwks_cache["keys"] = res.json().get("keys", [])
    jwks_cache["expires_at"] = now + settings.auth_jwks_ttl_seconds
    return jwks_cache["keys"]

def public_key_for(token: str):
    headers = jwt.get_unverified_header(token)
    kid = headers.get("kid")
    key = next((k for k in get_jwks() if k.get("kid") == kid), None)
    if not key:
        return None
    return RSAAlgorithm.from_jwk(json.dumps(key))

def verify_access_token(token: str):
    """
    Access token check:
    - RS256 signature / exp
    - iss when AUTH_ISSUER is set
    - aud when AUTH_AUDIENCE is set
    - sub present
    Returns the payload, or None for any invalid token.
    """
    try:
        public_key = public_key_for(token)
        if public_key is None:
            logger.warning("no JWKS key matches the token kid")
            return None

        options = {"verify_aud": bool(settings.auth_audience)}
        kwargs = {}
        if settings.auth_issuer:
            kwargs["issuer"] = settings.auth_issuer
        if settings.auth_audience:
            kwargs["audience"] = settings.auth_audience

        payload = jwt.decode(
            token,
            public_key,
            algorithms=["RS256"],
            options=options,
            **kwargs,
        )
        if not payload.get("sub"):
            return None
        return payload
    except jwt.PyJWTError as e:
        logger.warning(f"access token rejected: {e}")
        return None
    except requests.RequestException as e:
        logger.error(f"JWKS download failed: {e}")
        return None
