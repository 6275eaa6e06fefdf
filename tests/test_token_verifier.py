import json
import time

import jwt
import pytest
import requests
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm

from reflect_server.auth import token_verifier
from reflect_server.config.settings import settings

ISSUER = "https://auth.example.com/"
AUDIENCE = "reflect-api"


@pytest.fixture(scope="module")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def jwks(private_key, monkeypatch):
    jwk = json.loads(RSAAlgorithm.to_jwk(private_key.public_key()))
    jwk["kid"] = "key-1"
    monkeypatch.setitem(token_verifier.jwks_cache, "keys", [jwk])
    monkeypatch.setitem(token_verifier.jwks_cache, "expires_at", time.time() + 600)
    monkeypatch.setattr(settings, "auth_issuer", ISSUER)
    monkeypatch.setattr(settings, "auth_audience", AUDIENCE)


def sign(private_key, kid="key-1", **overrides):
    claims = {
        "sub": "user_abc",
        "iss": ISSUER,
        "aud": AUDIENCE,
        "exp": int(time.time()) + 300,
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, private_key, algorithm="RS256", headers={"kid": kid})


def test_valid_token(jwks, private_key):
    payload = token_verifier.verify_access_token(sign(private_key, email="a@example.com"))
    assert payload["sub"] == "user_abc"
    assert payload["email"] == "a@example.com"


@pytest.mark.parametrize(
    "overrides",
    [
        {"exp": int(time.time()) - 60},
        {"iss": "https://someone-else.example.com/"},
        {"aud": "another-api"},
        {"sub": None},
    ],
)
def test_rejected_claims(jwks, private_key, overrides):
    assert token_verifier.verify_access_token(sign(private_key, **overrides)) is None


def test_unknown_kid(jwks, private_key):
    assert token_verifier.verify_access_token(sign(private_key, kid="rotated")) is None


def test_wrong_signing_key(jwks):
    other = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    assert token_verifier.verify_access_token(sign(other)) is None


def test_garbage_token(jwks):
    assert token_verifier.verify_access_token("not-a-jwt") is None


def test_jwks_download_failure(private_key, monkeypatch):
    monkeypatch.setitem(token_verifier.jwks_cache, "keys", None)
    monkeypatch.setitem(token_verifier.jwks_cache, "expires_at", 0)

    def unreachable(*args, **kwargs):
        raise requests.ConnectionError("no route to host")

    monkeypatch.setattr(token_verifier.requests, "get", unreachable)
    assert token_verifier.verify_access_token(sign(private_key)) is None
