from datetime import datetime, timezone

import pytest

from authtoken import EPOCH, TokenConfig, TokenIssuer, TokenVerifier
from authtoken.config import DEFAULT_SECRET, SECRET_ENV_VAR


def test_config_falls_back_to_dev_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SECRET_ENV_VAR, raising=False)
    config = TokenConfig.from_env()
    assert config.secret == DEFAULT_SECRET
    assert config.secret_bytes == DEFAULT_SECRET.encode("utf-8")


def test_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SECRET_ENV_VAR, "from-env")
    assert TokenConfig.from_env().secret == "from-env"
    assert TokenConfig.from_env("explicit").secret == "explicit"
    assert TokenConfig.from_env("").secret == ""


def test_issuer_with_fixed_clock_matches_vector() -> None:
    issuer = TokenIssuer(secret_key="secret", clock=lambda: EPOCH + 86400)
    issued = issuer.issue("test")
    assert issued.token == "dGVzdA==.ODY0MDA=.iNsbhu5s1rdoPT960fY0Bu7sQAaaP2ysD3RJS9DQUmg="
    assert issued.subject_id == "test"
    assert issued.timestamp == EPOCH + 86400
    assert issued.signature == "iNsbhu5s1rdoPT960fY0Bu7sQAaaP2ysD3RJS9DQUmg="


def test_issuer_accepts_datetime_clock() -> None:
    issuer = TokenIssuer(secret_key="secret", clock=lambda: datetime(2023, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc))
    assert issuer.issue("id").token == "aWQ=.MQ==.PNvHPV1cdk47r68wzAugWGeHfjNZOa6Su+7qj67U8ok="


def test_issuer_rejects_empty_subject() -> None:
    with pytest.raises(ValueError):
        TokenIssuer(secret_key="secret").issue("")


def test_issue_and_verify_with_shared_secret() -> None:
    issued = TokenIssuer(secret_key="unit-secret").issue("user-1")
    verifier = TokenVerifier(secret_key="unit-secret")
    assert verifier.verify(issued.token) is True

    claims = verifier.claims(issued.token)
    assert claims is not None
    assert claims.subject_id == "user-1"
    assert claims.timestamp == issued.timestamp


def test_verifier_rejects_other_secret() -> None:
    issued = TokenIssuer(secret_key="unit-secret").issue("user-1")
    verifier = TokenVerifier(secret_key="different")
    assert verifier.verify(issued.token) is False
    assert verifier.claims(issued.token) is None
    assert verifier.claims("not-a-token") is None


def test_issuer_and_verifier_share_env_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SECRET_ENV_VAR, "secret")
    issued = TokenIssuer().issue("id")
    assert TokenVerifier().verify(issued.token) is True
    assert TokenVerifier(secret_key="secret").verify("aWQ=.MQ==.PNvHPV1cdk47r68wzAugWGeHfjNZOa6Su+7qj67U8ok=") is True
