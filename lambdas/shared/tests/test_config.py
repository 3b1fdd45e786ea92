import pytest

from lambdas.shared.config import DEFAULT_SENDGRID_API_BASE_URL, load_config


REQUIRED = {
    "SENDGRID_API_KEY": "SG.key",
    "SENDGRID_FROM_ADDRESS": "hello@example.com",
    "SENDGRID_TEMPLATE_ID": "d-welcome",
    "TABLE_NAME": "Contacts",
}


def _set_required(monkeypatch):
    for k, v in REQUIRED.items():
        monkeypatch.setenv(k, v)
    for k in ("AWS_DYNAMODB_REGION", "SENDGRID_API_BASE_URL", "SENDGRID_TIMEOUT_SECONDS", "EMAIL_WORKERS"):
        monkeypatch.delenv(k, raising=False)


def test_load_config_defaults(monkeypatch):
    _set_required(monkeypatch)

    cfg = load_config()

    assert cfg.table_name == "Contacts"
    assert cfg.template_id == "d-welcome"
    assert cfg.dynamodb_region is None
    assert cfg.sendgrid_api_base_url == DEFAULT_SENDGRID_API_BASE_URL
    assert cfg.sendgrid_timeout_seconds == 10.0
    assert cfg.email_workers == 2


def test_load_config_overrides(monkeypatch):
    _set_required(monkeypatch)
    monkeypatch.setenv("AWS_DYNAMODB_REGION", "eu-west-1")
    monkeypatch.setenv("SENDGRID_API_BASE_URL", "https://sendgrid.example/")
    monkeypatch.setenv("EMAIL_WORKERS", "4")

    cfg = load_config()

    assert cfg.dynamodb_region == "eu-west-1"
    assert cfg.sendgrid_api_base_url == "https://sendgrid.example"
    assert cfg.email_workers == 4


def test_load_config_missing_required(monkeypatch):
    _set_required(monkeypatch)
    monkeypatch.delenv("TABLE_NAME")

    with pytest.raises(RuntimeError, match="TABLE_NAME"):
        load_config()
