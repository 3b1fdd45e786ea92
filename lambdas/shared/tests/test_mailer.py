from types import SimpleNamespace

from sendgrid.helpers.mail import Mail

from lambdas.shared.mailer import build_template_message, sendgrid_client


def test_build_template_message_sets_template_and_first_name():
    msg = build_template_message("a@example.com", "hello@example.com", "d-welcome", {"first_name": "Ann"})
    assert isinstance(msg, Mail)

    payload = msg.get()
    assert payload["from"]["email"] == "hello@example.com"
    assert payload["template_id"] == "d-welcome"
    assert payload["personalizations"][0]["to"][0]["email"] == "a@example.com"
    assert payload["personalizations"][0]["dynamic_template_data"] == {"first_name": "Ann"}


def test_sendgrid_client_uses_key_and_host():
    client = sendgrid_client("SG.key", host="https://sendgrid.example/")
    assert client.api_key == "SG.key"
    assert client.host == "https://sendgrid.example"


def test_sendgrid_client_posts_mail_payload(monkeypatch):
    client = sendgrid_client("SG.key")
    posted = []

    def _post(request_body=None, **kwargs):
        posted.append(request_body)
        return SimpleNamespace(status_code=202)

    monkeypatch.setattr(client, "client", SimpleNamespace(mail=SimpleNamespace(send=SimpleNamespace(post=_post))))

    msg = build_template_message("a@example.com", "hello@example.com", "d-welcome", {"first_name": "Ann"})
    resp = client.send(msg)

    assert resp.status_code == 202
    assert posted == [msg.get()]
