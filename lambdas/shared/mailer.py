"""
SendGrid helpers for dynamic-template emails.

`SendGridAPIClient` keeps no per-send state, so one client is created per
process and shared by every background send.
"""

from typing import Any, Dict, Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail


DEFAULT_SENDGRID_HOST = "https://api.sendgrid.com"


def sendgrid_client(api_key: str, host: str = DEFAULT_SENDGRID_HOST) -> SendGridAPIClient:
    return SendGridAPIClient(api_key=api_key, host=host.rstrip("/"))


def build_template_message(
    to: Optional[str],
    sender: str,
    template_id: str,
    template_data: Optional[Dict[str, Any]] = None,
) -> Mail:
    message = Mail(from_email=sender, to_emails=to)
    message.template_id = template_id
    message.dynamic_template_data = dict(template_data or {})
    return message
