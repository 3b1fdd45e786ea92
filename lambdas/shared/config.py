"""
Process-wide configuration for the signup lambda.

Environment variables:
- `SENDGRID_API_KEY` (required): bearer token for the SendGrid Mail Send API.
- `SENDGRID_FROM_ADDRESS` (required): sender of every welcome email.
- `SENDGRID_TEMPLATE_ID` (required): dynamic template used for the welcome email.
- `TABLE_NAME` (required): DynamoDB table holding contact records.
- `AWS_DYNAMODB_REGION` (optional): region of the table; boto3's default region otherwise.
- `SENDGRID_API_BASE_URL` (optional, default "https://api.sendgrid.com").
- `SENDGRID_TIMEOUT_SECONDS` (optional, default 10): how long the handler lets an in-flight send finish before returning.
- `EMAIL_WORKERS` (optional, default 2): background threads for email sends.
"""

from dataclasses import dataclass
from typing import Optional

from lambdas.shared.utils import env, optional_env


DEFAULT_SENDGRID_API_BASE_URL = "https://api.sendgrid.com"


@dataclass(frozen=True)
class SignupConfig:
    sendgrid_api_key: str
    from_address: str
    template_id: str
    table_name: str
    dynamodb_region: Optional[str] = None
    sendgrid_api_base_url: str = DEFAULT_SENDGRID_API_BASE_URL
    sendgrid_timeout_seconds: float = 10.0
    email_workers: int = 2


def load_config() -> SignupConfig:
    return SignupConfig(
        sendgrid_api_key=env("SENDGRID_API_KEY"),
        from_address=env("SENDGRID_FROM_ADDRESS"),
        template_id=env("SENDGRID_TEMPLATE_ID"),
        table_name=env("TABLE_NAME"),
        dynamodb_region=optional_env("AWS_DYNAMODB_REGION"),
        sendgrid_api_base_url=env("SENDGRID_API_BASE_URL", DEFAULT_SENDGRID_API_BASE_URL).rstrip("/"),
        sendgrid_timeout_seconds=float(env("SENDGRID_TIMEOUT_SECONDS", "10")),
        email_workers=int(env("EMAIL_WORKERS", "2")),
    )
