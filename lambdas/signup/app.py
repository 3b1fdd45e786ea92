"""
Signup Lambda (welcome email + contact record).

Trigger:
- Direct invocation with `{"mailaddress": "...", "firstname": "..."}`.

What it does:
- Sends the SendGrid welcome template to `mailaddress` as a best-effort background task.
  The store write never waits on it and its outcome is only logged. Before returning, the
  handler gives the send up to `SENDGRID_TIMEOUT_SECONDS` to finish, since Lambda freezes
  the environment once the handler returns.
- Upserts `{email, firstname}` into the contacts table (keyed by `email`).
- Completes with `firstname` when the write succeeds, or with the store error unchanged.

Environment variables: see `lambdas.shared.config`.
"""

import json
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from functools import lru_cache
from typing import Any, Callable, Dict, NamedTuple, Optional

import boto3

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from lambdas.shared.config import SignupConfig, load_config
from lambdas.shared.mailer import build_template_message, sendgrid_client
from lambdas.shared.schemas import contact_record, signup_fields, to_dynamodb_item
from lambdas.shared.utils import json_dumps


logger = Logger(service="signup")
metrics = Metrics(namespace="SignupService", service="signup")

Callback = Callable[[Optional[BaseException], Optional[str]], None]


class SignupClients(NamedTuple):
    mailer: SendGridAPIClient
    dynamodb: Any


@lru_cache(maxsize=None)
def _config() -> SignupConfig:
    return load_config()


@lru_cache(maxsize=None)
def _clients() -> SignupClients:
    cfg = _config()
    clients = SignupClients(
        mailer=sendgrid_client(cfg.sendgrid_api_key, host=cfg.sendgrid_api_base_url),
        dynamodb=boto3.client("dynamodb", region_name=cfg.dynamodb_region),
    )
    _log("signup_clients_ready", table=cfg.table_name, region=cfg.dynamodb_region)
    return clients


@lru_cache(maxsize=None)
def _email_executor() -> Executor:
    return ThreadPoolExecutor(max_workers=_config().email_workers, thread_name_prefix="welcome-email")


def _log(event: str, **fields: Any) -> None:
    logger.info(event, extra=fields)


def _deliver(mailer: SendGridAPIClient, message: Mail, to: Optional[str]) -> Any:
    # Runs on the email worker; the outcome is logged before the future resolves.
    try:
        resp = mailer.send(message)
    except Exception as e:
        logger.warning("welcome_email_failed", extra={"to": to, "error": str(e), "error_type": type(e).__name__})
        raise
    _log("welcome_email_sent", to=to, status=getattr(resp, "status_code", None))
    return resp


def _send_welcome_email(mailer: SendGridAPIClient, executor: Executor, cfg: SignupConfig, fields: Dict[str, Any]) -> Future:
    """Best-effort: dispatch the welcome email and return without waiting for it.

    Failures are logged on the worker and never reach the caller.
    """
    message = build_template_message(
        to=fields["mailaddress"],
        sender=cfg.from_address,
        template_id=cfg.template_id,
        template_data={"first_name": fields["firstname"]},
    )
    return executor.submit(_deliver, mailer, message, fields["mailaddress"])


def _save_contact(dynamodb: Any, table_name: str, record: Dict[str, Any]) -> None:
    """Durable: upsert the contact record. Errors propagate."""
    dynamodb.put_item(TableName=table_name, Item=to_dynamodb_item(record))


def process_signup(
    event: Dict[str, Any],
    callback: Callback,
    config: Optional[SignupConfig] = None,
    clients: Optional[SignupClients] = None,
    executor: Optional[Executor] = None,
) -> Optional[Future]:
    """Run one signup and report the store outcome through `callback(error, result)`.

    Returns the in-flight welcome email future (None if it could not be
    dispatched). The callback never depends on it.
    """
    cfg = config or _config()
    clients = clients or _clients()
    executor = executor or _email_executor()

    fields = signup_fields(event)
    metrics.add_metric(name="SignupsReceived", unit=MetricUnit.Count, value=1)

    email_future: Optional[Future] = None
    try:
        email_future = _send_welcome_email(clients.mailer, executor, cfg, fields)
    except Exception as e:
        logger.warning("welcome_email_dispatch_failed", extra={"to": fields["mailaddress"], "error": str(e)})

    record = contact_record(event)
    try:
        _save_contact(clients.dynamodb, cfg.table_name, record)
    except Exception as e:
        metrics.add_metric(name="ContactSaveFailed", unit=MetricUnit.Count, value=1)
        logger.error("signup_store_error", extra={"table": cfg.table_name, "email": record["email"], "error": str(e)})
        callback(e, None)
        return email_future

    metrics.add_metric(name="ContactsSaved", unit=MetricUnit.Count, value=1)
    _log("signup_saved", table=cfg.table_name, email=record["email"])
    callback(None, fields["firstname"])
    return email_future


@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: Dict[str, Any], context: Any) -> Optional[str]:
    outcome: Dict[str, Any] = {}

    def _complete(error: Optional[BaseException], result: Optional[str]) -> None:
        outcome["error"] = error
        outcome["result"] = result

    email_future = process_signup(event, _complete)

    # Lambda freezes the environment on return; give the send a bounded chance to finish.
    # Its result is not inspected.
    if email_future is not None:
        wait([email_future], timeout=_config().sendgrid_timeout_seconds)

    if outcome["error"] is not None:
        raise outcome["error"]
    return outcome["result"]


# Local quick check (optional): `echo '{"mailaddress":"a@example.com","firstname":"Ann"}' | python -m lambdas.signup.app`
def _main() -> int:
    import sys
    from types import SimpleNamespace

    event = json.loads(sys.stdin.read())
    context = SimpleNamespace(function_name="signup-local", aws_request_id="local")
    print(json_dumps(handler(event, context=context)))
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
