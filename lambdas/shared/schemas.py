from __future__ import annotations

from typing import Any, Dict, List, Mapping

from boto3.dynamodb.types import TypeSerializer


SIGNUP_EVENT_FIELDS: List[str] = ["mailaddress", "firstname"]

# Contact record attribute -> signup event field it is copied from.
CONTACT_RECORD_FIELDS: Mapping[str, str] = {
    "email": "mailaddress",
    "firstname": "firstname",
}

_serializer = TypeSerializer()


def signup_fields(event: Mapping[str, Any]) -> Dict[str, Any]:
    """Pick the signup fields off an invocation event. Missing fields come back as None."""
    return {k: event.get(k) for k in SIGNUP_EVENT_FIELDS}


def contact_record(event: Mapping[str, Any]) -> Dict[str, Any]:
    fields = signup_fields(event)
    return {attr: fields[src] for attr, src in CONTACT_RECORD_FIELDS.items()}


def to_dynamodb_item(record: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    # {"email": "a@x"} -> {"email": {"S": "a@x"}}
    return {k: _serializer.serialize(v) for k, v in record.items()}
