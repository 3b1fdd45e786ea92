#!/usr/bin/env python3
"""
Invoke the deployed signup function with a single signup event.

Example:
`python scripts/invoke_signup.py --function-name signup --email a@example.com --first-name Ann --region us-east-2`
"""

import argparse
import json

import boto3


def main() -> int:
    parser = argparse.ArgumentParser(description="Invoke the signup Lambda synchronously.")
    parser.add_argument("--function-name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--region", default=None)
    args = parser.parse_args()

    session = boto3.session.Session(region_name=args.region)
    lam = session.client("lambda")

    event = {"mailaddress": args.email, "firstname": args.first_name}
    resp = lam.invoke(
        FunctionName=args.function_name,
        InvocationType="RequestResponse",
        Payload=json.dumps(event).encode("utf-8"),
    )
    payload = resp["Payload"].read().decode("utf-8")

    if resp.get("FunctionError"):
        print(f"function_error={resp['FunctionError']} payload={payload}")
        return 1
    print(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
