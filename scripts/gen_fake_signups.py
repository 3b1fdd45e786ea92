#!/usr/bin/env python3
"""
Generate fake signup events.

Examples:
- JSONL, one invocation event per line:
  `python scripts/gen_fake_signups.py --count 20 --format jsonl --out /tmp/signups.jsonl`
- Pretty JSON array:
  `python scripts/gen_fake_signups.py --count 20 --format json --out /tmp/signups.json`
"""

import argparse
import json
import random
import sys
import uuid


FIRST_NAMES = ["Ann", "Ben", "Chloe", "Dev", "Elif", "Farah", "Goran", "Hana", "Ines", "Jun"]


def gen_signup(domain: str) -> dict:
    first = random.choice(FIRST_NAMES)
    return {
        "mailaddress": f"{first.lower()}.{uuid.uuid4().hex[:8]}@{domain}",
        "firstname": first,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate fake signup events.")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--format", choices=["json", "jsonl"], default="jsonl")
    parser.add_argument("--domain", default="example.com")
    parser.add_argument("--out", default="-", help="Output path (default: stdout)")
    args = parser.parse_args()

    events = [gen_signup(args.domain) for _ in range(args.count)]
    if args.format == "json":
        text = json.dumps(events, indent=2) + "\n"
    else:
        text = "".join(json.dumps(e) + "\n" for e in events)

    if args.out == "-":
        sys.stdout.write(text)
    else:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
