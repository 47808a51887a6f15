#!/usr/bin/env python3
"""
Mint a signed bearer token for the Records API.

The token is signed with ``SECRET_KEY`` from the environment, so run
this with the same configuration as the server.

Usage:
    python create_token.py --subject admin@example.com --role WRITE --days 365
"""

import argparse
import sys

from records_api.app.core.authorization import Role
from records_api.app.core.security import create_access_token


def main(argv=None):
    ap = argparse.ArgumentParser(description="Create a Records API access token.")
    ap.add_argument("--subject", required=True, help="Value of the token's sub claim")
    ap.add_argument(
        "--role",
        action="append",
        choices=[role.value for role in Role],
        required=True,
        help="Role to grant; repeat for several",
    )
    ap.add_argument("--days", type=int, default=1, help="Lifetime in days (default 1)")
    args = ap.parse_args(argv)

    if args.days <= 0:
        print("[!] --days must be positive.", file=sys.stderr)
        return 1

    print(create_access_token(args.subject, args.role, expires_delta=args.days * 24 * 60 * 60))
    return 0


if __name__ == "__main__":
    sys.exit(main())
