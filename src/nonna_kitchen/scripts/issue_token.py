"""Print a bearer token for local development against the API.

Production tokens are issued by the identity provider; this mints one with
the same claims using the shared secret.
"""
from __future__ import annotations

import argparse

from nonna_kitchen.core.security import create_access_token
from nonna_kitchen.core.settings import settings


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("subject", help="User id placed in the sub claim")
    parser.add_argument("--name", default=None, help="Display name")
    parser.add_argument("--email", default=None)
    parser.add_argument(
        "--admin",
        action="store_true",
        help=f"Grant the {settings.admin_role!r} role",
    )
    args = parser.parse_args()

    roles = [settings.admin_role] if args.admin else []
    print(create_access_token(args.subject, display_name=args.name, email=args.email, roles=roles))


if __name__ == "__main__":
    main()
