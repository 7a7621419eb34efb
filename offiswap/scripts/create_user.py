"""
Create a company account without going through the API. Run from project root:
  python -m offiswap.scripts.create_user NAME EMAIL PASSWORD [--location LOCATION]
Example:
  python -m offiswap.scripts.create_user "Acme Ltd" ops@acme.test s3cret --location Berlin
"""
import argparse
import sys

from pydantic import ValidationError

from offiswap.core.database import SessionLocal
from offiswap.core.errors import Conflict
from offiswap.core.logs import configure_logging
from offiswap.schemas.auth import RegisterRequest
from offiswap.services.credentials import register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an OffiSwap user.")
    parser.add_argument("name", help="Company display name")
    parser.add_argument("email", help="Login email (must be unique)")
    parser.add_argument("password", help="Password (1-72 chars)")
    parser.add_argument("--location", default=None, help="Optional location")
    args = parser.parse_args(argv)

    configure_logging()

    try:
        body = RegisterRequest(
            name=args.name.strip(),
            email=args.email.strip(),
            password=args.password,
            location=args.location,
        )
    except ValidationError as e:
        print(f"Invalid input: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(db, body)
    except Conflict as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
