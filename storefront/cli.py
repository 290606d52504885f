import argparse
import subprocess

from storefront.db import SessionLocal
from storefront.errors import ValidationError
from storefront.services import users as users_service
from storefront.deps import hash_password


def run(cmd: list[str]) -> int:
    print("+", " ".join(cmd))
    return subprocess.call(cmd)


def cmd_db(args: argparse.Namespace) -> int:
    if args.action == "upgrade":
        return run(["alembic", "-c", "alembic.ini", "upgrade", "head"])

    if args.action == "downgrade":
        return run(["alembic", "-c", "alembic.ini", "downgrade", args.revision])

    if args.action == "revision":
        return run(["alembic", "-c", "alembic.ini", "revision", "--autogenerate", "-m", args.message])

    print("Unknown db action")
    return 2


def cmd_seed_admin(args: argparse.Namespace) -> int:
    username = args.username.strip().lower()
    db = SessionLocal()
    try:
        existing = users_service.get_by_username(db, username)
        if existing:
            print(f"User {username} already exists.")
            return 0
        try:
            users_service.create_user(db, username, args.password, is_admin=True)
        except ValidationError as exc:
            print(exc.message)
            return 1
        print(f"Seeded admin user: {username}")
        return 0
    finally:
        db.close()


def cmd_reset_password(args: argparse.Namespace) -> int:
    username = args.username.strip().lower()
    db = SessionLocal()
    try:
        user = users_service.get_by_username(db, username)
        if not user:
            print(f"User {username} not found.")
            return 1

        user.password_hash = hash_password(args.password)
        db.commit()
        print(f"Password updated for user: {username}")
        return 0
    finally:
        db.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront-ctl")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_db = sub.add_parser("db")
    p_db.add_argument("action", choices=["upgrade", "downgrade", "revision"])
    p_db.add_argument("--message", default="auto")
    p_db.add_argument("--revision", default="-1")
    p_db.set_defaults(func=cmd_db)

    p_seed = sub.add_parser("seed-admin")
    p_seed.add_argument("--username", required=True)
    p_seed.add_argument("--password", required=True)
    p_seed.set_defaults(func=cmd_seed_admin)

    p_reset = sub.add_parser("reset-password")
    p_reset.add_argument("--username", required=True)
    p_reset.add_argument("--password", required=True)
    p_reset.set_defaults(func=cmd_reset_password)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
