import argparse
import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path

from credstore.app_shell.context import ServiceContext
from credstore.ports.store import StoreError
from credstore.rules.loader import load_rules
from credstore.rules.models import Rules
from credstore.services.account import AccountOutput, AccountService

logger = logging.getLogger("cli")

DEFAULT_RULES_PATH = "rules.yaml"


def get_rules() -> Rules:
    explicit = os.environ.get("CREDSTORE_RULES_PATH")
    rules_path = Path(explicit or DEFAULT_RULES_PATH)
    if not rules_path.exists():
        if explicit:
            raise FileNotFoundError(f"Rules file not found at: {rules_path}")
        logger.info("No %s found, using default rules", rules_path)
        return Rules()
    return load_rules(rules_path)


def get_context(db_path: str | None = None) -> ServiceContext:
    return ServiceContext.create(get_rules(), db_path=db_path)


def _report(out: AccountOutput, success_message: str) -> int:
    if out.success:
        print(success_message)
        return 0
    print(f"Error ({out.error_code}): {out.error}", file=sys.stderr)
    return 1


def handle_migrate(svc: AccountService, args: argparse.Namespace) -> int:
    # Migration runs when the service starts; report what that pass did
    out = svc.startup_migration
    if out.legacy_imported:
        print(f"Imported legacy account {out.legacy_username}.")
    if out.admin_created:
        print("Created default admin account.")
    if not out.written:
        print("Nothing to migrate.")
    print(f"Users: {', '.join(svc.list_users())}")
    return 0


def handle_start_route(svc: AccountService, args: argparse.Namespace) -> int:
    print(svc.get_start_route())
    return 0


def handle_complete_onboarding(svc: AccountService, args: argparse.Namespace) -> int:
    svc.complete_onboarding()
    print("Onboarding completed.")
    return 0


def handle_register(svc: AccountService, args: argparse.Namespace) -> int:
    out = svc.register(args.username, args.password, args.confirm, bio=args.bio)
    return _report(out, f"Registered {args.username}.")


def handle_login(svc: AccountService, args: argparse.Namespace) -> int:
    out = svc.login(args.username, args.password, remember_me=args.remember)
    return _report(out, f"Logged in as {args.username}.")


def handle_logout(svc: AccountService, args: argparse.Namespace) -> int:
    svc.logout()
    print("Logged out.")
    return 0


def handle_whoami(svc: AccountService, args: argparse.Namespace) -> int:
    view = svc.get_current_user_view()
    if view is None:
        print("Not logged in.", file=sys.stderr)
        return 1
    role = "Administrator" if view.is_admin else "Player"
    print(f"{view.username} ({role})")
    print(f"Bio: {view.bio}")
    print(f"Avatar: {view.avatar_url}")
    return 0


def handle_set_bio(svc: AccountService, args: argparse.Namespace) -> int:
    return _report(svc.update_bio(args.bio), "Bio updated!")


def handle_regenerate_avatar(svc: AccountService, args: argparse.Namespace) -> int:
    out = svc.regenerate_avatar()
    url = out.user.avatar_url if out.user else ""
    return _report(out, f"Avatar updated! {url}".strip())


def handle_list_users(svc: AccountService, args: argparse.Namespace) -> int:
    for username in svc.list_users():
        print(username)
    return 0


def handle_create_user(svc: AccountService, args: argparse.Namespace) -> int:
    return _report(svc.create_user(args.username, args.password), "User created")


def handle_set_password(svc: AccountService, args: argparse.Namespace) -> int:
    out = svc.update_user_password(args.username, args.password)
    return _report(out, "Password updated")


def handle_delete_user(svc: AccountService, args: argparse.Namespace) -> int:
    return _report(svc.delete_user(args.username), "User deleted")


HANDLERS: dict[str, Callable[[AccountService, argparse.Namespace], int]] = {
    "migrate": handle_migrate,
    "start-route": handle_start_route,
    "complete-onboarding": handle_complete_onboarding,
    "register": handle_register,
    "login": handle_login,
    "logout": handle_logout,
    "whoami": handle_whoami,
    "set-bio": handle_set_bio,
    "regenerate-avatar": handle_regenerate_avatar,
    "list-users": handle_list_users,
    "create-user": handle_create_user,
    "set-password": handle_set_password,
    "delete-user": handle_delete_user,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Credential & session store CLI")
    parser.add_argument("--db", help="Path to the preferences database")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # lifecycle
    subparsers.add_parser("migrate", help="Run legacy migration and list users")
    subparsers.add_parser("start-route", help="Print onboarding, login or home")
    subparsers.add_parser("complete-onboarding", help="Mark onboarding as done")

    # auth
    register_parser = subparsers.add_parser("register", help="Register a new account")
    register_parser.add_argument("username")
    register_parser.add_argument("password")
    register_parser.add_argument("--confirm", help="Password confirmation")
    register_parser.add_argument("--bio", default="", help="Initial bio")

    login_parser = subparsers.add_parser("login", help="Log in")
    login_parser.add_argument("username")
    login_parser.add_argument("password")
    login_parser.add_argument("--remember", action="store_true", help="Remember this login")

    subparsers.add_parser("logout", help="Log out and forget the session")

    # profile
    subparsers.add_parser("whoami", help="Show the logged-in user")
    bio_parser = subparsers.add_parser("set-bio", help="Update the logged-in user's bio")
    bio_parser.add_argument("bio")
    subparsers.add_parser("regenerate-avatar", help="Pick a new random avatar")

    # admin
    subparsers.add_parser("list-users", help="List usernames")
    create_parser = subparsers.add_parser("create-user", help="Create a user")
    create_parser.add_argument("username")
    create_parser.add_argument("password")
    password_parser = subparsers.add_parser("set-password", help="Change a user's password")
    password_parser.add_argument("username")
    password_parser.add_argument("password")
    delete_parser = subparsers.add_parser("delete-user", help="Delete a user")
    delete_parser.add_argument("username")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        ctx = get_context(args.db)
        return HANDLERS[args.command](ctx.account_service, args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except StoreError as e:
        logger.error(f"Storage error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
