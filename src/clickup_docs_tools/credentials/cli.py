from __future__ import annotations

import argparse

from .base import CredentialError, CredentialManager


def _split_csv(value: str) -> list[str]:
    return [x.strip() for x in value.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="clickup-docs-credentials",
        description="Check the ClickUp API token used by ClickUp Docs Tools.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    check = sub.add_parser("check", help="Check for a missing token.")
    check.add_argument(
        "--tools",
        default="",
        help="Comma-separated tool names (default: every ClickUp Docs tool).",
    )

    args = parser.parse_args(argv)
    creds = CredentialManager()

    if args.cmd != "check":
        return 2

    tool_names = _split_csv(args.tools) or creds.spec.tools

    try:
        creds.validate_for_tools(tool_names)
    except CredentialError as e:
        print(f"✗ Missing required credentials:\n\n{e}")
        return 1

    print("✓ All required credentials are present.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
