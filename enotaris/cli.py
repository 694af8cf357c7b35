"""
enotaris command-line tool.

Usage:
    enotaris login --office OFFICE_ID --email EMAIL [--password PASSWORD]
    enotaris whoami
    enotaris cases [--status STATUS] [--category notaris|ppat] [--limit N]
    enotaris timeline CASE_ID
    enotaris tasks [--status STATUS]
    enotaris tax NILAI_TRANSAKSI [--npoptkp NPOPTKP]
    enotaris logout
"""

import argparse
import asyncio
import getpass
import sys
from typing import Optional, Sequence

from enotaris.client.cases import get_cases
from enotaris.client.http import ApiClient
from enotaris.client.tasks import get_tasks_list
from enotaris.core.config import settings
from enotaris.core.errors import AppError
from enotaris.features.session.service import AuthSession
from enotaris.features.session.store import SessionStore
from enotaris.features.tax.calculator import (
    NPOPTKP_DEFAULT,
    estimate_taxes,
    format_number_for_input,
    format_rupiah,
    parse_numeric_input,
)
from enotaris.features.timeline.service import timeline_service
from enotaris.features.views.helpers import is_task_overdue
from enotaris.features.views.labels import CASE_STATUS_LABELS, TASK_STATUS_LABELS, label_for


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="enotaris", description="enotaris case management client")
    parser.add_argument("--api-url", default=None, help=f"Backend URL (default: {settings.api_base_url})")
    parser.add_argument("--session-file", default=None, help=f"Session cache (default: {settings.SESSION_FILE})")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and cache the session")
    login.add_argument("--office", required=True, help="Office ID")
    login.add_argument("--email", required=True)
    login.add_argument("--password", help="Prompted when omitted")

    sub.add_parser("logout", help="Revoke the token and clear the cached session")
    sub.add_parser("whoami", help="Show the cached user")

    cases = sub.add_parser("cases", help="List cases")
    cases.add_argument("--status", choices=sorted(CASE_STATUS_LABELS))
    cases.add_argument("--category", choices=["notaris", "ppat"])
    cases.add_argument("--limit", type=int, default=settings.LIST_PAGE_SIZE_DEFAULT)

    timeline = sub.add_parser("timeline", help="Show a case's activity timeline")
    timeline.add_argument("case_id")

    tasks = sub.add_parser("tasks", help="List tasks; overdue rows are marked with !")
    tasks.add_argument("--status", choices=sorted(TASK_STATUS_LABELS))

    tax = sub.add_parser("tax", help="Estimate BPHTB, PPh final and PBB for a transaction value")
    tax.add_argument("nilai", help="Transaction value / NJOP in Rupiah, e.g. 500.000.000 or 500.000.000,50")
    tax.add_argument(
        "--npoptkp",
        default=format_number_for_input(NPOPTKP_DEFAULT),
        help="Non-taxable threshold; varies by region (default: %(default)s)",
    )
    return parser


async def _run(args: argparse.Namespace) -> int:
    async with ApiClient(args.api_url) as api:
        session = AuthSession(api, SessionStore(args.session_file))

        if args.command == "login":
            password = args.password or getpass.getpass("Password: ")
            stored = await session.login(args.office, args.email, password)
            print(f"Logged in as {stored.user.display_name} (session until {stored.expires_at})")
            return 0

        if args.command == "logout":
            await session.logout()
            print("Logged out")
            return 0

        if args.command == "whoami":
            user = session.user
            if user is None:
                print("Not logged in")
                return 1
            print(f"{user.display_name} <{user.email}> role={user.role_name or '-'} office={user.office_id}")
            return 0

        token = session.require_token()

        if args.command == "cases":
            result = await get_cases(api, token, limit=args.limit, status=args.status, category=args.category)
            for c in result.data:
                print(f"{c.id}  {label_for(CASE_STATUS_LABELS, c.status):<12}  {c.title}")
            print(f"({len(result.data)} of {result.total})")
            return 0

        if args.command == "timeline":
            result = await timeline_service.load_case_timeline(api, token, args.case_id)
            for event in result.events:
                actor = f"  [{event.actor}]" if event.actor else ""
                print(f"{event.at.astimezone():%Y-%m-%d %H:%M}  {event.label}{actor}")
            return 0

        if args.command == "tasks":
            result = await get_tasks_list(api, token, status=args.status)
            for t in result.data:
                mark = "!" if is_task_overdue(t.due_date, t.status) else " "
                print(f"{mark} {t.due_date or '-':<10}  {label_for(TASK_STATUS_LABELS, t.status):<10}  {t.nama_task}")
            return 0

    return 2


def _tax(args: argparse.Namespace) -> int:
    nilai = parse_numeric_input(args.nilai)
    if nilai <= 0:
        print("Error: nilai transaksi harus lebih dari 0", file=sys.stderr)
        return 1
    estimate = estimate_taxes(nilai, parse_numeric_input(args.npoptkp))
    rows = [
        ("BPHTB (5%)", estimate.bphtb),
        ("PPh Final (2,5%)", estimate.pph_final),
        ("Total BPHTB + PPh", estimate.total),
        ("Estimasi PBB tahunan", estimate.pbb_tahunan),
    ]
    for label, amount in rows:
        print(f"{label:<22}{format_rupiah(amount):>20}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "tax":
        return _tax(args)
    try:
        return asyncio.run(_run(args))
    except AppError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
