"""
cli - Maintenance commands exposed through ``flask --app main <command>``.
"""

from __future__ import annotations

from pathlib import Path

import click
from flask import Flask

from db import get_session, Role
from import_engine import run_import
from services.auth_service import AuthService
from services.records_service import RecordsService
from services.kpi_service import compute_kpis


@click.command("create-user")
@click.argument("username")
@click.option("--role", type=click.Choice([r.value for r in Role]),
              default=Role.STAFF.value, show_default=True)
@click.password_option()
def create_user_command(username: str, role: str, password: str):
    """Add a sign-in account."""
    session = get_session()
    try:
        user = AuthService.create_user(session, username, password, Role(role))
        session.commit()
    except ValueError as exc:
        session.rollback()
        raise click.ClickException(str(exc))
    finally:
        session.close()
    click.echo(f"Created {user.role.value} account {user.username} ({user.email})")


@click.command("import-tsv")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_tsv_command(path: Path):
    """Import a tab-separated file (header row first)."""
    click.echo(f"Importing from {path}")
    report = run_import(path.read_bytes())

    if report.duplicates:
        click.echo("Duplicate record detected. Import rejected.")
        for dup in report.duplicates[:10]:
            click.echo(f"  Row {dup['row']}: {dup['control_number']} / "
                       f"{dup['accession']} ({dup['against']})")
    for err in report.errors:
        click.echo(f"  Row {err['row']}: {err['reason']}")
    for warn in report.warnings[:10]:
        click.echo(f"  Row {warn['row']}: {warn['reason']}")

    click.echo(f"Done: {report.imported} imported / {report.total_rows} rows")
    if not report.ok:
        raise SystemExit(1)


@click.command("stats")
def stats_command():
    """Print the dashboard counters."""
    session = get_session()
    try:
        kpis = compute_kpis(RecordsService.list_all(session))
    finally:
        session.close()
    click.echo(f"Total Records: {kpis.total}")
    click.echo(f"Complete:      {kpis.complete}")
    click.echo(f"Incomplete:    {kpis.incomplete}")
    click.echo(f"Staff Active:  {kpis.staff_active}")


def register_commands(app: Flask) -> None:
    app.cli.add_command(create_user_command)
    app.cli.add_command(import_tsv_command)
    app.cli.add_command(stats_command)
