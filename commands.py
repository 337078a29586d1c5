import click
from flask import current_app
from flask.cli import with_appcontext

from models.office import Office


@click.command("seed-directory")
@click.option("--employee", "employees", multiple=True, help="Employee name (repeatable).")
@click.option("--office", "offices", multiple=True, help='Office as "name:lat:lng" (repeatable).')
@with_appcontext
def seed_directory(employees, offices):
    """Insert employees and offices read by the dashboard."""
    try:
        parsed_offices = [Office.parse(spec) for spec in offices]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--office")

    service = current_app.extensions["directory_service"]
    added_employees = service.add_employees(employees)
    added_offices = service.add_offices(parsed_offices)
    click.echo(f"OK: added {added_employees} employee(s) and {added_offices} office(s)")


@click.command("prune-uploads")
@click.option("--days", type=int, default=None, help="Override SELFIE_RETENTION_DAYS.")
@with_appcontext
def prune_uploads(days):
    """Delete stored selfies older than the retention period."""
    days = current_app.config["SELFIE_RETENTION_DAYS"] if days is None else days
    if days <= 0:
        click.echo("Retention disabled (days <= 0); nothing pruned")
        return

    removed = current_app.extensions["selfie_store"].prune(days)
    click.echo(f"OK: removed {len(removed)} selfie(s) older than {days} day(s)")


def register_commands(app):
    app.cli.add_command(seed_directory)
    app.cli.add_command(prune_uploads)
