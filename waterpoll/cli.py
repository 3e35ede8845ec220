import click

from .extensions import db
from .services.tally import get_tally, tally_results


def register_cli(app):
    @app.cli.command("create-db")
    def create_db():
        """Create the votes table (use `flask db upgrade` once migrations exist)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("tally")
    def show_tally():
        """Print the current vote counts."""
        results = tally_results(get_tally())
        click.echo(
            f"yes: {results['yes']} ({results['yes_percentage']}%)  "
            f"no: {results['no']} ({results['no_percentage']}%)  "
            f"total: {results['total']}"
        )
