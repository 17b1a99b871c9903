"Command line interface for importing a backup file into the database server."

import logging

import click

import dbimport
import dbimport.config
import dbimport.upload

from dbimport import constants

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=dbimport.__version__)
@click.pass_context
def cli(ctx):
    "Command line interface for operations on a running database server."
    try:
        ctx.obj = dbimport.config.get_settings()
    except ValueError as error:
        raise click.ClickException(str(error))
    logging.basicConfig(
        level=ctx.obj["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )


@cli.command("import")
@click.argument("filepaths", nargs=-1)
@click.option(
    "--auth",
    default=None,
    help=f"Master authentication details to use when connecting."
    f"  [default: {constants.DEFAULT_AUTH}]",
)
@click.option(
    "--host",
    default=None,
    help=f"Database server host to connect to.  [default: {constants.DEFAULT_HOST}]",
)
@click.option(
    "--port",
    default=None,
    help=f"Database server port to connect to.  [default: {constants.DEFAULT_PORT}]",
)
@click.pass_obj
def import_(settings, filepaths, auth, host, port):
    """Import data into an existing database.

    Example: dbimport import --auth root:root backup.db
    """
    params = dbimport.config.get_params(settings, auth=auth, host=host, port=port)
    outcome = dbimport.upload.import_file(filepaths, params)
    if not outcome.ok:
        logger.debug(f"Import outcome: {outcome.status}")
        raise click.ClickException(outcome.message)
    click.echo(outcome.message)


if __name__ == "__main__":
    cli()
