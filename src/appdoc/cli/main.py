#!/usr/bin/env python3
"""Application document generator command line tool."""

import click

from appdoc import __version__, config
from appdoc.builder import list_state_builders
from appdoc.error import AppdocException, ApplicationNotFoundError, UnsupportedStateError
from appdoc.generator import ApplicationDocumentGenerator
from appdoc.store import ApplicationStore


@click.group()
@click.version_option(version=__version__)
def cli():
    """Application document generator."""
    pass


@cli.command()
@click.argument("application_id")
@click.option("--store", "store_file", required=True, type=click.Path(exists=True, dir_okay=False),
              help="JSON file holding the application records.")
@click.option("--base-uri", default=None, help="Template location prefix. Defaults to the bundled templates.")
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False),
              help="Output file. Defaults to <reference number>.pdf (or .html).")
@click.option("--html", "html_only", is_flag=True, help="Write the rendered markup instead of the PDF.")
def generate(application_id, store_file, base_uri, output, html_only):
    """Generate the lifecycle document of APPLICATION_ID."""
    base_uri = base_uri or config.TEMPLATE_DIR

    try:
        store = ApplicationStore.get_store(config.DEFAULT_STORE, filepath=store_file)
        generator = ApplicationDocumentGenerator(store)
        application = generator.resolve(application_id)
        if application is None:
            raise ApplicationNotFoundError(f"No application found for id '{application_id}'")

        if html_only:
            content = generator.render_application(application, base_uri)
            content = content.encode("utf-8") if content is not None else None
        else:
            content = generator.generate_application(application, base_uri)

        if content is None:
            raise UnsupportedStateError(
                f"No document can be generated for application '{application_id}' "
                f"in state '{application.state}'."
            )
    except AppdocException as e:
        raise click.ClickException(str(e)) from e

    output = output or f"{application.reference_number}.{'html' if html_only else 'pdf'}"
    with open(output, "wb") as f:
        f.write(content)

    click.echo(f"Written {len(content)} bytes to {output}")


@cli.command()
def states():
    """List the supported application states and their templates."""
    for state, template_key in list_state_builders().items():
        click.echo(f"{state.value:<12} {template_key}")


if __name__ == "__main__":
    cli()
