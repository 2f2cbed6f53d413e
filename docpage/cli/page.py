"""Page Typer app factory."""

import typer

from docpage.api.page.cmd_build import cmd_build
from docpage.cli._handle_stage_result import _handle_stage_result


def page() -> typer.Typer:
    """Create and configure the page Typer app."""
    app = typer.Typer(
        name="page",
        help="Build the static API page",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="build")
    def build_cmd(
        ctx: typer.Context,
        output: str = typer.Option("", "--output", "-o", help="Page path (default: page.output)"),
        skip_fetch: bool = typer.Option(False, "--skip-fetch", help="Do not fetch the package first"),
        revision: str = typer.Option("", "--revision", "-r", help="Revision id (default: ask version control)"),
        rewrite_links: bool = typer.Option(True, "--rewrite/--no-rewrite", help="Rewrite source links"),
    ) -> None:
        """Fetch, generate, rewrite source links and write the page."""
        _handle_stage_result(cmd_build)(
            ctx, output=output, skip_fetch=skip_fetch, revision=revision, rewrite_links=rewrite_links
        )

    return app
