"""Link Typer app factory."""

import typer

from docpage.api.link.cmd_rewrite import cmd_rewrite
from docpage.api.link.cmd_show import cmd_show
from docpage.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Rewrite local source links into hosted links",
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

    @app.command(name="rewrite")
    def rewrite_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="HTML file containing source links"),
        base_dir: str = typer.Option("", "--base-dir", "-b", help="Source directory (default: source.base_dir)"),
        revision: str = typer.Option("", "--revision", "-r", help="Revision id (default: ask version control)"),
        template: str = typer.Option("", "--template", "-t", help="Hosted link template"),
        output: str = typer.Option("", "--output", "-o", help="Write here instead of rewriting in place"),
    ) -> None:
        """Rewrite source links of an HTML file."""
        _handle_stage_result(cmd_rewrite)(
            ctx, path=path, base_dir=base_dir, revision=revision, template=template, output=output
        )

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="HTML file containing source links"),
        base_dir: str = typer.Option("", "--base-dir", "-b", help="Source directory (default: source.base_dir)"),
    ) -> None:
        """List source links with their computed line numbers."""
        _handle_stage_result(cmd_show)(ctx, path=path, base_dir=base_dir)

    return app
