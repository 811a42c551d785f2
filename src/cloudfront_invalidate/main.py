from cloudfront_invalidate import invalidate, config
import typer

app = typer.Typer(no_args_is_help=True)
app.add_typer(invalidate.app, name="invalidate")
app.add_typer(config.app, name="config")
