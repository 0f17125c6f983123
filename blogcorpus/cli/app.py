"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_command, show_command
from .init import init_command
from .lint import lint_command
from .redirects import redirects_command

app = typer.Typer(
    name="blogcorpus",
    help="Blog corpus tools - front matter linting, listings and redirects",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("lint")(lint_command)
app.command("articles")(articles_command)
app.command("show")(show_command)
app.command("redirects")(redirects_command)


if __name__ == "__main__":
    app()
