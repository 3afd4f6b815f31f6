"""CLI entry point for jsonrest.

Runs the same command as the installed ``jsonrest`` script, so the tool can be
used straight from a checkout: ``python main.py get users -u api.example.com``.
"""

from dotenv import load_dotenv

from jsonrest.cli.main import app

# Load environment variables from .env file (force reload)
load_dotenv(override=True)


if __name__ == "__main__":
    app()
