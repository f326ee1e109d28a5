"""Entry point for the samesize command and ``python -m samesize``."""

from .cli.app import app
from .common.constants import PROGRAM_NAME


def main() -> None:
    """Run the scan; exits with the status chosen by the command."""
    app(prog_name=PROGRAM_NAME)


if __name__ == "__main__":
    main()
