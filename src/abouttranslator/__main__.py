"""Allow running as python -m abouttranslator."""

from abouttranslator.cli import app


def main() -> None:
    app(prog_name="abouttranslator")


main()
