"""console script entrypoint for the rbs-collection CLI."""

from .cli import main as cli_main


def main() -> int:
    """Console entrypoint used by the ``rbs-collection`` script."""
    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
