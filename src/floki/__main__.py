"""Entry point for ``python -m floki``."""

from floki.cli.main import main


if __name__ == "__main__":
    main()
