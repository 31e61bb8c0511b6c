"""Module wrapper so running ``python -m manifestomatic.cli`` matches the console script."""

from manifestomatic.cli import main  # Re-exported Click command-group


if __name__ == "__main__":  # pragma: no cover
    main()
