"""
Module entry-point that makes the package runnable with

    python -m manifestomatic
    python -m manifestomatic.cli

The behaviour is identical to the *manifestomatic-cli* console script because
the Click **group** object imported below performs all CLI dispatching.
"""

from manifestomatic.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
