"""Module entrypoint for ``python -m kilo``.

All argument parsing and runtime setup happen in ``kilo.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
