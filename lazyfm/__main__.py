"""Module entrypoint for ``python -m lazyfm``.

All argument parsing and runtime setup happen in ``lazyfm.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
