"""Module entrypoint for ``python -m dirsize``.

All argument parsing and listing setup happen in ``dirsize.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
