"""Module entrypoint for ``python -m johnjeong``.

All argument parsing and runtime setup happen in ``johnjeong.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
