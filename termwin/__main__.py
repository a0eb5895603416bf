"""Module entrypoint for ``python -m termwin``.

All argument parsing and session setup happen in ``termwin.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
