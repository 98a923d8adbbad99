"""Module entrypoint for ``python -m aocsolver``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and input resolution happen in ``aocsolver.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
