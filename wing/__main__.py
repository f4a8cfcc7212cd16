"""Module entrypoint for ``python -m wing``."""

from .cli import main


if __name__ == "__main__":
    main()
