"""Module entrypoint for ``python -m shotpick``."""

from .cli import main


if __name__ == "__main__":
    main()
