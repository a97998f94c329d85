"""Module entrypoint for ``python -m treeglide``."""

from .cli import main


if __name__ == "__main__":
    main()
