"""Allow ``python -m dent``."""

from dent.cli.main import main

if __name__ == "__main__":
    main()
