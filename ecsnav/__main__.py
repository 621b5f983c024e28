"""Allow running ecsnav with ``python -m ecsnav``."""

from ecsnav.cli import main

if __name__ == "__main__":
    main()
