"""Main entry point for launchgrid."""

from launchgrid.cli import main

if __name__ == "__main__":
    main()
