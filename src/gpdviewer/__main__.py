"""Command-line interface."""
from gpdviewer.main import main

if __name__ == "__main__":
    main()
