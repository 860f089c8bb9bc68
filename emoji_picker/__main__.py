"""Main entry point for running the picker as a module.

This allows running with: python -m emoji_picker
"""

from .app import main_cli_runner

if __name__ == "__main__":
    main_cli_runner()
