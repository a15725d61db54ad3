"""
Main entry point for the nuage_session package.

Allows running the CLI as: python -m nuage_session
"""

from nuage_session.cli import main

if __name__ == "__main__":
    main()
