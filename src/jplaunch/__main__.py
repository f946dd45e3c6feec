# src/jplaunch/__main__.py

from jplaunch.cli.main import cli

if __name__ == "__main__":
    cli()
