"""
Main entry point for running as module: python -m hyperglossary
"""
from hyperglossary.cli.cli_interface import cli

if __name__ == '__main__':
    cli()
