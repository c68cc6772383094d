from userscriptify.cli.main import cli

__all__ = ["cli"]
