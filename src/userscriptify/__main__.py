from userscriptify.cli.main import cli

cli()
