from tierctl.cli import cli

cli()
