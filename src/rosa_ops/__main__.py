from rosa_ops.cli import cli

cli()
