from cpfgen.cli import cli

cli()
