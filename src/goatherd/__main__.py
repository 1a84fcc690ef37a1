from goatherd.cli.main import cli

cli()
