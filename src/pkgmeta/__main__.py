from pkgmeta.cli import cli

cli()
