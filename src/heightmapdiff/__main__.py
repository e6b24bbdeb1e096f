from heightmapdiff.cli import cli

cli(prog_name="heightmap-diff")
