from page_harvester.cli import cli

cli(prog_name="page-harvester")
