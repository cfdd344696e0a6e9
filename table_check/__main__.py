from table_check.cli import cli

cli(prog_name="table-check")
