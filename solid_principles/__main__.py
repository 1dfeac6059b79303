from solid_principles.cli import cli

cli(prog_name="solid-demo")
