"""Run the helloharness command line with ``python -m helloharness``."""

from helloharness.cli import cli

cli(prog_name="helloharness")
