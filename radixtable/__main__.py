# radixtable/__main__.py
from radixtable.cli import cli

if __name__ == "__main__":
    cli(prog_name="radixtable")
