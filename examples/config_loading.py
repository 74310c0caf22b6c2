"""config_loading.py"""
import sys

from slashargs.config import load_schema
from slashargs.parser import CommandLineParser, render_usage

schema = load_schema("headshots.yaml")

if __name__ == "__main__":
    result = CommandLineParser(schema).parse(sys.argv[1:] or ["@headshots.rsp"])
    if not result:
        render_usage(schema)
        sys.exit(1)
    print(result.values)
