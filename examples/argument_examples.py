import sys
from dataclasses import dataclass
from enum import Enum

from slashargs import argument, command_line_usage, parse_command_line
from slashargs.console import console
from slashargs.utils import setup_logging

setup_logging()


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"


@dataclass
class DeployOptions:
    service: str = argument(flags="required", help="Service to deploy", default="")
    place: Place = argument(help="Where to deploy", default=Place.NEW_YORK)
    region: str = "us-east-1"
    verbose: bool = argument(short_name="V", default=False)
    retries: int = argument("uint", default=3)
    tags: list[str] = argument(help="Tags to attach", default_factory=list)
    paths: list[str] = argument(is_default=True, help="Files to upload", default_factory=list)


if __name__ == "__main__":
    options = DeployOptions()
    if not parse_command_line(sys.argv[1:], options):
        console.print(command_line_usage(DeployOptions), markup=False)
        sys.exit(1)
    if options.verbose:
        console.print(options)
    console.print(
        f"Deploying {options.service} to {options.region} at {options.place.value} "
        f"with {len(options.paths)} files..."
    )
