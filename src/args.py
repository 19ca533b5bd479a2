"""Argument parsing functionality for ide-releases."""

import argparse

from constants import Constants
from releases.models import Channel, PlatformType


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="ide-releases",
        description=(
            "Resolve IDE product releases into one version per release line"
        ),
        add_help=True,
    )

    parser.add_argument("-t", "--type",
                        dest="PRODUCT_TYPE",
                        help="Product type code, i.e: IC, IU, PY, AI",
                        action="store", type=str.upper,
                        choices=[t.code for t in PlatformType],
                        required=True)
    parser.add_argument("-c", "--channel",
                        dest="CHANNELS",
                        help="Release channel to include; repeat for several (default: release)",
                        action="append", type=str.lower,
                        choices=[c.value for c in Channel],
                        default=None)
    parser.add_argument("-s", "--since",
                        dest="SINCE",
                        help="Lowest version to include, i.e: 2023.1 or 231",
                        action="store", type=str,
                        required=True)
    parser.add_argument("-u", "--until",
                        dest="UNTIL",
                        help="Highest version to include; '*' matches any component, i.e: 2024.1.*",
                        action="store", type=str)

    parser.add_argument("--jetbrains-ides",
                        dest="JETBRAINS_IDES",
                        help="URL or path of the JetBrains IDEs releases feed",
                        action="store", type=str)
    parser.add_argument("--android-studio",
                        dest="ANDROID_STUDIO",
                        help="URL or path of the Android Studio releases feed",
                        action="store", type=str)
    parser.add_argument("--no-cache-redirector",
                        dest="NO_CACHE_REDIRECTOR",
                        help="Fetch feeds from their origin instead of the cache redirector",
                        action="store_true")
    parser.add_argument("--config",
                        dest="CONFIG",
                        help="Path to a YAML config file",
                        action="store", type=str)

    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text or json, default: text)",
                        action="store", type=str.lower,
                        choices=Constants.OUTPUT_FORMATS,
                        default="text")
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file",
                        action="store", type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store", type=str.upper,
                        choices=Constants.LOG_LEVELS,
                        default="WARNING")
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store", type=str)

    args = parser.parse_args(argv)
    if not args.CHANNELS:
        args.CHANNELS = list(Constants.DEFAULT_CHANNELS)
    return args
