"""ide-releases - resolve IDE release feeds into a build/test version matrix.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from args import parse_args
from cli_config import apply_overrides
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from releases.errors import ReleasesError
from releases.manifests import load_manifest
from releases.service import build_parameters, resolve_releases

logger = logging.getLogger(__name__)


def setup_logging(args):
    """Configure logging from the --loglevel and --logfile flags."""
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(getattr(args, "LOG_LEVEL", None))

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logging.getLogger().addHandler(file_handler)


def render(versions, output_format):
    """Render resolved identifiers as text (one per line) or a JSON array."""
    if output_format == "json":
        return json.dumps(versions, indent=2) + "\n"
    return "".join(f"{v}\n" for v in versions)


def write_output(text, path):
    """Write rendered output to ``path`` or stdout."""
    if not path:
        sys.stdout.write(text)
        return
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(text)
    except IOError as e:
        logger.error("IO error writing %s: %s, aborting", path, e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    setup_logging(args)
    apply_overrides(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        params = build_parameters(args.PRODUCT_TYPE, args.CHANNELS, args.SINCE, args.UNTIL)
    except ReleasesError as e:
        logger.error("Invalid resolution request: %s", e)
        return ExitCodes.INVALID_REQUEST.value

    outcome = resolve_releases(
        params,
        jetbrains_ides=load_manifest(Constants.PRODUCTS_RELEASES_JETBRAINS_IDES_URL),
        android_studio_releases=load_manifest(Constants.PRODUCTS_RELEASES_ANDROID_STUDIO_URL),
    )
    logger.info(
        "Resolved %d release line(s) for %s",
        len(outcome.versions),
        params.product_type.code,
    )

    write_output(render(outcome.versions, args.OUTPUT_FORMAT), args.OUTPUT)

    if not outcome.ok:
        return ExitCodes.FEED_ERROR.value
    return ExitCodes.SUCCESS.value


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
