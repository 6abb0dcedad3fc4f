import argparse
import sys
import traceback
from typing import List, Optional

from artifact_generators.formula_gen import FormulaGenerator
from configuration import Configuration as Config
from errors import FormulaGenError, InvalidVersion, UsageError
from loggers.formula_gen_logger import disable_file_logging, enable_file_logging
from loggers.formula_gen_logger import formula_gen_logger as logger


class FormulaArgumentParser(argparse.ArgumentParser):
    """Report bad command lines as errors instead of exiting with status 2."""

    def error(self, message: str):
        if "--version" in message:
            raise InvalidVersion(f"Version must be specified (e.g. v1.4.45): {message}")
        raise UsageError(f"{message} (see --help)")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = FormulaArgumentParser(
        prog="generate-formula",
        description="Fetch release asset SHA256 hashes and render the Homebrew formula.",
    )
    ap.add_argument("-v", "--version", dest="version",
                    help="Release tag to package (e.g., v1.4.45)")
    ap.add_argument("-d", "--dry-run", action="store_true",
                    help="Show what would be generated without writing files")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    generator = None
    try:
        args = parse_args(argv)
        if not args.dry_run:
            enable_file_logging()
        generator = FormulaGenerator(token=Config.github_token)
        generator.generate(args.version, dry_run=args.dry_run)
    except Exception as e:
        if not isinstance(e, FormulaGenError):
            logger.error(f"Unexpected error: {e!r}")
        print(f"Error: {e}")
        if Config.debug:
            traceback.print_exc(file=sys.stdout)
        return 1
    finally:
        if generator is not None:
            generator.close()
        disable_file_logging()

    print("\nFormula generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
