"""
Command-line entry point: parses a test-case text file and exports the structured result.

Usage:
    python main.py generated_cases.md --format json
"""
import argparse
import sys

from dotenv import load_dotenv

load_dotenv()

from config import EXPORT_FORMATS  # noqa: E402
from pipeline.runner import initialize_pipeline, run_pipeline  # noqa: E402
from utils.exceptions import PipelineError  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Parse markdown test cases and export them.")
    parser.add_argument("file", help="Text or markdown file with test cases, or an earlier JSON export")
    parser.add_argument("--merge", action="append", default=[], metavar="JSON",
                        help="Earlier JSON export to merge; duplicates are removed (repeatable)")
    parser.add_argument("--format", choices=EXPORT_FORMATS, default=None,
                        help="Export format (default: EXPORT_FORMAT setting)")
    parser.add_argument("--output-dir", default=None,
                        help="Directory for exported files (default: EXPORT_DIR setting)")
    args = parser.parse_args(argv)

    try:
        ctx = initialize_pipeline(args.file, args.merge)
        ctx["export_format"] = args.format
        ctx["export_dir"] = args.output_dir
        run_pipeline(ctx)
    except PipelineError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if ctx["duplicates_removed"]:
        print(f"🧹 {ctx['duplicates_removed']} duplicate(s) removed")
    print(f"📄 {len(ctx['testcases'])} test case(s) written to {ctx['export_file']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
