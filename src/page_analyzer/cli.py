"""
Command-line interface for the page analyzer.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from page_analyzer.core import analyze
from page_analyzer.errors import AnalysisError
from page_analyzer.models import CrawlResult


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def utc_now_iso() -> str:
    """Return current UTC time in ISO format."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def print_summary(url: str, result: CrawlResult) -> None:
    """Print analysis summary to stderr."""
    sys.stderr.write("=" * 50 + "\n")
    sys.stderr.write("PAGE ANALYSIS\n")
    sys.stderr.write("=" * 50 + "\n\n")

    sys.stderr.write(f"URL:             {url}\n")
    sys.stderr.write(f"HTML version:    {result.html_version.value}\n")
    sys.stderr.write(f"Title:           {result.title or '(none)'}\n")
    headings = " ".join(
        f"h{level}={count}" for level, count in enumerate(result.heading_counts.as_tuple(), start=1)
    )
    sys.stderr.write(f"Headings:        {headings}\n")
    sys.stderr.write(f"Login form:      {'yes' if result.has_login_form else 'no'}\n")
    sys.stderr.write(f"Internal links:  {result.internal_link_count}\n")
    sys.stderr.write(f"External links:  {result.external_link_count}\n\n")

    if result.broken_links:
        sys.stderr.write(f"Broken links ({result.broken_link_count}):\n")
        for record in sorted(result.broken_links, key=lambda b: b.link):
            label = "ERR" if record.status == 0 else str(record.status)
            sys.stderr.write(f"  {label} {record.link}\n")
    else:
        sys.stderr.write("No broken links.\n")

    sys.stderr.write("\n")


def generate_output_path(url: str) -> Path:
    """Generate output path: analyses/{hostname}_{datetime}.json"""
    hostname = urlparse(url).hostname or "unknown"
    hostname_safe = hostname.replace(".", "_")
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    out_dir = Path("analyses")
    out_dir.mkdir(exist_ok=True)

    return out_dir / f"{hostname_safe}_{timestamp}.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze one web page: HTML version, headings, login form and broken links."
    )
    parser.add_argument("url", help="Page URL (e.g. https://example.com)")
    parser.add_argument("--out", help="Output file path, or '-' for stdout (default: auto-generated in analyses/)")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--verbose", action="store_true", help="Show progress and summary")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the analyzer CLI."""
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    analyzed_at = utc_now_iso()
    try:
        result = analyze(args.url)
    except AnalysisError as e:
        sys.stderr.write(f"ERROR {e.stage}: {e}\n")
        return 1

    if args.verbose:
        print_summary(args.url, result)

    payload = {"url": args.url, "analyzed_at": analyzed_at, **result.to_dict()}
    json_text = json.dumps(payload, ensure_ascii=False, indent=2 if args.pretty else None)

    if args.out == "-":
        print(json_text)
    else:
        output_path = Path(args.out) if args.out else generate_output_path(args.url)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_text, encoding="utf-8")
        if args.verbose:
            sys.stderr.write(f"Results written to: {output_path}\n")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
