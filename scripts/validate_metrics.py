"""Quick validation script for a dashboard metrics document.

Run with `python scripts/validate_metrics.py [path-or-url]` to see which
fields would fall back to defaults and whether any present data is
inconsistent. Exits non-zero when the document is unusable or inconsistent.
"""

from __future__ import annotations

import sys

from impact_dashboard.config import load_settings
from impact_dashboard.data.loader import load_document
from impact_dashboard.data.quality_checks import build_quality_overview
from impact_dashboard.data.resolver import resolve
from impact_dashboard.logging_setup import configure_logging


def main(argv: list[str]) -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    source = argv[1] if len(argv) > 1 else settings.data_source

    document = load_document(source, timeout=settings.request_timeout)
    overview = build_quality_overview(resolve(document))

    print(f"Source: {source}")
    print(f"Loaded: {overview['source_loaded']}")
    print(f"Defaulted fields: {overview['defaulted_count']} {overview['defaulted_by_section']}")
    print(f"Peer areas: {overview['peer_count']} (dropped {overview['dropped_peers']})")

    problems = (
        overview["length_mismatches"]
        + overview["non_numeric_values"]
        + overview["out_of_range_scores"]
    )
    for problem in problems:
        print(f"  - {problem}")

    if not overview["source_loaded"] or problems:
        return 1
    print("Metrics validation passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
