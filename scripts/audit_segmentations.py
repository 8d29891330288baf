#!/usr/bin/env python3
"""
CLI tool for auditing supplier segmentation configuration.

Loads a segmentation JSON snapshot and reports, per supplier, configuration
inconsistencies the discount resolver only tolerates:
    - more than one active segmentation flagged default
    - overlapping area brackets among a segmentation's active groups

Usage:
    python scripts/audit_segmentations.py --snapshot data/segmentations.json
    python scripts/audit_segmentations.py --snapshot data/segmentations.json --supplier 12
    python scripts/audit_segmentations.py --snapshot data/segmentations.json --format json

Exit codes:
    0 - configuration consistent
    1 - snapshot could not be loaded
    2 - inconsistencies found
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.application.config import configure_logging
from src.application.services.segmentation_validation_service import (
    SegmentationValidationService,
    SupplierAuditReport,
)
from src.domain.shared.exceptions import DomainException
from src.infrastructure.persistence.repositories import InMemorySegmentationRepository

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_INCONSISTENT = 2


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Audit supplier segmentations for overlapping brackets and multiple defaults",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Audit every supplier in the snapshot
  python scripts/audit_segmentations.py --snapshot data/segmentations.json

  # Audit one supplier
  python scripts/audit_segmentations.py --snapshot data/segmentations.json --supplier 12

  # Machine-readable output
  python scripts/audit_segmentations.py --snapshot data/segmentations.json --format json
        """,
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        required=True,
        help="Path to segmentation JSON snapshot",
    )
    parser.add_argument(
        "--supplier",
        type=int,
        default=None,
        help="Audit only this supplier id",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (default: text)",
    )
    return parser.parse_args(argv)


def format_reports(reports: list[SupplierAuditReport], output_format: str) -> str:
    """Render audit reports as text or JSON."""
    if output_format == "json":
        payload = [
            {
                "supplier_id": report.supplier_id,
                "consistent": report.is_consistent,
                "problems": report.problems(),
            }
            for report in reports
        ]
        return json.dumps(payload, indent=2, ensure_ascii=False)

    lines = []
    for report in reports:
        status = "OK" if report.is_consistent else "INCONSISTENT"
        lines.append(f"Supplier {report.supplier_id}: {status}")
        lines.extend(f"  - {problem}" for problem in report.problems())
    return "\n".join(lines)


async def main(argv=None) -> int:
    """Main execution function. Returns the process exit code."""
    args = parse_args(argv)
    configure_logging()

    try:
        repository = InMemorySegmentationRepository.from_json_file(args.snapshot)
    except FileNotFoundError:
        logger.error(f"Snapshot not found: {args.snapshot}")
        return EXIT_LOAD_FAILED
    except (ValueError, KeyError, DomainException) as e:
        logger.error(f"Failed to load snapshot {args.snapshot}: {e}")
        return EXIT_LOAD_FAILED

    service = SegmentationValidationService(repository)
    if args.supplier is not None:
        reports = [await service.audit_supplier(args.supplier)]
    else:
        reports = await service.audit_all()

    print(format_reports(reports, args.format))

    if any(not report.is_consistent for report in reports):
        logger.warning("Segmentation configuration has inconsistencies")
        return EXIT_INCONSISTENT

    logger.info("Segmentation configuration is consistent")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
