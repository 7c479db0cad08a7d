"""Command-line entry point: bill rentals or rental modifications from a dataset file"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from carshare_billing.config import settings
from carshare_billing.domain.exceptions import DomainException
from carshare_billing.services.billing import BillingService
from carshare_billing.infrastructure.storage.json_files import load_dataset, write_document
from carshare_billing.infrastructure.storage.schemas import (
    ModificationsDocument,
    RentalModificationOutput,
    RentalOutput,
    RentalsDocument,
)
from carshare_billing.infrastructure.observability.logging import setup_logging
from carshare_billing.infrastructure.observability.metrics import export_metrics

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per billing run"""
    parser = argparse.ArgumentParser(
        prog="carshare-billing",
        description="Compute car-sharing rental ledgers and modification deltas",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    parser.add_argument(
        "--metrics-file",
        default=settings.metrics_file,
        help="Write Prometheus metrics to this textfile after the run",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    rentals = subparsers.add_parser("rentals", help="Bill every rental of the dataset")
    rentals.add_argument(
        "--detailed",
        action="store_true",
        help="Include price, commission and options next to the actions",
    )

    modifications = subparsers.add_parser("modifications", help="Bill every rental modification of the dataset")

    for subparser in (rentals, modifications):
        subparser.add_argument("data", nargs="?", default=settings.data_file, help="Dataset JSON file")
        subparser.add_argument(
            "-o",
            "--output",
            default=settings.output_file,
            help="Output JSON file, '-' for stdout (default: %(default)s)",
        )

    return parser


def run(args: argparse.Namespace) -> None:
    """Load the dataset, bill it and write the output document"""
    dataset = load_dataset(Path(args.data))
    service = BillingService(dataset)

    if args.command == "rentals":
        document = RentalsDocument(
            rentals=[RentalOutput.from_domain(info, detailed=args.detailed) for info in service.bill_rentals()]
        )
    else:
        document = ModificationsDocument(
            rental_modifications=[RentalModificationOutput.from_domain(r) for r in service.bill_modifications()]
        )

    write_document(document, args.output)
    logger.info("Billing run completed", extra={"command": args.command, "output": str(args.output)})


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper())

    try:
        run(args)
    except DomainException as e:
        logger.error(f"Billing run failed: {e}", extra={"command": args.command})
        return 1
    finally:
        if args.metrics_file:
            export_metrics(Path(args.metrics_file))

    return 0


if __name__ == "__main__":
    sys.exit(main())
