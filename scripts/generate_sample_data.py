#!/usr/bin/env python3
"""Generate a sample pain.001 credit transfer document.

The document is printed to stdout; logs go to stderr.
"""

import argparse
import sys
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sepa_writer.config import SepaConfig
from sepa_writer.exceptions import SepaError
from sepa_writer.generators import CreditTransferGenerator, IbanDataGenerator
from sepa_writer.logging import get_logger, setup_logging
from sepa_writer.transfers import CreditTransfer

logger = get_logger("generate_sample_data")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a sample SEPA credit transfer document")
    parser.add_argument(
        "--transactions",
        type=int,
        default=3,
        help="Number of transactions per batch (default: 3)",
    )
    parser.add_argument(
        "--batches",
        type=int,
        default=0,
        help="Number of payment batches, 0 for a single unbatched block (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED or none)",
    )
    parser.add_argument(
        "--international",
        action="store_true",
        help="Build an international credit transfer",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print the XML output",
    )
    return parser.parse_args(argv)


def build_document(config: SepaConfig, transactions: int, batches: int) -> CreditTransfer:
    """Build a credit transfer filled with generated data."""
    debtor = IbanDataGenerator(seed=config.seed).generate()
    transaction_gen = CreditTransferGenerator(seed=None if config.seed is None else config.seed + 1)

    document = CreditTransfer.from_config(
        config,
        message_id=f"MSG-{transaction_gen.fake.bothify('########')}",
        initiating_party_name=debtor.name,
    )
    document.debtor = debtor

    if batches == 0:
        for transaction in transaction_gen.generate_many(transactions, config.international):
            document.add_credit_transfer(transaction)
    else:
        for i in range(batches):
            execution_date = date.today() + timedelta(days=i + 1)
            document.add_payment(
                transaction_gen.generate_batch(transactions, execution_date, config.international)
            )

    logger.info(
        "Built message %s with %d transaction(s), control sum %s",
        document.message.message_id,
        document.number_of_transactions,
        document.control_sum,
    )
    return document


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = SepaConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    config.international = config.international or args.international
    config.pretty_print = config.pretty_print or args.pretty

    setup_logging(config.log_level, config.log_format)

    try:
        document = build_document(config, args.transactions, args.batches)
        sys.stdout.write(document.to_xml_string(pretty_print=config.pretty_print))
    except SepaError as e:
        logger.error("Could not build document: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
