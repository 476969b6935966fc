"""
Command-line interface for the menu options engine.

This module provides CLI functionality for running the API server or for
inspecting catalogs and quoting configured products from the configured
data source.
"""

import argparse
import json
import sys
from typing import List, Optional, Tuple
from dotenv import load_dotenv

from utils.logging import setup_logger, set_log_level
from config.config import config
from core.errors import NotFoundError, OptionsEngineError
from core.selection import CAP_POLICY_IGNORE, CAP_POLICY_REJECT
from core.session import SelectionSession
from data.factory import get_data_loader

# Load environment variables from .env file
load_dotenv()

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_REFUSED = 2


def parse_pick(value: str) -> Tuple[str, str]:
    """
    Parse a GROUP:OPTION argument.

    Raises:
        argparse.ArgumentTypeError: If the value has no colon or an empty part.
    """
    group_id, sep, option_id = value.partition(":")
    if not sep or not group_id or not option_id:
        raise argparse.ArgumentTypeError(f"expected GROUP:OPTION, got '{value}'")
    return group_id, option_id


def _write_output(result, output_file: Optional[str]) -> None:
    if output_file:
        with open(output_file, "w") as f:
            json.dump(result, f, indent=2, default=str)
        logger.info(f"Results saved to {output_file}")


def show_catalog(product_id: str, output_file: Optional[str] = None) -> int:
    """
    Print the option catalog of a product.

    Args:
        product_id: Product to show
        output_file: Optional output file path to save the catalog in JSON format

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    loader = get_data_loader()
    try:
        product = loader.get_product(product_id)
        catalog = loader.load_catalog(product_id)
    except OptionsEngineError as e:
        logger.error(f"Could not load product '{product_id}': {e}")
        return EXIT_ERROR

    logger.info(f"{product.name} - {product.price}")
    for group in catalog:
        mode = "exclusive" if group.is_exclusive else f"max {group.max_selections or 'unlimited'}"
        flags = ", required" if group.required else ""
        logger.info(f"  [{group.id}] {group.name} (min {group.min_selections}, {mode}{flags})")
        for option in group.options:
            status = "" if option.available else " [unavailable]"
            logger.info(f"      {option.id}: {option.name} +{option.additional_price}{status}")

    _write_output(catalog.to_dict(), output_file)
    return EXIT_OK


def quote(
    product_id: str,
    picks: List[Tuple[str, str]],
    quantity: int = 1,
    observations: str = "",
    cap_policy: Optional[str] = None,
    output_file: Optional[str] = None,
) -> int:
    """
    Select options for a product and price the resulting line item.

    Args:
        product_id: Product to configure
        picks: (group_id, option_id) pairs, selected in order
        quantity: Number of units
        observations: Free-text notes
        cap_policy: "ignore" or "reject"; defaults to the configured policy
        output_file: Optional output file path to save results in JSON format

    Returns:
        int: Exit code (0 for success, 1 for errors, 2 when the selection is refused)
    """
    loader = get_data_loader()
    cap_policy = cap_policy or config.get_selection_config()["cap_policy"]

    try:
        session = SelectionSession(
            loader.get_product(product_id),
            loader.load_catalog(product_id),
            cap_policy=cap_policy,
        )
        for group_id, option_id in picks:
            session.select(group_id, option_id)
        result = session.commit(quantity=quantity, observations=observations)
    except NotFoundError as e:
        logger.error(f"Unknown id: {e}")
        return EXIT_ERROR
    except OptionsEngineError as e:
        logger.error(f"Selection failed: {e}")
        return EXIT_ERROR
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_ERROR

    if not result.success:
        for message in result.messages:
            logger.warning(f"Violation: {message}")
        _write_output(result.to_dict(), output_file)
        return EXIT_REFUSED

    item = result.line_item
    logger.info(f"{item.quantity}x {item.description} @ {item.unit_price} = {result.total_price}")
    _write_output(result.to_dict(), output_file)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the application.

    Parses command-line arguments and runs the appropriate action.

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(description="Menu Options Engine")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--local", action="store_true", help="Use the local CSV data regardless of config"
    )

    mode_parser = parser.add_subparsers(dest="mode", help="Operation mode")

    api_config = config.get_api_config()
    server_parser = mode_parser.add_parser("serve", help="Run as API server")
    server_parser.add_argument(
        "--host", default=api_config["host"], help="Host to bind to"
    )
    server_parser.add_argument(
        "--port", type=int, default=api_config["port"], help="Port to bind to"
    )

    catalog_parser = mode_parser.add_parser("catalog", help="Show a product's options")
    catalog_parser.add_argument("--product-id", "-p", required=True, help="Product ID")
    catalog_parser.add_argument("--output", "-o", help="Output file for the catalog (JSON)")

    quote_parser = mode_parser.add_parser("quote", help="Price a configured product")
    quote_parser.add_argument("--product-id", "-p", required=True, help="Product ID")
    quote_parser.add_argument(
        "--select",
        "-s",
        dest="picks",
        type=parse_pick,
        action="append",
        default=[],
        metavar="GROUP:OPTION",
        help="Option to select; repeat for several options",
    )
    quote_parser.add_argument("--quantity", "-q", type=int, default=1, help="Number of units")
    quote_parser.add_argument("--observations", default="", help="Notes for the kitchen")
    quote_parser.add_argument(
        "--cap-policy",
        choices=[CAP_POLICY_IGNORE, CAP_POLICY_REJECT],
        help="What to do with picks past a group's maximum",
    )
    quote_parser.add_argument("--output", "-o", help="Output file for results (JSON)")

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")
    if args.local:
        config.set("data_source.use_local", True)

    if args.mode == "serve":
        from app import start_server

        try:
            start_server(args.host, args.port)
            return EXIT_OK
        except KeyboardInterrupt:
            logger.info("Server stopped")
            return EXIT_OK
        except Exception as e:
            logger.error(f"Server error: {e}", exc_info=True)
            return EXIT_ERROR

    elif args.mode == "catalog":
        return show_catalog(product_id=args.product_id, output_file=args.output)

    elif args.mode == "quote":
        return quote(
            product_id=args.product_id,
            picks=args.picks,
            quantity=args.quantity,
            observations=args.observations,
            cap_policy=args.cap_policy,
            output_file=args.output,
        )

    parser.print_help()
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
