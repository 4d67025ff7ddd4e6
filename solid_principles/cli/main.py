"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Wiring capability implementations into their holders
- Output formatting and error reporting
"""
import asyncio
import os
import sys
import argparse
from typing import Any, Callable, Dict, List, Optional

from solid_principles import __version__
from solid_principles.application.employee.handlers import TerminateEmployeeHandler
from solid_principles.application.greeting.service import GreetingService
from solid_principles.application.payment.store import Store
from solid_principles.cli.formatters import format_output
from solid_principles.config.defaults import ConfigurationManager, PaymentProviderType
from solid_principles.config.schemas.app_schema import AppConfig
from solid_principles.domain.core.exceptions import DomainException
from solid_principles.domain.employee.aggregate import Employee
from solid_principles.domain.payment.payment_actions import GooglePay, PaymentAction, PayPal
from solid_principles.domain.shapes.shape import Rectangle, Square
from solid_principles.domain.statistics.sales import SalesStatistics
from solid_principles.infrastructure.logging.logger import get_logger, setup_logging
from solid_principles.infrastructure.persistence.employee_repository import (
    InMemoryEmployeeRepository,
)
from solid_principles.infrastructure.registry.language_registry import get_language_registry

PAYMENT_PROVIDERS: Dict[str, Callable[[float], PaymentAction]] = {
    PaymentProviderType.PAYPAL.value: PayPal,
    PaymentProviderType.GOOGLEPAY.value: GooglePay,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "solid-principles",
        description="SOLID Principles - runnable design principle examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s greet --locale fr               # Greet in French
  %(prog)s checkout --amount 20            # Checkout with the default provider
  %(prog)s terminate 7 --retired           # Try to terminate a retired employee
  %(prog)s area rectangle 3 4              # Area of a rectangle
  %(prog)s stats 10 20 30                  # Sales statistics
  %(prog)s demo                            # Run every example
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['json', 'table'], default='json',
                        help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available examples')

    greet = subparsers.add_parser('greet', help='Greet through a language provider')
    greet.add_argument('--locale', help='Locale code (default from configuration)')

    checkout = subparsers.add_parser('checkout', help='Check out a store')
    checkout.add_argument('--amount', type=float, help='Amount held by the payment action')
    checkout.add_argument('--store-amount', type=float,
                          help='Amount recorded on the store (defaults to --amount)')
    checkout.add_argument('--payment', choices=[p.value for p in PaymentProviderType],
                          help='Payment provider')

    terminate = subparsers.add_parser('terminate', help='Terminate an employee')
    terminate.add_argument('employee_id', type=int, help='Employee ID')
    terminate.add_argument('--medical-leave', action='store_true',
                           help='Employee is on medical leave')
    terminate.add_argument('--retired', action='store_true', help='Employee is retired')

    area = subparsers.add_parser('area', help='Compute the area of a shape')
    area_shapes = area.add_subparsers(dest='shape', help='Shape type')
    square = area_shapes.add_parser('square', help='Square')
    square.add_argument('side', type=float, help='Side length')
    rectangle = area_shapes.add_parser('rectangle', help='Rectangle')
    rectangle.add_argument('length', type=float, help='Length')
    rectangle.add_argument('breadth', type=float, help='Breadth')

    stats = subparsers.add_parser('stats', help='Compute sales statistics')
    stats.add_argument('sales', type=float, nargs='*', help='Sale amounts')

    subparsers.add_parser('demo', help='Run every example with default values')

    return parser.parse_args(argv)


def run_greet(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    locale = args.locale or config.greeting.default_locale
    service = GreetingService(get_language_registry().get_provider(locale))
    return {"locale": locale, "greeting": service.execute()}


def run_checkout(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    payment = args.payment or config.store.default_payment
    amount = args.amount if args.amount is not None else config.store.default_amount
    store_amount = args.store_amount if args.store_amount is not None else amount
    store = Store(store_amount, PAYMENT_PROVIDERS[payment](amount))
    return {"payment": payment, "amount": store.checkout()}


def run_terminate(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    repository = InMemoryEmployeeRepository([
        Employee(
            id=args.employee_id,
            on_medical_leave=args.medical_leave,
            is_retired=args.retired,
        )
    ])
    handler = TerminateEmployeeHandler(repository)
    message = asyncio.run(handler.execute(args.employee_id))
    return {"employee_id": args.employee_id, "result": message}


def run_area(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    if args.shape == 'square':
        shape = Square(args.side)
    elif args.shape == 'rectangle':
        shape = Rectangle(args.length, args.breadth)
    else:
        raise DomainException("No shape specified. Use 'area square' or 'area rectangle'.")
    return {"shape": args.shape, "area": shape.get_area()}


def run_stats(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    return SalesStatistics().compute_sales_statistics(args.sales).model_dump()


def run_demo(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    greeting = GreetingService(
        get_language_registry().get_provider(config.greeting.default_locale)
    )
    payment = PAYMENT_PROVIDERS[config.store.default_payment](config.store.default_amount)
    store = Store(config.store.default_amount, payment)
    return {
        "square_area": Square(10).get_area(),
        "greeting": greeting.execute(),
        "checkout_amount": store.checkout(),
    }


COMMANDS: Dict[str, Callable[[argparse.Namespace, AppConfig], Dict[str, Any]]] = {
    'greet': run_greet,
    'checkout': run_checkout,
    'terminate': run_terminate,
    'area': run_area,
    'stats': run_stats,
    'demo': run_demo,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.")
        return 1

    try:
        config_manager = ConfigurationManager(args.config)
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    raw_config = config_manager.get_config()
    if args.log_level:
        raw_config["LOGGING_CONFIG"]["level"] = args.log_level
    setup_logging(raw_config)
    logger = get_logger(__name__)

    try:
        result = COMMANDS[args.command](args, config_manager.get_typed())
    except DomainException as e:
        logger.error("Domain error", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
