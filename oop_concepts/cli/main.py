"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the application service
- Output formatting and error reporting
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from oop_concepts._package import CLI_NAME, DESCRIPTION, __version__
from oop_concepts.application.services import ConceptApplicationService
from oop_concepts.cli.formatters import format_output
from oop_concepts.config.manager import get_config_manager
from oop_concepts.config.schemas import LogLevel
from oop_concepts.domain.base.exceptions import DomainException
from oop_concepts.domain.concept import ConceptCategory
from oop_concepts.infrastructure.error import get_exception_handler
from oop_concepts.infrastructure.logging.logger import get_logger, setup_logging

FORMATS = ['json', 'yaml', 'table', 'list']

DEFAULT_SHAPES = [
    {"kind": "circle", "radius": 5},
    {"kind": "rectangle", "width": 4, "height": 5},
]


def number(value: str) -> Union[int, float]:
    """Parse an int when possible, otherwise a float."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description=f"OOP Concepts - {DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s person greet --name Alice           # Greet a person
  %(prog)s counter increment --times 3         # Increment a counter three times
  %(prog)s shapes areas --circle 5 --rectangle 4 5
  %(prog)s account deposit 1000                # Deposit into a new account
  %(prog)s concepts list --category testing    # List testing concepts
  %(prog)s concepts run polymorphism           # Run a concept demo
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMATS, help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Person
    person_parser = subparsers.add_parser('person', help='Construction with initialization')
    person_subparsers = person_parser.add_subparsers(dest='action', help='Person actions')
    person_greet = person_subparsers.add_parser('greet', help='Construct a person and greet')
    person_greet.add_argument('--name', help='Person name (default from configuration)')
    person_greet.add_argument('--age', type=int, help='Person age (default from configuration)')

    # Counter
    counter_parser = subparsers.add_parser('counter', help='Mutable instance state')
    counter_subparsers = counter_parser.add_subparsers(dest='action', help='Counter actions')
    counter_increment = counter_subparsers.add_parser('increment', help='Increment a new counter')
    counter_increment.add_argument('--times', type=int,
                                   help='Number of increments (default from configuration)')

    # Shapes
    shapes_parser = subparsers.add_parser('shapes', help='Polymorphism over area()')
    shapes_subparsers = shapes_parser.add_subparsers(dest='action', help='Shape actions')
    shapes_areas = shapes_subparsers.add_parser('areas', help='Print the area of each shape')
    shapes_areas.add_argument('--circle', type=number, action='append', metavar='RADIUS',
                              help='Add a circle (repeatable)')
    shapes_areas.add_argument('--rectangle', type=number, nargs=2, action='append',
                              metavar=('WIDTH', 'HEIGHT'), help='Add a rectangle (repeatable)')

    # Account
    account_parser = subparsers.add_parser('account', help='Encapsulated balance')
    account_subparsers = account_parser.add_subparsers(dest='action', help='Account actions')
    account_deposit = account_subparsers.add_parser('deposit', help='Deposit into a new account')
    account_deposit.add_argument('amounts', type=number, nargs='+', help='Amounts to deposit')
    account_deposit.add_argument('--owner', default='', help='Account owner')

    # Math
    math_parser = subparsers.add_parser('math', help='Static methods')
    math_subparsers = math_parser.add_subparsers(dest='action', help='Math actions')
    math_add = math_subparsers.add_parser('add', help='Add two numbers')
    math_add.add_argument('a', type=number)
    math_add.add_argument('b', type=number)

    # Employees
    employees_parser = subparsers.add_parser('employees', help='Class-level shared state')
    employees_subparsers = employees_parser.add_subparsers(dest='action', help='Employee actions')
    employees_show = employees_subparsers.add_parser('show', help='Describe employees')
    employees_show.add_argument('--employee', nargs=2, action='append', required=True,
                                metavar=('ID', 'NAME'), help='Add an employee (repeatable)')
    employees_show.add_argument('--company', help='Shared company name')

    # Concepts
    concepts_parser = subparsers.add_parser('concepts', help='Concept catalog')
    concepts_subparsers = concepts_parser.add_subparsers(dest='action', help='Concept actions')
    concepts_list = concepts_subparsers.add_parser('list', help='List concepts')
    concepts_list.add_argument('--category', choices=[c.value for c in ConceptCategory],
                               help='Filter by category')
    concepts_show = concepts_subparsers.add_parser('show', help='Show a concept')
    concepts_show.add_argument('name', help='Concept name')
    concepts_run = concepts_subparsers.add_parser('run', help='Run a concept demo')
    concepts_run.add_argument('name', help='Concept name')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _shapes_from_args(args: argparse.Namespace) -> List[Dict[str, Any]]:
    shapes = [{"kind": "circle", "radius": r} for r in (args.circle or [])]
    shapes.extend(
        {"kind": "rectangle", "width": w, "height": h} for w, h in (args.rectangle or [])
    )
    return shapes or list(DEFAULT_SHAPES)


def _employees_from_args(args: argparse.Namespace) -> List[Tuple[int, str]]:
    employees = []
    for raw_id, name in args.employee:
        try:
            employees.append((int(raw_id), name))
        except ValueError:
            raise argparse.ArgumentTypeError(f"employee id must be an integer: '{raw_id}'")
    return employees


COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[ConceptApplicationService, argparse.Namespace], Dict[str, Any]]] = {
    ('person', 'greet'): lambda svc, a: svc.greet_person(a.name, a.age),
    ('counter', 'increment'): lambda svc, a: svc.count(a.times),
    ('shapes', 'areas'): lambda svc, a: svc.calculate_areas(_shapes_from_args(a)),
    ('account', 'deposit'): lambda svc, a: svc.deposit(a.amounts, owner=a.owner),
    ('math', 'add'): lambda svc, a: svc.add(a.a, a.b),
    ('employees', 'show'): lambda svc, a: svc.describe_employees(_employees_from_args(a), a.company),
    ('concepts', 'list'): lambda svc, a: svc.list_concepts(a.category),
    ('concepts', 'show'): lambda svc, a: svc.get_concept(a.name),
    ('concepts', 'run'): lambda svc, a: svc.run_concept(a.name),
}


def execute_command(args: argparse.Namespace, service: ConceptApplicationService) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")
    return COMMAND_HANDLERS[handler_key](service, args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.resource or not getattr(args, 'action', None):
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        config_manager = get_config_manager(args.config)
        config = config_manager.app_config
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logging_config = config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
    setup_logging(logging_config)
    logger = get_logger(__name__)

    service = ConceptApplicationService(defaults=config.defaults)

    try:
        result = execute_command(args, service)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except Exception as e:
        response = get_exception_handler().build_response(e)
        print(f"Error: {response.message}", file=sys.stderr)
        sys.exit(response.exit_code)

    output_format = args.format or config.output.format
    formatted_output = format_output(result, output_format)

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(formatted_output)
        logger.info("Output written", path=args.output)
    else:
        print(formatted_output)


if __name__ == "__main__":
    main()
