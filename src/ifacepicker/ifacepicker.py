"""
ifacepicker lists the network interfaces and IP addresses of the host using
`ip a` and lets the user pick one from a numbered menu.

The choice is printed as the last two lines of standard output:

    IFACE=<interface-name>
    IPADDR=<configured-ip>

which makes it easy to use from shell scripts, e.g. when configuring
Wake-on-LAN:

    eval "$(ifacepicker | tail -n 2)"

Exit codes:
    0  an interface was chosen, or help was shown
    1  `ip a` could not be started, or the choice was invalid
"""
import argparse
import logging
import os
import sys
from typing import Callable, Iterable, List, Optional, TextIO

from .ip_parser.ip_parser import list_interfaces
from .run_os_command.run_os_command import CommandLaunchError, read_command_lines
from .selector.selector import InvalidSelectionError, format_selection, select_interface

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
HELP_FLAGS = ("-h", "--help")


def usage(program_name: str) -> str:
    """Return the help text for the program."""
    return (
        f"Usage: {program_name} [-h|--help]\n"
        "\n"
        "List and easily select network interfaces, displaying their respective IP addresses.\n"
        "\n"
        "Output:\n"
        "  IFACE=<interface-name>\n"
        "  IPADDR=<configured-ip>\n"
        "\n"
        "Arguments:\n"
        "  -h, --help       Show this help message\n"
        "  --log-file PATH  Write logging to PATH\n"
    )


def parse_arguments(argv: List[str]) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Unknown arguments are ignored and never stop the program. Help is only
    recognized when -h or --help is the sole argument.

    Args:
        argv (list[str]): The arguments, without the program name.

    Returns:
        argparse.Namespace: An object containing the parsed arguments:
            help : True if the help text should be shown
            log_file : file to log to, or None
    """
    parser = argparse.ArgumentParser(add_help=False, exit_on_error=False)

    parser.add_argument(
        '-h', '--help',
        action='store_true',
        help='Show this help message'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Write logging to this file. Logging is off by default.'
    )

    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError:
        # Malformed options fall through to the normal flow
        args, unknown = argparse.Namespace(help=False, log_file=None), list(argv)

    args.help = len(argv) == 1 and argv[0] in HELP_FLAGS
    args.unknown = unknown
    return args


def setup_logging(log_file: Optional[str]) -> None:
    """
    Log to log_file if given, otherwise keep the package silent.

    Menu and results go to stdout, so log records must never end up there
    or on stderr.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.INFO,
            format=LOG_FORMAT
        )
        logging.info("Logging started")
        return

    package_logger = logging.getLogger(__package__ or "ifacepicker")
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())


def run(
    argv: Optional[List[str]] = None,
    program_name: Optional[str] = None,
    line_source: Callable[[], Iterable[str]] = read_command_lines,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None
) -> int:
    """
    List the interfaces, let the user choose one and print it.

    Args:
        argv (list[str]): The arguments, without the program name. Defaults to sys.argv[1:].
        program_name (str): Name shown in the help text. Defaults to the basename of sys.argv[0].
        line_source (Callable): Returns the `ip a` output lines.
        input_fn (Callable): Reads the choice.
        out (TextIO): Stream for the menu and result. Defaults to stdout.
        err (TextIO): Stream for error messages. Defaults to stderr.

    Returns:
        int: The exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    if program_name is None:
        program_name = os.path.basename(sys.argv[0])
    if err is None:
        err = sys.stderr

    args = parse_arguments(argv)
    if args.help:
        print(usage(program_name), end="", file=out)
        return 0

    setup_logging(args.log_file)
    if args.unknown:
        logger.info("Ignoring arguments: %s", " ".join(args.unknown))

    try:
        entries = list_interfaces(line_source)
    except CommandLaunchError as e:
        logger.error("%s", e)
        print(e, file=err)
        return 1

    try:
        entry = select_interface(entries, input_fn, out)
    except InvalidSelectionError as e:
        print(e, file=err)
        return 1

    for line in format_selection(entry):
        print(line, file=out)
    return 0


def main() -> None:
    """Entry point of the ifacepicker command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
