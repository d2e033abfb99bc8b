"""
Interactive selection of a network interface.

Renders the interfaces as a numbered menu, reads a single 1-based choice
and formats the chosen interface as IFACE=/IPADDR= lines.
There is no retry: a bad choice raises InvalidSelectionError.
"""
import logging
from typing import Callable, List, Optional, Sequence, TextIO

from ..ip_parser.ip_parser import NO_IP_ADDRESS, InterfaceEntry

logger = logging.getLogger(__name__)

MENU_HEADER = "List of Interfaces and IP Addresses:"
PROMPT = "Choose an interface: "


class InvalidSelectionError(ValueError):
    """Raised when the choice is not an integer or is out of range."""

    def __init__(self, selection=None):
        self.selection = selection
        super().__init__("Invalid interface index!")


def render(entries: Sequence[InterfaceEntry], out: Optional[TextIO] = None) -> None:
    """Print the numbered menu of interfaces followed by a blank line."""
    print(MENU_HEADER, file=out)
    for i, entry in enumerate(entries):
        print(f"{i + 1} - Interface: {entry.name}, IP: {entry.address}", file=out)
    print(file=out)


def read_selection(input_fn: Callable[[str], str] = input, prompt: str = PROMPT) -> int:
    """
    Read one integer choice.

    Args:
        input_fn (Callable): Reads a line after showing the prompt. Defaults to input().
        prompt (str): The prompt to show.

    Returns:
        int: The choice as typed, not yet range checked.

    Raises:
        InvalidSelectionError: If the input is closed or is not an integer.
    """
    try:
        raw = input_fn(prompt)
    except EOFError:
        logger.error("Input closed before a choice was made")
        raise InvalidSelectionError() from None

    try:
        return int(raw.strip())
    except ValueError:
        logger.error("Choice is not a number: %r", raw)
        raise InvalidSelectionError(raw) from None


def resolve(entries: Sequence[InterfaceEntry], selection: int) -> InterfaceEntry:
    """
    Map a 1-based choice to its interface.

    Raises:
        InvalidSelectionError: If the choice is outside 1..len(entries).
    """
    index = selection - 1
    if index < 0 or index >= len(entries):
        logger.error("Choice %d out of range for %d interfaces", selection, len(entries))
        raise InvalidSelectionError(selection)
    return entries[index]


def format_selection(entry: InterfaceEntry) -> List[str]:
    """Return the IFACE= and IPADDR= lines for the chosen interface."""
    return [
        f"IFACE={entry.name}",
        f"IPADDR={entry.address or NO_IP_ADDRESS}"
    ]


def select_interface(
    entries: Sequence[InterfaceEntry],
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None
) -> InterfaceEntry:
    """
    Show the menu, read the choice and return the chosen interface.

    Args:
        entries (Sequence[InterfaceEntry]): The interfaces to choose from.
        input_fn (Callable): Reads the choice. Defaults to input().
        out (TextIO): Where the menu is printed.

    Returns:
        InterfaceEntry: The chosen interface.

    Raises:
        InvalidSelectionError: If the choice is not a valid menu number.
    """
    render(entries, out)
    selection = read_selection(input_fn)
    entry = resolve(entries, selection)
    logger.info("Selected interface %s with address %s", entry.name, entry.address)
    return entry
