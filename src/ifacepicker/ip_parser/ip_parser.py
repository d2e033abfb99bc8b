"""
This module turns the text output of `ip a` into a list of network interfaces
with their IPv4 address.

Each interface announces itself on a header line such as

    2: eth0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 ...

and its addresses follow on lines such as

    inet 192.168.1.10/24 brd 192.168.1.255 scope global eth0

Only the first "inet " line of each interface is used. Interfaces without one
get the NO_IP_ADDRESS placeholder. Any other line is skipped.

Functions:
    parse_header: Extracts the interface name from a header line.
    parse_inet: Extracts the address from an "inet " line.
    parse_ip_output: Builds the ordered list of interfaces from the output lines.
    list_interfaces: Runs the line source (by default `ip a`) and parses its output.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..run_os_command.run_os_command import read_command_lines

logger = logging.getLogger(__name__)

NO_IP_ADDRESS = "<no ip address>"
HEADER_MARKER = ": <"
INET_MARKER = "inet "
INDEX_SEPARATOR = ": "


@dataclass(frozen=True)
class InterfaceEntry:
    """
    A network interface as reported by `ip a`.

    Attributes:
        name: The interface name, e.g. "eth0" or "lo". Never empty.
        address: The address without prefix length, or NO_IP_ADDRESS.
    """
    name: str
    address: str = NO_IP_ADDRESS


def is_header(line: str) -> bool:
    """Return True if the line starts the stanza of a new interface."""
    return HEADER_MARKER in line


def parse_header(line: str) -> Optional[str]:
    """
    Extract the interface name from a header line.

    The name is the text between the index field ("2: ") and the ": <" marker,
    so the width of the index does not matter.

    Args:
        line (str): A line of `ip a` output.

    Returns:
        str | None: The interface name, or None if the line is not a header
                    or the name is empty.
    """
    pos = line.find(HEADER_MARKER)
    if pos == -1:
        return None

    prefix = line[:pos]
    index, separator, name = prefix.partition(INDEX_SEPARATOR)
    if not separator:
        # No index field in front of the name
        name = index
    name = name.strip()

    if not name:
        logger.info("Skipping header without interface name: %r", line)
        return None
    return name


def parse_inet(line: str) -> Optional[str]:
    """
    Extract the address from an "inet " line.

    The address runs from the end of the marker to the next "/". Without a "/"
    the rest of the line is used. The address is not validated.

    Args:
        line (str): A line of `ip a` output.

    Returns:
        str | None: The address, or None if the line has no "inet " marker.
    """
    pos = line.find(INET_MARKER)
    if pos == -1:
        return None

    start = pos + len(INET_MARKER)
    end = line.find("/", start)
    if end == -1:
        return line[start:].strip()
    return line[start:end]


def parse_ip_output(lines: Iterable[str]) -> List[InterfaceEntry]:
    """
    Build the list of interfaces from the output of `ip a`.

    The lines are read in a single forward pass. Interfaces keep the order
    they appear in.

    Args:
        lines (Iterable[str]): The output lines, with or without trailing newlines.

    Returns:
        List[InterfaceEntry]: One entry per interface header found.
    """
    entries = []
    pending_name = None

    for line in lines:
        line = line.rstrip("\r\n")

        if is_header(line):
            if pending_name is not None:
                # Previous interface reached the next header without an address
                entries.append(InterfaceEntry(pending_name, NO_IP_ADDRESS))
            # None for an unnamed stanza, which is dropped along with its lines
            pending_name = parse_header(line)
            continue

        if pending_name is None:
            # Address already found for this interface, wait for the next header
            continue

        address = parse_inet(line)
        if address is not None:
            entries.append(InterfaceEntry(pending_name, address))
            pending_name = None

    if pending_name is not None:
        entries.append(InterfaceEntry(pending_name, NO_IP_ADDRESS))

    logger.info("Parsed %d interfaces", len(entries))
    return entries


def list_interfaces(
    line_source: Callable[[], Iterable[str]] = read_command_lines
) -> List[InterfaceEntry]:
    """
    List the network interfaces of the host.

    Args:
        line_source (Callable): Returns the lines to parse. Defaults to running `ip a`.

    Returns:
        List[InterfaceEntry]: The interfaces in the order `ip a` lists them.

    Raises:
        CommandLaunchError: If the default line source could not start `ip a`.
    """
    return parse_ip_output(line_source())
