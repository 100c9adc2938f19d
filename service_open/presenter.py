from __future__ import annotations

import logging
import sys
import webbrowser
from typing import Callable, Iterable, List, Optional, TextIO

from tabulate import tabulate

from .models import ResolvedEndpoint, ServiceRecord
from .resolver import matching_records

logger = logging.getLogger(__name__)

TABLE_HEADERS = ["Namespace", "Name", "NodePort", "Route-URL", "Weight"]


def build_rows(records: Iterable[ServiceRecord], target_name: str, host_address: str) -> List[List[str]]:
    """One row per record named `target_name`, ambiguous namespaces included."""

    rows: List[List[str]] = []
    for record in matching_records(records, target_name):
        node_port = f"{host_address}:{record.node_port}" if record.node_port else ""
        rows.append(
            [
                record.namespace,
                record.name,
                node_port,
                "\n".join(record.route_urls),
                "\n".join(record.weights),
            ]
        )
    return rows


def render_table(records: Iterable[ServiceRecord], target_name: str, host_address: str) -> str:
    rows = build_rows(records, target_name, host_address)
    return tabulate(rows, headers=TABLE_HEADERS, tablefmt="grid", disable_numparse=True)


def print_table(
    records: Iterable[ServiceRecord],
    target_name: str,
    host_address: str,
    out: Optional[TextIO] = None,
) -> None:
    out = out or sys.stdout
    out.write(render_table(records, target_name, host_address) + "\n")


def print_url(endpoint: ResolvedEndpoint, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write(endpoint.url + "\n")


def open_in_browser(
    endpoint: ResolvedEndpoint,
    out: Optional[TextIO] = None,
    opener: Optional[Callable[[str], bool]] = None,
) -> bool:
    """Hand the URL to the default browser.

    Launcher failures are logged, not raised: resolution already succeeded.
    """

    out = out or sys.stdout
    opener = opener or webbrowser.open
    out.write(f"Opening the route/NodePort {endpoint.url} in the default browser...\n")
    try:
        opened = bool(opener(endpoint.url))
    except webbrowser.Error as exc:
        logger.warning("Could not launch a browser for %s: %s", endpoint.url, exc)
        return False
    if not opened:
        logger.warning("No runnable browser found for %s", endpoint.url)
    return opened
