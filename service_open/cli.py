"""service-open: open or print the URL of a cluster service.

Usage
-----
    service-open my-app                  # table of every my-app across namespaces
    service-open -n staging -u my-app    # print the URL only
    service-open --in-browser --https my-app

This module is the only place that turns errors into exit codes.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

import click

from .config import ServiceOpenConfig
from .errors import ServiceOpenError
from .kubernetes.clients import load_clients
from .kubernetes.cluster import ensure_cluster_running, get_host_address
from .kubernetes.services import list_service_records
from .presenter import open_in_browser, print_table, print_url
from .resolver import resolve

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "You must specify the name of the service."


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("service_open").setLevel(level)


def run(
    service: str,
    cfg: ServiceOpenConfig,
    *,
    namespace: str = "",
    url_only: bool = False,
    in_browser: bool = False,
    prefer_https: bool = False,
    out: Optional[TextIO] = None,
) -> None:
    """Query the cluster once, then render in the selected mode."""

    clients = load_clients(kubeconfig=cfg.kubeconfig, context=cfg.context)
    nodes = ensure_cluster_running(clients, cfg.host_address)
    host = get_host_address(nodes, cfg.host_address)

    records = list_service_records(
        clients,
        namespace or None,
        include_routes=cfg.include_routes,
        include_ingresses=cfg.include_ingresses,
    )

    if not url_only and not in_browser:
        print_table(records, service, host, out)
        return

    endpoint = resolve(records, service, host, prefer_https=prefer_https, explicit_namespace=namespace)
    if url_only:
        print_url(endpoint, out)
    if in_browser:
        open_in_browser(endpoint, out)


@click.command(
    name="service-open",
    help="Opens the URL for the specified service in the browser or prints it to the console.",
)
@click.argument("service_args", nargs=-1, metavar="SERVICE")
@click.option("-n", "--namespace", default="", help="The namespace of the service.")
@click.option("-u", "--url", "url_only", is_flag=True, help="Print the service URL to standard output.")
@click.option("--in-browser", is_flag=True, help="Access the service in the default browser.")
@click.option("--https", "prefer_https", is_flag=True, help="Access the service with HTTPS instead of HTTP.")
@click.option("--kubeconfig", default=None, type=click.Path(dir_okay=False), help="Path to a kubeconfig file.")
@click.option("--context", default=None, help="Kube context to use.")
@click.option("--host", "host_address", default=None, help="Address used for node-port URLs.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    service_args: Sequence[str],
    namespace: str,
    url_only: bool,
    in_browser: bool,
    prefer_https: bool,
    kubeconfig: Optional[str],
    context: Optional[str],
    host_address: Optional[str],
    verbose: bool,
) -> None:
    cfg = ServiceOpenConfig.from_env().with_overrides(
        kubeconfig=kubeconfig,
        context=context,
        host_address=host_address,
        verbose=verbose,
    )
    _configure_logging(cfg.log_level)

    if len(service_args) != 1:
        click.echo(USAGE_MESSAGE, err=True)
        ctx.exit(1)

    try:
        run(
            service_args[0],
            cfg,
            namespace=namespace,
            url_only=url_only,
            in_browser=in_browser,
            prefer_https=prefer_https,
        )
    except ServiceOpenError as exc:
        logger.debug("Command failed", exc_info=True)
        click.echo(str(exc), err=True)
        ctx.exit(1)


def main() -> None:
    cli()
