import sys

import click
import structlog
from eth_utils import decode_hex, encode_hex

from ensconsole.client import ResolutionClient
from ensconsole.config import DEFAULT_CONFIG
from ensconsole.exceptions import EnsError, InvalidNode, TransportError
from ensconsole.log_config import LOG_LEVELS, configure_logging
from ensconsole.storage.local import LocalContentStore
from ensconsole.utils import is_ens_name
from ensconsole.utils.namehash import labelhash, namehash
from ensconsole.utils.typing import Node

log = structlog.get_logger(__name__)

ETHEREUM_NODE_COMMUNICATION_ERROR = (
    "Could not contact the Ethereum node through JSON-RPC.\n"
    "Please make sure that the node is running and --rpc-url points at it."
)


def get_client(ctx) -> ResolutionClient:
    """ Built on first use, so hashing commands never touch the node. """
    if ctx.obj.get("client") is None:
        ctx.obj["client"] = ResolutionClient.from_config(ctx.obj["config"])
    return ctx.obj["client"]


def parse_node(value: str) -> Node:
    """ A `0x` prefixed hex value without dots is taken as a raw node, anything else as a name. """
    if is_ens_name(value) or not value.startswith("0x"):
        return namehash(value)
    try:
        node = decode_hex(value)
    except ValueError as e:
        raise InvalidNode(f"Not a hex encoded node: {value}") from e
    if len(node) != 32:
        raise InvalidNode(f"Expected a 32 bytes node, got {len(node)} bytes: {value}")
    return Node(node)


def run_lookup(ctx, lookup, name):
    try:
        node = parse_node(name)
        return lookup(get_client(ctx), node)
    except TransportError as e:
        log.debug("Lookup failed", name=name, error=str(e))
        click.secho(ETHEREUM_NODE_COMMUNICATION_ERROR, fg="red", err=True)
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)
    except EnsError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)


@click.group()
@click.option("--rpc-url", help="JSON-RPC endpoint: an IPC socket path or an HTTP URL")
@click.option("--registry-address", help="Address of the ENS registry contract")
@click.option("--timeout", type=float, help="HTTP request timeout in seconds")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
)
@click.option("--log-json", is_flag=True, help="Output log lines in JSON format")
@click.pass_context
def cli(ctx, rpc_url, registry_address, timeout, log_level, log_json):
    """Ethereum Name Service console helper

    Lookup commands take a dotted NAME, or a raw 0x prefixed 32 bytes node.
    """
    configure_logging(log_level, log_json=log_json)
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = DEFAULT_CONFIG.replace(
            rpc_url=rpc_url,
            registry_address=registry_address,
            request_timeout=timeout,
        )
    log.debug("Using config", config=repr(ctx.obj["config"]))


@cli.command("namehash")
@click.argument("name", default="")
def namehash_command(name):
    """Print the namehash node of NAME"""
    click.echo(encode_hex(namehash(name)))


@cli.command("labelhash")
@click.argument("label")
def labelhash_command(label):
    """Print the keccak256 hash of a single LABEL"""
    click.echo(encode_hex(labelhash(label)))


@cli.command()
@click.argument("name")
@click.pass_context
def resolver(ctx, name):
    """Print the resolver address registered for NAME"""
    click.echo(run_lookup(ctx, ResolutionClient.resolver_of_node, name))


@cli.command()
@click.argument("name")
@click.pass_context
def owner(ctx, name):
    """Print the owner of NAME"""
    click.echo(run_lookup(ctx, ResolutionClient.owner_of_node, name))


@cli.command()
@click.argument("name")
@click.pass_context
def ttl(ctx, name):
    """Print the TTL of NAME"""
    click.echo(run_lookup(ctx, ResolutionClient.ttl_of_node, name))


@cli.command()
@click.argument("name")
@click.pass_context
def addr(ctx, name):
    """Print the address record of NAME"""
    click.echo(run_lookup(ctx, ResolutionClient.address_of_node, name))


@cli.command()
@click.argument("name")
@click.option(
    "--local-dir",
    type=click.Path(file_okay=False),
    help="Read the content hash from a local store directory instead of the chain",
)
@click.pass_context
def content(ctx, name, local_dir):
    """Print the content hash of NAME"""
    if local_dir:
        try:
            content_hash = LocalContentStore(local_dir).resolve(name)
        except EnsError as e:
            click.secho(str(e), fg="red", err=True)
            sys.exit(1)
    else:
        content_hash = run_lookup(ctx, ResolutionClient.content_of_node, name)
    click.echo(encode_hex(content_hash))
