"""Main CLI application for chain specification tooling."""

import logging
import sys

import click

from .. import config
from ..chain import export_spec, load_file, parse, resolve, save_file
from ..crypto import Role, derive_account_id, derive_keypair, PRIMARY_SCHEME, ss58_encode
from ..errors import ChainSpecError, ConfigurationError, FileFormatError

logger = logging.getLogger(__name__)

ROLE_CHOICES = [role.value for role in Role] + ["account"]


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug):
    """Sunshine chain specification toolkit."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@cli.command('build-spec')
@click.option('--chain', default='', help='Profile: dev, local, staging or a spec file path')
@click.option('--output', help='Output file (stdout if omitted)')
def build_spec(chain, output):
    """Build or load a chain specification and export it."""
    try:
        spec = resolve(parse(chain))
    except (FileFormatError, ConfigurationError) as exc:
        click.echo(f"✗ {exc}", err=True)
        sys.exit(1)

    if output:
        try:
            path = save_file(spec, output)
        except FileFormatError as exc:
            click.echo(f"✗ {exc}", err=True)
            sys.exit(1)
        click.echo(f"✓ Chain specification written: {path}", err=True)
        click.echo(f"  Network: {spec.name} ({spec.chain_id})", err=True)
    else:
        click.echo(export_spec(spec).decode('utf-8'))


@cli.command('inspect-key')
@click.option('--seed', required=True, help='Secret URI (e.g. //Alice)')
@click.option('--role', type=click.Choice(ROLE_CHOICES), default='account', help='Key role')
def inspect_key(seed, role):
    """Show the public identity derived from a development seed."""
    try:
        if role == 'account':
            keypair = derive_keypair(seed, PRIMARY_SCHEME)
            account_id = derive_account_id(seed)
        else:
            keypair = derive_keypair(seed, Role(role).scheme)
            account_id = None
    except ChainSpecError as exc:
        click.echo(f"✗ {exc}", err=True)
        sys.exit(1)

    click.echo(f"Seed:       {seed}")
    click.echo(f"Role:       {role} ({keypair.scheme.value})")
    click.echo(f"Public key: {keypair.public_hex}")
    click.echo(f"SS58:       {keypair.public_ss58}")
    if account_id is not None:
        click.echo(f"Account id: 0x{account_id.hex()}")
        click.echo(f"Address:    {ss58_encode(account_id)}")


@cli.command('check-spec')
@click.argument('path')
def check_spec(path):
    """Load a specification file and display a summary."""
    try:
        spec = load_file(path)
    except FileFormatError as exc:
        click.echo(f"✗ {exc}", err=True)
        sys.exit(1)

    genesis = spec.genesis
    click.echo("=== Chain Specification ===\n")
    click.echo(f"Name:        {spec.name}")
    click.echo(f"Id:          {spec.chain_id}")
    click.echo(f"Chain type:  {spec.chain_type.value}")
    click.echo(f"Code size:   {len(genesis.frame_system.code)} bytes")
    click.echo(f"Changes trie: {'enabled' if genesis.frame_system.changes_tracking_enabled else 'disabled'}")
    click.echo(f"\nAuthorities ({len(genesis.authorities())}):")
    for keys in genesis.authorities():
        click.echo(f"  - {ss58_encode(keys.block_production)} / {ss58_encode(keys.finality)}")
    click.echo(f"\nEndowed accounts ({len(genesis.pallet_balances.balances)}):")
    for account, balance in genesis.pallet_balances.balances:
        click.echo(f"  - {ss58_encode(account)}: {balance}")
    click.echo(f"\nBoot nodes ({len(spec.boot_nodes)}):")
    for boot_node in spec.boot_nodes:
        click.echo(f"  - {boot_node}")


def main():
    """Entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
