"""
Setup commands for Hue Scene Manager CLI.

Contains the Click group class that lists commands by section and suggests
close matches for mistyped commands, and the commands that find a bridge and
pair with it.
"""

import click

from models.utils import get_client, hue_errors, similarity_score

# Help sections, in display order; commands not listed go under 'Other'
COMMAND_SECTIONS = {
    'Bridge': ['discover', 'configure', 'pair', 'setup'],
    'Resources': ['lights', 'groups', 'scenes'],
    'Scene states': ['light-state', 'set-light-state'],
}


class ColouredGroup(click.Group):
    """Group that shows its commands by section and suggests fixes for typos."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            cmd_name = args[0] if args else ''
            suggestions = self.suggest(ctx, cmd_name)
            if not suggestions or self.get_command(ctx, cmd_name):
                raise
            hint = ', '.join(click.style(name, fg='green') for name in suggestions)
            raise click.UsageError(f"No such command '{cmd_name}'. Did you mean: {hint}?", ctx)

    def suggest(self, ctx, cmd_name: str, limit: int = 3) -> list[str]:
        """Return up to limit command names similar to cmd_name, best first."""
        if not cmd_name:
            return []
        scored = [(similarity_score(cmd_name, name), name) for name in self.list_commands(ctx)]
        return [name for score, name in sorted(scored, reverse=True)[:limit] if score > 0]

    def format_commands(self, ctx, formatter):
        visible = {}
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is not None and not cmd.hidden:
                visible[name] = cmd.get_short_help_str(limit=80)

        sections = dict(COMMAND_SECTIONS)
        listed = {name for names in sections.values() for name in names}
        sections['Other'] = [name for name in visible if name not in listed]

        for title, names in sections.items():
            rows = [(click.style(name, fg='green'), visible[name]) for name in names if name in visible]
            if rows:
                with formatter.section(click.style(title, fg='yellow', bold=True)):
                    formatter.write_dl(rows)


def select_bridge_interactive(bridges: list[dict]) -> str | None:
    """Display a menu to select a bridge from the discovered list.

    Returns:
        Selected bridge IP address, or None if cancelled/invalid
    """
    if not bridges:
        return None

    if len(bridges) == 1:
        return bridges[0].get('internalipaddress')

    click.echo()
    for i, bridge in enumerate(bridges, 1):
        ip = bridge.get('internalipaddress', 'Unknown')
        click.echo(f"  {click.style(str(i), fg='green', bold=True)}. {ip} (id: {bridge.get('id', 'unknown')})")
    click.echo()

    choice = click.prompt(f"Select bridge [1-{len(bridges)}] or 'q' to cancel", type=str, default='1')
    if choice.lower() == 'q':
        return None

    try:
        index = int(choice) - 1
    except ValueError:
        index = -1

    if 0 <= index < len(bridges):
        return bridges[index].get('internalipaddress')

    click.echo(f"Invalid selection: {choice}", err=True)
    return None


@click.command(name='discover')
@hue_errors
def discover_command():
    """List Hue bridges found by the Philips discovery service."""
    client = get_client()
    bridges = client.discover_bridges()

    if not bridges:
        click.secho("No bridges found.", fg='yellow')
        return

    click.secho(f"Found {len(bridges)} Hue bridge{'s' if len(bridges) > 1 else ''}:", fg='cyan', bold=True)
    for bridge in bridges:
        click.echo(f"  • {bridge.get('internalipaddress', 'Unknown')} (id: {bridge.get('id', 'unknown')})")


@click.command(name='configure')
@click.argument('bridge_ip', required=False)
@hue_errors
def configure_command(bridge_ip: str | None):
    """Save the bridge IP address, discovering it when not given.

    \b
    Examples:
      hue-scene-mgr configure 192.168.1.20
      hue-scene-mgr configure            # Use the discovery service
    """
    client = get_client()

    if not bridge_ip:
        click.echo("Discovering Hue bridges...")
        bridge_ip = select_bridge_interactive(client.discover_bridges())
        if not bridge_ip:
            click.secho("No bridge selected.", fg='yellow')
            return

    client.use_bridge(bridge_ip)
    click.secho(f"✓ Bridge set to {bridge_ip}", fg='green')


@click.command(name='pair')
@click.option('--device-type', '-d', default=None, help='Application identifier sent to the bridge')
@click.option('--yes', '-y', is_flag=True, help='Do not wait for Enter before pairing')
@hue_errors
def pair_command(device_type: str | None, yes: bool):
    """Register with the bridge using the link button.

    Press the link button on the bridge, then run this command (or press
    Enter at the prompt) within 30 seconds. The new username is saved to the
    config file.
    """
    client = get_client()

    if not yes:
        click.secho("Press the LINK BUTTON on your Hue Bridge.", fg='yellow', bold=True)
        click.pause("Press Enter when ready...")

    username = client.register(device_type)
    click.secho("✓ Successfully registered with the bridge", fg='green', bold=True)
    click.echo(f"  Username: {username}")


@click.command(name='setup')
def setup_command():
    """Show the stored bridge configuration."""
    client = get_client()
    config = client.store.bridge_config()

    click.secho("=== Bridge Configuration ===", fg='cyan', bold=True)
    click.echo(f"Config file: {client.settings.config_file}")

    if config['hue_bridge_ip']:
        click.echo(f"Bridge IP:   {click.style(config['hue_bridge_ip'], fg='green')}")
    else:
        default_ip = client.settings.default_bridge_ip
        click.echo(f"Bridge IP:   {click.style(f'not set (using {default_ip})', fg='yellow')}")

    if config['username']:
        click.echo(f"Username:    {click.style(config['username'], fg='green')}")
    else:
        click.echo(f"Username:    {click.style('not set', fg='red')}  (run 'pair')")
