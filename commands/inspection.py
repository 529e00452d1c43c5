"""
Resource listing commands.

Commands for listing lights, groups and scenes, with optional field filters
and distinct-value views.
"""

import click

from core.codec import serialize_json
from models.filters import filter_entries, get_filter_values
from models.utils import get_client, hue_errors, parse_filters


def _resource_options(func):
    """Options shared by the lights, groups and scenes commands."""
    func = click.option('--json', 'as_json', is_flag=True, help='Print raw JSON')(func)
    func = click.option('--distinct', '-d', 'distinct_key', metavar='KEY',
                        help='Show one entry per distinct value of KEY')(func)
    func = click.option('--filter', '-f', 'filters', multiple=True, metavar='KEY=VALUE',
                        help="Only show entries where KEY matches VALUE ('ALL' matches anything)")(func)
    func = click.argument('resource_id', required=False)(func)
    return func


def show_resources(label: str, resources: dict, resource_id: str | None, filters: tuple[str, ...],
                   distinct_key: str | None, as_json: bool):
    """Print a resource collection (or single resource) fetched from the bridge."""
    if resource_id:
        # Single resource, filters do not apply
        click.echo(serialize_json(resources))
        return

    entries = filter_entries(resources, parse_filters(filters))
    if distinct_key:
        entries = get_filter_values({entry['id']: entry for entry in entries}, distinct_key)

    if as_json:
        click.echo(serialize_json(entries))
        return

    if not entries:
        click.echo(f"No {label} found.")
        return

    click.secho(f"=== {label.title()} ({len(entries)}) ===", fg='cyan', bold=True)
    for entry in entries:
        name = entry.get('name', 'Unnamed')
        details = []
        if entry.get('type'):
            details.append(entry['type'])
        if distinct_key:
            details.append(f"{distinct_key}={entry.get(distinct_key)}")
        suffix = f" ({', '.join(details)})" if details else ''
        click.echo(f"  {click.style(str(entry['id']), fg='green')}  {name}{suffix}")


@click.command(name='lights')
@_resource_options
@hue_errors
def lights_command(resource_id, filters, distinct_key, as_json):
    """List lights, or show one light by ID.

    \b
    Examples:
      hue-scene-mgr lights
      hue-scene-mgr lights 3
      hue-scene-mgr lights -f type="Extended color light"
    """
    lights = get_client().get_lights(resource_id)
    show_resources('lights', lights, resource_id, filters, distinct_key, as_json)


@click.command(name='groups')
@_resource_options
@hue_errors
def groups_command(resource_id, filters, distinct_key, as_json):
    """List groups (rooms and zones), or show one group by ID.

    \b
    Examples:
      hue-scene-mgr groups -f type=Room
      hue-scene-mgr groups -d class
    """
    groups = get_client().get_groups(resource_id)
    show_resources('groups', groups, resource_id, filters, distinct_key, as_json)


@click.command(name='scenes')
@_resource_options
@hue_errors
def scenes_command(resource_id, filters, distinct_key, as_json):
    """List scenes, or show one scene by ID.

    \b
    Examples:
      hue-scene-mgr scenes -f group=1
      hue-scene-mgr scenes -f lights=5      # Scenes that include light 5
    """
    scenes = get_client().get_scenes(resource_id)
    show_resources('scenes', scenes, resource_id, filters, distinct_key, as_json)
