"""
Scene light state commands.

Read and write the state a scene stores for a single light.
"""

import click

from core.codec import serialize_json, deserialize_json
from models.utils import get_client, hue_errors


@click.command(name='light-state')
@click.argument('scene_id')
@click.argument('light_id')
@hue_errors
def light_state_command(scene_id: str, light_id: str):
    """Show the state SCENE_ID stores for LIGHT_ID."""
    state = get_client().get_light_state(scene_id, light_id)
    if state is None:
        click.secho(f"Scene {scene_id} has no state for light {light_id}.", fg='yellow')
        return
    click.echo(serialize_json(state))


@click.command(name='set-light-state')
@click.argument('scene_id')
@click.argument('light_id')
@click.argument('state')
@hue_errors
def set_light_state_command(scene_id: str, light_id: str, state: str):
    """Set the state SCENE_ID stores for LIGHT_ID.

    STATE is a JSON object, for example '{"on": true, "bri": 200}'.

    \b
    Examples:
      hue-scene-mgr set-light-state AbCdEf123 5 '{"on": true, "bri": 200}'
      hue-scene-mgr set-light-state AbCdEf123 5 '{"on": false}'
    """
    if not isinstance(deserialize_json(state), dict):
        raise click.BadParameter("must be a JSON object", param_hint='STATE')

    get_client().set_light_state(scene_id, light_id, state)
    click.secho(f"✓ Updated light {light_id} in scene {scene_id}", fg='green')
