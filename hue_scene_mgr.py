#!/usr/bin/env python3
"""
Hue Scene Manager CLI
Inspect Philips Hue lights, groups and scenes and edit per-light scene states.
"""

from pathlib import Path

import click

from core.config import ClientSettings, CONFIG_FILE, DEFAULT_DEVICE_TYPE

from commands.setup import ColouredGroup, discover_command, configure_command, pair_command, setup_command
from commands.inspection import lights_command, groups_command, scenes_command
from commands.scene_state import light_state_command, set_light_state_command


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999
    }
)
@click.option('--config-file', '-c', type=click.Path(dir_okay=False, path_type=Path),
              default=CONFIG_FILE, show_default=True, help='Config file holding bridge IP and username')
@click.option('--device-type', default=DEFAULT_DEVICE_TYPE, show_default=True,
              help='Application identifier used when pairing')
@click.option('--timeout', type=float, default=None, help='HTTP timeout in seconds (default: none)')
@click.version_option(version='0.1.0', prog_name='Hue Scene Manager')
@click.pass_context
def cli(ctx, config_file: Path, device_type: str, timeout: float | None):
    """Hue Scene Manager - Inspect and edit Philips Hue scenes.

First run 'configure' to choose a bridge, then press the bridge's link
button and run 'pair'."""
    ctx.obj = ClientSettings(config_file=config_file, device_type=device_type, timeout=timeout)


cli.add_command(discover_command)
cli.add_command(configure_command)
cli.add_command(pair_command)
cli.add_command(setup_command)

cli.add_command(lights_command)
cli.add_command(groups_command)
cli.add_command(scenes_command)

cli.add_command(light_state_command)
cli.add_command(set_light_state_command)


if __name__ == '__main__':
    cli()
