"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "ws_ts_gen"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    arguments = []
    options = []

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if value is None or value is False or value == "":
            continue

        # Paths are shown by file name only, whether or not they exist yet
        if isinstance(param.type, click.Path):
            formatted_value = Path(str(value)).name
        elif isinstance(value, str):
            formatted_value = value
        else:
            formatted_value = str(getattr(value, "value", value))

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            if value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param_name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    return " ".join([PROGRAM_NAME, *arguments, *options])
