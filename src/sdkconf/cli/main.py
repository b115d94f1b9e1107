"""
Main CLI entry point for sdkconf.

Inspects the effective configuration: bundled or host defaults, with
override files and --set assignments applied on top.
"""

import json as _json
import logging as _logging
import os as _os
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic
import rich.console as _rich_console
import rich.syntax as _rich_syntax
import yaml as _yaml

import sdkconf
import sdkconf.config as config

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

UNKNOWN = "unknown"


def _configure_logging(level: str) -> None:
    """Send sdkconf log records to stderr at the given level."""
    _logging.basicConfig(
        stream=_sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _logging.getLogger("sdkconf").setLevel(level)


def parse_assignment(text: str) -> dict[str, _typing.Any]:
    """
    Turn ``SECTION.ID.ATTR=VALUE`` into a nested partial configuration.

    The value is read as a JSON scalar (``6``, ``true``, ``null``,
    ``"quoted"``); anything that is not valid JSON is kept as a string,
    so ``0xabc...`` addresses pass through unchanged.

    Example:
        >>> parse_assignment("tokens.USDC.decimals=6")
        {'tokens': {'USDC': {'decimals': 6}}}

    Raises:
        click.BadParameter: If there is no ``=`` or the key has fewer than
            two dotted parts.
    """
    key, sep, raw_value = text.partition("=")
    path = [part for part in key.strip().split(".") if part]
    if not sep or len(path) < 2:
        raise _click.BadParameter(
            f"expected SECTION.ID.ATTR=VALUE, got {text!r}",
            param_hint="--set",
        )

    try:
        value: _typing.Any = _json.loads(raw_value)
    except _json.JSONDecodeError:
        value = raw_value

    partial: dict[str, _typing.Any] = {path[-1]: value}
    for part in reversed(path[:-1]):
        partial = {part: partial}
    return partial


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(sdkconf.__version__, "-v", "--version", prog_name="sdkconf")
@_click.option(
    "--defaults",
    "defaults_path",
    type=_click.Path(dir_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Defaults file to use instead of the bundled one",
)
@_click.option(
    "--overrides",
    "override_paths",
    type=_click.Path(dir_okay=False, path_type=_pathlib.Path),
    multiple=True,
    help="YAML override file, applied in order (repeatable)",
)
@_click.option(
    "--set",
    "assignments",
    metavar="SECTION.ID.ATTR=VALUE",
    multiple=True,
    help="Override one attribute, e.g. tokens.USDC.decimals=6 (repeatable)",
)
@_click.option("--verbose", is_flag=True, help="Enable debug logging")
@_click.pass_context
def cli(
    ctx: _click.Context,
    defaults_path: _pathlib.Path | None,
    override_paths: tuple[_pathlib.Path, ...],
    assignments: tuple[str, ...],
    verbose: bool,
) -> None:
    """sdkconf - inspect layered SDK configuration.

    Settings are also read from SDKCONF_* environment variables
    (SDKCONF_DEFAULTS_PATH, SDKCONF_OVERRIDES_PATH, SDKCONF_LOG_LEVEL).
    """
    settings_kwargs: dict[str, _typing.Any] = {}
    if defaults_path is not None:
        settings_kwargs["defaults_path"] = defaults_path
    try:
        settings = config.Settings(**settings_kwargs)
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"invalid SDKCONF_* setting: {e}") from e

    _configure_logging("DEBUG" if verbose else settings.log_level)

    partials = [parse_assignment(text) for text in assignments]

    try:
        store = config.ConfigurationStore.from_settings(settings)
        for path in override_paths:
            store.load_overrides(path)
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from e

    for partial in partials:
        store.update_configuration(partial)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["store"] = store


@cli.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.option("--provenance", is_flag=True, help="Show whether each value is a default or an override")
@_click.option("--section", type=str, default=None, help="Show specific section only")
@_click.option(
    "--color/--no-color",
    "use_color",
    default=None,
    help="Enable/disable syntax highlighting (default: auto-detect TTY)",
)
@_click.pass_context
def show(
    ctx: _click.Context,
    as_json: bool,
    provenance: bool,
    section: str | None,
    use_color: bool | None,
) -> None:
    """Show the effective configuration.

    Examples:
        sdkconf show                                  # YAML
        sdkconf show --json                           # JSON
        sdkconf --set tokens.USDC.decimals=18 show --provenance
    """
    store: config.ConfigurationStore = ctx.obj["store"]
    data = store.effective_configuration()

    if section:
        if section not in data:
            raise _click.ClickException(f"Unknown section: {section}")
        data = {section: data[section]}

    if as_json:
        _click.echo(_json.dumps(data, indent=2))
    elif provenance:
        for name in data:
            _, origins = store.get_with_provenance(name)
            for line in _flatten(data[name], origins, name):
                _click.echo(line)
    else:
        yaml_text = _yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        color_enabled, force_color = _should_use_color(use_color)
        _print_yaml(yaml_text, color=color_enabled, force_color=force_color)


def _flatten(
    value: _typing.Any,
    origins: _typing.Any,
    prefix: str,
) -> _typing.Iterator[str]:
    """Yield "path: value  # origin" for every leaf, and "path: {}" for empty dicts."""
    if isinstance(value, dict) and not value:
        yield f"{prefix}: {{}}"
        return
    if isinstance(value, dict) and isinstance(origins, dict):
        for key, item in value.items():
            yield from _flatten(item, origins.get(key), f"{prefix}.{key}")
        return
    yield f"{prefix}: {_json.dumps(value)}  # {origins}"


def _should_use_color(cli_flag: bool | None) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. CLI flag (--color / --no-color) if specified
    2. NO_COLOR env var (if set, disable color)
    3. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
        force_color is True when color was explicitly requested.
    """
    if cli_flag is not None:
        return (cli_flag, cli_flag)

    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)

    return (_sys.stdout.isatty(), False)


def _print_yaml(yaml_text: str, *, color: bool = True, force_color: bool = False) -> None:
    """Print YAML text, optionally with syntax highlighting."""
    if not color:
        _click.echo(yaml_text)
        return

    console = _rich_console.Console(
        force_terminal=force_color,
        no_color=False if force_color else None,
        color_system="truecolor" if force_color else "auto",
    )
    syntax = _rich_syntax.Syntax(
        yaml_text,
        "yaml",
        theme="monokai",
        background_color="default",
    )
    console.print(syntax)


@cli.command(name="token")
@_click.argument("symbol")
@_click.pass_context
def token(ctx: _click.Context, symbol: str) -> None:
    """Show the effective attributes of one token."""
    store: config.ConfigurationStore = ctx.obj["store"]
    tokens = store.tokens

    def _display(value: _typing.Any) -> str:
        return UNKNOWN if value is None else str(value)

    _click.echo(f"Token {symbol}:")
    _click.echo(f"  Decimals: {_display(tokens.get_decimals(symbol))}")
    _click.echo(f"  Address: {_display(tokens.get_address(symbol))}")
    _click.echo(f"  Name: {_display(tokens.get_name(symbol))}")


@cli.command(name="audit")
@_click.pass_context
def audit(ctx: _click.Context) -> None:
    """List attributes that no section schema recognizes (possible typos)."""
    store: config.ConfigurationStore = ctx.obj["store"]
    unknown = store.find_unknown_attributes()

    if not unknown:
        _click.echo("No unknown attributes.")
        return

    _click.echo(f"Unknown attributes ({len(unknown)}):")
    for path, value in sorted(unknown.items()):
        _click.echo(f"  {path} = {value!r}")


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="sdkconf")


if __name__ == "__main__":
    main()
