"""leafcfg command-line interface.

Inspect and edit the settings document from a shell: show the effective
settings, resolve resource paths, change individual keys and manage web
bookmarks.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, Final

import typer
import yaml

from leafcfg.common.enums import Language
from leafcfg.environment import RuntimeEnvironment
from leafcfg.errors import FormatError, SettingsError
from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.loader import ConfigLoader, parse_document
from leafcfg.settings.models import Settings, Tracked
from leafcfg.system.locale import StaticLocale
from leafcfg.ui.color import Color

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Device settings CLI", add_completion=False)
config_app = typer.Typer(help="Settings document helpers")
bookmark_app = typer.Typer(help="Web bookmark helpers")
app.add_typer(config_app, name="config")
app.add_typer(bookmark_app, name="bookmark")

logger: Final = logging.getLogger(__name__)  # Will be "leafcfg.cli"

DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FORMAT_OPTION = typer.Option("json", "--format", "-f", help="Output format [json|yaml]")
KEY_ARGUMENT = typer.Argument(..., help="Setting to change (see `config keys`)")
FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Settings JSON file")

TRUE_WORDS: Final = {"1", "true", "yes", "on"}
FALSE_WORDS: Final = {"0", "false", "no", "off"}


# ── helpers ──────────────────────────────────────────────────────────────────
def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _environment() -> RuntimeEnvironment:
    try:
        return RuntimeEnvironment.from_env()
    except RuntimeError as exc:
        raise _fail(str(exc)) from exc


def _load(env: RuntimeEnvironment) -> Settings:
    try:
        return env.loader().load()
    except SettingsError as exc:
        raise _fail(f"Unable to load settings: {exc}") from exc


def _save(env: RuntimeEnvironment, settings: Settings) -> None:
    try:
        env.serializer().save(settings)
    except SettingsError as exc:
        raise _fail(f"Unable to save settings: {exc}") from exc
    logger.info("Settings written to %s", env.settings_path)


def _tracked(field: Tracked[Any], render: Callable[[Any], Any] = lambda v: v) -> dict[str, Any]:
    value = field.value
    return {"value": None if value is None else render(value), "explicit": field.present}


def summarize(settings: Settings) -> dict[str, Any]:
    """Effective settings as plain data, with a presence flag per field."""
    return {
        "language": _tracked(settings.language, lambda lang: lang.code),
        "external_romfs": _tracked(settings.external_romfs),
        "menu_item_size": _tracked(settings.menu_item_size),
        "color_scheme": _tracked(
            settings.color_scheme,
            lambda scheme: {name: color.to_hex() for name, color in scheme},
        ),
        "scrollbar_color": _tracked(settings.scrollbar_color, Color.to_hex),
        "progressbar_color": _tracked(settings.progressbar_color, Color.to_hex),
        "ignore_required_fw_version": settings.ignore_required_fw_version,
        "bookmarks": [bmk.model_dump() for bmk in settings.bookmarks],
    }


def parse_bool(value: str) -> bool:
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise FormatError(f"expected a boolean, got {value!r}")


def parse_menu_item_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError as exc:
        raise FormatError(f"expected an integer, got {value!r}", original_error=exc) from exc
    if size <= 0:
        raise FormatError(f"menu item size must be positive, got {size}")
    return size


# Setters for `config set`, keyed by CLI name
SETTERS: Final[dict[str, Callable[[Settings, str], None]]] = {
    "language": lambda s, v: s.language.override(Language.from_code(v)),
    "external-romfs": lambda s, v: s.set_external_romfs(v),
    "menu-item-size": lambda s, v: s.menu_item_size.override(parse_menu_item_size(v)),
    "background": lambda s, v: s.set_scheme_color("background", Color.from_hex(v)),
    "base": lambda s, v: s.set_scheme_color("base", Color.from_hex(v)),
    "base-focus": lambda s, v: s.set_scheme_color("base_focus", Color.from_hex(v)),
    "text": lambda s, v: s.set_scheme_color("text", Color.from_hex(v)),
    "scrollbar": lambda s, v: s.scrollbar_color.override(Color.from_hex(v)),
    "progressbar": lambda s, v: s.progressbar_color.override(Color.from_hex(v)),
    "ignore-required-fw-version": lambda s, v: setattr(
        s, "ignore_required_fw_version", parse_bool(v)
    ),
}

# Tracked fields `config unset` can clear, keyed by CLI name
UNSETTABLE: Final[dict[str, str]] = {
    "language": "language",
    "external-romfs": "external_romfs",
    "menu-item-size": "menu_item_size",
    "color-scheme": "color_scheme",
    "scrollbar": "scrollbar_color",
    "progressbar": "progressbar_color",
}


# ── top-level commands ───────────────────────────────────────────────────────
@app.callback()
def main(debug: bool = DEBUG_OPTION) -> None:
    """Inspect and edit device settings."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command()
def show(output_format: str = FORMAT_OPTION) -> None:
    """Print the effective settings and which of them are customized."""
    data = summarize(_load(_environment()))
    if output_format == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    elif output_format == "json":
        typer.echo(json.dumps(data, indent=4))
    else:
        raise _fail(f"Unknown format: {output_format}")


@app.command()
def resolve(logical_path: str) -> None:
    """Print where a resource would be loaded from."""
    env = _environment()
    typer.echo(env.resource_resolver(_load(env)).resolve(logical_path))


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path = FILE_ARGUMENT) -> None:
    """Validate a settings JSON file without installing it."""
    defaults = DefaultsResolver(StaticLocale("en-US")).resolve()
    try:
        settings = ConfigLoader.overlay(defaults, parse_document(file.read_bytes()))
    except SettingsError as exc:
        raise _fail(str(exc)) from exc
    explicit = ", ".join(settings.explicit_fields()) or "none"
    typer.echo(f"✅ Settings valid (customized: {explicit})")


@config_app.command("path")
def show_path() -> None:
    """Print the device and host path of the settings document."""
    env = _environment()
    typer.echo(f"{env.settings_path} -> {env.explorer().host_path(env.settings_path)}")


@config_app.command("keys")
def list_keys() -> None:
    """List the keys accepted by `config set`."""
    for key in SETTERS:
        typer.echo(key)


@config_app.command("set")
def set_value(key: str = KEY_ARGUMENT, value: str = typer.Argument(...)) -> None:
    """Customize one setting and save."""
    setter = SETTERS.get(key)
    if setter is None:
        raise _fail(f"Unknown key: {key} (expected one of: {', '.join(SETTERS)})")
    env = _environment()
    settings = _load(env)
    try:
        setter(settings, value)
    except FormatError as exc:
        raise _fail(f"Invalid value for {key}: {exc}") from exc
    _save(env, settings)
    typer.secho(f"{key} set", fg=typer.colors.GREEN)


@config_app.command("unset")
def unset_value(key: str = KEY_ARGUMENT) -> None:
    """Return one setting to its default and save."""
    env = _environment()
    settings = _load(env)
    if key == "ignore-required-fw-version":
        settings.ignore_required_fw_version = True
    elif key in UNSETTABLE:
        getattr(settings, UNSETTABLE[key]).clear()
    else:
        options = ", ".join([*UNSETTABLE, "ignore-required-fw-version"])
        raise _fail(f"Unknown key: {key} (expected one of: {options})")
    _save(env, settings)
    typer.secho(f"{key} reset to default", fg=typer.colors.GREEN)


@config_app.command("reset")
def reset_config() -> None:
    """Delete the settings document so every default applies."""
    env = _environment()
    try:
        env.explorer().delete_file(env.settings_path)
    except SettingsError as exc:
        raise _fail(str(exc)) from exc
    typer.secho("Settings reset", fg=typer.colors.GREEN)


# ───────────────────────── bookmark sub-commands ─────────────────────────────
@bookmark_app.command("list")
def list_bookmarks() -> None:
    """Print saved bookmarks in order."""
    for bmk in _load(_environment()).bookmarks:
        typer.echo(f"{bmk.name}\t{bmk.url}")


@bookmark_app.command("add")
def add_bookmark(name: str, url: str) -> None:
    """Append a bookmark and save."""
    env = _environment()
    settings = _load(env)
    if not settings.add_bookmark(name, url):
        raise _fail("Bookmark name and URL cannot be empty")
    _save(env, settings)
    typer.secho(f"Bookmark {name!r} added", fg=typer.colors.GREEN)


@bookmark_app.command("remove")
def remove_bookmark(name: str) -> None:
    """Remove bookmarks by name and save."""
    env = _environment()
    settings = _load(env)
    removed = settings.remove_bookmark(name)
    if not removed:
        raise _fail(f"No bookmark named {name!r}")
    _save(env, settings)
    typer.secho(f"Removed {removed} bookmark(s)", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
