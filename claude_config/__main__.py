from pathlib import Path
from typing import Any, Callable, Dict

import click
from rich.console import Console

from claude_config.constants import DEFAULT_MAX_DEPTH
from claude_config.errors import ConfigManagerError
from claude_config.filesystem import (
    create_directory_tree,
    delete_path,
    list_directory,
    read_file,
    write_file,
)
from claude_config.log import setup_logging
from claude_config.models import AppSettings, OutputFormat, OverrideScan, Platform, ProjectScan
from claude_config.overrides import OverrideScanner
from claude_config.paths import current_platform, get_config_paths, get_path_info
from claude_config.projects import ProjectService
from claude_config.settings_repository import SettingsRepository
from claude_config.tui import ConfigConsoleUI


FORMAT_VALUES = [item.value for item in OutputFormat]
PLATFORM_VALUES = [item.value for item in Platform]


def _format_option() -> Callable:
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(FORMAT_VALUES, case_sensitive=False),
        default=OutputFormat.TABLE.value,
        show_default=True,
        help="Output format.",
    )


def _max_depth_option() -> Callable:
    return click.option(
        "--max-depth",
        type=click.IntRange(min=0),
        default=None,
        help=f"Recursion limit for subdirectory scans (settings default, else {DEFAULT_MAX_DEPTH}).",
    )


def _settings_from_obj(obj: Dict[str, Any]) -> SettingsRepository:
    return obj.get("settings") or SettingsRepository()


def _load_settings(repo: SettingsRepository) -> AppSettings:
    try:
        return repo.load()
    except ConfigManagerError as exc:
        raise click.ClickException(str(exc))


def _resolve_base_dir(base_dir: Path | None, settings: AppSettings) -> Path | None:
    if base_dir is not None:
        return base_dir
    if settings.scan_base_dir:
        return Path(settings.scan_base_dir)
    return None


def _is_structured(output_format: str) -> bool:
    return OutputFormat(output_format.lower()) != OutputFormat.TABLE


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Browse Claude configuration across enterprise, user and project scopes."""
    setup_logging(verbose)
    ctx.obj = {"settings": SettingsRepository()}


@cli.command(help="Show enterprise and user configuration paths.")
@click.option(
    "--platform",
    "platform_name",
    type=click.Choice(PLATFORM_VALUES, case_sensitive=False),
    default=None,
    help="Resolve paths as if running on this platform.",
)
@_format_option()
def paths(platform_name: str | None, output_format: str) -> None:
    ui = ConfigConsoleUI(Console())
    platform = Platform(platform_name.lower()) if platform_name else current_platform()
    result = get_config_paths(platform=platform)

    if _is_structured(output_format):
        ui.render_data(result.as_dict(), OutputFormat(output_format.lower()))
        return
    ui.render_paths(result, platform=platform.value)


@cli.command(help="Show existence and type of a path.")
@click.argument("path")
@_format_option()
def info(path: str, output_format: str) -> None:
    ui = ConfigConsoleUI(Console())
    result = get_path_info(path)

    if _is_structured(output_format):
        ui.render_data(result.as_dict(), OutputFormat(output_format.lower()))
    else:
        ui.render_path_info(result)

    if not result.exists:
        raise click.exceptions.Exit(1)


@cli.command(help="List projects found directly under a base directory.")
@click.argument("base_dir", required=False, type=click.Path(path_type=Path))
@click.option("--details", is_flag=True, help="Show per-project config files.")
@_format_option()
@click.pass_obj
def projects(
    obj: Dict[str, Any], base_dir: Path | None, details: bool, output_format: str
) -> None:
    ui = ConfigConsoleUI(Console())
    app_settings = _load_settings(_settings_from_obj(obj))
    resolved = _resolve_base_dir(base_dir, app_settings)
    if resolved is None:
        raise click.ClickException(
            "No base directory given and none configured. "
            "Run: claude-config settings set-base-dir <path>"
        )

    scan = ProjectService().scan(resolved)

    if _is_structured(output_format):
        ui.render_data(scan.as_dict(), OutputFormat(output_format.lower()))
        return
    ui.render_projects(scan, verbose=details)


@cli.command(help="Find CLAUDE.md overrides in project subdirectories.")
@click.argument("project", type=click.Path(path_type=Path))
@_max_depth_option()
@_format_option()
@click.pass_obj
def overrides(
    obj: Dict[str, Any], project: Path, max_depth: int | None, output_format: str
) -> None:
    ui = ConfigConsoleUI(Console())
    if max_depth is None:
        max_depth = _load_settings(_settings_from_obj(obj)).max_depth

    scan = OverrideScanner().scan(project, max_depth=max_depth)

    if _is_structured(output_format):
        ui.render_data(scan.as_dict(), OutputFormat(output_format.lower()))
        return
    ui.render_overrides(scan)


@cli.command(help="Show every configuration scope as a single tree.")
@click.argument("base_dir", required=False, type=click.Path(path_type=Path))
@_max_depth_option()
@_format_option()
@click.pass_obj
def tree(
    obj: Dict[str, Any], base_dir: Path | None, max_depth: int | None, output_format: str
) -> None:
    ui = ConfigConsoleUI(Console())
    app_settings = _load_settings(_settings_from_obj(obj))
    depth = app_settings.max_depth if max_depth is None else max_depth

    well_known = get_config_paths()
    resolved = _resolve_base_dir(base_dir, app_settings)
    project_scan: ProjectScan | None = None
    override_scans: dict[str, OverrideScan] = {}
    if resolved is not None:
        project_scan = ProjectService().scan(resolved)
        scanner = OverrideScanner()
        for project in project_scan.projects:
            override_scans[project.path] = scanner.scan(project.path, max_depth=depth)

    if _is_structured(output_format):
        payload: dict[str, Any] = well_known.as_dict()
        if project_scan is not None:
            payload["projects"] = [
                {
                    **project.as_dict(),
                    "overrides": [
                        item.as_dict()
                        for item in override_scans[project.path].overrides
                    ],
                }
                for project in project_scan.projects
            ]
        ui.render_data(payload, OutputFormat(output_format.lower()))
        return
    ui.render_tree(well_known, project_scan, override_scans)


@cli.command(help="Print a config file's contents.")
@click.argument("path", type=click.Path(path_type=Path))
def read(path: Path) -> None:
    try:
        content = read_file(path)
    except ConfigManagerError as exc:
        raise click.ClickException(str(exc))
    click.echo(content, nl=False)


@cli.command(help="Write stdin (or --content) to a file, creating parent directories.")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--content", default=None, help="Text to write instead of stdin.")
def write(path: Path, content: str | None) -> None:
    ui = ConfigConsoleUI(Console())
    text = content if content is not None else click.get_text_stream("stdin").read()
    try:
        write_file(path, text)
    except ConfigManagerError as exc:
        raise click.ClickException(str(exc))
    ui.render_done("write", f"Saved: {path}")


@cli.command("ls", help="List a directory, directories first.")
@click.argument("path", type=click.Path(path_type=Path))
@_format_option()
def ls(path: Path, output_format: str) -> None:
    ui = ConfigConsoleUI(Console())
    try:
        entries = list_directory(path)
    except ConfigManagerError as exc:
        raise click.ClickException(str(exc))

    if _is_structured(output_format):
        ui.render_data(
            [entry.as_dict() for entry in entries], OutputFormat(output_format.lower())
        )
        return
    ui.render_directory(str(path), entries)


@cli.command("rm", help="Delete a file or a whole directory tree.")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
def rm(path: Path, yes: bool) -> None:
    ui = ConfigConsoleUI(Console())
    if not yes:
        click.confirm(f"Delete {path}?", abort=True)
    try:
        delete_path(path)
    except ConfigManagerError as exc:
        raise click.ClickException(str(exc))
    ui.render_done("delete", f"Deleted: {path}", removed=True)


@cli.command("mkdir", help="Create a directory and any missing parents.")
@click.argument("path", type=click.Path(path_type=Path))
def mkdir(path: Path) -> None:
    ui = ConfigConsoleUI(Console())
    try:
        create_directory_tree(path)
    except ConfigManagerError as exc:
        raise click.ClickException(str(exc))
    ui.render_done("mkdir", f"Created: {path}")


@cli.group(help="Manage persisted scan settings.")
def settings() -> None:
    pass


@settings.command("show", help="Show current settings.")
@_format_option()
@click.pass_obj
def settings_show(obj: Dict[str, Any], output_format: str) -> None:
    ui = ConfigConsoleUI(Console())
    repo = _settings_from_obj(obj)
    current = _load_settings(repo)
    if _is_structured(output_format):
        ui.render_data(current.as_dict(), OutputFormat(output_format.lower()))
        return
    ui.render_settings(current, str(repo.settings_path))


@settings.command("set-base-dir", help="Remember the directory scanned for projects.")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def settings_set_base_dir(obj: Dict[str, Any], path: Path) -> None:
    ui = ConfigConsoleUI(Console())
    repo = _settings_from_obj(obj)
    try:
        updated = repo.set_scan_base_dir(path)
    except (ValueError, ConfigManagerError) as exc:
        raise click.ClickException(str(exc))
    ui.render_settings(updated, str(repo.settings_path))


@settings.command("set-max-depth", help="Default recursion limit for override scans.")
@click.argument("depth", type=int)
@click.pass_obj
def settings_set_max_depth(obj: Dict[str, Any], depth: int) -> None:
    ui = ConfigConsoleUI(Console())
    repo = _settings_from_obj(obj)
    try:
        updated = repo.set_max_depth(depth)
    except (ValueError, ConfigManagerError) as exc:
        raise click.ClickException(str(exc))
    ui.render_settings(updated, str(repo.settings_path))


@settings.command("reset", help="Remove the settings file.")
@click.pass_obj
def settings_reset(obj: Dict[str, Any]) -> None:
    ui = ConfigConsoleUI(Console())
    repo = _settings_from_obj(obj)
    removed = repo.reset()
    message = "Settings reset to defaults." if removed else "No settings file to remove."
    ui.render_done("settings", message, removed=removed)


def main() -> int:
    try:
        rv = cli(standalone_mode=False)
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    # Non-standalone click returns the code of a raised Exit instead of raising.
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
