import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from claude_config.models import (
    AppSettings,
    DirectoryEntry,
    OutputFormat,
    OverrideScan,
    PathInfo,
    ProjectScan,
    WellKnownPaths,
)
from claude_config.tui.enums import EXISTS_STYLE, UIStyle
from claude_config.tui.sections import UISection
from claude_config.tui.tables import (
    DirectoryTable,
    OverrideTable,
    PathsTable,
    ProjectTable,
    SettingsTable,
)
from claude_config.utils import compact_home_path, compact_home_paths_in_text


class ConfigConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_data(self, payload: Any, output_format: OutputFormat) -> None:
        if output_format == OutputFormat.YAML:
            text = yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(payload, indent=2)
        self.console.file.write(text if text.endswith("\n") else text + "\n")

    def render_paths(self, paths: WellKnownPaths, platform: str) -> None:
        self.console.print(
            UISection.wrap(
                "enterprise",
                PathsTable.slots_table(paths.enterprise.slots()),
                style=UIStyle.MAGENTA.value,
                subtitle=platform,
            )
        )
        self.console.print(
            UISection.wrap(
                "user",
                PathsTable.slots_table(paths.user.slots()),
                style=UIStyle.BLUE.value,
            )
        )

    def render_path_info(self, info: PathInfo) -> None:
        style = UIStyle.GREEN.value if info.exists else UIStyle.YELLOW.value
        self.console.print(
            UISection.wrap("path info", PathsTable.info_table(info), style=style)
        )

    def render_projects(self, scan: ProjectScan, verbose: bool = False) -> None:
        if not scan.projects:
            self.console.print(
                UISection.note(
                    "projects",
                    f"No projects found in {escape(compact_home_path(scan.base_dir))}.",
                    style=UIStyle.YELLOW.value,
                )
            )
        else:
            self.console.print(
                UISection.wrap(
                    "projects",
                    ProjectTable.projects_table(scan.projects),
                    style=UIStyle.BLUE.value,
                    subtitle=escape(compact_home_path(scan.base_dir)),
                )
            )
            if verbose:
                for project in scan.projects:
                    self.console.print(
                        UISection.wrap(
                            escape(project.name),
                            PathsTable.slots_table(project.config_files.slots()),
                            style=UIStyle.CYAN.value,
                        )
                    )
        self._render_skipped(scan.skipped)

    def render_overrides(self, scan: OverrideScan) -> None:
        if not scan.overrides:
            self.console.print(
                UISection.note(
                    "overrides",
                    "No subdirectory CLAUDE.md files found.",
                    style=UIStyle.YELLOW.value,
                )
            )
        else:
            self.console.print(
                UISection.wrap(
                    "overrides",
                    OverrideTable.overrides_table(scan.overrides),
                    style=UIStyle.CYAN.value,
                    subtitle=f"max depth {scan.max_depth}",
                )
            )
        self._render_skipped(scan.skipped)

    def render_tree(
        self,
        paths: WellKnownPaths,
        projects: ProjectScan | None,
        overrides: dict[str, OverrideScan],
    ) -> None:
        root = Tree("[bold]configuration[/bold]")

        enterprise = root.add(f"[{UIStyle.MAGENTA.value}]enterprise[/{UIStyle.MAGENTA.value}]")
        for name, info in paths.enterprise.slots():
            enterprise.add(_tree_label(name, info))

        user = root.add(f"[{UIStyle.BLUE.value}]user[/{UIStyle.BLUE.value}]")
        for name, info in paths.user.slots():
            user.add(_tree_label(name, info))

        if projects is not None:
            projects_node = root.add(
                f"[{UIStyle.CYAN.value}]projects[/{UIStyle.CYAN.value}] "
                f"({escape(compact_home_path(projects.base_dir))})"
            )
            for project in projects.projects:
                node = projects_node.add(f"[bold]{escape(project.name)}[/bold]")
                for name, info in project.config_files.slots():
                    if info.exists:
                        node.add(_tree_label(name, info))
                project_overrides = overrides.get(project.path)
                if project_overrides is None:
                    continue
                for item in project_overrides.overrides:
                    node.add(
                        f"{escape(item.relative_path)} "
                        f"[{UIStyle.DIM.value}]{escape(compact_home_path(item.full_path))}[/{UIStyle.DIM.value}]"
                    )

        self.console.print(root)
        if projects is not None:
            self._render_skipped(projects.skipped)

    def render_directory(self, path: str, entries: list[DirectoryEntry]) -> None:
        if not entries:
            self.console.print(
                UISection.note(
                    escape(compact_home_path(path)), "(empty)", style=UIStyle.DIM.value
                )
            )
            return
        self.console.print(
            UISection.wrap(
                escape(compact_home_path(path)),
                DirectoryTable.entries_table(entries),
                style=UIStyle.BLUE.value,
            )
        )

    def render_settings(self, settings: AppSettings, location: str) -> None:
        self.console.print(
            UISection.wrap(
                "settings",
                SettingsTable.settings_table(settings, location),
                style=UIStyle.BLUE.value,
            )
        )

    def render_done(self, title: str, message: str, removed: bool = False) -> None:
        style = UIStyle.YELLOW.value if removed else UIStyle.GREEN.value
        self.console.print(
            UISection.note(title, escape(compact_home_paths_in_text(message)), style=style)
        )

    def _render_skipped(self, skipped: list[str]) -> None:
        if not skipped:
            return
        skipped_text = "\n".join(
            [f"- {escape(compact_home_paths_in_text(item))}" for item in skipped]
        )
        self.console.print(
            UISection.note("skipped (unreadable)", skipped_text, style=UIStyle.YELLOW.value)
        )


def _tree_label(name: str, info: PathInfo) -> str:
    style = EXISTS_STYLE[info.exists]
    return f"[{style}]{name}[/{style}] {escape(compact_home_path(info.path))}"
