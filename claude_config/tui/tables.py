from rich.markup import escape
from rich.table import Column, Table

from claude_config.models import (
    AppSettings,
    DirectoryEntry,
    PathInfo,
    ProjectInfo,
    SubdirectoryOverride,
)
from claude_config.tui.enums import EXISTS_STYLE, UIStyle
from claude_config.utils import compact_home_path


def _exists_text(info: PathInfo) -> str:
    style = EXISTS_STYLE[info.exists]
    if not info.exists:
        label = "missing"
    elif info.is_directory:
        label = "dir"
    else:
        label = "file"
    return f"[{style}]{label}[/{style}]"


class PathsTable:
    @staticmethod
    def slots_table(slots: list[tuple[str, PathInfo]]) -> Table:
        table = Table(
            Column(header="Slot", width=20),
            Column(header="Status", width=8),
            Column(header="Path", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for name, info in slots:
            table.add_row(name, _exists_text(info), escape(compact_home_path(info.path)))
        return table

    @staticmethod
    def info_table(info: PathInfo) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Path", escape(compact_home_path(info.path)))
        table.add_row("Exists", "yes" if info.exists else "no")
        table.add_row("Directory", "yes" if info.is_directory else "no")
        return table


class ProjectTable:
    @staticmethod
    def projects_table(projects: list[ProjectInfo]) -> Table:
        table = Table(
            Column(header="Project", width=24),
            Column(header="CLAUDE.md", width=10),
            Column(header="Config", width=8, justify="right"),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for project in projects:
            present = sum(1 for _, info in project.config_files.slots() if info.exists)
            marker = (
                f"[{UIStyle.GREEN.value}]yes[/{UIStyle.GREEN.value}]"
                if project.has_instructions_file
                else f"[{UIStyle.DIM.value}]no[/{UIStyle.DIM.value}]"
            )
            table.add_row(
                escape(project.name),
                marker,
                str(present),
                escape(compact_home_path(project.path)),
            )
        return table


class OverrideTable:
    @staticmethod
    def overrides_table(overrides: list[SubdirectoryOverride]) -> Table:
        table = Table(
            Column(header="Subdirectory", width=32, overflow="fold"),
            Column(header="File", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for item in overrides:
            table.add_row(escape(item.relative_path), escape(compact_home_path(item.full_path)))
        return table


class DirectoryTable:
    @staticmethod
    def entries_table(entries: list[DirectoryEntry]) -> Table:
        table = Table(
            Column(header="Type", width=6),
            Column(header="Name", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for entry in entries:
            if entry.is_directory:
                table.add_row(
                    f"[{UIStyle.CYAN.value}]dir[/{UIStyle.CYAN.value}]",
                    f"{escape(entry.name)}/",
                )
            else:
                table.add_row("file", escape(entry.name))
        return table


class SettingsTable:
    @staticmethod
    def settings_table(settings: AppSettings, location: str) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("File", escape(compact_home_path(location)))
        table.add_row(
            "Base dir",
            escape(compact_home_path(settings.scan_base_dir))
            if settings.scan_base_dir
            else "(not set)",
        )
        table.add_row("Max depth", str(settings.max_depth))
        return table
