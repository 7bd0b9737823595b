"""Section models for both descriptor dialects.

Every section is a frozen dataclass built once by its parser. Map-valued
fields are read-only mappings with no ordering guarantee; consumers that
need deterministic output sort them (``to_text`` does).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence

from gdconfig.models.events import Action
from gdconfig.models.frozen import freeze_map


class Dialect(str, Enum):
    """Descriptor dialects understood by the parser."""

    PROJECT = "project"
    EXTENSION = "extension"
    ANY = "any"


class SectionKind(str, Enum):
    """Recognised ``[section]`` names."""

    # Extension descriptor (.gdextension)
    CONFIGURATION = "configuration"
    LIBRARIES = "libraries"
    ICONS = "icons"
    DEPENDENCIES = "dependencies"
    # Project descriptor (project.godot)
    APPLICATION = "application"
    AUTOLOAD = "autoload"
    DOTNET = "dotnet"
    RENDERING = "rendering"
    LAYER_NAMES = "layer_names"
    INPUT = "input"


def _quote(value: str) -> str:
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


# =============================================================================
# Extension descriptor sections
# =============================================================================


@dataclass(frozen=True)
class ConfigurationSection:
    """``[configuration]`` of an extension descriptor.

    Format::

        [configuration]
        entry_symbol="gdext_rust_init"
        compatibility.minimum="4.1"
        compatibility.maximum="4.2"
        reloadable=true
        android.aar_plugin=false
    """

    KIND: ClassVar[SectionKind] = SectionKind.CONFIGURATION

    entry_symbol: Optional[str] = None
    compatibility_minimum: Optional[str] = None
    compatibility_maximum: Optional[str] = None
    reloadable: Optional[bool] = None
    android_aar_plugin: Optional[bool] = None

    def to_text(self) -> str:
        """Render the section back to descriptor text, skipping unset fields."""
        lines = ["[configuration]"]
        if self.entry_symbol is not None:
            lines.append(f"entry_symbol={_quote(self.entry_symbol)}")
        if self.compatibility_minimum is not None:
            lines.append(f"compatibility.minimum={_quote(self.compatibility_minimum)}")
        if self.compatibility_maximum is not None:
            lines.append(f"compatibility.maximum={_quote(self.compatibility_maximum)}")
        if self.reloadable is not None:
            lines.append(f"reloadable={_bool_text(self.reloadable)}")
        if self.android_aar_plugin is not None:
            lines.append(f"android.aar_plugin={_bool_text(self.android_aar_plugin)}")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class LibrariesSection:
    """``[libraries]``: native library path per ``platform.target.arch`` key."""

    KIND: ClassVar[SectionKind] = SectionKind.LIBRARIES

    libraries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "libraries", freeze_map(self.libraries))

    def to_text(self) -> str:
        lines = ["[libraries]"]
        lines.extend(f"{key}={_quote(value)}" for key, value in sorted(self.libraries.items()))
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class IconsSection:
    """``[icons]``: editor icon path per class name."""

    KIND: ClassVar[SectionKind] = SectionKind.ICONS

    icons: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "icons", freeze_map(self.icons))

    def to_text(self) -> str:
        lines = ["[icons]"]
        lines.extend(f"{key}={_quote(value)}" for key, value in sorted(self.icons.items()))
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class DependenciesSection:
    """``[dependencies]``: per-platform map of source path to install path.

    Format::

        [dependencies]
        macos.release = {
            "res://bin/libdependency.macos.template_release.framework" : "Contents/Frameworks"
        }
        windows.debug = {
            "res://bin/libdependency.windows.template_debug.x86_64.dll" : ""
        }

    An empty install path is kept as ``""``. Every platform maps to a dict,
    possibly empty.
    """

    KIND: ClassVar[SectionKind] = SectionKind.DEPENDENCIES

    dependencies: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", freeze_map(self.dependencies))

    def to_text(self) -> str:
        lines = ["[dependencies]"]
        for platform, deps in sorted(self.dependencies.items()):
            lines.append(f"{platform} = {{")
            entries = sorted(deps.items())
            for index, (source, target) in enumerate(entries):
                comma = "," if index < len(entries) - 1 else ""
                lines.append(f"    {_quote(source)} : {_quote(target)}{comma}")
            lines.append("}")
        return "\n".join(lines) + "\n"


# =============================================================================
# Project descriptor sections
# =============================================================================


@dataclass(frozen=True)
class ApplicationSection:
    """``[application]`` of a project descriptor.

    Format::

        [application]
        config/name="ExampleProject"
        run/main_scene="res://src/assets/main.tscn"
        config/features=PackedStringArray("4.5", "GL Compatibility")
        config/icon="res://icon.svg"
    """

    KIND: ClassVar[SectionKind] = SectionKind.APPLICATION

    name: Optional[str] = None
    main_scene: Optional[str] = None
    icon: Optional[str] = None
    features: Optional[Sequence[str]] = None

    def __post_init__(self) -> None:
        if self.features is not None:
            object.__setattr__(self, "features", tuple(self.features))


@dataclass(frozen=True)
class AutoloadSection:
    """``[autoload]``: singleton path per autoload name.

    Paths keep their leading ``*`` marker, which flags an enabled singleton.
    """

    KIND: ClassVar[SectionKind] = SectionKind.AUTOLOAD

    autoloads: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "autoloads", freeze_map(self.autoloads))


@dataclass(frozen=True)
class DotnetSection:
    KIND: ClassVar[SectionKind] = SectionKind.DOTNET

    assembly_name: Optional[str] = None


@dataclass(frozen=True)
class RenderingSection:
    KIND: ClassVar[SectionKind] = SectionKind.RENDERING

    rendering_method: Optional[str] = None
    rendering_method_mobile: Optional[str] = None


@dataclass(frozen=True)
class LayerNamesSection:
    """``[layer_names]``: raw layer name per ``group/layer_N`` key."""

    KIND: ClassVar[SectionKind] = SectionKind.LAYER_NAMES

    layers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "layers", freeze_map(self.layers))


@dataclass(frozen=True)
class InputSection:
    """``[input]``: input actions keyed by name."""

    KIND: ClassVar[SectionKind] = SectionKind.INPUT

    actions: Mapping[str, Action] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", freeze_map(self.actions))

    def to_dict(self) -> Dict[str, Any]:
        return {"actions": {name: action.to_dict() for name, action in self.actions.items()}}


__all__ = [
    "ApplicationSection",
    "AutoloadSection",
    "ConfigurationSection",
    "DependenciesSection",
    "Dialect",
    "DotnetSection",
    "IconsSection",
    "InputSection",
    "LayerNamesSection",
    "LibrariesSection",
    "RenderingSection",
    "SectionKind",
]
