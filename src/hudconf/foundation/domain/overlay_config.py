"""Typed overlay configuration record.

``OverlayConfig()`` returns a fully defaulted configuration. Every field has
a default, so a record is always total: a key missing from the input simply
keeps its default. Instances are frozen; loading a configuration produces a
new instance via ``model_copy(update=...)`` instead of mutating a live one.

Range constraints (``ge``/``le``/``gt``) are declared on the fields and are
enforced per field by the decoder. Out-of-range input is rejected, never
clamped.

Cross-field dependencies are advisory only. ``gpu_mem_clock`` and
``gpu_mem_temp`` are meaningful only when ``vram`` is enabled, but the
record stores them as given; see ``unmet_dependencies()``.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from hudconf.foundation.domain.chords import Chord
from hudconf.foundation.domain.colors import (
    ALMOST_BLACK,
    BLACK,
    BLUE,
    DARK_LIME_GREEN,
    DARK_RED,
    GREEN,
    LIGHT_MAGENTA,
    LIGHT_PINK,
    LIGHT_RED,
    LIGHT_VIOLET,
    LIME_GREEN,
    SOFT_RED,
    VIVID_YELLOW,
    WHITE,
    Color,
)
from hudconf.foundation.domain.enums import (
    FcatOverlayEdge,
    FpsLimitMethod,
    HudPosition,
    HudPreset,
    VSync,
)

U8 = Annotated[int, Field(ge=0, le=255)]
U16 = Annotated[int, Field(ge=0, le=65535)]
MipBias = Annotated[int, Field(ge=-16, le=16)]
Anisotropy = Annotated[int, Field(ge=0, le=16)]
ColorRamp = tuple[Color, Color, Color]

ADVISORY_DEPENDENCIES: dict[str, str] = {
    "gpu_mem_clock": "vram",
    "gpu_mem_temp": "vram",
}
"""Field -> toggle it needs to be meaningful. Enforced by the renderer."""


class OverlayConfig(BaseModel):
    """Immutable overlay configuration snapshot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Performance
    fps_limit: tuple[U16, ...] = Field(default=(0,), min_length=1)
    fps_limit_method: FpsLimitMethod = FpsLimitMethod.LATE
    vsync: VSync | None = None
    gl_vsync: U16 | None = None
    picmip: MipBias | None = None  # mip-map LoD bias
    af: Anisotropy | None = None  # anisotropic filtering level
    bicubic: bool = False
    trilinear: bool = False
    retro: bool = False  # disable linear texture filtering

    # Core visual
    legacy_layout: bool = True
    preset: HudPreset = HudPreset.DEFAULT
    histogram: bool = False  # replaces the frametime line graph
    custom_text_center: str = ""
    time: bool = False
    time_format: str = "%T"
    version: bool = False

    # GPU
    gpu_stats: bool = True
    gpu_temp: bool = False
    gpu_junction_temp: bool = False
    gpu_core_clock: bool = False
    gpu_mem_temp: bool = False
    gpu_mem_clock: bool = False
    gpu_power: bool = False
    gpu_text: str = ""
    gpu_load_change: bool = False
    gpu_load_value: tuple[U8, U8] = (60, 90)  # medium, high
    gpu_load_color: ColorRamp = (GREEN, VIVID_YELLOW, DARK_RED)

    # CPU
    cpu_stats: bool = True
    cpu_temp: bool = False
    cpu_power: bool = False
    cpu_text: str = ""
    cpu_mhz: bool = False
    cpu_load_change: bool = False
    cpu_load_value: tuple[U8, U8] = (60, 90)
    cpu_load_color: ColorRamp = (GREEN, VIVID_YELLOW, DARK_RED)
    core_load: bool = False
    core_load_change: bool = False

    # App IO
    io_read: bool = False
    io_write: bool = False

    # Storage usage
    vram: bool = False
    ram: bool = False
    swap: bool = False

    # Per-process memory
    procmem: bool = False
    procmem_shared: bool = False
    procmem_virt: bool = False

    # Battery
    battery: bool = False
    battery_icon: bool = False
    gamepad_battery: bool = False
    gamepad_battery_icon: bool = False

    # FPS
    fps: bool = True
    fps_sampling_period: timedelta = timedelta(milliseconds=500)
    fps_color_change: bool = False
    fps_value: tuple[U8, U8] = (30, 60)
    fps_color: ColorRamp = (DARK_RED, VIVID_YELLOW, GREEN)
    frametime: bool = True
    frame_timing: bool = True
    frame_count: bool = False
    show_fps_limit: bool = False

    # Misc info
    throttling_status: bool = False
    engine_version: bool = False
    gpu_name: bool = False
    vulkan_driver: bool = False
    wine: bool = False
    exec_name: bool = False
    arch: bool = False
    gamemode: bool = False
    vkbasalt: bool = False
    resolution: bool = False
    custom_text: str = ""
    exec: str = ""  # shell command, output shown in the HUD

    # Media player
    media_player: bool = False
    media_player_name: str = ""
    media_player_format: str = "{title};{artist};{album}"

    # Font
    font_size: float = Field(default=24.0, gt=0)
    font_scale: float = Field(default=1.0, gt=0)
    font_size_text: float = Field(default=24.0, gt=0)
    font_scale_media_player: float = Field(default=0.55, gt=0)
    no_small_font: bool = False
    font_file: Path | None = None
    font_file_text: Path | None = None
    font_glyph_ranges: tuple[str, ...] = ()
    text_outline: bool = True
    text_outline_thickness: float = Field(default=1.5, ge=0)

    # Appearance
    position: HudPosition = HudPosition.TOP_LEFT
    round_corners: float = Field(default=0.0, ge=0)
    hud_no_margin: bool = False
    hud_compact: bool = False
    horizontal: bool = False
    horizontal_stretch: bool = True  # only applies when horizontal is set
    no_display: bool = False
    offset_x: float = 0.0
    offset_y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=140.0, ge=0)
    table_columns: int = Field(default=3, ge=1, le=255)
    cellpadding_y: float = -0.085
    background_alpha: float = Field(default=0.5, ge=0, le=1)
    alpha: float = Field(default=1.0, ge=0, le=1)

    # FCAT overlay
    fcat: bool = False
    fcat_overlay_width: U16 = 24
    fcat_screen_edge: FcatOverlayEdge = FcatOverlayEdge.LEFT

    # Colors
    text_color: Color = WHITE
    gpu_color: Color = DARK_LIME_GREEN
    cpu_color: Color = BLUE
    vram_color: Color = LIGHT_MAGENTA
    ram_color: Color = LIGHT_PINK
    engine_color: Color = SOFT_RED
    io_color: Color = LIGHT_VIOLET
    frametime_color: Color = LIME_GREEN
    background_color: Color = ALMOST_BLACK
    media_player_color: Color = WHITE
    wine_color: Color = SOFT_RED
    battery_color: Color = LIGHT_RED
    text_outline_color: Color = BLACK

    # Misc
    pci_dev: str = ""
    blacklist: tuple[str, ...] = ()  # program names the HUD is not shown for
    control: str = ""  # control socket name

    # OpenGL workarounds
    gl_bind_framebuffer: U16 | None = None

    # Key bindings
    toggle_hud: Chord = Chord.of("Shift_R", "F12")
    toggle_hud_position: Chord = Chord.of("Shift_R", "F11")
    toggle_fps_limit: Chord = Chord.of("Shift_L", "F1")
    toggle_logging: Chord = Chord.of("Shift_L", "F2")
    reload_cfg: Chord = Chord.of("Shift_L", "F4")
    upload_log: Chord = Chord.of("Shift_L", "F3")

    # Logging
    autostart_log: bool = False
    log_duration: timedelta = timedelta(0)
    log_interval: timedelta = timedelta(0)
    output_folder: Path | None = None
    permit_upload: bool = False
    benchmark_percentiles: str = "97+AVG"

    def unmet_dependencies(self) -> dict[str, str]:
        """Enabled fields whose prerequisite toggle is disabled.

        Returns:
            Mapping of field name -> name of the disabled prerequisite.
            Empty when every advisory dependency is satisfied.
        """
        return {
            field: required
            for field, required in ADVISORY_DEPENDENCIES.items()
            if getattr(self, field) and not getattr(self, required)
        }
