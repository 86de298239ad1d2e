"""CLI entrypoints for rendering previews, themes and settings."""

from __future__ import annotations

import argparse
import json
import math
import shutil
import sys
import time
from importlib import metadata
from pathlib import Path

from rtop_core import (
    AppConfig,
    PercentSampler,
    SampleHistory,
    config_path,
    config_to_dict,
    configure_logging,
    get_logger,
    load_config,
    save_config,
    theme_search_paths,
)
from rtop_renderer import (
    BoxDrawer,
    GraphRenderer,
    MeterRenderer,
    MetricKind,
    MetricPanel,
    RenderError,
    Theme,
    ThemeManager,
    ThemeNotFound,
    resolve_corner_style,
    resolve_graph_style,
)
from rtop_renderer.ansi import CSI, paint, paint_cells

CLEAR_HOME = f"{CSI}H{CSI}J"


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("rtop")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(Path(args.config).expanduser() if args.config else None)


def _theme_manager(cfg: AppConfig, override: str | None = None) -> ThemeManager:
    """Load every theme dir and select the configured theme.

    An explicit ``override`` must exist; a stale name in the settings file only
    logs and keeps the default.
    """
    manager = ThemeManager(theme_search_paths(cfg))
    manager.load_all()
    if override:
        manager.set_active(override)
        return manager
    try:
        manager.set_active(cfg.colors.theme)
    except ThemeNotFound as exc:
        get_logger("cli").warning(
            "%s, keeping %s",
            exc,
            manager.active_name,
            extra={"event": "theme_fallback", "theme": cfg.colors.theme},
        )
    return manager


def _use_color(args: argparse.Namespace, cfg: AppConfig) -> bool:
    if getattr(args, "color", None) is not None:
        return bool(args.color)
    return cfg.colors.enabled and sys.stdout.isatty()


def _read_values(raw: list[str]) -> list[float]:
    if not raw:
        raw = sys.stdin.read().split()
    return [float(v.replace(",", ".")) for v in raw]


def _synthetic_wave(count: int, period: float, base: float, amplitude: float, phase: float = 0.0) -> list[float]:
    return [max(0.0, min(100.0, base + amplitude * math.sin(i / period + phase))) for i in range(count)]


def cmd_themes_list(args: argparse.Namespace) -> int:
    cfg = _load(args)
    manager = _theme_manager(cfg)
    _print_json({"active": manager.active_name, "themes": manager.names()})
    return 0


def cmd_themes_show(args: argparse.Namespace) -> int:
    cfg = _load(args)
    theme = _theme_manager(cfg).get(args.name)
    if args.format == "toml":
        sys.stdout.write(theme.to_toml())
    else:
        payload = theme.to_dict()
        payload["warnings"] = list(theme.warnings)
        _print_json(payload)
    return 0


def cmd_graph(args: argparse.Namespace) -> int:
    cfg = _load(args)
    try:
        values = _read_values(args.values)
    except ValueError as exc:
        print(f"error: invalid sample value: {exc}", file=sys.stderr)
        return 2
    style = resolve_graph_style(args.style or cfg.graph.symbol)
    renderer = GraphRenderer(
        args.width,
        args.height or cfg.graph.height,
        style=style,
        inverted=args.inverted or cfg.graph.inverted,
        max_value=args.max,
    )

    if _use_color(args, cfg):
        theme = _theme_manager(cfg, args.theme).current()
        gradient = theme.gradient_for(MetricKind(args.metric)) if cfg.colors.gradients else None
        for span in renderer.render_styled(values, gradient=gradient, color=theme.main_fg):
            print(paint([span]))
    else:
        for line in renderer.render(values):
            print(line)
    return 0


def cmd_meter(args: argparse.Namespace) -> int:
    cfg = _load(args)
    meter = MeterRenderer(args.width)
    if _use_color(args, cfg):
        theme = _theme_manager(cfg, args.theme).current()
        gradient = theme.gradient_for(MetricKind(args.metric)) if cfg.colors.gradients else None
        print(paint_cells(meter.render_segmented(args.percent, gradient), empty_color=theme.meter_bg))
    else:
        print(meter.render(args.percent))
    return 0


def cmd_box(args: argparse.Namespace) -> int:
    cfg = _load(args)
    drawer = BoxDrawer(resolve_corner_style(args.corners or cfg.boxes.corners))
    for line in drawer.draw_box(args.width, args.height, args.title):
        print(line)
    return 0


def _panels(cfg: AppConfig, width: int, with_temp: bool) -> list[MetricPanel]:
    style = resolve_graph_style(cfg.graph.symbol)
    corners = resolve_corner_style(cfg.boxes.corners)
    metrics = [MetricKind.CPU, MetricKind.MEMORY]
    if with_temp:
        metrics.append(MetricKind.TEMPERATURE)
    return [
        MetricPanel(
            width,
            cfg.graph.height + 3,
            metric.value,
            metric,
            graph_style=style,
            corner_style=corners,
            gradients=cfg.colors.gradients,
            inverted=cfg.graph.inverted,
        )
        for metric in metrics
    ]


def _render_frame(panels: list[MetricPanel], histories: list[SampleHistory], theme: Theme, color: bool) -> str:
    out: list[str] = []
    for panel, history in zip(panels, histories):
        samples = history.resampled(2 * (panel.width - 2))
        for line in panel.render(theme, samples, history.latest or 0.0):
            out.append(paint(line, enabled=color))
    return "\n".join(out)


def cmd_preview(args: argparse.Namespace) -> int:
    cfg = _load(args)
    manager = _theme_manager(cfg, args.theme)
    color = _use_color(args, cfg)
    width = args.width or max(20, min(100, shutil.get_terminal_size((80, 24)).columns))
    size = cfg.history.size

    if not args.live:
        histories = [
            SampleHistory(size, _synthetic_wave(size, 5.0, 50.0, 40.0)),
            SampleHistory(size, _synthetic_wave(size, 9.0, 35.0, 20.0, phase=1.0)),
        ]
        print(_render_frame(_panels(cfg, width, with_temp=False), histories, manager.current(), color))
        return 0

    sampler = PercentSampler()
    with_temp = sampler.temperature() is not None
    panels = _panels(cfg, width, with_temp)
    histories = [SampleHistory(size) for _ in panels]
    delay = cfg.history.refresh_ms / 1000.0

    for frame in range(args.frames):
        sample = sampler.poll()
        histories[0].push(sample.cpu)
        histories[1].push(sample.mem)
        if with_temp:
            histories[2].push(sampler.temperature() or 0.0)
        sys.stdout.write(CLEAR_HOME + _render_frame(panels, histories, manager.current(), color) + "\n")
        sys.stdout.flush()
        if frame + 1 < args.frames:
            time.sleep(delay)
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    _print_json(config_to_dict(_load(args)))
    return 0


def cmd_config_path(args: argparse.Namespace) -> int:
    print(Path(args.config).expanduser() if args.config else config_path())
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = Path(args.config).expanduser() if args.config else config_path()
    if path.exists() and not args.force:
        print(f"config already exists: {path} (use --force to overwrite)", file=sys.stderr)
        return 1
    _print_json({"written": str(save_config(AppConfig(), path))})
    return 0


def _add_theme_options(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--theme", default=None, help="Theme name (defaults to the configured theme)")
    cmd.add_argument("--metric", default=MetricKind.CPU.value, choices=[m.value for m in MetricKind])
    cmd.add_argument("--color", action=argparse.BooleanOptionalAction, default=None, help="Force ANSI colors on/off")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rtop", description="rtop terminal rendering tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    parser.add_argument("--config", default=None, help="Path to settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    themes_cmd = sub.add_parser("themes", help="List or inspect themes")
    themes_sub = themes_cmd.add_subparsers(dest="themes_cmd", required=True)
    list_cmd = themes_sub.add_parser("list", help="List loaded themes")
    list_cmd.set_defaults(func=cmd_themes_list)
    show_cmd = themes_sub.add_parser("show", help="Print a theme's resolved colors")
    show_cmd.add_argument("name")
    show_cmd.add_argument("--format", choices=["json", "toml"], default="json")
    show_cmd.set_defaults(func=cmd_themes_show)

    graph_cmd = sub.add_parser("graph", help="Render a history graph from values")
    graph_cmd.add_argument("values", nargs="*", help="Samples, oldest first (read from stdin when omitted)")
    graph_cmd.add_argument("--width", type=int, default=40)
    graph_cmd.add_argument("--height", type=int, default=None)
    graph_cmd.add_argument("--style", default=None, help="braille, block or tty")
    graph_cmd.add_argument("--inverted", action="store_true")
    graph_cmd.add_argument("--max", type=float, default=100.0)
    _add_theme_options(graph_cmd)
    graph_cmd.set_defaults(func=cmd_graph)

    meter_cmd = sub.add_parser("meter", help="Render a percentage meter")
    meter_cmd.add_argument("percent", type=float)
    meter_cmd.add_argument("--width", type=int, default=20)
    _add_theme_options(meter_cmd)
    meter_cmd.set_defaults(func=cmd_meter)

    box_cmd = sub.add_parser("box", help="Draw a box")
    box_cmd.add_argument("--width", type=int, required=True)
    box_cmd.add_argument("--height", type=int, required=True)
    box_cmd.add_argument("--title", default=None)
    box_cmd.add_argument("--corners", default=None, help="rounded or square")
    box_cmd.set_defaults(func=cmd_box)

    preview_cmd = sub.add_parser("preview", help="Render CPU and memory panels")
    preview_cmd.add_argument("--live", action="store_true", help="Sample this machine instead of a synthetic wave")
    preview_cmd.add_argument("--frames", type=int, default=10, help="Frames to draw in live mode")
    preview_cmd.add_argument("--width", type=int, default=None)
    preview_cmd.add_argument("--theme", default=None)
    preview_cmd.add_argument("--color", action=argparse.BooleanOptionalAction, default=None)
    preview_cmd.set_defaults(func=cmd_preview)

    config_cmd = sub.add_parser("config", help="Inspect or create the settings file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    config_sub.add_parser("show", help="Print effective settings").set_defaults(func=cmd_config_show)
    config_sub.add_parser("path", help="Print settings file path").set_defaults(func=cmd_config_path)
    init_cmd = config_sub.add_parser("init", help="Write default settings")
    init_cmd.add_argument("--force", action="store_true")
    init_cmd.set_defaults(func=cmd_config_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = _load(args)
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    try:
        return int(args.func(args))
    except RenderError as exc:
        get_logger("cli").error("%s failed: %s", args.command, exc, extra={"event": "command_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
