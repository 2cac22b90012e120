"""CLI entry point for the alignment and clock reports.

Run with the bundled Lumoria/Tempora samples:
    uv run alignclock alignment --report
    uv run alignclock clocks --reference 15:00 14:45 15:05 bad
"""

import argparse
import logging
import sys
from pathlib import Path

from alignclock.alignment import animate_shadows, classify, create_star_system, sort_by_distance
from alignclock.clocks import TimeFormatError, parse_time, synchronize
from alignclock.config import Settings, load_settings
from alignclock.i18n import LANGS
from alignclock.renderers.plotly_2d import render_shadow_animation
from alignclock.renderers.static import save_alignment_chart
from alignclock.renderers.svg_2d import generate_alignment_svg
from alignclock.renderers.text import render_celestial_report, render_clock_report
from alignclock.samples import (
    ALTARIS_STAR,
    GRAND_CLOCK_TIME,
    LUMORIA_PLANETS,
    LUMORIA_STAR,
    LUMORIA_SYSTEM_NAME,
    TOWN_CLOCK_TIMES,
)

log = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alignclock",
        description="Lumoria planet light classification and Tempora clock synchronization",
    )
    parser.add_argument("--lang", choices=LANGS, default=settings.lang, help="Report language")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level name (DEBUG, INFO, WARNING, ...)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    align = sub.add_parser("alignment", help="Classify the light each Lumoria planet receives")
    align.add_argument(
        "--svg",
        nargs="?",
        const="",
        help="Write the alignment SVG (default path: <output dir>/alignment.svg)",
    )
    align.add_argument(
        "--png",
        nargs="?",
        const="",
        help="Write the alignment PNG (default path: <output dir>/alignment.png)",
    )
    align.add_argument(
        "--html",
        nargs="?",
        const="",
        help="Write the shadow animation as HTML (default path: <output dir>/shadows.html)",
    )
    align.add_argument(
        "--frames", type=int, default=0, help="Print this many shadow animation frames"
    )
    align.add_argument("--report", action="store_true", help="Print the celestial report")

    clocks = sub.add_parser("clocks", help="Compare town clocks against the grand clock")
    clocks.add_argument(
        "--reference", default=GRAND_CLOCK_TIME, help="Grand clock time (HH:MM)"
    )
    clocks.add_argument("readings", nargs="*", help="Town clock readings (HH:MM)")
    return parser


def _output_path(value: str, settings: Settings, default_name: str) -> Path:
    """An empty value (flag given without a path) means the configured output dir."""
    return Path(value) if value else settings.output_dir / default_name


def _run_alignment(args: argparse.Namespace, settings: Settings) -> None:
    planets = sort_by_distance(LUMORIA_PLANETS)
    results = classify(planets)
    for r in results:
        print(f"{r.name}: {r.light}")

    if args.svg is not None:
        svg_path = _output_path(args.svg, settings, "alignment.svg")
        svg = generate_alignment_svg(
            planets, settings.svg_width, settings.svg_height, classifications=results
        )
        svg_path.parent.mkdir(parents=True, exist_ok=True)
        svg_path.write_text(svg, encoding="utf-8")
        log.info("wrote %s", svg_path)
        print(f"Saved: {svg_path}")

    if args.png is not None:
        path = save_alignment_chart(planets, _output_path(args.png, settings, "alignment.png"))
        log.info("wrote %s", path)
        print(f"Saved: {path}")

    if args.html is not None:
        html_path = _output_path(args.html, settings, "shadows.html")
        frames = animate_shadows(planets, LUMORIA_STAR, args.frames or 30)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        render_shadow_animation(frames, LUMORIA_STAR).write_html(html_path)
        log.info("wrote %s", html_path)
        print(f"Saved: {html_path}")

    if args.frames:
        for i, frame in enumerate(animate_shadows(planets, LUMORIA_STAR, args.frames)):
            cells = ", ".join(
                f"{p.name} ({p.px:.1f}, {p.py:.1f}) shadow={p.shadow:.2f}" for p in frame
            )
            print(f"frame {i}: {cells}")

    if args.report:
        system = create_star_system(
            LUMORIA_SYSTEM_NAME, [LUMORIA_STAR, ALTARIS_STAR], planets
        )
        print(render_celestial_report(system, lang=args.lang), end="")


def _run_clocks(args: argparse.Namespace) -> None:
    readings = args.readings or list(TOWN_CLOCK_TIMES)
    report = synchronize(args.reference, readings)
    print(render_clock_report(report, lang=args.lang), end="")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the chosen report, and return the exit status."""
    try:
        settings = load_settings()
    except ValueError as e:
        _build_parser(Settings()).error(str(e))
    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "alignment":
        if args.frames < 0:
            parser.error("--frames must not be negative")
        _run_alignment(args, settings)
    else:
        try:
            parse_time(args.reference)
        except TimeFormatError as e:
            parser.error(str(e))
        _run_clocks(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
