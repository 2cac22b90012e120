"""Plain-text renderers: celestial report, clock analysis, ASCII clock faces."""

import math

from alignclock.alignment import classify, shadow_length, sort_by_distance
from alignclock.clocks import parse_time, status_text
from alignclock.i18n import t
from alignclock.models import StarSystem, SyncReport, TimeOfDay

_SHADOW_SCALE = 100  # drawing units per distance unit


def render_celestial_report(system: StarSystem, lang: str = "en") -> str:
    """Describe every body of the system against its primary star.

    Bodies are listed closest-first. Shadow length is measured with the body
    placed on the star's x axis at ``distance · 100`` drawing units; a body
    at distance 0 sits on the star and reports ``inf``.
    """
    primary = system.stars[0]

    lines = [
        t("report_title", lang),
        f"{t('report_system', lang)}: {system.name}",
        f"{t('report_stars', lang)}: {', '.join(s.name for s in system.stars)}",
    ]
    for body, result in zip(sort_by_distance(system.bodies), classify(system.bodies)):
        if body.distance == 0:
            shadow = math.inf
        else:
            shadow = shadow_length(
                body, primary, primary.x + body.distance * _SHADOW_SCALE, primary.y
            )
        lines.append(f"{t('report_planet', lang)}: {body.name}")
        lines.append(f"  {t('report_distance', lang)}: {body.distance:g}")
        lines.append(f"  {t('report_size', lang)}: {body.size:g}")
        lines.append(f"  {t('report_shadow', lang)}: {shadow:.2f}")
        lines.append(f"  {t('report_light', lang)}: {result.light}")
    return "\n".join(lines) + "\n"


def ascii_clock(time: TimeOfDay) -> str:
    return (
        f"    ⏰ {time}\n"
        "     12\n"
        "   9  |  3\n"
        "     6\n"
        f"  ({time.hour}:{time.minute:02d})"
    )


def _drift_text(diff: int, lang: str) -> str:
    if diff > 0:
        return t("clock_ahead", lang, minutes=diff)
    if diff < 0:
        return t("clock_behind", lang, minutes=-diff)
    return t("clock_synced", lang)


def render_clock_report(report: SyncReport, lang: str = "en") -> str:
    """Render the analysis lines, the summary, and the ASCII clock section.

    The reference time must parse; invalid town readings are reported in
    place.

    Raises:
        TimeFormatError: If ``report.reference`` is not a valid time.
    """
    clock = t("clock_label", lang)
    lines = [
        t("clock_title", lang),
        f"{t('clock_grand', lang)}: {report.reference}",
        "",
        t("clock_results", lang),
    ]
    for r in report.results:
        if r.diff is None:
            lines.append(f"{clock} {r.index} ({r.reading}): {t('clock_error', lang)} - {r.error}")
        else:
            lines.append(f"{clock} {r.index} ({r.reading}): {status_text(r.diff)}")

    lines += [
        "",
        t("clock_summary", lang, count=report.adjustment_count),
        "",
        t("clock_enhanced", lang),
        "",
        t("clock_tower", lang),
        ascii_clock(parse_time(report.reference)),
        "",
        t("clock_town", lang),
    ]
    for r in report.results:
        lines.append(f"--- {clock} {r.index} ---")
        if r.diff is None:
            lines.append(
                f"{t('clock_error', lang)}: {t('clock_invalid', lang, reading=r.reading)}"
            )
            continue
        lines.append(ascii_clock(parse_time(r.reading)))
        lines.append(_drift_text(r.diff, lang))
    return "\n".join(lines) + "\n"
