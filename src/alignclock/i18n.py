"""Simple two-language (ko/en) translation helper."""

LANGS: tuple[str, ...] = ("en", "ko")

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "루모리아와 템포라",
        "en": "Lumoria & Tempora",
    },
    "tab_alignment": {
        "ko": "행성 정렬",
        "en": "Alignment",
    },
    "tab_clocks": {
        "ko": "시계 동기화",
        "en": "Clocks",
    },
    "report_title": {
        "ko": "천체 정렬 보고서",
        "en": "Celestial Alignment Report",
    },
    "report_system": {
        "ko": "항성계",
        "en": "Star System",
    },
    "report_stars": {
        "ko": "항성",
        "en": "Stars",
    },
    "report_planet": {
        "ko": "행성",
        "en": "Planet",
    },
    "report_distance": {
        "ko": "궤도 거리",
        "en": "Orbit Distance",
    },
    "report_size": {
        "ko": "크기",
        "en": "Size",
    },
    "report_shadow": {
        "ko": "그림자 길이",
        "en": "Shadow Length",
    },
    "report_light": {
        "ko": "빛의 세기",
        "en": "Light",
    },
    "clock_title": {
        "ko": "🕐 템포라 시계 동기화 시스템 🕐",
        "en": "🕐 Tempora Clock Synchronization System 🕐",
    },
    "clock_grand": {
        "ko": "시계탑 기준 시각",
        "en": "Grand Clock Tower Time",
    },
    "clock_results": {
        "ko": "시계 분석 결과:",
        "en": "Clock Analysis Results:",
    },
    "clock_label": {
        "ko": "시계",
        "en": "Clock",
    },
    "clock_error": {
        "ko": "오류",
        "en": "Error",
    },
    "clock_summary": {
        "ko": "요약: 조정이 필요한 시계 {count}개",
        "en": "Summary: {count} clocks need adjustment",
    },
    "clock_enhanced": {
        "ko": "🏛️ 템포라 시계 상세 분석 🏛️",
        "en": "🏛️ Enhanced Tempora Clock Analysis 🏛️",
    },
    "clock_tower": {
        "ko": "🗼 시계탑:",
        "en": "🗼 Grand Clock Tower:",
    },
    "clock_town": {
        "ko": "🏘️ 마을 시계:",
        "en": "🏘️ Town Clocks:",
    },
    "clock_invalid": {
        "ko": "잘못된 시간 형식 ({reading})",
        "en": "Invalid time format ({reading})",
    },
    "clock_ahead": {
        "ko": "⏰ {minutes}분 빠름",
        "en": "⏰ {minutes} min AHEAD",
    },
    "clock_behind": {
        "ko": "⏰ {minutes}분 느림",
        "en": "⏰ {minutes} min BEHIND",
    },
    "clock_synced": {
        "ko": "⏰ 동기화됨",
        "en": "⏰ Synchronized",
    },
    "label_reference": {
        "ko": "기준 시각",
        "en": "Reference time",
    },
    "label_readings": {
        "ko": "마을 시계 (한 줄에 하나)",
        "en": "Town clocks (one per line)",
    },
    "btn_analyze": {
        "ko": "분석하기",
        "en": "Analyze",
    },
}


def t(key: str, lang: str, **kwargs: object) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    Keyword arguments are substituted with str.format.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    return text.format(**kwargs) if kwargs else text
