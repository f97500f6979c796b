"""Display strings and view models for the calculator UI."""
from __future__ import annotations

from dataclasses import dataclass

from worktime.calculator import Calculator
from worktime.config import Threshold
from worktime.types import ClockTime, Countdown, ThresholdKind


@dataclass(frozen=True)
class Labels:
    title: str
    subtitle: str
    start_label: str
    empty_prompt: str
    break_hint: str
    break_note: str
    min_title: str
    max_title: str
    min_card: str
    max_card: str
    button_start: str
    button_running: str
    active_title: str
    target_label: str
    remaining_label: str
    finished_title: str
    finished_hint: str
    decimal_sep: str = "."


LABELS: dict[str, Labels] = {
    "de": Labels(
        title="Arbeitszeit Rechner",
        subtitle="Gib deine Startzeit ein und starte deine Countdowns",
        start_label="Startzeit",
        empty_prompt="Wähle eine Startzeit, um loszulegen",
        break_hint="inkl. {minutes} Min Pause",
        break_note="Hinweis: Die {minutes} Minuten Pause sind bereits eingerechnet",
        min_title="Mindestarbeitszeit ({hours}h)",
        max_title="Maximalarbeitszeit ({hours}h)",
        min_card="Mindestzeit",
        max_card="Maximalzeit",
        button_start="Countdown starten",
        button_running="Countdown läuft",
        active_title="Aktive Countdowns",
        target_label="Zielzeit",
        remaining_label="Verbleibende Zeit",
        finished_title="Fertig!",
        finished_hint="Du kannst jetzt gehen",
        decimal_sep=",",
    ),
    "en": Labels(
        title="Working Hours Calculator",
        subtitle="Enter your start time and launch your countdowns",
        start_label="Start time",
        empty_prompt="Pick a start time to get going",
        break_hint="incl. {minutes} min break",
        break_note="Note: the {minutes} minute break is already included",
        min_title="Minimum working time ({hours}h)",
        max_title="Maximum working time ({hours}h)",
        min_card="Minimum",
        max_card="Maximum",
        button_start="Start countdown",
        button_running="Countdown running",
        active_title="Active countdowns",
        target_label="Target",
        remaining_label="Time remaining",
        finished_title="Done!",
        finished_hint="You can leave now",
    ),
}


def labels_for(language: str) -> Labels:
    try:
        return LABELS[language]
    except KeyError:
        raise ValueError(f"No labels for language {language!r}") from None


def format_clock(value: ClockTime | None) -> str:
    """HH:MM, 24-hour, zero-padded. Empty string when there is no value."""
    return "" if value is None else str(value)


def split_seconds(seconds: int) -> tuple[int, int, int]:
    seconds = max(int(seconds), 0)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return hours, minutes, secs


def format_remaining(seconds: int) -> str:
    hours, minutes, secs = split_seconds(seconds)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_hours(hours: float, labels: Labels) -> str:
    """7.6 -> "7,6" (de) / "7.6" (en); whole hours drop the fraction."""
    text = f"{hours:.1f}".rstrip("0").rstrip(".")
    return text.replace(".", labels.decimal_sep)


def _hint(threshold: Threshold, labels: Labels) -> str:
    hours = format_hours(threshold.work_hours, labels)
    if labels.decimal_sep == ",":
        return f"{hours}h + {threshold.break_minutes} Min"
    return f"{hours}h + {threshold.break_minutes} min"


@dataclass(frozen=True)
class ThresholdCard:
    kind: ThresholdKind
    title: str
    subtitle: str
    end_text: str
    button_label: str
    button_enabled: bool


@dataclass(frozen=True)
class CountdownCard:
    countdown_id: int
    kind: ThresholdKind
    title: str
    target_text: str
    hint: str
    finished: bool
    headline: str
    body: str


def threshold_card(calc: Calculator, kind: ThresholdKind, labels: Labels) -> ThresholdCard:
    threshold = calc.config.threshold(kind)
    template = labels.min_title if kind is ThresholdKind.MINIMUM else labels.max_title
    running = calc.is_running(kind)
    end = calc.projection.for_kind(kind) if calc.projection else None
    return ThresholdCard(
        kind=kind,
        title=template.format(hours=format_hours(threshold.work_hours, labels)),
        subtitle=labels.break_hint.format(minutes=threshold.break_minutes),
        end_text=format_clock(end),
        button_label=labels.button_running if running else labels.button_start,
        button_enabled=not running,
    )


def countdown_card(calc: Calculator, countdown: Countdown, labels: Labels) -> CountdownCard:
    threshold = calc.config.threshold(countdown.kind)
    if countdown.finished:
        headline, body = labels.finished_title, labels.finished_hint
    else:
        headline, body = labels.remaining_label, format_remaining(countdown.remaining)
    return CountdownCard(
        countdown_id=countdown.id,
        kind=countdown.kind,
        title=labels.min_card if countdown.kind is ThresholdKind.MINIMUM else labels.max_card,
        target_text=f"{labels.target_label}: {format_clock(countdown.target_time)}",
        hint=_hint(threshold, labels),
        finished=countdown.finished,
        headline=headline,
        body=body,
    )
