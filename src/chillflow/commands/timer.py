"""Interactive focus cycle timer."""

import time
from datetime import datetime

import typer
from rich.align import Align
from rich.console import Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from chillflow.models.focus.cycling import CycleEngine
from chillflow.models.focus.exceptions import InvalidPhaseOperationError
from chillflow.models.focus.notifications import audio_cue_for
from chillflow.models.focus.phase import Phase, PhaseCategory
from chillflow.services.focus_service import get_focus_service
from chillflow.services.ticker import Ticker
from chillflow.utils.keyboard import KeyboardHandler
from chillflow.utils.logger import get_logger
from chillflow.utils.ui.console import get_console
from chillflow.utils.ui.formatters import (
    format_clock,
    format_duration,
    format_warning,
)

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Run the focus cycle timer")

_PHASE_COLORS = {
    "idle": "white",
    "focus": "cyan",
    "rest": "green",
    "long_rest": "magenta",
}


def _now() -> datetime:
    return datetime.now()


def render_status(engine: CycleEngine, message: str = "") -> Panel:
    """Build the live timer panel."""
    phase = engine.phase
    color = "yellow" if phase.is_paused else _PHASE_COLORS[phase.category]

    title = phase.display_name
    if phase.is_paused:
        title = f"{phase.base_phase.display_name} (paused)"
    if engine.cycle_label:
        title = f"{title}  {engine.cycle_label}"

    if phase.is_paused:
        hints = "r resume  •  x reset  •  q quit"
    else:
        hints = "p pause  •  s skip  •  x reset  •  q quit"

    body = [
        Text(format_clock(engine.remaining_seconds), style=f"bold {color}", justify="center"),
        Text(hints, style="dim", justify="center"),
    ]
    if message:
        body.append(Text(message, style="yellow", justify="center"))
    return Panel(Align.center(Group(*body)), title=title, border_style=color)


def handle_key(engine: CycleEngine, key: str | None, now: datetime) -> str:
    """Apply a control key to the engine. Returns a message for the user."""
    if key == "p":
        engine.pause(now)
    elif key == "r":
        engine.resume(now)
    elif key == "s":
        try:
            engine.skip(now)
        except InvalidPhaseOperationError:
            return "Resume or reset before skipping"
    elif key == "x":
        engine.reset()
    return ""


@app.command("run")
@command_wrapper
def run_cycle(
    focus_minutes: int = typer.Option(
        None, "--focus", "-f", help="Focus duration in minutes"
    ),
    rest_minutes: int = typer.Option(None, "--rest", help="Rest duration in minutes"),
    long_rest_minutes: int = typer.Option(
        None, "--long-rest", help="Long rest duration in minutes"
    ),
    sessions: int = typer.Option(
        None, "--sessions", "-n", help="Focus sessions before the long rest"
    ),
):
    """Run one full focus cycle in the terminal."""
    service = get_focus_service()
    overrides = {
        "focus_duration": focus_minutes * 60 if focus_minutes else None,
        "rest_duration": rest_minutes * 60 if rest_minutes else None,
        "long_rest_duration": long_rest_minutes * 60 if long_rest_minutes else None,
        "max_sessions": sessions,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        cycle = service.config.cycle.model_validate(
            {**service.config.cycle.model_dump(), **overrides}
        )
        service.engine.config = cycle

    engine = service.engine
    logger = get_logger()
    recorded_before = len(service.stats)
    bell = service.config.output.bell
    quit_requested = False
    reset_requested = False
    message = ""

    def on_phase_change(phase: Phase, previous: PhaseCategory) -> None:
        cue = audio_cue_for(previous, phase)
        logger.info("phase %s (from %s), cue=%s", phase, previous, cue)
        if cue == "play" and bell:
            console.bell()

    engine.subscribe(on_phase_change)

    with KeyboardHandler() as keyboard:
        engine.start(_now())
        with Live(render_status(engine), console=console, auto_refresh=False) as live:

            def on_tick(now: datetime) -> None:
                nonlocal quit_requested, reset_requested, message
                key = keyboard.get_key()
                if key == "q":
                    quit_requested = True
                    return
                if key == "x":
                    reset_requested = True
                if key:
                    message = handle_key(engine, key, now)
                live.update(render_status(engine, message), refresh=True)

            ticker = Ticker(
                engine,
                interval=service.config.tick_interval,
                clock=_now,
                sleep=time.sleep,
                should_stop=lambda: quit_requested,
                on_tick=on_tick,
            )
            try:
                ticker.run()
            except KeyboardInterrupt:
                quit_requested = True

    completed = len(service.stats) - recorded_before
    if quit_requested:
        engine.reset()
        console.print("[yellow]Cycle stopped[/yellow]")
    elif reset_requested:
        console.print("[yellow]Cycle reset[/yellow]")
    else:
        console.print("[bold green]Cycle complete[/bold green]")
    console.print(
        f"Focus sessions recorded: {completed} "
        f"({format_duration(completed * engine.config.focus_duration)})"
    )
    if service.last_record is not None and not service.last_record.persisted:
        format_warning("focus history could not be saved")
