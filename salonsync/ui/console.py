"""
SalonSync terminal front end.

Renders the dashboard (day view), month heatmap, clients and settings
screens with rich and drives them through short commands.

Usage:
    salonsync            (or: python -m salonsync)
    salonsync --verbose  debug logging

Commands:
    dash, month, clients, settings   - Switch screen
    n, p, today                      - Next / previous day (month on the month screen), today
    day <d>                          - Open day <d> of the shown month
    new [HH:MM]                      - New appointment (slot on the current day)
    edit <#>, del <#>                - Edit / delete appointment # of the day
    search <text>, add               - Search / add clients
    lang <hu|en|ro>, theme <dark|light>, wake
    hours <start> <end>, dur <service_id> <minutes>
    analyze, remind <#>              - AI schedule analysis / reminder message
    ask <text>                       - Typed receptionist
    say <text>                       - Feed a speech transcript to the wake word listener
    voice <input.pcm>                - Voice session from a 16 kHz PCM16 recording
    logout, /help, /quit
"""

import asyncio
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.theme import Theme

from ..assistant.agent import chat_sync
from ..assistant.text import analyze_upcoming, reminder_for
from ..auth.client import AuthError, FirebaseAuthClient, describe_auth_error
from ..calendar.dashboard import is_today
from ..calendar.month_view import Density
from ..config import logger as log
from ..config.env import get_agent_name, get_backend
from ..constants.defaults import Scheduling
from ..constants.translations import LANGUAGES, MONTH_NAMES, WEEKDAY_HEADERS
from ..container import get_container, set_container
from ..domain.user import AuthUser
from ..repositories.factory import create_container
from ..voice.audio import INPUT_SAMPLE_RATE, pcm16_to_float
from ..voice.bridge import VoiceBridge, VoiceSessionError
from .state import AppState, ViewMode

console = Console()

# One table row per half-hour slot
ROW_PIXELS = Scheduling.SLOT_MINUTES * Scheduling.PIXELS_PER_MINUTE

# Samples per microphone frame
FRAME_SAMPLES = 4096

VOICE_SESSION_SECONDS = 60

DENSITY_STYLES = {
    Density.EMPTY: "dim",
    Density.LIGHT: "green",
    Density.MODERATE: "yellow",
    Density.BUSY: "bold red",
}

# Named styles of the screens; the theme setting picks the palette
THEMES = {
    "dark": Theme(
        {
            "frame": "blue",
            "accent": "bold cyan",
            "muted": "dim",
            "heading": "bold white",
            "now": "red",
        }
    ),
    "light": Theme(
        {
            "frame": "grey30",
            "accent": "bold blue",
            "muted": "grey50",
            "heading": "bold black",
            "now": "dark_red",
        }
    ),
}


# =============================================================================
# SCREENS
# =============================================================================


def render_dashboard(state: AppState) -> None:
    s = state.strings
    layout = state.day_layout()
    title = state.current_date.strftime("%Y-%m-%d")
    if is_today(state.current_date):
        title += f" ({s['today']})"

    next_client = state.next_client_label()
    summary = f"{s['appointments']}: [accent]{state.todays_count()}[/accent]"
    if next_client:
        summary += f"   {s['nextClient']}: [accent]{escape(next_client)}[/accent]"
    console.print(Panel(summary, title=title, border_style="frame"))

    rows: dict[int, list] = {}
    for index, block in enumerate(layout.blocks, 1):
        rows.setdefault(int(block.top // ROW_PIXELS), []).append((index, block))
    now_row = int(layout.now_offset // ROW_PIXELS) if layout.now_offset is not None else None

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("time", style="muted", width=6)
    table.add_column("appointments")
    for row, slot in enumerate(layout.slots):
        cells = [
            f"[{block.color}]#{index} {block.time_label} {block.client_name} · {block.service_name} "
            f"({int(block.height / Scheduling.PIXELS_PER_MINUTE)} {s['minutes']})[/{block.color}]"
            for index, block in rows.get(row, [])
        ]
        marker = "[now]▶[/now] " if row == now_row else ""
        table.add_row(slot.label, marker + "   ".join(cells))
    console.print(table)


def render_month(state: AppState) -> None:
    grid = state.month_grid()
    month_name = MONTH_NAMES[grid.month - 1]
    table = Table(title=f"{grid.year} {month_name}", show_lines=False, border_style="frame")
    for header in WEEKDAY_HEADERS:
        table.add_column(header, justify="center")
    for week in grid.weeks():
        cells = []
        for cell in week:
            if cell is None:
                cells.append("")
                continue
            style = DENSITY_STYLES[cell.density]
            count = f" ({cell.count})" if cell.count else ""
            cells.append(f"[{style}]{cell.day.day}{count}[/{style}]")
        table.add_row(*cells)
    console.print(table)
    s = state.strings
    console.print(
        f"[green]■[/green] {s['free']}  [yellow]■[/yellow] {s['moderate']}  [bold red]■[/bold red] {s['busy']}"
    )


def render_clients(state: AppState, query: str = "") -> None:
    s = state.strings
    table = Table(title=s["clients"], border_style="frame")
    table.add_column(s["name"], style="accent")
    table.add_column(s["phone"])
    table.add_column(s["notes"], style="muted")
    for client in sorted(state.search_clients(query), key=lambda c: c.name.lower()):
        table.add_row(client.name, client.phone, client.notes or "")
    console.print(table)


def render_settings(state: AppState) -> None:
    s = state.strings
    settings = state.settings
    table = Table(title=s["settings"], show_header=False, border_style="frame")
    table.add_column("key", style="accent")
    table.add_column("value")
    table.add_row(s["selectLang"], state.lang)
    table.add_row(s["theme"], s[settings.theme])
    table.add_row(s["wakeWord"], "✓" if settings.wake_word_enabled else "✗")
    table.add_row(
        s["businessHours"],
        f"{settings.business_start_hour:02d}:00 - {settings.business_end_hour:02d}:00",
    )
    console.print(table)

    services = Table(title=s["serviceDurations"], border_style="frame")
    services.add_column("id", style="muted")
    services.add_column(s["service"])
    services.add_column(s["minutes"], justify="right")
    services.add_column("Ft", justify="right")
    for service in state.services:
        services.add_row(service.id, service.name, str(service.duration), service.price_formatted)
    console.print(services)


def theme_for(state: AppState) -> Theme:
    return THEMES.get(state.settings.theme, THEMES["dark"])


def render(state: AppState) -> None:
    with console.use_theme(theme_for(state)):
        console.rule(f"[heading]{state.strings[state.view.value.lower()]}[/heading]", style="frame")
        if state.view == ViewMode.DASHBOARD:
            render_dashboard(state)
        elif state.view == ViewMode.MONTH:
            render_month(state)
        elif state.view == ViewMode.CLIENTS:
            render_clients(state)
        else:
            render_settings(state)


# =============================================================================
# FORMS
# =============================================================================


def sign_in_screen(state: AppState) -> bool:
    s = state.strings
    console.print(Panel.fit("[bold]SalonSync[/bold]", border_style="yellow"))
    mode = Prompt.ask(f"{s['login']} / {s['register']}", choices=["l", "r", "q"], default="l")
    if mode == "q":
        return False
    email = Prompt.ask(s["email"])
    password = Prompt.ask(s["password"], password=True)
    try:
        if mode == "r":
            state.auth.register(email, password)
        else:
            state.auth.sign_in(email, password)
    except AuthError as e:
        console.print(f"[red]{describe_auth_error(e.code, state.lang)}[/red]")
    return True


def onboarding_screen(state: AppState) -> None:
    lang = Prompt.ask("Language / Nyelv / Limba", choices=list(LANGUAGES), default=state.lang)
    s = state.strings
    profession = Prompt.ask(s["professionLabel"], choices=["hair", "nails", "cosmetics"], default="hair")
    specialization = None
    if profession == "hair":
        specialization = Prompt.ask(s["specLabel"], choices=["women", "men", "unisex"], default="women")
    state.complete_onboarding(lang, profession, specialization)


def appointment_form(state: AppState) -> None:
    """Fills the open modal interactively and saves it."""
    s = state.strings
    form = state.modal
    console.print(Panel.fit(s["editAppt"] if form.is_edit else s["newAppt"], border_style="yellow"))

    if state.clients:
        for index, client in enumerate(state.clients, 1):
            console.print(f"  [dim]{index}.[/dim] {client.name}")
    choice = Prompt.ask(f"{s['client']} (#)", default=form.client_name or "")
    if choice.isdigit() and 1 <= int(choice) <= len(state.clients):
        form.select_client(state.clients[int(choice) - 1])
    else:
        form.client_name = choice

    for service in state.services:
        console.print(f"  [dim]{service.id}[/dim] {service.name} ({service.duration_formatted})")
    service_id = Prompt.ask(f"{s['service']} {s['optional']}", default=form.service_id)
    form.service_id = service_id if any(svc.id == service_id for svc in state.services) else ""
    try:
        form.appointment_date = date.fromisoformat(
            Prompt.ask(s["date"], default=form.appointment_date.isoformat())
        )
        form.appointment_time = datetime.strptime(
            Prompt.ask(s["time"], default=form.appointment_time.strftime("%H:%M")), "%H:%M"
        ).time()
    except ValueError:
        console.print(f"[red]{s['genericError']}[/red]")
        state.close_modal()
        return
    form.notes = Prompt.ask(s["notes"], default=form.notes)

    if not state.is_slot_free(form.start_time(), exclude_id=form.id):
        console.print(f"[yellow]{s['busy']}[/yellow]")

    if form.is_edit and Prompt.ask(f"{s['save']} / {s['delete']}", choices=["s", "d"], default="s") == "d":
        state.delete_modal()
        state.close_modal()
        return
    state.save_modal()


def add_client_form(state: AppState) -> None:
    s = state.strings
    try:
        state.add_client(
            Prompt.ask(s["name"]),
            Prompt.ask(s["phone"], default=""),
            Prompt.ask(s["notes"], default="") or None,
        )
    except ValidationError:
        console.print(f"[red]{s['name']}?[/red]")


# =============================================================================
# VOICE
# =============================================================================


async def file_microphone(path: Path):
    """Replays a 16 kHz PCM16 recording as real-time microphone frames."""
    data = path.read_bytes()
    step = FRAME_SAMPLES * 2
    for offset in range(0, len(data), step):
        frame = pcm16_to_float(data[offset : offset + step])
        yield frame
        await asyncio.sleep(len(frame) / INPUT_SAMPLE_RATE)


async def run_voice_session(bridge: VoiceBridge, path: Path, seconds: float) -> None:
    task = asyncio.create_task(bridge.run(file_microphone(path)))
    try:
        await asyncio.wait_for(asyncio.shield(task), timeout=seconds)
    except asyncio.TimeoutError:
        await bridge.stop()
        await task


def voice_overlay(state: AppState, path: Path) -> None:
    s = state.strings
    if not path.exists():
        console.print(f"[red]{s['micPermission']}[/red]")
        return

    reply_path = path.with_suffix(".reply.pcm")
    state.open_voice()
    console.print(Panel(f"{get_agent_name()}: {s['listening']}", border_style="yellow"))
    with reply_path.open("wb") as reply:
        bridge = VoiceBridge(lang=state.lang, audio_sink=lambda data, start_at: reply.write(data))
        try:
            asyncio.run(run_voice_session(bridge, path, VOICE_SESSION_SECONDS))
        except VoiceSessionError as e:
            console.print(f"[red]{e}[/red]")
        finally:
            state.close_voice()
    console.print(f"[dim]{reply_path}[/dim]")


def wake_session(state: AppState) -> None:
    """Overlay opened by the wake word: runs one voice session, then closes it."""
    s = state.strings
    console.print(Panel(f"{get_agent_name()}: {s['voiceActive']}", border_style="yellow"))
    recording = Prompt.ask(s["voiceRecording"], default="")
    if recording:
        voice_overlay(state, Path(recording))
    state.close_voice()


# =============================================================================
# COMMAND LOOP
# =============================================================================


def day_block(state: AppState, arg: str):
    blocks = state.day_layout().blocks
    if arg.isdigit() and 1 <= int(arg) <= len(blocks):
        return blocks[int(arg) - 1]
    console.print(f"[red]#{arg}?[/red]")
    return None


def handle_command(state: AppState, line: str, chat: dict) -> bool:
    """Runs one command; returns False to quit."""
    command, _, arg = line.partition(" ")
    command = command.lower()
    arg = arg.strip()
    s = state.strings

    views = {
        "dash": ViewMode.DASHBOARD,
        "month": ViewMode.MONTH,
        "clients": ViewMode.CLIENTS,
        "settings": ViewMode.SETTINGS,
    }

    if command in ("/quit", "/exit", "/q"):
        return False
    if command == "/help":
        console.print(__doc__)
    elif command in views:
        state.set_view(views[command])
    elif command in ("n", "p"):
        if state.view == ViewMode.MONTH:
            state.shift_month(1 if command == "n" else -1)
        elif command == "n":
            state.next_day()
        else:
            state.previous_day()
    elif command == "today":
        state.go_to_today()
    elif command == "day" and arg.isdigit():
        try:
            state.select_day(state.current_date.replace(day=int(arg)))
        except ValueError:
            console.print(f"[red]{arg}?[/red]")
    elif command == "new":
        slot = None
        if arg:
            try:
                slot = datetime.combine(state.current_date, datetime.strptime(arg, "%H:%M").time())
            except ValueError:
                console.print(f"[red]{arg}?[/red]")
                return True
        state.open_new_appointment(slot)
        appointment_form(state)
    elif command == "edit":
        block = day_block(state, arg)
        if block and state.open_edit_appointment(block.appointment.id):
            appointment_form(state)
    elif command == "del":
        block = day_block(state, arg)
        if block:
            state.open_edit_appointment(block.appointment.id)
            state.delete_modal()
            state.close_modal()
    elif command == "search":
        render_clients(state, arg)
        return True
    elif command == "add":
        add_client_form(state)
    elif command == "lang" and arg in LANGUAGES:
        state.set_language(arg)
    elif command == "theme" and arg in ("dark", "light"):
        state.set_theme(arg)
    elif command == "wake":
        state.toggle_wake_word()
    elif command == "hours":
        try:
            start, end = (int(v) for v in arg.split())
            state.set_business_hours(start, end)
        except (ValueError, ValidationError):
            console.print(f"[red]{s['businessHours']}: 0-23[/red]")
    elif command == "dur":
        try:
            service_id, minutes = arg.split()
            state.set_duration_override(service_id, int(minutes))
        except (ValueError, ValidationError):
            console.print(f"[red]{s['serviceDurations']}?[/red]")
    elif command == "analyze":
        with console.status(s["analyzeDay"]):
            text = analyze_upcoming(state.appointments, state.services, state.lang)
        console.print(Panel(Markdown(text), title=s["analyzeDay"]))
        return True
    elif command == "remind":
        block = day_block(state, arg)
        if block:
            with console.status(s["generateMessage"]):
                text = reminder_for(block.appointment, state.services, state.lang)
            console.print(Panel(text, title=s["generateMessage"]))
        return True
    elif command == "ask" and arg:
        try:
            with console.status(s["listening"]):
                response, chat["history"] = chat_sync(arg, chat.get("history"), state.lang)
            console.print(Panel(response or "…", title=get_agent_name(), border_style="yellow"))
        except Exception as e:
            console.print(f"[red]{s['messageError']} ({e})[/red]")
    elif command == "say":
        if not state.hear(arg):
            return True
        wake_session(state)
    elif command == "voice" and arg:
        voice_overlay(state, Path(arg))
    elif command == "logout":
        state.auth.sign_out()
        chat.clear()
    else:
        console.print("[dim]/help[/dim]")
        return True

    render(state)
    return True


def main() -> None:
    """Entry point of the terminal application."""
    load_dotenv()
    if "--verbose" in sys.argv:
        log.set_level("debug")

    backend = get_backend()
    set_container(create_container(backend))

    auth = FirebaseAuthClient()
    state = AppState(
        get_container(),
        auth,
        alert=lambda message: console.print(Panel(f"[red]{message}[/red]", border_style="red")),
        confirm=lambda message: Confirm.ask(message),
    )
    if backend == "memory":
        auth.restore(AuthUser(uid="local", email="local@salonsync"))

    chat: dict = {}

    try:
        while True:
            if state.user is None:
                if not sign_in_screen(state):
                    break
                continue
            if not state.has_onboarded:
                onboarding_screen(state)
                render(state)
                continue

            line = console.input("\n[bold green]›[/bold green] ").strip()
            if not line:
                render(state)
                continue
            if not handle_command(state, line, chat):
                break
    except (KeyboardInterrupt, EOFError):
        console.print()
    finally:
        state.close()


if __name__ == "__main__":
    main()
