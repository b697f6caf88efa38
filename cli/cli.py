"""CLI for liftlog.

Builds deterministic training programs from a profile, shows them, and
keeps a local training log next to them. Everything is stored in a single
JSON document (see LIFTLOG_DATA_FILE).
"""

import json
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

# Bootstrap must be imported after standard library imports
# but before liftlog imports to set up sys.path correctly
try:
    import cli.bootstrap
except ImportError:
    _project_root = Path(__file__).parent.parent
    if str(_project_root) not in sys.path:
        sys.path.insert(0, str(_project_root))

from liftlog.config.settings import settings
from liftlog.core.logger import setup_logger
from liftlog.history import (
    LogEntryError,
    build_result,
    delete_last,
    dump_log,
    export_log_csv,
    find_last,
    format_result,
    load_log,
    new_entry,
    next_session_label,
    progress_hint,
    search_log,
)
from liftlog.persistence.store import KEY_BUILDER_CFG, KEY_LOG, KEY_PROGRAM, JsonStore
from liftlog.planning import Profile, Program, ProgramInvariantError, generate_program, validate_program
from liftlog.planning.output.models import Session, SessionItem

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="liftlog",
    help="liftlog - deterministic training programs and a local training log",
    add_completion=False,
)

EQUIPMENT_NAMES = ("barbell", "dumbbell", "cables", "landmine", "pullup", "dip", "bench", "cardio")


def _store(ctx: typer.Context) -> JsonStore:
    return ctx.obj


def exit_with_error(message: str, code: int = 1) -> None:
    """Exit with error message."""
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code)


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(None, "--data-file", help="JSON store (default: LIFTLOG_DATA_FILE)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Configure logging and open the store."""
    setup_logger(level="DEBUG" if debug else settings.log_level, log_file=settings.log_file)
    ctx.obj = JsonStore(data_file or settings.data_file)


def _load_profile_file(path: Path) -> Profile:
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    # Flat builder records carry eq_* / mv_* / inj_spine keys
    if any(k.startswith(("eq_", "mv_")) or k == "inj_spine" for k in data):
        return Profile.from_builder_config(data)
    return Profile.model_validate(data)


def _base_profile(store: JsonStore, profile_file: Path | None) -> Profile:
    if profile_file is not None:
        return _load_profile_file(profile_file)
    stored = store.load(KEY_BUILDER_CFG)
    if stored:
        return Profile.from_builder_config(stored)
    return Profile(units=settings.default_units)


def _apply_overrides(profile: Profile, overrides: dict[str, Any], equipment: str | None) -> Profile:
    data = profile.model_dump(mode="json")
    for key, value in overrides.items():
        if value is None:
            continue
        if key in ("squat", "hinge", "overhead", "dips", "pullups"):
            data["tolerance"][key] = value
        else:
            data[key] = value

    if equipment is not None:
        owned = {name.strip().lower() for name in equipment.split(",") if name.strip()}
        unknown = owned - set(EQUIPMENT_NAMES) - {"bw", "none"}
        if unknown:
            exit_with_error(f"Unknown equipment: {', '.join(sorted(unknown))}. Choose from {', '.join(EQUIPMENT_NAMES)}")
        data["equipment"] = {name: name in owned for name in EQUIPMENT_NAMES}

    return Profile.model_validate(data)


def _load_program(store: JsonStore) -> Program | None:
    record = store.load(KEY_PROGRAM)
    if not record:
        return None
    try:
        return Program.from_record(record)
    except ValidationError as e:
        logger.warning(f"Stored plan is invalid, treating as absent: {e.error_count()} validation errors")
        return None


def _require_program(store: JsonStore) -> Program:
    program = _load_program(store)
    if program is None:
        exit_with_error("No plan yet. Run `liftlog build` first.")
    return program


def _target(item: SessionItem) -> str:
    if item.rule is not None:
        inc = f"{item.rule.inc:g}"
        return f"{item.rule.rep_min}-{item.rule.rep_max} reps (+{inc}{item.default_units})"
    return item.log_type


def _session_table(session: Session) -> Table:
    table = Table(title=f"{session.label} [dim]({session.id})[/dim]")
    table.add_column("#", justify="right")
    table.add_column("Exercise", style="bold")
    table.add_column("Pattern")
    table.add_column("Log")
    table.add_column("Target")
    for index, item in enumerate(session.items, start=1):
        table.add_row(str(index), item.name, item.pattern, item.log_type, _target(item))
    return table


def _print_program(program: Program) -> None:
    meta = program.meta
    console.print(f"[bold cyan]Plan:[/bold cyan] {meta.style} · {meta.goal} · {meta.freq}d/w · {meta.units}")
    for session in program.sessions:
        console.print(_session_table(session))


def _find_session(program: Program, key: str) -> Session | None:
    lowered = key.lower()
    return next((s for s in program.sessions if s.id == key or s.label.lower() == lowered), None)


def _find_item(session: Session, key: str) -> SessionItem | None:
    lowered = key.lower()
    return next((it for it in session.items if it.id == key or it.name.lower() == lowered), None)


@app.command()
def build(
    ctx: typer.Context,
    profile_file: Path | None = typer.Option(None, "--profile-file", "-f", help="Profile JSON (nested or flat builder record)"),
    style: str | None = typer.Option(None, "--style", help="general | traditional | hit | calisthenics | tactical | pilates"),
    goal: str | None = typer.Option(None, "--goal", help="muscle | strength | recomp | endurance | mobility"),
    freq: int | None = typer.Option(None, "--freq", help="Sessions per week (clamped to 2-6)"),
    recovery: str | None = typer.Option(None, "--recovery", help="schedule | recovered"),
    units: str | None = typer.Option(None, "--units", help="lb | kg"),
    gender: str | None = typer.Option(None, "--gender", help="unspecified | male | female"),
    equipment: str | None = typer.Option(None, "--equipment", help="Comma-separated owned equipment (bodyweight is implied)"),
    squat: str | None = typer.Option(None, "--squat", help="Squat tolerance: good | limited | avoid"),
    hinge: str | None = typer.Option(None, "--hinge", help="Hinge tolerance"),
    overhead: str | None = typer.Option(None, "--overhead", help="Overhead tolerance"),
    dips: str | None = typer.Option(None, "--dips", help="Dip tolerance"),
    pullups: str | None = typer.Option(None, "--pullups", help="Pull-up tolerance"),
    spine: str | None = typer.Option(None, "--spine", help="Spine sensitivity: none | mild | high"),
    min_items: int | None = typer.Option(None, "--min-items", help="Fail if any session ends up shorter than this"),
) -> None:
    """Generate a program and save it, replacing any previous one.

    Examples:
        liftlog build --style hit --goal strength --freq 3
        liftlog build --equipment dumbbell,bench --spine high
    """
    store = _store(ctx)
    overrides = {
        "style": style,
        "goal": goal,
        "freq": freq,
        "recovery": recovery,
        "units": units,
        "gender": gender,
        "squat": squat,
        "hinge": hinge,
        "overhead": overhead,
        "dips": dips,
        "pullups": pullups,
        "spine": spine,
    }

    try:
        profile = _apply_overrides(_base_profile(store, profile_file), overrides, equipment)
    except ValidationError as e:
        logger.warning(f"Invalid profile: {e}")
        exit_with_error(f"Invalid profile:\n{e}")
    except (OSError, json.JSONDecodeError) as e:
        exit_with_error(f"Cannot read profile file: {e}")

    program = generate_program(profile)

    if min_items is not None:
        try:
            validate_program(program, min_items=min_items)
        except ProgramInvariantError as e:
            console.print("[bold red]✗ Program rejected:[/bold red]")
            for detail in e.details:
                console.print(f"  - {detail}")
            raise typer.Exit(1) from e

    store.save(KEY_BUILDER_CFG, profile.to_builder_config())
    store.save(KEY_PROGRAM, program.to_record())

    _print_program(program)
    console.print("[bold green]✓ Plan generated & saved.[/bold green]")


@app.command()
def plan(
    ctx: typer.Context,
    session: str | None = typer.Option(None, "--session", "-s", help="Show one session (label or ID)"),
    as_json: bool = typer.Option(False, "--json", help="Print the stored program record"),
) -> None:
    """Show the stored program."""
    program = _require_program(_store(ctx))

    if as_json:
        typer.echo(json.dumps(program.to_record(), indent=2))
        return

    if session is None:
        _print_program(program)
        return

    found = _find_session(program, session)
    if found is None:
        exit_with_error(f"No session {session!r}. Sessions: {', '.join(s.label for s in program.sessions)}")
    console.print(_session_table(found))


@app.command("next")
def next_session(ctx: typer.Context) -> None:
    """Show the next session in the rotation."""
    store = _store(ctx)
    label = next_session_label(_load_program(store), load_log(store.load(KEY_LOG, [])))
    console.print(f"[cyan]Next:[/cyan] {label}")


@app.command("log")
def log_set(
    ctx: typer.Context,
    session: str = typer.Argument(..., help="Session label or ID"),
    item: str = typer.Argument(..., help="Exercise name or item ID"),
    reps: int | None = typer.Option(None, "--reps", help="Reps (load/rep items)"),
    weight: float | None = typer.Option(None, "--weight", help="Load (load/rep items)"),
    units: str | None = typer.Option(None, "--units", help="lb | kg | bw | bw+ (default: item units)"),
    seconds: float | None = typer.Option(None, "--seconds", help="Duration (timed items)"),
    intensity: str = typer.Option("", "--intensity", help="Intensity note (timed items)"),
    rounds: int | None = typer.Option(None, "--rounds", help="Rounds (circuit items)"),
    minutes: float | None = typer.Option(None, "--minutes", help="Total minutes (circuit items)"),
    clean: bool = typer.Option(False, "--clean", help="Set performed with clean form"),
    notes: str = typer.Option("", "--notes", help="Notes"),
) -> None:
    """Log a set for an item of the current program."""
    store = _store(ctx)
    program = _require_program(store)

    found_session = _find_session(program, session)
    found_item = _find_item(found_session, item) if found_session else None
    if found_session is None or found_item is None:
        exit_with_error("Choose session + item.")

    log = load_log(store.load(KEY_LOG, []))
    try:
        result = build_result(
            found_item.log_type,
            reps=reps,
            weight=weight,
            units=units or found_item.default_units,
            seconds=seconds,
            intensity=intensity,
            rounds=rounds,
            minutes=minutes,
        )
        entry = new_entry(program, found_session.id, found_item.id, result, clean=clean, notes=notes)
    except LogEntryError as e:
        exit_with_error(str(e))

    hint = progress_hint(found_item, find_last(log, found_session.id, found_item.id), clean, result)
    log.append(entry)
    store.save(KEY_LOG, dump_log(log))

    console.print(f"[green]✓ Saved:[/green] {entry.item_name} {format_result(entry)}{' ✅' if entry.clean else ''}")
    console.print(f"[cyan]Hint:[/cyan] {hint}")


@app.command()
def history(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-q", help="Filter entries by text"),
) -> None:
    """List logged sets, newest first."""
    entries = search_log(load_log(_store(ctx).load(KEY_LOG, [])), search)

    table = Table(title=f"{len(entries)} entries")
    table.add_column("Date")
    table.add_column("Session")
    table.add_column("Item")
    table.add_column("Result")
    table.add_column("Notes", style="dim")
    for e in entries:
        table.add_row(e.date, e.session_label, e.item_name, format_result(e) + (" ✅" if e.clean else ""), e.notes)
    console.print(table)


@app.command("delete-last")
def delete_last_entry(ctx: typer.Context) -> None:
    """Delete the most recent log entry."""
    store = _store(ctx)
    log = load_log(store.load(KEY_LOG, []))
    if not log:
        console.print("[yellow]Log is empty.[/yellow]")
        return
    store.save(KEY_LOG, dump_log(delete_last(log)))
    console.print("[green]✓ Deleted last entry.[/green]")


@app.command()
def export(
    ctx: typer.Context,
    output: Path | None = typer.Option(None, "--output", "-o", help="Write CSV to file instead of stdout"),
) -> None:
    """Export the training log as CSV."""
    csv_text = export_log_csv(load_log(_store(ctx).load(KEY_LOG, [])))
    if output is None:
        typer.echo(csv_text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(csv_text, encoding="utf-8")
    console.print(f"[green]✓ Exported log to {output}[/green]")


@app.command()
def clear_log(
    ctx: typer.Context,
    confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
) -> None:
    """Clear the entire training log."""
    if not confirm:
        exit_with_error("Refusing to clear the log without --confirm")
    _store(ctx).save(KEY_LOG, [])
    console.print("[green]✓ Log cleared.[/green]")


@app.command()
def clear_plan(
    ctx: typer.Context,
    confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
) -> None:
    """Clear the stored plan and keep the log."""
    if not confirm:
        exit_with_error("Refusing to clear the plan without --confirm")
    _store(ctx).delete(KEY_PROGRAM)
    console.print("[green]✓ Plan cleared.[/green]")


if __name__ == "__main__":
    app()
