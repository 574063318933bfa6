"""Command-line interface for the footwork trainer.

Every command works on the same core a renderer would use: plans come from
the plan generator, positions from the timeline sampler and drills run
through a trainer session driven by a virtual clock.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from footwork.core.catalog import default_catalog
from footwork.core.config.loader import configure_logging, load_app_config
from footwork.core.config.models import AppConfig
from footwork.core.planning import PlanError, PlanGenerator, Segment, Tempo
from footwork.core.playback.criteria import format_criteria
from footwork.core.session import TrainerSession
from footwork.core.timeline import DEFAULT_STEP_MS, build_trace, sample_at
from footwork.core.vocabulary import Hand, PlayMode

console = Console()
logger = logging.getLogger(__name__)

# Drill simulation frame rate.
DRILL_FRAME_MS = 1000.0 / 60.0


class VirtualClock:
    """Manually advanced millisecond clock for simulated playback."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def _load_config(args: argparse.Namespace) -> AppConfig:
    path = Path(args.config) if args.config else None
    app_config = load_app_config(path)
    if args.verbose:
        app_config = app_config.model_copy(
            update={"logging": app_config.logging.model_copy(update={"level": "DEBUG"})}
        )
    configure_logging(app_config)
    return app_config


def _tempo_from_args(args: argparse.Namespace, app_config: AppConfig) -> Tempo:
    defaults = app_config.tempo
    return Tempo(
        speed_multiplier=defaults.speed_multiplier if args.speed is None else args.speed,
        reaction_ms=defaults.reaction_ms if args.reaction is None else args.reaction,
    )


def _fmt_point(x: float, y: float) -> str:
    return f"({x:.3f}, {y:.3f})"


def _segment_table(title: str, segments: tuple[Segment, ...]) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Primitive")
    table.add_column("Intent")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Duration", justify="right")
    table.add_column("Pose")

    for i, seg in enumerate(segments):
        table.add_row(
            str(i),
            seg.primitive_id,
            seg.intent.value,
            _fmt_point(seg.from_.x, seg.from_.y),
            _fmt_point(seg.to.x, seg.to.y),
            f"{seg.duration_ms}ms",
            seg.contact_pose.value,
        )
    return table


def cmd_plan(args: argparse.Namespace) -> int:
    """Print the plan for one landing cell."""
    app_config = _load_config(args)
    tempo = _tempo_from_args(args, app_config)
    mode = args.mode or app_config.play.mode
    hand = args.hand or app_config.play.hand

    try:
        plan = PlanGenerator().plan(
            args.landing, tempo, mode=mode, hand=hand, base_id=app_config.play.base_id
        )
    except PlanError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    if args.json:
        console.print_json(plan.to_json())
        return 0

    meta = plan.meta
    console.print(
        f"[bold]{meta.landing_id}[/bold] -> {meta.sequence_id} "
        f"({meta.mode.value}/{meta.hand.value}, base {meta.base_id})"
    )
    console.print(_segment_table("Segments", plan.segments))
    console.print(f"Reaction: {plan.reaction_ms:.0f}ms  Movement: {plan.movement_ms}ms")
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Print sampler output at the requested times."""
    app_config = _load_config(args)
    tempo = _tempo_from_args(args, app_config)
    hold_ms = app_config.playback.hold_ms if args.hold is None else args.hold

    try:
        plan = PlanGenerator().plan(args.landing, tempo)
    except PlanError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    table = Table(title=f"{plan.meta.landing_id} samples")
    table.add_column("t (ms)", justify="right")
    table.add_column("Position")
    table.add_column("Segment", justify="right")
    table.add_column("Progress", justify="right")
    table.add_column("Phase")

    for t in args.at:
        s = sample_at(plan, t, plan.reaction_ms, hold_ms)
        table.add_row(
            f"{t:.0f}",
            _fmt_point(s.position.x, s.position.y),
            str(s.active_segment_index),
            f"{s.progress:.3f}",
            s.phase.value,
        )
    console.print(table)
    return 0


def cmd_trace(args: argparse.Namespace) -> int:
    """Print a fixed-rate trace of the whole timeline."""
    app_config = _load_config(args)
    tempo = _tempo_from_args(args, app_config)
    hold_ms = app_config.playback.hold_ms if args.hold is None else args.hold

    try:
        plan = PlanGenerator().plan(args.landing, tempo)
        trace = build_trace(plan, plan.reaction_ms, hold_ms, args.step_ms)
    except (PlanError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    table = Table(title=f"{plan.meta.landing_id} trace ({len(trace)} samples)")
    table.add_column("t (ms)", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Segment", justify="right")
    table.add_column("Progress", justify="right")

    for i in range(len(trace)):
        table.add_row(
            f"{trace.t_ms[i]:.1f}",
            f"{trace.x[i]:.4f}",
            f"{trace.y[i]:.4f}",
            str(int(trace.segment_index[i])),
            f"{trace.progress[i]:.3f}",
        )
    console.print(table)
    return 0


def cmd_drill(args: argparse.Namespace) -> int:
    """Simulate a drill queue and print each cue change."""
    app_config = _load_config(args)
    if args.seed is not None:
        app_config = app_config.model_copy(
            update={"drill": app_config.drill.model_copy(update={"seed": args.seed})}
        )

    clock = VirtualClock()
    session = TrainerSession(app_config=app_config, clock=clock)
    if args.no_auto_advance:
        session.auto_advance = False

    def on_segment(index: int, segment: Segment) -> None:
        console.print(
            f"[dim]{clock.now:8.0f}ms[/dim] {session.landing_id} #{index} "
            f"[bold]{segment.name}[/bold]"
        )
        if args.cues:
            console.print(format_criteria(segment), markup=False)

    session.subscribe(on_segment)

    try:
        targets = session.generate_queue(args.length)
    except (PlanError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    console.print(f"[bold]Drill queue:[/bold] {' '.join(targets)}")
    session.play()

    completed = 0
    while True:
        clock.advance(DRILL_FRAME_MS)
        frame = session.poll()
        if not frame.completed_now:
            continue
        completed += 1
        if not session.status.is_active:
            break

    console.print(f"[green]Completed {completed}/{len(targets)} targets[/green]")
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """List landing cells, sequences and primitives."""
    _load_config(args)
    catalog = default_catalog()

    cells = Table(title="Landing cells")
    cells.add_column("Id")
    cells.add_column("Label")
    cells.add_column("Center")
    cells.add_column("Sequence (singles/right)")
    for cell in catalog.grid.cells:
        sequence_id = catalog.landing_maps.lookup(PlayMode.SINGLES, Hand.RIGHT, cell.id)
        cells.add_row(
            cell.id, cell.label, _fmt_point(cell.center.x, cell.center.y), sequence_id or "-"
        )
    console.print(cells)

    sequences = Table(title="Sequences")
    sequences.add_column("Id")
    sequences.add_column("Name")
    sequences.add_column("Pattern")
    for seq in catalog.sequences:
        sequences.add_row(seq.id, seq.name, " -> ".join(seq.pattern))
    console.print(sequences)

    primitives = Table(title="Primitives")
    primitives.add_column("Id")
    primitives.add_column("Intent")
    primitives.add_column("Nominal", justify="right")
    primitives.add_column("Tags")
    for prim in catalog.primitives:
        primitives.add_row(
            prim.id,
            prim.intent.value,
            f"{prim.nominal_duration_ms}ms",
            ", ".join(sorted(prim.tags)),
        )
    console.print(primitives)
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to app config (YAML or JSON)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _add_tempo(p: argparse.ArgumentParser) -> None:
    p.add_argument("--speed", type=float, default=None, help="Speed multiplier (0.25-3.0)")
    p.add_argument("--reaction", type=float, default=None, help="Reaction delay in ms")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="footwork",
        description="Footwork trainer - badminton movement plans and drills",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    plan = sub.add_parser("plan", help="Generate the plan for a landing cell")
    plan.add_argument("--landing", required=True, help="Landing cell id (e.g. F_C)")
    _add_tempo(plan)
    plan.add_argument("--mode", choices=["singles", "doubles"], default=None)
    plan.add_argument("--hand", choices=["right", "left"], default=None)
    plan.add_argument("--json", action="store_true", help="Print the plan as JSON")
    _add_common(plan)
    plan.set_defaults(func=cmd_plan)

    sample = sub.add_parser("sample", help="Sample the figure position at given times")
    sample.add_argument("--landing", required=True, help="Landing cell id")
    sample.add_argument("--at", type=float, nargs="+", required=True, help="Times in ms")
    sample.add_argument("--hold", type=float, default=None, help="Contact hold in ms")
    _add_tempo(sample)
    _add_common(sample)
    sample.set_defaults(func=cmd_sample)

    trace = sub.add_parser("trace", help="Sample the whole timeline at a fixed rate")
    trace.add_argument("--landing", required=True, help="Landing cell id")
    trace.add_argument("--step-ms", type=float, default=DEFAULT_STEP_MS, help="Grid spacing")
    trace.add_argument("--hold", type=float, default=None, help="Contact hold in ms")
    _add_tempo(trace)
    _add_common(trace)
    trace.set_defaults(func=cmd_trace)

    drill = sub.add_parser("drill", help="Simulate a random drill queue")
    drill.add_argument("--length", type=int, default=None, help="Number of targets")
    drill.add_argument("--seed", type=int, default=None, help="Random seed")
    drill.add_argument(
        "--no-auto-advance", action="store_true", help="Stop after the first target"
    )
    drill.add_argument("--cues", action="store_true", help="Print coaching cues per move")
    _add_common(drill)
    drill.set_defaults(func=cmd_drill)

    catalog = sub.add_parser("catalog", help="List landing cells, sequences and primitives")
    _add_common(catalog)
    catalog.set_defaults(func=cmd_catalog)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)
    return args.func(args)
