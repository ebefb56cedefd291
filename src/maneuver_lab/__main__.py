"""Command line entry point: ``python -m maneuver_lab`` / ``maneuver-lab``."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from maneuver_lab import __version__
from maneuver_lab.core.model import Body
from maneuver_lab.core.simulation import Simulation
from maneuver_lab.data.bodies import DEFAULT_BODY_KEY, get_body, list_bodies, load_body
from maneuver_lab.data.scenarios import SCENARIO_DISPLAY_ORDER, SCENARIOS


def _add_maneuver_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--body", default=DEFAULT_BODY_KEY, help=f"central body ({', '.join(list_bodies())})")
    parser.add_argument("--body-file", type=Path, help="JSON file with name, radius and mu (or mass)")
    parser.add_argument("--scenario", choices=SCENARIO_DISPLAY_ORDER, help="preset maneuver")
    parser.add_argument("--altitude", type=float, help="initial circular orbit altitude [km]")
    parser.add_argument("--delta-v", type=float, help="burn magnitude [m/s], negative for retrograde")


def _resolve_body(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Body:
    if args.body_file is not None:
        try:
            return load_body(args.body_file)
        except (OSError, ValueError) as err:
            parser.error(f"could not load body file: {err}")
    try:
        return get_body(args.body)
    except KeyError as err:
        parser.error(str(err.args[0]))


def _build_simulation(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Simulation:
    sim = Simulation(_resolve_body(parser, args))
    if args.scenario:
        SCENARIOS[args.scenario].apply(sim.controls)
    if args.altitude is not None:
        sim.controls.set_altitude(args.altitude)
    if args.delta_v is not None:
        sim.controls.set_delta_v(args.delta_v)
    return sim


def _cmd_elements(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    sim = _build_simulation(parser, args)
    state = sim.controls.state
    elements = sim.elements()
    readout = sim.readout()
    print(f"\n--- {sim.body.name}: {state.altitude_km:.0f} km, Delta-V {state.delta_v:+.0f} m/s ---")
    print(f" Status:         {readout.status}")
    print(f" r1 / v1:        {elements.r1 / 1000:,.1f} km / {elements.v1:,.1f} m/s")
    print(f" Burn velocity:  {readout.burn_velocity}")
    print(f" Semi-major:     {elements.semi_major_axis / 1000:,.1f} km")
    print(f" Eccentricity:   {readout.eccentricity}")
    print(f" Periapsis:      {readout.periapsis}")
    print(f" Apoapsis:       {readout.apoapsis}")
    print(f" Period:         {readout.period}")
    if readout.suborbital:
        print(" Warning:        periapsis below the surface")
    return 0


def _cmd_live(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from maneuver_lab.core.logging_utils import RunLogger
    from maneuver_lab.record import FlightRecorder
    from maneuver_lab.render.app import run_live

    sim = _build_simulation(parser, args)
    recorder = None
    if args.record:
        recorder = FlightRecorder(RunLogger(args.runs_dir), log_every=args.log_every)
    try:
        run_live(sim, recorder=recorder)
    except KeyboardInterrupt:
        pass
    if recorder is not None:
        print(f"Run saved to {recorder.logger.run_dir}")
    return 0


def _cmd_run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from maneuver_lab.record import record_run

    if args.frames <= 0:
        parser.error("--frames must be positive")
    sim = _build_simulation(parser, args)
    run_dir = record_run(
        sim,
        args.frames,
        root_dir=args.runs_dir,
        run_id=args.run_id,
        log_every=args.log_every,
    )
    print(f"Recorded {args.frames} frames ({sim.clock.elapsed:.1f} s) to {run_dir}")
    return 0


def _cmd_sweep(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from maneuver_lab.sweep import plot_sweep, print_sweep_summary, run_sweep

    if args.points < 2:
        parser.error("--points must be at least 2")
    body = _resolve_body(parser, args)
    result = run_sweep(body, args.altitude, (args.min, args.max), args.points)
    print_sweep_summary(result)
    out = plot_sweep(result, args.out)
    print(f"\nFigure saved to {out}")
    return 0


def _cmd_analyze(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from maneuver_lab.analyze_run import analyze, print_summary, resolve_run_dir

    try:
        run_path = resolve_run_dir(args.run_dir, args.runs_dir)
        summary = analyze(run_path)
    except (FileNotFoundError, ValueError) as err:
        parser.error(str(err))
    print_summary(summary)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maneuver-lab",
        description="Impulsive Delta-V maneuvers on Keplerian orbits.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    elements = sub.add_parser("elements", help="print the orbit produced by one burn")
    _add_maneuver_args(elements)
    elements.set_defaults(handler=_cmd_elements)

    live = sub.add_parser("live", help="open the interactive view")
    _add_maneuver_args(live)
    live.add_argument("--record", action="store_true", help="log the session to a run directory")
    live.add_argument("--runs-dir", type=Path, default=Path("data") / "runs")
    live.add_argument("--log-every", type=int, default=1, help="log every Nth frame")
    live.set_defaults(handler=_cmd_live)

    run = sub.add_parser("run", help="simulate headless and record the frames")
    _add_maneuver_args(run)
    run.add_argument("--frames", type=int, default=3_000)
    run.add_argument("--runs-dir", type=Path, default=Path("data") / "runs")
    run.add_argument("--run-id")
    run.add_argument("--log-every", type=int, default=1, help="log every Nth frame")
    run.set_defaults(handler=_cmd_run)

    sweep = sub.add_parser("sweep", help="plot eccentricity and apsides against Delta-V")
    sweep.add_argument("--body", default=DEFAULT_BODY_KEY)
    sweep.add_argument("--body-file", type=Path)
    sweep.add_argument("--altitude", type=float, default=400.0)
    sweep.add_argument("--min", type=float, default=-1_500.0)
    sweep.add_argument("--max", type=float, default=3_500.0)
    sweep.add_argument("--points", type=int, default=401)
    sweep.add_argument("--out", type=Path, default=Path("figures"))
    sweep.set_defaults(handler=_cmd_sweep)

    analyze = sub.add_parser("analyze", help="plot and summarise a recorded run")
    analyze.add_argument("run_dir", nargs="?", help="run id or path (default: latest run)")
    analyze.add_argument("--runs-dir", type=Path, default=Path("data") / "runs")
    analyze.set_defaults(handler=_cmd_analyze)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.handler(parser, args)


if __name__ == "__main__":
    raise SystemExit(main())
