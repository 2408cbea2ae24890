"""
Orbit Simulator - CLI

Runs the Atlas V reference rocket (or just its first stage) headless,
prints a summary and optionally writes telemetry plots.
"""

import argparse
import logging
import os
import sys

from . import constants as C
from .config import SimulationConfig
from .factory import atlas_v, build_multi_stage, build_single_stage
from .plotting import generate_all_plots
from .simulation import run_simulation
from .utils import convert_degrees_to_radians, convert_metres_to_km

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Ideal rocket ascent simulation over flat ground",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--single-stage",
        action="store_true",
        help="Fly only the first stage, carrying the payload directly"
    )
    parser.add_argument(
        "--payload",
        type=float,
        default=C.DEFAULT_PAYLOAD_MASS,
        help="Payload mass (kg)"
    )
    parser.add_argument(
        "--throttle",
        type=float,
        default=C.DEFAULT_THROTTLE,
        help="Throttle setting between 0 and 1"
    )
    parser.add_argument(
        "--gimbal",
        type=float,
        default=0.0,
        help="Gimbal angle in degrees (strictly between -90 and 90)"
    )
    parser.add_argument(
        "--target-height",
        type=float,
        default=C.TARGET_HEIGHT_KM,
        help="Height at which the run ends (km)"
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=C.TIMER_INTERVAL,
        help="Update interval (s)"
    )
    parser.add_argument(
        "--time-ratio",
        type=float,
        default=C.DEFAULT_TIME_RATIO,
        help="Simulated seconds per update second"
    )
    parser.add_argument(
        "--max-time",
        type=float,
        default=C.MAX_TIME,
        help="Maximum simulated time (s)"
    )
    parser.add_argument(
        "--no-auto-eject",
        action="store_true",
        help="Do not eject stages when their fuel runs out"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    return parser.parse_args(argv)


def build_vehicle(args):
    """Construct the vehicle described by the command-line arguments."""
    rocket = atlas_v(payload_mass=args.payload)
    if args.single_stage:
        vehicle = build_single_stage(rocket.stages[0], rocket.payload_mass)
    else:
        vehicle = build_multi_stage(rocket)
    vehicle.set_throttle(args.throttle)
    vehicle.set_gimbal(convert_degrees_to_radians(args.gimbal))
    return vehicle


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = SimulationConfig(
        timer_interval=args.interval,
        time_ratio=args.time_ratio,
        max_time=args.max_time,
        target_height_km=args.target_height,
        auto_eject=not args.no_auto_eject,
        verbose=not args.quiet,
    )

    try:
        vehicle = build_vehicle(args)
        logger.info("Starting simulation...")
        result = run_simulation(vehicle, config)
    except ValueError as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        return 1

    state = result.final_state
    print("\n" + "=" * 60)
    print("SIMULATION SUMMARY")
    print("=" * 60)
    print(f"Termination reason: {result.reason}")
    print(f"Final time: {state.elapsed_time:.2f} s")
    print(f"Final height: {convert_metres_to_km(state.height):.2f} km")
    print(f"Max height: {convert_metres_to_km(vehicle.max_height):.2f} km")
    print(f"Final speed: {state.speed:.2f} m/s")
    print(f"Stage: {state.stage_index + 1} of {vehicle.num_stages}")
    for t, message in result.log.events:
        print(f"  t={t:8.1f}s  {message}")
    print("=" * 60 + "\n")

    if not args.no_plots and len(result.log) > 0:
        if os.path.isabs(args.output_dir):
            plot_dir = args.output_dir
        else:
            plot_dir = os.path.join(os.getcwd(), args.output_dir)
        logger.info(f"Generating plots in {plot_dir}")
        saved = generate_all_plots(result.log, plot_dir)
        print(f">> {len(saved)} plots written to: {plot_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
