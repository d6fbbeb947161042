"""
Cricket Shot Simulation - CLI

The single entry point for flying a shot, generating plots and exporting
stats.
"""

import argparse
import logging
import os
import sys

from cricket_sim import constants as C
from cricket_sim.config import create_config
from cricket_sim.export import default_export_filename, export_stats_csv
from cricket_sim.flight import FlightController
from cricket_sim.main import run_simulation
from cricket_sim.plotting import generate_all_plots
from cricket_sim.predictor import predict

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Cricket Shot Flight Simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--angle", type=float, default=C.DEFAULT_ANGLE,
                        help="Launch angle (deg)")
    parser.add_argument("--speed", type=float, default=C.DEFAULT_SPEED,
                        help="Launch speed (m/s)")
    parser.add_argument("--gravity", type=float, default=C.DEFAULT_GRAVITY,
                        help="Gravitational acceleration (m/s^2)")
    parser.add_argument("--restitution", type=float, default=C.DEFAULT_RESTITUTION,
                        help="Fraction of vertical speed kept per bounce")
    parser.add_argument("--dt", type=float, default=C.DRIVER_DT,
                        help="Tick length (s)")
    parser.add_argument("--max-time", type=float, default=C.MAX_FLIGHT_TIME,
                        help="Abandon the flight after this many seconds")
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots and exports"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    parser.add_argument(
        "--export-csv",
        action="store_true",
        help="Export the final stats as label/value/unit CSV"
    )
    parser.add_argument(
        "--log-csv",
        action="store_true",
        help="Write per-tick telemetry CSV"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    # Configure verbosity
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    config = create_config(args.angle, args.speed, args.gravity, args.restitution)
    preview = predict(config)
    controller = FlightController(config=config)

    if os.path.isabs(args.output_dir):
        out_dir = args.output_dir
    else:
        out_dir = os.path.join(os.getcwd(), args.output_dir)

    try:
        logger.info("Starting simulation...")
        final_state, log, reason = run_simulation(
            config, dt=args.dt, max_time=args.max_time,
            verbose=not args.quiet, controller=controller,
        )

        stats = controller.stats
        print("\n" + "=" * 60)
        print("SHOT SUMMARY")
        print("=" * 60)
        print(f"Termination reason:  {reason}")
        print(f"Predicted range:     {preview.range:.2f} m "
              f"(apex {preview.apex_height:.2f} m)")
        print(f"Actual range:        {stats.range:.2f} m")
        print(f"Max height:          {stats.max_height:.2f} m")
        print(f"Flight time:         {stats.elapsed_time:.2f} s")
        print("=" * 60 + "\n")

        if args.log_csv:
            path = os.path.join(out_dir, 'telemetry.csv')
            log.to_csv(path)
            logger.info(f"Telemetry written to {path}")

        if args.export_csv:
            export_stats_csv(os.path.join(out_dir, default_export_filename()),
                             config, stats)

        if not args.no_plots and len(log.time) > 0:
            logger.info(f"Generating plots in {out_dir}")
            generate_all_plots(log, preview, out_dir)
            print(f"Check outputs in: {out_dir}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
