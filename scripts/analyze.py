#!/usr/bin/env python3
"""
GlideTrack Flight Analysis Script

Analyse one IGC flight log: circling, thermals, circle drift and straight
phases.

Usage:
    python scripts/analyze.py IGC_FILE [OPTIONS]

Examples:
    # Print a summary
    python scripts/analyze.py flights/2024-06-01.igc

    # Write a text report and a map
    python scripts/analyze.py flights/2024-06-01.igc --format txt --output report.txt --map map.html
"""

import sys
import argparse
from pathlib import Path

import yaml

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from glidetrack.config import Config
from glidetrack.tracking import FlightReader
from glidetrack.analysis import FlightAnalyzer, AnalysisException
from glidetrack.visualization import MapGenerator


def apply_overrides(config, overrides):
    """
    Apply KEY=VALUE overrides to a configuration.

    Values are read as YAML scalars, so numbers stay numbers.

    Raises:
        ValueError: If an override is malformed or rejected by the config
    """
    for override in overrides:
        key, sep, raw = override.partition("=")
        if not sep:
            raise ValueError(f"Expected KEY=VALUE, got {override!r}")
        config.set(key.strip(), yaml.safe_load(raw))


def main(argv=None):
    """Main entry point for flight analysis."""
    parser = argparse.ArgumentParser(
        description="GlideTrack Flight Analyzer - Thermals and glides from IGC logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Print a summary:
    python3 scripts/analyze.py flight.igc

  Text report:
    python3 scripts/analyze.py flight.igc --format txt --output report.txt

  Interactive map:
    python3 scripts/analyze.py flight.igc --map flight.html

  Stricter circling threshold, saved for next time:
    python3 scripts/analyze.py flight.igc --set analysis.turn_rate_threshold=6 --save-config glidetrack.yaml
        """,
    )

    parser.add_argument("igc_file", type=str, help="Path to IGC flight log")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file (default: built-in settings)",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a setting, e.g. analysis.turn_rate_threshold=6 (repeatable)",
    )
    parser.add_argument(
        "--save-config",
        type=str,
        metavar="YAML_FILE",
        help="Write the effective configuration to a file",
    )

    # Output options
    parser.add_argument("--output", type=str, help="Report output file")
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "txt"],
        help="Report format (default: from config, json)",
    )
    parser.add_argument("--map", type=str, metavar="HTML_FILE", help="Write an interactive map")

    # Analysis options
    parser.add_argument(
        "--check-twice",
        action="store_true",
        help="Also audit centering corrections against the check-twice rule",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")

    args = parser.parse_args(argv)

    # Load configuration
    config = Config(args.config)
    try:
        apply_overrides(config, args.set)
    except (ValueError, yaml.YAMLError) as e:
        print(f"❌ Invalid setting: {e}")
        sys.exit(1)

    if not args.quiet:
        for override in args.set:
            key = override.partition("=")[0].strip()
            print(f"⚙️  {key} = {config.get(key)}")

    if args.save_config:
        config.save_config(args.save_config)
        if not args.quiet:
            print(f"✅ Config saved to {args.save_config}")

    try:
        flight = FlightReader(args.igc_file).load_flight()

        analyzer = FlightAnalyzer(config, check_twice=args.check_twice, verbose=not args.quiet)
        results = analyzer.analyze_all(flight, args.output, args.format)

        if not args.quiet:
            print("\n🌀 Thermals:")
            for i, thermal in enumerate(flight.thermals, 1):
                print(f"   {i:2d}. {thermal.start_point.timestamp:%H:%M:%S}  {thermal}")
            print(f"\n✈️  Average glide speed: {results['summary']['average_glide_speed']}")

        if args.map:
            map_gen = MapGenerator.for_flight(flight, config.map_style)
            map_gen.add_track(flight.fixes)
            map_gen.add_thermals(flight.thermals)
            map_gen.add_straight_phases(flight.straight_phases)
            map_gen.save(args.map)

    except FileNotFoundError:
        print(f"❌ IGC file not found: {args.igc_file}")
        sys.exit(1)
    except (AnalysisException, ValueError) as e:
        print(f"❌ Analysis failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
