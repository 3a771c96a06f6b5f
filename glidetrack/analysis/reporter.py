"""
Report Generator
Creates flight analysis reports in various formats.
"""

import json
from typing import Dict, Any

from ..utils import format_distance, format_speed


class ReportGenerator:
    """
    Generates analysis reports in multiple formats.
    """

    def generate_report(self, analysis_results: Dict[str, Any],
                        output_path: str, format: str = 'json'):
        """
        Generate analysis report.

        Args:
            analysis_results: Results from FlightAnalyzer.build_results()
            output_path: Output file path
            format: Report format ('json', 'txt')

        Raises:
            ValueError: If the format is not supported
        """
        if format == 'json':
            self._generate_json_report(analysis_results, output_path)
        elif format == 'txt':
            self._generate_text_report(analysis_results, output_path)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def _generate_json_report(self, results: Dict[str, Any], output_path: str):
        """Generate JSON report."""
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, default=str)

    def _generate_text_report(self, results: Dict[str, Any], output_path: str):
        """Generate text report."""
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("=" * 70 + "\n")
            f.write("GLIDETRACK FLIGHT ANALYSIS REPORT\n")
            f.write("=" * 70 + "\n\n")

            f.write(f"Generated: {results['metadata']['analysis_date']}\n")
            f.write(f"Flight: {results['metadata'].get('flight') or 'unnamed'}\n\n")

            # Overview
            summary = results['summary']
            f.write("OVERVIEW\n")
            f.write("-" * 70 + "\n")
            f.write(f"Ground Track Distance: {format_distance(summary['total_distance_m'])}\n")
            f.write(f"Duration: {summary['duration']}\n")
            f.write(f"Total circles detected: {summary['circle_count']}\n")
            f.write(f"Total thermals detected: {summary['thermal_count']}\n")
            f.write(f"Straight phases: {summary['straight_phase_count']}\n\n")

            # Thermals
            f.write("THERMALS\n")
            f.write("-" * 70 + "\n")
            for i, thermal in enumerate(results['thermals'], 1):
                f.write(f"  #{i:2d}: {thermal['circle_count']:2d} circles, "
                        f"{thermal['total_duration']:>7}, "
                        f"avg circle {thermal['average_circle_duration_s']}s "
                        f"({thermal['direction']})\n")
            f.write("\n")

            # Wind
            if results.get('wind_drift'):
                f.write("CIRCLE DRIFT\n")
                f.write("-" * 70 + "\n")
                for trend in results['wind_drift']:
                    f.write(f"  {trend['bearing']:5.1f}° / {trend['distance_m']:5.1f} m per circle "
                            f"({trend['samples']} samples, {trend['trimmed']} trimmed)\n")
                f.write("\n")

            # Straight phases
            f.write("STRAIGHT PHASES\n")
            f.write("-" * 70 + "\n")
            for i, phase in enumerate(results['straight_phases'], 1):
                f.write(f"  #{i:2d}: {format_distance(phase['distance_m']):>10} "
                        f"in {phase['duration_s']:5d}s at "
                        f"{format_speed(phase['ground_speed_ms'])}\n")
