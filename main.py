#!/usr/bin/env python3

import logging
import os
import sys

from config import Config
from svg2gcode.file_parser import ParseError, read_svg_file
from svg2gcode.gcode_generator import GCodeGenerator
from svg2gcode.models import InvalidParametersError
from svg2gcode.user_interface import select_input_file, get_tool_parameters, display_summary
from svg2gcode.utils.gcode_format import sanitize_project_name
from svg2gcode.utils.validators import get_parameter_warnings

def main():
    """Main application entry point."""
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    print("=== SVG to G-code Generator ===")
    print("Generate CNC milling G-code from SVG line art\n")

    # Ensure output directory exists
    os.makedirs("output", exist_ok=True)

    input_file = select_input_file()
    print(f"\nSelected input file: {input_file}")

    try:
        svg_content = read_svg_file(input_file)
    except ParseError as e:
        print(f"\n❌ ERROR: {str(e)}")
        sys.exit(1)

    params = get_tool_parameters(Config.DEFAULT_TOOL_PARAMETERS)

    base_name = sanitize_project_name(os.path.splitext(os.path.basename(input_file))[0]) or "output"
    output_file = os.path.join("output", f"{base_name}.gcode")

    if not display_summary(input_file, params, output_file):
        print("Operation cancelled.")
        return

    for warning in get_parameter_warnings(params, Config.MAX_STEPDOWN_FACTOR):
        print(f"⚠️  {warning}")

    try:
        print("\nGenerating G-code...")
        result = GCodeGenerator(params).generate(svg_content)
    except InvalidParametersError as e:
        print(f"\n❌ ERROR: {str(e)}")
        sys.exit(1)
    except ParseError as e:
        print(f"\n❌ ERROR: Problem with SVG file:")
        print(f"{str(e)}")
        sys.exit(1)

    for warning in result.warnings:
        print(f"⚠️  {warning}")

    with open(output_file, 'w') as f:
        f.write(result.program)
    print(f"✅ G-code generated: {output_file}")

    show_plot = input("\nWould you like to see a visual preview of the toolpath? (y/n): ").lower().strip()
    if show_plot in ['y', 'yes']:
        try:
            from svg2gcode.visualizer import plot_toolpath_preview, save_plot_preview
            plot_filename = save_plot_preview(result.segments, base_name)
            print(f"Plot saved to: {plot_filename}")
            plot_toolpath_preview(result.segments)
        except ImportError:
            print("⚠️  Visual preview requires matplotlib. Install with: pip install matplotlib")

    show_gcode_preview = input("\nWould you like to see a preview of the generated G-code text? (y/n): ").lower().strip()
    if show_gcode_preview in ['y', 'yes']:
        lines = result.lines
        print(f"\n--- G-code Preview (first 10 lines) ---")
        for i, line in enumerate(lines[:10]):
            print(f"{i+1:2d}: {line}")
        if len(lines) > 10:
            print(f"... ({len(lines) - 10} more lines)")

if __name__ == "__main__":
    main()
