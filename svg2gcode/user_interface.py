import os
import sys
from typing import Any, Dict, List, Optional, Sequence

from .models import CUT_MODES, PATH_ORDERINGS, PLUNGE_MODES, ToolParameters

def get_input_files(input_dir: str = "input") -> List[str]:
    """Get sorted list of SVG files in the input directory."""
    if not os.path.exists(input_dir):
        return []

    return sorted(f for f in os.listdir(input_dir) if f.lower().endswith('.svg'))

def select_input_file(input_dir: str = "input") -> str:
    """Prompt user to select an input file."""
    files = get_input_files(input_dir)

    if not files:
        print(f"No SVG files found in the '{input_dir}' directory.")
        print("Please add an .svg file with the line art to cut.")
        sys.exit(1)

    print("Available input files:")
    for i, file in enumerate(files, 1):
        print(f"{i}. {file}")

    while True:
        try:
            choice = int(input(f"\nSelect file (1-{len(files)}): ")) - 1
            if 0 <= choice < len(files):
                return os.path.join(input_dir, files[choice])
            else:
                print(f"Please enter a number between 1 and {len(files)}")
        except ValueError:
            print("Please enter a valid number")

def get_float_input(prompt: str, default: Optional[float] = None) -> float:
    while True:
        try:
            if default is not None:
                user_input = input(f"{prompt} (default: {default}): ").strip()
                if not user_input:
                    return default
            else:
                user_input = input(f"{prompt}: ").strip()

            return float(user_input)
        except ValueError:
            print("Please enter a valid number")

def get_int_input(prompt: str, default: Optional[int] = None) -> int:
    while True:
        try:
            if default is not None:
                user_input = input(f"{prompt} (default: {default}): ").strip()
                if not user_input:
                    return default
            else:
                user_input = input(f"{prompt}: ").strip()

            return int(user_input)
        except ValueError:
            print("Please enter a valid number")

def get_choice_input(prompt: str, choices: Sequence[str], default: str) -> str:
    while True:
        user_input = input(f"{prompt} [{'/'.join(choices)}] (default: {default}): ").strip().lower()
        if not user_input:
            return default
        if user_input in choices:
            return user_input
        print(f"Please enter one of: {', '.join(choices)}")

def get_tool_parameters(defaults: Dict[str, Any]) -> ToolParameters:
    """Prompt user for tool parameters, offering config defaults."""
    print("\n=== Tool Parameters ===")
    print("Enter parameters in millimetres (press Enter for the default):")

    return ToolParameters(
        spindle_speed=get_int_input("Spindle speed (RPM)", defaults['spindle_speed']),
        feed_rate=get_float_input("Feed rate (mm/min)", defaults['feed_rate']),
        plunge_rate=get_float_input("Plunge rate (mm/min)", defaults['plunge_rate']),
        depth_of_cut=get_float_input("Total depth of cut (mm)", defaults['depth_of_cut']),
        pass_depth=get_float_input("Depth per pass (mm)", defaults['pass_depth']),
        safe_z=get_float_input("Safe Z height (mm)", defaults['safe_z']),
        tool_diameter=get_float_input("Tool diameter (mm)", defaults['tool_diameter']),
        cut_mode=get_choice_input("Cut mode", CUT_MODES, defaults['cut_mode']),
        plunge_mode=get_choice_input("Plunge mode", PLUNGE_MODES, defaults['plunge_mode']),
        path_ordering=get_choice_input("Path ordering", PATH_ORDERINGS, defaults['path_ordering']),
    )

def display_summary(input_file: str, params: ToolParameters, output_file: str) -> bool:
    """Display a summary of the operation and ask for confirmation."""
    print(f"\n=== Operation Summary ===")
    print(f"Input file: {input_file}")
    print(f"G-code file: {output_file}")

    print(f"\nTool Parameters:")
    print(f"  Tool diameter: {params.tool_diameter} mm")
    print(f"  Depth of cut: {params.depth_of_cut} mm ({params.pass_depth} mm per pass)")
    print(f"  Feed rate: {params.feed_rate} mm/min")
    print(f"  Plunge rate: {params.plunge_rate} mm/min")
    print(f"  Spindle speed: {params.spindle_speed} RPM")
    print(f"  Safe Z: {params.safe_z} mm")
    print(f"  Cut mode: {params.cut_mode}, plunge: {params.plunge_mode}, ordering: {params.path_ordering}")

    confirm = input("\nProceed with G-code generation? (y/n): ").lower().strip()
    return confirm in ['y', 'yes']
