"""
Bulk Rename Tool - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter)

Usage:
    bulk-rename --pattern "*.jpg" --prefix trip_ --suffix
    bulk-rename --dir ./scans --pattern "*.png" --sortnum --origin --suffix
    bulk-rename --gui
"""

import sys


def main():
    """Main entry point"""
    if "--gui" not in sys.argv[1:]:
        from .cli import main as cli_main
        return cli_main()

    # Remove --gui parameter
    sys.argv = [arg for arg in sys.argv if arg != "--gui"]

    try:
        from .gui import main as gui_main
    except ImportError as e:
        print("Error: Unable to start GUI, please ensure PySide6 is installed", file=sys.stderr)
        print(f"Detailed error: {e}", file=sys.stderr)
        print("\nInstall command: pip install PySide6", file=sys.stderr)
        return 1
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())
