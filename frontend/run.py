"""
Launcher for the Encode Checkr Streamlit app.

    python frontend/run.py --port 8502
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

APP_PATH = Path(__file__).parent / "app.py"


def build_command(port: int, headless: bool = True) -> List[str]:
    return [
        "streamlit", "run", str(APP_PATH),
        "--server.port", str(port),
        "--server.headless", "true" if headless else "false",
        "--browser.gatherUsageStats", "false",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the Encode Checkr web app.")
    parser.add_argument("--port", type=int, default=8501)
    parser.add_argument(
        "--open-browser",
        action="store_true",
        help="let Streamlit open a browser tab",
    )
    args = parser.parse_args(argv)

    if not APP_PATH.exists():
        print(f"Error: Could not find app.py at {APP_PATH}", file=sys.stderr)
        return 1

    print(f"Starting Encode Checkr at http://localhost:{args.port} (Ctrl+C to stop)")
    try:
        return subprocess.run(build_command(args.port, headless=not args.open_browser)).returncode
    except KeyboardInterrupt:
        print("\nShutting down server...")
        return 0
    except FileNotFoundError:
        print("Error: Streamlit is not installed or not in PATH", file=sys.stderr)
        print("Please install it with: pip install streamlit", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
