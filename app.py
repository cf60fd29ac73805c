#!/usr/bin/env python3
"""
Main entry point for the Toolbox Catalog application.
This file serves as the application launcher that imports and runs the Flask app from the src directory.
"""

import sys
import os
import argparse
import locale
import logging
from pathlib import Path

# Add the src directory to the Python path so we can import from it
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Now we can import the main Flask application
from main import app
from api.preferences import get_config_directory

PID_FILE_NAME = "toolbox-catalog.pid"


def write_port_file(port):
    """Write the port number to .port file for other processes to read."""
    config_dir = get_config_directory()
    config_dir.mkdir(parents=True, exist_ok=True)  # Ensure config directory exists
    port_file = config_dir / ".port"
    with open(port_file, 'w') as f:
        f.write(str(port))
    (config_dir / PID_FILE_NAME).write_text(str(os.getpid()))
    print(f"Port {port} written to {port_file}")


def cleanup_port_file():
    """Remove the .port and pid files on shutdown."""
    config_dir = get_config_directory()
    for name in (".port", PID_FILE_NAME):
        path = config_dir / name
        if path.exists():
            path.unlink()
    print("Port file cleaned up")


if __name__ == '__main__':
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Toolbox Catalog Server')
    parser.add_argument('--port', '-p', type=int, default=8000,
                       help='Port to run the server on (default: 8000)')
    parser.add_argument('--host', default='127.0.0.1',
                       help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--debug', action='store_true',
                       help='Run Flask in debug mode')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # Sorting by name uses the user's collation rules
    try:
        locale.setlocale(locale.LC_COLLATE, '')
    except locale.Error:
        print("Locale not available, sorting by code point")

    # Change working directory to project root to ensure relative paths work correctly
    os.chdir(project_root)

    # Write port to file for tests and other processes
    write_port_file(args.port)

    try:
        print(f"Starting Toolbox Catalog on http://{args.host}:{args.port}")
        # Run the Flask application
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    finally:
        cleanup_port_file()
