#!/usr/bin/env python3
import os
import signal
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from api.preferences import get_config_directory


def stop_server():
    pid_file = get_config_directory() / "toolbox-catalog.pid"

    if not pid_file.exists():
        print("❌ Server is not running (no PID file found)")
        return

    try:
        pid = int(pid_file.read_text().strip())

        # Send termination signal
        os.kill(pid, signal.SIGTERM)
        print(f"⏹️  Server stopped (PID: {pid})")

        # Clean up PID file
        pid_file.unlink()

    except ProcessLookupError:
        print("❌ Server process not found")
        pid_file.unlink()  # Clean up stale PID file
    except (ValueError, OSError) as e:
        print(f"❌ Error stopping server: {e}")


if __name__ == "__main__":
    stop_server()
