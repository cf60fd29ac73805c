"""
pytest configuration for Toolbox Catalog.
Handles config directory isolation, port detection, server start-up and
test environment setup.
"""

import os
import pytest
import shutil
import socket
import subprocess
import tempfile
import time
import sys
from pathlib import Path


def get_config_directory():
    """Get the config directory path."""
    config_dir = os.environ.get('TOOLBOX_CATALOG_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/toolbox-catalog
    home_dir = Path.home()
    return home_dir / '.config' / 'toolbox-catalog'


def find_free_port(start_port=32000):
    """Find a free port starting from start_port."""
    port = start_port
    while port < 65535:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            try:
                sock.bind(('127.0.0.1', port))
                return port
            except OSError:
                port += 1
    raise RuntimeError("No free ports found")


def start_test_server(port):
    """Start the test server on the specified port."""
    project_root = Path(__file__).parent.absolute()
    cmd = [sys.executable, str(project_root / "app.py"), "--port", str(port)]

    # Start server as a subprocess
    process = subprocess.Popen(
        cmd,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        cwd=str(project_root)
    )

    # Wait for server to start
    start_time = time.time()
    while time.time() - start_time < 10:  # 10 second timeout
        if process.poll() is not None:
            break
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            if sock.connect_ex(('127.0.0.1', port)) == 0:
                return process
        time.sleep(0.1)

    # If we get here, server failed to start
    process.terminate()
    raise RuntimeError(f"Failed to start test server on port {port}")


def pytest_configure(config):
    """Configure pytest with an isolated config dir and server information."""
    # Never touch the user's real preferences during tests
    config.temp_config_dir = None
    if not os.environ.get('TOOLBOX_CATALOG_CONFIG_DIR'):
        config.temp_config_dir = tempfile.mkdtemp(prefix='toolbox-catalog-tests-')
        os.environ['TOOLBOX_CATALOG_CONFIG_DIR'] = config.temp_config_dir
    config_dir = get_config_directory()

    server_running = False
    config.server_process = None
    if os.environ.get('TOOLBOX_CATALOG_START_SERVER', '1') != '0':
        try:
            port = find_free_port()
            print(f"\n🚀 Starting test server on port {port}...")
            config.server_process = start_test_server(port)
            server_running = True
        except (RuntimeError, OSError) as e:
            print(f"⚠️  Failed to auto-start server: {e}")
            port = 8000
    else:
        port = int(os.environ.get('TOOLBOX_CATALOG_PORT', '8000'))

    # Store in pytest config for access by tests
    config.port = port
    config.server_running = server_running
    config.config_dir = config_dir

    os.environ['TOOLBOX_CATALOG_PORT'] = str(port)
    os.environ['TOOLBOX_CATALOG_BASE_URL'] = f'http://127.0.0.1:{port}'

    if not server_running:
        print("   ⚠️  WARNING: Server is not running, integration tests will be skipped")

    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (requires running server)"
    )
    config.addinivalue_line(
        "markers", "requires_server: marks tests that require the server to be running"
    )


def pytest_unconfigure(config):
    """Clean up after tests."""
    if getattr(config, 'server_process', None):
        print("\n🛑 Stopping test server...")
        config.server_process.terminate()
        try:
            config.server_process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            config.server_process.kill()

    if getattr(config, 'temp_config_dir', None):
        shutil.rmtree(config.temp_config_dir, ignore_errors=True)


@pytest.fixture(scope="session")
def server_port(pytestconfig):
    """Fixture to provide server port to tests."""
    return pytestconfig.port


@pytest.fixture(scope="session")
def server_running(pytestconfig):
    """Fixture to provide server running status to tests."""
    return pytestconfig.server_running


@pytest.fixture(scope="session")
def base_url(server_port):
    """Fixture to provide base URL for tests."""
    return f'http://127.0.0.1:{server_port}'


def pytest_collection_modifyitems(config, items):
    """Modify test collection to handle server-dependent tests."""
    if not config.server_running:
        # Add skip marker to integration tests when server is not running
        skip_integration = pytest.mark.skip(reason="Server not running")
        for item in items:
            if "integration" in item.keywords or "requires_server" in item.keywords:
                item.add_marker(skip_integration)
