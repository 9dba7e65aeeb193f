"""Wine Collection server control script.

Usage:
    winecollection-server start [--port PORT] [--reload] [--foreground]
    winecollection-server stop
    winecollection-server restart [--port PORT]
    winecollection-server status
    winecollection-server init-db
"""

import argparse
import asyncio
import json
import os
import signal
import subprocess
import sys
import time
import urllib.request
from urllib.error import URLError

from winecollection.config import settings


def ensure_directories() -> None:
    """Ensure required directories exist."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.log_dir.mkdir(parents=True, exist_ok=True)


def get_pid() -> int | None:
    """Get the PID of the running server, if any."""
    pid_file = settings.pid_file
    if not pid_file.exists():
        return None

    try:
        pid = int(pid_file.read_text().strip())
        # Signal 0 only checks the process exists
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        pid_file.unlink(missing_ok=True)
        return None


def build_command(host: str, port: int, reload: bool = False) -> list[str]:
    """Build the uvicorn command line for the app."""
    cmd = [
        sys.executable, "-m", "uvicorn",
        "winecollection.main:app",
        "--host", host,
        "--port", str(port),
        "--log-level", settings.log_level.lower(),
    ]
    if reload:
        cmd.append("--reload")
    return cmd


def start_server(port: int, host: str, reload: bool = False, foreground: bool = False) -> bool:
    """Start the Wine Collection server.

    Args:
        port: Port to bind to
        host: Host to bind to
        reload: Enable auto-reload for development
        foreground: Run in foreground (blocking)

    Returns:
        True if server started successfully
    """
    pid = get_pid()
    if pid:
        print(f"Server is already running (PID: {pid})")
        return False

    ensure_directories()
    cmd = build_command(host, port, reload)

    print(f"Starting {settings.app_name} server on http://{host}:{port}")

    if foreground:
        print("Press Ctrl+C to stop the server")
        try:
            subprocess.run(cmd)
        except KeyboardInterrupt:
            print("\nServer stopped")
        return True

    with open(settings.log_file, "w") as log:
        process = subprocess.Popen(
            cmd,
            stdout=log,
            stderr=subprocess.STDOUT,
            start_new_session=True,
        )

    # Wait a moment and check if it started
    time.sleep(1)
    if process.poll() is None:
        settings.pid_file.write_text(str(process.pid))
        print(f"Server started with PID: {process.pid}")
        print(f"Logs available at: {settings.log_file}")
        return True

    print("Failed to start server. Check logs for details.")
    return False


def stop_server() -> bool:
    """Stop the Wine Collection server.

    Returns:
        True if server was stopped
    """
    pid = get_pid()
    if not pid:
        print("Server is not running")
        return False

    print(f"Stopping server (PID: {pid})...")

    try:
        os.kill(pid, signal.SIGTERM)

        for _ in range(10):
            time.sleep(0.5)
            try:
                os.kill(pid, 0)
            except ProcessLookupError:
                break
        else:
            print("Server didn't stop gracefully, forcing...")
            os.kill(pid, signal.SIGKILL)

        print("Server stopped")
        settings.pid_file.unlink(missing_ok=True)
        return True

    except ProcessLookupError:
        print("Server was not running")
        settings.pid_file.unlink(missing_ok=True)
        return False
    except PermissionError:
        print(f"Permission denied to stop process {pid}")
        return False


def restart_server(port: int, host: str) -> bool:
    """Restart the Wine Collection server."""
    print(f"Restarting {settings.app_name} server...")
    stop_server()
    time.sleep(1)
    return start_server(port=port, host=host)


def server_status(port: int) -> None:
    """Print the server status."""
    pid = get_pid()

    if not pid:
        print(f"{settings.app_name} server is not running")
        return

    print(f"{settings.app_name} server is running (PID: {pid})")
    try:
        with urllib.request.urlopen(f"http://localhost:{port}/health", timeout=2) as response:
            data = json.loads(response.read().decode())
            print(f"  Status: {data.get('status', 'unknown')}")
            print(f"  Version: {data.get('version', 'unknown')}")
    except (URLError, OSError, ValueError):
        print("  (Could not fetch health status)")


def initialize_database() -> None:
    """Create the database tables."""
    from winecollection.database import close_db, init_db

    async def _run() -> None:
        await init_db(create_all=True)
        await close_db()

    ensure_directories()
    asyncio.run(_run())
    print(f"Database initialized at {settings.database_url}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description=f"{settings.app_name} server control script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s start                  Start server on the configured port
  %(prog)s start --port 8080      Start server on port 8080
  %(prog)s start --reload         Start with auto-reload for development
  %(prog)s start --foreground     Start in foreground (blocking)
  %(prog)s stop                   Stop the server
  %(prog)s restart                Restart the server
  %(prog)s status                 Check server status
  %(prog)s init-db                Create the database tables
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    start_parser = subparsers.add_parser("start", help="Start the server")
    start_parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    start_parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    start_parser.add_argument(
        "--reload", "-r",
        action="store_true",
        help="Enable auto-reload for development",
    )
    start_parser.add_argument(
        "--foreground", "-f",
        action="store_true",
        help="Run in foreground (blocking)",
    )

    subparsers.add_parser("stop", help="Stop the server")

    restart_parser = subparsers.add_parser("restart", help="Restart the server")
    restart_parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    restart_parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )

    status_parser = subparsers.add_parser("status", help="Check server status")
    status_parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port the server listens on (default: {settings.port})",
    )

    subparsers.add_parser("init-db", help="Create the database tables")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "start":
            success = start_server(
                port=args.port,
                host=args.host,
                reload=args.reload,
                foreground=args.foreground,
            )
            return 0 if success else 1

        elif args.command == "stop":
            return 0 if stop_server() else 1

        elif args.command == "restart":
            return 0 if restart_server(port=args.port, host=args.host) else 1

        elif args.command == "status":
            server_status(args.port)
            return 0

        elif args.command == "init-db":
            initialize_database()
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
