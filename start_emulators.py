#!/usr/bin/env python3
"""
Start the Firebase emulators used by tests/integration.
Requires the Firebase CLI (npm install -g firebase-tools).
"""
import os
import socket
import subprocess
import sys

EMULATOR_PORTS = {
    "Firestore": 8080,
    "Auth": 9099,
    "Emulator UI": 4000,
}


def port_in_use(host, port):
    try:
        with socket.create_connection((host, port), timeout=1):
            return True
    except OSError:
        return False


def firebase_cli_version():
    """Installed Firebase CLI version, or None"""
    try:
        result = subprocess.run(["firebase", "--version"], capture_output=True, text=True, timeout=5)
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return None
    return result.stdout.strip() if result.returncode == 0 else None


def main():
    print("=" * 80)
    print("Firebase Emulators for the Career Admin API")
    print("=" * 80)

    version = firebase_cli_version()
    if not version:
        print("✗ Firebase CLI not found. Install it with: npm install -g firebase-tools")
        return 1
    print(f"✓ Firebase CLI installed: {version}")

    busy = [f"{name} (port {port})" for name, port in EMULATOR_PORTS.items() if port_in_use("localhost", port)]
    if busy:
        print("\n⚠ Ports already in use, emulators may already be running:")
        for entry in busy:
            print(f"  - {entry}")
        return 1

    print("\nStarting emulators (Ctrl+C to stop)...")
    print("Run the integration suite with: FIRESTORE_EMULATOR_HOST=localhost:8080 pytest tests/integration")
    try:
        subprocess.run(
            ["firebase", "emulators:start", "--project", "demo-career-admin"],
            cwd=os.path.dirname(os.path.abspath(__file__)),
        )
    except KeyboardInterrupt:
        print("\nEmulators stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
