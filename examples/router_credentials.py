#!/usr/bin/env python3
"""
Manage Saved ConnectBox Credentials

Stores the router address, username and password hash in ~/.connectbox
(permissions 600) so other scripts can use from_saved_credentials().
The plaintext password is never written.

Usage:
    python router_credentials.py save
    python router_credentials.py show
    python router_credentials.py delete
"""

import getpass
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
from connectbox import ConnectBoxAPI, ConnectBoxError, CredentialStore


def save():
    address = input("Router address [192.168.0.1]: ").strip() or "192.168.0.1"
    username = input("Username [admin]: ").strip() or "admin"
    password = getpass.getpass("Password: ")

    try:
        api = ConnectBoxAPI(address, username, password)
    except ValueError as e:
        print(f"\n❌ {e}")
        return 1

    # Only keep credentials the router accepts
    print(f"\n[*] Checking login on {api.address}...")
    try:
        with api:
            pass
    except ConnectBoxError as e:
        print(f"❌ Login failed: {e}")
        return 1

    if not api.save_credentials():
        print("❌ Could not save credentials")
        return 1
    print(f"✅ Credentials saved to {CredentialStore().credentials_file}")
    return 0


def show():
    credentials = CredentialStore().load()
    if credentials is None:
        print("No saved credentials")
        return 1
    print(f"Address:  {credentials.address}")
    print(f"Username: {credentials.username}")
    print(f"Password: sha256 {credentials.password_hash[:8]}...")
    return 0


def delete():
    if CredentialStore().delete():
        print("✅ Credentials deleted")
        return 0
    print("No saved credentials")
    return 1


def main():
    commands = {'save': save, 'show': show, 'delete': delete}
    if len(sys.argv) != 2 or sys.argv[1] not in commands:
        print(__doc__)
        return 1
    return commands[sys.argv[1]]()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n❌ Cancelled by user")
        sys.exit(1)
