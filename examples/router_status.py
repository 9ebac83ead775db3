#!/usr/bin/env python3
"""
Display ConnectBox Status

Logs in, prints system information, cable modem state, downstream and
upstream channels and the connected clients, then logs out.

Usage:
    export CONNECTBOX_PASSWORD="secret"
    python router_status.py
"""

import getpass
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from connectbox import ConnectBoxAPI, ConnectBoxError


def create_api():
    """Environment variables first, then saved credentials, then a prompt"""
    try:
        return ConnectBoxAPI.from_env()
    except ValueError:
        pass
    try:
        return ConnectBoxAPI.from_saved_credentials()
    except ValueError:
        pass

    address = input("Router address [192.168.0.1]: ").strip() or "192.168.0.1"
    username = input("Username [admin]: ").strip() or "admin"
    password = getpass.getpass("Password: ")
    return ConnectBoxAPI(address, username, password)


def format_uptime(seconds):
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{days}d {hours:02d}:{minutes:02d}:{seconds:02d}"


def main():
    """Fetch and display router status"""

    print("=" * 70)
    print("ConnectBox - Status")
    print("=" * 70)
    print()

    try:
        api = create_api()
    except ValueError as e:
        print(f"[!] Invalid configuration: {e}")
        return 1

    print(f"[*] Logging in to {api.address}...")
    try:
        with api:
            print("[✓] Login successful\n")

            info = api.get_cm_system_info()
            print("📟 System")
            print(f"   DOCSIS mode:  {info.docsis_mode}")
            print(f"   Hardware:     {info.hardware_version}")
            print(f"   MAC address:  {info.mac_addr}")
            print(f"   Serial:       {info.serial_number}")
            print(f"   Uptime:       {format_uptime(info.system_uptime)}")
            print(f"   Network:      {info.network_access}")

            state = api.get_cm_state()
            print("\n🌡️  Modem State")
            print(f"   Operational:  {state.oper_state}")
            print(f"   Temperature:  {state.temperature}°C (tuner {state.tunner_temperature}°C)")
            print(f"   WAN IPv4:     {state.wan_ipv4_addr or 'N/A'}")
            for addr in state.wan_ipv6_addrs:
                print(f"   WAN IPv6:     {addr}")

            downstream = api.get_downstream_table()
            print(f"\n⬇️  Downstream Channels: {len(downstream.downstreams)}\n")
            for ch in downstream.downstreams:
                print(f"   ch {ch.chid:>3}  {int(ch.freq or 0) / 1e6:7.1f} MHz  "
                      f"{ch.pow:>4} dBmV  SNR {ch.snr:>3} dB  {ch.mod}")

            upstream = api.get_upstream_table()
            print(f"\n⬆️  Upstream Channels: {len(upstream.upstreams)}\n")
            for ch in upstream.upstreams:
                print(f"   ch {ch.usid:>3}  {int(ch.freq or 0) / 1e6:7.1f} MHz  "
                      f"{ch.power:>4} dBmV  {ch.mod}")

            hosts = api.get_lan_user_table()
            clients = hosts.ethernet + hosts.wifi
            print(f"\n🌐 Connected Clients: {len(clients)}\n")
            for i, client in enumerate(clients, 1):
                print(f"   {i}. {client.hostname or 'Unknown'} - "
                      f"{client.ipv4_addr} ({client.interface})")
    except ConnectBoxError as e:
        print(f"[!] Request failed: {e}")
        return 1

    print()
    print("=" * 70)
    print("✅ Complete!")
    print("=" * 70)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n[!] Interrupted by user")
        sys.exit(130)
