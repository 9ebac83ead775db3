#!/usr/bin/env python3
"""
Router Monitoring Example - Downstream Signal Monitor

Polls the cable modem every few seconds and shows the temperature, the
downstream power and SNR per channel and the codeword error counters,
with a quality assessment. Press Ctrl+C to stop monitoring.
"""

import argparse
import sys
import time
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))
from connectbox import ConnectBoxAPI, ConnectBoxError


def evaluate_power(power):
    """
    Evaluate downstream receive power
    Range: -15 to +15 dBmV is acceptable, 0 dBmV is ideal
    """
    if -7 <= power <= 7:
        return "Excellent", "🟢"
    elif -10 <= power <= 10:
        return "Good", "🟢"
    elif -15 <= power <= 15:
        return "Fair", "🟡"
    else:
        return "Poor", "🔴"


def evaluate_snr(snr):
    """
    Evaluate downstream SNR
    256-QAM needs at least 33 dB to stay locked
    """
    if snr >= 38:
        return "Excellent", "🟢"
    elif snr >= 35:
        return "Good", "🟢"
    elif snr >= 33:
        return "Fair", "🟡"
    else:
        return "Poor", "🔴"


def to_float(value):
    try:
        return float(value)
    except ValueError:
        return None


def print_downstream(api):
    table = api.get_downstream_table()
    print(f"\n📶 Downstream Channels: {len(table.downstreams)}\n")

    for ch in table.downstreams:
        power = to_float(ch.pow)
        snr = to_float(ch.snr)
        line = f"   ch {ch.chid:>3}"
        if power is not None:
            rating, icon = evaluate_power(power)
            line += f"  {power:6.1f} dBmV {icon} {rating:<9}"
        if snr is not None:
            rating, icon = evaluate_snr(snr)
            line += f"  SNR {snr:4.1f} dB {icon} {rating}"
        print(line)


def print_errors(api, previous):
    """Print codeword errors since the previous poll, return the new totals"""
    table = api.get_signal_table()
    totals = {}
    for signal in table.signals:
        totals[signal.dsid] = (int(signal.correctable or 0), int(signal.uncorrectable or 0))

    print("\n🧮 Codeword Errors (since last poll):\n")
    if not previous:
        print("   (Calculating...)")
        return totals

    for dsid, (correctable, uncorrectable) in sorted(totals.items(), key=lambda kv: int(kv[0] or 0)):
        prev_corr, prev_uncorr = previous.get(dsid, (correctable, uncorrectable))
        # Counters reset when the modem re-ranges
        new_corr = max(correctable - prev_corr, 0)
        new_uncorr = max(uncorrectable - prev_uncorr, 0)
        icon = "🔴" if new_uncorr else ("🟡" if new_corr else "🟢")
        print(f"   {icon} ch {dsid:>3}  corrected {new_corr:>6}  uncorrectable {new_uncorr:>6}")
    return totals


def main():
    parser = argparse.ArgumentParser(description="Monitor ConnectBox downstream signal quality")
    parser.add_argument("-i", "--interval", type=float, default=10,
                        help="seconds between polls (default: 10)")
    args = parser.parse_args()

    print("=" * 70)
    print("📡 CONNECTBOX SIGNAL MONITOR")
    print("=" * 70)

    try:
        try:
            api = ConnectBoxAPI.from_env()
        except ValueError:
            api = ConnectBoxAPI.from_saved_credentials()
    except ValueError as e:
        print(f"\n❌ No credentials: {e}")
        print("   Set CONNECTBOX_PASSWORD or run router_credentials.py save")
        return 1

    try:
        api.login()
    except ConnectBoxError as e:
        print(f"\n❌ Login failed: {e}")
        api.close()
        return 1
    print(f"\n✅ Logged in to {api.address}")

    previous_errors = {}
    try:
        while True:
            print("\n" + "=" * 70)
            print(f"🕐 {time.strftime('%Y-%m-%d %H:%M:%S')}")
            print("=" * 70)

            try:
                state = api.get_cm_state()
                print(f"\n🌡️  Temperature: {state.temperature}°C "
                      f"(tuner {state.tunner_temperature}°C), {state.oper_state}")
            except ConnectBoxError as e:
                print(f"\n⚠️  Modem state failed: {e}")

            try:
                print_downstream(api)
            except ConnectBoxError as e:
                print(f"\n⚠️  Downstream table failed: {e}")

            try:
                previous_errors = print_errors(api, previous_errors)
            except ConnectBoxError as e:
                print(f"\n⚠️  Signal table failed: {e}")

            print(f"\n⏳ Refreshing in {args.interval:g} seconds...")
            time.sleep(args.interval)

    except KeyboardInterrupt:
        print("\n\n" + "=" * 70)
        print("👋 Monitoring stopped")
        print("=" * 70)
    finally:
        try:
            api.logout()
        except ConnectBoxError as e:
            print(f"⚠️  Logout failed: {e}")
        api.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
