#!/usr/bin/env python3
import json
import os
import argparse

try:
    import requests
except ImportError:  # pragma: no cover - requests may not be installed
    print("The 'requests' library is required. Install with 'pip install requests'.")
    raise

DEFAULT_URL = "http://localhost:8000/api/payslip/upload"


def main():
    parser = argparse.ArgumentParser(description="Upload a payslip and save the parsed preview to dev/result.json")
    parser.add_argument("file", help="Payslip image (or OCR text when running without Vision credentials)")
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="Upload endpoint")
    parser.add_argument("--mode", choices=["auto", "text"], default="auto", help="Parsing mode")
    args = parser.parse_args()

    with open(args.file, "rb") as fp:
        files = {"file": (os.path.basename(args.file), fp)}
        resp = requests.post(args.url, files=files, data={"mode": args.mode}, timeout=120)

    resp.raise_for_status()
    data = resp.json()
    os.makedirs("dev", exist_ok=True)
    path = os.path.join("dev", "result.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    for warning in data.get("warnings") or []:
        print("WARNING:", warning)
    print(f"Parsed {args.file}: {data.get('month')}/{data.get('year')} net {data.get('net_total')} -> {path}")


if __name__ == "__main__":
    main()
