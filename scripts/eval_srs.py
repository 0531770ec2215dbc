#!/usr/bin/env python3
"""Check a batch of SRS definitions.

Reads a CSV with 'srid' and 'definition' columns, parses every row and
prints one status line per row plus a summary. Exit status is 1 when any
row fails.

    python scripts/eval_srs.py catalog.csv --json report.json
"""
from __future__ import annotations

import argparse
import csv
import json
import os
import sys
from collections import Counter
from typing import Dict, List

# Make srs-backend importable
THIS_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.abspath(os.path.join(THIS_DIR, "..", "srs-backend"))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from srs_api.srs.errors import MissingParameterError, ParseError  # type: ignore
from srs_api.srs.parse import parse_wkt  # type: ignore


def check_row(srid: int, definition: str) -> Dict[str, object]:
    try:
        srs = parse_wkt(srid, definition)
    except MissingParameterError as e:
        return {
            "srid": srid,
            "status": "missing_parameter",
            "parameter": e.parameter_name,
            "epsg_code": e.epsg_code,
            "message": str(e),
        }
    except ParseError as e:
        return {"srid": srid, "status": "parse_error", "message": str(e)}
    out: Dict[str, object] = {"srid": srid, "status": "ok", "srs_type": srs.srs_type.value}
    projection = getattr(srs, "projection_type", None)
    if projection is not None:
        out["projection"] = projection.value
    return out


def main() -> int:
    ap = argparse.ArgumentParser(description="Parse SRS definitions from a CSV file")
    ap.add_argument("csv_path", help="CSV with srid,definition columns")
    ap.add_argument("--json", dest="json_out", default=None, help="Write the per-row report as JSON")
    ap.add_argument("--limit", type=int, default=None, help="Only check the first N rows")
    args = ap.parse_args()

    rows: List[Dict[str, object]] = []
    with open(args.csv_path, newline="", encoding="utf-8") as f:
        for i, rec in enumerate(csv.DictReader(f)):
            if args.limit is not None and i >= args.limit:
                break
            try:
                srid = int(rec["srid"])
            except (KeyError, TypeError, ValueError):
                print(f"row {i + 1}: bad srid {rec.get('srid')!r}", file=sys.stderr)
                rows.append({"srid": None, "status": "bad_row"})
                continue
            res = check_row(srid, rec.get("definition") or "")
            rows.append(res)
            detail = res.get("projection") or res.get("srs_type") or res.get("message")
            print(f"{srid:>10}  {res['status']:<18} {detail}")

    counts = Counter(str(r["status"]) for r in rows)
    print("\nSummary: " + ", ".join(f"{k}={v}" for k, v in sorted(counts.items())))

    if args.json_out:
        with open(args.json_out, "w", encoding="utf-8") as f:
            json.dump({"rows": rows, "summary": dict(counts)}, f, indent=2)

    return 0 if counts.get("ok", 0) == len(rows) else 1


if __name__ == "__main__":
    sys.exit(main())
