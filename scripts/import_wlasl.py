#!/usr/bin/env python3
"""
One-off import utility:
- Reads WLASL metadata and writes the sign records the interpreter serves.

Videos already downloaded into the videos directory are served by this
service; glosses without a local copy fall back to the first external URL.

Usage examples:
  python3 scripts/import_wlasl.py --metadata data/raw/WLASL_v0.3.json --json-out data/signs.json
  python3 scripts/import_wlasl.py --metadata data/raw/WLASL_v0.3.json --db isl_signs.db
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from islbridge import config, database
from islbridge.wlasl import build_sign_entries


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--metadata", required=True, help="Path to WLASL_v0.3.json")
    ap.add_argument("--videos-dir", default=config.PATHS["videos_dir"], help="Directory of downloaded <video_id>.mp4 files")
    ap.add_argument("--base-url", default=config.VIDEO_BASE_URL, help="URL prefix local videos are served under")
    ap.add_argument("--json-out", default=None, help="Write sign records to this JSON file")
    ap.add_argument("--db", default=None, help="Insert sign records into this SQLite database")

    args = ap.parse_args()

    if not os.path.exists(args.metadata):
        print(f"Metadata file not found at {args.metadata}", file=sys.stderr)
        return 2

    if not args.json_out and not args.db:
        print("Nothing to do (set --json-out and/or --db).", file=sys.stderr)
        return 2

    print("Starting WLASL import...")

    with open(args.metadata, "r", encoding="utf-8") as f:
        metadata = json.load(f)
    print(f"Loaded {len(metadata)} glosses from metadata.")

    signs, skipped = build_sign_entries(metadata, args.videos_dir, args.base_url)

    if args.json_out:
        out_dir = os.path.dirname(args.json_out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.json_out, "w", encoding="utf-8") as f:
            json.dump(signs, f, indent=2)
        print(f"Saved to {args.json_out}")

    if args.db:
        database.init_db(args.db)
        inserted = 0
        for sign in signs:
            if database.add_sign(sign["word"], sign["videoUrl"], db_path=args.db) is not None:
                inserted += 1
        print(f"Inserted {inserted} signs into {args.db}")

    print("Import complete!")
    print(f"Total Imported: {len(signs)}")
    print(f"Total Skipped (no video): {skipped}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
