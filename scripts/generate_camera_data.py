import argparse
import json
import os
import random
import sys

import pandas as pd

# Add src to path to import schemas
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from src.common.schemas.camera import CameraRecord

# Rough bounding boxes (lat_min, lat_max, lon_min, lon_max)
REGIONS = {
    "Auckland": (-37.05, -36.70, 174.60, 174.95),
    "Wellington": (-41.35, -41.10, 174.70, 174.95),
    "Christchurch": (-43.60, -43.45, 172.50, 172.75),
    "Hamilton": (-37.83, -37.73, 175.22, 175.33),
}
DIRECTIONS = ["Northbound", "Southbound", "Eastbound", "Westbound"]

def generate_cameras(num_cameras: int, seed: int = 42) -> pd.DataFrame:
    rng = random.Random(seed)
    rows = []
    for i in range(num_cameras):
        region = rng.choice(list(REGIONS))
        lat_min, lat_max, lon_min, lon_max = REGIONS[region]
        record = {
            "id": f"CAM_{i:03d}",
            "name": f"{region} camera {i + 1}",
            "lat": round(rng.uniform(lat_min, lat_max), 6),
            "lon": round(rng.uniform(lon_min, lon_max), 6),
            "region": region,
            "direction": rng.choice(DIRECTIONS),
        }
        # Validate with Pydantic schema
        CameraRecord.model_validate({**record, "key": record["id"]})
        rows.append(record)
    return pd.DataFrame(rows)

def to_payload(df: pd.DataFrame, nested: bool) -> list:
    records = df.to_dict(orient="records")
    if not nested:
        return records
    # Nested layout uses latitude/longitude and the "key" field
    cameras = [
        {
            "key": r["id"],
            "name": r["name"],
            "latitude": r["lat"],
            "longitude": r["lon"],
            "region": r["region"],
            "direction": r["direction"],
        }
        for r in records
    ]
    return [{"cameras": cameras}]

def main():
    parser = argparse.ArgumentParser(description="Generate a synthetic camera list")
    parser.add_argument("--count", type=int, default=40)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--nested", action="store_true", help="Write the [{cameras: [...]}] layout")
    parser.add_argument("--output", default="data/cameras.json")
    args = parser.parse_args()

    df = generate_cameras(args.count, args.seed)
    print(df.groupby("region").size())

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(to_payload(df, args.nested), f, indent=2)
    print(f"Camera list saved to {args.output}")

if __name__ == "__main__":
    main()
