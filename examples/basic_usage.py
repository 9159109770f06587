#!/usr/bin/env python3
"""Basic usage example for bitfilament.

This example demonstrates:
1. Encoding a nested document
2. Inspecting the tag bytes
3. Decoding several values from one buffer
4. Exchanging Pydantic models
"""

from __future__ import annotations

import json
from typing import List

from bitfilament import FilamentModel, decode, encode, encode_many, iter_decode, split_tag


class StatusReport(FilamentModel):
    """Vehicle status report."""

    vehicle: str
    depth_m: float
    battery_pct: int
    active: bool
    waypoints: List[int] = []


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bitfilament Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a document
    print("1. Encoding a document...")
    document = {"a": 1, "b": [True, False, "x"]}
    data = encode(document)

    print(f"   Value: {document}")
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex(' ')}")
    print()

    # Inspect the outer tag
    print("2. Inspecting the outer tag byte...")
    wire_type, info = split_tag(data[0])
    print(f"   Wire type: 0x{wire_type:x}, size prefix width: {info} byte(s)")
    print()

    # Decode concatenated values
    print("3. Decoding concatenated values...")
    stream = encode_many(["first", 65536, -129, 1.5])
    for value, offset in iter_decode(stream):
        print(f"   {value!r:>10} -> next offset {offset}")
    print()

    # Models
    print("4. Round-tripping a model...")
    msg = StatusReport(
        vehicle="auv-42", depth_m=25.5, battery_pct=87, active=True, waypoints=[3, 7]
    )
    encoded = msg.to_filament()
    decoded, _ = StatusReport.from_filament(encoded)

    if decoded == msg:
        print("   ✓ Round-trip successful! Models match.")
    else:
        print("   ✗ Round-trip failed! Models don't match.")

    json_bytes = msg.model_dump_json().encode("utf-8")
    print(f"   bitfilament size: {len(encoded)} bytes")
    print(f"   JSON size: {len(json_bytes)} bytes")
    print()

    # Plain values decode to plain Python types
    value, _ = decode(data)
    print(f"5. Decoded document as JSON: {json.dumps(value)}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
