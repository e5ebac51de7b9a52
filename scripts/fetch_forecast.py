"""
Fetch the StormGlass forecast for a coordinate and print it.
Usage: python fetch_forecast.py <lat> <lng>
Requires STORMGLASS_API_TOKEN (and optionally STORMGLASS_API_URL) in the environment.
"""
import asyncio
import logging
import sys

from stormglassclient import (
    StormGlassClient, StormGlassError, StormGlassSettings,
    detect_missing_hours, points_to_frame,
)


async def run(lat: float, lng: float) -> int:
    settings = StormGlassSettings.from_env()
    async with StormGlassClient(settings) as client:
        try:
            points = await client.fetch_points(lat, lng)
        except StormGlassError as e:
            print(f"{e.kind.name}: {e.message}")
            return 1
    print(points_to_frame(points))
    expected, actual, missing = detect_missing_hours(points)
    print(f"\nHours: expected={expected} actual={actual} missing={missing}")
    return 0


def main():
    if len(sys.argv) != 3:
        print("Usage: python fetch_forecast.py <lat> <lng>")
        sys.exit(1)
    try:
        lat, lng = float(sys.argv[1]), float(sys.argv[2])
    except ValueError:
        print(f"Invalid coordinates: {sys.argv[1]} {sys.argv[2]}")
        sys.exit(1)
    logging.basicConfig(level=logging.INFO)
    sys.exit(asyncio.run(run(lat, lng)))


if __name__ == "__main__":
    main()
