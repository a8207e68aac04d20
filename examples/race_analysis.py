"""Multi-driver lap analysis example using the async client."""

import asyncio
import os
import sys

from dotenv import load_dotenv

from lapmetrics import AsyncRaceDataClient, compare_lap_to_field, format_seconds


async def analyze_lap(race_id: str, lap_number: int, driver_ids: list[str]) -> None:
    """Compare several drivers on one lap against the best in the field."""
    async with AsyncRaceDataClient(
        os.environ["SUPABASE_URL"], os.environ["SUPABASE_ANON_KEY"], max_concurrency=3,
    ) as db:
        by_driver = await db.laps_for_drivers(race_id, driver_ids)

    laps = [
        lap
        for driver_laps in by_driver.values()
        for lap in driver_laps
        if lap.lap_number == lap_number
    ]
    view = compare_lap_to_field(laps)
    best = view.references.get("lap_time")
    if best is None:
        print(f"No timed laps for lap {lap_number} of race {race_id}")
        return

    print(f"=== Lap {lap_number}: best {format_seconds(best.value)} by {best.owner_driver_id} ===")
    for entry in view.entries:
        delta = entry.deltas["lap_time"]
        gap = f"{delta.delta:+.3f}s" if delta.delta is not None else "no time"
        print(f"  {entry.record.driver_id}: {gap} ({delta.classification.value})")


if __name__ == "__main__":
    load_dotenv()
    if len(sys.argv) < 4:
        print("usage: race_analysis.py RACE_ID LAP_NUMBER DRIVER_ID [DRIVER_ID ...]")
        sys.exit(1)
    asyncio.run(analyze_lap(sys.argv[1], int(sys.argv[2]), sys.argv[3:]))
