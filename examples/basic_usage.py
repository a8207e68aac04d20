"""Basic usage examples for the race database client and lap metrics."""

import os

from dotenv import load_dotenv

from lapmetrics import Filter, RaceDataClient, analyze_driver_race, format_seconds, summarize_weather


def _fmt(seconds: float | None) -> str:
    return format_seconds(seconds) if seconds is not None else "N/A"


def main() -> None:
    load_dotenv()
    with RaceDataClient(os.environ["SUPABASE_URL"], os.environ["SUPABASE_ANON_KEY"]) as db:
        print("=== Races ===")
        races = db.races(order="name.asc")
        for race in races[:5]:
            print(f"  {race.id}: {race.name}")

        if not races:
            print("  No races found.")
            return

        race_id = races[0].id
        drivers = db.drivers(order="number.asc")
        if not drivers:
            print("  No drivers found.")
            return
        driver = drivers[0]

        # Laps 1-10 for the first driver
        print(f"\n=== Laps 1-10 for {driver.display_name} ===")
        laps = db.laps(race_id=race_id, driver_id=driver.id, lap_number=Filter(gte=1, lte=10))
        view = analyze_driver_race(laps)
        for lap in view.laps:
            delta = lap.deltas["lap_time"].delta
            delta_text = f"{delta:+.3f}s" if delta is not None else "N/A"
            print(f"  Lap {lap.lap_number}: {_fmt(lap.lap_time)} ({delta_text} to best)")

        best = view.references.get("lap_time")
        if best is not None:
            print(f"  Best: {_fmt(best.value)} on lap {best.owner_lap_number}")
        print(f"  Theoretical best: {_fmt(view.theoretical_best)}")

        print("\n=== Weather ===")
        summary = summarize_weather(db.weather(race_id=race_id))
        if summary is not None:
            print(f"  Air: {summary.avg_air_temp:.1f}°C, Track: {summary.avg_track_temp:.1f}°C")
            print(f"  Rain: {summary.rain_status.value}")


if __name__ == "__main__":
    main()
