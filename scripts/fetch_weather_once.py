#!/usr/bin/env python3
"""Store today's weather snapshot once (backfill/debugging)."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from weather_diary import create_app
from weather_diary.services.diary_service import DiaryService

if __name__ == '__main__':
    app = create_app()

    with app.app_context():
        snapshot = DiaryService().save_weather_date()
        if snapshot is None:
            print("Weather API unreachable; nothing stored.")
            sys.exit(1)
        print(f"Stored weather #{snapshot.id} for {snapshot.date}: "
              f"{snapshot.weather} ({snapshot.icon}) {snapshot.temperature}")
