"""
Static Demo Content

First-paint content for demo mode that is illustrative rather than
statistical: a short boot-to-shot log sequence and a set of power
schedules. The sequences are fixed; only the timestamps follow the
clock.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


# (seconds before now, level, message, source)
DEMO_LOG_SEQUENCE = (
    (300, "info", "Machine powered on", "esp32"),
    (240, "info", "WiFi connected to 'HomeNetwork' (192.168.1.100)", "esp32"),
    (210, "info", "Pico controller connected", "esp32"),
    (180, "info", "Heating started - target: 93.0°C", "pico"),
    (150, "info", "Boiler temperature: 85.2°C", "pico"),
    (120, "info", "Boiler temperature: 90.1°C", "pico"),
    (90, "info", "Target temperature reached: 93.0°C", "pico"),
    (60, "info", "Brewing started", "pico"),
    (30, "info", "Brewing stopped - shot time: 28s", "pico"),
    (10, "info", "System idle - maintaining temperature", "pico"),
)


def get_demo_logs(now: Optional[float] = None) -> List[Dict[str, Any]]:
    """
    Build the demo log entries, oldest first.

    Args:
        now: Epoch seconds to anchor the sequence (defaults to the clock)

    Returns:
        List of {id, time, level, message, source}; id is the entry's
        epoch time in milliseconds
    """
    now_ms = int((time.time() if now is None else now) * 1000)

    logs = []
    for offset, level, message, source in DEMO_LOG_SEQUENCE:
        at_ms = now_ms - offset * 1000
        logs.append({
            "id": at_ms,
            "time": datetime.fromtimestamp(at_ms / 1000, tz=timezone.utc).isoformat(),
            "level": level,
            "message": message,
            "source": source,
        })
    return logs


# Day bitmasks: bit 0 = Sunday ... bit 6 = Saturday
WEEKDAYS_MASK = 0b0111110
WEEKEND_MASK = 0b1000001
EVERY_DAY_MASK = 0b1111111


def get_demo_schedules() -> Dict[str, Any]:
    """Power-on/off schedules shown in demo mode."""
    return {
        "schedules": [
            {
                "id": 1,
                "enabled": True,
                "name": "Morning Coffee",
                "days": WEEKDAYS_MASK,
                "hour": 6,
                "minute": 30,
                "action": "on",
                "strategy": 0,
            },
            {
                "id": 2,
                "enabled": True,
                "name": "Weekend Brunch",
                "days": WEEKEND_MASK,
                "hour": 9,
                "minute": 0,
                "action": "on",
                "strategy": 0,
            },
            {
                "id": 3,
                "enabled": False,
                "name": "Evening Off",
                "days": EVERY_DAY_MASK,
                "hour": 22,
                "minute": 0,
                "action": "off",
                "strategy": 0,
            },
        ],
        "autoPowerOffEnabled": True,
        "autoPowerOffMinutes": 120,
    }


def schedule_days(mask: int) -> List[str]:
    """Expand a day bitmask into day names, Sunday first."""
    names = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
    return [name for bit, name in enumerate(names) if mask & (1 << bit)]
