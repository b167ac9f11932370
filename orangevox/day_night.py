"""Day and night cycle driving the sun, the moon and the sky colour."""

from __future__ import annotations

import math
from enum import Enum

from orangevox.light import DirectionalLight

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

SUNRISE_THRESHOLD = 0.1
SUNSET_THRESHOLD = 0.1
BODY_POS_SCALE = 50.0
Z_OFFSET = 0.25
CYCLE_DURATION = 30.0
SUN_AMBIENT = 0.2
MOON_AMBIENT = 0.07

# Key colours at sunrise, midday, sunset and midnight.
SUN_COLORS: tuple[Vec4, ...] = (
    (1.0, 0.549, 0.0, 1.0),
    (0.991, 0.913, 0.89, 1.0),
    (0.992, 0.369, 0.325, 1.0),
    (0.0, 0.0, 0.0, 1.0),
)
MOON_COLORS: tuple[Vec4, ...] = (
    (0.169, 0.189, 0.387, 1.0),
    (0.0, 0.0, 0.0, 1.0),
    (0.202, 0.277, 0.420, 1.0),
    (0.082, 0.157, 0.322, 1.0),
)
SKY_COLORS: tuple[Vec4, ...] = (
    (1.0, 0.549, 0.0, 1.0),
    (0.529, 0.807, 0.922, 1.0),
    (0.992, 0.369, 0.325, 1.0),
    (0.063, 0.063, 0.275, 1.0),
)


class CelestialBody(Enum):
    SUN = 0
    MOON = 1


class Cycle(Enum):
    DAY = "Day"
    NIGHT = "Night"


class TimeOfDay(Enum):
    SUNRISE = 0
    DAYTIME = 1
    MIDDAY = 2
    SUNSET = 3
    NIGHTTIME = 4
    MIDNIGHT = 5


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    return (v[0] / length, v[1] / length, v[2] / length)


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _lerp4(a: Vec4, b: Vec4, t: float) -> Vec4:
    return tuple(x + (y - x) * t for x, y in zip(a, b))  # type: ignore[return-value]


class DayNightCycle:
    """Tracks elapsed time over a day and a night of CYCLE_DURATION seconds each."""

    def __init__(self) -> None:
        self.sun = DirectionalLight((-0.5, -1.0, 0.0), (1.0, 1.0, 1.0, 1.0))
        self.moon = DirectionalLight((1.0, 0.0, 0.0), (1.0, 1.0, 1.0, 1.0))
        self.sun_pos: Vec3 = (0.0, 0.0, 0.0)
        self.moon_pos: Vec3 = (0.0, 0.0, 0.0)
        self.sky_color: Vec4 = (0.0, 0.0, 0.0, 0.0)
        self.cycle = Cycle.DAY
        self.time_of_day = TimeOfDay.SUNRISE
        self.elapsed_time = 0.0
        self.time_pct = 0.0

    def update(self, dt: float, paused_time: float | None = None) -> None:
        """Advance the clock by dt seconds; paused_time (0 to 2) fixes the time of day instead."""
        self.elapsed_time += dt
        if self.elapsed_time >= CYCLE_DURATION * 2.0:
            self.elapsed_time -= CYCLE_DURATION * 2.0

        time_pct = self.elapsed_time / CYCLE_DURATION
        if paused_time is not None:
            time_pct = paused_time

        if 0.0 <= time_pct < 1.0:
            self.cycle = Cycle.DAY
        elif 1.0 <= time_pct <= 2.0:
            self.cycle = Cycle.NIGHT
        else:
            raise ValueError(f"time of day {time_pct} is outside the range 0 to 2")
        self.time_pct = time_pct

        # The sun rises in the east and sets in the west.
        angle = math.pi * time_pct
        sun_dir = _normalize((-math.cos(angle), -math.sin(angle), Z_OFFSET))
        moon_dir = (-sun_dir[0], -sun_dir[1], -sun_dir[2])
        self.sun.direction = sun_dir
        self.moon.direction = moon_dir

        self.sun_pos = tuple(-c * BODY_POS_SCALE for c in sun_dir)  # type: ignore[assignment]
        self.moon_pos = tuple(-c * BODY_POS_SCALE for c in moon_dir)  # type: ignore[assignment]

        dir_to_dot = (sun_dir[0], abs(sun_dir[1]), sun_dir[2])
        norm_dot = _dot(dir_to_dot, _normalize((0.0, 1.0, Z_OFFSET)))

        if self.cycle is Cycle.DAY:
            if norm_dot < SUNRISE_THRESHOLD and time_pct < 0.5:
                self.time_of_day = TimeOfDay.SUNRISE
            elif norm_dot < SUNSET_THRESHOLD and time_pct > 0.5:
                self.time_of_day = TimeOfDay.SUNSET
            elif norm_dot < 1.0 - SUNRISE_THRESHOLD:
                self.time_of_day = TimeOfDay.DAYTIME
            else:
                self.time_of_day = TimeOfDay.MIDDAY
        elif norm_dot < 1.0 - SUNSET_THRESHOLD:
            self.time_of_day = TimeOfDay.NIGHTTIME
        else:
            self.time_of_day = TimeOfDay.MIDNIGHT

        quarter = time_pct / 0.5
        start = int(quarter) % 4
        end = (start + 1) % 4
        ratio = quarter - int(quarter)

        self.sun.color = _lerp4(SUN_COLORS[start], SUN_COLORS[end], ratio)
        self.moon.color = _lerp4(MOON_COLORS[start], MOON_COLORS[end], ratio)
        self.sky_color = _lerp4(SKY_COLORS[start], SKY_COLORS[end], ratio)

    def _light(self, body: CelestialBody) -> DirectionalLight:
        return self.sun if body is CelestialBody.SUN else self.moon

    def light_position(self, body: CelestialBody) -> Vec3:
        """Position of the body, used for shadow mapping."""
        return self.sun_pos if body is CelestialBody.SUN else self.moon_pos

    def light_direction(self, body: CelestialBody) -> Vec3:
        return self._light(body).direction

    def light_color(self, body: CelestialBody) -> Vec4:
        return self._light(body).color

    def light_ambient(self, body: CelestialBody) -> float:
        return SUN_AMBIENT if body is CelestialBody.SUN else MOON_AMBIENT