"""Percentage sampler feeding the renderers with live CPU and memory load."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


@dataclass(frozen=True)
class PercentSample:
    cpu: float
    mem: float


class PercentSampler:
    def __init__(self) -> None:
        # Prime non-blocking CPU measurement.
        psutil.cpu_percent(interval=None)

    def poll(self) -> PercentSample:
        cpu = float(psutil.cpu_percent(interval=None))
        mem = float(psutil.virtual_memory().percent)
        return PercentSample(cpu=cpu, mem=mem)

    def temperature(self) -> float | None:
        try:
            temps = psutil.sensors_temperatures()
        except (AttributeError, OSError):
            return None
        if not temps:
            return None

        for name in ("coretemp", "cpu_thermal", "k10temp", "acpitz"):
            entries = temps.get(name)
            if entries and entries[0].current is not None:
                return float(entries[0].current)

        for entries in temps.values():
            if entries and entries[0].current is not None:
                return float(entries[0].current)
        return None
