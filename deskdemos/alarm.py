"""An alarm clock window that plays a sound at a chosen hour and minute."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Sequence
from datetime import datetime

ALARM_COMMAND = ("aplay", "alarm.wav")
HOUR_RANGE = range(0, 24)
MINUTE_RANGE = range(0, 60)
SPIN_HOUR_START = 12
SPIN_MINUTE_START = 0
TICK_MILLISECONDS = 1000


def format_time(now: datetime) -> str:
    """Render a time of day in 24-hour ``HH:MM:SS`` form."""
    return now.strftime("%H:%M:%S")


class AlarmClock:
    """The alarm setting and what happens on each tick of the clock."""

    def __init__(
        self,
        alarm_hour: int = 0,
        alarm_minute: int = 0,
        command: Sequence[str] = ALARM_COMMAND,
    ) -> None:
        self.alarm_hour = alarm_hour
        self.alarm_minute = alarm_minute
        self.command = tuple(command)

    @property
    def alarm_hour(self) -> int:
        """The hour the alarm rings at, from 0 to 23."""
        return self._alarm_hour

    @alarm_hour.setter
    def alarm_hour(self, value: int) -> None:
        if value not in HOUR_RANGE:
            raise ValueError(f"alarm hour must be between 0 and 23, not {value}")
        self._alarm_hour = value

    @property
    def alarm_minute(self) -> int:
        """The minute the alarm rings at, from 0 to 59."""
        return self._alarm_minute

    @alarm_minute.setter
    def alarm_minute(self, value: int) -> None:
        if value not in MINUTE_RANGE:
            raise ValueError(f"alarm minute must be between 0 and 59, not {value}")
        self._alarm_minute = value

    def is_alarm_time(self, now: datetime) -> bool:
        """Return whether *now* is the first second of the alarm minute."""
        return (
            now.hour == self.alarm_hour
            and now.minute == self.alarm_minute
            and now.second == 0
        )

    def tick(self, now: datetime) -> str:
        """Advance the clock to *now*, sounding the alarm when it is due.

        Returns the text the clock face shows. The sound plays to the end
        before this returns; a player that cannot be started is reported on
        standard error and does not stop the clock.
        """
        text = format_time(now)
        if self.is_alarm_time(now):
            try:
                subprocess.run(list(self.command), check=False)
            except OSError as error:
                print(f"unable to play alarm: {error}", file=sys.stderr)
        return text


class _AlarmWindow:
    """The clock face, alarm spinners and a minimise button."""

    def __init__(self, clock: AlarmClock, root=None) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.clock = clock
        self.root = root if root is not None else tk.Tk()
        self.root.title("Alarm Clock")
        self.root.geometry("400x150")

        frame = ttk.Frame(self.root)
        frame.pack(fill=tk.BOTH, expand=True)
        for column in range(4):
            frame.columnconfigure(column, weight=1, uniform="clock")

        self._time = tk.StringVar(value="")
        ttk.Label(frame, textvariable=self._time, anchor=tk.CENTER).grid(
            row=0, column=0, columnspan=4, sticky="ew"
        )
        ttk.Label(frame, text="").grid(row=1, column=0, columnspan=4)

        self._hour = tk.IntVar(value=SPIN_HOUR_START)
        self._minute = tk.IntVar(value=SPIN_MINUTE_START)
        ttk.Label(frame, text="Hour: ").grid(row=2, column=0, sticky="e")
        ttk.Spinbox(
            frame,
            from_=HOUR_RANGE.start,
            to=HOUR_RANGE.stop - 1,
            increment=1,
            textvariable=self._hour,
            command=self._hour_changed,
            width=4,
        ).grid(row=2, column=1, sticky="w")
        ttk.Label(frame, text="Min: ").grid(row=2, column=2, sticky="e")
        ttk.Spinbox(
            frame,
            from_=MINUTE_RANGE.start,
            to=MINUTE_RANGE.stop - 1,
            increment=1,
            textvariable=self._minute,
            command=self._minute_changed,
            width=4,
        ).grid(row=2, column=3, sticky="w")

        ttk.Label(frame, text="").grid(row=3, column=0, columnspan=4)
        ttk.Button(frame, text="Minimise", command=self.root.iconify).grid(
            row=4, column=0, columnspan=4, sticky="ew"
        )

        self.root.after(TICK_MILLISECONDS, self._tick)

    def _hour_changed(self) -> None:
        try:
            self.clock.alarm_hour = self._hour.get()
        except (ValueError, Exception):
            pass

    def _minute_changed(self) -> None:
        try:
            self.clock.alarm_minute = self._minute.get()
        except (ValueError, Exception):
            pass

    def _tick(self) -> None:
        self._time.set(self.clock.tick(datetime.now()))
        self.root.after(TICK_MILLISECONDS, self._tick)


def main(argv: list[str] | None = None) -> int:
    """Open the alarm clock window."""
    parser = argparse.ArgumentParser(prog="alarmclock", description="A simple alarm clock.")
    parser.parse_args(argv)
    window = _AlarmWindow(AlarmClock())
    window.root.mainloop()
    return 0