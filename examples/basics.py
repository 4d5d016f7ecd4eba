"""Fake timers in five minutes.

Demonstrates:
- Scheduling timeouts and intervals on a FakeClock
- Advancing virtual time and watching callbacks fire
- Patching tick_fakeclock.timers so code under test uses the fake clock

Run: python -m examples.basics
"""

from tick_fakeclock import fake_timer, timers


# Code under test only knows about the ambient timers module.
class Heartbeat:
    def __init__(self, period_ms: int) -> None:
        self.beats = 0
        self._interval_id = timers.set_interval(self._beat, period_ms)

    def _beat(self) -> None:
        self.beats += 1

    def stop(self) -> None:
        timers.clear_interval(self._interval_id)


def main() -> None:
    print("=== Fake timers ===\n")

    with fake_timer() as clock:
        heartbeat = Heartbeat(period_ms=250)
        timers.set_timeout(lambda: print(f"  timeout at t={clock.current_time}ms"), 600)

        for _ in range(4):
            clock.advance(500)
            print(f"  t={clock.current_time}ms  beats={heartbeat.beats}")

        heartbeat.stop()
        clock.advance(1000)
        print(f"\n  after stop: beats={heartbeat.beats}")

    print("\nDone. Real timers restored.")


if __name__ == "__main__":
    main()
