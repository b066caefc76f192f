"""Kernel time – Clock port + implementations, TimeUnit."""
from tripwire.kernel.time.clock import Clock, FrozenClock, SystemClock
from tripwire.kernel.time.units import TimeUnit

__all__ = ["Clock", "FrozenClock", "SystemClock", "TimeUnit"]
