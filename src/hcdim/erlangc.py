# src/hcdim/erlangc.py
from __future__ import annotations

import math

SECONDS_PER_HOUR: float = 3600.0


def offered_load_erlangs(volume: float, aht_seconds: float, interval_seconds: float = SECONDS_PER_HOUR) -> float:
    """
    Offered load a (Erlangs) = arrival_rate * AHT.
    Volume is a count per interval (calls/hour by default):
      a = volume * aht_seconds / interval_seconds
    Non-positive volume or AHT means no load.
    """
    if interval_seconds <= 0:
        raise ValueError("interval_seconds must be > 0")
    if volume <= 0 or aht_seconds <= 0:
        return 0.0
    return float(volume) * float(aht_seconds) / float(interval_seconds)


def erlang_b_blocking(agents: int, traffic: float) -> float:
    """
    Erlang B blocking probability for `agents` servers offered `traffic` Erlangs.

    B = (a^n / n!) / sum_{i=0..n} a^i / i!

    Evaluated through the recurrence 1/B(k) = 1 + (k/a) * 1/B(k-1), which is
    the term-by-term ratio of the summation and never forms a^n or n!.
    """
    if agents <= 0 or traffic <= 0:
        return 0.0

    a = float(traffic)
    inv_b = 1.0  # 1/B(0)
    for k in range(1, int(agents) + 1):
        inv_b = 1.0 + inv_b * k / a
    return 1.0 / inv_b


def erlang_c_probability_of_wait(agents: int, traffic: float) -> float:
    """
    Erlang C probability that an arriving contact waits (Pw), from Erlang B:

    C = B / (1 - (a/n) * (1 - B))

    No load => 0. At or over capacity (a >= n) => 1.
    """
    if agents <= 0 or traffic <= 0:
        return 0.0
    if traffic >= agents:
        return 1.0

    b = erlang_b_blocking(agents, traffic)
    rho = float(traffic) / float(agents)
    c = b / (1.0 - rho * (1.0 - b))
    # Clamp for safety
    return min(float(c), 1.0)


def asa_erlang_c(agents: int, traffic: float, aht_seconds: float) -> float:
    """Mean wait in seconds over all contacts: Pw * AHT / (n - a). Infinite when n <= a."""
    if traffic <= 0 or aht_seconds <= 0:
        return 0.0
    if agents <= traffic:
        return float("inf")
    spare = float(agents) - float(traffic)
    return erlang_c_probability_of_wait(agents, traffic) * float(aht_seconds) / spare


def service_level_erlang_c(agents: int, traffic: float, aht_seconds: float, target_answer_time_seconds: float) -> float:
    """
    Fraction of contacts answered within T seconds:

    SL(T) = 1 - Pw * exp(-(n-a) * (T / AHT))

    Returned as a fraction in [0, 1]; callers working in percent multiply by 100.
    """
    if traffic <= 0:
        return 1.0
    if aht_seconds <= 0:
        raise ValueError("aht_seconds must be > 0 when traffic > 0")
    if agents <= traffic:
        return 0.0

    T = max(float(target_answer_time_seconds), 0.0)
    pw = erlang_c_probability_of_wait(agents, traffic)
    expo = math.exp(-(agents - traffic) * (T / float(aht_seconds)))
    return 1.0 - pw * expo


__all__ = [
    "SECONDS_PER_HOUR",
    "offered_load_erlangs",
    "erlang_b_blocking",
    "erlang_c_probability_of_wait",
    "asa_erlang_c",
    "service_level_erlang_c",
]
