"""Seasonal bee-activity multipliers by month index (0 = January, 11 = December).

Activity peaks in each hemisphere's spring and summer, tapers through early
autumn and stays residual over winter.
"""

PEAK: float = 1.0
SHOULDER: float = 0.5
DORMANT: float = 0.1

# Mar-Aug peak, Sep-Oct shoulder
NORTHERN_SEASONALITY: dict[int, float] = {
    0: DORMANT,
    1: DORMANT,
    2: PEAK,
    3: PEAK,
    4: PEAK,
    5: PEAK,
    6: PEAK,
    7: PEAK,
    8: SHOULDER,
    9: SHOULDER,
    10: DORMANT,
    11: DORMANT,
}

# Sep-Feb peak, Mar-Apr shoulder
SOUTHERN_SEASONALITY: dict[int, float] = {
    0: PEAK,
    1: PEAK,
    2: SHOULDER,
    3: SHOULDER,
    4: DORMANT,
    5: DORMANT,
    6: DORMANT,
    7: DORMANT,
    8: PEAK,
    9: PEAK,
    10: PEAK,
    11: PEAK,
}
