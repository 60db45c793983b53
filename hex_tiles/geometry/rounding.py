from __future__ import annotations

from .coords import Cube


def round_cube(qf: float, rf: float, sf: float) -> Cube:
    """Round fractional cube coordinates to the nearest hex cell.

    Each component is rounded on its own (half to even). The component
    with the largest rounding error is then recomputed from the other two.
    Ties are resolved in x, y, z order: x only when its error is strictly
    the largest, otherwise y when its error beats z, otherwise z.
    """

    qi, ri, si = round(qf), round(rf), round(sf)
    dq, dr, ds = abs(qi - qf), abs(ri - rf), abs(si - sf)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return Cube(qi, ri, si)
