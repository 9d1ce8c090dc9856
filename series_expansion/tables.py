"""
Coefficient Tables for the Geodesic Series Expansions.

The expansions of the geodesic integrals were carried out once in a computer
algebra system (Karney 2013, GeographicLib 1.49 ``geod.mac``); this module
reproduces the resulting rational constants verbatim as flat lookup tables
keyed by truncation order.

Table Layout
------------
Every entry is a tuple ``(p_k, ..., p_1, p_0, q)`` holding the integer
coefficients of a polynomial, highest degree first, followed by its integer
denominator. The entry evaluates to ``polyval((p_k, ..., p_0), x) / q``.

* ``A1_TABLE`` / ``A2_TABLE``: keyed by ``order // 2``, one polynomial in
  eps^2 giving t in A1-1 = (t + eps) / (1 - eps) and A2-1 = (t - eps) / (1 + eps).
* ``A3_TABLE``: keyed by order, ``order`` polynomials in n; entry j is the
  coefficient of eps^j.
* ``C1_TABLE``, ``C1P_TABLE``, ``C2_TABLE``: keyed by order, ``order``
  polynomials in eps^2; entry l-1 gives C[l] / eps^l.
* ``C3X_TABLE``: keyed by order, ``order (order - 1) / 2`` polynomials in n,
  packed harmonic by harmonic; harmonic l owns ``order - l`` entries holding
  the coefficients of eps^0 .. eps^(order-l-1) of C3[l] / eps^l.

Truncations of different orders are NOT prefixes of each other (the common
denominators change), so each order carries its own rows.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. J. Geodesy 87(1), 43-55.
- Karney, C.F.F. (2011). Geodesics on an ellipsoid of revolution. arXiv:1102.1215.
"""

from typing import Dict, Final, Tuple

PolyEntry = Tuple[int, ...]


# =============================================================================
# A1, A2: mean-value factors, polynomial in eps^2 keyed by order // 2
# =============================================================================

A1_TABLE: Final[Dict[int, PolyEntry]] = {
    0: (0, 1),
    1: (1, 0, 4),
    2: (1, 16, 0, 64),
    3: (1, 4, 64, 0, 256),
    4: (25, 64, 256, 4096, 0, 16384),
}

A2_TABLE: Final[Dict[int, PolyEntry]] = {
    0: (0, 1),
    1: (-3, 0, 4),
    2: (-7, -48, 0, 64),
    3: (-11, -28, -192, 0, 256),
    4: (-375, -704, -1792, -12288, 0, 16384),
}


# =============================================================================
# A3: coefficients of eps^j, each a polynomial in n
# =============================================================================

A3_TABLE: Final[Dict[int, Tuple[PolyEntry, ...]]] = {
    0: (),
    1: (
        (1, 1),
    ),
    2: (
        (1, 1),
        (-1, 2),
    ),
    3: (
        (1, 1),
        (1, -1, 2),
        (-1, 4),
    ),
    4: (
        (1, 1),
        (1, -1, 2),
        (-1, -2, 8),
        (-1, 16),
    ),
    5: (
        (1, 1),
        (1, -1, 2),
        (3, -1, -2, 8),
        (-3, -1, 16),
        (-3, 64),
    ),
    6: (
        (1, 1),
        (1, -1, 2),
        (3, -1, -2, 8),
        (-1, -3, -1, 16),
        (-2, -3, 64),
        (-3, 128),
    ),
    7: (
        (1, 1),
        (1, -1, 2),
        (3, -1, -2, 8),
        (5, -1, -3, -1, 16),
        (-10, -2, -3, 64),
        (-5, -3, 128),
        (-5, 256),
    ),
    8: (
        (1, 1),
        (1, -1, 2),
        (3, -1, -2, 8),
        (5, -1, -3, -1, 16),
        (-5, -20, -4, -6, 128),
        (-5, -10, -6, 256),
        (-15, -20, 1024),
        (-25, 2048),
    ),
}


# =============================================================================
# C1: Fourier coefficients of B1, C1[l] / eps^l as polynomial in eps^2
# =============================================================================

C1_TABLE: Final[Dict[int, Tuple[PolyEntry, ...]]] = {
    0: (),
    1: (
        (-1, 2),
    ),
    2: (
        (-1, 2),
        (-1, 16),
    ),
    3: (
        (3, -8, 16),
        (-1, 16),
        (-1, 48),
    ),
    4: (
        (3, -8, 16),
        (1, -2, 32),
        (-1, 48),
        (-5, 512),
    ),
    5: (
        (-1, 6, -16, 32),
        (1, -2, 32),
        (9, -16, 768),
        (-5, 512),
        (-7, 1280),
    ),
    6: (
        (-1, 6, -16, 32),
        (-9, 64, -128, 2048),
        (9, -16, 768),
        (3, -5, 512),
        (-7, 1280),
        (-7, 2048),
    ),
    7: (
        (19, -64, 384, -1024, 2048),
        (-9, 64, -128, 2048),
        (-9, 72, -128, 6144),
        (3, -5, 512),
        (35, -56, 10240),
        (-7, 2048),
        (-33, 14336),
    ),
    8: (
        (19, -64, 384, -1024, 2048),
        (7, -18, 128, -256, 4096),
        (-9, 72, -128, 6144),
        (-11, 96, -160, 16384),
        (35, -56, 10240),
        (9, -14, 4096),
        (-33, 14336),
        (-429, 262144),
    ),
}


# =============================================================================
# C1p: coefficients of the reverted series (tau -> sigma)
# =============================================================================

C1P_TABLE: Final[Dict[int, Tuple[PolyEntry, ...]]] = {
    0: (),
    1: (
        (1, 2),
    ),
    2: (
        (1, 2),
        (5, 16),
    ),
    3: (
        (-9, 16, 32),
        (5, 16),
        (29, 96),
    ),
    4: (
        (-9, 16, 32),
        (-37, 30, 96),
        (29, 96),
        (539, 1536),
    ),
    5: (
        (205, -432, 768, 1536),
        (-37, 30, 96),
        (-225, 116, 384),
        (539, 1536),
        (3467, 7680),
    ),
    6: (
        (205, -432, 768, 1536),
        (4005, -4736, 3840, 12288),
        (-225, 116, 384),
        (-7173, 2695, 7680),
        (3467, 7680),
        (38081, 61440),
    ),
    7: (
        (-4879, 9840, -20736, 36864, 73728),
        (4005, -4736, 3840, 12288),
        (8703, -7200, 3712, 12288),
        (-7173, 2695, 7680),
        (-141115, 41604, 92160),
        (38081, 61440),
        (459485, 516096),
    ),
    8: (
        (-4879, 9840, -20736, 36864, 73728),
        (-86171, 120150, -142080, 115200, 368640),
        (8703, -7200, 3712, 12288),
        (1082857, -688608, 258720, 737280),
        (-141115, 41604, 92160),
        (-2200311, 533134, 860160),
        (459485, 516096),
        (109167851, 82575360),
    ),
}


# =============================================================================
# C2: Fourier coefficients of B2
# =============================================================================

C2_TABLE: Final[Dict[int, Tuple[PolyEntry, ...]]] = {
    0: (),
    1: (
        (1, 2),
    ),
    2: (
        (1, 2),
        (3, 16),
    ),
    3: (
        (1, 8, 16),
        (3, 16),
        (5, 48),
    ),
    4: (
        (1, 8, 16),
        (1, 6, 32),
        (5, 48),
        (35, 512),
    ),
    5: (
        (1, 2, 16, 32),
        (1, 6, 32),
        (15, 80, 768),
        (35, 512),
        (63, 1280),
    ),
    6: (
        (1, 2, 16, 32),
        (35, 64, 384, 2048),
        (15, 80, 768),
        (7, 35, 512),
        (63, 1280),
        (77, 2048),
    ),
    7: (
        (41, 64, 128, 1024, 2048),
        (35, 64, 384, 2048),
        (69, 120, 640, 6144),
        (7, 35, 512),
        (105, 504, 10240),
        (77, 2048),
        (429, 14336),
    ),
    8: (
        (41, 64, 128, 1024, 2048),
        (47, 70, 128, 768, 4096),
        (69, 120, 640, 6144),
        (133, 224, 1120, 16384),
        (105, 504, 10240),
        (33, 154, 4096),
        (429, 14336),
        (6435, 262144),
    ),
}


# =============================================================================
# C3x: packed polynomial-in-n coefficients feeding C3
# =============================================================================

C3X_TABLE: Final[Dict[int, Tuple[PolyEntry, ...]]] = {
    0: (),
    1: (),
    2: (
        # C3[1]
        (-1, 1, 4),
    ),
    3: (
        # C3[1]
        (-1, 1, 4),
        (-1, 0, 1, 8),
        # C3[2]
        (1, -3, 2, 32),
    ),
    4: (
        # C3[1]
        (-1, 1, 4),
        (-1, 0, 1, 8),
        (-5, -1, 3, 3, 64),
        # C3[2]
        (1, -3, 2, 32),
        (2, -3, -2, 3, 64),
        # C3[3]
        (-1, 5, -9, 5, 192),
    ),
    5: (
        # C3[1]
        (-1, 1, 4),
        (-1, 0, 1, 8),
        (-5, -1, 3, 3, 64),
        (-2, 2, 2, 5, 128),
        # C3[2]
        (1, -3, 2, 32),
        (2, -3, -2, 3, 64),
        (-6, -9, 2, 6, 256),
        # C3[3]
        (-1, 5, -9, 5, 192),
        (10, -6, -10, 9, 384),
        # C3[4]
        (-7, 20, -28, 14, 1024),
    ),
    6: (
        # C3[1]
        (-1, 1, 4),
        (-1, 0, 1, 8),
        (-5, -1, 3, 3, 64),
        (-2, 2, 2, 5, 128),
        (3, 11, 12, 512),
        # C3[2]
        (1, -3, 2, 32),
        (2, -3, -2, 3, 64),
        (-6, -9, 2, 6, 256),
        (-2, 1, 5, 256),
        # C3[3]
        (-1, 5, -9, 5, 192),
        (10, -6, -10, 9, 384),
        (-77, -8, 42, 3072),
        # C3[4]
        (-7, 20, -28, 14, 1024),
        (-7, -40, 28, 2048),
        # C3[5]
        (75, -90, 42, 5120),
    ),
    7: (
        # C3[1]
        (-1, 1, 4),
        (-1, 0, 1, 8),
        (-5, -1, 3, 3, 64),
        (-2, 2, 2, 5, 128),
        (3, 11, 12, 512),
        (10, 21, 1024),
        # C3[2]
        (1, -3, 2, 32),
        (2, -3, -2, 3, 64),
        (-6, -9, 2, 6, 256),
        (-2, 1, 5, 256),
        (69, 108, 8192),
        # C3[3]
        (-1, 5, -9, 5, 192),
        (10, -6, -10, 9, 384),
        (-77, -8, 42, 3072),
        (-1, 12, 1024),
        # C3[4]
        (-7, 20, -28, 14, 1024),
        (-7, -40, 28, 2048),
        (-43, 72, 8192),
        # C3[5]
        (75, -90, 42, 5120),
        (-15, 9, 1024),
        # C3[6]
        (-99, 44, 8192),
    ),
    8: (
        # C3[1]
        (-1, 1, 4),
        (-1, 0, 1, 8),
        (-5, -1, 3, 3, 64),
        (-2, 2, 2, 5, 128),
        (3, 11, 12, 512),
        (10, 21, 1024),
        (243, 16384),
        # C3[2]
        (1, -3, 2, 32),
        (2, -3, -2, 3, 64),
        (-6, -9, 2, 6, 256),
        (-2, 1, 5, 256),
        (69, 108, 8192),
        (187, 16384),
        # C3[3]
        (-1, 5, -9, 5, 192),
        (10, -6, -10, 9, 384),
        (-77, -8, 42, 3072),
        (-1, 12, 1024),
        (139, 16384),
        # C3[4]
        (-7, 20, -28, 14, 1024),
        (-7, -40, 28, 2048),
        (-43, 72, 8192),
        (127, 16384),
        # C3[5]
        (75, -90, 42, 5120),
        (-15, 9, 1024),
        (99, 16384),
        # C3[6]
        (-99, 44, 8192),
        (99, 16384),
        # C3[7]
        (429, 114688),
    ),
}
