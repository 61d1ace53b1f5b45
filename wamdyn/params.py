"""Identified dynamic parameter vectors for the WAM arm models."""

from __future__ import annotations

import numpy as np

_PI_2D_GRAVITY = (
    -0.918337877170457, -0.103063209829940,
    0.0375697081564328, -2.21969748210226,
)

_PI_4D = (
    0.270579387175855, -0.208695099581966, 0.168926562021083,
    -0.800320239033409, -0.176517063849070, 2.05671186163312,
    0.0261152332313845, -2.02765298645556, 2.56764800019947,
    -0.509431115014757, 0.643188182123626, 1.48538954968544,
)

_PI_4D_GRAVITY = (
    0.147785256061085, 0.209451284205178, 0.0131079080258135,
    1.42981178937137, 2.43011414756261, 0.403307288959893,
    0.675223836841805, 0.587854485146857,
)

_PI_4DOF = (
    -0.0724218615575743, -0.378152381281395, 0.0166472882761794,
    -0.0274682256863257, -0.0620357415748181, 0.0191795255711048,
    0.0170043650021235, -0.0218091582846323, 0.00426181284583211,
    0.0694399585780998, -1.92351059117157, -0.0749455845981079,
    -0.0797657221894952, -0.150622123521831, 0.0220863404355542,
    0.0291570740370893, -0.116703769250667, 0.0444654560723614,
    0.0264995428715655, 0.556939276222851, 0.439406764209934,
    0.441160627637629, 0.234657433397044, 0.747332850508843,
    0.632866813474903, 0.130259371581478, 0.436301753452326,
    1.50167837126504, 1.23787079324271, 1.69984806757873,
)

_BETA = (
    9.979738463023379857e-02, 2.012744438999999996, 2.978243201999999812,
    1.273046856165373386, 6.261837040999999882e-02, -1.410702867999999999e-01,
    1.193074345035264772, -4.430096310000000009e-02, 7.694085064000000251e-02,
    3.147335738749732048, 2.636908351999999844, 7.347614339000000383e-01,
    8.570976417064936348e-02, 1.916789999995671678e-02, 7.849687519999999641e-02,
    1.729291419875206987e-02, 1.724336737999999924e-01, 1.531993441250024679e-01,
    -1.583109240000002416e-02, 1.625741367999999909, 6.206419025999999617e-01,
    3.127383743156250118e-01, 5.003635359099999763e-02, 2.767149661999999954e-02,
    3.097708184143749821e-01, -6.091466945000000022e-02, -2.075180495050000240e-01,
    1.016343755999999932, 4.645776757000000257e-01, 5.705202619999999447e-01,
)

_BETA_OLS = (
    9.734877870987190818e-02, 2.135360739347436976, 2.875406467939788158,
    1.301952260203284695, 3.587778321156109840e-02, -1.530138431708059077e-01,
    8.219345587215229898e-01, -1.206427000099434821e-01, 6.824421702004784818e-02,
    3.193574808228402784, 2.566387973531578215, 7.838764983899407790e-01,
    1.161235179344928259e-01, -1.892393863543706534e-02, 1.366902467099875562e-01,
    -2.116789957660859534e-01, 2.175972954027892148e-01, 1.842110549830429655e-01,
    -2.656045561995465723e-02, 1.674017760179671299, 5.560378763817641623e-01,
    2.310553824714768334e-01, 1.061862797635669819e-01, 5.845457786249205062e-02,
    2.694698009299751895e-01, -6.760240744349915731e-02, -2.020817259710702973e-01,
    1.007674556322616377, 3.967991386262231246e-01, 6.448748881439757552e-01,
)


def pi_2d_gravity() -> np.ndarray:
    """Gravity-only parameters for the 2-joint (joints 2 and 4) model, shape (4,)."""
    return np.array(_PI_2D_GRAVITY, dtype=float)


def pi_4d() -> np.ndarray:
    """Parameters for the 2-joint model including gravity and friction, shape (12,)."""
    return np.array(_PI_4D, dtype=float)


def pi_4d_gravity() -> np.ndarray:
    """Non-gravity parameters for the 2-joint model, shape (8,)."""
    return np.array(_PI_4D_GRAVITY, dtype=float)


def pi_4dof() -> np.ndarray:
    """Base parameters for the full 4-DOF model, shape (30,)."""
    return np.array(_PI_4DOF, dtype=float)


def beta() -> np.ndarray:
    """Base parameters for the 4-DOF W regressor, shape (30,)."""
    return np.array(_BETA, dtype=float)


def beta_ols() -> np.ndarray:
    """Ordinary-least-squares estimate of the 4-DOF base parameters, shape (30,)."""
    return np.array(_BETA_OLS, dtype=float)