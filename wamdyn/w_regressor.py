"""Base-parameter regressor W for the first four joints of the WAM.

The joint torques of joints 1-4 are linear in a set of 30 base dynamic
parameters: ``tau = calculate_w(q, dq, ddq) @ beta``.  The full regressor has
12 standard parameters per link (six inertia terms, three first moments, the
mass, viscous and Coulomb friction); the base regressor keeps the 30 columns
listed in :data:`BASE_COLUMNS`.
"""

from __future__ import annotations

import math

import numpy as np

GRAVITY = 9.81
_LINK_OFFSET = 0.55
_JOINT_OFFSET = 0.045
_COULOMB_SHARPNESS = 100.0

PARAMS_PER_LINK = 12
N_JOINTS = 4

#: Columns of the 4x48 standard regressor kept as base parameters, in order.
BASE_COLUMNS = (
    3, 10, 11,
    12, 13, 14, 15, 16, 18, 20, 22, 23,
    24, 25, 26, 27, 28, 30, 32, 34, 35,
    36, 37, 38, 39, 40, 42, 44, 46, 47,
)


def _joint_vector(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (N_JOINTS,):
        raise ValueError(f"{name} must hold exactly {N_JOINTS} joint values, got {arr.size}")
    return arr


def _standard_regressor(q: np.ndarray, dq: np.ndarray, ddq: np.ndarray) -> np.ndarray:
    """Regressor over all 48 standard link parameters, shape (4, 48)."""
    g = GRAVITY
    a = _LINK_OFFSET
    d = _JOINT_OFFSET
    cos, sin = math.cos, math.sin

    x0 = -ddq[0]
    x1 = -dq[0]
    x2 = cos(q[1])
    x3 = -x2
    x4 = x1 * x3
    x5 = -x4
    x6 = dq[1] * x5
    x7 = sin(q[1])
    x8 = x0 * x7 + x6
    x9 = x1 * x7
    x10 = dq[1] * x9
    x11 = -x10
    x12 = x5 * x9
    x13 = x9 ** 2
    x14 = dq[1] ** 2
    x15 = x0 * x3 + x10
    x16 = x4 ** 2
    x17 = x4 * x9
    x18 = dq[1] * x4
    x19 = g * x2
    x20 = -g * x7
    x21 = -x20
    x22 = cos(q[2])
    x23 = sin(q[2])
    x24 = ddq[1] * x23
    x25 = x22 * x8
    x26 = dq[1] * x22
    x27 = x23 * x9
    x28 = -x27
    x29 = x26 + x28
    x30 = -dq[2]
    x31 = -x30
    x32 = x24 + x25 + x29 * x31
    x33 = dq[1] * x23
    x34 = x22 * x9
    x35 = x33 + x34
    x36 = -x35
    x37 = x30 + x5
    x38 = x36 * x37
    x39 = -x23
    x40 = x29 * x35
    x41 = -x40
    x42 = -ddq[2] - x15
    x43 = x41 + x42
    x44 = x35 ** 2
    x45 = x37 ** 2
    x46 = -x45
    x47 = x44 + x46
    x48 = x29 * x37
    x49 = x32 + x48
    x50 = -x49
    x51 = x35 * x37
    x52 = ddq[1] * x22
    x53 = x23 * x8
    x54 = -x53
    x55 = x30 * x35 + x52 + x54
    x56 = x51 + x55
    x57 = x22 * x56
    x58 = -x48
    x59 = x32 + x58
    x60 = x29 ** 2
    x61 = -x44
    x62 = -x60 - x61
    x63 = -x42
    x64 = -x60
    x65 = x45 + x64
    x66 = x40 + x42
    x67 = -x38 - x55
    x68 = -x41
    x69 = a * x26 - a * x27
    x70 = x29 * x69
    x71 = d * x22 ** 2 + d * x23 ** 2
    x72 = -a * x33 - a * x34 + x4 * x71
    x73 = d * dq[2]
    x74 = x72 + x73
    x75 = -x19
    x76 = x36 * x73 + x52 * x71 + x54 * x71 + x75
    x77 = x36 * x74 + x70 + x76
    x78 = x39 * x77
    x79 = x46 + x64
    x80 = -a * x23
    x81 = x40 + x63
    x82 = x39 * x71
    x83 = d * ddq[2] + x15 * x71 + x21 * x23 - a * x24 - a * x25 + x30 * x69
    x84 = x37 * x69
    x85 = x26 * x71 + x28 * x71
    x86 = -x36 * x85 + x83 - x84
    x87 = x35 * x85 + x83 - x84
    x88 = x22 * x87
    x89 = x20 * x22 + x31 * x72 + x5 * x73 + a * x52 - a * x53
    x90 = x29 * x85
    x91 = x37 * x74
    x92 = -x89 + x90 - x91
    x93 = x51 - x55
    x94 = x61 + x64
    x95 = x35 * x74 - x70 - x76
    x96 = x46 + x61
    x97 = -x32 + x48
    x98 = x89 - x90 + x91
    x99 = -x98
    x100 = cos(q[3])
    x101 = sin(q[3])
    x102 = -dq[3]
    x103 = x101 * x35
    x104 = -x100
    x105 = x104 * x37
    x106 = x103 + x105
    x107 = x100 * x32 + x101 * x42 + x102 * x106
    x108 = dq[3] + x29
    x109 = x100 * x35 + x101 * x37
    x110 = -x109
    x111 = x108 * x110
    x112 = x100 * x107 + x101 * x111
    x113 = x106 * x109
    x114 = -x101 * x107 - x104 * x111
    x115 = ddq[3] + x55
    x116 = -x113
    x117 = x115 + x116
    x118 = x109 ** 2
    x119 = x108 ** 2
    x120 = -x119
    x121 = x118 + x120
    x122 = x100 * x117 + x101 * x121
    x123 = x106 * x108
    x124 = x107 + x123
    x125 = -x101 * x117 - x104 * x121
    x126 = x101 * x32
    x127 = x104 * x42
    x128 = dq[3] * x109 + x126 + x127
    x129 = x108 * x109
    x130 = x128 + x129
    x131 = -x123
    x132 = x107 + x131
    x133 = x100 * x130 + x101 * x132
    x134 = x106 ** 2
    x135 = -x118
    x136 = x134 + x135
    x137 = x101 * x130
    x138 = -x104 * x132 - x137
    x139 = x100 * x131 + x101 * x129
    x140 = -x101 * x131 - x104 * x129
    x141 = -x134
    x142 = x119 + x141
    x143 = x113 + x115
    x144 = x101 * x143
    x145 = x100 * x142 + x144
    x146 = x111 + x128
    x147 = -x101 * x142 - x104 * x143
    x148 = x100 * x123 + x101 * x128
    x149 = -x101 * x123 - x104 * x128
    x150 = x100 ** 2
    x151 = x101 ** 2
    x152 = -d * x150 - d * x151
    x153 = d * dq[3]
    x154 = x110 * x153 + x126 * x152 + x127 * x152 + x83
    x155 = x100 * x69 + x101 * x85
    x156 = x106 * x155
    x157 = d * x150 + d * x151
    x158 = x101 * x69 + x104 * x85 + x157 * x29
    x159 = x153 + x158
    x160 = x110 * x159 + x154 + x156
    x161 = x101 * x160
    x162 = x137 * x152 + x161
    x163 = d * ddq[3] + dq[3] * x155 + x101 * x89 + x104 * x76 + x157 * x55
    x164 = x108 * x155
    x165 = x103 * x152 + x105 * x152 + x74
    x166 = x110 * x165 - x163 + x164
    x167 = x113 - x115
    x168 = x157 * x167 + x166
    x169 = x120 + x141
    x170 = x100 * x169 + x101 * x167
    x171 = x101 * x169 + x104 * x167
    x172 = x104 * x160
    x173 = x104 * x152
    x174 = -x130 * x173 - x172
    x175 = x109 * x165 + x163 - x164
    x176 = x100 * x89 + x101 * x76 + x102 * x158 + x153 * x29
    x177 = x106 * x165
    x178 = x108 * x159
    x179 = -x176 + x177 - x178
    x180 = x135 + x141
    x181 = x101 * x152
    x182 = x100 * x175 + x101 * x179 + x180 * x181
    x183 = x124 * x157
    x184 = -x128 + x129
    x185 = x100 * x184 + x101 * x124
    x186 = x101 * x184 + x104 * x124
    x187 = x101 * x175
    x188 = -x104 * x179 - x173 * x180 - x187
    x189 = x109 * x159 - x154 - x156
    x190 = -x107 + x123
    x191 = x100 * x189 + x181 * x190
    x192 = x176 - x177 + x178
    x193 = x120 + x135
    x194 = x157 * x193 + x192
    x195 = x100 * x143 + x101 * x193
    x196 = x104 * x193 + x144
    x197 = -x101 * x189 - x173 * x190
    x198 = x152 * x161
    x199 = x157 * x175
    x200 = x100 * x192 + x187
    x201 = x101 * x192 + x104 * x175
    x202 = -x152 * x172
    x203 = x22 * x66
    x204 = x22 * x77
    x205 = x22 * x71

    h = np.zeros((N_JOINTS, N_JOINTS * PARAMS_PER_LINK))

    row = h[0]
    row[3] = -x0
    row[10] = dq[0]
    row[11] = math.tanh(_COULOMB_SHARPNESS * dq[0])
    row[12] = -x11 * x3 - x7 * x8
    row[13] = -x3 * (x13 - x14) - x7 * (ddq[1] + x12)
    row[14] = -x3 * (x6 + x8) - x7 * (x10 + x15)
    row[15] = -x10 * x3 - x6 * x7
    row[16] = -x3 * (ddq[1] + x17) - x7 * (x14 - x16)
    row[17] = -x15 * x3 - x18 * x7
    row[19] = -x19 * x7 - x21 * x3
    row[24] = -x3 * x41 - x7 * (x22 * x32 + x38 * x39)
    row[25] = -x3 * x50 - x7 * (x22 * x43 + x39 * x47)
    row[26] = -x3 * x62 - x7 * (x39 * x59 + x57)
    row[27] = -x3 * x63 - x7 * (x22 * x58 + x39 * x51)
    row[28] = -x3 * x67 - x7 * (x22 * x65 + x39 * x66)
    row[29] = -x3 * x68 - x7 * (x22 * x48 + x39 * x55)
    row[30] = -x3 * (x71 * x81 + x86) - x7 * (
        -a * x22 * x81 + x56 * x82 + x78 + x79 * x80
    )
    row[31] = -x3 * x49 * x71 - x7 * (
        -a * x22 * x49 + x39 * x92 + x80 * x93 + x82 * x94 + x88
    )
    row[32] = -x3 * (x71 * x96 + x99) - x7 * (
        x22 * x95 - a * x22 * x96 + x66 * x80 + x82 * x97
    )
    row[33] = -x3 * x71 * x87 - x7 * (x71 * x78 + x80 * x98 - a * x88)
    row[36] = -x114 * x3 - x7 * (x112 * x22 + x113 * x39)
    row[37] = -x125 * x3 - x7 * (x122 * x22 + x124 * x39)
    row[38] = -x138 * x3 - x7 * (x133 * x22 + x136 * x39)
    row[39] = -x140 * x3 - x7 * (x115 * x39 + x139 * x22)
    row[40] = -x147 * x3 - x7 * (x145 * x22 + x146 * x39)
    row[41] = -x149 * x3 - x7 * (x116 * x39 + x148 * x22)
    row[42] = -x3 * (x130 * x71 + x174) - x7 * (
        -a * x130 * x22 + x162 * x22 + x168 * x39 + x170 * x80 + x171 * x82
    )
    row[43] = -x3 * (x180 * x71 + x188) - x7 * (
        -a * x180 * x22 + x182 * x22 + x183 * x39 + x185 * x80 + x186 * x82
    )
    row[44] = -x3 * (x190 * x71 + x197) - x7 * (
        -a * x190 * x22 + x191 * x22 + x194 * x39 + x195 * x80 + x196 * x82
    )
    row[45] = -x3 * (x160 * x71 + x202) - x7 * (
        -a * x160 * x22 + x198 * x22 + x199 * x39 + x200 * x80 + x201 * x82
    )

    row = h[1]
    row[12] = x17
    row[13] = x18 + x8
    row[14] = -x13 + x16
    row[15] = ddq[1]
    row[16] = x11 + x15
    row[17] = x12
    row[18] = x75
    row[20] = x20
    row[22] = dq[1]
    row[23] = math.tanh(_COULOMB_SHARPNESS * dq[1])
    row[24] = x22 * x38 + x23 * x32
    row[25] = x22 * x47 + x23 * x43
    row[26] = x22 * x59 + x23 * x56
    row[27] = x22 * x51 + x23 * x58
    row[28] = x203 + x23 * x65
    row[29] = x22 * x55 + x23 * x48
    row[30] = x204 + a * x22 * x79 + x57 * x71 + x80 * x81
    row[31] = x205 * x94 + x22 * x92 + a * x22 * x93 + x23 * x87 + x49 * x80
    row[32] = a * x203 + x205 * x97 + x23 * x95 + x80 * x96
    row[33] = x204 * x71 + a * x22 * x98 + x80 * x87
    row[36] = x112 * x23 + x113 * x22
    row[37] = x122 * x23 + x124 * x22
    row[38] = x133 * x23 + x136 * x22
    row[39] = x115 * x22 + x139 * x23
    row[40] = x145 * x23 + x146 * x22
    row[41] = x116 * x22 + x148 * x23
    row[42] = x130 * x80 + x162 * x23 + x168 * x22 + a * x170 * x22 + x171 * x205
    row[43] = x180 * x80 + x182 * x23 + x183 * x22 + a * x185 * x22 + x186 * x205
    row[44] = x190 * x80 + x191 * x23 + x194 * x22 + a * x195 * x22 + x196 * x205
    row[45] = x160 * x80 + x198 * x23 + x199 * x22 + a * x200 * x22 + x201 * x205

    row = h[2]
    row[24] = x41
    row[25] = x50
    row[26] = x62
    row[27] = x63
    row[28] = x67
    row[29] = x68
    row[30] = d * x81 + x86
    row[31] = d * x49
    row[32] = d * x96 + x99
    row[33] = d * x87
    row[34] = dq[2]
    row[35] = math.tanh(_COULOMB_SHARPNESS * dq[2])
    row[36] = x114
    row[37] = x125
    row[38] = x138
    row[39] = x140
    row[40] = x147
    row[41] = x149
    row[42] = d * x130 + x174
    row[43] = d * x180 + x188
    row[44] = d * x190 + x197
    row[45] = d * x160 + x202

    row = h[3]
    row[36] = x113
    row[37] = x124
    row[38] = x136
    row[39] = x115
    row[40] = x146
    row[41] = x116
    row[42] = x166 + d * x167
    row[43] = d * x124
    row[44] = x192 + d * x193
    row[45] = d * x175
    row[46] = dq[3]
    row[47] = math.tanh(_COULOMB_SHARPNESS * dq[3])

    return h


def calculate_w(q, dq, ddq) -> np.ndarray:
    """Base regressor for joints 1-4, shape (4, 30).

    ``q``, ``dq`` and ``ddq`` are the positions, velocities and accelerations
    of the first four joints.  Raises ValueError if any holds other than four
    values.
    """
    q = _joint_vector(q, "q")
    dq = _joint_vector(dq, "dq")
    ddq = _joint_vector(ddq, "ddq")
    return _standard_regressor(q, dq, ddq)[:, BASE_COLUMNS]