"""
3D math utilities for Euler-angle rigid-body kinematics.

Euler convention: [roll, pitch, yaw] (ZYX, yaw-pitch-roll).
Rotation convention: R_be rotates vectors from body to earth frame.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def euler_to_R(euler: ArrayLike) -> NDArray[np.float64]:
    """
    Convert Euler angles to the body-to-earth rotation matrix.

    R_be = Rz(yaw) @ Ry(pitch) @ Rx(roll), so that:
        v_earth = R_be @ v_body

    Args:
        euler: Euler angles [roll, pitch, yaw] in radians, shape (3,)

    Returns:
        Rotation matrix, shape (3, 3)
    """
    phi, theta, psi = np.asarray(euler, dtype=np.float64)
    sphi, cphi = np.sin(phi), np.cos(phi)
    sth, cth = np.sin(theta), np.cos(theta)
    spsi, cpsi = np.sin(psi), np.cos(psi)

    return np.array([
        [cth * cpsi, sphi * sth * cpsi - cphi * spsi, cphi * sth * cpsi + sphi * spsi],
        [cth * spsi, sphi * sth * spsi + cphi * cpsi, cphi * sth * spsi - sphi * cpsi],
        [-sth,       sphi * cth,                      cphi * cth],
    ])


def euler_rate_matrix(phi: float, theta: float) -> NDArray[np.float64]:
    """
    Matrix mapping body angular rates to Euler angle rates.

        euler_dot = E(phi, theta) @ w_body

    Singular at theta = +/-90 deg. No guard is applied there; the
    tan/sec terms blow up and the non-finite values propagate.

    Args:
        phi: Roll angle [rad]
        theta: Pitch angle [rad]

    Returns:
        E matrix, shape (3, 3)
    """
    sphi, cphi = np.sin(phi), np.cos(phi)
    tth, cth = np.tan(theta), np.cos(theta)

    return np.array([
        [1.0, sphi * tth, cphi * tth],
        [0.0, cphi,       -sphi],
        [0.0, sphi / cth, cphi / cth],
    ])


def inertia_tensor(j_x: float, j_y: float, j_z: float, j_xz: float) -> NDArray[np.float64]:
    """
    Build the body-frame inertia tensor.

    Assumes the body x-z plane is a plane of symmetry, so j_xy = j_yz = 0.

    Args:
        j_x, j_y, j_z: Principal moments of inertia [kg·m²]
        j_xz: Product of inertia [kg·m²]

    Returns:
        Inertia tensor J, shape (3, 3)
    """
    return np.array([
        [j_x,   0.0, -j_xz],
        [0.0,   j_y, 0.0],
        [-j_xz, 0.0, j_z],
    ], dtype=np.float64)


def inertia_inverse(j_x: float, j_y: float, j_z: float, j_xz: float) -> NDArray[np.float64]:
    """
    Closed-form inverse of inertia_tensor().

    Uses Gamma = j_x * j_z - j_xz**2. Arguments are coerced to Python
    floats, so a singular tensor raises ZeroDivisionError.

    Returns:
        J^{-1}, shape (3, 3)
    """
    j_x, j_y, j_z, j_xz = float(j_x), float(j_y), float(j_z), float(j_xz)
    gamma = j_x * j_z - j_xz * j_xz

    return np.array([
        [j_z / gamma,  0.0,       j_xz / gamma],
        [0.0,          1.0 / j_y, 0.0],
        [j_xz / gamma, 0.0,       j_x / gamma],
    ])


# ============================================================================
# Unit tests (run with: python -m sixdof.math3d)
# ============================================================================

if __name__ == "__main__":
    print("Running math3d unit tests...")

    # Test 1: Zero attitude -> identity rotation
    assert np.allclose(euler_to_R([0.0, 0.0, 0.0]), np.eye(3)), "Zero Euler angles should give identity"
    print("  [PASS] euler_to_R identity")

    # Test 2: Rotation matrix is orthonormal
    R_test = euler_to_R([0.3, -0.4, 1.2])
    assert np.allclose(R_test @ R_test.T, np.eye(3)), "R should be orthonormal (R @ R.T = I)"
    assert np.allclose(np.linalg.det(R_test), 1.0), "det(R) should be 1"
    print("  [PASS] euler_to_R orthonormality")

    # Test 3: E reduces to identity at level attitude
    assert np.allclose(euler_rate_matrix(0.0, 0.0), np.eye(3)), "E(0, 0) should be identity"
    print("  [PASS] euler_rate_matrix identity")

    # Test 4: Closed-form inverse
    J = inertia_tensor(0.8244, 1.135, 1.759, 0.1204)
    assert np.allclose(inertia_inverse(0.8244, 1.135, 1.759, 0.1204), np.linalg.inv(J)), "Closed-form inverse mismatch"
    print("  [PASS] inertia_inverse")

    print("\nAll math3d tests passed!")
