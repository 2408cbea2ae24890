"""
Orbit Simulator - Physical Constants and Reference Vehicle Parameters

This module defines the physical constants, angle constants, atmosphere layer
boundaries, simulation timing defaults and reference vehicle specifications
used throughout the simulation.

Flat-ground model: gravity is uniform and points straight down (-y).
"""

import numpy as np

# =============================================================================
# ANGLE CONSTANTS
# =============================================================================

PI = np.pi
TWO_PI = 2.0 * np.pi   # A full turn
HALF_PI = 0.5 * np.pi  # A quarter turn

# =============================================================================
# EARTH PARAMETERS
# =============================================================================

# Standard gravitational acceleration (m/s^2)
G0 = 9.81

# Earth mean radius (km)
EARTH_RADIUS_KM = 6.371e3

# Tangential speed of the ground at the equator (km/h)
TANGENTIAL_VELOCITY_EQUATOR_KMPH = 1674.4

# =============================================================================
# ATMOSPHERE LAYERS (heights in km)
# =============================================================================

TROPOSPHERE_EDGE = 10.0    # Upper bound of the lowest layer
STRATOSPHERE_EDGE = 50.0   # Upper bound of the second layer
ATMOSPHERE_EDGE = 80.0     # Boundary of the atmosphere
KARMAN_LINE = 100.0        # Conventional boundary of space

# =============================================================================
# UNIT CONVERSION FACTORS
# =============================================================================

MPS_TO_KMPH = 3.6
METRES_PER_KM = 1000.0

# =============================================================================
# CONTROL LIMITS
# =============================================================================

MIN_THROTTLE = 0.0
MAX_THROTTLE = 1.0
DEFAULT_THROTTLE = 1.0

# Gimbal must stay strictly inside the forward hemisphere (rad)
MAX_GIMBAL_ANGLE = HALF_PI

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

# Wall-clock interval between updates (s)
TIMER_INTERVAL = 0.5

# Simulated seconds per wall-clock second
TIME_RATIO_VALUES = (1, 2, 5, 10, 25, 50, 100)
DEFAULT_TIME_RATIO = 1.0

# Hard stop for headless runs (s)
MAX_TIME = 3600.0

# Height at which a run is considered successful (km)
TARGET_HEIGHT_KM = 1000.0

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================

DECIMAL_TOLERANCE = 1e-3   # Three decimal places
ZERO_TOLERANCE = 1e-12

# =============================================================================
# REFERENCE VEHICLE - ATLAS V
# =============================================================================

# RD-180 first stage engine
RD180_MASS = 5480.0             # kg
RD180_ISP = 338.0               # s
RD180_MASS_FLOW_RATE = 1250.0   # kg/s

# RL10 upper stage engine
RL10_MASS = 167.8               # kg
RL10_ISP = 450.5                # s
RL10_MASS_FLOW_RATE = 22.45     # kg/s

# Atlas V stage 1 (Common Core Booster)
ATLAS_V_STAGE1_PROPELLANT_MASS = 284089.0  # kg
ATLAS_V_STAGE1_STRUCTURAL_MASS = 15570.0   # kg

# Atlas V stage 2 (Centaur)
ATLAS_V_STAGE2_PROPELLANT_MASS = 20830.0   # kg
ATLAS_V_STAGE2_STRUCTURAL_MASS = 2079.0    # kg

# Reference payload (kg)
DEFAULT_PAYLOAD_MASS = 400.0

# =============================================================================


def print_config():
    """Print configuration summary."""
    rd180_thrust = RD180_ISP * RD180_MASS_FLOW_RATE * G0
    rl10_thrust = RL10_ISP * RL10_MASS_FLOW_RATE * G0
    print("=" * 60)
    print("Orbit Simulator Configuration")
    print("=" * 60)
    print(f"g0: {G0:.2f} m/s^2")
    print(f"Stage 1 propellant: {ATLAS_V_STAGE1_PROPELLANT_MASS:,.0f} kg")
    print(f"Stage 2 propellant: {ATLAS_V_STAGE2_PROPELLANT_MASS:,.0f} kg")
    print(f"RD-180 max thrust: {rd180_thrust/1e6:.2f} MN (Isp {RD180_ISP:.0f} s)")
    print(f"RL10 max thrust: {rl10_thrust/1e3:.1f} kN (Isp {RL10_ISP:.1f} s)")
    print(f"Payload: {DEFAULT_PAYLOAD_MASS:,.0f} kg")
    print(f"Timer interval: {TIMER_INTERVAL:.2f} s")
    print(f"Target height: {TARGET_HEIGHT_KM:.0f} km")
    print("=" * 60)
