"""
Orbit Simulator - Flight Telemetry Plots

Renders a SimulationLog to PNG files: height, speed, fuel and mass against
time, plus the 2-D flight path. Uses the non-interactive Agg backend so it
works headless.
"""

import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from . import constants as C


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TrajectoryData:
    """Container for telemetry arrays used in plotting.

    Attributes:
        time: Time in seconds
        height: Height in kilometres
        downrange: Horizontal distance in kilometres
        speed: Speed magnitude in m/s
        fuel: Fuel in the active stage in kg
        mass: Vehicle mass in kg
        thrust: Thrust magnitude in N
        stage_number: One-based active stage
    """
    time: np.ndarray
    height: np.ndarray
    downrange: np.ndarray
    speed: np.ndarray
    fuel: np.ndarray
    mass: np.ndarray
    thrust: np.ndarray
    stage_number: np.ndarray


def configure_plot_style() -> None:
    """Configure matplotlib defaults for telemetry plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
    })


def extract_log_data(log) -> TrajectoryData:
    """Convert a SimulationLog (or any object with the same lists) to arrays.

    Raises:
        AttributeError: If required log attributes are missing
    """
    return TrajectoryData(
        time=np.asarray(log.time, dtype=np.float64),
        height=np.asarray(log.height, dtype=np.float64),
        downrange=np.asarray(log.downrange, dtype=np.float64),
        speed=np.asarray(log.speed, dtype=np.float64),
        fuel=np.asarray(log.fuel, dtype=np.float64),
        mass=np.asarray(log.mass, dtype=np.float64),
        thrust=np.asarray(log.thrust, dtype=np.float64),
        stage_number=np.asarray(log.stage_number, dtype=np.int64),
    )


def find_stage_changes(data: TrajectoryData) -> np.ndarray:
    """Indices at which the active stage changes."""
    if len(data.stage_number) < 2:
        return np.array([], dtype=np.int64)
    return np.flatnonzero(np.diff(data.stage_number)) + 1


def _mark_stage_changes(ax, data: TrajectoryData):
    for i, idx in enumerate(find_stage_changes(data)):
        ax.axvline(data.time[idx], color='gray', linestyle='--', linewidth=1.0,
                   label='Stage separation' if i == 0 else None)


def _save(fig, output_dir: str, name: str) -> str:
    path = os.path.join(output_dir, name)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_height_profile(data: TrajectoryData, output_dir: str) -> str:
    """Height against time; returns the saved file path."""
    fig, ax = plt.subplots()
    ax.plot(data.time, data.height, 'b-', label='Height')
    for edge, name in ((C.TROPOSPHERE_EDGE, 'Troposphere edge'),
                       (C.ATMOSPHERE_EDGE, 'Atmosphere edge')):
        if data.height.size and data.height.max() >= edge:
            ax.axhline(edge, color='lightblue', linestyle=':', label=name)
    _mark_stage_changes(ax, data)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Height (km)')
    ax.set_title('Height Profile', fontweight='bold')
    ax.legend(loc='best')
    return _save(fig, output_dir, '01_height_profile.png')


def plot_speed_profile(data: TrajectoryData, output_dir: str) -> str:
    """Speed against time; returns the saved file path."""
    fig, ax = plt.subplots()
    ax.plot(data.time, data.speed, 'r-', label='Speed')
    _mark_stage_changes(ax, data)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Speed (m/s)')
    ax.set_title('Speed Profile', fontweight='bold')
    ax.legend(loc='best')
    return _save(fig, output_dir, '02_speed_profile.png')


def plot_mass_profile(data: TrajectoryData, output_dir: str) -> str:
    """Mass and active-stage fuel against time; returns the saved file path."""
    fig, ax = plt.subplots()
    ax.plot(data.time, data.mass / 1000.0, 'k-', label='Mass')
    ax.plot(data.time, data.fuel / 1000.0, 'g--', label='Fuel (active stage)')
    _mark_stage_changes(ax, data)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Mass (t)')
    ax.set_title('Mass Budget', fontweight='bold')
    ax.legend(loc='best')
    return _save(fig, output_dir, '03_mass_profile.png')


def plot_trajectory(data: TrajectoryData, output_dir: str) -> str:
    """Flight path in the vertical plane; returns the saved file path."""
    fig, ax = plt.subplots()
    ax.plot(data.downrange, data.height, 'b-')
    if data.time.size:
        ax.scatter([data.downrange[0]], [data.height[0]], c='green', marker='o',
                   zorder=5, label='Launch')
        ax.scatter([data.downrange[-1]], [data.height[-1]], c='darkorange', marker='*',
                   s=90, zorder=5, label=f'Final ({data.height[-1]:.1f} km)')
    ax.set_xlabel('Downrange (km)')
    ax.set_ylabel('Height (km)')
    ax.set_title('Trajectory', fontweight='bold')
    ax.legend(loc='best')
    return _save(fig, output_dir, '04_trajectory.png')


def generate_all_plots(log, output_dir: str = "plots") -> List[str]:
    """Generate all telemetry plots.

    Args:
        log: SimulationLog containing telemetry
        output_dir: Directory to save plots (created if it doesn't exist)

    Returns:
        List of paths to saved plot files
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    plot_functions = [
        plot_height_profile,
        plot_speed_profile,
        plot_mass_profile,
        plot_trajectory,
    ]
    return [plot(data, output_dir) for plot in plot_functions]
