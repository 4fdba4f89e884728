"""
黑体辐射计算核心
"""

from blackbody.constants import PRESETS, Preset
from blackbody.dataset import (
    Dataset,
    calculate_max_intensity,
    generate_dataset,
    nearest_sample,
)
from blackbody.physics import (
    Color,
    PhysicsDomainError,
    planck_law,
    rayleigh_jeans_law,
    stefan_boltzmann_law,
    temperature_to_color,
    wien_approximation,
    wien_displacement_law,
)

__all__ = [
    "Color",
    "Dataset",
    "PRESETS",
    "PhysicsDomainError",
    "Preset",
    "calculate_max_intensity",
    "generate_dataset",
    "nearest_sample",
    "planck_law",
    "rayleigh_jeans_law",
    "stefan_boltzmann_law",
    "temperature_to_color",
    "wien_approximation",
    "wien_displacement_law",
]
