"""
绘图数据生成
在固定波长窗口 [100, 3000] nm 上对数采样，计算三条辐射曲线并以普朗克曲线峰值归一化
"""

import logging
import math
import numbers
from dataclasses import dataclass

import numpy as np

from blackbody.constants import (
    DEFAULT_POINTS,
    INTENSITY_HEADROOM,
    INTENSITY_TEMP_STEPS,
    MAX_WAVELENGTH_NM,
    MIN_WAVELENGTH_NM,
    RAYLEIGH_JEANS_CAP,
)
from blackbody.physics import (
    PhysicsDomainError,
    planck_law,
    rayleigh_jeans_law,
    wien_approximation,
    wien_displacement_law,
)

logger = logging.getLogger("blackbody")


@dataclass(frozen=True)
class Dataset:
    """单一温度下的归一化光谱曲线，数组只读"""

    wavelengths: np.ndarray  # nm，严格递增
    planck: np.ndarray  # 归一化，最大值为 1
    wien: np.ndarray  # 除以普朗克最大值
    rayleigh_jeans: np.ndarray  # 除以普朗克最大值，上限 5
    peak_wavelength: float  # nm，维恩位移定律

    def __len__(self):
        return len(self.wavelengths)


def _frozen(arr):
    arr.setflags(write=False)
    return arr


def _check_points(points):
    if isinstance(points, bool) or not isinstance(points, numbers.Integral):
        raise PhysicsDomainError(f"points must be an integer, got {points!r}")
    if points < 2:
        raise PhysicsDomainError(f"points must be >= 2, got {points}")
    return int(points)


def log_spaced_wavelengths(points=DEFAULT_POINTS):
    """
    对数间隔的波长序列(nm)
    λ_i = λ_min * (λ_max/λ_min)^(i/(points-1))
    """
    points = _check_points(points)
    t = np.arange(points) / (points - 1)
    return MIN_WAVELENGTH_NM * (MAX_WAVELENGTH_NM / MIN_WAVELENGTH_NM) ** t


def generate_dataset(temperature, points=DEFAULT_POINTS):
    """
    生成绘图数据

    参数:
        temperature: 温度(K)
        points: 采样点数（>= 2）

    返回:
        Dataset: 波长、三条归一化曲线和峰值波长

    所有曲线都除以原始普朗克曲线的最大值，而不是三条曲线的共同最大值。
    瑞利-金斯曲线归一化后限制在 5 以内，仅作用于返回的显示数据。
    """
    wavelengths = log_spaced_wavelengths(points)

    planck_raw = planck_law(wavelengths, temperature)
    wien_raw = wien_approximation(wavelengths, temperature)
    rj_raw = rayleigh_jeans_law(wavelengths, temperature)

    max_planck = float(np.max(planck_raw))
    if not math.isfinite(max_planck):
        raise PhysicsDomainError(
            f"spectral radiance overflows the float range at T={temperature} K"
        )

    if max_planck > 0:
        planck = planck_raw / max_planck
        wien = wien_raw / max_planck
        with np.errstate(over='ignore'):
            rayleigh_jeans = np.minimum(rj_raw / max_planck, RAYLEIGH_JEANS_CAP)
    else:
        # 整个窗口内普朗克辐射下溢为 0（例如 2.7 K），曲线全暗
        logger.debug(f"Planck curve underflows across the window at T={temperature} K")
        planck = np.zeros_like(planck_raw)
        wien = np.zeros_like(wien_raw)
        rayleigh_jeans = np.full_like(rj_raw, RAYLEIGH_JEANS_CAP)

    peak = wien_displacement_law(temperature)

    logger.debug(
        f"Dataset generated: T={temperature} K, points={len(wavelengths)}, "
        f"max_planck={max_planck:.4e}, peak={peak:.2f} nm"
    )

    return Dataset(
        wavelengths=_frozen(wavelengths),
        planck=_frozen(planck),
        wien=_frozen(wien),
        rayleigh_jeans=_frozen(rayleigh_jeans),
        peak_wavelength=peak,
    )


def calculate_max_intensity(min_temp, max_temp):
    """
    计算温度范围内的最大归一化强度，作为稳定的 y 轴上限

    在 [min_temp, max_temp] 上均匀取 10 个温度，取归一化普朗克曲线的最大值并留 10% 余量。
    """
    for name, value in (("min_temp", min_temp), ("max_temp", max_temp)):
        if not isinstance(value, numbers.Real) or not math.isfinite(value) or value <= 0:
            raise PhysicsDomainError(f"{name} must be finite and > 0, got {value!r}")
    if min_temp >= max_temp:
        raise PhysicsDomainError(
            f"min_temp must be < max_temp, got {min_temp} >= {max_temp}"
        )

    max_intensity = 0.0
    for i in range(INTENSITY_TEMP_STEPS):
        temp = min_temp + i * (max_temp - min_temp) / (INTENSITY_TEMP_STEPS - 1)
        dataset = generate_dataset(temp)
        max_intensity = max(max_intensity, float(np.max(dataset.planck)))

    # 所有采样温度下曲线全暗时，以归一化峰值 1 为基准
    if max_intensity == 0:
        max_intensity = 1.0

    return max_intensity * INTENSITY_HEADROOM


def nearest_sample(dataset, wavelength_nm):
    """
    返回波长最接近 wavelength_nm 的采样点下标（距离相同时取较小下标）
    """
    distances = np.abs(dataset.wavelengths - wavelength_nm)
    return int(np.argmin(distances))
