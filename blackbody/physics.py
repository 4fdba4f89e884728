"""
黑体辐射物理计算
基于普朗克黑体辐射定律及其经典近似

所有辐射定律接受标量或 numpy 数组形式的波长(nm)，
标量输入返回 float，数组输入返回 np.ndarray。
"""

import math
from typing import NamedTuple

import numpy as np

from blackbody.constants import (
    BOLTZMANN_CONSTANT,
    COLOR_MAX_TEMP,
    COLOR_MIN_TEMP,
    PLANCK_CONSTANT,
    SPEED_OF_LIGHT,
    STEFAN_BOLTZMANN,
    WIEN_DISPLACEMENT,
)

h = PLANCK_CONSTANT
c = SPEED_OF_LIGHT
k = BOLTZMANN_CONSTANT

# 辐射常数
CONST_C1 = 2 * h * c ** 2
CONST_C2 = h * c / k
CONST_RJ = 2 * c * k


class PhysicsDomainError(ValueError):
    """输入超出物理意义的定义域（T <= 0、λ <= 0 等）"""


class Color(NamedTuple):
    r: int
    g: int
    b: int

    def to_css(self):
        return f'rgb({self.r}, {self.g}, {self.b})'

    def to_hex(self):
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


# ==================== 辅助函数 ====================
def nm_to_m(wavelength_nm):
    return wavelength_nm * 1e-9


def m_to_nm(wavelength_m):
    return wavelength_m * 1e9


def _require_positive(name, value):
    """
    校验输入为有限正数，返回 float64 数组
    """
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as exc:
        raise PhysicsDomainError(f"{name} must be numeric, got {value!r}") from exc
    if arr.size == 0:
        raise PhysicsDomainError(f"{name} must not be empty")
    if not np.all(np.isfinite(arr)):
        raise PhysicsDomainError(f"{name} must be finite, got {value!r}")
    if np.any(arr <= 0):
        raise PhysicsDomainError(f"{name} must be > 0, got {value!r}")
    return arr


def _unwrap(result):
    if np.ndim(result) == 0:
        return float(result)
    return result


# ==================== 辐射定律 ====================
def planck_law(wavelength_nm, temperature):
    """
    普朗克黑体辐射定律
    B(λ,T) = (2hc²/λ⁵) / (exp(hc/(λkT)) - 1)

    参数:
        wavelength_nm: 波长(nm)，标量或数组
        temperature: 温度(K)

    返回单位: W·sr⁻¹·m⁻³

    指数溢出时结果为 0（该波长/温度组合下没有辐射），不视为错误。
    """
    lam = nm_to_m(_require_positive("wavelength", wavelength_nm))
    T = float(_require_positive("temperature", temperature))

    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        # expm1 避免长波/高温时 exp(x) - 1 的相消误差
        denominator = np.expm1(CONST_C2 / (lam * T))
        B = (CONST_C1 / lam ** 5) / denominator
        B = np.where(np.isinf(denominator), 0.0, B)
    return _unwrap(B)


def wien_approximation(wavelength_nm, temperature):
    """
    维恩公式（短波长近似）
    B_W(λ,T) = (2hc²/λ⁵) · exp(-hc/(λkT))
    """
    lam = nm_to_m(_require_positive("wavelength", wavelength_nm))
    T = float(_require_positive("temperature", temperature))

    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        attenuation = np.exp(-CONST_C2 / (lam * T))
        B = (CONST_C1 / lam ** 5) * attenuation
        B = np.where(attenuation == 0, 0.0, B)
    return _unwrap(B)


def rayleigh_jeans_law(wavelength_nm, temperature):
    """
    瑞利-金斯公式（经典近似，长波长适用）
    B_RJ(λ,T) = 2ckT / λ⁴

    短波长处发散（紫外灾难），此处不做截断。
    """
    lam = nm_to_m(_require_positive("wavelength", wavelength_nm))
    T = float(_require_positive("temperature", temperature))

    with np.errstate(over='ignore', divide='ignore'):
        B = (CONST_RJ * T) / lam ** 4
    return _unwrap(B)


def wien_displacement_law(temperature):
    """
    维恩位移定律: λ_max * T = b
    返回峰值波长(nm)
    """
    T = float(_require_positive("temperature", temperature))
    lambda_max_m = WIEN_DISPLACEMENT / T
    return m_to_nm(lambda_max_m)


def stefan_boltzmann_law(temperature):
    """
    斯特藩-玻尔兹曼定律: I = σT⁴
    返回总辐射强度 (W/m²)
    """
    T = float(_require_positive("temperature", temperature))
    return STEFAN_BOLTZMANN * T ** 4


# ==================== 颜色 ====================
def _clip_channel(value):
    return min(max(value, 0.0), 255.0)


def round_half_up(value):
    return int(math.floor(value + 0.5))


def temperature_to_color(temperature):
    """
    将开尔文温度转换为RGB颜色
    经验分段拟合，不由普朗克定律推导

    温度先被限制在 [1000, 40000] K，再除以 100 作为拟合参数。
    """
    temp = float(temperature)
    if math.isnan(temp):
        raise PhysicsDomainError("temperature must not be NaN")

    temp = max(COLOR_MIN_TEMP, min(temp, COLOR_MAX_TEMP)) / 100.0

    if temp <= 66:
        r = 255.0
        g = 99.4708025861 * math.log(temp) - 161.1195681661
    else:
        r = _clip_channel(329.698727446 * ((temp - 60) ** -0.1332047592))
        g = 288.1221695283 * ((temp - 60) ** -0.0755148492)
    g = _clip_channel(g)

    if temp >= 66:
        b = 255.0
    elif temp <= 19:
        b = 0.0
    else:
        b = _clip_channel(138.5177312231 * math.log(temp - 10) - 305.0447927307)

    return Color(round_half_up(r), round_half_up(g), round_half_up(b))
