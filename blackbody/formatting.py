"""
数值显示格式化
"""

import numpy as np

from blackbody.constants import VISIBLE_MAX_NM, VISIBLE_MIN_NM
from blackbody.physics import round_half_up


def format_scientific(value):
    """
    格式化科学计数法显示
    """
    if value == 0:
        return "0"
    exponent = int(np.floor(np.log10(abs(value))))
    base = value / (10 ** exponent)
    return f"{base:.2f} × 10^{exponent}"


def format_wavelength(value_nm, decimals=2):
    """
    波长显示：小于 1000 nm 显示为整数 nm，否则换算为 μm
    """
    if value_nm < 1000:
        return f"{round_half_up(value_nm)} nm"
    return f"{value_nm / 1000:.{decimals}f} μm"


def format_power(power):
    """
    总辐射功率显示 (W/m²)
    """
    if power < 1000:
        return f"{power:.2f} W/m²"
    return f"{format_scientific(power)} W/m²"


def format_temperature(temperature):
    if float(temperature).is_integer():
        return f"{int(temperature):,} K"
    return f"{temperature:,} K"


def spectral_region(peak_wavelength_nm):
    """
    判断峰值波长所在的光谱区域
    """
    if peak_wavelength_nm < VISIBLE_MIN_NM:
        return "Ultraviolet"
    elif peak_wavelength_nm <= VISIBLE_MAX_NM:
        return "Visible"
    else:
        return "Infrared"
