# constants.py

"""
物理常量与应用常量

物理常量取自 scipy.constants（2019 SI 定义值，与文献字面值逐位一致）。
维恩位移常数使用固定字面值 2.8977719e-3 m·K，不使用 scipy.constants.Wien。
"""

from typing import NamedTuple

import scipy.constants as const

# ==================== 物理常量 ====================
SPEED_OF_LIGHT = const.c  # 光速: 299792458 m/s
PLANCK_CONSTANT = const.h  # 普朗克常数: 6.62607015e-34 J·s
BOLTZMANN_CONSTANT = const.k  # 玻尔兹曼常数: 1.380649e-23 J/K
STEFAN_BOLTZMANN = const.sigma  # 斯特藩-玻尔兹曼常数: 5.670374419e-8 W/(m²·K⁴)
WIEN_DISPLACEMENT = 2.8977719e-3  # 维恩位移常数: m·K

# ==================== 采样窗口 ====================
MIN_WAVELENGTH_NM = 100.0
MAX_WAVELENGTH_NM = 3000.0
DEFAULT_POINTS = 500

# 瑞利-金斯曲线归一化后的显示上限
RAYLEIGH_JEANS_CAP = 5.0

# y 轴上限的余量
INTENSITY_HEADROOM = 1.1
INTENSITY_TEMP_STEPS = 10

# ==================== 颜色拟合 ====================
COLOR_MIN_TEMP = 1000.0  # K
COLOR_MAX_TEMP = 40000.0  # K

# ==================== 界面 ====================
MIN_T = 100
MAX_T = 10000
DEFAULT_T = 6000  # 接近太阳表面温度
T_STEP = 10

# 可见光范围 (nm)
VISIBLE_MIN_NM = 380.0
VISIBLE_MAX_NM = 780.0


class Preset(NamedTuple):
    name: str
    temperature: float  # K
    description: str


PRESETS = (
    Preset("Cosmic Background", 2.7, "Cosmic Microwave Background"),
    Preset("Liquid Nitrogen", 77, "Temperature of liquid nitrogen"),
    Preset("Room Temp", 300, "Average room temperature"),
    Preset("Incandescent Bulb", 2700, "Typical light bulb filament"),
    Preset("Sun's Surface", 5778, "Temperature of the sun's photosphere"),
    Preset("Blue Star", 10000, "Hot O-type star"),
)
