"""
Plotly 绘图函数
"""

import math

import numpy as np
import plotly.graph_objects as go

from blackbody.constants import (
    MAX_WAVELENGTH_NM,
    MIN_WAVELENGTH_NM,
    VISIBLE_MAX_NM,
    VISIBLE_MIN_NM,
)
from blackbody.dataset import nearest_sample
from blackbody.formatting import format_power, format_temperature, format_wavelength
from blackbody.physics import Color, stefan_boltzmann_law, temperature_to_color

PLANCK_COLOR = '#8B5CF6'
WIEN_COLOR = '#F97316'
RAYLEIGH_COLOR = '#0EA5E9'
PEAK_COLOR = '#FFCC00'


def wavelength_to_rgb(wavelength_nm):
    """
    将可见光波长(nm)近似转换为颜色，可见光范围外为黑色
    """
    w = float(wavelength_nm)
    if w < 380 or w > 780:
        r, g, b = 0.0, 0.0, 0.0
    elif w < 440:
        r, g, b = (440 - w) / 60, 0.0, 1.0
    elif w < 490:
        r, g, b = 0.0, (w - 440) / 50, 1.0
    elif w < 510:
        r, g, b = 0.0, 1.0, (510 - w) / 20
    elif w < 580:
        r, g, b = (w - 510) / 70, 1.0, 0.0
    elif w < 645:
        r, g, b = 1.0, (645 - w) / 65, 0.0
    else:
        r, g, b = 1.0, 0.0, 0.0

    channels = np.clip([r, g, b], 0, 1)
    return Color(*(int(v * 255) for v in channels))


def create_main_plot(dataset, show_wien=True, show_rj=True, show_spectrum=True,
                     y_max=1.1, dark=True):
    """
    创建辐射曲线图（对数波长轴，归一化强度）

    参数:
        dataset: generate_dataset 的结果
        y_max: y 轴上限，通常取 calculate_max_intensity 的结果
    """
    fg = 'white' if dark else 'black'
    bg = 'black' if dark else 'white'

    fig = go.Figure()

    # 可见光彩色光谱带
    if show_spectrum:
        band_edges = np.linspace(VISIBLE_MIN_NM, VISIBLE_MAX_NM, 41)
        for i in range(len(band_edges) - 1):
            fig.add_shape(
                type="rect",
                x0=band_edges[i],
                x1=band_edges[i + 1],
                y0=0,
                y1=y_max,
                fillcolor=wavelength_to_rgb(band_edges[i]).to_css(),
                opacity=0.15,
                layer="below",
                line_width=0
            )

    # 峰值附近高亮区域
    peak = dataset.peak_wavelength
    fig.add_shape(
        type="rect",
        x0=peak * 0.8, x1=peak * 1.2,
        y0=0, y1=y_max,
        fillcolor=PEAK_COLOR,
        opacity=0.1,
        layer="below",
        line_width=0
    )
    fig.add_shape(
        type="line",
        x0=peak, x1=peak,
        y0=0, y1=y_max,
        line=dict(color=PEAK_COLOR, width=2, dash="dash")
    )

    if show_rj:
        fig.add_trace(go.Scatter(
            x=dataset.wavelengths,
            y=dataset.rayleigh_jeans,
            mode='lines',
            name='Rayleigh-Jeans',
            line=dict(color=RAYLEIGH_COLOR, width=2, dash='dash'),
            hovertemplate='λ: %{x:.0f} nm<br>B: %{y:.2f}<extra></extra>'
        ))

    if show_wien:
        fig.add_trace(go.Scatter(
            x=dataset.wavelengths,
            y=dataset.wien,
            mode='lines',
            name='Wien',
            line=dict(color=WIEN_COLOR, width=2, dash='dash'),
            hovertemplate='λ: %{x:.0f} nm<br>B: %{y:.2f}<extra></extra>'
        ))

    # 普朗克曲线（主曲线）
    fig.add_trace(go.Scatter(
        x=dataset.wavelengths,
        y=dataset.planck,
        mode='lines',
        name='Planck',
        line=dict(color=PLANCK_COLOR, width=4),
        hovertemplate='λ: %{x:.0f} nm<br>B: %{y:.2f}<extra></extra>'
    ))

    # 标记最接近峰值的采样点（峰值在窗口外时不标记）
    if MIN_WAVELENGTH_NM <= peak <= MAX_WAVELENGTH_NM:
        idx = nearest_sample(dataset, peak)
        fig.add_trace(go.Scatter(
            x=[dataset.wavelengths[idx]],
            y=[dataset.planck[idx]],
            mode='markers',
            name='Peak',
            marker=dict(size=12, color=PEAK_COLOR, symbol='circle'),
            hovertemplate=f'Peak: {format_wavelength(peak)}<extra></extra>'
        ))

    fig.update_layout(
        plot_bgcolor=bg,
        paper_bgcolor=bg,
        font=dict(color=fg, size=14),
        title=dict(text=f'Peak: {format_wavelength(peak)}', font=dict(color=PEAK_COLOR)),
        xaxis=dict(
            title=dict(text='Wavelength (nm)'),
            type='log',
            range=[math.log10(MIN_WAVELENGTH_NM), math.log10(MAX_WAVELENGTH_NM)],
            gridcolor='rgba(128,128,128,0.2)',
            showgrid=True,
            zeroline=False
        ),
        yaxis=dict(
            title=dict(text='Relative Spectral Radiance'),
            range=[0, y_max],
            gridcolor='rgba(128,128,128,0.2)',
            showgrid=True,
            zeroline=False
        ),
        hovermode='closest',
        height=450,
        margin=dict(l=60, r=30, t=50, b=60),
        legend=dict(
            x=0.75, y=0.98,
            bgcolor='rgba(0,0,0,0.3)' if dark else 'rgba(255,255,255,0.7)',
            borderwidth=1
        )
    )

    return fig


def create_star_visualization(temperature, dark=True):
    """
    创建发光的圆形色块（颜色来自温度，大小随辐射功率变化）
    """
    color = temperature_to_color(temperature)
    total_power = stefan_boltzmann_law(temperature)

    # 归一化：以太阳表面温度的功率为基准
    reference_power = stefan_boltzmann_law(5778)
    power_ratio = total_power / reference_power

    # 半径范围：0.5 到 2.0
    radius = 0.5 + 1.5 * min(power_ratio / 10, 1.0)

    theta = np.linspace(0, 2 * np.pi, 100)
    bg = 'black' if dark else 'white'

    fig = go.Figure()

    # 外层光晕，由外向内逐渐变亮
    for scale, alpha in ((1.6, 0.08), (1.35, 0.15), (1.15, 0.3)):
        fig.add_trace(go.Scatter(
            x=radius * scale * np.cos(theta),
            y=radius * scale * np.sin(theta),
            fill='toself',
            fillcolor=f'rgba({color.r}, {color.g}, {color.b}, {alpha})',
            line=dict(width=0),
            mode='lines',
            hoverinfo='skip',
            showlegend=False
        ))

    fig.add_trace(go.Scatter(
        x=radius * np.cos(theta),
        y=radius * np.sin(theta),
        fill='toself',
        fillcolor=color.to_css(),
        line=dict(color=color.to_css(), width=2),
        mode='lines',
        hoverinfo='text',
        hovertext=f'{format_temperature(temperature)}<br>{format_power(total_power)}',
        showlegend=False
    ))

    fig.update_layout(
        plot_bgcolor=bg,
        paper_bgcolor=bg,
        xaxis=dict(visible=False, range=[-3.5, 3.5]),
        yaxis=dict(visible=False, range=[-3.5, 3.5], scaleanchor="x", scaleratio=1),
        width=240,
        height=240,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False
    )

    return fig
