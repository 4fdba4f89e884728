"""
黑体辐射仿真程序 (Streamlit版)
基于普朗克黑体辐射定律

运行: streamlit run Blackbody_Radiation.py
"""

import logging

import streamlit as st

from blackbody.constants import DEFAULT_T, MAX_T, MIN_T, PRESETS, T_STEP
from blackbody.dataset import calculate_max_intensity, generate_dataset
from blackbody.formatting import (
    format_power,
    format_temperature,
    format_wavelength,
    spectral_region,
)
from blackbody.logger_setup import setup_logging
from blackbody.physics import (
    PhysicsDomainError,
    stefan_boltzmann_law,
    temperature_to_color,
    wien_displacement_law,
)
from blackbody.plots import create_main_plot, create_star_visualization

logger = logging.getLogger("blackbody")

# ==================== 页面配置 ====================
st.set_page_config(
    page_title="Black Body Radiation Simulator",
    page_icon="🌟",
    layout="wide",
    initial_sidebar_state="expanded"
)

LIGHT_CSS = """
<style>
    .stApp { background-color: #ffffff; }
    .main h1, .main h2, .main h3, .main p, .main label { color: #0e1117 !important; }
</style>
"""

DARK_CSS = """
<style>
    .stApp { background-color: #000000; }
    .main h1, .main h2, .main h3, .main p, .main label { color: #ffffff !important; }

    /* 主内容区域的指标 */
    div[data-testid="stMetricValue"] {
        color: #FFD700;
    }
    div[data-testid="stMetricLabel"] {
        color: #ffffff !important;
    }
</style>
"""


# ==================== 缓存计算 ====================
@st.cache_resource
def init_logging():
    return setup_logging('config.json')


@st.cache_data
def cached_dataset(temperature):
    return generate_dataset(temperature)


@st.cache_data
def cached_max_intensity(min_temp, max_temp):
    return calculate_max_intensity(min_temp, max_temp)


# ==================== 温度状态 ====================
def _clamp_to_slider(temperature):
    return int(min(max(temperature, MIN_T), MAX_T))


def _on_slider_change():
    st.session_state.temperature = st.session_state.temp_slider
    logger.debug(f"Slider moved to {st.session_state.temperature} K")


def _on_preset(temperature):
    # 预设温度可以低于滑块下限（例如 2.7 K），滑块只显示限制后的位置
    st.session_state.temperature = temperature
    st.session_state.temp_slider = _clamp_to_slider(temperature)
    logger.info(f"Preset selected: {temperature} K")


def temperature_controls():
    if "temperature" not in st.session_state:
        st.session_state.temperature = DEFAULT_T
        st.session_state.temp_slider = DEFAULT_T

    st.markdown("## 🎛️ Temperature")
    st.slider(
        "Black body temperature (K)",
        min_value=MIN_T,
        max_value=MAX_T,
        step=T_STEP,
        key="temp_slider",
        on_change=_on_slider_change,
        help="Drag to adjust temperature"
    )
    st.markdown(f"**Current**: {format_temperature(st.session_state.temperature)}")

    st.markdown("### Presets")
    for preset in PRESETS:
        st.button(
            preset.name,
            help=f"{preset.description}: {format_temperature(preset.temperature)}",
            on_click=_on_preset,
            args=(preset.temperature,),
            use_container_width=True
        )

    return st.session_state.temperature


# ==================== 主界面 ====================
def main():
    init_logging()

    with st.sidebar:
        temperature = temperature_controls()

        st.markdown("---")
        st.markdown("### 📊 Display")
        show_wien = st.checkbox("Wien approximation", value=True)
        show_rj = st.checkbox("Rayleigh-Jeans law", value=True)
        show_spectrum = st.checkbox("Visible spectrum band", value=True)
        dark = st.toggle("Dark mode", value=True)

    st.markdown(DARK_CSS if dark else LIGHT_CSS, unsafe_allow_html=True)

    st.title("Black Body Radiation Simulator")
    st.caption("Interactive visualization of Planck's Law and related phenomena")

    try:
        dataset = cached_dataset(temperature)
        y_max = cached_max_intensity(float(MIN_T), float(MAX_T))
        peak_wavelength = wien_displacement_law(temperature)
        total_power = stefan_boltzmann_law(temperature)
        color = temperature_to_color(temperature)
    except PhysicsDomainError as exc:
        logger.error(f"Invalid temperature {temperature!r}: {exc}")
        st.error(f"Invalid input: {exc}")
        st.stop()

    col_visual, col_chart = st.columns([0.25, 0.75])

    with col_visual:
        star_fig = create_star_visualization(temperature, dark=dark)
        st.plotly_chart(star_fig, use_container_width=False, key="star_circle")

        st.markdown("### Key Values")
        st.metric("Peak Wavelength (Wien's Law)", format_wavelength(peak_wavelength),
                  spectral_region(peak_wavelength), delta_color="off")
        st.metric("Total Power (Stefan-Boltzmann)", format_power(total_power))
        st.metric("Color", color.to_hex())

    with col_chart:
        st.markdown("## 📈 Spectral Radiance")
        main_fig = create_main_plot(
            dataset, show_wien=show_wien, show_rj=show_rj,
            show_spectrum=show_spectrum, y_max=y_max, dark=dark
        )
        st.plotly_chart(main_fig, use_container_width=True, key="main_plot")

    with st.expander("📚 Physics Concepts", expanded=False):
        st.markdown(r"""
        ### Planck's Law

        $$
        B(\lambda, T) = \frac{2hc^2}{\lambda^5} \frac{1}{e^{\frac{hc}{\lambda k_B T}} - 1}
        $$

        ### Wien's Approximation (short wavelengths)

        $$
        B_W(\lambda, T) = \frac{2hc^2}{\lambda^5} e^{-\frac{hc}{\lambda k_B T}}
        $$

        ### Rayleigh-Jeans Law (long wavelengths)

        $$
        B_{RJ}(\lambda, T) = \frac{2 c k_B T}{\lambda^4}
        $$

        Diverges at short wavelengths: the ultraviolet catastrophe.

        ### Wien's Displacement Law

        $$
        \lambda_{max} = \frac{b}{T}, \quad b = 2.8977719 \times 10^{-3} \ \text{m·K}
        $$

        ### Stefan-Boltzmann Law

        $$
        P = \sigma T^4, \quad \sigma = 5.670374419 \times 10^{-8} \ \text{W/(m}^2\text{·K}^4\text{)}
        $$
        """)

    with st.expander("ℹ️ About", expanded=False):
        st.markdown("""
        A black body absorbs all incident electromagnetic radiation and re-emits
        thermal radiation determined solely by its temperature.

        - Use the slider to adjust the temperature between 100 K and 10,000 K
        - Click a preset to jump to the temperature of a common object
        - Curves are normalized to the peak of Planck's curve in the 100–3000 nm window
        - The Rayleigh-Jeans curve is capped at 5× the Planck peak
        """)


# ==================== 程序入口 ====================
if __name__ == "__main__":
    main()
