"""Tests for log-spaced dataset generation and the y-axis ceiling."""

import dataclasses
import warnings

import numpy as np
import pytest
from scipy.optimize import minimize_scalar

import blackbody.dataset as dataset_module
from blackbody.dataset import (
    Dataset,
    calculate_max_intensity,
    generate_dataset,
    log_spaced_wavelengths,
    nearest_sample,
)
from blackbody.physics import PhysicsDomainError, planck_law, wien_displacement_law


SUN_T = 5778


def test_wavelengths_are_log_spaced_and_ascending() -> None:
    ds = generate_dataset(SUN_T)
    assert len(ds) == 500
    assert ds.wavelengths[0] == pytest.approx(100)
    assert ds.wavelengths[-1] == pytest.approx(3000)
    assert np.all(np.diff(ds.wavelengths) > 0)

    ratios = ds.wavelengths[1:] / ds.wavelengths[:-1]
    assert np.allclose(ratios, 30 ** (1 / 499))


@pytest.mark.parametrize("points", [2, 3, 50, 2000])
def test_sequences_have_requested_length(points) -> None:
    ds = generate_dataset(SUN_T, points)
    for series in (ds.wavelengths, ds.planck, ds.wien, ds.rayleigh_jeans):
        assert len(series) == points


def test_two_points_cover_window_edges() -> None:
    assert log_spaced_wavelengths(2) == pytest.approx([100, 3000])


@pytest.mark.parametrize("temperature", [300, 1000, 2700, SUN_T, 10000, 40000])
def test_normalization_invariants(temperature) -> None:
    ds = generate_dataset(temperature)
    assert np.max(ds.planck) == pytest.approx(1.0)
    assert np.all(ds.rayleigh_jeans <= 5)
    assert np.all(ds.wien <= ds.planck * (1 + 1e-12))
    for series in (ds.planck, ds.wien, ds.rayleigh_jeans):
        assert np.all(np.isfinite(series))
        assert np.all(series >= 0)


def test_normalization_anchor_is_planck_maximum() -> None:
    """Wien and Rayleigh-Jeans share the Planck maximum as divisor."""
    ds = generate_dataset(SUN_T)
    raw_max = np.max(planck_law(ds.wavelengths, SUN_T))
    assert ds.planck[100] == pytest.approx(planck_law(ds.wavelengths[100], SUN_T) / raw_max)


def test_rayleigh_jeans_is_capped_at_short_wavelengths() -> None:
    ds = generate_dataset(SUN_T)
    assert ds.rayleigh_jeans[0] == 5.0
    # 长波端未达上限，仍高于普朗克曲线
    assert ds.rayleigh_jeans[-1] < 5.0
    assert ds.rayleigh_jeans[-1] > ds.planck[-1]


def test_peak_wavelength_from_displacement_law() -> None:
    ds = generate_dataset(SUN_T)
    assert ds.peak_wavelength == wien_displacement_law(SUN_T)


def test_displacement_peak_matches_numerical_maximum() -> None:
    result = minimize_scalar(
        lambda lam: -planck_law(lam, SUN_T),
        bounds=(300, 800),
        method="bounded",
        options={"xatol": 1e-4},
    )
    assert result.x == pytest.approx(wien_displacement_law(SUN_T), abs=0.05)


def test_nearest_sample_to_peak() -> None:
    ds = generate_dataset(SUN_T)
    idx = nearest_sample(ds, ds.peak_wavelength)
    distances = np.abs(ds.wavelengths - ds.peak_wavelength)
    assert distances[idx] == distances.min()
    assert abs(idx - int(np.argmax(ds.planck))) <= 1
    assert ds.planck[idx] > 0.999


def test_nearest_sample_at_window_edges() -> None:
    ds = generate_dataset(SUN_T, 10)
    assert nearest_sample(ds, 1) == 0
    assert nearest_sample(ds, 1e6) == 9


def test_dataset_is_immutable() -> None:
    ds = generate_dataset(SUN_T)
    with pytest.raises(ValueError):
        ds.planck[0] = 2.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        ds.peak_wavelength = 1.0


def test_idempotent() -> None:
    first = generate_dataset(4321)
    second = generate_dataset(4321)
    assert np.array_equal(first.wavelengths, second.wavelengths)
    assert np.array_equal(first.planck, second.planck)
    assert np.array_equal(first.wien, second.wien)
    assert np.array_equal(first.rayleigh_jeans, second.rayleigh_jeans)
    assert first.peak_wavelength == second.peak_wavelength


def test_cosmic_background_is_dark_not_nan() -> None:
    """At 2.7 K every Planck sample in the window underflows to 0."""
    ds = generate_dataset(2.7)
    assert isinstance(ds, Dataset)
    assert np.all(ds.planck == 0)
    assert np.all(ds.wien == 0)
    assert np.all(ds.rayleigh_jeans == 5.0)
    assert ds.peak_wavelength == pytest.approx(1.0732e6, rel=1e-3)


@pytest.mark.parametrize(
    "temperature, points",
    [(-10, 500), (0, 500), (float("nan"), 500), (300, 1), (300, 0), (300, -5), (300, 2.5), (300, True)],
)
def test_invalid_arguments_fail(temperature, points) -> None:
    with pytest.raises(PhysicsDomainError):
        generate_dataset(temperature, points)


def test_numpy_integer_points_accepted() -> None:
    assert len(generate_dataset(SUN_T, np.int64(20))) == 20


def test_max_intensity_has_headroom() -> None:
    assert calculate_max_intensity(100, 10000) == pytest.approx(1.1)


def test_max_intensity_samples_ten_temperatures(monkeypatch) -> None:
    seen = []
    original = dataset_module.generate_dataset

    def spy(temperature, *args, **kwargs):
        seen.append(temperature)
        return original(temperature, *args, **kwargs)

    monkeypatch.setattr(dataset_module, "generate_dataset", spy)
    calculate_max_intensity(100, 10000)
    assert seen == pytest.approx([100 + 1100 * i for i in range(10)])


@pytest.mark.parametrize(
    "min_temp, max_temp",
    [(5000, 100), (100, 100), (0, 100), (-1, 100), (100, float("inf")), (float("nan"), 100)],
)
def test_max_intensity_invalid_range(min_temp, max_temp) -> None:
    with pytest.raises(PhysicsDomainError):
        calculate_max_intensity(min_temp, max_temp)


def test_extreme_temperature_dataset_has_no_nan() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        ds = generate_dataset(1e20)
    for series in (ds.planck, ds.wien, ds.rayleigh_jeans):
        assert np.all(np.isfinite(series))
    assert np.max(ds.planck) == pytest.approx(1.0)
    assert np.all(ds.rayleigh_jeans <= 5)


def test_radiance_overflow_fails_instead_of_nan() -> None:
    with pytest.raises(PhysicsDomainError):
        generate_dataset(1e300)


def test_max_intensity_for_all_dark_range() -> None:
    """Between 1 and 4 K every curve underflows; the ceiling stays usable."""
    assert calculate_max_intensity(1, 4) == pytest.approx(1.1)
