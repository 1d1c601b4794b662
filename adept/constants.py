"""Physical constants expressed in the internal system of units."""

from adept.units import (
    MeV,
    PI,
    TWO_PI,
    atmosphere,
    cm3,
    eplus,
    g,
    henry,
    joule,
    kelvin,
    m,
    mg,
    mole,
    s,
)

AVOGADRO = 6.02214076e23 / mole

C_LIGHT = 2.99792458e8 * m / s
C_LIGHT_SQUARE = C_LIGHT * C_LIGHT

H_PLANCK = 6.62607015e-34 * joule * s
H_BAR_PLANCK = H_PLANCK / TWO_PI
H_BAR_PLANCK_C_LIGHT = H_BAR_PLANCK * C_LIGHT
H_BAR_PLANCK_C_LIGHT_SQUARE = H_BAR_PLANCK_C_LIGHT * H_BAR_PLANCK_C_LIGHT

ELECTRON_CHARGE = -eplus
UNIT_CHARGE_SQUARE = eplus * eplus

ELECTRON_MASS_C2 = 0.510998910 * MeV
INV_ELECTRON_MASS_C2 = 1.0 / ELECTRON_MASS_C2
PROTON_MASS_C2 = 938.272013 * MeV
NEUTRON_MASS_C2 = 939.56536 * MeV
ATOMIC_MASS_UNIT_C2 = 931.494028 * MeV
ATOMIC_MASS_UNIT = ATOMIC_MASS_UNIT_C2 / C_LIGHT_SQUARE

MU0 = 4 * PI * 1.0e-7 * henry / m
EPSILON0 = 1.0 / (C_LIGHT_SQUARE * MU0)

EM_COUPLING = UNIT_CHARGE_SQUARE / (4 * PI * EPSILON0)
FINE_STRUCT_CONST = EM_COUPLING / H_BAR_PLANCK_C_LIGHT
CLASSIC_ELECTRON_RADIUS = EM_COUPLING / ELECTRON_MASS_C2
RED_ELECTRON_COMPTON_WAVELENGTH = H_BAR_PLANCK_C_LIGHT / ELECTRON_MASS_C2
BOHR_RADIUS = RED_ELECTRON_COMPTON_WAVELENGTH / FINE_STRUCT_CONST

BOLTZMANN = 8.617333e-11 * MeV / kelvin

STP_TEMPERATURE = 273.15 * kelvin
NTP_TEMPERATURE = 293.15 * kelvin
STP_PRESSURE = 1.0 * atmosphere
GAS_THRESHOLD = 10.0 * mg / cm3

UNIVERSE_MEAN_DENSITY = 1.0e-25 * g / cm3