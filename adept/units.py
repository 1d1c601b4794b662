"""System of units.

The base units are the millimetre, the nanosecond, the mega electron volt,
the positron charge, the kelvin, the mole, the candela and the radian.
A quantity is written as a number times a unit, for example ``10 * cm``.
Dividing by a unit expresses it in that unit.
"""

# Pi is needed for the degree, so it is defined here.
PI = 3.14159265358979323846
TWO_PI = 2.0 * PI
HALF_PI = PI / 2.0
PI_SQUARED = PI * PI

# Length [L]
millimeter = 1.0
millimeter2 = millimeter * millimeter
millimeter3 = millimeter * millimeter * millimeter

centimeter = 10.0 * millimeter
centimeter2 = centimeter * centimeter
centimeter3 = centimeter * centimeter * centimeter

meter = 1000.0 * millimeter
meter2 = meter * meter
meter3 = meter * meter * meter

kilometer = 1000.0 * meter
kilometer2 = kilometer * kilometer
kilometer3 = kilometer * kilometer * kilometer

parsec = 3.0856775807e16 * meter

micrometer = 1.0e-6 * meter
nanometer = 1.0e-9 * meter
angstrom = 1.0e-10 * meter
fermi = 1.0e-15 * meter

barn = 1.0e-28 * meter2
millibarn = 1.0e-3 * barn
microbarn = 1.0e-6 * barn
nanobarn = 1.0e-9 * barn
picobarn = 1.0e-12 * barn

nm = nanometer
um = micrometer

mm = millimeter
mm2 = millimeter2
mm3 = millimeter3

cm = centimeter
cm2 = centimeter2
cm3 = centimeter3

liter = 1.0e3 * cm3
L = liter
dL = 1.0e-1 * liter
cL = 1.0e-2 * liter
mL = 1.0e-3 * liter

m = meter
m2 = meter2
m3 = meter3

km = kilometer
km2 = kilometer2
km3 = kilometer3

pc = parsec

# Angle
radian = 1.0
milliradian = 1.0e-3 * radian
degree = (PI / 180.0) * radian

steradian = 1.0

rad = radian
mrad = milliradian
sr = steradian
deg = degree

# Time [T]
nanosecond = 1.0
second = 1.0e9 * nanosecond
millisecond = 1.0e-3 * second
microsecond = 1.0e-6 * second
picosecond = 1.0e-12 * second

hertz = 1.0 / second
kilohertz = 1.0e3 * hertz
megahertz = 1.0e6 * hertz

s = second
ms = millisecond
ns = nanosecond

# Electric charge [Q]
eplus = 1.0
e_SI = 1.602176634e-19  # positron charge in coulomb
coulomb = eplus / e_SI

# Energy [E]
megaelectronvolt = 1.0
electronvolt = 1.0e-6 * megaelectronvolt
kiloelectronvolt = 1.0e-3 * megaelectronvolt
gigaelectronvolt = 1.0e3 * megaelectronvolt
teraelectronvolt = 1.0e6 * megaelectronvolt
petaelectronvolt = 1.0e9 * megaelectronvolt

joule = electronvolt / e_SI

eV = electronvolt
keV = kiloelectronvolt
MeV = megaelectronvolt
GeV = gigaelectronvolt
TeV = teraelectronvolt
PeV = petaelectronvolt

# Mass [E][T^2][L^-2]
kilogram = joule * second * second / (meter * meter)
gram = 1.0e-3 * kilogram
milligram = 1.0e-3 * gram

kg = kilogram
g = gram
mg = milligram

# Power [E][T^-1]
watt = joule / second

# Force [E][L^-1]
newton = joule / meter

# Pressure [E][L^-3]
pascal = newton / m2
bar = 1.0e5 * pascal
atmosphere = 101325 * pascal

# Electric current [Q][T^-1]
ampere = coulomb / second
milliampere = 1.0e-3 * ampere
microampere = 1.0e-6 * ampere
nanoampere = 1.0e-9 * ampere

# Electric potential [E][Q^-1]
megavolt = megaelectronvolt / eplus
gigavolt = 1.0e3 * megavolt
kilovolt = 1.0e-3 * megavolt
volt = 1.0e-6 * megavolt

# Electric resistance [E][T][Q^-2]
ohm = volt / ampere

# Electric capacitance [Q^2][E^-1]
farad = coulomb / volt
millifarad = 1.0e-3 * farad
microfarad = 1.0e-6 * farad
nanofarad = 1.0e-9 * farad
picofarad = 1.0e-12 * farad

# Magnetic flux [T][E][Q^-1]
weber = volt * second

# Magnetic field [T][E][Q^-1][L^-2]
tesla = volt * second / meter2

gauss = 1.0e-4 * tesla
kilogauss = 1.0e-1 * tesla

# Inductance [T^2][E][Q^-2]
henry = weber / ampere

# Temperature
kelvin = 1.0

# Amount of substance
mole = 1.0

# Activity [T^-1]
becquerel = 1.0 / second
curie = 3.7e10 * becquerel
kilobecquerel = 1.0e3 * becquerel
megabecquerel = 1.0e6 * becquerel
gigabecquerel = 1.0e9 * becquerel
millicurie = 1.0e-3 * curie
microcurie = 1.0e-6 * curie

Bq = becquerel
kBq = kilobecquerel
MBq = megabecquerel
GBq = gigabecquerel
Ci = curie
mCi = millicurie
uCi = microcurie

# Absorbed dose [L^2][T^-2]
gray = joule / kilogram
kilogray = 1.0e3 * gray
milligray = 1.0e-3 * gray
microgray = 1.0e-6 * gray

# Luminous intensity [I]
candela = 1.0

# Luminous flux [I]
lumen = candela * steradian

# Illuminance [I][L^-2]
lux = lumen / meter2

# Miscellaneous
perCent = 0.01
perThousand = 0.001
perMillion = 0.000001