# adept

Building blocks for electromagnetic particle-transport simulations, written in plain Python with no dependencies outside the standard library.

## Modules

- `adept.units`: a system of units. The base units are the millimetre, the nanosecond, the MeV and the positron charge. Quantities are written as `10 * cm`, and dividing by a unit expresses a value in that unit.
- `adept.constants`: physical constants in those units, for example `C_LIGHT`, `ELECTRON_MASS_C2`, `FINE_STRUCT_CONST` and `BOHR_RADIUS`.
- `adept.backend`: the `BackendType` enumeration (`CPU`, `CUDA`, `HIP`). `backend_name()` returns `"BackendType::CPU"` and so on, or `"Unknown backend"`.
- `adept.ranlux_math`: arithmetic on 576-bit numbers modulo `2**576 - 2**240 + 1`. The numbers are given as lists of nine 64-bit words, least significant first. The functions are `multiply9x9`, `mod_m`, `mulmod`, `powermod`, `compute_r`, `to_lcg` and `to_ranlux`.
- `adept.ranluxpp`: the RANLUX++ generator.
  - `RanluxppEngine(width, seed)` returns `width` random bits per draw.
  - `RanluxppDouble(seed)` returns doubles with 48 random bits through `rndm()` or by calling it. It also has `int_rndm()`, `int_rndm64()`, `skip(n)`, `branch()` and `branch_no_advance()`.
- `adept.benchmarking`:
  - `BenchmarkManager` holds named timers and accumulators and writes them to CSV with `export_csv()`.
  - `BenchmarkStore.get_instance()` is a process-wide store of snapshots, taken with `record_state()`.
- `adept.nvtx`: `NVTXTracer` records named, coloured time ranges as `TraceRange` entries in its `ranges` list. `set_occupancy()` tags phases as rising, peak or falling occupancy. The tracer can be used as a context manager.
- `adept.geometry`: a volume tree built from `LogicalVolume`, `PhysicalVolume` and `AuxiliaryInfo`. `find_sensitive_volumes()` walks the tree and returns a `ScoringLayout` holding the sensitive volumes and the number of touchables it visited. A volume is sensitive when it has a `SensDet` auxiliary entry, or always when `all_sensitive=True`.
- `adept.hits`: `SimpleHit` and `SensitiveDetector`. The detector scores energy deposits with one hit per sensitive placement, keeping the earliest time of each hit.

## Installation

```
pip install .
```

## Examples

Draw random numbers:

```python
from adept.ranluxpp import RanluxppDouble

rng = RanluxppDouble(42)
x = rng.rndm()        # float in [0, 1)
child = rng.branch()  # independent stream
rng.skip(1000)        # jump ahead without generating
```

Use units:

```python
from adept import units

energy = 10 * units.GeV
print(energy / units.MeV)   # 10000.0
```

Time work and accumulate values, then export them:

```python
from adept.benchmarking import BenchmarkManager

manager = BenchmarkManager()
manager.timer_start("transport")
# ... work ...
manager.timer_stop("transport")
manager.add_to_accumulator("tracks", 128)
manager.export_csv(overwrite=True)   # writes benchmark/benchmark.csv
```

Find sensitive volumes and score deposits:

```python
from adept.geometry import AuxiliaryInfo, LogicalVolume, PhysicalVolume, find_sensitive_volumes
from adept.hits import SensitiveDetector
from adept.units import MeV

layer = LogicalVolume("layer", auxiliary=[AuxiliaryInfo("SensDet")])
first = PhysicalVolume("layer_1", layer)
second = PhysicalVolume("layer_2", layer)
world = PhysicalVolume("world", LogicalVolume("world", daughters=[first, second]))

layout = find_sensitive_volumes(world)   # 3 touchables, 2 of them sensitive
detector = SensitiveDetector.from_layout("calo", layout)
hits = detector.initialize()
detector.process_hits(5 * MeV, second, global_time=1.0)
print(hits[1].edep)   # 5.0
```

## What it does not do

The package has no command-line program, and it does not transport particles. It does not read geometry files: volume trees are built in code. Hits stay in memory and are neither summarised per event nor written out. `NVTXTracer` keeps its ranges in memory and does not report them to an external profiler.

## Running the tests

```
pip install .[test]
pytest
```