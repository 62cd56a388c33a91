# predefinfo

`predefinfo` works out what a C or C++ toolchain is targeting by looking
at the macros its preprocessor predefines. Give it the set of macro
definitions and it tells you which compiler, language standard, C and
C++ standard library, operating system, platform and architecture they
describe, each with a version number where one can be recovered.

## Version numbers

Every detection is expressed as a single integer that packs a
`major.minor.patch` triplet, so versions compare with the ordinary
integer operators:

```python
from predefinfo.version_number import (
    version_number, version_major, version_minor, version_patch, format_version,
)

v = version_number(4, 9, 2)
assert version_major(v) == 4
assert version_minor(v) == 9
assert version_patch(v) == 2
assert format_version(v) == "4.9.2"
```

A value of zero (`VERSION_NUMBER_NOT_AVAILABLE`) means "not detected";
the smallest non-zero value (`VERSION_NUMBER_AVAILABLE`) means "detected,
version unknown". Major and minor are kept in the range 0-99 and patch in
0-99999; larger values wrap around.

Vendor macros come in many encodings. `predefinfo.make` has one decoder
for each common layout, named after the digits it reads (`V` version,
`R` revision, `P` patch, `0` ignored), in hexadecimal (`make_0x_*`) or
decimal (`make_10_*`), plus date decoders counted in years from 1970
(`make_date`, `make_yyyymmdd`, `make_yyyymm`, `make_yyyy`):

```python
from predefinfo.make import make_0x_vvrp, make_10_vrp, make_yyyymmdd
from predefinfo.version_number import version_number

assert make_10_vrp(999) == version_number(9, 9, 9)
assert make_0x_vvrp(0xFFFF) == version_number(0xFF, 0xF, 0xF)
assert make_yyyymmdd(19710101) == version_number(1, 1, 1)
```

## Macro definitions

`predefinfo.detection.Defines` is a read-only mapping of macro names to
their replacement text. It can be built from a mapping, or from an
iterable of bare names, each of which is then defined to `1`.
`parse_defines` reads `#define NAME VALUE` lines, the form a preprocessor
prints when asked to dump its predefined macros; function-like macros are
skipped and `#undef` removes an earlier name.

```python
from predefinfo.detection import Defines, parse_defines

defines = parse_defines("""
#define __GNUC__ 12
#define __GNUC_MINOR__ 2
#define __GNUC_PATCHLEVEL__ 0
#define __linux__ 1
""")
assert defines.is_defined("__linux__")
assert defines.value("__GNUC__", 0) == 12

flags = Defines(["__riscv", "unix"])
assert flags.any_defined("__riscv", "__mips__")
```

## Detections

Every detector returns a `Detection` with a `symbol`, a `description`, a
packed `value` and an `emulated` value. `detected()` is true when the
value is non-zero, and `version()` gives the `(major, minor, patch)`
triplet.

```python
from predefinfo.compiler_legacy import detect_compilers
from predefinfo.os import detect_operating_systems
from predefinfo.version_number import format_version

for detection in detect_compilers(defines) + detect_operating_systems(defines):
    if detection.detected():
        print(detection.description, format_version(detection.value))
```

The detectors by area:

- `predefinfo.compiler`: GCC, LLVM, Microsoft Visual C/C++, NVCC, IBM XL,
  EDG, HP aC++ and Borland. `detect_msvc` raises `CompilerVersionError`
  when the build number cannot be taken from `_MSC_FULL_VER`.
- `predefinfo.compiler_legacy`: Comeau, Diab, Digital Mars, Kai,
  Metrowerks CodeWarrior, SGI MIPSpro and TenDRA, and `detect_compilers`
  for the whole list.
- `predefinfo.language`: standard C++, C++/CLI, Embedded C++ and CUDA;
  `detect_languages` for all of them.
- `predefinfo.libc`: GNU glibc and VMS libc.
- `predefinfo.library`: libc++, Comeau, Metrowerks, Roguewave, GNU
  libstdc++ and IBM VACPP; `detect_libraries` for all of them.
- `predefinfo.os` and `predefinfo.bsd`: Cygwin, Haiku, HP-UX, iOS, IRIX,
  Linux, OS/400, QNX, BSDi, DragonFly BSD and NetBSD, plus the Unix and
  SVR4 environments; `detect_operating_systems` for all of them.
- `predefinfo.platform`: CloudABI, MinGW and MinGW-w64;
  `detect_platforms` for all of them.
- `predefinfo.architecture` and `predefinfo.machine`: DEC Alpha,
  Blackfin, Convex, E2K, LoongArch, MIPS, PowerPC, PowerPC64, RISC-V,
  SPARC, System/370, System/390 and 32-bit x86;
  `detect_architectures` for all of them, and `word_bits` for the word
  sizes the detected architectures flag.

Compilers and platforms follow a precedence rule: the first one found is
reported in `value`, and any found after it only in `emulated` (NVCC is
always reported directly). Among operating systems only the first one
found is detected; the Unix and SVR4 environments are detected on their
own.

## What it does not do

The package is a library only: it has no command-line program and no
combined report of all detections, and it has no function for checking a
detection against a required version. It does not detect byte order or
SIMD instruction set extensions, and it has no detectors for ARM, 64-bit
x86, Windows or macOS.

## Running the tests

```
pip install -e .[test]
pytest
```