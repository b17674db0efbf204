# flockmath

Small numeric building blocks and a boids flocking model in pure Python.
It has no dependencies outside the standard library.

## Modules

- `flockmath.numeric` holds the numeric helpers:
  - `is_power_of_two`, `get_power_of_two` and `compute_power_of_two`.
  - `are_equal`, which compares integers exactly and floats within a relative epsilon.
  - `modulo`, which gives a remainder with the dividend's sign.
  - `flip_map`, which swaps keys and values. When keys share a value, the smallest key is kept.
  - `map_to_reverse_pairs`.
  - `to_string_memory`, which formats byte counts such as `1.5KB`. It returns an empty string
    from 1024**6 bytes up.
  - `randf` and `randi` for random draws.
  - The constants `PI`, `ONE_DEG_IN_RAD`, `IDENTITY3` and `IDENTITY4`.
- `flockmath.vec` provides the vector classes `Vec`, `Vec2` and `Vec3`.
  - Element-wise `+ - * / %` work with vectors and scalars.
  - `|` and `dot` give the scalar product.
  - `norm`, `squared_norm`, `normalize`, `normalized` and `copy` are available on every vector.
  - Float equality is tolerant.
  - `<`, `<=`, `>` and `>=` return a tuple of booleans, one per component.
  - `Vec3` adds `x`/`y`/`z`, `set_value`, `cross` (also `^`) and `orthogonal_vec`.
- `flockmath.vecbool` provides `VecBool(size, value)`, a boolean vector of 1 to 64 bits.
  - It can be read as an integer with `to_int`.
  - It supports `any`, `all`, `none` and the in-place `complement`.
  - It has the operators `~ & | ^ << >>`.
  - `from_bools` builds one from a sequence.
- `flockmath.vector` provides `Vector`, a three-component float vector.
  - Its equality is within single-precision epsilon per component.
  - It has `norm`, `normalized` and `normalize`.
  - `zeros()` returns a new zero vector.
- `flockmath.matrix` holds helpers for flat, row-major 4x4 and 3x3 matrices:
  - `mult_mat4`, `scale_mat4`, `translate_mat4` and `set_offset_mat4`.
  - `transpose`, `mat3` and `get_column`.
  - `inverse_mat3` and `inverse_mat4`, which raise `SingularMatrixError` on a zero determinant.
  - Every function returns a new list.
- `flockmath.textures` holds the texture-unit bookkeeping:
  - `TextureParameter` holds a parameter name and a value of kind `ParamType` (`F`, `I`, `IV`, `FV`).
  - `TextureUnitManager(max_units)` hands out units with `request_textures`. Free units come
    first, then the least-used units from the sorted hit map.
  - `record_bind` records a bind. `is_bound` checks whether a texture is still bound.
  - `report` returns a text summary of hits.
- `flockmath.flock` provides `Agent`, `FlockOptions` and `Flock`.
  - `Flock` sets up the root rank's agents at random positions in the unit cube. The positions
    are reproducible with `seed`.
  - `mean_agent` returns an agent at the mean position.
  - `compute_and_apply_forces` applies separation, cohesion and alignment, with optional
    weighted mean agents. It then takes an Euler step with a speed limit and wraps positions
    into the periodic domain.
  - `save` writes XYZ frames to `boids_<rank>.xyz`. Step 0 truncates the file and later
    steps append.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from flockmath.vec import Vec3

a = Vec3(1.0, 2.0, 3.0)
b = Vec3(3.0, 2.0, 1.0)
assert a + b == Vec3() + 4.0
print(a.cross(b), a.dot(b), a.norm())
```

```python
from flockmath.flock import Flock, FlockOptions

flock = Flock(FlockOptions(n_agents=100), rank=0, root=0, seed=42)
for step in range(10):
    flock.compute_and_apply_forces([], [])
    flock.save(step, "data")   # writes data/boids_000.xyz
```

## What it does not do

- There is no command-line program. Everything is used as a library.
- `Flock` does not communicate between processes. Mean agents and their weights from other
  ranks must be passed to `compute_and_apply_forces` by the caller, and agents are not
  redistributed across domain boundaries.
- `TextureUnitManager` only keeps the accounts of texture units. It does not talk to a
  graphics API, load images or render anything.
- No table of OpenGL texture formats, types or their names is included.