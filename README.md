# minirt

A small ray tracer. It reads a scene described in a `.rt` text file and
writes a 1080×680 image in plain-text PPM (`P3`) format next to it.

## Installation

```
pip install .
```

It has no dependencies outside the standard library.

## Usage

```
minirt scene.rt
```

This renders `scene.rt` into `scene.ppm`. The output name is the scene
path with its last two characters replaced by `ppm`. Add `--specular` to
turn on specular highlights:

```
minirt --specular scene.rt
```

The command exits with status 0 on success and 1 on any error. Errors are
written to standard error. Scene errors start with a line `Error` and a
short description, for example `Sorry, you forgot to add key elements!`.
The command refuses:

- a wrong number of arguments;
- a file name that does not end in `.rt`;
- a path longer than 62 characters. This gives exit status 1 but prints no message;
- a file that cannot be opened or does not parse;
- a scene with the camera inside a sphere or cylinder, or lying in a plane.

If the output file cannot be written, it prints `Failed to make output file! :c`.

## Scene files

Each line describes one element. Fields are separated by spaces. Vectors
and colours are triples separated by single commas. Spaces may appear around
the commas.

| Id   | Element       | Fields                                                              |
|------|---------------|---------------------------------------------------------------------|
| `A`  | ambient light | ratio `0.0–1.0`, colour `R,G,B`                                     |
| `C`  | camera        | position `x,y,z`, direction `x,y,z` (each in `[-1,1]`, not zero), FOV `0–180` |
| `L`  | light         | position `x,y,z`, brightness `0.0–1.0`, colour `R,G,B`              |
| `sp` | sphere        | centre `x,y,z`, diameter (> 0), colour `R,G,B`                      |
| `pl` | plane         | point `x,y,z`, normal `x,y,z` (each in `[-1,1]`, not zero), colour `R,G,B` |
| `cy` | cylinder      | centre `x,y,z`, axis `x,y,z` (each in `[-1,1]`, not zero), diameter (> 0), height (> 0), colour `R,G,B` |

Colour channels are whole numbers from 0 to 255. The field of view is a whole
number of degrees. A scene needs exactly one `A`, one `C` and one `L`. A
second one is reported as excess elements. It may hold any number of objects.
Blank lines are allowed. Any other unrecognised line is rejected as invalid input.

Example:

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,5 4 255,0,0
pl 0,-2,0 0,1,0 100,100,100
cy 3,0,6 0,1,0 1.5 3 0,128,255
```

## Library use

```python
from minirt.errors import SceneError
from minirt.parser import load_scene, output_path
from minirt.render import camera_inside, write_ppm

try:
    scene = load_scene("scene.rt")
except SceneError as err:
    print(err.kind, err.kind.message())
else:
    if not camera_inside(scene):
        write_ppm(scene, output_path("scene.rt"), specular_enabled=False)
```

The package has these modules:

- `minirt.parser`: `load_scene(path)` and `parse_lines(lines)` return a `Scene`. `SceneBuilder` accepts lines one at a time through `add_line` and produces the scene with `build`.
- `minirt.model`: the dataclasses `Scene`, `Camera`, `LightSource`, `AmbientLight`, `Sphere`, `Plane` and `Cylinder`, and `build_camera`.
- `minirt.render`:
  - `render(scene)` yields the image as rows of packed `0xAARRGGBB` integers, top to bottom.
  - `shade_pixel(scene, x, y)` returns the colour of a single pixel.
  - `closest_hit(scene, x, y)` returns the nearest object and its hit.
  - `write_ppm(scene, path)` writes the file.
- `minirt.errors`: `SceneError` has a `kind` attribute that holds an `ErrorKind`.
- `minirt.vectors`, `minirt.color`, `minirt.intersect`, `minirt.rays`, `minirt.shading`: vector and colour arithmetic, ray intersection and lighting.

## Limits

- The image size is fixed at 1080×680.
- There is a single point light.
- There is no on-screen preview. The only output is the PPM file.