# isofdf

Building blocks for a small wireframe renderer that draws `.fdf` height maps.
Everything is pure Python with no dependencies, and nothing needs a display.

## Modules

- `isofdf.fdfmap` reads height maps. `check_format(name)` returns True when
  everything from the first dot of a file name is `.fdf`. `parse_map(lines)`
  and `load_map(path)` return a `HeightMap`: `rows[y][x]` holds the heights,
  and `width` and `height` give its size. A line holds integers separated by
  spaces and ends at a newline. A lone `-` reads as 0. The first line must not
  be empty and every line must hold as many values as the first. Anything else
  raises `MapError`, a `ValueError`. `count_values(line)` and
  `parse_line(line)` work on a single line.
- `isofdf.colors` looks up named colours. `color_by_name(name)` ignores case,
  so `"Sky Blue"`, `"gray50"` and `"navy blue"` all work. It returns
  `0xRRGGBB`, gives -1 for `"none"` and raises `KeyError` for unknown names.
  `COLOR_NAMES` is the read-only table behind it.
- `isofdf.visual` describes pixel formats. `Visual(depth, red_mask,
  green_mask, blue_mask)` converts a `0xRRGGBB` colour with `good_color`.
  Depths of 24 and above return the colour unchanged, and lower depths pack it
  into the channel masks. `mask_shifts(...)` returns the shift and bit width of
  each mask.
- `isofdf.image` holds pixels in memory. `Image(width, height,
  bits_per_pixel=32, byte_order=0)` is a zero-filled buffer with `set_pixel`,
  `get_pixel`, `size_line` (the row stride, padded to 32 bits) and
  `bytes_per_pixel`.
- `isofdf.xpm` decodes XPM pixmaps. `xpm_to_image(lines)` takes the quoted
  strings of an XPM image, and `xpm_file_to_image(path)` reads a file.
  `parse_xpm(lines)` returns rows of pixel values, and pixels coloured `None`
  get `TRANSPARENT`. The helpers `strip_comments`, `quoted_lines`,
  `color_key` and `text_rgb` are exposed as well. Malformed data raises
  `XpmError`.
- `isofdf.events` models window event hooks. A `HookTable` takes hooks through
  `hook`, `key_hook`, `mouse_hook` and `expose_hook`. `event_mask()` combines
  their `EventMask` bits, and `dispatch(event)` passes an `Event` to the
  matching hook. A close request (`CLIENT_MESSAGE` with `delete_window=True`)
  also runs the `DESTROY_NOTIFY` hook.
- `isofdf.wordtab` splits text on spaces and tabs with `split_words`, and
  searches it with `find`, or with `find_unquoted`, which skips anything
  inside double quotes.

## Example

```python
from isofdf.fdfmap import check_format, parse_map
from isofdf.colors import color_by_name
from isofdf.image import Image

assert check_format("pyramid.fdf")
heights = parse_map(["0 0 0", "0 5 0", "0 0 0"])
print(heights.width, heights.height, heights.rows[1][1])  # 3 3 5

image = Image(4, 4)
image.set_pixel(1, 2, color_by_name("Sky Blue"))
print(hex(image.get_pixel(1, 2)))  # 0x87ceeb
```

## What it does not do

The package does not open windows, run an event loop or talk to a display
server. Events are built by hand and passed to `HookTable.dispatch`. It does
not project a height map or draw lines, and there is no command-line program.
Rendering and display are left to the code that uses these pieces.

## Running the tests

```
pip install -e .[test]
pytest
```