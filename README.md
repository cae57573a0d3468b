# boardview

This package holds the non-graphical core of a viewer for printed circuit board layouts. It
is a plain library with no dependencies beyond the standard library. The caller supplies
settings as flat mappings from keys to strings. Keyboard state and loaded textures also
come from the caller.

## Modules

- `boardview.searcher`: `Searcher` searches parts and nets by name and ignores case.
  - Items need a `name` attribute.
  - `SearchMode.SUB`, `SearchMode.PREFIX` and `SearchMode.WHOLE` choose how a name must match.
  - `parts(search, limit)` and `nets(search, limit)` return the matches in order. A limit of -1 means no limit.
  - When `search_details` is set, the strings returned by an item's `searchable_string_details()` are searched too.
- `boardview.spelling`: `SpellCorrector` suggests dictionary words for a mistyped word.
  - Suggestions are ranked by a bounded edit distance, `levenshtein_distance(s1, s2, limit)`.
  - Only words within the threshold are returned. The default threshold is 3.
- `boardview.config`: `Config` holds the program preferences.
  - `read_from_config(values)` fills them from a mapping, with defaults and range limits.
  - `write_to_config(values)` stores them in a mapping.
  - `set_fz_key(keytext)` decodes the 44-word FZ key.
  - The helpers `parse_str`, `parse_int`, `parse_float`, `parse_bool` and `parse_hex` read single values with a fallback.
- `boardview.dpi`: a process-wide DPI percentage, set with `set_dpi` and read with `get_dpi`. `dpi(x)` and `dpif(x)` scale sizes by it.
- `boardview.colors`: `ColorScheme` holds the board colours as ABGR integers and the widget style colours.
  - `theme_set_style(name)` applies the `"dark"` theme, or the light theme for any other name.
  - `byte4swap(x)` reverses the byte order of a 32-bit value.
- `boardview.colorconfig`: `read_colors_from_config(scheme, values)` and `write_colors_to_config(scheme, values)` move colours between a scheme and a mapping. The mapping holds RGBA hex values.
- `boardview.keys`: key handling.
  - `Key` is the enumeration of keys; each value is the key's display name.
  - `is_modifier(key)` tells whether a key is a modifier; `pressed_modifiers(down)` lists the held modifiers.
  - `KeyBinding.is_pressed(down, pressed)` takes the sets of keys held down and keys just pressed.
  - `KeyBinding.to_string()` gives a binding as text such as `"ModCtrl+Q"`.
- `boardview.keybindings`: `KeyBindings` holds the default shortcut for each named action.
  - Bindings are read from and written to a mapping under `KeyBinding<Action>` keys, in the form `Mod~Key|Key`.
  - `get_key_names(action)` gives an action's bindings as text such as `"<ModCtrl+F> </>"`.
  - `key_from_name(name)` looks up a key by its display name.
- `boardview.fonts`: helpers for choosing a font.
  - `font_candidates(custom_font)` lists the font names to try.
  - `choose_font(custom_font, locate)` picks the first font whose located file is a `.ttf`.
  - `scaled_font_size` and `large_font_scale_factor` compute the font sizes.
- `boardview.renderers`: choosing a renderer.
  - `Renderer` is the enumeration of renderers; `next_renderer` steps through them in order.
  - `renderer_from_int(n)` maps a number to a renderer.
  - `init_best_renderer(preferred, factory)` tries the preferred renderer and then the others in turn. It returns the first instance whose `init()` succeeds.
- `boardview.image` and `boardview.background`: background pictures for the board.
  - `Image` places a picture with an offset, scaling, mirroring and transparency.
  - `Image.transform_relative_coordinates(rotation)` gives the texture corners for a rotation, and `Image.bounds()` gives the picture's extent.
  - `BackgroundImage` keeps a top and a bottom picture and shows the one for the current `Side`.
  - It reads and writes their settings in a mapping, with file paths relative to a directory.
  - Pictures are loaded through a caller-supplied loader that returns `(texture, width, height)`. A failing loader raises `ImageLoadError`.
- `boardview.pdffile`: `PDFFile` is the path of the PDF that belongs to a board.
  - It is stored under `PDFFilePath` relative to the board's directory.
  - By default it is the board path with a `.pdf` extension.
  - `PDFBridge` is the base link to a PDF viewer. It only remembers the open document and the last search.
- `boardview.abc`-free helpers in `boardview.about`: `remove_single_line_feed(text)` turns lone line feeds into spaces and keeps paragraph breaks.
- `boardview.sumatra`: builds and parses the command strings used with the SumatraPDF viewer.
  - `build_open_command` and `build_search_command` build commands sent to the viewer.
  - `build_reverse_search_command` and `parse_search_command` build and parse the search command the viewer sends back.
  - `launch_arguments` builds the viewer's command line.

## Example

```python
from boardview.searcher import Searcher, SearchMode
from boardview.spelling import SpellCorrector

searcher = Searcher()
searcher.set_parts(parts)          # objects with a .name attribute
searcher.set_mode(SearchMode.PREFIX)
matches = searcher.parts("U1", -1)

corrector = SpellCorrector()
corrector.set_dictionary([p.name for p in parts])
print(corrector.suggest("U1O0"))
```

Settings are plain dictionaries that map keys to strings:

```python
from boardview.config import Config

config = Config()
values = {"dpi": "150", "showFPS": "1"}
config.read_from_config(values)
config.write_to_config(values)
```

## What it does not do

The package provides no command to run. It also provides none of the following:

- a window or any drawing
- reading of boardview files
- reading or writing of configuration files
- loading of picture files into textures
- any connection to a PDF viewer

`PDFBridge` never talks to a real viewer. `boardview.sumatra` only builds and parses
strings; it neither starts the viewer nor sends it anything.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```