# micaview

The non-drawing core of an image viewer, as a plain Python library with no
third-party dependencies.

## What is inside

- `micaview.zoom`: `ZoomState` keeps the zoom factor for an image of a given
  size. It covers:
  - step zoom with `zoom_in` and `zoom_out`;
  - a 1:1 `reset`;
  - `fit` to an area;
  - `wheel_zoom`;
  - centring offsets from `image_offset`;
  - the initial window size from `initial_size`;
  - the mapping from a screen position to an image pixel, with `pixel_at`.

  Zoom stays between 5% and 1600%.
- `micaview.viewer`: `ImageViewer` holds the state of one viewer window.
  - `has_gif_extension` decides whether a file is a GIF.
  - `window_title` builds a unique `filename.ext##id` title.
  - `wheel` and `drag` update the scroll position, which never goes below zero.
  - `info_text` gives the toolbar text.
  - `request_new_image` calls an optional "new image" callback.
- `micaview.theme`: the dark Mica theme.
  - `ThemeConfig` and `Color` hold its values.
  - `default_theme`, `load_theme` and `save_theme` create it and read and write it as JSON.
  - `apply_mica_theme` writes it onto a `Style` whose colour slots are `StyleColor` members.
- `micaview.clock`: `OnlineClock.synchronize` learns the offset of the system
  clock from an NTP server. It raises `ClockSyncError` if resolving the name,
  sending or receiving fails.
  - `now` returns the corrected UTC time.
  - `formatted_now` gives local time as `DD/MM/YYYY | HH:MM:SS`. The separators become spaces on odd seconds.
  - `build_ntp_request` and `parse_ntp_response` can also be used on their own.
- `micaview.cmdline`: `split_command_line` splits a command line using the
  quoting rules of the Windows C runtime. `CommandLineArgs` supports:
  - `get`;
  - `has_flag`;
  - `value`;
  - `len()`;
  - iteration.
- `micaview.result` and `micaview.reporting`:
  - `Result`, `ErrorType` and `SourceLocation` carry the outcome of an operation.
  - `capture_location` records where the call was made.
  - `Reporter` prints each message to the console, with ANSI colours, or passes it to a dialog function.
    - The `*_end` methods raise `ReportExit` (exit status 1) after reporting.
    - The default dialog function writes to standard error.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
```

## Examples

```python
from micaview.zoom import ZoomState

zoom = ZoomState(800, 600)
zoom.fit(400, 300)        # zoom becomes 0.5
zoom.zoom_in()            # one step up
print(zoom.scaled_size())
```

```python
from micaview.cmdline import CommandLineArgs

args = CommandLineArgs('--noviewports --file "my picture.gif"')
args.has_flag("--noviewports")   # True
args.value("--file")             # 'my picture.gif'
```

```python
from micaview.theme import default_theme, save_theme, load_theme

save_theme(default_theme(), "theme.json")
theme = load_theme("theme.json")   # falls back to the defaults if the file is unreadable
```

```python
from micaview.clock import ClockSyncError, OnlineClock

clock = OnlineClock()
try:
    clock.synchronize()
except ClockSyncError:
    pass                           # the offset stays zero: plain system time
print(clock.formatted_now())
```

## What it does not do

This package holds the state and arithmetic of a viewer. It does not:

- open a window;
- draw anything;
- decode image or GIF files;
- play animations;
- show a file dialog.

You give `ImageViewer` the pixel size of the image. Any rendering is up to
the caller. The package installs no command.