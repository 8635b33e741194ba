# wheelcore

This package holds the logic behind a radial item wheel. A wheel is a menu of entries arranged around a circle, and each entry holds items. The package contains the settings, the animation interpolators, the key bindings, input filtering, icon lookup and the save record. It has no dependencies outside the standard library.

## Modules

### `wheelcore.colors`

Colours are packed as 32-bit values, with R in the lowest byte and A in the highest.

- `im_col32(r, g, b, a)` packs four channels into one value. It raises `ValueError` if a channel is outside 0..255.
- `color_components(color)` returns `(r, g, b, a)`.
- `mult_alpha(color, mult)` scales the alpha channel only.
- The module also defines constants such as `C_SKYRIMWHITE` and `C_BLACK`.

### `wheelcore.config`

`Config()` starts with every setting at its built-in default.

- `get(section, key)` returns a setting, for example `get("Styling.Wheel", "InnerCircleRadius")`. It raises `KeyError` for an unknown setting.
- `read_style_config(path)` reads the styling and animation settings from an INI file.
- `read_control_config(path)` reads the key bindings and control settings from an INI file.
- When reading INI files:
  - A missing file changes nothing.
  - Keys that are absent keep their current value.
  - A value that cannot be parsed is logged and skipped.
- `offset_sizing_to_viewport(viewport_height)` multiplies every size-like setting by `viewport_height / 1080`.

### `wheelcore.interpolator`

`TimeFloatInterpolator` moves a float towards a target over a duration.

- `interpolate_to(target, duration)` starts a move and registers the interpolator with its `InterpolatorManager`.
- The manager is `DEFAULT_MANAGER` unless one is passed in.
- `InterpolatorManager.update(dt)` advances every registered interpolator. It removes the ones that have finished and then runs their callbacks.
- Other methods:
  - `push_callback(callback)`
  - `force_finish(want_callback)`
  - `set_value(value)`
  - `force_value(value)`
  - `update(dt)`, which advances a single interpolator directly.
- The manager holds interpolators weakly.

### `wheelcore.bounce`, `wheelcore.color_interpolator`, `wheelcore.trapezoid`

- `TimeBounceInterpolator(original)` moves to a target with `interpolate_to(target, duration)` and then back to `original` over the same duration. `force_finish()` leaves the value at the original.
- `TimeColorInterpolator(initial_color)` moves each RGBA channel separately. Read the result with `red`, `green`, `blue`, `alpha` or `color`.
- `TimeTrapezoidInterpolator(p1, p2, p3, p4)` moves four points together. Read them with `point1`…`point4` or `points`.

### `wheelcore.controls`

`Controls(handlers)` maps key ids to `Action` values. It keeps separate tables for key-down and key-up, and for keyboard/mouse and gamepad.

- `handlers` maps each `Action` to a callable. An action that has no handler is never bound.
- `bind_all_inputs_from_config(config)` rebuilds all tables from a `Config`.
- `is_key_bound(key)` reports whether a key is bound.
- `bound_action(key, is_down, is_gamepad)` returns the action for a key.
- `dispatch(key, is_down, is_gamepad)` runs the bound handler and returns whether one was found.

### `wheelcore.input`

`InputFilter(controls, wheel, user_event_name=None)` takes a list of `MouseMoveEvent`, `ThumbstickEvent` and `ButtonEvent` objects. `process_and_filter(events)` passes them to the wheel and to the controls, and returns the events that should still reach the game.

While the wheel is open, the filter consumes:

- mouse movement,
- right-thumbstick movement,
- bound buttons,
- menu-opening user events, if a `user_event_name` lookup is given.

Key ids are built as follows:

| Device | Key id |
| --- | --- |
| Keyboard | the raw code |
| Mouse | the code plus 256 |
| Gamepad | `gamepad_index(key)`, which is 266 plus the button's position |

### `wheelcore.texts`

`Texts()` holds one string per `TextType`. Each string starts out as its own identifier.

`load_translations(path)` replaces strings from the `[Texts]` section of an INI file. Each string is looked up under a key equal to its current text. `get_text(text_type)` returns the string.

### `wheelcore.mod_events`

`ModCallbackEventHandler(config, controls, viewport_height, on_reset_wheels=None, ...)` handles two settings-menu events through `process_event(event_name, str_arg)`:

- `"dmenu_updateSettings"` for `"Wheeler Styles"` or `"Wheeler Controls"`: re-reads both INI files, rescales the settings to the viewport and rebinds the controls.
- `"dmenu_buttonCallback"` with `"wheeler_reset_all_wheels"`: calls `on_reset_wheels`.

It always returns `EventResult.CONTINUE`.

### `wheelcore.text_layout`

`split_text_lines(text, max_width, font_size, measure)` splits a text into about `ceil(width / max_width)` lines of roughly equal length, breaking at spaces.

`split_text_lines_utf8` does the same but counts UTF-8 bytes and never splits a character.

`measure(text, font_size)` must return the rendered width.

### `wheelcore.utils`

- `strip_format_codes(text)` removes `<...>` markup.
- `matrix_from_axis_angle(theta, axis)` returns a 3×3 rotation matrix as rows.
- `Hand.from_equipped(...)` decides which hand holds an item from per-hand match flags.

### `wheelcore.icons`

`IconRegistry` stores icon `Image`s by `IconImageType`, by form id and by keyword.

- `load_images(directory, loader)` reads the built-in `<type>.svg` files.
- `load_custom_icon_images(directory, loader, lookup_form)` reads custom files named `FID_<plugin>_0x<id>.svg` or `KWD_<keyword>.svg`.
- `get_icon_image(image_type, form_id, keywords)` looks for a form id match first, then a keyword match, then the type.
- `parse_custom_icon_name` and `hex_string_to_int` are the name parsers that the registry uses.

### `wheelcore.serialization`

`SerializationEntry(wheel)` writes the wheel state as compact JSON.

- `save(stream)` writes the JSON with a 64-bit little-endian length prefix.
- `load(record_type, version, stream)` reads it back. It accepts only type `four_cc("WJSN")` and version 2. It clears the state only after the JSON has parsed.
- `revert()` clears the state.
- `write_string` and `read_string` are the record helpers.

## Example

```python
from wheelcore.config import Config
from wheelcore.interpolator import InterpolatorManager, TimeFloatInterpolator

config = Config()
config.read_style_config("Styles.ini")   # a missing file leaves the defaults
config.offset_sizing_to_viewport(2160)
print(config.get("Styling.Wheel", "InnerCircleRadius"))  # 440.0 with the defaults

manager = InterpolatorManager()
fade = TimeFloatInterpolator(0.0, manager=manager)
fade.interpolate_to(1.0, 0.08)
manager.update(0.08)
print(fade.value)  # 1.0
```

## What it does not do

The package does not draw anything, and it holds no wheels, entries or items. The caller supplies everything that touches a screen or a game:

- the action handlers given to `Controls`;
- the `WheelView` given to `InputFilter`;
- the texture `loader` and `lookup_form` given to `IconRegistry`;
- the `measure` function used by `text_layout`;
- the `WheelState` object, which produces and consumes the JSON that `SerializationEntry` stores.

There is no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```