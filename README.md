# unitconv

unitconv is a small interactive unit converter that runs in a terminal. It converts three kinds of unit:

- **Temperature**: Celsius, Fahrenheit and Kelvin
- **Distance**: centimeters, miles and inches
- **Weight**: grams, kilograms, ounces and pounds

## Running

```
unitconv
```

### Main menu

The main menu asks you to choose a unit type:

- 1 for temperature
- 2 for distance
- 3 for weight
- 4 to exit

Any other choice prints an error and shows the menu again. The screen is cleared after each choice. On Windows this uses `cls` and elsewhere it uses `clear`. Pressing Ctrl-D or Ctrl-C also ends the program.

### Submenus

Each submenu lists the conversions it offers, followed by an exit option. The exit option returns you to the main menu.

When you choose a conversion, you are asked for a value and the result is printed. Numbers are shown in the same short general format, for example:

```
100 °C = 212 °F
```

If the option number is not one of the listed conversions, you are still asked for a value, and then `Invalid option!` is printed.

A value that is not a number ends the submenu with `ERROR: Invalid value` and returns you to the main menu. The distance and weight menus do the same for a value of zero or below. The temperature menu accepts any number, including negative ones.

## Using the conversions in code

Every conversion is a plain function that takes a number and returns a number.

```python
from unitconv.temperature import celsius_to_fahrenheit, kelvin_to_celsius
from unitconv.distance import mile_to_inch, centimeter_to_inch
from unitconv.weight import pound_to_gram, gram_to_kilogram

celsius_to_fahrenheit(100)   # 212.0
kelvin_to_celsius(273.15)    # 0.0
mile_to_inch(1)              # 63360
centimeter_to_inch(2.54)     # 1.0
pound_to_gram(1)             # 453.59237
gram_to_kilogram(1500)       # 1.5
```

The available conversions, by module, are:

- `unitconv.temperature`:
  - `celsius_to_fahrenheit`
  - `celsius_to_kelvin`
  - `fahrenheit_to_celsius`
  - `fahrenheit_to_kelvin`
  - `kelvin_to_celsius`
  - `kelvin_to_fahrenheit`
- `unitconv.distance`:
  - `centimeter_to_mile`
  - `centimeter_to_inch`
  - `mile_to_centimeter`
  - `mile_to_inch`
  - `inch_to_centimeter`
  - `inch_to_mile`
- `unitconv.weight`:
  - `gram_to_kilogram`, `gram_to_pound`, `gram_to_ounce`
  - `kilogram_to_gram`, `kilogram_to_pound`, `kilogram_to_ounce`
  - `ounce_to_gram`, `ounce_to_pound`, `ounce_to_kilogram`
  - `pound_to_gram`, `pound_to_ounce`, `pound_to_kilogram`

## Driving the menus from code

The menus can also be run from code:

- `unitconv.temperature.temperature_menu`
- `unitconv.distance.distance_menu`
- `unitconv.weight.weight_menu`
- `unitconv.cli.main_menu`

Each one takes two optional arguments:

- `read` is a callable that is given a prompt and returns a line of input. It defaults to `input`.
- `write` is a callable that is given text to show. It defaults to `print`.

`unitconv.screen.clear_screen` clears the terminal.

## Tests

```
pip install -e ".[test]"
pytest
```