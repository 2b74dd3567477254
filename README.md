# patternpad

A collection of small, self-contained examples of classic object-oriented
design patterns. Each pattern lives in its own module and prints what it is
doing as it runs, so you can watch the objects work together. Most methods
also return what they printed, or keep simple state you can inspect.

| Pattern         | Module                   | What it models                                   |
|-----------------|--------------------------|--------------------------------------------------|
| Strategy        | `patternpad.strategy`    | Ducks with swappable fly and quack behaviours    |
| Observer        | `patternpad.observer`    | A weather station notifying several displays     |
| Decorator       | `patternpad.decorator`   | Coffee drinks wrapped in priced condiments       |
| Factory         | `patternpad.factory`     | Pizza stores using regional ingredient factories |
| Singleton       | `patternpad.singleton`   | A single shared chocolate boiler                 |
| Command         | `patternpad.commands`    | A remote control with undo and macro commands    |
| (receivers)     | `patternpad.receivers`   | The household devices the commands drive         |
| Template method | `patternpad.template`    | Brewing tea and coffee with a shared recipe      |
| Iterator        | `patternpad.iterator`    | A waitress walking through different menus       |
| Composite       | `patternpad.composite`   | Folders and files in a tree                      |
| State           | `patternpad.state`       | An MP3 player that changes behaviour by state    |

## Installation

```
pip install .
```

The package has no dependencies beyond the Python standard library
(Python 3.10 or later).

## Running the whole tour

```
patternpad
```

This runs every example in `patternpad.demo` in turn. The template-method
example asks whether you would like lemon in your tea and milk and sugar in
your coffee; an answer starting with `y` means yes, anything else (or end of
input) means no.

## Using the examples from code

Decorator: condiments wrap a beverage and add to its cost and description.

```python
from patternpad.decorator import HouseBlend, SteamedMilk, Mocha, Size

drink = HouseBlend()
drink.size = Size.VENTI
drink = Mocha(SteamedMilk(drink))
print(drink.description(), drink.cost())
```

State: the player's buttons behave differently when stopped, playing or paused.

```python
from patternpad.state import Mp3Player

player = Mp3Player(["Thriller", "Billie Jean", "Beat it"])
player.play()
player.forward()
print(player)
```

A few behaviours worth knowing:

- `ChocolateBoiler` is obtained with `ChocolateBoiler.instance()`; calling the
  class directly raises `TypeError`.
- `RemoteControl` has seven slots; `set_command`, `press_on` and `press_off`
  raise `IndexError` for a slot outside that range. Empty slots hold a
  `NullCommand`.
- `FileSystemEntity` refuses every operation a subclass does not provide by
  raising `UnsupportedOperation`; `File.read_content()` always returns an
  empty string.
- `Mp3Player` needs at least one song and raises `ValueError` otherwise.
- `Tea` and `Coffee` take an `ask` callable (default `input`) so their
  question can be answered from code.

Each example can also be run on its own through the functions in
`patternpad.demo`, such as `strategy_example()`, `command_example()` or
`state_example()`; each returns the main objects it built.

## Running the tests

```
pip install .[test]
pytest
```