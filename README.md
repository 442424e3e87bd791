# trashsim

A small console simulation of the contest between garbage producers and garbage collectors.

A district holds a number of smart trash cans. Each can has a load sensor. The following parts each run on their own thread:

- A **loader** runs every second. It makes a random piece of garbage and throws it into a random can. The kind is one of domestic waste, medical waste, rotten fruit, rotten vegetable, plastic waste, paper waste, chemical waste or other waste. The weight is random, from 0.01 to 10.0. The loader prints a line for each piece it throws.
- Each can has a **load controller** that runs every five seconds. It measures the can's total weight as a fraction of its capacity and sorts that fraction into a load class: Empty, Below Normal, Normal, Above Normal, Full or Overload. The load class sets the can's status to Empty, Normal or Full. When a can becomes Full, it rings the terminal bell every half second until its status changes.
- A **collector** runs every five seconds. It empties every can whose status is Full and prints a line for each one.
- A **reporter** runs every ten seconds. It clears the screen and prints each can's identifier, item count and status.

Trash cans are numbered as they are created: `TrashCan(001)`, `TrashCan(002)`, and so on.

## Installation

```
pip install .
```

## Running

```
trashsim
```

The options are:

- `--count N` sets the number of trash cans. The default is 20.
- `--capacity C` sets the capacity of each can. The default is 200.0.

Press Enter, or send end-of-file or an interrupt, to stop the simulation. You can also start it with `python -m trashsim.simulator`.

## Using the library

```python
import io
import random
from trashsim.simulator import Simulator, TrashcanLoadStatus

out = io.StringIO()
with Simulator(trashcan_count=3, trashcan_capacity=50.0,
               stream=out, rng=random.Random(1), start=False) as sim:
    garbage, can = sim.load_garbage()   # one random piece into a random can
    for can in sim.trashcans:
        can.check()                     # measure now, returns the new status
    collected = sim.collect_garbage()   # identifiers of the cans emptied
    print(sim.report())                 # the status table, as a string
```

With `start=False`, the loader, collector and reporter do not run. Each can's load controller still runs in the background. Leaving the `with` block, or calling `Simulator.shutdown()`, stops every thread.

These are the building blocks:

- `trashsim.garbage` defines `Garbage` and its kinds (`DomesticWaste`, `MedicalWaste`, `RottenFruit`, `RottenVegetable`, `PlasticWaste`, `PaperWaste`, `ChemicalWaste`, `OtherWaste`). Each kind has a `weight` and an `identifier`. It also provides `generate_garbage(minimum_weight=0.01, maximum_weight=5.0, rng=None)`.
- `trashsim.collection` defines `SyncedList`. It is a list that you can add to and empty, guarded by an optional lock. It has `add`, `empty`, `snapshot` and a `locked()` context manager.
- `trashsim.trashcan` defines `Trashcan`, a `SyncedList` of garbage. It has a `capacity`, an `identifier`, `drop()` and `total_weight()`.
- `trashsim.sensor` defines `LoadClass`, `classify_load`, `load_class_to_string` and the abstract classes `Sensor` and `LoadSensor`.
- `trashsim.controller` defines `PeriodicController`. It calls `run()` on a background thread every `interval_ms` milliseconds until `shutdown()` is called. It also works as a context manager.
- `trashsim.alert` defines `Alert`, `ExclamationAlert` and `WarningAlert`. Each one writes a bell character to its stream every 500 ms.
- `trashsim.console` defines `clear_screen` and `goto_xy`. Both work by writing ANSI escape sequences.
- `trashsim.simulator` defines `TrashcanLoadStatus`, `status_for_load`, `TrashcanLoadSensor`, `TrashcanLoadController`, `AlertedTrashcanLoadController`, `SmartTrashcan`, `Simulator` and `main`.

## Limitations

- Alerts are plain terminal bells. The `frequency` and `duration` of an alert are stored, but they do not change the sound.
- Screen clearing and cursor movement need a terminal that understands ANSI escape sequences.
- Nothing is saved between runs. A simulation lives only as long as the process.

## Tests

```
pip install .[test]
pytest
```