# makSehat

makSehat is a small terminal application for mental-health self-assessment.
It asks ten questions on a 1–5 Likert scale, scores the answers, and files the
result under a generated assessment ID with a category such as *Stabil*,
*Cukup Stabil*, *Tidak Stabil*, *Depresi Ringan* or *Depresi Berat*.

The interface text is in Indonesian.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the interactive menu:

```
maksehat cli
```

Choose menu item `1` to take an assessment. You are asked if you are a new
user (`y`/`n`) and for your full name (letters and single spaces only). A new
user gets a fresh random user ID. A returning user is found by name among the
assessments saved in this session, and you get three tries before you go back
to the menu. You then answer ten questions, picked in random order from the
question bank, with:

| Value | Meaning        |
|-------|----------------|
| 1     | Tidak Pernah   |
| 2     | Jarang         |
| 3     | Kadang-kadang  |
| 4     | Sering         |
| 5     | Selalu         |

Each answer scores `(6 - answer) * 2`, so the total runs from 20 to 100:

| Score  | Category        |
|--------|-----------------|
| 85+    | Stabil          |
| 70–84  | Cukup Stabil    |
| 55–69  | Tidak Stabil    |
| 40–54  | Depresi Ringan  |
| < 40   | Depresi Berat   |

The assessment ID has the form `A<yy><mm><band><nnnn>`, where the band is 1–5
following the categories above and `nnnn` counts up within the month. The
assessment date is set to a random day in the current year, at the current
time. Saved assessments are listed above the menu each time it is shown.
Menu item `8` quits.

```
maksehat gui
```

The graphical mode only prints `In Progress!`.

Running `maksehat` with no argument prints a usage line; an unknown mode
prints an error message.

## Library use

The scoring helpers can also be used directly:

```python
from maksehat.models import Answer
from maksehat.util import score_calculation, categorization

answers = [Answer("Q01", 1), Answer("Q02", 2)]
score = score_calculation(answers)
print(score, categorization(score))
```

`maksehat.service.add_assessment(store, name, user_id, answers, rng=None)`
scores a completed questionnaire, saves it in a
`maksehat.datastore.DataStore` and returns the new `Assessment`.
`maksehat.util` also holds the input validators (`validate_string_input`,
`validate_int_input`, which raise `ValidationError`) and `get_user_id`
(raising `UserNotFoundError`).

`maksehat.cli.Cli` takes an optional store, random generator, input and
output streams and a screen-clearing function, so a session can be driven
from code.

## What it does not do

- Menu items 2–7 (update, delete, show, search, sort and summary report)
  are listed but do nothing when chosen.
- Assessments are kept in memory only and are lost when the program exits.
- There is no graphical interface.