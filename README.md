# retos

Solutions to fourteen small programming-contest exercises. Each exercise has
its own module. The module offers plain functions you can call from Python.
It also offers a command that reads the exercise's input from standard input
and writes the answers to standard output.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command is a filter: give it the input on standard input. The answers
use the exercises' own wording (`SI`, `NO`, `YO`, `VECINO`, `EMPATE`,
`IMPOSIBLE`).

| Command | Input | Output per case |
|---|---|---|
| `retos-years` | a count, then that many years | the year on a calendar with a year 0 (positive years move back one) |
| `retos-kilometre` | runs: a hectometre count `n` and `n` times in seconds; ends at `0` | `start-end m:ss` of the fastest 1000 m (later stretch wins ties) |
| `retos-christmas` | a count, then `day month` pairs | `SI` for 25 December, otherwise `NO` |
| `retos-pingpong` | games: a count `n` and `n` sounds; ends at `0` | `left right` points |
| `retos-table` | a count, then `area guests` pairs | `SI` if the area suits that many guests, otherwise `NO` |
| `retos-photos` | queues: a count `n` and `n` names; ends at `0` | `photos left-without-photo` |
| `retos-lifespans` | a count, then `birthA deathA birthB deathB` | years both lives share |
| `retos-trains` | trains, one word each, until the end of input | matching wagon pairs |
| `retos-decoding` | cases: a count `n`, `n` digit symbols, a digit message; ends at `0` | ways to read the message, modulo 1000000007 |
| `retos-cassette` | cases: a song count `n`, a side capacity, `n` `duration score` pairs; ends at `0` | best total score over both sides |
| `retos-circular` | cycles: a length `n` and `n` values; ends at `0` | best gain over the cycle |
| `retos-pool` | races of six numbers `water tray loss water tray loss`; ends at six zeros | `YO n`, `VECINO n` or `EMPATE n` |
| `retos-traffic-lights` | avenues: `lights max_speed`, then `distance red green` per light; ends at `0 0` | shortest time in whole seconds, or `IMPOSIBLE` |
| `retos-restaurants` | streets: `length count`, then `position radius` pairs; until the end of input | restaurants that can close, or `-1` if the street cannot be covered |

Example:

```
$ printf '3\n25 12\n1 1\n24 12\n' | retos-christmas
SI
NO
NO
```

`retos-years --interactive` asks for one year instead. It asks again until it
gets a number between -3000 and 3000 other than 0, then prints the year
shifted.

When the input ends early or is malformed, a command prints a message and
exits with status 1. `retos-years` prints that message to standard output.
The other commands print it to standard error.

## Library use

Each module has a `solve(text)` function. It takes the whole input as a
string and returns the whole output. Each module also has functions for the
exercise itself:

```python
from retos.christmas import is_christmas
from retos.lifespans import overlap_years
from retos.trains import count_pairs
from retos.decoding import count_decodings

is_christmas(25, 12)                    # True
overlap_years(1900, 1950, 1940, 2000)   # 11
count_pairs("HMhm")                     # 2
count_decodings(["1", "12"], "112")     # 1
```

Other functions and classes:

- `retos.years`: `shift_year(year)`, and `checked_year(year)`, which raises
  `ValueError` outside -3000..3000 or for 0.
- `retos.kilometre`: `best_kilometre(times)`, which returns
  `(start, seconds)`, and `format_result(start, seconds)`.
- `retos.pingpong`: `score(sounds)`, which returns `(left, right)`.
- `retos.table`: `fits_estimate(area, guests)`.
- `retos.photos`: `take_photos(names)`, which returns
  `(photos, left_without_photo)`.
- `retos.decoding`: `SymbolTrie(symbols)`, with `insert(symbol)` and
  `matches(message, start)`.
- `retos.cassette`: `best_score(capacity, songs)`.
- `retos.circular`: `best_circular_gain(values)`.
- `retos.pool`: `trips_needed(water, tray, loss)`, which returns `None` when
  the pool can never be emptied. `race(mine, neighbour)` returns an `Outcome`
  with a `Winner` and a trip count.
- `retos.traffic_lights`: the `Light(distance, red, green)` class and
  `travel_time(max_speed, lights)`, which returns `None` when no speed works.
- `retos.restaurants`: `closable_restaurants(street_length, restaurants)`,
  which returns `None` when the street cannot be covered.