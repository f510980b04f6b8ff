# searchlab

A small collection of classic search and optimisation algorithms. Each is a
plain library function, and most also come with a command-line demo.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                   | Algorithm                                                        |
|--------------------------|------------------------------------------------------------------|
| `searchlab.hillclimbing` | Hill climbing that maximises the sum of a vector of integers     |
| `searchlab.annealing`    | Simulated annealing on the same problem                          |
| `searchlab.change`       | Coin change: greedy versus exact dynamic programming             |
| `searchlab.maze`         | Weighted A* through a character maze, with several heuristics    |
| `searchlab.astar`        | A* on a rectangular grid of obstacles                            |
| `searchlab.consensus`    | Consensus DNA sequence by column majority and by hill climbing   |

## Library use

```python
import random

from searchlab.annealing import simulated_annealing
from searchlab.change import greedy_change, optimal_change
from searchlab.hillclimbing import hill_climb, random_solution
from searchlab.maze import default_maze, manhattan

greedy_change([4, 3, 1], 6)    # 3 (4 + 1 + 1)
optimal_change([4, 3, 1], 6)   # 2 (3 + 3)
greedy_change([5], 3)          # None: no exact change

rng = random.Random(42)
start = random_solution(100, rng)
solution, value = hill_climb(start, rng)
solution, energy = simulated_annealing(start, rng)

result = default_maze().search(manhattan, 1.0)
print(result.found, result.explored)
print(result.render())
```

### Hill climbing and annealing

`evaluate` scores a vector by its sum, `random_solution(size, rng)` draws
values from 0 to 99, and `neighbor` changes one random position to a new
random value. `hill_climb` stops at the first neighbor that does not improve
the score and returns `(solution, value)`. `simulated_annealing` takes the
initial temperature (1000.0), minimum temperature (0.01) and cooling rate
(0.95) as optional arguments and returns `(solution, energy)`.

### Coin change

`greedy_change(coins, amount)` and `optimal_change(coins, amount)` return a
number of coins, or `None` when the amount cannot be made exactly. Coin values
must be positive and the amount must not be negative, otherwise `ValueError`
is raised. `compare(coins, amount)` returns a short text report of both.

### Maze

`Maze(rows)` takes equal-length strings with `S` for the start, `G` for the
goal and `#` for walls; `default_maze()` returns the built-in 10×10 maze.
`Maze.search(heuristic, weight)` returns a `SearchResult` with `path` (a tuple
of `(row, column)` cells, or `None`), `explored` and `found`. Its `render()`
marks open cells with `O`, closed cells with `X` and the path with `*`. The
heuristics are `manhattan`, `euclidean` and `custom_heuristic`; a weight above
1.0 gives weighted A*.

### Grid A*

`searchlab.astar.a_star(start, goal, obstacles)` searches a grid given as rows
of booleans (`obstacles[y][x]` is true where blocked), with `(x, y)` points,
and returns the path as a list of points or `None`. `format_path` renders a
path from the goal back to the start, or a failure message for `None`.

### Consensus

`hamming`, `score`, `majority_consensus` (ties go to the earlier of `ACGT`),
`neighbor` and `hill_climb_consensus(sequences, rng, iterations)` work on
sequences of equal length over `A`, `C`, `G`, `T`.

## Commands

```
searchlab-hillclimb [--seed N] [--size N]
searchlab-anneal [--seed N] [--size N]
searchlab-change [AMOUNT COIN ...]
searchlab-maze
searchlab-consensus [SEQUENCE ...] [--seed N] [--iterations N]
```

Without a seed the random demos differ from run to run. `searchlab-change`
with no arguments compares the coin systems 100/50/25/10/5 for 370 and 4/3/1
for 6. `searchlab-consensus` with no sequences uses three built-in ones.

## Limits

The grid A* in `searchlab.astar` is a library function only; it has no
command of its own.